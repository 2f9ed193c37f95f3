import secrets
import time


class IdFactory:
    """Hands out opaque ids for parsed ingredients and steps.

    Ids are ``{timestamp_ns}-{random hex}``. The timestamp part is forced to
    increase strictly within one factory, so two ids from the same conversion
    never collide even when the clock does not move between calls.
    """

    def __init__(self):
        self._last_ts = 0

    def __call__(self) -> str:
        ts = max(time.time_ns(), self._last_ts + 1)
        self._last_ts = ts
        return f"{ts}-{secrets.token_hex(4)}"
