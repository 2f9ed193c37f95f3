from typing import Callable, Optional

from .ingredient_parser import capitalize_first
from .parser import ParsedStep


def parse_step_line(line: str, new_id: Callable[[], str]) -> Optional[ParsedStep]:
    """Strip markdown emphasis from a step line. None if nothing is left."""
    instruction = (line or "").replace("*", "").strip()
    if not instruction:
        return None
    return ParsedStep(instruction=capitalize_first(instruction), id=new_id())
