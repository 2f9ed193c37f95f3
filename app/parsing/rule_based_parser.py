import re
from typing import Optional

from .ids import IdFactory
from .metadata import extract_difficulty, extract_tags, extract_title
from .parser import ConversionResult, FormSnapshot, RecipeParser
from .sections import SectionRouter

# 1️⃣ .. 9️⃣ keycaps as pasted from social media captions
KEYCAP_RE = re.compile(r'([0-9])\ufe0f?\u20e3')


class RuleBasedParser(RecipeParser):
    """Heuristic converter from pasted recipe text to structured form fields.

    Pure: the same text and snapshot always give the same fields (ids aside),
    and nothing here raises on odd input.
    """

    def parse(self, text: str, snapshot: Optional[FormSnapshot] = None) -> ConversionResult:
        snapshot = snapshot or FormSnapshot()
        text = self._normalize_emojis(text or "")
        lines = text.splitlines()

        title = extract_title(lines)
        title_index = None
        if title and self._is_title_line(lines[title[1]], title[0]):
            title_index = title[1]

        router = SectionRouter(new_id=IdFactory(), title_index=title_index)
        state = router.run(lines)

        description = "\n\n".join(state.description_parts)

        return ConversionResult(
            title=title[0] if title and not snapshot.title.strip() else None,
            description=description or None,
            ingredients=list(state.ingredients),
            steps=list(state.steps),
            tags=extract_tags(text),
            difficulty=extract_difficulty(state.description_parts),
            cooking_time_minutes=(
                state.cooking_time_minutes if snapshot.cooking_time is None else None
            ),
            servings=state.servings,
        )

    def _normalize_emojis(self, text: str) -> str:
        text = KEYCAP_RE.sub(r'\1.', text)
        return text.replace('\U0001F51F', '10.')

    @staticmethod
    def _is_title_line(line: str, title: str) -> bool:
        return line.replace("*", "").lstrip("#").strip() == title


def convert_text(text: str, snapshot: Optional[FormSnapshot] = None) -> ConversionResult:
    return RuleBasedParser().parse(text, snapshot)
