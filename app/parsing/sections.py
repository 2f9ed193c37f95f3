"""Single-pass section router.

The router folds over the pasted lines, threading a frozen ``ParseState``
through ``SectionRouter.step``. Each line first goes through the per-line
metadata handlers, then through the transition table. Both are ordered lists
and the first handler that returns a state wins.
"""

from dataclasses import dataclass, replace
from enum import Enum
from functools import reduce
from typing import Callable, Iterable, Optional, Tuple

from .ingredient_parser import parse_ingredient_line
from .line_classifier import ClassifiedLine, LineKind, classify_line, is_section_label
from .metadata import extract_cooking_time, extract_servings, is_tag_line, strip_hashtags
from .parser import ParsedIngredient, ParsedStep
from .steps import parse_step_line

MAX_SUBHEADING_LEVEL = 3


class Section(str, Enum):
    DESCRIPTION = "description"
    INGREDIENTS = "ingredients"
    STEPS = "steps"


SECTION_KEYWORDS = [
    (Section.INGREDIENTS, ("ingredient",)),
    (Section.STEPS, ("instruction", "step", "method", "direction")),
]


def section_for_heading(text: str) -> Optional[Section]:
    lower = text.lower()
    for section, keywords in SECTION_KEYWORDS:
        if any(k in lower for k in keywords):
            return section
    return None


@dataclass(frozen=True)
class ParseState:
    section: Section = Section.DESCRIPTION
    buffer: Tuple[str, ...] = ()
    description_parts: Tuple[str, ...] = ()
    ingredients: Tuple[ParsedIngredient, ...] = ()
    steps: Tuple[ParsedStep, ...] = ()
    cooking_time_minutes: Optional[int] = None
    servings: Optional[int] = None

    def flush(self) -> "ParseState":
        if not self.buffer:
            return self
        return replace(
            self,
            buffer=(),
            description_parts=self.description_parts + ("\n".join(self.buffer),),
        )


@dataclass(frozen=True)
class Line:
    index: int
    raw: str
    classified: ClassifiedLine


Handler = Callable[[ParseState, Line], Optional[ParseState]]


class SectionRouter:
    def __init__(self, new_id: Callable[[], str], title_index: Optional[int] = None):
        self.new_id = new_id
        self.title_index = title_index

        self.metadata_handlers: list[Handler] = [
            self._consume_title,
            self._consume_servings,
            self._consume_cooking_time,
            self._consume_tag_line,
        ]
        self.transitions: list[Handler] = [
            self._enter_section,
            self._subheading,
            self._deep_heading,
            self._blank,
            self._body,
        ]
        self.body_handlers = {
            Section.DESCRIPTION: self._append_description,
            Section.INGREDIENTS: self._append_ingredient,
            Section.STEPS: self._append_step,
        }

    def run(self, lines: Iterable[str]) -> ParseState:
        state = reduce(self.step, enumerate(lines), ParseState())
        return state.flush()

    def step(self, state: ParseState, indexed: Tuple[int, str]) -> ParseState:
        index, raw = indexed
        raw = raw.strip()
        line = Line(index, raw, classify_line(raw))

        if line.classified.kind != LineKind.BLANK:
            for handler in self.metadata_handlers:
                new_state = handler(state, line)
                if new_state is not None:
                    return new_state

        for handler in self.transitions:
            new_state = handler(state, line)
            if new_state is not None:
                return new_state
        return state

    # --- Metadata ---

    def _consume_title(self, state, line):
        if line.index == self.title_index:
            return state
        return None

    def _consume_servings(self, state, line):
        if state.servings is not None:
            return None
        servings = extract_servings(line.raw)
        if servings is None:
            return None
        return replace(state, servings=servings)

    def _consume_cooking_time(self, state, line):
        if state.cooking_time_minutes is not None:
            return None
        minutes = extract_cooking_time(line.raw)
        if minutes is None:
            return None
        return replace(state, cooking_time_minutes=minutes)

    def _consume_tag_line(self, state, line):
        # List items inside a section stay in their list, hashtags and all
        if line.classified.kind == LineKind.ITEM and state.section != Section.DESCRIPTION:
            return None
        if not is_tag_line(line.raw):
            return None
        remainder = strip_hashtags(line.raw)
        if not remainder:
            return state
        state = state.flush()
        return replace(state, description_parts=state.description_parts + (remainder,))

    # --- Transitions ---

    @staticmethod
    def _heading(line: Line) -> Optional[Tuple[int, str]]:
        """(level, text) for markdown headings and "Ingredients:" style labels."""
        c = line.classified
        if c.kind == LineKind.HEADING:
            return c.level, c.text
        if c.kind == LineKind.PLAIN and is_section_label(c.text) \
                and section_for_heading(c.text) is not None:
            return 0, c.text
        return None

    def _enter_section(self, state, line):
        heading = self._heading(line)
        if heading is None:
            return None
        section = section_for_heading(heading[1])
        if section is None:
            return None
        return replace(state.flush(), section=section)

    def _subheading(self, state, line):
        heading = self._heading(line)
        if heading is None or heading[0] > MAX_SUBHEADING_LEVEL:
            return None
        text = heading[1].replace("*", "").strip()
        if not text:
            return state
        return replace(state.flush(), buffer=(f"**{text}**",))

    def _deep_heading(self, state, line):
        heading = self._heading(line)
        if heading is None:
            return None
        text = heading[1].strip()
        if not text:
            return state
        return self.body_handlers[state.section](state, text)

    def _blank(self, state, line):
        if line.classified.kind != LineKind.BLANK:
            return None
        if state.section == Section.DESCRIPTION:
            return state.flush()
        return state

    def _body(self, state, line):
        # Description keeps the line as written, list handlers get the item text
        c = line.classified
        text = c.text if c.kind == LineKind.ITEM and state.section != Section.DESCRIPTION else line.raw
        return self.body_handlers[state.section](state, text)

    # --- Body handlers ---

    def _append_description(self, state, text):
        return replace(state, buffer=state.buffer + (text,))

    def _append_ingredient(self, state, text):
        ingredient = parse_ingredient_line(text, self.new_id)
        if ingredient is None:
            return state
        return replace(state, ingredients=state.ingredients + (ingredient,))

    def _append_step(self, state, text):
        step = parse_step_line(text, self.new_id)
        if step is None:
            return state
        return replace(state, steps=state.steps + (step,))
