import re
from enum import Enum
from typing import NamedTuple

HEADING_RE = re.compile(r'^(#+)\s*(.*)$')
ITEM_PATTERNS = [
    re.compile(r'^[-•*]\s+(.+)$'),   # - item, • item, * item
    re.compile(r'^\d+\.\s+(.+)$'),    # 1. item
]

SECTION_WORDS = {"ingredients", "instructions", "steps", "method", "directions", "preparation"}
MAX_LABEL_LENGTH = 40


class LineKind(str, Enum):
    BLANK = "blank"
    HEADING = "heading"
    ITEM = "item"
    PLAIN = "plain"


class ClassifiedLine(NamedTuple):
    kind: LineKind
    text: str
    level: int = 0


def classify_line(line: str) -> ClassifiedLine:
    """Classify one line as blank, heading, bullet/numbered item or plain."""
    s = (line or "").strip()
    if not s:
        return ClassifiedLine(LineKind.BLANK, "")

    m = HEADING_RE.match(s)
    if m:
        return ClassifiedLine(LineKind.HEADING, m.group(2).strip(), len(m.group(1)))

    for pat in ITEM_PATTERNS:
        m = pat.match(s)
        if m:
            return ClassifiedLine(LineKind.ITEM, m.group(1).strip())

    return ClassifiedLine(LineKind.PLAIN, s)


def is_section_label(text: str) -> bool:
    """True for plain lines like "Ingredients:" or "Steps" that act as headings."""
    s = text.replace("*", "").strip()
    if not s or len(s) > MAX_LABEL_LENGTH:
        return False
    if s.endswith(":"):
        return True
    return s.lower() in SECTION_WORDS
