"""Metadata extractors for pasted recipe text.

Each extractor is a pure pattern match that returns None (or an empty list)
when nothing is found.
"""

import re
from typing import Iterable, List, Optional, Tuple

from .line_classifier import LineKind, classify_line, is_section_label

TITLE_WINDOW = 5
TITLE_MIN, TITLE_MAX = 3, 50

BOLD_RE = re.compile(r'\*\*(.+?)\*\*')
SERVINGS_RE = re.compile(
    r'(?:serves|servings|yield):\s*(\d+)|(?:for|serves)\s+(\d+)\s+(?:people|servings)',
    re.IGNORECASE,
)
COOKING_TIME_RE = re.compile(
    r'(?:prep|cooking|total) time:?\s*(\d+)\s*(min|minute|hour|hr)',
    re.IGNORECASE,
)
DIFFICULTY_RE = re.compile(
    r'\b(easy|medium|hard|simple|intermediate|advanced|beginner)\b',
    re.IGNORECASE,
)
HASHTAG_RE = re.compile(r'#([A-Za-z]\w*)')
# A hashtag, as opposed to a markdown heading marker or "#10 can"
TAG_LINE_RE = re.compile(r'(?:^|\s)#[A-Za-z]')
MARKDOWN_HEADING_RE = re.compile(r'^#+\s')

DIFFICULTY_SYNONYMS = {
    "simple": "easy",
    "beginner": "easy",
    "intermediate": "medium",
    "advanced": "hard",
}

TAG_VOCABULARY = ["vegetarian", "vegan", "gluten-free", "dairy-free", "quick", "easy", "healthy"]


def _title_length_ok(text: str) -> bool:
    return TITLE_MIN <= len(text) <= TITLE_MAX


def is_metadata_line(line: str) -> bool:
    return bool(SERVINGS_RE.search(line) or COOKING_TIME_RE.search(line))


def extract_title(lines: Iterable[str]) -> Optional[Tuple[str, int]]:
    """
    Pick a title from the first few non-blank lines.
    Returns (title, line_index) or None. Bold text wins over plain lines.
    """
    window = [(i, line.strip()) for i, line in enumerate(lines) if line.strip()][:TITLE_WINDOW]

    for i, line in window:
        for m in BOLD_RE.finditer(line):
            candidate = m.group(1).strip()
            if _title_length_ok(candidate):
                return candidate, i

    for i, line in window:
        classified = classify_line(line)
        if classified.kind != LineKind.PLAIN:
            continue
        if is_section_label(line) or is_metadata_line(line) or is_tag_line(line):
            continue
        candidate = line.replace("*", "").strip()
        if _title_length_ok(candidate):
            return candidate, i
    return None


def extract_servings(line: str) -> Optional[int]:
    m = SERVINGS_RE.search(line)
    if not m:
        return None
    return int(m.group(1) or m.group(2))


def extract_cooking_time(line: str) -> Optional[int]:
    """Cooking time in minutes."""
    m = COOKING_TIME_RE.search(line)
    if not m:
        return None
    value = int(m.group(1))
    if m.group(2).lower() in ("hour", "hr"):
        value *= 60
    return value


def extract_difficulty(parts: Iterable[str]) -> Optional[str]:
    for part in parts:
        m = DIFFICULTY_RE.search(part)
        if m:
            word = m.group(1).lower()
            return DIFFICULTY_SYNONYMS.get(word, word).capitalize()
    return None


def is_tag_line(line: str) -> bool:
    s = line.strip()
    return bool(TAG_LINE_RE.search(s)) and not MARKDOWN_HEADING_RE.match(s)


def strip_hashtags(line: str) -> str:
    return re.sub(r'\s+', ' ', HASHTAG_RE.sub('', line)).strip()


def extract_tags(text: str) -> List[str]:
    """Hashtags plus known diet/speed words, deduplicated in first-seen order."""
    seen = {}
    for m in HASHTAG_RE.finditer(text):
        seen.setdefault(m.group(1).lower(), None)
    lower = text.lower()
    for word in TAG_VOCABULARY:
        if word in lower:
            seen.setdefault(word, None)
    return list(seen)
