import re
from typing import Callable, List, Optional

from .parser import ParsedIngredient

MEASUREMENT_WORDS = {
    "cup", "tbsp", "tsp", "gram", "g", "kilogram", "kg", "ml",
    "ounce", "oz", "pound", "lb", "piece", "pc", "slice", "pinch",
    "can", "packet", "pack", "package", "jar", "bottle", "bunch",
    "handful", "dash", "splash", "sprinkle", "spoon",
}

# Quoted phrases and parenthetical groups stay single tokens
TOKEN_RE = re.compile(r'\([^)]*\)|"[^"]*"|[^\s"]+')
NUMBER_RE = re.compile(r'^(?:\d+(?:[.,]\d+)?|\d+/\d+)$')
GLUED_UNIT_RE = re.compile(r'^\d+(?:[.,/]\d+)?([a-z]+)$')
PREP_NOTE_RE = re.compile(r'\s*\(([^)]*)\)\s*$')
TO_TASTE_RE = re.compile(r'^(.*?)[\s,]*\b(?:to taste|as needed|as required)\.?$', re.IGNORECASE)
LEADING_ARTICLE_RE = re.compile(r'^(?:a|an|some)\s+', re.IGNORECASE)
LEADING_OF_RE = re.compile(r'^of\s+', re.IGNORECASE)

TO_TASTE = "to taste"


def capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def _unit_key(token: str) -> str:
    return token.lower().rstrip(".,")


def is_unit(word: str) -> bool:
    if word in MEASUREMENT_WORDS:
        return True
    if word.endswith("es") and word[:-2] in MEASUREMENT_WORDS:
        return True
    return word.endswith("s") and word[:-1] in MEASUREMENT_WORDS


def is_measurement_word(token: str) -> bool:
    """cup, Cups, tbsp., 500g ..."""
    word = _unit_key(token)
    if is_unit(word):
        return True
    m = GLUED_UNIT_RE.match(word)
    return bool(m) and is_unit(m.group(1))


def is_number(token: str) -> bool:
    return bool(NUMBER_RE.match(token.rstrip(",")))


# Ordered: a measurement word beats a bare number when locating the split.
SPLIT_RULES: List[Callable[[str], bool]] = [
    is_measurement_word,
    is_number,
]


def find_split_point(tokens: List[str]) -> Optional[int]:
    """Index just past the amount tokens, or None when there is no amount."""
    for rule in SPLIT_RULES:
        hits = [i for i, tok in enumerate(tokens) if rule(tok)]
        if hits:
            return hits[-1] + 1
    return None


def _clean_amount(amount: str) -> str:
    amount = LEADING_ARTICLE_RE.sub("", amount.strip())
    if amount and len(amount.split()) == 1 and not any(c.isdigit() for c in amount) \
            and amount.lower() != TO_TASTE:
        amount = f"a {amount}"
    return amount


def parse_ingredient_line(line: str, new_id: Callable[[], str]) -> Optional[ParsedIngredient]:
    """
    Best effort split of one free-text line into name and amount.
    Never raises; a line with no recognizable amount becomes the name.
    A blank line gives None.

    Unlike a plain "rest of the line" split, a leading "of" is dropped from
    the name, so "a pinch of salt" is ("Salt", "a pinch") and not "Of salt".
    """
    raw = (line or "").strip()
    if not raw:
        return None

    prep_note = None
    body = raw
    m = PREP_NOTE_RE.search(raw)
    if m and m.start() > 0:
        prep_note = m.group(1).strip()
        body = raw[:m.start()]

    matches = list(TOKEN_RE.finditer(body))
    tokens = [tm.group(0) for tm in matches]
    split = find_split_point(tokens)

    if split is None:
        amount = ""
        name = body
        tt = TO_TASTE_RE.match(body)
        if tt and tt.group(1).strip():
            name = tt.group(1)
            amount = TO_TASTE
    else:
        amount = _clean_amount(" ".join(tokens[:split]))
        name = body[matches[split - 1].end():]

    name = LEADING_OF_RE.sub("", name.strip().lstrip(",").strip())
    if not name:
        return ParsedIngredient(name=capitalize_first(raw), amount="", id=new_id())

    name = capitalize_first(name)
    if prep_note:
        name = f"{name} ({prep_note})"
    return ParsedIngredient(name=name, amount=amount, id=new_id())
