import logging
from typing import Optional, Tuple

from app.parsing import RuleBasedParser, ConversionResult, FormSnapshot, RecipeParser

logger = logging.getLogger("recipeshare.importer")


def apply_conversion(form: FormSnapshot, result: ConversionResult) -> FormSnapshot:
    """Merge a conversion result into the form without clobbering user input.

    - title / description / cooking time: only filled when still empty
    - ingredients / steps: replaced only if something was detected
    - tags: union, existing tags first
    - difficulty: taken when detected
    """
    updates = {}

    if result.title and not form.title.strip():
        updates["title"] = result.title
    if result.description and not form.description.strip():
        updates["description"] = result.description
    if result.cooking_time_minutes is not None and form.cooking_time is None:
        updates["cooking_time"] = result.cooking_time_minutes

    if result.ingredients:
        updates["ingredients"] = result.ingredients
    if result.steps:
        updates["steps"] = result.steps

    if result.tags:
        updates["tags"] = list(dict.fromkeys(form.tags + result.tags))
    if result.difficulty:
        updates["difficulty"] = result.difficulty

    return form.model_copy(update=updates)


class ImporterService:
    def __init__(self, parser: Optional[RecipeParser] = None):
        # Other parsers (e.g. model-backed) can be swapped in here
        self.parser = parser or RuleBasedParser()

    def convert(self, text: str, form: Optional[FormSnapshot] = None) -> Tuple[ConversionResult, FormSnapshot]:
        form = form or FormSnapshot()
        result = self.parser.parse(text, form)
        logger.debug(
            "Converted %d chars: %d ingredients, %d steps, %d tags",
            len(text or ""), len(result.ingredients), len(result.steps), len(result.tags),
        )
        return result, apply_conversion(form, result)


def convert_recipe_text(text: str, form: Optional[FormSnapshot] = None) -> Tuple[ConversionResult, FormSnapshot]:
    return ImporterService().convert(text, form)
