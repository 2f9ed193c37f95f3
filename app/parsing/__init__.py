from .parser import RecipeParser, ConversionResult, FormSnapshot, ParsedIngredient, ParsedStep
from .rule_based_parser import RuleBasedParser, convert_text
from .ingredient_parser import parse_ingredient_line
from .steps import parse_step_line

__all__ = [
    "RecipeParser", "ConversionResult", "FormSnapshot", "ParsedIngredient", "ParsedStep",
    "RuleBasedParser", "convert_text", "parse_ingredient_line", "parse_step_line",
]
