from abc import ABC, abstractmethod
from typing import Optional, List
from pydantic import BaseModel


class ParsedIngredient(BaseModel):
    name: str
    amount: str = ""
    id: str


class ParsedStep(BaseModel):
    instruction: str
    id: str


class FormSnapshot(BaseModel):
    """Current state of the recipe form the text is being converted into."""
    title: str = ""
    description: str = ""
    cooking_time: Optional[int] = None
    difficulty: Optional[str] = None
    ingredients: List[ParsedIngredient] = []
    steps: List[ParsedStep] = []
    tags: List[str] = []
    category: Optional[str] = None
    notes: Optional[str] = None
    is_public: bool = False


class ConversionResult(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    ingredients: List[ParsedIngredient] = []
    steps: List[ParsedStep] = []
    tags: List[str] = []
    difficulty: Optional[str] = None
    cooking_time_minutes: Optional[int] = None
    servings: Optional[int] = None


class RecipeParser(ABC):
    @abstractmethod
    def parse(self, text: str, snapshot: Optional[FormSnapshot] = None) -> ConversionResult:
        """Parse raw text into structured recipe fields."""
        pass
