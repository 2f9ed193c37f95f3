"""Pydantic schemas for Recipe Share API.

Request/response models for:
- Users
- Posts (recipes)
- Comments and reactions
- Raw-text conversion
"""

from datetime import datetime, date
from typing import Optional, Literal

from pydantic import BaseModel, Field

from .parsing import ConversionResult, FormSnapshot, ParsedIngredient, ParsedStep


# --- User ---

class UserOut(BaseModel):
    id: str
    email: str
    name: Optional[str]

    class Config:
        from_attributes = True


class UserSummary(BaseModel):
    name: Optional[str]
    email: str

    class Config:
        from_attributes = True


# --- Post ---

Difficulty = Literal["Easy", "Medium", "Hard"]


class PostCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    ingredients: list[ParsedIngredient] = []
    steps: list[ParsedStep] = []
    notes: Optional[str] = None
    images: list[str] = []
    tags: list[str] = []
    category: Optional[str] = Field(None, max_length=80)
    cooking_time: Optional[int] = Field(None, ge=0)
    difficulty: Optional[Difficulty] = None
    is_public: bool = False
    cooked_on: Optional[date] = None


class PostPatch(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    ingredients: Optional[list[ParsedIngredient]] = None
    steps: Optional[list[ParsedStep]] = None
    notes: Optional[str] = None
    images: Optional[list[str]] = None
    tags: Optional[list[str]] = None
    category: Optional[str] = Field(None, max_length=80)
    cooking_time: Optional[int] = Field(None, ge=0)
    difficulty: Optional[Difficulty] = None
    is_public: Optional[bool] = None
    cooked_on: Optional[date] = None


class PostOut(BaseModel):
    id: str
    user_id: str
    title: str
    description: str
    ingredients: list[ParsedIngredient]
    steps: list[ParsedStep]
    notes: Optional[str]
    images: list[str]
    tags: list[str]
    category: Optional[str]
    cooking_time: Optional[int]
    difficulty: Optional[str]
    is_public: bool
    cooked_on: Optional[date]
    created_at: datetime
    updated_at: Optional[datetime] = None
    user: Optional[UserSummary] = None

    class Config:
        from_attributes = True


# --- Comments ---

class CommentIn(BaseModel):
    content: str = Field(..., max_length=5000)


class CommentOut(BaseModel):
    id: str
    post_id: str
    user_id: str
    content: str
    created_at: datetime
    updated_at: Optional[datetime] = None
    user: Optional[UserSummary] = None

    class Config:
        from_attributes = True


class CommentCount(BaseModel):
    count: int


# --- Reactions ---

class ReactionToggle(BaseModel):
    type: str


class ReactionCount(BaseModel):
    type: str
    count: int


class ReactionsOut(BaseModel):
    reactions: list[ReactionCount]
    user_reactions: list[str]


# --- Conversion ---

class ConvertRequest(BaseModel):
    text: str = Field(..., max_length=200_000)
    form: FormSnapshot = FormSnapshot()


class ConvertResponse(BaseModel):
    result: ConversionResult
    form: FormSnapshot


# --- Dev ---

class SeedResponse(BaseModel):
    user: UserOut
    posts_created: int
    message: str
