"""Pydantic schemas for Recipe request/response shapes."""

from datetime import datetime

from pydantic import BaseModel, Field


class RecipeBase(BaseModel):
    """Base schema for Recipe.

    Emptiness is not checked here; the domain value objects are the
    single place where recipe fields are validated.
    """

    name: str = Field(..., description="Recipe title")
    tags: list[str] = Field(..., description="Classification labels")
    ingredients: list[str] = Field(..., description="Ingredient lines, in order")
    instructions: list[str] = Field(..., description="Preparation steps, in order")


class RecipeCreate(RecipeBase):
    """Schema for creating a recipe from raw input."""

    id: str = Field("", description="External identifier, empty for a recipe not stored yet")


class RecipeResponse(RecipeBase):
    """Schema for a validated recipe."""

    id: str | None = Field(None, description="External identifier, null until stored")
    published_at: datetime | None = Field(None, description="When the recipe was created")


class RecipeValidationErrorResponse(BaseModel):
    """Schema for a rejected recipe."""

    field: str | None = Field(None, description="Field that failed validation")
    message: str = Field(..., description="User-facing validation message")
