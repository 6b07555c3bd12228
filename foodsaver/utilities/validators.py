"""
Input validation schemas using Pydantic for the HTTP layer.
"""
from datetime import date, datetime, timedelta
from typing import List

from pydantic import BaseModel, Field, field_validator

from foodsaver.domain.Ingredient import Ingredient
from foodsaver.domain.Recipe import Recipe
from foodsaver.utilities.constants import (
    DATE_FORMAT, RECIPE_INGREDIENT_PRICE, RECIPE_INGREDIENT_SHELF_LIFE_DAYS
)


def _strip(v):
    if isinstance(v, str):
        return v.strip()
    return v


class IngredientInput(BaseModel):
    """Schema for a stock lot. ``price`` is the price of the whole lot."""
    name: str = Field(..., min_length=1, max_length=100)
    amount: float = Field(..., ge=0)
    unit: str = Field(..., min_length=1, max_length=20)
    price: float = Field(..., ge=0)
    expiration_date: str = Field(..., description="dd-mm-YYYY, today or later")

    @field_validator('name', 'unit', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        return _strip(v)

    @field_validator('expiration_date')
    @classmethod
    def validate_expiration(cls, v):
        try:
            exp = datetime.strptime(v.strip(), DATE_FORMAT).date()
        except ValueError:
            raise ValueError('Expiration date must use the dd-mm-YYYY format')
        if exp < date.today():
            raise ValueError('Expiration date cannot be in the past')
        return v.strip()

    def to_ingredient(self) -> Ingredient:
        return Ingredient.from_dict(self.model_dump())


class RecipeIngredientInput(BaseModel):
    """Schema for one required line of a recipe."""
    name: str = Field(..., min_length=1, max_length=100)
    amount: float = Field(..., ge=0)
    unit: str = Field(..., min_length=1, max_length=20)

    @field_validator('name', 'unit', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        return _strip(v)

    def to_ingredient(self) -> Ingredient:
        return Ingredient(self.name, self.amount, self.unit, RECIPE_INGREDIENT_PRICE,
                          date.today() + timedelta(days=RECIPE_INGREDIENT_SHELF_LIFE_DAYS))


# Path segments served by fixed routes next to /api/recipes/{name}
RESERVED_RECIPE_NAMES = ("search", "available")


class RecipeInput(BaseModel):
    """Schema for recipe input validation."""
    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    instructions: str = Field(..., min_length=1)
    servings: int = Field(..., ge=1)
    ingredients: List[RecipeIngredientInput]

    @field_validator('name', 'description', 'instructions', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        return _strip(v)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Names that collide with fixed routes under /api/recipes are refused."""
        if v.lower() in RESERVED_RECIPE_NAMES:
            raise ValueError(f"'{v}' is a reserved recipe name")
        return v

    @field_validator('ingredients')
    @classmethod
    def validate_ingredients(cls, v):
        """Ensure recipe has at least one ingredient."""
        if not v:
            raise ValueError('Recipe must have at least one ingredient')
        return v

    def to_recipe(self) -> Recipe:
        return Recipe(self.name, self.description, self.instructions, self.servings,
                      [line.to_ingredient() for line in self.ingredients])


class ConsumeInput(BaseModel):
    """Schema for consuming stock."""
    name: str = Field(..., min_length=1)
    amount: float = Field(..., gt=0)

    @field_validator('name', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        return _strip(v)
