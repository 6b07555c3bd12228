"""Recipe domain entity: name, description, instructions, servings and the required ingredient lines."""
from typing import List, Optional

from foodsaver.domain.Ingredient import Ingredient
from foodsaver.domain.exceptions import InventoryError


class Recipe:
    def __init__(self, name: str, description: str, instructions: str, servings: int,
                 ingredients: Optional[List[Ingredient]] = None):
        self.name = name
        self.description = description
        self.instructions = instructions
        self.servings = servings
        self._ingredients: List[Ingredient] = []
        for ingredient in ingredients or []:
            self.add_ingredient(ingredient)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str):
        self._name = self._validate_string(value, "Name must not be null or empty")

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: str):
        self._description = self._validate_string(value, "Description must not be null or empty")

    @property
    def instructions(self) -> str:
        return self._instructions

    @instructions.setter
    def instructions(self, value: str):
        self._instructions = self._validate_string(value, "Instructions must not be null or empty")

    @property
    def servings(self) -> int:
        return self._servings

    @servings.setter
    def servings(self, value: int):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise InventoryError("Servings must be greater than zero")
        self._servings = value

    @staticmethod
    def _validate_string(value, message: str) -> str:
        if not isinstance(value, str) or not value.strip():
            raise InventoryError(message)
        return value

    @property
    def ingredients(self) -> List[Ingredient]:
        '''Returns a copy of the required ingredient lines, in insertion order.'''
        return list(self._ingredients)

    def add_ingredient(self, ingredient: Ingredient):
        if ingredient is None:
            raise InventoryError("Ingredient must not be null")
        self._ingredients.append(ingredient)

    def remove_ingredient(self, ingredient: Ingredient):
        '''Removes the exact ingredient object; an equal but distinct object does not count.'''
        if ingredient is None:
            raise InventoryError("Ingredient must not be null")
        for i, existing in enumerate(self._ingredients):
            if existing is ingredient:
                del self._ingredients[i]
                return
        raise InventoryError("Ingredient not found in the recipe")

    def __str__(self) -> str:
        lines = [
            f"Recipe Name: {self._name}",
            f"Description: {self._description}",
            f"Instructions: {self._instructions}",
            f"Servings: {self._servings}",
            "Ingredients:",
        ]
        lines.extend(f"- {ingredient}" for ingredient in self._ingredients)
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"Recipe(name={self._name!r}, servings={self._servings}, ingredients={len(self._ingredients)})"

    def to_dict(self):
        return {
            "name": self._name,
            "description": self._description,
            "instructions": self._instructions,
            "servings": self._servings,
            "ingredients": [
                {"name": ing.name, "amount": round(ing.amount, 6), "unit": ing.unit}
                for ing in self._ingredients
            ],
        }
