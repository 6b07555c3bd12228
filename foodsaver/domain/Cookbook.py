"""Cookbook aggregate: recipes keyed by lower-cased name, matched against a FoodStorage."""
from __future__ import annotations

import logging
from typing import Dict, List, Optional

from foodsaver.domain.FoodStorage import FoodStorage
from foodsaver.domain.Recipe import Recipe
from foodsaver.domain.exceptions import InventoryError

logger = logging.getLogger(__name__)


class Cookbook:
    def __init__(self):
        self._recipes: Dict[str, Recipe] = {}

    def add_recipe(self, recipe: Recipe):
        '''
        Adds a recipe; an existing recipe with the same name (case-insensitive) is replaced.
        '''
        if recipe is None:
            raise InventoryError("Recipe must not be null")
        key = self._validate_and_get_key(recipe.name)
        if key in self._recipes:
            logger.info("Replacing recipe %s", recipe.name)
        self._recipes[key] = recipe

    def remove_recipe(self, name: str) -> Optional[Recipe]:
        '''Returns the removed recipe, or None when no recipe has that name.'''
        return self._recipes.pop(self._validate_and_get_key(name), None)

    def get_recipe(self, name: str) -> Optional[Recipe]:
        return self._recipes.get(self._validate_and_get_key(name))

    def search_recipes(self, keyword: Optional[str]) -> List[Recipe]:
        if not isinstance(keyword, str) or not keyword.strip():
            return []
        lower_keyword = keyword.lower()
        return [recipe for key, recipe in self._recipes.items() if lower_keyword in key]

    def get_all_recipe_names(self) -> List[str]:
        return [recipe.name for recipe in self._recipes.values()]

    def get_all_recipes(self) -> List[Recipe]:
        return list(self._recipes.values())

    def suggest_recipes(self, food_storage: FoodStorage) -> List[Recipe]:
        '''All recipes the storage can currently cover; never mutates the storage.'''
        if food_storage is None:
            raise InventoryError("FoodStorage must not be null")
        return [recipe for recipe in self._recipes.values()
                if self.can_prepare_recipe(recipe, food_storage)]

    def can_prepare_recipe(self, recipe: Optional[Recipe], food_storage: FoodStorage) -> bool:
        if food_storage is None:
            raise InventoryError("FoodStorage must not be null")
        if recipe is None:
            return False
        return food_storage.can_prepare_recipe(recipe)

    @staticmethod
    def _validate_and_get_key(name) -> str:
        if not isinstance(name, str) or not name.strip():
            raise InventoryError("Name cannot be null or blank")
        return name.lower()

    def __len__(self) -> int:
        return len(self._recipes)

    def __contains__(self, name) -> bool:
        return isinstance(name, str) and name.lower() in self._recipes
