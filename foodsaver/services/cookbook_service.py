"""Console-facing actions on a Cookbook, checked against the shared FoodStorage."""
import logging
from datetime import date, timedelta
from typing import List

from foodsaver.domain.Cookbook import Cookbook
from foodsaver.domain.FoodStorage import FoodStorage
from foodsaver.domain.Ingredient import Ingredient
from foodsaver.domain.Recipe import Recipe
from foodsaver.domain.exceptions import InventoryError
from foodsaver.utilities import input_handler as ih
from foodsaver.utilities.constants import RECIPE_INGREDIENT_PRICE, RECIPE_INGREDIENT_SHELF_LIFE_DAYS

logger = logging.getLogger(__name__)


class CookbookService:
    def __init__(self, cookbook: Cookbook, food_storage: FoodStorage, read=input, write=print):
        self.cookbook = cookbook
        self.food_storage = food_storage
        self._read = read
        self._write = write

    def _create_recipe_ingredient(self) -> Ingredient:
        '''A requirement line: price is irrelevant, expiration is set a year ahead.'''
        name = ih.take_string_input("Ingredient name", self._read, self._write)
        unit = ih.take_string_input("Ingredient unit", self._read, self._write)
        amount = ih.take_non_negative_float_input("Ingredient amount", self._read, self._write)
        return Ingredient(name, amount, unit, RECIPE_INGREDIENT_PRICE,
                          date.today() + timedelta(days=RECIPE_INGREDIENT_SHELF_LIFE_DAYS))

    def add_recipe(self):
        name = ih.take_string_input("Recipe name", self._read, self._write)
        description = ih.take_string_input("Recipe description", self._read, self._write)
        instructions = ih.take_string_input("Recipe instructions", self._read, self._write)
        servings = ih.take_positive_int_input("Number of servings", self._read, self._write)
        try:
            recipe = Recipe(name, description, instructions, servings)
        except InventoryError as e:
            self._write(str(e))
            return

        self._write("You can now add ingredients to the recipe. "
                    "Type 'yes' to add an ingredient or 'done' to finish.")
        while True:
            answer = ih.take_string_input("Add ingredient? (yes/done)", self._read, self._write).lower()
            if answer == "done":
                break
            if answer == "yes":
                try:
                    recipe.add_ingredient(self._create_recipe_ingredient())
                    self._write("Ingredient added to the recipe.")
                except InventoryError as e:
                    self._write(str(e))
            else:
                self._write("Invalid input. Please type 'yes' to add an ingredient or 'done' to finish.")

        if not recipe.ingredients:
            self._write("Recipe must have at least one ingredient.")
            return
        try:
            self.cookbook.add_recipe(recipe)
            self._write("Recipe added successfully!")
        except InventoryError as e:
            self._write(str(e))

    def _print_recipes(self, recipes: List[Recipe]):
        if not recipes:
            self._write("No recipes to display.")
            return
        self._write("Recipe List")
        for i, recipe in enumerate(recipes, start=1):
            self._write(f"\nRecipe #{i}:")
            self._write(f"Name: {recipe.name}")
            self._write(f"Description: {recipe.description}")
            self._write(f"Instructions: {recipe.instructions}")
            self._write(f"Servings: {recipe.servings}")
            self._write("Ingredients:")
            if not recipe.ingredients:
                self._write("  - No ingredients listed.")
            for ingredient in recipe.ingredients:
                self._write(f"  - {ingredient.name}: {ingredient.amount:.2f} {ingredient.unit}")
        self._write("")

    def print_all_recipes(self):
        self._print_recipes(self.cookbook.get_all_recipes())

    def _lookup(self) -> Recipe | None:
        name = ih.take_string_input("Recipe name", self._read, self._write)
        recipe = self.cookbook.get_recipe(name)
        if recipe is None:
            self._write(f"No recipe named '{name}'.")
        return recipe

    def can_prepare_recipe(self):
        recipe = self._lookup()
        if recipe is None:
            return
        if self.cookbook.can_prepare_recipe(recipe, self.food_storage):
            self._write("You can prepare the recipe!")
        else:
            self._write("You cannot prepare the recipe.")

    def prepare_recipe(self):
        recipe = self._lookup()
        if recipe is None:
            return
        try:
            self.food_storage.prepare_recipe(recipe)
            self._write(f"Prepared {recipe.name}. Ingredients were taken from storage.")
        except InventoryError as e:
            self._write(str(e))

    def remove_recipe(self):
        name = ih.take_string_input("Recipe name", self._read, self._write)
        if self.cookbook.remove_recipe(name) is None:
            self._write(f"No recipe named '{name}'.")
        else:
            self._write("Recipe removed.")

    def suggest_recipes(self):
        recipes = self.cookbook.suggest_recipes(self.food_storage)
        if not recipes:
            self._write("No recipes can be made with the ingredients in the food storage.")
            return
        self._write("Suggested recipes:")
        for recipe in recipes:
            self._write(recipe.name)
