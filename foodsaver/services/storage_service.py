"""Console-facing actions on a FoodStorage: collect input, call the aggregate, print the outcome."""
import logging

from foodsaver.domain.FoodStorage import FoodStorage
from foodsaver.domain.Ingredient import Ingredient
from foodsaver.domain.exceptions import InventoryError
from foodsaver.utilities import input_handler as ih

logger = logging.getLogger(__name__)


def _plural(count: int) -> str:
    return "ingredient" if count == 1 else "ingredients"


class FoodStorageService:
    def __init__(self, food_storage: FoodStorage, read=input, write=print):
        self.food_storage = food_storage
        self._read = read
        self._write = write

    def add_ingredient(self):
        name = ih.take_string_input("Ingredient name", self._read, self._write)
        unit = ih.take_string_input("Ingredient unit", self._read, self._write)
        amount = ih.take_non_negative_float_input("Ingredient amount", self._read, self._write)
        price = ih.take_non_negative_float_input("Ingredient price (whole lot)", self._read, self._write)
        expiration_date = ih.take_date_input("Ingredient expiration date", self._read, self._write)
        try:
            self.food_storage.add_ingredient(Ingredient(name, amount, unit, price, expiration_date))
            self._write("Ingredient added successfully.")
        except InventoryError as e:
            logger.debug("Add ingredient rejected: %r", e)
            self._write(str(e))

    def remove_ingredient(self):
        name = ih.take_string_input("Ingredient name", self._read, self._write)
        amount = ih.take_float_input("Ingredient amount", self._read, self._write)
        try:
            self.food_storage.consume_ingredient(name, amount)
            self._write("Ingredient removed successfully.")
        except InventoryError as e:
            logger.debug("Consume rejected: %r", e)
            self._write(str(e))

    def print_ingredients(self):
        self._write(self.food_storage.string_representation())

    def print_total_value(self):
        if not self.food_storage.get_all_ingredients():
            self._write("No ingredients in storage.")
        else:
            self._write(f"Total value of ingredients: {self.food_storage.calculate_total_value():.2f}")

    def search_for_ingredients(self):
        keyword = ih.take_string_input("Ingredient name", self._read, self._write)
        found = self.food_storage.search_ingredients_by_name(keyword)
        if not found:
            self._write("No ingredients found.")
            return
        self._write(f"Found {len(found)} {_plural(len(found))}:")
        for ingredient in found:
            self._write(ingredient.pretty_print())
            self._write("")

    def print_expired_ingredients(self):
        expired = self.food_storage.get_expired_ingredients()
        if not expired:
            self._write("No expired ingredients found.")
            return
        self._write(f"Found {len(expired)} {_plural(len(expired))} that are expired:")
        for ingredient in expired:
            self._write(ingredient.pretty_print())
            self._write("")
