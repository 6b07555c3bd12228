"""Interactive text menu over one FoodStorage and one Cookbook kept in memory."""
import logging

from foodsaver.domain.Cookbook import Cookbook
from foodsaver.domain.FoodStorage import FoodStorage
from foodsaver.services.cookbook_service import CookbookService
from foodsaver.services.storage_service import FoodStorageService
from foodsaver.utilities import input_handler as ih
from foodsaver.utilities.config import configure_logging

logger = logging.getLogger(__name__)

BANNER = r"""
 ___             _   ___
| __|__  ___  __| | / __| __ ___ _____ _ _
| _/ _ \/ _ \/ _` | \__ \/ _` \ V / -_) '_|
|_|\___/\___/\__,_| |___/\__,_|\_/\___|_|
"""


class UserInterface:
    def __init__(self, read=input, write=print):
        self._read = read
        self._write = write
        self.food_storage: FoodStorage | None = None
        self.cookbook: Cookbook | None = None
        self.actions = {}

    def init(self):
        self.food_storage = FoodStorage()
        self.cookbook = Cookbook()
        storage_service = FoodStorageService(self.food_storage, self._read, self._write)
        cookbook_service = CookbookService(self.cookbook, self.food_storage, self._read, self._write)
        self.actions = {
            1: ("Add an ingredient", storage_service.add_ingredient),
            2: ("Remove an ingredient", storage_service.remove_ingredient),
            3: ("Print all ingredients", storage_service.print_ingredients),
            4: ("Search for ingredients", storage_service.search_for_ingredients),
            5: ("Print expired ingredients", storage_service.print_expired_ingredients),
            6: ("Print total value of ingredients", storage_service.print_total_value),
            7: ("Add a recipe", cookbook_service.add_recipe),
            8: ("Print all recipes", cookbook_service.print_all_recipes),
            9: ("Check if a recipe can be prepared", cookbook_service.can_prepare_recipe),
            10: ("Suggest recipes", cookbook_service.suggest_recipes),
            11: ("Prepare a recipe", cookbook_service.prepare_recipe),
            12: ("Remove a recipe", cookbook_service.remove_recipe),
        }
        return self

    def _print_menu(self):
        self._write("")
        for number, (label, _) in self.actions.items():
            self._write(f"{number}. {label}")
        self._write("0. Exit")

    def start(self):
        self._write(BANNER)
        self._write("Welcome to the food saver app!")
        while True:
            self._print_menu()
            action = ih.take_int_input("Choose which action to perform", self._read, self._write)
            if action == 0:
                self._write("Goodbye!")
                return
            entry = self.actions.get(action)
            if entry is None:
                self._write("Invalid action. Please try again.")
                continue
            logger.debug("Running menu action %d (%s)", action, entry[0])
            entry[1]()


def run():
    configure_logging()
    UserInterface().init().start()


if __name__ == "__main__":
    run()
