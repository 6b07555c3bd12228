from datetime import date, timedelta
import unittest
from foodsaver.domain.Ingredient import Ingredient
from foodsaver.domain.Recipe import Recipe
from foodsaver.domain.exceptions import InventoryError


class TestRecipe(unittest.TestCase):

    def setUp(self):
        self.recipe = Recipe("Pancakes", "Fluffy pancakes", "Mix and fry", 4)
        self.flour = Ingredient("Flour", 1, "kg", 0, date.today() + timedelta(days=365))

    def test_constructor_validation(self):
        with self.assertRaises(InventoryError):
            Recipe("", "d", "i", 1)
        with self.assertRaises(InventoryError):
            Recipe("Name", " ", "i", 1)
        with self.assertRaises(InventoryError):
            Recipe("Name", "d", None, 1)
        with self.assertRaises(InventoryError):
            Recipe("Name", "d", "i", 0)
        with self.assertRaises(InventoryError):
            Recipe("Name", "d", "i", -2)

    def test_setters_validate_like_constructor(self):
        with self.assertRaises(InventoryError):
            self.recipe.name = ""
        with self.assertRaises(InventoryError):
            self.recipe.description = "  "
        with self.assertRaises(InventoryError):
            self.recipe.instructions = ""
        with self.assertRaises(InventoryError):
            self.recipe.servings = 0
        self.recipe.servings = 2
        self.recipe.name = "Crepes"
        self.assertEqual(self.recipe.servings, 2)
        self.assertEqual(self.recipe.name, "Crepes")

    def test_add_and_remove_ingredient(self):
        self.recipe.add_ingredient(self.flour)
        self.assertEqual(self.recipe.ingredients, [self.flour])
        self.recipe.remove_ingredient(self.flour)
        self.assertEqual(self.recipe.ingredients, [])

    def test_add_none_fails(self):
        with self.assertRaises(InventoryError):
            self.recipe.add_ingredient(None)

    def test_remove_requires_exact_object(self):
        self.recipe.add_ingredient(self.flour)
        lookalike = self.flour.copy()
        with self.assertRaises(InventoryError):
            self.recipe.remove_ingredient(lookalike)
        with self.assertRaises(InventoryError):
            self.recipe.remove_ingredient(None)
        self.assertEqual(len(self.recipe.ingredients), 1)

    def test_ingredients_returns_copy(self):
        self.recipe.add_ingredient(self.flour)
        self.recipe.ingredients.clear()
        self.assertEqual(len(self.recipe.ingredients), 1)

    def test_str_lists_everything(self):
        self.recipe.add_ingredient(self.flour)
        text = str(self.recipe)
        self.assertIn("Recipe Name: Pancakes", text)
        self.assertIn("Servings: 4", text)
        self.assertIn("- Ingredient{name='Flour'", text)
