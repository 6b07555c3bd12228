from typing import Final

DATE_FORMAT: Final[str] = "%d-%m-%Y"
DAYS_BEFORE_EXPIRY: Final[int] = 3
LOW_STOCK_THRESHOLD: Final[dict[str, float]] = {"g": 100, "kg": 0.2, "ml": 250, "l": 0.25, "pcs": 2}
# Requirement lines in a recipe are not real stock; they get a far expiration date.
RECIPE_INGREDIENT_SHELF_LIFE_DAYS: Final[int] = 365
RECIPE_INGREDIENT_PRICE: Final[float] = 0.0
