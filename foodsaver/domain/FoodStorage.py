"""FoodStorage aggregate: ingredient lots grouped by name, with merge and expiration-aware consumption."""
from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Dict, List, Optional, Tuple

from foodsaver.domain.Ingredient import Ingredient
from foodsaver.domain.Recipe import Recipe
from foodsaver.domain.exceptions import ErrorReason, InventoryError
from foodsaver.events.Event_Bus import (
    EventBus, STORAGE_LOW_STOCK, STORAGE_NEAR_EXPIRY,
    STORAGE_EXPIRED_PURGED, STORAGE_RECIPE_PREPARED
)
from foodsaver.utilities import config

logger = logging.getLogger(__name__)


class FoodStorage:
    """Owns every lot added to it.

    Lots live in buckets keyed by lower-cased name. A bucket is never empty: it is
    dropped from the mapping as soon as its last lot is consumed or purged.
    ``add_ingredient`` stores a copy, so stored lots never share identity with caller objects.
    """

    def __init__(self, event_bus: Optional[EventBus] = None,
                 clock: Callable[[], date] = date.today,
                 low_stock_threshold: Optional[Dict[str, float]] = None,
                 days_before_expiry: Optional[int] = None):
        self._ingredients: Dict[str, List[Ingredient]] = {}
        self._event_bus = event_bus if event_bus is not None else EventBus()
        self._clock = clock
        self._low_stock_threshold = dict(config.LOW_STOCK_THRESHOLD if low_stock_threshold is None
                                         else low_stock_threshold)
        self._days_before_expiry = (config.DAYS_BEFORE_EXPIRY if days_before_expiry is None
                                    else days_before_expiry)

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    def current_date(self) -> date:
        return self._clock()

    # --- Mutation -------------------------------------------------------------
    def add_ingredient(self, ingredient: Ingredient):
        '''
        Adds a lot to the storage.

        If the bucket already holds a lot with the same unit and expiration date, the
        first such lot absorbs the incoming amount and price (both summed). Otherwise
        a copy of the lot is appended as a new entry; the caller keeps its own object.
        '''
        if ingredient is None:
            raise InventoryError("Ingredient must not be null")

        bucket = self._ingredients.setdefault(ingredient.key, [])
        for existing in bucket:
            if (existing.unit == ingredient.unit
                    and existing.expiration_date == ingredient.expiration_date):
                existing.amount = existing.amount + ingredient.amount
                existing.price = existing.price + ingredient.price
                logger.info("Merged %.2f %s of %s into existing lot (now %.2f)",
                            ingredient.amount, ingredient.unit, ingredient.name, existing.amount)
                self._evaluate_lot(existing)
                self._evaluate_bucket(ingredient.key)
                return

        lot = ingredient.copy()
        bucket.append(lot)
        logger.info("Added new lot: %s", lot)
        self._evaluate_lot(lot)
        self._evaluate_bucket(lot.key)

    def consume_ingredient(self, name: str, amount: float, unit: Optional[str] = None):
        '''
        Removes ``amount`` of an ingredient, soonest-expiring lots first.

        With ``unit`` given only lots in that unit are drawn from; otherwise every lot
        of the bucket counts. Expired lots never count as available. A partially drained
        lot keeps the share of its price matching its remaining amount. Afterwards every expired lot in the
        bucket is purged and an empty bucket is dropped.
        '''
        if not isinstance(name, str) or not name.strip():
            raise InventoryError("Ingredient name must not be null or blank")
        if isinstance(amount, bool) or not isinstance(amount, (int, float)) or amount <= 0:
            raise InventoryError("Amount to consume must be positive")

        key = name.lower()
        bucket = self._ingredients.get(key)
        if not bucket:
            raise InventoryError(f"Ingredient not found in storage: {name}", ErrorReason.NOT_FOUND)

        today = self._clock()
        available = sorted((ing for ing in bucket
                            if not ing.is_expired(today) and (unit is None or ing.unit == unit)),
                           key=lambda ing: ing.expiration_date)
        if not available:
            raise InventoryError(f"No ingredients available for: {name}",
                                 ErrorReason.INSUFFICIENT_QUANTITY)

        total_available = sum(ing.amount for ing in available)
        if amount > total_available:
            unit = available[0].unit
            raise InventoryError(
                f"Insufficient quantity available for {name}. Available: {total_available}{unit}",
                ErrorReason.INSUFFICIENT_QUANTITY)

        remaining = amount
        for ing in available:
            if remaining <= 0:
                break
            current = ing.amount
            if current <= remaining:
                remaining -= current
                self._remove_lot(bucket, ing)
            else:
                ing.price = ing.price * (current - remaining) / current
                ing.amount = current - remaining
                remaining = 0
        logger.info("Consumed %s of %s", amount, name)

        self._purge_expired(key, today)
        self._evaluate_bucket(key)

    @staticmethod
    def required_totals(recipe: Recipe) -> Dict[Tuple[str, str], Tuple[str, float]]:
        '''
        Requirement lines summed per (lower-cased name, unit), in first-seen order.

        Values are (display name of the first line, total amount).
        '''
        totals: Dict[Tuple[str, str], Tuple[str, float]] = {}
        for required in recipe.ingredients:
            slot = (required.key, required.unit)
            name, amount = totals.get(slot, (required.name, 0.0))
            totals[slot] = (name, amount + required.amount)
        return totals

    def can_prepare_recipe(self, recipe: Recipe) -> bool:
        '''True if the summed requirement per name and unit is covered by non-expired lots.'''
        if recipe is None:
            raise InventoryError("Recipe must not be null")
        return all(
            self.available_amount(name, unit) >= amount
            for (_, unit), (name, amount) in self.required_totals(recipe).items()
        )

    def prepare_recipe(self, recipe: Recipe):
        '''
        Consumes every required line from lots of the matching unit.

        Nothing is touched when the check fails up front. Zero-amount lines need nothing.
        '''
        if not self.can_prepare_recipe(recipe):
            raise InventoryError("Insufficient non-expired ingredients to prepare the recipe",
                                 ErrorReason.INSUFFICIENT_QUANTITY)
        for (_, unit), (name, amount) in self.required_totals(recipe).items():
            if amount > 0:
                self.consume_ingredient(name, amount, unit)
        logger.info("Prepared recipe %s", recipe.name)
        self._event_bus.publish(STORAGE_RECIPE_PREPARED, {"recipe": recipe})

    # --- Queries --------------------------------------------------------------
    def available_amount(self, name: str, unit: Optional[str] = None) -> float:
        '''Sum of non-expired lots for ``name``, restricted to ``unit`` when given.'''
        if not isinstance(name, str):
            return 0.0
        today = self._clock()
        return sum(
            ing.amount for ing in self._ingredients.get(name.lower(), [])
            if not ing.is_expired(today) and (unit is None or ing.unit == unit)
        )

    def get_all_ingredients(self) -> List[Ingredient]:
        return [ing for bucket in self._ingredients.values() for ing in bucket]

    def get_buckets(self) -> Dict[str, List[Ingredient]]:
        '''Shallow copy of the bucket mapping (key -> list of lots).'''
        return {key: list(bucket) for key, bucket in self._ingredients.items()}

    def get_expired_ingredients(self) -> List[Ingredient]:
        today = self._clock()
        return [ing for ing in self.get_all_ingredients() if ing.expiration_date < today]

    def search_ingredients_by_name(self, keyword: Optional[str]) -> List[Ingredient]:
        if not isinstance(keyword, str) or not keyword.strip():
            return []
        lower_keyword = keyword.lower()
        return [ing for key, bucket in self._ingredients.items()
                if lower_keyword in key for ing in bucket]

    def get_ingredient_type_count(self) -> int:
        return len(self._ingredients)

    def calculate_total_value(self) -> float:
        '''Sum of lot prices (each price already covers its whole lot).'''
        return sum(ing.price for ing in self.get_all_ingredients())

    def string_representation(self) -> str:
        lines = ["Food Storage Contents:"]
        if not self._ingredients:
            lines.append("No ingredients in storage.")
            return "\n".join(lines)
        for key, bucket in self._ingredients.items():
            lines.append(f"Ingredient: {key}")
            for ing in bucket:
                lines.append("  - " + ing.pretty_print().replace("\n", "\n    "))
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.string_representation()

    def __repr__(self) -> str:
        return f"FoodStorage(types={len(self._ingredients)}, lots={len(self.get_all_ingredients())})"

    # --- Internal helpers -----------------------------------------------------
    @staticmethod
    def _remove_lot(bucket: List[Ingredient], lot: Ingredient):
        # Identity, not equality: two distinct lots may compare equal
        for i, existing in enumerate(bucket):
            if existing is lot:
                del bucket[i]
                return

    def _purge_expired(self, key: str, today: date):
        bucket = self._ingredients.get(key, [])
        expired = [ing for ing in bucket if ing.is_expired(today)]
        if expired:
            bucket[:] = [ing for ing in bucket if not ing.is_expired(today)]
            logger.info("Purged %d expired lot(s) of %s", len(expired), key)
            self._event_bus.publish(STORAGE_EXPIRED_PURGED, {"name": key, "ingredients": expired})
        if not bucket:
            self._ingredients.pop(key, None)

    # --- Alert evaluation -----------------------------------------------------
    def _evaluate_lot(self, ingredient: Ingredient):
        days_left = (ingredient.expiration_date - self._clock()).days
        if days_left <= self._days_before_expiry:
            self._event_bus.publish(STORAGE_NEAR_EXPIRY, {
                "ingredient": ingredient,
                "days_left": days_left,
                "threshold": self._days_before_expiry
            })

    def _evaluate_bucket(self, key: str):
        bucket = self._ingredients.get(key, [])
        units = {ing.unit for ing in bucket}
        for unit in units:
            threshold = self._low_stock_threshold.get(unit, 0)
            if threshold <= 0:
                continue
            remaining = self.available_amount(key, unit)
            if remaining <= threshold:
                self._event_bus.publish(STORAGE_LOW_STOCK, {
                    "name": key,
                    "unit": unit,
                    "remaining": remaining,
                    "threshold": threshold
                })
