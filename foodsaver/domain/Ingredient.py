"""Ingredient domain entity: one lot of stock with name, amount, unit, whole-lot price, expiration date.

``price`` is the price of the whole lot, never a per-unit price. Merging two lots sums
their prices and partial consumption scales the price with the remaining fraction.
"""
from datetime import date, datetime
from typing import Optional

from foodsaver.domain.exceptions import InventoryError
from foodsaver.utilities.constants import DATE_FORMAT


class Ingredient:
    def __init__(self, name: str, amount: float, unit: str, price: float,
                 expiration_date: Optional[date]):
        self._validate_string(name, "Name")
        self._name = name
        self.amount = amount
        self.unit = unit
        self.price = price
        self.expiration_date = expiration_date

    # --- Validated attributes ----------------------------------------------
    @property
    def name(self) -> str:
        return self._name

    @property
    def amount(self) -> float:
        return self._amount

    @amount.setter
    def amount(self, value: float):
        self._amount = self._validate_non_negative(value, "Amount")

    @property
    def unit(self) -> str:
        return self._unit

    @unit.setter
    def unit(self, value: str):
        self._validate_string(value, "Unit")
        self._unit = value

    @property
    def price(self) -> float:
        return self._price

    @price.setter
    def price(self, value: float):
        self._price = self._validate_non_negative(value, "Price")

    @property
    def expiration_date(self) -> date:
        return self._expiration_date

    @expiration_date.setter
    def expiration_date(self, value: Optional[date]):
        if value is None:
            raise InventoryError("Expiration date cannot be null")
        if isinstance(value, datetime):
            value = value.date()
        if not isinstance(value, date):
            raise InventoryError(f"Expiration date must be a date, got {type(value).__name__}")
        if value < date.today():
            raise InventoryError("Expiration date cannot be in the past")
        self._expiration_date = value

    @staticmethod
    def _validate_string(value, field_name: str):
        if not isinstance(value, str) or not value.strip():
            raise InventoryError(f"{field_name} cannot be null or blank")

    @staticmethod
    def _validate_non_negative(value, field_name: str) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InventoryError(f"{field_name} must be a number")
        if value < 0:
            raise InventoryError(f"{field_name} cannot be negative")
        return float(value)

    # --- Behaviour -----------------------------------------------------------
    @property
    def key(self) -> str:
        '''Bucket key used by the storage: the lower-cased name.'''
        return self._name.lower()

    def is_expired(self, today: Optional[date] = None) -> bool:
        '''A lot expiring today is still usable.'''
        return (today or date.today()) > self._expiration_date

    def same_lot(self, other: "Ingredient") -> bool:
        '''Lot identity: name (case-insensitive), unit and expiration date.'''
        return (self.key == other.key
                and self._unit == other.unit
                and self._expiration_date == other.expiration_date)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Ingredient):
            return NotImplemented
        return self.same_lot(other)

    __hash__ = None

    def copy(self) -> "Ingredient":
        return Ingredient(self._name, self._amount, self._unit, self._price, self._expiration_date)

    def pretty_print(self) -> str:
        return (
            f"Name: {self._name}\n"
            f"Amount: {self._amount:.2f} {self._unit}\n"
            f"Price: {self._price:.2f}\n"
            f"Expiration date: {self._expiration_date.isoformat()}"
        )

    def __str__(self) -> str:
        return (f"Ingredient{{name='{self._name}', amount={self._amount:.2f} {self._unit}, "
                f"price={self._price:.2f}, expirationDate={self._expiration_date.isoformat()}}}")

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient from a dictionary (expiration date as dd-mm-YYYY or a date).'''
        if not isinstance(data, dict):
            raise InventoryError("Ingredient data must be a mapping")
        exp = data.get("expiration_date")
        if isinstance(exp, str):
            try:
                exp = datetime.strptime(exp, DATE_FORMAT).date()
            except ValueError:
                raise InventoryError(f"Invalid expiration date '{exp}', expected dd-mm-YYYY") from None
        return Ingredient(
            data.get("name"),
            data.get("amount", 0),
            data.get("unit"),
            data.get("price", 0),
            exp,
        )

    def to_dict(self):
        '''Converts the Ingredient to a JSON friendly dictionary.'''
        return {
            "name": self._name,
            "amount": round(self._amount, 6),
            "unit": self._unit,
            "price": round(self._price, 6),
            "expiration_date": self._expiration_date.strftime(DATE_FORMAT),
        }
