from datetime import date, timedelta
import unittest
from foodsaver.domain.FoodStorage import FoodStorage
from foodsaver.domain.Ingredient import Ingredient
from foodsaver.logic.storage.analysis import (
    compute_expiring_soon, compute_low_stock, compute_storage_report
)


def in_days(days: int) -> date:
    return date.today() + timedelta(days=days)


class TestStorageAnalysis(unittest.TestCase):

    def setUp(self):
        self.today = date.today()
        self.storage = FoodStorage(clock=lambda: self.today)
        self.storage.add_ingredient(Ingredient("Milk", 0.2, "l", 4.0, in_days(1)))
        self.storage.add_ingredient(Ingredient("Rice", 2, "kg", 30.0, in_days(60)))
        self.storage.add_ingredient(Ingredient("Eggs", 1, "pcs", 3.0, in_days(2)))
        self.storage.add_ingredient(Ingredient("Eggs", 1, "pcs", 3.0, in_days(20)))

    def test_expiring_soon_sorted_by_days_left(self):
        expiring = compute_expiring_soon(self.storage, window=3)
        self.assertEqual([(e['name'], e['days_left']) for e in expiring], [("Milk", 1), ("Eggs", 2)])
        self.assertEqual(compute_expiring_soon(self.storage, window=0), [])

    def test_low_stock_totals_per_unit(self):
        low = compute_low_stock(self.storage, thresholds={"pcs": 2, "l": 0.25, "kg": 1})
        self.assertEqual([(e['name'], e['amount']) for e in low], [("milk", 0.2), ("eggs", 2.0)])

    def test_low_stock_skips_expired_lots(self):
        self.today = self.today + timedelta(days=3)
        low = compute_low_stock(self.storage, thresholds={"pcs": 1})
        self.assertEqual([(e['name'], e['amount']) for e in low], [("eggs", 1.0)])

    def test_report(self):
        report = compute_storage_report(self.storage, window=3)
        self.assertEqual(report['type_count'], 3)
        self.assertEqual(report['lot_count'], 4)
        self.assertEqual(report['total_value'], 40.0)
        self.assertEqual(report['expired_count'], 0)
        self.assertEqual(len(report['expiring_soon']), 2)


if __name__ == '__main__':
    unittest.main()
