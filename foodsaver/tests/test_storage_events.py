from datetime import date, timedelta
import unittest
from foodsaver.domain.FoodStorage import FoodStorage
from foodsaver.domain.Ingredient import Ingredient
from foodsaver.domain.Recipe import Recipe
from foodsaver.events.Event_Bus import (
    EventBus, STORAGE_LOW_STOCK, STORAGE_NEAR_EXPIRY,
    STORAGE_EXPIRED_PURGED, STORAGE_RECIPE_PREPARED
)
from foodsaver.events.web_observers import AlertRecorder


def in_days(days: int) -> date:
    return date.today() + timedelta(days=days)


class Collector:
    def __init__(self):
        self.events = []

    def __call__(self, event_name, payload):
        self.events.append((event_name, payload))

    def names(self):
        return [name for name, _ in self.events]


class TestEventBus(unittest.TestCase):

    def test_subscribe_publish_unsubscribe(self):
        bus = EventBus()
        collector = Collector()
        bus.subscribe("x", collector)
        bus.subscribe("x", collector)
        self.assertEqual(bus.subscriber_count("x"), 1)
        bus.publish("x", {"a": 1})
        bus.unsubscribe("x", collector)
        bus.unsubscribe("x", collector)
        bus.publish("x", {"a": 2})
        self.assertEqual(collector.events, [("x", {"a": 1})])

    def test_failing_listener_does_not_stop_delivery(self):
        bus = EventBus()
        collector = Collector()

        def broken(event_name, payload):
            raise RuntimeError("boom")

        bus.subscribe("x", broken)
        bus.subscribe("x", collector)
        with self.assertLogs("foodsaver.events.Event_Bus", level="ERROR"):
            bus.publish("x", None)
        self.assertEqual(collector.names(), ["x"])


class TestStorageAlerts(unittest.TestCase):

    def setUp(self):
        self.today = date.today()
        self.bus = EventBus()
        self.collector = Collector()
        for name in (STORAGE_LOW_STOCK, STORAGE_NEAR_EXPIRY, STORAGE_EXPIRED_PURGED, STORAGE_RECIPE_PREPARED):
            self.bus.subscribe(name, self.collector)
        self.storage = FoodStorage(event_bus=self.bus, clock=lambda: self.today,
                                   low_stock_threshold={"pcs": 2}, days_before_expiry=2)

    def test_near_expiry_on_add(self):
        self.storage.add_ingredient(Ingredient("Fish", 1, "kg", 10, in_days(1)))
        self.storage.add_ingredient(Ingredient("Rice", 1, "kg", 10, in_days(30)))
        near = [p for n, p in self.collector.events if n == STORAGE_NEAR_EXPIRY]
        self.assertEqual(len(near), 1)
        self.assertEqual(near[0]["ingredient"].name, "Fish")
        self.assertEqual(near[0]["days_left"], 1)

    def test_low_stock_after_consume(self):
        self.storage.add_ingredient(Ingredient("Eggs", 6, "pcs", 18, in_days(10)))
        self.assertNotIn(STORAGE_LOW_STOCK, self.collector.names())
        self.storage.consume_ingredient("Eggs", 4)
        low = [p for n, p in self.collector.events if n == STORAGE_LOW_STOCK]
        self.assertEqual(low, [{"name": "eggs", "unit": "pcs", "remaining": 2, "threshold": 2}])

    def test_purge_and_prepare_events(self):
        self.storage.add_ingredient(Ingredient("Bread", 1, "pcs", 3, in_days(1)))
        self.storage.add_ingredient(Ingredient("Bread", 5, "pcs", 15, in_days(9)))
        self.today = self.today + timedelta(days=2)
        toast = Recipe("Toast", "Crunchy", "Toast it", 1,
                       [Ingredient("Bread", 1, "pcs", 0, in_days(365))])
        self.storage.prepare_recipe(toast)
        purged = [p for n, p in self.collector.events if n == STORAGE_EXPIRED_PURGED]
        self.assertEqual(len(purged), 1)
        self.assertEqual(len(purged[0]["ingredients"]), 1)
        self.assertEqual(self.collector.names()[-1], STORAGE_RECIPE_PREPARED)


class TestAlertRecorder(unittest.TestCase):

    def setUp(self):
        self.bus = EventBus()
        self.recorder = AlertRecorder(max_events=3).start(self.bus)

    def test_start_is_idempotent(self):
        self.recorder.start(self.bus)
        self.assertEqual(self.bus.subscriber_count(STORAGE_LOW_STOCK), 1)

    def test_cursor_and_trim(self):
        for i in range(5):
            self.bus.publish(STORAGE_LOW_STOCK, {"name": f"item{i}", "unit": "g", "remaining": i, "threshold": 10})
        snapshot = self.recorder.get_events()
        self.assertEqual([e["id"] for e in snapshot["events"]], [3, 4, 5])
        self.assertEqual(snapshot["next_cursor"], 5)
        newer = self.recorder.get_events(since=4)
        self.assertEqual([e["name"] for e in newer["events"]], ["item4"])
        self.assertEqual(self.recorder.get_events(since=5)["events"], [])

    def test_records_ingredient_fields(self):
        lot = Ingredient("Milk", 1, "l", 10, in_days(1))
        self.bus.publish(STORAGE_NEAR_EXPIRY, {"ingredient": lot, "days_left": 1, "threshold": 3})
        event = self.recorder.get_events()["events"][0]
        self.assertEqual(event["type"], STORAGE_NEAR_EXPIRY)
        self.assertEqual((event["name"], event["unit"], event["amount"], event["days_left"]),
                         ("Milk", "l", 1.0, 1))

    def test_empty_feed(self):
        self.assertEqual(AlertRecorder().get_events(), {"events": [], "next_cursor": 0})


if __name__ == '__main__':
    unittest.main()
