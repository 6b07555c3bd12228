"""Simple Event Bus / Observer implementation for food storage alerts.

Event names:
  storage.low_stock -> payload {"name": str, "unit": str, "remaining": float, "threshold": float}
  storage.near_expiry -> payload {"ingredient": Ingredient, "days_left": int, "threshold": int}
  storage.expired_purged -> payload {"name": str, "ingredients": [Ingredient, ...]}
  storage.recipe_prepared -> payload {"recipe": Recipe}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
from collections import defaultdict
from typing import Callable, Any, Dict, List
import logging

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
STORAGE_LOW_STOCK = "storage.low_stock"
STORAGE_NEAR_EXPIRY = "storage.near_expiry"
STORAGE_EXPIRED_PURGED = "storage.expired_purged"
STORAGE_RECIPE_PREPARED = "storage.recipe_prepared"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except ValueError:
			pass

	def subscriber_count(self, event_name: str) -> int:
		return len(self._subscribers.get(event_name, []))

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				# Listener errors are logged; delivery continues
				logger.exception("Error delivering %s to %r", event_name, cb)


__all__ = [
	'EventBus', 'STORAGE_LOW_STOCK', 'STORAGE_NEAR_EXPIRY',
	'STORAGE_EXPIRED_PURGED', 'STORAGE_RECIPE_PREPARED'
]
