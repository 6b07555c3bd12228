"""Web-facing observers for food storage events.

An ``AlertRecorder`` subscribes to a storage's EventBus for:
  - storage.low_stock
  - storage.near_expiry
  - storage.expired_purged

and keeps a lightweight in-memory ring buffer of recent events that the web layer
(FastAPI endpoint) can poll to show alerts without a full reload.

Design:
  * Each event stored with an auto-increment integer id (cursor) so clients
    can request only newer events (since=<last_id_seen>).
  * A Lock guards the buffer since uvicorn serves sync endpoints from a thread pool.
  * A max_events cap prevents unbounded memory growth.
"""
from __future__ import annotations
from typing import List, Dict, Any, Optional
from threading import Lock
from datetime import datetime, timezone
import logging

from .Event_Bus import (
    EventBus, STORAGE_LOW_STOCK, STORAGE_NEAR_EXPIRY, STORAGE_EXPIRED_PURGED
)
from foodsaver.utilities.config import MAX_ALERT_EVENTS

logger = logging.getLogger(__name__)


class AlertRecorder:
    def __init__(self, max_events: int = MAX_ALERT_EVENTS):
        self._lock = Lock()
        self._events: List[Dict[str, Any]] = []
        self._next_id = 1
        self._max_events = max_events
        self._buses: List[EventBus] = []

    def start(self, bus: EventBus):
        """Idempotent start: subscribe to a bus once."""
        if any(b is bus for b in self._buses):
            return self
        for event_name in (STORAGE_LOW_STOCK, STORAGE_NEAR_EXPIRY, STORAGE_EXPIRED_PURGED):
            bus.subscribe(event_name, self.record)
        self._buses.append(bus)
        logger.debug("Alert recorder subscribed to %r", bus)
        return self

    def record(self, event_name: str, payload: Any):  # signature expected by EventBus
        evt: Dict[str, Any] = {
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat()
        }
        if isinstance(payload, dict):
            ing = payload.get('ingredient')
            if ing is not None:
                evt['name'] = ing.name
                evt['unit'] = ing.unit
                evt['amount'] = ing.amount
            for k in ('name', 'unit', 'remaining', 'threshold', 'days_left'):
                if k in payload and k not in evt:
                    evt[k] = payload[k]
            if 'ingredients' in payload:
                evt['count'] = len(payload['ingredients'])
        with self._lock:
            evt['id'] = self._next_id
            self._next_id += 1
            self._events.append(evt)
            # Trim buffer
            if len(self._events) > self._max_events:
                del self._events[: len(self._events) - self._max_events]

    def get_events(self, since: Optional[int] = None) -> Dict[str, Any]:
        """Return events newer than 'since' (exclusive).

        If since is None, returns the whole buffer.
        Response includes next_cursor (largest id) so client can poll with since=next_cursor.
        """
        with self._lock:
            if since is None:
                data = list(self._events)
            else:
                data = [e for e in self._events if e['id'] > since]
            next_cursor = self._events[-1]['id'] if self._events else since or 0
        return {'events': data, 'next_cursor': next_cursor}


__all__ = ['AlertRecorder']
