"""Food storage analysis helpers: expiring soon, low stock, value report."""
from __future__ import annotations
from collections import defaultdict
from typing import List, Dict, Any, Optional

from foodsaver.domain.FoodStorage import FoodStorage
from foodsaver.utilities import config

__all__ = ["compute_expiring_soon", "compute_low_stock", "compute_storage_report"]


def compute_expiring_soon(storage: FoodStorage, *, window: Optional[int] = None) -> List[Dict[str, Any]]:
    """Return lots expiring in <= window days (including already expired)."""
    expiring_window = window if window is not None else config.DAYS_BEFORE_EXPIRY
    today = storage.current_date()
    result: List[Dict[str, Any]] = []
    for ing in storage.get_all_ingredients():
        days_left = (ing.expiration_date - today).days
        if days_left <= expiring_window:
            result.append({
                'name': ing.name,
                'amount': ing.amount,
                'unit': ing.unit,
                'exp': ing.expiration_date.isoformat(),
                'days_left': days_left,
            })
    result.sort(key=lambda x: (x['days_left'], x['name']))
    return result


def compute_low_stock(storage: FoodStorage, *, thresholds: Optional[Dict[str, float]] = None) -> List[Dict[str, Any]]:
    """Return (name, unit) totals of non-expired stock at or below the threshold for their unit."""
    limits = thresholds if thresholds is not None else config.LOW_STOCK_THRESHOLD
    today = storage.current_date()
    totals: Dict[tuple, float] = defaultdict(float)
    for key, bucket in storage.get_buckets().items():
        for ing in bucket:
            if not ing.is_expired(today):
                totals[(key, ing.unit)] += ing.amount
    low: List[Dict[str, Any]] = []
    for (name, unit), quantity in totals.items():
        th = limits.get(unit, 0)
        if th > 0 and quantity <= th:
            low.append({'name': name, 'amount': quantity, 'unit': unit, 'threshold': th})
    low.sort(key=lambda x: (x['amount'], x['name']))
    return low


def compute_storage_report(storage: FoodStorage, *, window: Optional[int] = None) -> Dict[str, Any]:
    return {
        'type_count': storage.get_ingredient_type_count(),
        'lot_count': len(storage.get_all_ingredients()),
        'total_value': round(storage.calculate_total_value(), 2),
        'expired_count': len(storage.get_expired_ingredients()),
        'expiring_soon': compute_expiring_soon(storage, window=window),
        'low_stock': compute_low_stock(storage),
    }
