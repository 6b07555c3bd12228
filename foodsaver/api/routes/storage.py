from typing import Optional

from fastapi import APIRouter, Query, Request

from foodsaver.domain.FoodStorage import FoodStorage
from foodsaver.logic.storage.analysis import compute_storage_report
from foodsaver.utilities.validators import ConsumeInput, IngredientInput

router = APIRouter(prefix="/api/storage", tags=["storage"])


def get_storage(request: Request) -> FoodStorage:
    return request.app.state.storage


def _lots(lots):
    return [lot.to_dict() for lot in lots]


@router.get("")
def list_storage(request: Request):
    """All lots grouped by bucket name."""
    storage = get_storage(request)
    return {
        "type_count": storage.get_ingredient_type_count(),
        "total_value": round(storage.calculate_total_value(), 2),
        "ingredients": {key: _lots(bucket) for key, bucket in storage.get_buckets().items()},
    }


@router.get("/text")
def storage_text(request: Request):
    return {"text": get_storage(request).string_representation()}


@router.post("/ingredient", status_code=201)
def add_ingredient(payload: IngredientInput, request: Request):
    storage = get_storage(request)
    lot = payload.to_ingredient()
    storage.add_ingredient(lot)
    return {"success": True, "bucket": _lots(storage.get_buckets().get(lot.key, []))}


@router.post("/consume")
def consume_ingredient(payload: ConsumeInput, request: Request):
    storage = get_storage(request)
    storage.consume_ingredient(payload.name, payload.amount)
    remaining = storage.get_buckets().get(payload.name.lower(), [])
    return {"success": True, "remaining": _lots(remaining)}


@router.get("/search")
def search_ingredients(request: Request, q: Optional[str] = Query(default=None)):
    found = get_storage(request).search_ingredients_by_name(q)
    return {"count": len(found), "ingredients": _lots(found)}


@router.get("/expired")
def expired_ingredients(request: Request):
    expired = get_storage(request).get_expired_ingredients()
    return {"count": len(expired), "ingredients": _lots(expired)}


@router.get("/report")
def storage_report(request: Request, window: Optional[int] = Query(default=None, ge=0)):
    return compute_storage_report(get_storage(request), window=window)


@router.get("/alerts")
def storage_alerts(
    request: Request,
    since: Optional[int] = Query(default=None, description="Return events with id greater than this value")
):
    """
    Return recent storage alert events (low stock, near expiry, purged lots).

    Client polling strategy:
        1. First call without 'since' to load the current backlog.
        2. Store 'next_cursor' from response.
        3. Subsequent polls: /api/storage/alerts?since=<next_cursor>
    """
    return request.app.state.alerts.get_events(since)
