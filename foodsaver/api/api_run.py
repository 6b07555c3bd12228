from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from foodsaver.domain.Cookbook import Cookbook
from foodsaver.domain.FoodStorage import FoodStorage
from foodsaver.domain.exceptions import ErrorReason, InventoryError
from foodsaver.events.web_observers import AlertRecorder
from foodsaver.api.routes import recipes, storage

# Logging
logger = logging.getLogger("foodsaver_app")

STATUS_BY_REASON = {
    ErrorReason.INVALID_INPUT: 400,
    ErrorReason.NOT_FOUND: 404,
    ErrorReason.INSUFFICIENT_QUANTITY: 409,
}


def create_app(food_storage: Optional[FoodStorage] = None, cookbook: Optional[Cookbook] = None) -> FastAPI:
    """Build the API around one storage and one cookbook held in memory for the process run."""
    app = FastAPI(title="Food Saver Storage & Cookbook API")
    app.state.storage = food_storage if food_storage is not None else FoodStorage()
    app.state.cookbook = cookbook if cookbook is not None else Cookbook()
    app.state.alerts = AlertRecorder().start(app.state.storage.event_bus)

    @app.exception_handler(InventoryError)
    async def _inventory_error_handler(request: Request, exc: InventoryError):
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=STATUS_BY_REASON.get(exc.reason, 400),
            content={"detail": exc.message, "reason": exc.reason.value},
        )

    @app.get("/api/health")
    def health():
        return {"status": "ok"}

    app.include_router(storage.router)
    app.include_router(recipes.router)
    return app


app = create_app()
