# rocketcart/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
import uvicorn

from rocketcart.api.routers import cart, health
from rocketcart.repos.snapshot_repo import build_snapshot_store
from rocketcart.services.cart_accessor import CartAccessor
from rocketcart.services.cart_engine import CartEngine
from rocketcart.services.notification_service import NotificationService
from rocketcart.services.stock_client import StockClient
from rocketcart.utils.logging import get_logger

logger = get_logger(__name__)


def build_engine() -> CartEngine:
    return CartEngine(
        stock_client=StockClient(),
        store=build_snapshot_store(),
        notifier=NotificationService(),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # silnik tworzony raz na proces, chyba ze podany z zewnatrz (testy)
    if getattr(app.state, "cart", None) is None:
        logger.info("Inicjalizacja silnika koszyka")
        app.state.cart = CartAccessor(build_engine())
    yield


def create_app(engine: CartEngine | None = None) -> FastAPI:
    app = FastAPI(
        title="RocketShoes Cart",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.cart = CartAccessor(engine) if engine is not None else None

    # Include routers
    app.include_router(health.router)
    app.include_router(cart.router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
