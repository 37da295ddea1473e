"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from src.api.health import router as health_router
from src.api.items import router as items_router
from src.api.runs import router as runs_router
from src.config import settings
from src.core.event_bus import EventBus
from src.core.item.registry import ItemCatalog
from src.core.logging import get_logger, setup_logging
from src.services.run_service import RunService

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    # 카탈로그는 시작 시 한 번만 로드
    logger.info("Loading item catalog...")
    catalog = ItemCatalog()
    count = catalog.load_from_json(settings.SEED_ITEMS_PATH)
    logger.info(f"Item catalog loaded ({count} definitions).")

    event_bus = EventBus()
    app.state.event_bus = event_bus
    app.state.run_service = RunService(
        catalog=catalog,
        event_bus=event_bus,
        max_days=settings.MAX_DAYS,
        game_speed=settings.GAME_SPEED,
        inventory_slots=settings.INVENTORY_SLOTS,
    )
    logger.info("RunService initialized.")

    yield

    logger.info("Shutting down...")
    app.state.run_service = None


app = FastAPI(title="Seven Days Survival Core", lifespan=lifespan)

app.include_router(health_router)
app.include_router(items_router)
app.include_router(runs_router)
