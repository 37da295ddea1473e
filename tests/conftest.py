"""Shared test fixtures."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from src.core.event_bus import EventBus
from src.core.item.registry import ItemCatalog
from src.main import app

SEED_ITEMS_PATH = Path("src/data/seed_items.json")


@pytest.fixture()
def catalog() -> ItemCatalog:
    """seed_items.json을 로드한 카탈로그"""
    catalog = ItemCatalog()
    catalog.load_from_json(SEED_ITEMS_PATH)
    return catalog


@pytest.fixture()
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture()
def client() -> TestClient:
    """FastAPI TestClient. with 블록으로 lifespan(카탈로그 로드)을 실행."""
    with TestClient(app) as test_client:
        yield test_client
