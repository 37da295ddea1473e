"""아이템 시스템 Core — 순수 Python, 웹/저장소 무관"""

from .models import (
    Condition,
    ItemDefinition,
    ItemEffects,
    ItemInstance,
    ItemType,
    WaterProperties,
)
from .registry import ItemCatalog

__all__ = [
    "Condition",
    "ItemDefinition",
    "ItemEffects",
    "ItemInstance",
    "ItemType",
    "WaterProperties",
    "ItemCatalog",
]
