"""섭취 효과 계산 — 현재 condition 기준 영양/위생/사기/수분"""

import math
from typing import Optional

from .models import Condition, ItemEffects, ItemInstance, ItemType, WaterProperties

# === condition별 영양 배율 ===
NUTRITION_MULTIPLIERS: dict[Condition, float] = {
    Condition.FRESH: 1.0,
    Condition.STALE: 0.7,
    Condition.SPOILED: 0.3,
}

# === condition별 위생 패널티 (아이템 자체 hygiene_cost를 대체) ===
HYGIENE_PENALTIES: dict[Condition, int] = {
    Condition.STALE: 5,
    Condition.SPOILED: 15,
}

# === condition별 사기 감소 ===
MORALE_PENALTIES: dict[Condition, int] = {
    Condition.STALE: 5,
    Condition.SPOILED: 15,
}

DEFAULT_HYDRATION = 20

WATER_ITEM_TYPES = (ItemType.CONSUMABLE, ItemType.CONTAINER)


def get_nutrition(item: ItemInstance) -> int:
    """영양값. food 외 0.
    Stale ×0.7, Spoiled ×0.3 (내림).
    """
    if not item.is_food:
        return 0

    nutrition = item.definition.nutrition or 0
    multiplier = NUTRITION_MULTIPLIERS.get(item.condition, 1.0)
    if multiplier == 1.0:
        return nutrition
    return math.floor(nutrition * multiplier)


def get_hygiene_penalty(item: ItemInstance) -> int:
    """위생 패널티. food 외 0.
    Stale 5, Spoiled 15 고정. Fresh는 아이템의 hygiene_cost.
    """
    if not item.is_food:
        return 0

    if item.condition in HYGIENE_PENALTIES:
        return HYGIENE_PENALTIES[item.condition]
    return item.definition.hygiene_cost or 0


def get_morale_boost(item: ItemInstance) -> int:
    """사기 변화량. food 외 0. 음수 가능."""
    if not item.is_food:
        return 0

    boost = item.definition.morale_boost or 0
    return boost - MORALE_PENALTIES.get(item.condition, 0)


def get_water_properties(item: ItemInstance) -> Optional[WaterProperties]:
    """consumable/container만 수분 속성 반환, 그 외 None."""
    if item.item_type not in WATER_ITEM_TYPES:
        return None

    definition = item.definition
    return WaterProperties(
        hydration=definition.hydration or DEFAULT_HYDRATION,
        hygiene_cost=definition.hygiene_cost or 0,
        sickness_risk=definition.sickness_risk or 0,
    )


def get_item_effects(item: ItemInstance) -> ItemEffects:
    return ItemEffects(
        nutrition=get_nutrition(item),
        hygiene_penalty=get_hygiene_penalty(item),
        morale_boost=get_morale_boost(item),
        water=get_water_properties(item),
    )
