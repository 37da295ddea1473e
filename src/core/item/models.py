"""아이템 도메인 모델 (웹/저장소 무관)"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ItemType(str, Enum):
    FOOD = "food"
    CONSUMABLE = "consumable"
    CONTAINER = "container"
    TOOL = "tool"
    MATERIAL = "material"
    WEAPON = "weapon"
    CLOTHING = "clothing"
    APPLIANCE = "appliance"
    STRUCTURE = "structure"
    MEDICAL = "medical"


class Condition(str, Enum):
    """음식 신선도. Fresh → Stale → Spoiled 순으로만 진행."""

    FRESH = "Fresh"
    STALE = "Stale"
    SPOILED = "Spoiled"


@dataclass(frozen=True)
class ItemDefinition:
    """아이템 정의 — 불변. seed_items.json에서 로드."""

    item_id: str  # "canned_beans"
    item_type: ItemType

    name: str = ""
    description: str = ""

    # 스택
    stackable: bool = False
    max_stack: int = 10

    # 음식
    nutrition: Optional[int] = None
    expires_in: Optional[int] = None  # 등급 하락까지 일수
    condition: Optional[Condition] = None  # 음식 기본 상태

    # 공통 효과
    hygiene_cost: Optional[int] = None
    morale_boost: Optional[int] = None

    # 물/용기
    hydration: Optional[int] = None
    sickness_risk: Optional[float] = None
    capacity: Optional[int] = None


@dataclass
class ItemInstance:
    """게임 내 아이템 개체. 정의 복사본 + 가변 condition.

    획득일(obtained day)은 인벤토리가 보관한다. 여기엔 없음.
    """

    definition: ItemDefinition
    condition: Optional[Condition] = None

    @property
    def item_id(self) -> str:
        return self.definition.item_id

    @property
    def item_type(self) -> ItemType:
        return self.definition.item_type

    @property
    def is_food(self) -> bool:
        return self.definition.item_type == ItemType.FOOD


@dataclass(frozen=True)
class WaterProperties:
    """물/용기 속성. condition과 무관."""

    hydration: int
    hygiene_cost: int
    sickness_risk: float


@dataclass(frozen=True)
class ItemEffects:
    """아이템 하나의 현재 상태 기준 파생 효과 묶음."""

    nutrition: int
    hygiene_penalty: int
    morale_boost: int
    water: Optional[WaterProperties] = None
