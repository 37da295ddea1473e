"""인벤토리 — 슬롯, 스택, 획득일 관리"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from .models import Condition, ItemInstance

if TYPE_CHECKING:
    from .registry import ItemCatalog

logger = logging.getLogger(__name__)

BASE_INVENTORY_SLOTS = 10


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


@dataclass
class CarriedItem:
    """인벤토리 한 칸. 획득일은 아이템이 아니라 인벤토리가 보관한다."""

    instance: ItemInstance
    obtained_day: int
    quantity: int = 1


class Inventory:
    """플레이어 인벤토리.

    - stackable 아이템은 같은 item_id + condition 슬롯에 합쳐진다 (max_stack까지)
    - 그 외는 한 칸에 하나
    """

    def __init__(self, max_slots: int = BASE_INVENTORY_SLOTS) -> None:
        self.max_slots = max_slots
        self._slots: list[CarriedItem] = []

    @property
    def slots(self) -> list[CarriedItem]:
        return list(self._slots)

    def add_item(
        self, instance: ItemInstance, obtained_day: int, quantity: int = 1
    ) -> bool:
        """아이템 추가. 반환: 전량 추가 성공 여부.

        칸이 부족하면 들어갈 수 있는 만큼만 넣고 False.
        """
        if quantity <= 0:
            return True

        definition = instance.definition
        max_stack = definition.max_stack or 10

        if definition.stackable:
            existing = self._find_slot(instance.item_id, instance.condition)
            if existing is not None:
                space = max_stack - existing.quantity
                if space >= quantity:
                    existing.quantity += quantity
                    return True
                existing.quantity = max_stack
                quantity -= space

        while quantity > 0 and len(self._slots) < self.max_slots:
            add = min(quantity, max_stack) if definition.stackable else 1
            self._slots.append(
                CarriedItem(
                    instance=ItemInstance(
                        definition=definition, condition=instance.condition
                    ),
                    obtained_day=obtained_day,
                    quantity=add,
                )
            )
            quantity -= add

        if quantity > 0:
            logger.debug("Inventory full: %d x %s dropped", quantity, instance.item_id)
        return quantity == 0

    def remove_item(
        self,
        item_id: str,
        quantity: int = 1,
        condition: Optional[Condition] = None,
    ) -> bool:
        """뒤쪽 슬롯부터 제거. 반환: 요청 수량 전부 제거 여부."""
        for i in range(len(self._slots) - 1, -1, -1):
            slot = self._slots[i]
            if slot.instance.item_id != item_id:
                continue
            if condition is not None and slot.instance.condition != condition:
                continue

            if slot.quantity > quantity:
                slot.quantity -= quantity
                return True
            quantity -= slot.quantity
            del self._slots[i]
            if quantity <= 0:
                return True
        return False

    def find(
        self, item_id: str, condition: Optional[Condition] = None
    ) -> Optional[CarriedItem]:
        for slot in reversed(self._slots):
            if slot.instance.item_id == item_id and (
                condition is None or slot.instance.condition == condition
            ):
                return slot
        return None

    def count(self, item_id: str) -> int:
        return sum(s.quantity for s in self._slots if s.instance.item_id == item_id)

    def _find_slot(
        self, item_id: str, condition: Optional[Condition]
    ) -> Optional[CarriedItem]:
        for slot in self._slots:
            if slot.instance.item_id == item_id and slot.instance.condition == condition:
                return slot
        return None

    def get_state(self) -> dict[str, Any]:
        return {
            "max_slots": self.max_slots,
            "items": [
                {
                    "item_id": s.instance.item_id,
                    "condition": s.instance.condition.value
                    if s.instance.condition
                    else None,
                    "obtained_day": s.obtained_day,
                    "quantity": s.quantity,
                }
                for s in self._slots
            ],
        }

    def set_state(self, state: Any, catalog: ItemCatalog) -> None:
        """저장 상태 복원. 카탈로그에 없는 아이템/깨진 항목은 건너뛴다."""
        self._slots = []
        if not isinstance(state, dict):
            return

        max_slots = state.get("max_slots")
        if _is_positive_int(max_slots):
            self.max_slots = max_slots

        items = state.get("items")
        if not isinstance(items, list):
            return

        for raw in items:
            if not isinstance(raw, dict):
                continue
            item_id = raw.get("item_id")
            if not isinstance(item_id, str):
                logger.warning("Skipping saved item with invalid id: %r", item_id)
                continue
            instance = catalog.create_instance(item_id)
            if instance is None:
                logger.warning("Skipping unknown saved item: %s", item_id)
                continue
            condition = raw.get("condition")
            if (
                instance.is_food
                and isinstance(condition, str)
                and condition in {c.value for c in Condition}
            ):
                instance.condition = Condition(condition)

            obtained_day = raw.get("obtained_day", 1)
            quantity = raw.get("quantity", 1)
            self._slots.append(
                CarriedItem(
                    instance=instance,
                    obtained_day=obtained_day if _is_positive_int(obtained_day) else 1,
                    quantity=quantity if _is_positive_int(quantity) else 1,
                )
            )
