"""아이템 카탈로그 — JSON 로드 후 읽기 전용"""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

from .models import Condition, ItemDefinition, ItemInstance, ItemType

logger = logging.getLogger(__name__)


def _optional_int(raw: dict, key: str) -> Optional[int]:
    value = raw.get(key)
    return None if value is None else int(value)


def _optional_float(raw: dict, key: str) -> Optional[float]:
    value = raw.get(key)
    return None if value is None else float(value)


class ItemCatalog:
    """
    아이템 정의 저장소.
    서버 시작 시 한 번 로드하고 이후엔 조회만 한다.
    조회 결과는 항상 복사본이므로 호출자가 공유 상태를 바꿀 수 없다.
    """

    def __init__(self) -> None:
        self._definitions: dict[str, ItemDefinition] = {}

    def load_from_json(self, path: str | Path) -> int:
        """seed_items.json 로드. 반환: 로드된 수량.

        JSON 배열의 각 객체를 ItemDefinition으로 변환.
        item_type / condition은 문자열 → Enum 변환.
        키 누락이나 잘못된 값이 있는 항목은 경고 후 건너뛴다.
        """
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            raw_list: list[dict] = json.load(f)

        count = 0
        for raw in raw_list:
            try:
                condition = raw.get("condition")
                definition = ItemDefinition(
                    item_id=raw["item_id"],
                    item_type=ItemType(raw["item_type"]),
                    name=raw.get("name", ""),
                    description=raw.get("description", ""),
                    stackable=bool(raw.get("stackable", False)),
                    max_stack=int(raw.get("max_stack", 10)),
                    nutrition=_optional_int(raw, "nutrition"),
                    expires_in=_optional_int(raw, "expires_in"),
                    condition=Condition(condition) if condition else None,
                    hygiene_cost=_optional_int(raw, "hygiene_cost"),
                    morale_boost=_optional_int(raw, "morale_boost"),
                    hydration=_optional_int(raw, "hydration"),
                    sickness_risk=_optional_float(raw, "sickness_risk"),
                    capacity=_optional_int(raw, "capacity"),
                )
                self._definitions[definition.item_id] = definition
                count += 1
            except (KeyError, ValueError, TypeError) as e:
                logger.warning(
                    "Failed to load item definition: %s — %s",
                    raw.get("item_id", "?"),
                    e,
                )

        logger.info("Loaded %d item definitions from %s", count, path)
        return count

    def register(self, definition: ItemDefinition) -> None:
        """정의 등록. 이미 존재하는 item_id면 경고 로그 후 덮어쓴다."""
        if definition.item_id in self._definitions:
            logger.warning("Overwriting existing definition: %s", definition.item_id)
        self._definitions[definition.item_id] = definition

    def get_definition(self, item_id: str) -> Optional[ItemDefinition]:
        """item_id로 정의 조회. 없으면 None. 독립 복사본 반환."""
        definition = self._definitions.get(item_id)
        if definition is None:
            return None
        return replace(definition)

    def create_instance(
        self,
        item_id: str,
        condition: Condition | str | None = None,
    ) -> Optional[ItemInstance]:
        """정의로부터 새 인스턴스 생성. 없는 item_id면 None.

        condition 지정은 food에만 적용된다.
        카탈로그에 condition이 없는 food는 Fresh로 시작.
        """
        definition = self.get_definition(item_id)
        if definition is None:
            logger.debug("Unknown item id: %s", item_id)
            return None

        if definition.item_type != ItemType.FOOD:
            return ItemInstance(definition=definition, condition=definition.condition)

        initial = definition.condition or Condition.FRESH
        if condition:
            try:
                initial = Condition(condition)
            except ValueError:
                logger.warning(
                    "Ignoring unknown condition %r for %s", condition, item_id
                )

        return ItemInstance(definition=definition, condition=initial)

    def get_all(self) -> list[ItemDefinition]:
        """전체 정의 목록."""
        return list(self._definitions.values())

    def search_by_type(self, item_type: ItemType) -> list[ItemDefinition]:
        """item_type이 일치하는 정의 반환."""
        return [d for d in self._definitions.values() if d.item_type == item_type]

    def count(self) -> int:
        """등록된 정의 수."""
        return len(self._definitions)
