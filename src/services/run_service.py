"""런 Service — 진행 중인 런(SurvivalEngine) 보관 및 조작

저장소 I/O 없음. 런은 프로세스 메모리에만 존재한다.
카탈로그는 모든 런이 공유하는 읽기 전용 테이블.
"""

import uuid
from typing import Any, Optional

from src.core.event_bus import EventBus
from src.core.engine import SurvivalEngine
from src.core.item.models import Condition, ItemDefinition, ItemEffects
from src.core.item.registry import ItemCatalog
from src.core.logging import get_logger
from src.core.luck import CriticalRoll
from src.core.meters import MeterSnapshot

logger = get_logger(__name__)


class RunService:
    """런 생성/조회 + 엔진 조작 위임"""

    def __init__(
        self,
        catalog: ItemCatalog,
        event_bus: EventBus,
        max_days: int = 7,
        game_speed: str = "normal",
        inventory_slots: int = 10,
    ) -> None:
        self._catalog = catalog
        self._bus = event_bus
        self._max_days = max_days
        self._game_speed = game_speed
        self._inventory_slots = inventory_slots
        self._runs: dict[str, SurvivalEngine] = {}

    # === 카탈로그 ===

    def get_item_definition(self, item_id: str) -> Optional[ItemDefinition]:
        return self._catalog.get_definition(item_id)

    # === 런 관리 ===

    def create_run(self) -> tuple[str, SurvivalEngine]:
        run_id = str(uuid.uuid4())
        engine = SurvivalEngine(
            catalog=self._catalog,
            event_bus=self._bus,
            max_days=self._max_days,
            game_speed=self._game_speed,
            inventory_slots=self._inventory_slots,
            run_id=run_id,
        )
        self._runs[run_id] = engine
        logger.info("Run created: %s", run_id)
        return run_id, engine

    def get_run(self, run_id: str) -> Optional[SurvivalEngine]:
        return self._runs.get(run_id)

    def end_run(self, run_id: str) -> bool:
        removed = self._runs.pop(run_id, None)
        if removed is not None:
            logger.info("Run removed: %s", run_id)
        return removed is not None

    def run_count(self) -> int:
        return len(self._runs)

    # === 조작 ===

    def tick(self, run_id: str, real_delta: float) -> Optional[bool]:
        engine = self.get_run(run_id)
        if engine is None:
            return None
        return engine.tick(real_delta)

    def set_paused(self, run_id: str, paused: Optional[bool]) -> Optional[bool]:
        """paused=None이면 토글. 반환: 적용 후 is_paused."""
        engine = self.get_run(run_id)
        if engine is None:
            return None
        if paused is None:
            engine.toggle_pause()
        elif paused:
            engine.pause()
        else:
            engine.resume()
        return engine.run_state.is_paused

    def evaluate(self, run_id: str, meters: MeterSnapshot) -> Optional[bool]:
        engine = self.get_run(run_id)
        if engine is None:
            return None
        return engine.check_game_over(meters)

    def roll(
        self, run_id: str, base_chance: float, morale: float
    ) -> Optional[CriticalRoll]:
        engine = self.get_run(run_id)
        if engine is None:
            return None
        return engine.roll_critical(base_chance, morale=morale)

    def pick_up(
        self,
        run_id: str,
        item_id: str,
        condition: Optional[Condition] = None,
        quantity: int = 1,
    ) -> Optional[bool]:
        engine = self.get_run(run_id)
        if engine is None:
            return None
        return engine.pick_up(item_id, condition, quantity)

    def consume(
        self, run_id: str, item_id: str, condition: Optional[Condition] = None
    ) -> Optional[ItemEffects]:
        engine = self.get_run(run_id)
        if engine is None:
            return None
        return engine.consume(item_id, condition)

    def snapshot(self, run_id: str) -> Optional[dict[str, Any]]:
        engine = self.get_run(run_id)
        if engine is None:
            return None
        return engine.get_state()

    def restore(self, run_id: str, data: dict[str, Any]) -> bool:
        engine = self.get_run(run_id)
        if engine is None:
            return False
        engine.set_state(data)
        logger.info("Run restored: %s (day=%d)", run_id, engine.current_day)
        return True
