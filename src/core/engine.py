"""
Survival Engine - 런 통합 모듈
==============================
카탈로그, 행운, 런 상태, 날짜, 인벤토리, 도구 내구도를 묶어
호스트 게임 루프가 호출하는 하나의 진입점을 제공한다.

흐름:
    tick(dt)            → 게임 시간/날짜 진행, 날짜가 바뀌면 음식 상태 재평가
    roll_critical(...)  → 제작/전투 판정 시 치명 성공/실패
    check_game_over(m)  → 미터 변화 후 종료 조건 판정
"""

from datetime import datetime, timezone
from typing import Any, Optional

from src.core.day_cycle import DayCycle
from src.core.event_bus import EventBus, GameEvent
from src.core.event_types import EventTypes
from src.core.item.condition import advance_condition
from src.core.item.durability import ToolWearTracker
from src.core.item.effects import get_item_effects
from src.core.item.inventory import BASE_INVENTORY_SLOTS, Inventory
from src.core.item.models import Condition, ItemEffects
from src.core.item.registry import ItemCatalog
from src.core.logging import get_logger
from src.core.luck import DEFAULT_CRITICAL_CHANCE, CriticalRoll, LuckEngine
from src.core.meters import MeterSnapshot
from src.core.run_state import MAX_DAYS, RunState

logger = get_logger(__name__)

SAVE_VERSION = "1.0"
EVENT_SOURCE = "survival_engine"


class SurvivalEngine:
    """런 하나를 구동하는 엔진.

    카탈로그는 여러 엔진이 공유하는 읽기 전용 테이블로 주입받는다.
    """

    def __init__(
        self,
        catalog: ItemCatalog,
        event_bus: Optional[EventBus] = None,
        max_days: int = MAX_DAYS,
        game_speed: str = "normal",
        inventory_slots: int = BASE_INVENTORY_SLOTS,
        run_id: str = "local",
    ) -> None:
        self.run_id = run_id
        self.source = f"{EVENT_SOURCE}:{run_id}"
        self.catalog = catalog
        self.event_bus = event_bus or EventBus()
        self.run_state = RunState(max_days=max_days)
        self.day_cycle = DayCycle(max_days=max_days, game_speed=game_speed)
        self.luck = LuckEngine()
        self.inventory = Inventory(max_slots=inventory_slots)
        self.tools = ToolWearTracker()

    @property
    def current_day(self) -> int:
        return self.run_state.current_day

    # === 시간 ===

    def tick(self, real_delta: float) -> bool:
        """게임 루프 한 틱. 반환: 날짜가 바뀌었는지.

        일시정지/게임오버 중에는 아무것도 진행하지 않는다.
        """
        state = self.run_state
        if state.is_paused or state.is_game_over:
            return False

        state.advance_time(real_delta)
        day_advanced = self.day_cycle.update(real_delta)
        if day_advanced:
            state.current_day = self.day_cycle.current_day
            self.event_bus.emit(
                GameEvent(
                    event_type=EventTypes.DAY_ADVANCED,
                    data={"day": state.current_day},
                    source=self.source,
                )
            )
            self.refresh_conditions()

        if not self.event_bus.is_propagating:
            self.event_bus.reset_chain()
        return day_advanced

    def refresh_conditions(self) -> int:
        """소지 음식 전체의 condition 재평가. 반환: 상태가 바뀐 슬롯 수."""
        changed = 0
        for index, slot in enumerate(self.inventory.slots):
            before = slot.instance.condition
            advance_condition(slot.instance, self.current_day, slot.obtained_day)
            after = slot.instance.condition
            if before == after:
                continue
            changed += 1
            self.event_bus.emit(
                GameEvent(
                    event_type=EventTypes.ITEM_CONDITION_CHANGED,
                    data={
                        "item_id": slot.instance.item_id,
                        "from": before.value if before else None,
                        "to": after.value if after else None,
                        "quantity": slot.quantity,
                    },
                    source=self.source,
                    key=f"{index}:{slot.instance.item_id}",
                )
            )
        if changed:
            logger.info(f"Day {self.current_day}: {changed}개 슬롯 상태 변화")
        if not self.event_bus.is_propagating:
            self.event_bus.reset_chain()
        return changed

    # === 일시정지 ===

    def pause(self) -> None:
        if self.run_state.is_paused or self.run_state.is_game_over:
            return
        self.run_state.pause()
        self._emit_simple(EventTypes.RUN_PAUSED)

    def resume(self) -> None:
        if not self.run_state.is_paused or self.run_state.is_game_over:
            return
        self.run_state.resume()
        self._emit_simple(EventTypes.RUN_RESUMED)

    def toggle_pause(self) -> None:
        if self.run_state.is_paused:
            self.resume()
        else:
            self.pause()

    # === 아이템 ===

    def pick_up(
        self,
        item_id: str,
        condition: Condition | str | None = None,
        quantity: int = 1,
    ) -> bool:
        """카탈로그에서 인스턴스를 만들어 오늘 날짜로 인벤토리에 추가."""
        instance = self.catalog.create_instance(item_id, condition)
        if instance is None:
            return False
        return self.inventory.add_item(instance, self.current_day, quantity)

    def consume(
        self, item_id: str, condition: Optional[Condition] = None
    ) -> Optional[ItemEffects]:
        """인벤토리에서 하나 소비하고 효과 반환. 없으면 None.

        미터 반영은 호출자(미터 시스템) 몫.
        """
        slot = self.inventory.find(item_id, condition)
        if slot is None:
            return None

        effects = get_item_effects(slot.instance)
        self.inventory.remove_item(item_id, 1, slot.instance.condition)
        self._publish(
            GameEvent(
                event_type=EventTypes.ITEM_CONSUMED,
                data={
                    "item_id": item_id,
                    "nutrition": effects.nutrition,
                    "hygiene_penalty": effects.hygiene_penalty,
                    "morale_boost": effects.morale_boost,
                },
                source=self.source,
            )
        )
        return effects

    def use_tool(self, tool_id: str, wear: float = 1) -> bool:
        usable = self.tools.use_tool(tool_id, wear)
        if not usable:
            self._publish(
                GameEvent(
                    event_type=EventTypes.TOOL_BROKEN,
                    data={"tool_id": tool_id},
                    source=self.source,
                    key=tool_id,
                )
            )
        return usable

    # === 판정 ===

    def roll_critical(
        self, base_chance: float = DEFAULT_CRITICAL_CHANCE, *, morale: float
    ) -> CriticalRoll:
        return self.luck.roll_critical(base_chance, morale=morale)

    def check_game_over(self, meters: MeterSnapshot) -> bool:
        """미터 변화 후 호출. 이번에 게임오버가 되면 이벤트 발행."""
        self.run_state.current_day = max(
            self.run_state.current_day, self.day_cycle.current_day
        )
        triggered = self.run_state.evaluate_game_over(meters)
        if triggered:
            self._publish(
                GameEvent(
                    event_type=EventTypes.GAME_OVER,
                    data={
                        "reason": self.run_state.game_over_reason,
                        "day": self.current_day,
                        "victory": meters.health.value > 0,
                    },
                    source=self.source,
                )
            )
        return triggered

    # === 저장 번들 ===

    def get_state(self) -> dict[str, Any]:
        """저장용 번들. 형식은 dict, 직렬화는 호출자 몫."""
        return {
            "version": SAVE_VERSION,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "run_state": self.run_state.get_state(),
            "day_cycle": self.day_cycle.get_state(),
            "luck": self.luck.get_state(),
            "tools": self.tools.get_state(),
            "inventory": self.inventory.get_state(),
        }

    def set_state(self, data: Any) -> None:
        """번들 복원. 없는 섹션은 현재 상태를 유지한다."""
        if not isinstance(data, dict):
            logger.warning("저장 번들 형식 오류, 복원 건너뜀")
            return

        version = data.get("version")
        if version != SAVE_VERSION:
            logger.warning(f"저장 버전 불일치: {version!r} (현재 {SAVE_VERSION})")

        if "run_state" in data:
            self.run_state.set_state(data["run_state"])
        if "day_cycle" in data:
            self.day_cycle.set_state(data["day_cycle"])
        if "luck" in data:
            self.luck.set_state(data["luck"])
        if "tools" in data:
            self.tools.set_state(data["tools"])
        if "inventory" in data:
            self.inventory.set_state(data["inventory"], self.catalog)

        # 두 섹션이 모두 있으면 큰 쪽, 하나만 있으면 저장된 쪽 날짜를 따른다
        has_run_state = "run_state" in data
        has_day_cycle = "day_cycle" in data
        if has_run_state and not has_day_cycle:
            day = self.run_state.current_day
        elif has_day_cycle and not has_run_state:
            day = self.day_cycle.current_day
        else:
            day = max(self.run_state.current_day, self.day_cycle.current_day)
        self.run_state.current_day = day
        self.day_cycle.current_day = day

    def _publish(self, event: GameEvent) -> None:
        """틱 밖에서 호출되는 조작용. 발행 직후 체인 초기화."""
        self.event_bus.emit(event)
        if not self.event_bus.is_propagating:
            self.event_bus.reset_chain()

    def _emit_simple(self, event_type: str) -> None:
        self._publish(
            GameEvent(
                event_type=event_type,
                data={"day": self.current_day, "game_time": self.run_state.game_time},
                source=self.source,
            )
        )
