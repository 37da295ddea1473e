"""런 상태 컨트롤러 — 일시정지, 게임 시간, 게임오버 판정, 장소별 전리품

규칙:
- game_time은 감소하지 않으며, 일시정지/게임오버 중에는 증가하지 않는다
- is_game_over는 한 번 True가 되면 런이 끝날 때까지 유지된다
- current_day는 외부(DayCycle)가 올린다. 여기서는 판정에만 사용
- scene_loot는 호스트가 읽고 교체한다. 컨트롤러는 항목을 추가/삭제하지 않는다
"""

from __future__ import annotations

import copy
import time
from dataclasses import dataclass
from typing import Any, Callable

from src.core.logging import get_logger
from src.core.meters import MeterSnapshot

logger = get_logger(__name__)

MAX_DAYS = 7
SICKNESS_FATAL_LEVEL = 80

# === 게임오버 사유 ===
REASON_MORALE = "You lost the will to live."
REASON_DEHYDRATION = "Dehydration killed you."
REASON_STARVATION = "Starvation claimed you."
REASON_SICKNESS = "Sickness overcame you."
REASON_INJURIES = "You died from your injuries."
REASON_VICTORY_TEMPLATE = "You survived {days} days! Help has arrived..."

SceneLoot = dict[str, dict[str, list[str]]]


def _default_scene_loot() -> SceneLoot:
    return {"A": {}, "B": {}}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_scene_loot(value: Any) -> bool:
    """장면 → 장소 → item_id 목록 형태인지 전체 검사"""
    if not isinstance(value, dict):
        return False
    for scene_id, locations in value.items():
        if not isinstance(scene_id, str) or not isinstance(locations, dict):
            return False
        for location_id, item_ids in locations.items():
            if not isinstance(location_id, str) or not isinstance(item_ids, list):
                return False
            if not all(isinstance(item_id, str) for item_id in item_ids):
                return False
    return True


@dataclass(frozen=True)
class SnapshotField:
    """복원 시 필드 하나의 기본값과 유효성 검사"""

    default: Callable[[], Any]
    is_valid: Callable[[Any], bool]


# 스냅샷 필드별 기본값. 누락/잘못된 타입이면 기본값으로 대체.
SNAPSHOT_FIELDS: dict[str, SnapshotField] = {
    "is_paused": SnapshotField(lambda: False, lambda v: isinstance(v, bool)),
    "is_game_over": SnapshotField(lambda: False, lambda v: isinstance(v, bool)),
    "game_over_reason": SnapshotField(lambda: "", lambda v: isinstance(v, str)),
    "current_day": SnapshotField(
        lambda: 1,
        lambda v: isinstance(v, int) and not isinstance(v, bool) and v >= 1,
    ),
    "game_time": SnapshotField(lambda: 0, lambda v: _is_number(v) and v >= 0),
    "scene_loot": SnapshotField(_default_scene_loot, _is_scene_loot),
}


class RunState:
    """런 하나의 진행 상태.

    사용 패턴:
        state = RunState()
        state.advance_time(dt)
        if state.evaluate_game_over(meters):
            show_end_screen(state.game_over_reason)
    """

    def __init__(self, max_days: int = MAX_DAYS) -> None:
        self.max_days = max_days
        self.is_paused = False
        self.is_game_over = False
        self.game_over_reason = ""
        self.current_day = 1
        self.game_time: float = 0
        # 호스트의 delta 계산용. 시뮬레이션 상태 아님
        self.last_update_time = time.monotonic()
        self._scene_loot: SceneLoot = _default_scene_loot()

    # === 일시정지 ===

    def pause(self) -> None:
        if self.is_game_over:
            return
        self.is_paused = True

    def resume(self) -> None:
        if self.is_game_over:
            return
        self.is_paused = False
        self.last_update_time = time.monotonic()

    def toggle_pause(self) -> None:
        if self.is_paused:
            self.resume()
        else:
            self.pause()

    # === 시간 ===

    def advance_time(self, delta_seconds: float) -> None:
        """일시정지/게임오버가 아닐 때만 game_time 증가. 음수 delta는 무시."""
        if self.is_paused or self.is_game_over or delta_seconds <= 0:
            return
        self.game_time += delta_seconds

    # === 게임오버 ===

    def evaluate_game_over(self, meters: MeterSnapshot) -> bool:
        """게임오버 판정. 반환: 이번 호출에서 게임오버가 발생했는지.

        1. health <= 0 → 사망. 사유 우선순위: 사기 > 탈수 > 기아 > 질병 > 부상
        2. current_day > max_days → 생존 성공
        이미 게임오버면 아무것도 바꾸지 않고 False.
        """
        if self.is_game_over:
            return False

        if meters.health.value <= 0:
            self._latch_game_over(self._death_reason(meters))
            return True

        if self.current_day > self.max_days:
            self._latch_game_over(REASON_VICTORY_TEMPLATE.format(days=self.max_days))
            return True

        return False

    @staticmethod
    def _death_reason(meters: MeterSnapshot) -> str:
        if meters.morale is not None and meters.morale.value <= 0:
            return REASON_MORALE
        if meters.hydration is not None and meters.hydration.value <= 0:
            return REASON_DEHYDRATION
        if meters.hunger is not None and meters.hunger.value <= 0:
            return REASON_STARVATION
        if (
            meters.sickness_level is not None
            and meters.sickness_level.value >= SICKNESS_FATAL_LEVEL
        ):
            return REASON_SICKNESS
        return REASON_INJURIES

    def _latch_game_over(self, reason: str) -> None:
        self.is_game_over = True
        self.game_over_reason = reason
        logger.info(f"게임오버 (day={self.current_day}): {reason}")

    # === 전리품 ===

    @property
    def scene_loot(self) -> SceneLoot:
        """장면 → 장소 → 남은 item_id 목록 (원본 참조)"""
        return self._scene_loot

    def get_loot(self, scene_id: str, location_id: str) -> list[str]:
        """장소에 남은 아이템 목록 복사본. 없으면 빈 리스트."""
        return list(self._scene_loot.get(scene_id, {}).get(location_id, []))

    def set_loot(self, scene_id: str, location_id: str, item_ids: list[str]) -> None:
        """장소의 아이템 목록을 통째로 교체."""
        self._scene_loot.setdefault(scene_id, {})[location_id] = list(item_ids)

    # === 스냅샷 ===

    def get_state(self) -> dict[str, Any]:
        """깊은 복사 스냅샷. 이후 라이브 상태 변경과 공유되지 않는다."""
        return {
            "is_paused": self.is_paused,
            "is_game_over": self.is_game_over,
            "game_over_reason": self.game_over_reason,
            "current_day": self.current_day,
            "game_time": self.game_time,
            "scene_loot": copy.deepcopy(self._scene_loot),
        }

    def set_state(self, state: Any) -> None:
        """필드별 복원. 누락/손상 필드는 SNAPSHOT_FIELDS 기본값 사용."""
        if not isinstance(state, dict):
            logger.warning("스냅샷 형식 오류, 전체 기본값으로 복원")
            state = {}

        restored: dict[str, Any] = {}
        for name, spec in SNAPSHOT_FIELDS.items():
            value = state.get(name)
            if spec.is_valid(value):
                restored[name] = copy.deepcopy(value)
            else:
                if name in state:
                    logger.warning(f"스냅샷 필드 손상: {name}={value!r}, 기본값 사용")
                restored[name] = spec.default()

        self.is_paused = restored["is_paused"]
        self.is_game_over = restored["is_game_over"]
        self.game_over_reason = restored["game_over_reason"]
        self.current_day = restored["current_day"]
        self.game_time = restored["game_time"]
        self._scene_loot = restored["scene_loot"]
