"""행운 판정 — 사기(morale) 기반 치명 성공/실패 확률

제작/전투 판정 측이 base_chance와 현재 사기를 넘기고,
결과 bool만 받아 이중 수확/도구 파손 등의 효과를 처리한다.
"""

import logging
import random
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

# === 기본값 ===
DEFAULT_BASE_LUCK = 0.5
DEFAULT_CRITICAL_CHANCE = 0.05

# === 사기 구간별 보정 (하한, 보정값), 높은 구간부터 ===
MORALE_LUCK_BANDS: tuple[tuple[float, float], ...] = (
    (80, 0.2),
    (50, 0.0),
    (30, -0.1),
)
LOW_MORALE_MODIFIER = -0.2


@dataclass(frozen=True)
class CriticalRoll:
    """한 번의 행동에 대한 치명 성공/실패 판정 결과"""

    success: bool
    failure: bool
    modifier: float


def luck_modifier(morale: float) -> float:
    """사기 → 확률 보정. 보간 없는 계단 함수.

    80 이상 +0.2 / 50 이상 0.0 / 30 이상 -0.1 / 그 미만 -0.2
    """
    for threshold, modifier in MORALE_LUCK_BANDS:
        if morale >= threshold:
            return modifier
    return LOW_MORALE_MODIFIER


class LuckEngine:
    """행운 상태 보관 + 판정.

    base_luck은 저장/복원만 되고 판정에는 쓰이지 않는다.
    """

    def __init__(self, base_luck: float = DEFAULT_BASE_LUCK) -> None:
        self.base_luck = base_luck

    def luck_modifier(self, morale: float) -> float:
        return luck_modifier(morale)

    def roll_critical_success(
        self, base_chance: float = DEFAULT_CRITICAL_CHANCE, *, morale: float
    ) -> bool:
        """draw < base_chance + 보정 이면 성공. 범위 클램핑 없음."""
        return random.random() < base_chance + luck_modifier(morale)

    def roll_critical_failure(
        self, base_chance: float = DEFAULT_CRITICAL_CHANCE, *, morale: float
    ) -> bool:
        """draw < base_chance - 보정 이면 실패. 사기가 낮을수록 실패 증가."""
        return random.random() < base_chance - luck_modifier(morale)

    def roll_critical(
        self, base_chance: float = DEFAULT_CRITICAL_CHANCE, *, morale: float
    ) -> CriticalRoll:
        """성공/실패를 각각 독립 추첨."""
        result = CriticalRoll(
            success=self.roll_critical_success(base_chance, morale=morale),
            failure=self.roll_critical_failure(base_chance, morale=morale),
            modifier=luck_modifier(morale),
        )
        logger.debug(
            "Critical roll (base=%.2f, morale=%s): %s", base_chance, morale, result
        )
        return result

    def get_state(self) -> dict[str, Any]:
        return {"base_luck": self.base_luck}

    def set_state(self, state: Any) -> None:
        """저장 상태 복원. 없거나 [0, 1] 밖의 값이면 0.5."""
        value = state.get("base_luck") if isinstance(state, dict) else None
        if (
            isinstance(value, (int, float))
            and not isinstance(value, bool)
            and 0.0 <= value <= 1.0
        ):
            self.base_luck = float(value)
        else:
            self.base_luck = DEFAULT_BASE_LUCK
