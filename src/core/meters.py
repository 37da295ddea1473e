"""미터 스냅샷 — 외부 미터 시스템이 넘겨주는 읽기 전용 값"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Meter:
    value: float


@dataclass(frozen=True)
class MeterSnapshot:
    """게임오버 판정 입력. health만 필수."""

    health: Meter
    morale: Optional[Meter] = None
    hydration: Optional[Meter] = None
    hunger: Optional[Meter] = None
    sickness_level: Optional[Meter] = None

    @classmethod
    def from_values(
        cls,
        health: float,
        morale: Optional[float] = None,
        hydration: Optional[float] = None,
        hunger: Optional[float] = None,
        sickness_level: Optional[float] = None,
    ) -> MeterSnapshot:
        """숫자 값으로 스냅샷 생성. None인 미터는 생략."""

        def _meter(value: Optional[float]) -> Optional[Meter]:
            return None if value is None else Meter(value)

        return cls(
            health=Meter(health),
            morale=_meter(morale),
            hydration=_meter(hydration),
            hunger=_meter(hunger),
            sickness_level=_meter(sickness_level),
        )
