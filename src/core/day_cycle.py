"""
Day Cycle - 게임 내 시계
========================
실시간 delta를 게임 시간으로 환산하고 하루가 지나면 날짜를 올린다.

기본 속도 normal: 실제 1초 = 게임 72초 (실제 20분 = 게임 24시간).
밤은 18:00 ~ 06:00.
"""

from typing import Any

from src.core.logging import get_logger

logger = get_logger(__name__)

DAY_LENGTH = 24 * 60 * 60  # 게임 초
NIGHT_START_HOUR = 18
NIGHT_END_HOUR = 6

# 게임 속도별 배율 (게임 초 / 실제 초)
SPEED_MULTIPLIERS: dict[str, int] = {
    "fast": 144,  # 하루 약 10분
    "normal": 72,  # 하루 약 20분
    "slow": 48,  # 하루 약 30분
    "realist": 24,  # 하루 약 60분
}
DEFAULT_SPEED = "normal"


class DayCycle:
    """날짜 + 하루 중 시간 관리"""

    def __init__(self, max_days: int = 7, game_speed: str = DEFAULT_SPEED) -> None:
        self.current_day = 1
        self.max_days = max_days
        self.day_time: float = 0  # 오늘 경과 게임 초
        self.is_night = False
        self.game_speed = DEFAULT_SPEED
        self.set_game_speed(game_speed)

    @property
    def multiplier(self) -> int:
        return SPEED_MULTIPLIERS.get(self.game_speed, SPEED_MULTIPLIERS[DEFAULT_SPEED])

    def set_game_speed(self, speed: str) -> None:
        """속도 변경. 모르는 속도는 normal 배율로 동작."""
        if speed not in SPEED_MULTIPLIERS:
            logger.warning(f"알 수 없는 게임 속도: {speed}, normal 배율 적용")
        self.game_speed = speed

    def update(self, real_delta: float) -> bool:
        """실제 경과 초만큼 진행. 반환: 날짜가 바뀌었는지.

        하루 길이에 도달하면 day_time을 0으로 되돌린다 (초과분 버림).
        """
        if real_delta <= 0:
            return False

        self.day_time += real_delta * self.multiplier
        day_advanced = False
        if self.day_time >= DAY_LENGTH:
            self.day_time = 0
            self.current_day += 1
            day_advanced = True
            logger.info(f"Day {self.current_day} 시작")

        hours = self.get_hours()
        self.is_night = hours >= NIGHT_START_HOUR or hours < NIGHT_END_HOUR
        return day_advanced

    def get_hours(self) -> float:
        return (self.day_time / 3600) % 24

    def get_time_of_day(self) -> str:
        hours = self.get_hours()
        if 6 <= hours < 12:
            return "Morning"
        if 12 <= hours < 18:
            return "Afternoon"
        if 18 <= hours < 22:
            return "Evening"
        return "Night"

    def get_clock(self) -> str:
        """'HH:MM' 형식 게임 시각"""
        hours = int(self.get_hours())
        minutes = int((self.day_time % 3600) // 60)
        return f"{hours:02d}:{minutes:02d}"

    def get_day_progress(self) -> float:
        return self.day_time / DAY_LENGTH

    def get_remaining_time(self) -> float:
        return DAY_LENGTH - self.day_time

    def get_state(self) -> dict[str, Any]:
        return {
            "current_day": self.current_day,
            "day_time": self.day_time,
            "max_days": self.max_days,
            "is_night": self.is_night,
            "game_speed": self.game_speed,
        }

    def set_state(self, state: Any) -> None:
        """저장 상태 복원. 누락/손상 필드는 기본값."""
        if not isinstance(state, dict):
            state = {}

        day = state.get("current_day")
        day_time = state.get("day_time")
        max_days = state.get("max_days")
        is_night = state.get("is_night")
        speed = state.get("game_speed")

        self.current_day = (
            day if isinstance(day, int) and not isinstance(day, bool) and day >= 1 else 1
        )
        self.day_time = (
            day_time
            if isinstance(day_time, (int, float))
            and not isinstance(day_time, bool)
            and 0 <= day_time < DAY_LENGTH
            else 0
        )
        self.max_days = (
            max_days
            if isinstance(max_days, int) and not isinstance(max_days, bool) and max_days >= 1
            else 7
        )
        self.is_night = is_night if isinstance(is_night, bool) else False
        self.set_game_speed(speed if isinstance(speed, str) else DEFAULT_SPEED)
