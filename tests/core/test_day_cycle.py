"""DayCycle 테스트"""

import pytest

from src.core.day_cycle import DAY_LENGTH, SPEED_MULTIPLIERS, DayCycle


class TestUpdate:
    def test_normal_speed(self) -> None:
        cycle = DayCycle()
        cycle.update(10)
        assert cycle.day_time == 720
        assert cycle.current_day == 1

    def test_rollover(self) -> None:
        cycle = DayCycle()
        # 실제 20분 = 게임 하루
        assert cycle.update(20 * 60) is True
        assert cycle.current_day == 2
        assert cycle.day_time == 0

    def test_no_rollover_before_day_end(self) -> None:
        cycle = DayCycle()
        assert cycle.update(20 * 60 - 1) is False
        assert cycle.current_day == 1

    def test_non_positive_delta(self) -> None:
        cycle = DayCycle()
        assert cycle.update(0) is False
        assert cycle.update(-5) is False
        assert cycle.day_time == 0

    @pytest.mark.parametrize("speed", list(SPEED_MULTIPLIERS))
    def test_speeds(self, speed: str) -> None:
        cycle = DayCycle(game_speed=speed)
        cycle.update(1)
        assert cycle.day_time == SPEED_MULTIPLIERS[speed]

    def test_unknown_speed_uses_normal(self) -> None:
        cycle = DayCycle(game_speed="ludicrous")
        assert cycle.multiplier == SPEED_MULTIPLIERS["normal"]


class TestTimeOfDay:
    def _at(self, hours: float) -> DayCycle:
        cycle = DayCycle()
        cycle.day_time = hours * 3600
        return cycle

    @pytest.mark.parametrize(
        "hours, label",
        [(0, "Night"), (5.9, "Night"), (6, "Morning"), (12, "Afternoon"),
         (18, "Evening"), (21.9, "Evening"), (22, "Night")],
    )
    def test_labels(self, hours: float, label: str) -> None:
        assert self._at(hours).get_time_of_day() == label

    def test_clock(self) -> None:
        cycle = self._at(0)
        cycle.day_time = 13 * 3600 + 5 * 60 + 30
        assert cycle.get_clock() == "13:05"

    def test_night_flag_updated(self) -> None:
        cycle = DayCycle()
        cycle.update(1)  # 00:01
        assert cycle.is_night is True
        cycle.day_time = 6 * 3600
        cycle.update(1)
        assert cycle.is_night is False

    def test_progress(self) -> None:
        cycle = self._at(12)
        assert cycle.get_day_progress() == 0.5
        assert cycle.get_remaining_time() == DAY_LENGTH / 2


class TestDayCycleState:
    def test_round_trip(self) -> None:
        cycle = DayCycle(game_speed="fast")
        cycle.update(100)
        restored = DayCycle()
        restored.set_state(cycle.get_state())
        assert restored.get_state() == cycle.get_state()

    def test_malformed(self) -> None:
        cycle = DayCycle()
        cycle.set_state(
            {"current_day": -1, "day_time": DAY_LENGTH, "max_days": "x",
             "is_night": 1, "game_speed": 5}
        )
        assert cycle.current_day == 1
        assert cycle.day_time == 0
        assert cycle.max_days == 7
        assert cycle.is_night is False
        assert cycle.game_speed == "normal"
