"""LuckEngine 테스트 — 사기 구간 보정 + 치명 판정"""

from unittest.mock import patch

import pytest

from src.core.luck import DEFAULT_BASE_LUCK, CriticalRoll, LuckEngine, luck_modifier

RANDOM_PATH = "src.core.luck.random.random"


class TestLuckModifier:
    @pytest.mark.parametrize(
        "morale, expected",
        [
            (100, 0.2),
            (80, 0.2),
            (79.9, 0.0),
            (50, 0.0),
            (49, -0.1),
            (30, -0.1),
            (29.99, -0.2),
            (0, -0.2),
            (-10, -0.2),
        ],
    )
    def test_bands(self, morale: float, expected: float) -> None:
        assert luck_modifier(morale) == expected

    def test_engine_delegates(self) -> None:
        assert LuckEngine().luck_modifier(85) == 0.2


class TestCriticalSuccess:
    def test_high_morale_success(self) -> None:
        # 0.10 < 0.05 + 0.2
        with patch(RANDOM_PATH, return_value=0.10):
            assert LuckEngine().roll_critical_success(0.05, morale=85) is True

    def test_neutral_morale_miss(self) -> None:
        with patch(RANDOM_PATH, return_value=0.10):
            assert LuckEngine().roll_critical_success(0.05, morale=60) is False

    def test_strict_less_than(self) -> None:
        with patch(RANDOM_PATH, return_value=0.25):
            assert LuckEngine().roll_critical_success(0.25, morale=60) is False

    def test_low_morale_never_succeeds_at_default(self) -> None:
        # 0.05 - 0.2 < 0 이므로 어떤 draw도 성공 못함
        with patch(RANDOM_PATH, return_value=0.0):
            assert LuckEngine().roll_critical_success(morale=10) is False

    def test_probability_not_clamped(self) -> None:
        # 0.95 + 0.2 > 1 → 항상 성공
        with patch(RANDOM_PATH, return_value=0.999):
            assert LuckEngine().roll_critical_success(0.95, morale=90) is True


class TestCriticalFailure:
    def test_low_morale_failure(self) -> None:
        # 0.20 < 0.05 - (-0.2)
        with patch(RANDOM_PATH, return_value=0.20):
            assert LuckEngine().roll_critical_failure(0.05, morale=10) is True

    def test_high_morale_never_fails_at_default(self) -> None:
        with patch(RANDOM_PATH, return_value=0.0):
            assert LuckEngine().roll_critical_failure(morale=90) is False

    def test_mid_band(self) -> None:
        # 0.05 - (-0.1) = 0.15
        with patch(RANDOM_PATH, return_value=0.14):
            assert LuckEngine().roll_critical_failure(0.05, morale=40) is True
        with patch(RANDOM_PATH, return_value=0.16):
            assert LuckEngine().roll_critical_failure(0.05, morale=40) is False


class TestRollCritical:
    def test_independent_draws(self) -> None:
        with patch(RANDOM_PATH, side_effect=[0.10, 0.01]) as mock_random:
            result = LuckEngine().roll_critical(0.05, morale=60)
        assert mock_random.call_count == 2
        assert result == CriticalRoll(success=False, failure=True, modifier=0.0)

    def test_both_can_be_true(self) -> None:
        with patch(RANDOM_PATH, side_effect=[0.0, 0.0]):
            result = LuckEngine().roll_critical(0.3, morale=60)
        assert result.success is True
        assert result.failure is True


class TestLuckState:
    def test_round_trip(self) -> None:
        engine = LuckEngine(base_luck=0.8)
        restored = LuckEngine()
        restored.set_state(engine.get_state())
        assert restored.base_luck == 0.8

    @pytest.mark.parametrize(
        "state",
        [None, {}, {"base_luck": "high"}, {"base_luck": True}, {"base_luck": 1.5}, []],
    )
    def test_malformed_state_defaults(self, state) -> None:
        engine = LuckEngine(base_luck=0.9)
        engine.set_state(state)
        assert engine.base_luck == DEFAULT_BASE_LUCK

    def test_base_luck_does_not_affect_rolls(self) -> None:
        with patch(RANDOM_PATH, return_value=0.10):
            assert LuckEngine(base_luck=1.0).roll_critical_success(0.05, morale=60) is False
