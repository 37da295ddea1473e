"""RunState 테스트 — 일시정지, 시간, 게임오버, 전리품, 스냅샷"""

from src.core.meters import MeterSnapshot
from src.core.run_state import (
    REASON_DEHYDRATION,
    REASON_INJURIES,
    REASON_MORALE,
    REASON_SICKNESS,
    REASON_STARVATION,
    RunState,
)


def _alive() -> MeterSnapshot:
    return MeterSnapshot.from_values(
        health=50, morale=50, hydration=50, hunger=50, sickness_level=0
    )


class TestPause:
    def test_pause_resume(self) -> None:
        state = RunState()
        state.pause()
        assert state.is_paused is True
        state.resume()
        assert state.is_paused is False

    def test_toggle(self) -> None:
        state = RunState()
        state.toggle_pause()
        assert state.is_paused is True
        state.toggle_pause()
        assert state.is_paused is False

    def test_resume_resets_last_update(self) -> None:
        state = RunState()
        state.last_update_time = 0
        state.pause()
        state.resume()
        assert state.last_update_time > 0

    def test_blocked_after_game_over(self) -> None:
        state = RunState()
        state.evaluate_game_over(MeterSnapshot.from_values(health=0))
        state.pause()
        assert state.is_paused is False
        state.toggle_pause()
        assert state.is_paused is False

    def test_paused_stays_paused_after_game_over(self) -> None:
        state = RunState()
        state.pause()
        state.evaluate_game_over(MeterSnapshot.from_values(health=0))
        state.resume()
        assert state.is_paused is True


class TestAdvanceTime:
    def test_accumulates(self) -> None:
        state = RunState()
        state.advance_time(1.5)
        state.advance_time(2.5)
        assert state.game_time == 4.0

    def test_paused_frozen(self) -> None:
        state = RunState()
        state.pause()
        state.advance_time(10)
        assert state.game_time == 0

    def test_game_over_frozen(self) -> None:
        state = RunState()
        state.advance_time(5)
        state.evaluate_game_over(MeterSnapshot.from_values(health=0))
        state.advance_time(10)
        assert state.game_time == 5

    def test_non_positive_ignored(self) -> None:
        state = RunState()
        state.advance_time(3)
        state.advance_time(-2)
        state.advance_time(0)
        assert state.game_time == 3


class TestGameOver:
    def test_alive_mid_run(self) -> None:
        state = RunState()
        state.current_day = 7
        assert state.evaluate_game_over(_alive()) is False
        assert state.is_game_over is False

    def test_victory_after_last_day(self) -> None:
        state = RunState()
        state.current_day = 8
        assert state.evaluate_game_over(_alive()) is True
        assert state.is_game_over is True
        assert state.game_over_reason == "You survived 7 days! Help has arrived..."

    def test_victory_uses_max_days(self) -> None:
        state = RunState(max_days=3)
        state.current_day = 4
        state.evaluate_game_over(_alive())
        assert state.game_over_reason == "You survived 3 days! Help has arrived..."

    def test_death_beats_victory(self) -> None:
        state = RunState()
        state.current_day = 8
        state.evaluate_game_over(MeterSnapshot.from_values(health=0))
        assert state.game_over_reason == REASON_INJURIES

    def test_reason_priority(self) -> None:
        cases = [
            (dict(morale=0, hydration=0, hunger=0, sickness_level=90), REASON_MORALE),
            (dict(morale=10, hydration=0, hunger=0, sickness_level=90), REASON_DEHYDRATION),
            (dict(morale=10, hydration=10, hunger=-5, sickness_level=90), REASON_STARVATION),
            (dict(morale=10, hydration=10, hunger=10, sickness_level=80), REASON_SICKNESS),
            (dict(morale=10, hydration=10, hunger=10, sickness_level=79), REASON_INJURIES),
        ]
        for meters, expected in cases:
            state = RunState()
            state.evaluate_game_over(MeterSnapshot.from_values(health=0, **meters))
            assert state.game_over_reason == expected

    def test_missing_meters_fall_through(self) -> None:
        state = RunState()
        state.evaluate_game_over(MeterSnapshot.from_values(health=-3))
        assert state.game_over_reason == REASON_INJURIES

    def test_latched(self) -> None:
        state = RunState()
        assert state.evaluate_game_over(MeterSnapshot.from_values(health=0, morale=0)) is True
        assert state.evaluate_game_over(_alive()) is False
        assert state.evaluate_game_over(MeterSnapshot.from_values(health=0)) is False
        assert state.is_game_over is True
        assert state.game_over_reason == REASON_MORALE


class TestSceneLoot:
    def test_default_scenes(self) -> None:
        assert RunState().scene_loot == {"A": {}, "B": {}}

    def test_set_and_get(self) -> None:
        state = RunState()
        state.set_loot("A", "kitchen", ["canned_beans", "water"])
        assert state.get_loot("A", "kitchen") == ["canned_beans", "water"]
        assert state.get_loot("B", "garage") == []

    def test_get_loot_is_copy(self) -> None:
        state = RunState()
        state.set_loot("A", "kitchen", ["water"])
        state.get_loot("A", "kitchen").append("junk")
        assert state.get_loot("A", "kitchen") == ["water"]


class TestSnapshot:
    def test_round_trip(self) -> None:
        state = RunState()
        state.current_day = 4
        state.advance_time(123.5)
        state.pause()
        state.set_loot("B", "garage", ["hammer"])

        restored = RunState()
        restored.set_state(state.get_state())
        assert restored.get_state() == state.get_state()

    def test_snapshot_is_deep_copy(self) -> None:
        state = RunState()
        state.set_loot("A", "kitchen", ["water"])
        snapshot = state.get_state()
        state.set_loot("A", "kitchen", [])
        state.scene_loot["A"]["pantry"] = ["crackers"]
        assert snapshot["scene_loot"] == {"A": {"kitchen": ["water"]}, "B": {}}

    def test_restore_is_deep_copy(self) -> None:
        data = {"scene_loot": {"A": {"kitchen": ["water"]}}}
        state = RunState()
        state.set_state(data)
        data["scene_loot"]["A"]["kitchen"].append("junk")
        assert state.get_loot("A", "kitchen") == ["water"]

    def test_malformed_fields_default(self) -> None:
        state = RunState()
        state.set_state(
            {
                "is_paused": "yes",
                "is_game_over": True,
                "game_over_reason": 42,
                "current_day": 0,
                "game_time": -5,
                "scene_loot": ["A"],
            }
        )
        assert state.is_paused is False
        assert state.is_game_over is True
        assert state.game_over_reason == ""
        assert state.current_day == 1
        assert state.game_time == 0
        assert state.scene_loot == {"A": {}, "B": {}}

    def test_malformed_scene_loot_defaults(self) -> None:
        state = RunState()
        state.set_loot("A", "kitchen", ["water"])
        state.set_state({"scene_loot": {"A": 5, "B": {"garage": "hammer"}}})
        assert state.scene_loot == {"A": {}, "B": {}}
        assert state.get_loot("A", "kitchen") == []
        assert state.get_loot("B", "garage") == []

    def test_scene_loot_non_string_items_defaults(self) -> None:
        state = RunState()
        state.set_state({"scene_loot": {"A": {"kitchen": ["water", 3]}}})
        assert state.scene_loot == {"A": {}, "B": {}}

    def test_bool_day_rejected(self) -> None:
        state = RunState()
        state.set_state({"current_day": True})
        assert state.current_day == 1

    def test_non_dict_restores_defaults(self) -> None:
        state = RunState()
        state.current_day = 5
        state.set_state("garbage")
        assert state.current_day == 1
        assert state.is_game_over is False
