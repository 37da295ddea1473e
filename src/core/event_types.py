"""이벤트 유형 상수"""


class EventTypes:
    """이벤트 유형 문자열 상수"""

    # run state
    RUN_PAUSED = "run_paused"
    RUN_RESUMED = "run_resumed"
    GAME_OVER = "game_over"

    # day cycle
    DAY_ADVANCED = "day_advanced"

    # item
    ITEM_CONDITION_CHANGED = "item_condition_changed"
    ITEM_CONSUMED = "item_consumed"
    TOOL_BROKEN = "tool_broken"
