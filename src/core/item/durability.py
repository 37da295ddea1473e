"""도구 내구도 — 사용할수록 닳고, 0이 되면 파손"""

import copy
import logging
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_TOOL_DURABILITY = 100


class ToolWearTracker:
    """등록된 도구의 내구도/사용 횟수 추적.

    등록되지 않은 도구는 무한 내구도로 취급한다.
    도구는 수리되지 않는다.
    """

    def __init__(self) -> None:
        self._tools: dict[str, dict[str, float]] = {}

    def register_tool(
        self, tool_id: str, durability: float = DEFAULT_TOOL_DURABILITY
    ) -> None:
        self._tools[tool_id] = {"durability": durability, "uses": 0}

    def use_tool(self, tool_id: str, wear: float = 1) -> bool:
        """도구 사용. 반환: 아직 쓸 수 있으면 True, 파손 시 False.

        미등록 도구는 항상 True.
        """
        tool = self._tools.get(tool_id)
        if tool is None:
            return True

        tool["uses"] += wear
        tool["durability"] = max(0, tool["durability"] - wear)

        if tool["durability"] <= 0:
            logger.info("Tool %s broken (uses=%s)", tool_id, tool["uses"])
            return False
        return True

    def get_durability(self, tool_id: str) -> float:
        """현재 내구도. 미등록이면 DEFAULT_TOOL_DURABILITY."""
        tool = self._tools.get(tool_id)
        return tool["durability"] if tool else DEFAULT_TOOL_DURABILITY

    def is_tracked(self, tool_id: str) -> bool:
        return tool_id in self._tools

    def get_state(self) -> dict[str, Any]:
        return {"tools": copy.deepcopy(self._tools)}

    def set_state(self, state: Any) -> None:
        """저장 상태 복원. 형식이 잘못된 항목은 버린다."""
        tools = state.get("tools") if isinstance(state, dict) else None
        if not isinstance(tools, dict):
            self._tools = {}
            return

        restored: dict[str, dict[str, float]] = {}
        for tool_id, raw in tools.items():
            if not isinstance(raw, dict):
                logger.warning("Dropping malformed tool state: %s", tool_id)
                continue
            durability = raw.get("durability", DEFAULT_TOOL_DURABILITY)
            uses = raw.get("uses", 0)
            if not isinstance(durability, (int, float)) or isinstance(
                durability, bool
            ):
                durability = DEFAULT_TOOL_DURABILITY
            if not isinstance(uses, (int, float)) or isinstance(uses, bool):
                uses = 0
            restored[tool_id] = {"durability": durability, "uses": uses}
        self._tools = restored
