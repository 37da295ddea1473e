"""Seven Days Survival Core"""
__version__ = "0.1.0-alpha"

from src.core.day_cycle import DayCycle
from src.core.engine import SurvivalEngine
from src.core.event_bus import EventBus, GameEvent
from src.core.luck import CriticalRoll, LuckEngine
from src.core.meters import Meter, MeterSnapshot
from src.core.run_state import RunState

__all__ = [
    "DayCycle",
    "SurvivalEngine",
    "EventBus",
    "GameEvent",
    "CriticalRoll",
    "LuckEngine",
    "Meter",
    "MeterSnapshot",
    "RunState",
]
