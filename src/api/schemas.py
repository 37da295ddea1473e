"""API request/response schemas."""

from typing import Any, Optional

from pydantic import BaseModel, Field

from src.core.item.models import Condition


# === Request Schemas ===


class TickRequest(BaseModel):
    """게임 루프 틱 요청"""

    delta_seconds: float = Field(..., ge=0, description="실제 경과 초")


class MeterValues(BaseModel):
    """게임오버 판정용 미터 값. health만 필수."""

    health: float
    morale: Optional[float] = None
    hydration: Optional[float] = None
    hunger: Optional[float] = None
    sickness_level: Optional[float] = None


class RollRequest(BaseModel):
    """치명 성공/실패 판정 요청"""

    morale: float = Field(..., description="현재 사기 값")
    base_chance: float = Field(0.05, description="기본 치명 확률")


class PickUpRequest(BaseModel):
    """아이템 획득 요청"""

    item_id: str = Field(..., min_length=1)
    condition: Optional[Condition] = None
    quantity: int = Field(1, ge=1)


class ConsumeRequest(BaseModel):
    """아이템 소비 요청"""

    item_id: str = Field(..., min_length=1)
    condition: Optional[Condition] = None


# === Response Schemas ===


class RunStateResponse(BaseModel):
    """런 공개 상태"""

    run_id: str
    is_paused: bool
    is_game_over: bool
    game_over_reason: str
    current_day: int
    max_days: int
    game_time: float
    clock: str
    time_of_day: str
    is_night: bool


class TickResponse(BaseModel):
    day_advanced: bool
    state: RunStateResponse


class EvaluateResponse(BaseModel):
    game_over_triggered: bool
    is_game_over: bool
    reason: str


class RollResponse(BaseModel):
    success: bool
    failure: bool
    modifier: float


class ItemDefinitionResponse(BaseModel):
    """카탈로그 아이템 정의"""

    item_id: str
    item_type: str
    name: str
    description: str
    stackable: bool
    max_stack: int
    nutrition: Optional[int] = None
    expires_in: Optional[int] = None
    condition: Optional[str] = None
    hygiene_cost: Optional[int] = None
    morale_boost: Optional[int] = None
    hydration: Optional[int] = None
    sickness_risk: Optional[float] = None
    capacity: Optional[int] = None


class WaterInfo(BaseModel):
    hydration: int
    hygiene_cost: int
    sickness_risk: float


class EffectsResponse(BaseModel):
    """소비 결과 효과"""

    item_id: str
    nutrition: int
    hygiene_penalty: int
    morale_boost: int
    water: Optional[WaterInfo] = None


class InventorySlot(BaseModel):
    item_id: str
    condition: Optional[str] = None
    obtained_day: int
    quantity: int


class InventoryResponse(BaseModel):
    max_slots: int
    items: list[InventorySlot] = []


class ActionResponse(BaseModel):
    """단순 조작 응답"""

    success: bool
    message: str
    data: Optional[dict[str, Any]] = None


class ErrorResponse(BaseModel):
    """에러 응답"""

    success: bool = False
    error: str
    detail: Optional[str] = None
