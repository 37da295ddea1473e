"""Run API endpoints."""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Request

from src.api.schemas import (
    ActionResponse,
    ConsumeRequest,
    EffectsResponse,
    ErrorResponse,
    EvaluateResponse,
    InventoryResponse,
    InventorySlot,
    MeterValues,
    PickUpRequest,
    RollRequest,
    RollResponse,
    RunStateResponse,
    TickRequest,
    TickResponse,
    WaterInfo,
)
from src.core.engine import SurvivalEngine
from src.core.logging import get_logger
from src.core.meters import MeterSnapshot
from src.services.run_service import RunService

logger = get_logger(__name__)

router = APIRouter(prefix="/runs", tags=["runs"])

NOT_FOUND = {404: {"model": ErrorResponse}}


def get_run_service(request: Request) -> RunService:
    """RunService 인스턴스 반환 (의존성 주입)"""
    service: RunService = request.app.state.run_service
    return service


def _require_run(service: RunService, run_id: str) -> SurvivalEngine:
    engine = service.get_run(run_id)
    if engine is None:
        raise HTTPException(status_code=404, detail=f"Run not found: {run_id}")
    return engine


def _build_state(run_id: str, engine: SurvivalEngine) -> RunStateResponse:
    """엔진 상태를 RunStateResponse로 변환"""
    state = engine.run_state
    cycle = engine.day_cycle
    return RunStateResponse(
        run_id=run_id,
        is_paused=state.is_paused,
        is_game_over=state.is_game_over,
        game_over_reason=state.game_over_reason,
        current_day=state.current_day,
        max_days=state.max_days,
        game_time=state.game_time,
        clock=cycle.get_clock(),
        time_of_day=cycle.get_time_of_day(),
        is_night=cycle.is_night,
    )


@router.post("", response_model=RunStateResponse, status_code=201)
def create_run(service: RunService = Depends(get_run_service)) -> RunStateResponse:
    """새 런 시작 (Day 1)"""
    run_id, engine = service.create_run()
    return _build_state(run_id, engine)


@router.get("/{run_id}", response_model=RunStateResponse, responses=NOT_FOUND)
def get_run_state(
    run_id: str, service: RunService = Depends(get_run_service)
) -> RunStateResponse:
    engine = _require_run(service, run_id)
    return _build_state(run_id, engine)


@router.delete("/{run_id}", response_model=ActionResponse, responses=NOT_FOUND)
def delete_run(
    run_id: str, service: RunService = Depends(get_run_service)
) -> ActionResponse:
    if not service.end_run(run_id):
        raise HTTPException(status_code=404, detail=f"Run not found: {run_id}")
    return ActionResponse(success=True, message="Run ended")


@router.post("/{run_id}/tick", response_model=TickResponse, responses=NOT_FOUND)
def tick_run(
    run_id: str,
    request: TickRequest,
    service: RunService = Depends(get_run_service),
) -> TickResponse:
    """게임 루프 한 틱 진행"""
    engine = _require_run(service, run_id)
    day_advanced = bool(service.tick(run_id, request.delta_seconds))
    return TickResponse(day_advanced=day_advanced, state=_build_state(run_id, engine))


@router.post("/{run_id}/pause", response_model=RunStateResponse, responses=NOT_FOUND)
def pause_run(
    run_id: str, service: RunService = Depends(get_run_service)
) -> RunStateResponse:
    engine = _require_run(service, run_id)
    service.set_paused(run_id, True)
    return _build_state(run_id, engine)


@router.post("/{run_id}/resume", response_model=RunStateResponse, responses=NOT_FOUND)
def resume_run(
    run_id: str, service: RunService = Depends(get_run_service)
) -> RunStateResponse:
    engine = _require_run(service, run_id)
    service.set_paused(run_id, False)
    return _build_state(run_id, engine)


@router.post(
    "/{run_id}/toggle-pause", response_model=RunStateResponse, responses=NOT_FOUND
)
def toggle_pause_run(
    run_id: str, service: RunService = Depends(get_run_service)
) -> RunStateResponse:
    engine = _require_run(service, run_id)
    service.set_paused(run_id, None)
    return _build_state(run_id, engine)


@router.post("/{run_id}/evaluate", response_model=EvaluateResponse, responses=NOT_FOUND)
def evaluate_run(
    run_id: str,
    meters: MeterValues,
    service: RunService = Depends(get_run_service),
) -> EvaluateResponse:
    """미터 스냅샷으로 게임오버 판정"""
    engine = _require_run(service, run_id)
    snapshot = MeterSnapshot.from_values(**meters.model_dump())
    triggered = bool(service.evaluate(run_id, snapshot))
    return EvaluateResponse(
        game_over_triggered=triggered,
        is_game_over=engine.run_state.is_game_over,
        reason=engine.run_state.game_over_reason,
    )


@router.post("/{run_id}/roll", response_model=RollResponse, responses=NOT_FOUND)
def roll_critical(
    run_id: str,
    request: RollRequest,
    service: RunService = Depends(get_run_service),
) -> RollResponse:
    """제작/전투 치명 성공/실패 판정"""
    _require_run(service, run_id)
    result = service.roll(run_id, request.base_chance, request.morale)
    assert result is not None
    return RollResponse(
        success=result.success, failure=result.failure, modifier=result.modifier
    )


@router.get(
    "/{run_id}/inventory", response_model=InventoryResponse, responses=NOT_FOUND
)
def get_inventory(
    run_id: str, service: RunService = Depends(get_run_service)
) -> InventoryResponse:
    engine = _require_run(service, run_id)
    state = engine.inventory.get_state()
    return InventoryResponse(
        max_slots=state["max_slots"],
        items=[InventorySlot(**raw) for raw in state["items"]],
    )


@router.post(
    "/{run_id}/items",
    response_model=ActionResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def pick_up_item(
    run_id: str,
    request: PickUpRequest,
    service: RunService = Depends(get_run_service),
) -> ActionResponse:
    """아이템 획득. 모르는 item_id면 400"""
    engine = _require_run(service, run_id)
    if service.get_item_definition(request.item_id) is None:
        raise HTTPException(
            status_code=400, detail=f"Unknown item: {request.item_id}"
        )

    added = bool(
        service.pick_up(run_id, request.item_id, request.condition, request.quantity)
    )
    return ActionResponse(
        success=added,
        message="Item added" if added else "Inventory full",
        data={"count": engine.inventory.count(request.item_id)},
    )


@router.post(
    "/{run_id}/consume",
    response_model=EffectsResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def consume_item(
    run_id: str,
    request: ConsumeRequest,
    service: RunService = Depends(get_run_service),
) -> EffectsResponse:
    """소지품 하나 소비 후 효과 반환. 소지하지 않았으면 400"""
    _require_run(service, run_id)
    effects = service.consume(run_id, request.item_id, request.condition)
    if effects is None:
        raise HTTPException(
            status_code=400, detail=f"Item not in inventory: {request.item_id}"
        )

    water = None
    if effects.water is not None:
        water = WaterInfo(
            hydration=effects.water.hydration,
            hygiene_cost=effects.water.hygiene_cost,
            sickness_risk=effects.water.sickness_risk,
        )
    return EffectsResponse(
        item_id=request.item_id,
        nutrition=effects.nutrition,
        hygiene_penalty=effects.hygiene_penalty,
        morale_boost=effects.morale_boost,
        water=water,
    )


@router.get("/{run_id}/snapshot", responses=NOT_FOUND)
def get_snapshot(
    run_id: str, service: RunService = Depends(get_run_service)
) -> dict[str, Any]:
    """저장용 번들 (직렬화만, 저장은 클라이언트 몫)"""
    snapshot = service.snapshot(run_id)
    if snapshot is None:
        raise HTTPException(status_code=404, detail=f"Run not found: {run_id}")
    return snapshot


@router.put("/{run_id}/snapshot", response_model=RunStateResponse, responses=NOT_FOUND)
def restore_snapshot(
    run_id: str,
    data: dict[str, Any] = Body(...),
    service: RunService = Depends(get_run_service),
) -> RunStateResponse:
    """번들 복원. 손상된 필드는 기본값으로 대체된다"""
    if not service.restore(run_id, data):
        raise HTTPException(status_code=404, detail=f"Run not found: {run_id}")
    engine = _require_run(service, run_id)
    return _build_state(run_id, engine)
