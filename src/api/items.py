"""Item catalog endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from src.api.runs import get_run_service
from src.api.schemas import ErrorResponse, ItemDefinitionResponse
from src.core.item.models import ItemDefinition
from src.services.run_service import RunService

router = APIRouter(prefix="/items", tags=["items"])


def _build_definition(definition: ItemDefinition) -> ItemDefinitionResponse:
    """ItemDefinition을 응답 스키마로 변환"""
    return ItemDefinitionResponse(
        item_id=definition.item_id,
        item_type=definition.item_type.value,
        name=definition.name,
        description=definition.description,
        stackable=definition.stackable,
        max_stack=definition.max_stack,
        nutrition=definition.nutrition,
        expires_in=definition.expires_in,
        condition=definition.condition.value if definition.condition else None,
        hygiene_cost=definition.hygiene_cost,
        morale_boost=definition.morale_boost,
        hydration=definition.hydration,
        sickness_risk=definition.sickness_risk,
        capacity=definition.capacity,
    )


@router.get(
    "/{item_id}",
    response_model=ItemDefinitionResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_item(
    item_id: str, service: RunService = Depends(get_run_service)
) -> ItemDefinitionResponse:
    """카탈로그 아이템 정의 조회"""
    definition = service.get_item_definition(item_id)
    if definition is None:
        raise HTTPException(status_code=404, detail=f"Item not found: {item_id}")
    return _build_definition(definition)
