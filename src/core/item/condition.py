"""음식 부패 — 경과 일수 기반 condition 하락"""

import logging

from .models import Condition, ItemInstance

logger = logging.getLogger(__name__)

STALE_MULTIPLIER = 1  # expires_in × 1 → Stale
SPOILED_MULTIPLIER = 2  # expires_in × 2 → Spoiled


def advance_condition(
    instance: ItemInstance,
    current_day: int,
    obtained_day: int,
) -> ItemInstance:
    """경과 일수에 따라 condition 하락. 인스턴스를 직접 수정 후 반환.

    age = current_day - obtained_day
    Fresh & age >= expires_in     → Stale
    Stale & age >= expires_in * 2 → Spoiled

    두 검사는 같은 age로 연속 평가된다. 따라서 두 임계값을 모두 넘긴
    Fresh 아이템은 한 번의 호출로 Spoiled까지 내려갈 수 있다.
    Spoiled는 되돌아가지 않는다.
    food가 아니거나 expires_in이 없으면 변화 없음.
    """
    expires_in = instance.definition.expires_in
    if not instance.is_food or not expires_in:
        return instance

    age = current_day - obtained_day

    if instance.condition == Condition.FRESH and age >= expires_in * STALE_MULTIPLIER:
        instance.condition = Condition.STALE
        logger.debug("%s went stale (age=%d)", instance.item_id, age)

    if (
        instance.condition == Condition.STALE
        and age >= expires_in * SPOILED_MULTIPLIER
    ):
        instance.condition = Condition.SPOILED
        logger.debug("%s spoiled (age=%d)", instance.item_id, age)

    return instance
