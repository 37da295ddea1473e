"""EventBus - 시뮬레이션 → 호스트(UI/오디오/로그) 알림 통로

규칙:
- 코어는 표현 계층을 직접 호출하지 않고 이벤트만 발행한다
- 이벤트 data에는 식별자와 원시값만 담는다
- 한 틱 안의 전파 깊이는 MAX_DEPTH 단계까지
- 같은 틱에서 같은 source:event_type:key 조합은 한 번만 전달
- 핸들러 예외는 로그로 남기고 시뮬레이션 루프로 올리지 않는다
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Set

from src.core.logging import get_logger

logger = get_logger(__name__)

MAX_DEPTH = 5  # 한 틱 내 이벤트 전파 최대 깊이


@dataclass
class GameEvent:
    """이벤트 데이터 컨테이너

    Args:
        event_type: 이벤트 유형 (EventTypes 상수)
        data: 이벤트 데이터 (ID/숫자 위주)
        source: 발행한 컴포넌트 이름
        key: 같은 틱에서 같은 유형을 여러 번 보낼 때 구분자 (예: item_id)
    """

    event_type: str
    data: Dict[str, Any]
    source: str
    key: str = ""

    _depth: int = field(default=0, repr=False)

    @property
    def chain_key(self) -> str:
        return f"{self.source}:{self.event_type}:{self.key}"


EventHandler = Callable[[GameEvent], None]


class EventBus:
    """동기식 이벤트 버스

    사용 패턴:
        bus = EventBus()
        bus.subscribe(EventTypes.GAME_OVER, screens.show_end_screen)
        bus.emit(GameEvent(EventTypes.GAME_OVER, {"reason": "..."}, source="engine"))
        bus.reset_chain()  # 틱 종료 시
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, List[EventHandler]] = defaultdict(list)
        self._current_depth = 0
        self._emitted_in_chain: Set[str] = set()

    def subscribe(self, event_type: str, handler: EventHandler) -> None:
        self._handlers[event_type].append(handler)
        logger.debug(f"구독: {event_type} → {handler.__qualname__}")

    def unsubscribe(self, event_type: str, handler: EventHandler) -> None:
        handlers = self._handlers.get(event_type)
        if not handlers or handler not in handlers:
            logger.warning(f"핸들러 미등록: {event_type} → {handler.__qualname__}")
            return
        handlers.remove(handler)

    def emit(self, event: GameEvent) -> int:
        """이벤트 발행. 반환: 호출된 핸들러 수 (차단되면 0)."""
        if self._current_depth >= MAX_DEPTH:
            logger.warning(
                f"전파 깊이 초과 ({MAX_DEPTH}): {event.chain_key} 무시됨"
            )
            return 0

        if event.chain_key in self._emitted_in_chain:
            logger.debug(f"중복 이벤트 차단: {event.chain_key}")
            return 0
        self._emitted_in_chain.add(event.chain_key)
        event._depth = self._current_depth

        handlers = list(self._handlers.get(event.event_type, []))
        if not handlers:
            return 0

        self._current_depth += 1
        try:
            for handler in handlers:
                try:
                    handler(event)
                except Exception:
                    logger.exception(
                        f"핸들러 에러: {handler.__qualname__} "
                        f"(event={event.event_type})"
                    )
        finally:
            self._current_depth -= 1
        return len(handlers)

    def reset_chain(self) -> None:
        """틱 종료 시 호출. 중복 추적 초기화."""
        self._emitted_in_chain.clear()
        self._current_depth = 0

    def clear(self) -> None:
        """모든 구독 해제 (테스트용)"""
        self._handlers.clear()
        self.reset_chain()

    @property
    def is_propagating(self) -> bool:
        """핸들러 실행 중인지 (중첩 발행 여부 판단용)"""
        return self._current_depth > 0

    @property
    def handler_count(self) -> int:
        return sum(len(h) for h in self._handlers.values())
