"""
Event Bus implementation.

Provides pub/sub between the core and the presentation layer. Publishing is
synchronous: handlers run on the caller's thread, in priority order, before
publish() returns. Coroutine handlers are scheduled on the running loop.
"""

import asyncio
import inspect
from collections import defaultdict
from typing import Any, Callable, Dict, List, Optional, Set, Tuple

from focus_timer.events.types import Event, EventType
from focus_timer.utils.exceptions import EventError
from focus_timer.utils.logging import get_logger

logger = get_logger(__name__)

Handler = Callable[[Event], Any]


def _handler_name(handler: Handler) -> str:
    return getattr(handler, "__name__", handler.__class__.__name__)


class EventBus:
    """
    Event bus for publish/subscribe pattern.

    Features:
    - Sync handlers, plus coroutine handlers scheduled as tasks
    - Event type filtering
    - Wildcard subscriptions
    - Event history
    - Handler prioritization

    A failing handler is logged and counted; it never affects other handlers
    or the publisher.

    Example:
        >>> bus = EventBus()
        >>>
        >>> def on_tick(event):
        ...     print(f"{event.timer_id}: {event.time_left}")
        >>>
        >>> bus.subscribe(EventType.TIMER_TICKED, on_tick)
        >>> bus.publish(TimerEvent(event_type=EventType.TIMER_TICKED, timer_id=1, time_left=299))
    """

    def __init__(self, enable_history: bool = False, max_history: int = 100):
        """
        Initialize event bus.

        Args:
            enable_history: Enable event history tracking
            max_history: Maximum events to keep in history
        """
        self.enable_history = enable_history
        self.max_history = max_history

        self._handlers: Dict[EventType, List[Tuple[int, Handler]]] = defaultdict(list)
        self._wildcard_handlers: List[Handler] = []
        self._history: List[Event] = []
        self._pending: Set["asyncio.Task[Any]"] = set()

        self._stats = {
            "published": 0,
            "handled": 0,
            "errors": 0,
        }

        logger.info("event_bus_initialized", history_enabled=enable_history)

    def subscribe(
        self,
        event_type: EventType,
        handler: Handler,
        priority: int = 0,
    ) -> None:
        """
        Subscribe to an event type.

        Args:
            event_type: Event type to subscribe to
            handler: Handler function (sync or async)
            priority: Handler priority (higher = earlier execution)
        """
        event_type = EventType(event_type)
        self._handlers[event_type].append((priority, handler))
        # Stable sort keeps subscription order within a priority
        self._handlers[event_type].sort(key=lambda x: x[0], reverse=True)

        logger.debug(
            "handler_subscribed",
            event_type=event_type.value,
            handler=_handler_name(handler),
            priority=priority,
        )

    def subscribe_all(self, handler: Handler) -> None:
        """
        Subscribe to all events (wildcard).

        Args:
            handler: Handler function for all events
        """
        self._wildcard_handlers.append(handler)
        logger.debug("wildcard_handler_subscribed", handler=_handler_name(handler))

    def unsubscribe(self, event_type: EventType, handler: Handler) -> bool:
        """
        Unsubscribe from an event type.

        Returns:
            True if handler was found and removed
        """
        event_type = EventType(event_type)
        if event_type not in self._handlers:
            return False

        original_count = len(self._handlers[event_type])
        self._handlers[event_type] = [(p, h) for p, h in self._handlers[event_type] if h != handler]

        return len(self._handlers[event_type]) < original_count

    def unsubscribe_all(self, handler: Handler) -> bool:
        """
        Unsubscribe wildcard handler.

        Returns:
            True if handler was found and removed
        """
        if handler in self._wildcard_handlers:
            self._wildcard_handlers.remove(handler)
            return True
        return False

    def publish(self, event: Event) -> None:
        """
        Publish an event to all subscribed handlers.

        Args:
            event: Event to publish
        """
        self._stats["published"] += 1

        if self.enable_history:
            self._history.append(event)
            if len(self._history) > self.max_history:
                self._history.pop(0)

        logger.debug("event_published", event_type=event.event_type, event_id=event.event_id)

        handlers = self._handlers.get(EventType(event.event_type), [])
        wildcard_handlers = [(0, h) for h in self._wildcard_handlers]

        for _, handler in handlers + wildcard_handlers:
            try:
                result = handler(event)
                if inspect.isawaitable(result):
                    self._schedule(result, handler)
                self._stats["handled"] += 1
            except Exception as e:
                self._stats["errors"] += 1
                logger.error(
                    "handler_error",
                    event_type=event.event_type,
                    handler=_handler_name(handler),
                    error=str(e),
                )

    def get_history(
        self,
        event_type: Optional[EventType] = None,
        limit: Optional[int] = None,
    ) -> List[Event]:
        """
        Get event history.

        Args:
            event_type: Optional filter by event type
            limit: Optional limit number of events

        Returns:
            List of events (most recent first)
        """
        if not self.enable_history:
            return []

        history = self._history[::-1]

        if event_type:
            history = [e for e in history if e.event_type == EventType(event_type)]

        if limit:
            history = history[:limit]

        return history

    def clear_history(self) -> None:
        """Clear event history."""
        self._history.clear()

    def get_subscriber_count(self, event_type: Optional[EventType] = None) -> int:
        """
        Get number of subscribers.

        Args:
            event_type: Optional specific event type
        """
        if event_type:
            return len(self._handlers.get(EventType(event_type), []))
        total = sum(len(handlers) for handlers in self._handlers.values())
        return total + len(self._wildcard_handlers)

    def get_statistics(self) -> Dict[str, Any]:
        """Get event bus statistics."""
        return {
            **self._stats,
            "subscribers": self.get_subscriber_count(),
            "event_types": len(self._handlers),
            "wildcard_handlers": len(self._wildcard_handlers),
            "history_size": len(self._history) if self.enable_history else 0,
        }

    def _schedule(self, awaitable: Any, handler: Handler) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            if inspect.iscoroutine(awaitable):
                awaitable.close()
            raise EventError(
                "Async handler needs a running event loop",
                details={"handler": _handler_name(handler)},
            )

        task = loop.create_task(self._run_async(awaitable, handler))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _run_async(self, awaitable: Any, handler: Handler) -> None:
        try:
            await awaitable
        except Exception as e:
            self._stats["errors"] += 1
            logger.error("handler_error", handler=_handler_name(handler), error=str(e))
