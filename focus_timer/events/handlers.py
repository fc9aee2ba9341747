"""
Event Handler base class.

Presentation layers usually implement one handler object that reacts to a
set of event types; this base class takes care of filtering and wiring.
"""

from abc import ABC, abstractmethod
from typing import Any, List

from focus_timer.events.bus import EventBus
from focus_timer.events.types import Event, EventType
from focus_timer.utils.logging import get_logger

logger = get_logger(__name__)


class EventHandler(ABC):
    """
    Base class for event handlers.

    Subclasses implement get_event_types() and handle().

    Example:
        >>> class TitleUpdater(EventHandler):
        ...     def get_event_types(self):
        ...         return [EventType.ALARM_STARTED, EventType.ALARM_STOPPED]
        ...
        ...     def handle(self, event):
        ...         window.title = event.title
        >>>
        >>> TitleUpdater().attach(bus)
    """

    def __init__(self) -> None:
        """Initialize event handler."""
        self.enabled = True

    @abstractmethod
    def get_event_types(self) -> List[EventType]:
        """
        Get list of event types this handler subscribes to.

        Returns:
            List of EventType values
        """
        pass

    @abstractmethod
    def handle(self, event: Event) -> Any:
        """
        Handle an event.

        Args:
            event: Event to handle
        """
        pass

    def should_handle(self, event: Event) -> bool:
        """
        Check if this handler should process the event.

        Override to add custom filtering logic.
        """
        if not self.enabled:
            return False

        return EventType(event.event_type) in self.get_event_types()

    def attach(self, bus: EventBus, priority: int = 0) -> None:
        """Subscribe this handler to each of its event types."""
        for event_type in self.get_event_types():
            bus.subscribe(event_type, self, priority=priority)

    def detach(self, bus: EventBus) -> None:
        """Remove this handler from the bus."""
        for event_type in self.get_event_types():
            bus.unsubscribe(event_type, self)

    def __call__(self, event: Event) -> Any:
        """Make handler callable."""
        if self.should_handle(event):
            try:
                return self.handle(event)
            except Exception as e:
                logger.error(
                    "handler_error",
                    handler=self.__class__.__name__,
                    event_type=event.event_type,
                    error=str(e),
                )
                raise
        return None
