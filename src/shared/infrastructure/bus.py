"""In-memory event bus implementation."""

from __future__ import annotations

from typing import Dict, List, Type

import structlog

from shared.domain.bus import IEventBus, IEventHandler
from shared.domain.events import DomainEvent

logger = structlog.get_logger(__name__)


class InMemoryEventBus(IEventBus):
    """Synchronous in-process bus.

    Handlers run in subscription order inside ``publish``; an exception
    raised by a handler propagates to the publisher.
    """

    def __init__(self) -> None:
        self._handlers: Dict[Type[DomainEvent], List[IEventHandler]] = {}

    def subscribe(self, event_class: Type[DomainEvent], handler: IEventHandler) -> None:
        handlers = self._handlers.setdefault(event_class, [])
        if handler not in handlers:
            handlers.append(handler)

    def handlers_for(self, event_class: Type[DomainEvent]) -> List[IEventHandler]:
        return list(self._handlers.get(event_class, []))

    def publish(self, event: DomainEvent) -> int:
        """Dispatch ``event`` and return how many handlers received it."""
        handlers = self._handlers.get(type(event), [])
        if not handlers:
            logger.warning("event_bus.unhandled", event_name=event.event_name)
            return 0
        for handler in handlers:
            handler.handle(event)
        return len(handlers)


# Process-wide bus, wired by the apps' ``ready()`` hooks.

event_bus = InMemoryEventBus()
