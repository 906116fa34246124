"""Domain events for decoupled side effects and integrations."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, List
from uuid import uuid4

logger = logging.getLogger(__name__)


@dataclass(kw_only=True)
class DomainEvent:
    """Base class for all domain events."""
    aggregate_id: str
    event_id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass(kw_only=True)
class SelectorCreated(DomainEvent):
    """Raised when a new selector is stored."""
    plugin_id: str
    name: str


@dataclass(kw_only=True)
class SelectorUpdated(DomainEvent):
    """Raised when an existing selector is overwritten."""
    plugin_id: str
    name: str


@dataclass(kw_only=True)
class SelectorsDeleted(DomainEvent):
    """Raised once per batch delete that removed at least one selector."""
    selector_ids: List[str]


class DomainEventPublisher:
    """Singleton publisher for domain events."""
    
    _instance: DomainEventPublisher | None = None
    _subscribers: Dict[type, List[Callable[[DomainEvent], None]]]
    
    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._subscribers = {}
        return cls._instance
    
    def subscribe(self, event_type: type[DomainEvent], handler: Callable[[DomainEvent], None]) -> None:
        """Subscribe a handler to an event type."""
        if event_type not in self._subscribers:
            self._subscribers[event_type] = []
        self._subscribers[event_type].append(handler)
    
    def publish(self, event: DomainEvent) -> None:
        """Publish an event to all subscribers."""
        for handler in self._subscribers.get(type(event), []):
            try:
                handler(event)
            except Exception:
                # A broken subscriber must not fail the mutation that raised the event
                logger.exception("Event handler error for %s", type(event).__name__)
    
    def clear_subscribers(self) -> None:
        """Clear all subscribers (useful for testing)."""
        self._subscribers = {}


# Singleton instance
event_publisher = DomainEventPublisher()
