"""Event handlers for domain events."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gateway_admin.domain.events import SelectorCreated, SelectorUpdated, SelectorsDeleted

logger = logging.getLogger(__name__)


class AuditLogHandler:
    """Logs all selector changes for audit trail."""
    
    def handle_selector_created(self, event: SelectorCreated) -> None:
        logger.info(f"[AUDIT] Selector created: {event.aggregate_id} - {event.name} (plugin {event.plugin_id})")
    
    def handle_selector_updated(self, event: SelectorUpdated) -> None:
        logger.info(f"[AUDIT] Selector updated: {event.aggregate_id} - {event.name} (plugin {event.plugin_id})")
    
    def handle_selectors_deleted(self, event: SelectorsDeleted) -> None:
        logger.info(f"[AUDIT] Selectors deleted: {', '.join(event.selector_ids)}")


def register_event_handlers():
    """Register all event handlers with the publisher."""
    from gateway_admin.domain.events import (
        event_publisher,
        SelectorCreated,
        SelectorUpdated,
        SelectorsDeleted,
    )
    
    audit = AuditLogHandler()
    
    event_publisher.subscribe(SelectorCreated, audit.handle_selector_created)
    event_publisher.subscribe(SelectorUpdated, audit.handle_selector_updated)
    event_publisher.subscribe(SelectorsDeleted, audit.handle_selectors_deleted)
