"""In-process selector service backed by a dict of selector entities."""
from __future__ import annotations

import logging
import threading
import uuid
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from gateway_admin.domain.entities import SelectorEntity, selector_summary
from gateway_admin.domain.events import SelectorCreated, SelectorUpdated, SelectorsDeleted, event_publisher
from gateway_admin.domain.ports import SelectorServicePort
from gateway_admin.domain.specifications import filter_by_specification, owner_specification
from gateway_admin.schemas.selector import PageInfo, PagedResult, SelectorDTO, SelectorQuery, SelectorVO
from gateway_admin.services.selector_mapping import entity_to_vo, mutable_fields, require_new_selector_fields

logger = logging.getLogger(__name__)


class InMemorySelectorService(SelectorServicePort):
    """Selector service for development and tests; state lives for the process lifetime."""

    def __init__(self) -> None:
        self._selectors: Dict[str, SelectorEntity] = {}
        self._lock = threading.Lock()

    def list_by_page(self, query: SelectorQuery) -> PagedResult:
        with self._lock:
            matching = filter_by_specification(self._selectors.values(), owner_specification(query.plugin_id))
            matching.sort(key=lambda entity: (entity["sort"], entity["name"], entity["id"]))
            page = PageInfo.resolve(query.page, total_count=len(matching))
            window = matching[page.offset:page.offset + page.page_size]
            items = [entity_to_vo(entity) for entity in window]
        return PagedResult(items=items, total_count=page.total_count, page=page)

    def find_by_id(self, selector_id: str) -> Optional[SelectorVO]:
        with self._lock:
            entity = self._selectors.get(selector_id)
            return entity_to_vo(entity) if entity else None

    def create_or_update(self, selector: SelectorDTO) -> int:
        if not selector.id:
            return self._create(selector)
        return self._update(selector)

    def delete(self, ids: Sequence[str]) -> int:
        deleted: List[str] = []
        with self._lock:
            for selector_id in ids:
                if self._selectors.pop(selector_id, None) is not None:
                    deleted.append(selector_id)
        if deleted:
            logger.info("Deleted %d selector(s)", len(deleted))
            event_publisher.publish(SelectorsDeleted(aggregate_id=deleted[0], selector_ids=deleted))
        return len(deleted)

    def _create(self, selector: SelectorDTO) -> int:
        require_new_selector_fields(selector)
        now = datetime.now().isoformat()
        entity: SelectorEntity = {
            "id": uuid.uuid4().hex,
            **mutable_fields(selector),
            "date_created": now,
            "date_updated": now,
        }
        with self._lock:
            self._selectors[entity["id"]] = entity
        logger.info("Created selector %s", selector_summary(entity))
        event_publisher.publish(
            SelectorCreated(aggregate_id=entity["id"], plugin_id=entity["plugin_id"], name=entity["name"])
        )
        return 1

    def _update(self, selector: SelectorDTO) -> int:
        with self._lock:
            current = self._selectors.get(selector.id)
            if current is None:
                logger.info("Selector %s not found, nothing updated", selector.id)
                return 0
            fields = mutable_fields(selector)
            # Unset owner/name in the payload keep the stored values
            fields["plugin_id"] = fields["plugin_id"] or current["plugin_id"]
            fields["name"] = fields["name"] or current["name"]
            entity: SelectorEntity = {
                **current,
                **fields,
                "date_updated": datetime.now().isoformat(),
            }
            self._selectors[selector.id] = entity
        logger.info("Updated selector %s", selector_summary(entity))
        event_publisher.publish(
            SelectorUpdated(aggregate_id=entity["id"], plugin_id=entity["plugin_id"], name=entity["name"])
        )
        return 1
