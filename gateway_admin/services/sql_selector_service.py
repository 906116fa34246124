"""Selector service persisting to a relational database through SQLAlchemy."""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from gateway_admin.db.models import Selector
from gateway_admin.db.repositories import SelectorRepository
from gateway_admin.domain.entities import SelectorEntity
from gateway_admin.domain.errors import ServiceError
from gateway_admin.domain.events import SelectorCreated, SelectorUpdated, SelectorsDeleted, event_publisher
from gateway_admin.domain.ports import SelectorServicePort
from gateway_admin.schemas.selector import PageInfo, PagedResult, SelectorDTO, SelectorQuery, SelectorVO
from gateway_admin.services.selector_mapping import entity_to_vo, mutable_fields, require_new_selector_fields

logger = logging.getLogger(__name__)


def row_to_entity(selector: Selector) -> SelectorEntity:
    return {
        "id": selector.id,
        "plugin_id": selector.plugin_id,
        "name": selector.name,
        "match_mode": selector.match_mode,
        "type": selector.type,
        "sort": selector.sort,
        "enabled": selector.enabled,
        "loged": selector.loged,
        "continued": selector.continued,
        "handle": selector.handle,
        "conditions": [
            {
                "param_type": condition.param_type,
                "operator": condition.operator,
                "param_name": condition.param_name,
                "param_value": condition.param_value,
            }
            for condition in selector.conditions
        ],
        "date_created": selector.date_created.isoformat() if selector.date_created else "",
        "date_updated": selector.date_updated.isoformat() if selector.date_updated else "",
    }


class SqlSelectorService(SelectorServicePort):
    """Opens one session per call; the database provides isolation between concurrent requests."""

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def list_by_page(self, query: SelectorQuery) -> PagedResult:
        with self._session_factory() as db:
            repo = SelectorRepository(db)
            page = PageInfo.resolve(query.page, total_count=repo.count(query.plugin_id))
            rows = repo.list_page(query.plugin_id, offset=page.offset, limit=page.page_size)
            items = [entity_to_vo(row_to_entity(row)) for row in rows]
        return PagedResult(items=items, total_count=page.total_count, page=page)

    def find_by_id(self, selector_id: str) -> Optional[SelectorVO]:
        with self._session_factory() as db:
            selector = SelectorRepository(db).get_selector(selector_id)
            return entity_to_vo(row_to_entity(selector)) if selector else None

    def create_or_update(self, selector: SelectorDTO) -> int:
        if not selector.id:
            require_new_selector_fields(selector)
        with self._session_factory() as db:
            repo = SelectorRepository(db)
            try:
                if not selector.id:
                    row = repo.create_selector(mutable_fields(selector))
                    event = SelectorCreated(aggregate_id=row.id, plugin_id=row.plugin_id, name=row.name)
                else:
                    current = repo.get_selector(selector.id)
                    if current is None:
                        logger.info("Selector %s not found, nothing updated", selector.id)
                        return 0
                    fields = mutable_fields(selector)
                    fields["plugin_id"] = fields["plugin_id"] or current.plugin_id
                    fields["name"] = fields["name"] or current.name
                    row = repo.update_selector(current, fields)
                    event = SelectorUpdated(aggregate_id=row.id, plugin_id=row.plugin_id, name=row.name)
            except SQLAlchemyError as exc:
                db.rollback()
                raise ServiceError("selector write failed", cause=exc) from exc
        logger.info("Stored selector %s (%s)", event.aggregate_id, type(event).__name__)
        event_publisher.publish(event)
        return 1

    def delete(self, ids: Sequence[str]) -> int:
        with self._session_factory() as db:
            try:
                deleted = SelectorRepository(db).delete_selectors(ids)
            except SQLAlchemyError as exc:
                db.rollback()
                raise ServiceError("selector delete failed", cause=exc) from exc
        if deleted:
            logger.info("Deleted %d selector(s)", len(deleted))
            event_publisher.publish(SelectorsDeleted(aggregate_id=deleted[0], selector_ids=deleted))
        return len(deleted)

    def ping(self) -> bool:
        with self._session_factory() as db:
            db.execute(text("SELECT 1"))
        return True
