from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from gateway_admin.config import settings
from gateway_admin.domain.ports import SelectorServicePort
from gateway_admin.application.selector_access_service import SelectorAccessService
from gateway_admin.services.memory_selector_service import InMemorySelectorService
from gateway_admin.services.sql_selector_service import SqlSelectorService


@lru_cache(maxsize=None)
def get_selector_service() -> SelectorServicePort:
    if settings.SELECTOR_STORE == "database":
        from gateway_admin.db.database import SessionLocal

        return SqlSelectorService(session_factory=SessionLocal)
    if settings.SELECTOR_STORE == "memory":
        return InMemorySelectorService()
    raise ValueError(f"Unknown SELECTOR_STORE: {settings.SELECTOR_STORE!r}")


def get_selector_access_service(
    service: SelectorServicePort = Depends(get_selector_service),
) -> SelectorAccessService:
    return SelectorAccessService(service=service)
