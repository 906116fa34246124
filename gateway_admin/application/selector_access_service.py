"""Access layer for the selector resource: request shaping, delegation and result envelopes."""
from __future__ import annotations

import logging
from concurrent.futures import Future
from typing import Any, Callable, Optional, Sequence

from gateway_admin.domain.errors import ValidationError
from gateway_admin.domain.faults import Fault, FaultKind, classify_fault
from gateway_admin.domain.ports import SelectorServicePort
from gateway_admin.schemas.envelope import AdminResult
from gateway_admin.schemas.selector import PageParameter, SelectorDTO, SelectorQuery

logger = logging.getLogger(__name__)

QUERY_SELECTORS = "query selectors"
DETAIL_SELECTOR = "detail selector"
CREATE_SELECTOR = "create selector"
UPDATE_SELECTOR = "update selector"
DELETE_SELECTORS = "delete selectors"


def success_message(label: str) -> str:
    return f"{label} success"


def error_message(label: str) -> str:
    return f"{label} exception"


def resolved(result: AdminResult) -> Future[AdminResult]:
    """Wrap an already computed envelope in a completed future."""
    future: Future[AdminResult] = Future()
    future.set_result(result)
    return future


class SelectorAccessService:
    """
    Runs each selector operation against the selector service and answers
    with exactly one AdminResult.

    Faults are classified for logging but flattened in the envelope: callers
    only see ``"<operation> exception"`` and can branch on ``status`` alone.
    """

    def __init__(self, service: SelectorServicePort) -> None:
        self._service = service

    def query_selectors(
        self,
        owner_id: Optional[str],
        current_page: Optional[int],
        page_size: Optional[int],
    ) -> Future[AdminResult]:
        def call():
            query = SelectorQuery(
                plugin_id=owner_id,
                page=PageParameter(current_page=current_page, page_size=page_size),
            )
            return self._service.list_by_page(query)

        return self._execute(QUERY_SELECTORS, call)

    def detail_selector(self, selector_id: str) -> Future[AdminResult]:
        return self._execute(
            DETAIL_SELECTOR,
            lambda: self._service.find_by_id(selector_id),
            absent_on_not_found=True,
        )

    def create_selector(self, selector: Optional[SelectorDTO]) -> Future[AdminResult]:
        def call():
            return self._service.create_or_update(_require_payload(selector))

        return self._execute(CREATE_SELECTOR, call)

    def update_selector(self, selector_id: str, selector: Optional[SelectorDTO]) -> Future[AdminResult]:
        def call():
            # Path id wins over whatever id the body carries
            return self._service.create_or_update(_require_payload(selector).with_id(selector_id))

        return self._execute(UPDATE_SELECTOR, call)

    def delete_selectors(self, ids: Sequence[str]) -> Future[AdminResult]:
        return self._execute(DELETE_SELECTORS, lambda: self._service.delete(ids))

    def _execute(
        self,
        label: str,
        call: Callable[[], Any],
        absent_on_not_found: bool = False,
    ) -> Future[AdminResult]:
        try:
            data = call()
        except Exception as exc:
            fault = classify_fault(exc)
            if fault.kind is FaultKind.NOT_FOUND and absent_on_not_found:
                return resolved(AdminResult.success(success_message(label)))
            _log_fault(label, fault)
            return resolved(AdminResult.error(error_message(label)))
        return resolved(AdminResult.success(success_message(label), data))


def _require_payload(selector: Optional[SelectorDTO]) -> SelectorDTO:
    if selector is None:
        raise ValidationError("selector payload is required")
    return selector


def _log_fault(label: str, fault: Fault) -> None:
    if fault.kind is FaultKind.SERVICE:
        logger.error("%s failed: %s", label, fault.detail, exc_info=fault.cause)
    else:
        logger.warning("%s rejected (%s): %s", label, fault.kind.value, fault.detail)
