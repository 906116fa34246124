"""Typed fault kinds observed at the selector access boundary."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import pydantic

from gateway_admin.domain.errors import NotFoundError, ValidationError


class FaultKind(str, Enum):
    VALIDATION = "validation"
    SERVICE = "service"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Fault:
    """A classified failure of one access-layer operation."""
    kind: FaultKind
    cause: BaseException

    @property
    def detail(self) -> str:
        return f"{type(self.cause).__name__}: {self.cause}"


def classify_fault(exc: BaseException) -> Fault:
    """Sort an exception into validation, not-found or service faults."""
    if isinstance(exc, (ValidationError, pydantic.ValidationError)):
        return Fault(FaultKind.VALIDATION, exc)
    if isinstance(exc, NotFoundError):
        return Fault(FaultKind.NOT_FOUND, exc)
    return Fault(FaultKind.SERVICE, exc)
