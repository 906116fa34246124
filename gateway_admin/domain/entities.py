"""Internal domain entities as TypedDicts for type safety at boundaries."""
from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, TypedDict


class MatchMode(IntEnum):
    """How a selector combines its conditions."""
    AND = 0
    OR = 1

    @property
    def label(self) -> str:
        return self.name.lower()


class SelectorType(IntEnum):
    """Whether a selector applies to all traffic or only matching traffic."""
    FULL_FLOW = 0
    CUSTOM_FLOW = 1

    @property
    def label(self) -> str:
        return "full" if self is SelectorType.FULL_FLOW else "custom"


def match_mode_name(code: int | None) -> str | None:
    try:
        return MatchMode(code).label
    except ValueError:
        return None


def selector_type_name(code: int | None) -> str | None:
    try:
        return SelectorType(code).label
    except ValueError:
        return None


class SelectorConditionEntity(TypedDict):
    param_type: str | None
    operator: str | None
    param_name: str | None
    param_value: str | None


class SelectorEntity(TypedDict):
    id: str
    plugin_id: str
    name: str
    match_mode: int
    type: int
    sort: int
    enabled: bool
    loged: bool
    continued: bool
    handle: str | None
    conditions: list[SelectorConditionEntity]
    date_created: str
    date_updated: str


def selector_summary(entity: Dict[str, Any]) -> str:
    return f"{entity['id']} ({entity['name']}) of plugin {entity['plugin_id']}"
