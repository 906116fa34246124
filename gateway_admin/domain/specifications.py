"""Specification pattern for reusable query logic."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional


class Specification(ABC):
    """Abstract base for specifications (query filters)."""
    
    @abstractmethod
    def is_satisfied_by(self, candidate: Dict[str, Any]) -> bool:
        """Check if candidate satisfies this specification."""
        pass


class AnySelector(Specification):
    """Matches every selector."""
    
    def is_satisfied_by(self, candidate: Dict[str, Any]) -> bool:
        return True


class SelectorByPlugin(Specification):
    """Selectors owned by one plugin."""
    
    def __init__(self, plugin_id: str):
        self.plugin_id = plugin_id
    
    def is_satisfied_by(self, selector: Dict[str, Any]) -> bool:
        return selector.get("plugin_id") == self.plugin_id


def owner_specification(plugin_id: Optional[str]) -> Specification:
    """An absent or blank owner filter lists every selector."""
    if plugin_id:
        return SelectorByPlugin(plugin_id)
    return AnySelector()


def filter_by_specification(
    items: Iterable[Dict[str, Any]], spec: Specification
) -> List[Dict[str, Any]]:
    """Filter a collection using a specification."""
    return [item for item in items if spec.is_satisfied_by(item)]
