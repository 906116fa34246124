"""Capability set the selector access layer needs from a selector service."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from gateway_admin.schemas.selector import PagedResult, SelectorDTO, SelectorQuery, SelectorVO


class SelectorServicePort(ABC):
    """
    Abstract selector service. Any backing store (in-process dict, SQL
    database, remote admin service) can satisfy it.
    """

    @abstractmethod
    def list_by_page(self, query: SelectorQuery) -> PagedResult:
        """
        Return one page of selectors.

        Args:
            query: Owning plugin filter and raw page parameters

        Returns:
            Page of read models with total count and resolved page info
        """

    @abstractmethod
    def find_by_id(self, selector_id: str) -> Optional[SelectorVO]:
        """
        Look up a selector.

        Returns:
            The read model, or None when the id is unknown
        """

    @abstractmethod
    def create_or_update(self, selector: SelectorDTO) -> int:
        """
        Insert a selector when it carries no id, otherwise overwrite it.

        Returns:
            Number of affected selectors
        """

    @abstractmethod
    def delete(self, ids: Sequence[str]) -> int:
        """
        Delete selectors by id.

        Returns:
            Number of selectors actually deleted
        """

    def ping(self) -> bool:
        """Cheap availability check used by the health endpoint."""
        return True
