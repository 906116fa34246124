"""
Selector Request/Response Schemas using Pydantic.

Wire names are camelCase (``pluginId``, ``matchMode``...) to stay
compatible with existing admin consoles; Python code uses snake_case.
"""
from __future__ import annotations

import math
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from gateway_admin.domain.errors import ValidationError

DEFAULT_CURRENT_PAGE = 1
DEFAULT_PAGE_SIZE = 12


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenCamelModel(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# Write model
class SelectorConditionDTO(FrozenCamelModel):
    param_type: Optional[str] = Field(None, description="Where the value is read from, e.g. uri, header, query")
    operator: Optional[str] = Field(None, description="Comparison operator, e.g. =, match, like")
    param_name: Optional[str] = Field(None, description="Name of the request parameter")
    param_value: Optional[str] = Field(None, description="Value to compare against")


class SelectorDTO(FrozenCamelModel):
    id: Optional[str] = Field(None, description="Selector id; absent on create")
    plugin_id: Optional[str] = Field(None, description="ID of the owning plugin")
    name: Optional[str] = Field(None, description="Display name of the selector")
    match_mode: int = Field(0, description="0 = all conditions (and), 1 = any condition (or)")
    type: int = Field(1, description="0 = full flow, 1 = custom flow")
    sort: int = Field(0, description="Evaluation order inside the plugin, ascending")
    enabled: bool = Field(True, description="Whether the gateway evaluates this selector")
    loged: bool = Field(True, description="Whether matches are logged by the gateway")
    continued: bool = Field(True, description="Whether evaluation continues after a match")
    handle: Optional[str] = Field(None, description="Plugin specific handle payload")
    selector_conditions: List[SelectorConditionDTO] = Field(default_factory=list, description="Match conditions")

    def with_id(self, selector_id: str) -> SelectorDTO:
        """Return a copy carrying ``selector_id``; this instance is left untouched."""
        return self.model_copy(update={"id": selector_id})


# Read model
class SelectorConditionVO(CamelModel):
    param_type: Optional[str] = None
    operator: Optional[str] = None
    param_name: Optional[str] = None
    param_value: Optional[str] = None


class SelectorVO(CamelModel):
    id: str = Field(..., description="Unique identifier for the selector")
    plugin_id: str = Field(..., description="ID of the owning plugin")
    name: str = Field(..., description="Display name of the selector")
    match_mode: int = Field(..., description="Condition combination code")
    match_mode_name: Optional[str] = Field(None, description="Readable match mode, e.g. and / or")
    type: int = Field(..., description="Selector type code")
    type_name: Optional[str] = Field(None, description="Readable selector type, e.g. full / custom")
    sort: int = Field(..., description="Evaluation order inside the plugin")
    enabled: bool
    loged: bool
    continued: bool
    handle: Optional[str] = None
    selector_conditions: List[SelectorConditionVO] = Field(default_factory=list)
    date_created: str = Field(..., description="ISO format creation timestamp")
    date_updated: str = Field(..., description="ISO format last update timestamp")


# Paging
class PageParameter(FrozenCamelModel):
    """Raw paging input; left unresolved until the selector service sees it."""
    current_page: Optional[int] = None
    page_size: Optional[int] = None


class PageInfo(CamelModel):
    current_page: int
    page_size: int
    total_count: int
    total_page: int
    offset: int

    @classmethod
    def resolve(cls, page: PageParameter, total_count: int) -> PageInfo:
        """Apply defaults to ``page`` and reject non-positive values."""
        current_page = DEFAULT_CURRENT_PAGE if page.current_page is None else page.current_page
        page_size = DEFAULT_PAGE_SIZE if page.page_size is None else page.page_size
        if current_page < 1:
            raise ValidationError(f"currentPage must be a positive integer, got {current_page}")
        if page_size < 1:
            raise ValidationError(f"pageSize must be a positive integer, got {page_size}")
        return cls(
            current_page=current_page,
            page_size=page_size,
            total_count=total_count,
            total_page=math.ceil(total_count / page_size),
            offset=(current_page - 1) * page_size,
        )


class SelectorQuery(FrozenCamelModel):
    plugin_id: Optional[str] = Field(None, description="Restrict the listing to one plugin")
    page: PageParameter = Field(default_factory=PageParameter)


class PagedResult(CamelModel):
    items: List[SelectorVO] = Field(default_factory=list)
    total_count: int = 0
    page: PageInfo
