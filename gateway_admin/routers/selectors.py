from fastapi import APIRouter, Body, Depends, Path, Query
from gateway_admin.schemas.envelope import AdminResult
from gateway_admin.schemas.selector import SelectorDTO
from gateway_admin.dependencies import get_selector_access_service
from gateway_admin.application.selector_access_service import (
    SelectorAccessService,
    QUERY_SELECTORS,
    DETAIL_SELECTOR,
    CREATE_SELECTOR,
    UPDATE_SELECTOR,
    DELETE_SELECTORS,
)
from typing import List, Optional

router = APIRouter(prefix="/selector")

# Route name -> operation label, used to shape request validation failures
OPERATION_LABELS = {
    "query_selectors": QUERY_SELECTORS,
    "detail_selector": DETAIL_SELECTOR,
    "create_selector": CREATE_SELECTOR,
    "update_selector": UPDATE_SELECTOR,
    "delete_selectors": DELETE_SELECTORS,
}

@router.get("", response_model=AdminResult)
def query_selectors(
    owner_id: Optional[str] = Query(None, alias="ownerId", description="ID of the owning plugin"),
    current_page: Optional[int] = Query(None, alias="currentPage"),
    page_size: Optional[int] = Query(None, alias="pageSize"),
    access: SelectorAccessService = Depends(get_selector_access_service),
):
    """
    List selectors page by page, optionally only those of one plugin.
    """
    return access.query_selectors(owner_id, current_page, page_size).result()

@router.get("/{id}", response_model=AdminResult)
def detail_selector(
    id: str = Path(..., title="The ID of the selector to retrieve"),
    access: SelectorAccessService = Depends(get_selector_access_service),
):
    """
    Get a selector by ID; ``data`` is null when it does not exist.
    """
    return access.detail_selector(id).result()

@router.post("", response_model=AdminResult)
def create_selector(
    selector: Optional[SelectorDTO] = Body(None),
    access: SelectorAccessService = Depends(get_selector_access_service),
):
    """
    Create a selector. ``data`` is the number of stored selectors.
    """
    return access.create_selector(selector).result()

@router.put("/{id}", response_model=AdminResult)
def update_selector(
    id: str = Path(..., title="The ID of the selector to update"),
    selector: Optional[SelectorDTO] = Body(None),
    access: SelectorAccessService = Depends(get_selector_access_service),
):
    """
    Overwrite a selector. The path ID replaces any ID in the body.
    """
    return access.update_selector(id, selector).result()

@router.delete("/batch", response_model=AdminResult)
def delete_selectors(
    ids: List[str] = Body(...),
    access: SelectorAccessService = Depends(get_selector_access_service),
):
    """
    Delete selectors by ID. ``data`` is the number actually deleted.
    """
    return access.delete_selectors(ids).result()
