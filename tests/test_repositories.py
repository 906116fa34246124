"""Tests for the selector repository and paging schema."""
from __future__ import annotations

import pytest

from gateway_admin.db.repositories import SelectorRepository
from gateway_admin.domain.errors import ValidationError
from gateway_admin.schemas.selector import PageInfo, PageParameter, SelectorDTO


def selector_fields(name, plugin_id="plugin-7", sort=0, conditions=None):
    return {
        "plugin_id": plugin_id,
        "name": name,
        "match_mode": 0,
        "type": 1,
        "sort": sort,
        "enabled": True,
        "loged": True,
        "continued": True,
        "handle": None,
        "conditions": conditions or [],
    }


@pytest.fixture
def repo(session_factory):
    with session_factory() as db:
        yield SelectorRepository(db)


class TestSelectorRepository:
    """Test selector repository operations."""

    def test_create_and_get(self, repo):
        conditions = [
            {"param_type": "uri", "operator": "=", "param_name": "/", "param_value": "/a"},
            {"param_type": "header", "operator": "=", "param_name": "x-env", "param_value": "prod"},
        ]
        created = repo.create_selector(selector_fields("a", conditions=conditions))

        fetched = repo.get_selector(created.id)

        assert fetched is not None
        assert fetched.name == "a"
        assert [condition.param_value for condition in fetched.conditions] == ["/a", "prod"]
        assert [condition.position for condition in fetched.conditions] == [0, 1]

    def test_get_missing(self, repo):
        assert repo.get_selector("missing") is None

    def test_count_and_page(self, repo):
        for index in range(4):
            repo.create_selector(selector_fields(f"s{index}", sort=3 - index))
        repo.create_selector(selector_fields("other", plugin_id="plugin-9"))

        assert repo.count() == 5
        assert repo.count("plugin-7") == 4
        names = [selector.name for selector in repo.list_page("plugin-7", offset=1, limit=2)]
        assert names == ["s2", "s1"]

    def test_update_replaces_conditions(self, repo):
        created = repo.create_selector(
            selector_fields("a", conditions=[{"param_type": "uri", "operator": "=", "param_name": "/", "param_value": "/a"}])
        )

        updated = repo.update_selector(created, selector_fields("b"))

        assert updated.name == "b"
        assert updated.conditions == []

    def test_delete_selectors(self, repo):
        first = repo.create_selector(selector_fields("a"))
        second = repo.create_selector(selector_fields("b"))

        deleted = repo.delete_selectors([first.id, second.id, "missing"])

        assert sorted(deleted) == sorted([first.id, second.id])
        assert repo.count() == 0

    def test_delete_nothing(self, repo):
        assert repo.delete_selectors([]) == []


class TestPageInfo:
    """Test page parameter resolution."""

    def test_resolve_defaults(self):
        page = PageInfo.resolve(PageParameter(), total_count=30)

        assert page.current_page == 1
        assert page.page_size == 12
        assert page.total_page == 3
        assert page.offset == 0

    def test_resolve_explicit(self):
        page = PageInfo.resolve(PageParameter(current_page=3, page_size=10), total_count=21)

        assert page.total_page == 3
        assert page.offset == 20

    def test_resolve_rejects_zero(self):
        with pytest.raises(ValidationError, match="pageSize must be a positive integer"):
            PageInfo.resolve(PageParameter(current_page=1, page_size=0), total_count=0)

    def test_camel_case_wire_names(self):
        page = PageInfo.resolve(PageParameter(current_page=1, page_size=5), total_count=7)

        assert page.model_dump(by_alias=True) == {
            "currentPage": 1,
            "pageSize": 5,
            "totalCount": 7,
            "totalPage": 2,
            "offset": 0,
        }


class TestSelectorDTO:
    """Test the write model."""

    def test_accepts_camel_case(self):
        dto = SelectorDTO.model_validate({"pluginId": "plugin-7", "matchMode": 1, "selectorConditions": [{"paramType": "uri"}]})

        assert dto.plugin_id == "plugin-7"
        assert dto.match_mode == 1
        assert dto.selector_conditions[0].param_type == "uri"

    def test_is_immutable(self):
        dto = SelectorDTO(id="A")

        with pytest.raises(Exception):
            dto.id = "B"

    def test_with_id_returns_new_value(self):
        dto = SelectorDTO(id="A", name="n")

        renamed = dto.with_id("B")

        assert renamed.id == "B"
        assert renamed.name == "n"
        assert dto.id == "A"
