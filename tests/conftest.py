"""
Test configuration and fixtures for gateway-admin tests.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from gateway_admin.main import app
from gateway_admin.dependencies import get_selector_service
from gateway_admin.db.database import build_engine, build_session_factory
from gateway_admin.db.init_db import create_tables
from gateway_admin.domain.events import event_publisher
from gateway_admin.schemas.selector import SelectorConditionDTO, SelectorDTO
from gateway_admin.services.memory_selector_service import InMemorySelectorService
from gateway_admin.services.sql_selector_service import SqlSelectorService


@pytest.fixture(autouse=True)
def clean_subscribers():
    """Keep event subscriptions from leaking between tests."""
    event_publisher.clear_subscribers()
    yield
    event_publisher.clear_subscribers()


@pytest.fixture
def memory_service():
    """Create an empty in-memory selector service."""
    return InMemorySelectorService()


@pytest.fixture
def session_factory():
    """Create a session factory bound to a fresh in-memory SQLite database."""
    engine = build_engine("sqlite://", poolclass=StaticPool)
    create_tables(engine)
    yield build_session_factory(engine)
    engine.dispose()


@pytest.fixture
def sql_service(session_factory):
    """Create a database-backed selector service."""
    return SqlSelectorService(session_factory=session_factory)


@pytest.fixture
def client(memory_service):
    """Create test client wired to the in-memory selector service."""
    app.dependency_overrides[get_selector_service] = lambda: memory_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def selector_payload():
    """A complete selector write payload in wire (camelCase) form."""
    return {
        "pluginId": "plugin-7",
        "name": "divide-selector",
        "matchMode": 0,
        "type": 1,
        "sort": 1,
        "enabled": True,
        "loged": True,
        "continued": True,
        "handle": None,
        "selectorConditions": [
            {"paramType": "uri", "operator": "match", "paramName": "/", "paramValue": "/http/**"}
        ],
    }


def make_selector(plugin_id="plugin-7", name="selector", sort=0, **overrides):
    """Build a new selector write model."""
    fields = dict(
        plugin_id=plugin_id,
        name=name,
        sort=sort,
        selector_conditions=[
            SelectorConditionDTO(param_type="uri", operator="=", param_name="/", param_value=f"/{name}")
        ],
    )
    fields.update(overrides)
    return SelectorDTO(**fields)


@pytest.fixture
def selector_factory():
    """Expose make_selector to tests."""
    return make_selector
