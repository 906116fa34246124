"""Tests for domain events and event handling."""
from __future__ import annotations

import logging
from datetime import datetime
from unittest.mock import Mock

from gateway_admin.application.event_handlers import AuditLogHandler, register_event_handlers
from gateway_admin.domain.events import (
    DomainEvent, SelectorCreated, SelectorUpdated, SelectorsDeleted,
    DomainEventPublisher, event_publisher
)


class TestDomainEvent:
    """Test base domain event functionality."""

    def test_domain_event_defaults(self):
        """Test domain event creation with generated id and timestamp."""
        event = DomainEvent(aggregate_id="selector-1")
        
        assert event.aggregate_id == "selector-1"
        assert event.event_id
        assert isinstance(event.timestamp, datetime)

    def test_domain_event_with_custom_values(self):
        """Test domain event creation with custom values."""
        custom_timestamp = datetime(2024, 1, 1, 12, 0, 0)
        
        event = DomainEvent(aggregate_id="selector-1", event_id="custom", timestamp=custom_timestamp)
        
        assert event.event_id == "custom"
        assert event.timestamp == custom_timestamp

    def test_event_ids_are_unique(self):
        first = SelectorCreated(aggregate_id="a", plugin_id="p", name="n")
        second = SelectorCreated(aggregate_id="a", plugin_id="p", name="n")
        
        assert first.event_id != second.event_id


class TestDomainEventPublisher:
    """Test event publisher."""

    def test_publisher_is_singleton(self):
        assert DomainEventPublisher() is event_publisher

    def test_publish_to_subscribers_of_type_only(self):
        created_handler = Mock()
        deleted_handler = Mock()
        event_publisher.subscribe(SelectorCreated, created_handler)
        event_publisher.subscribe(SelectorsDeleted, deleted_handler)
        
        event = SelectorCreated(aggregate_id="a", plugin_id="p", name="n")
        event_publisher.publish(event)
        
        created_handler.assert_called_once_with(event)
        deleted_handler.assert_not_called()

    def test_failing_handler_does_not_stop_others(self, caplog):
        failing = Mock(side_effect=RuntimeError("handler broke"))
        healthy = Mock()
        event_publisher.subscribe(SelectorsDeleted, failing)
        event_publisher.subscribe(SelectorsDeleted, healthy)
        
        with caplog.at_level(logging.ERROR):
            event_publisher.publish(SelectorsDeleted(aggregate_id="a", selector_ids=["a"]))
        
        healthy.assert_called_once()
        assert "Event handler error for SelectorsDeleted" in caplog.text

    def test_publish_without_subscribers(self):
        event_publisher.publish(SelectorUpdated(aggregate_id="a", plugin_id="p", name="n"))


class TestAuditLogHandler:
    """Test audit logging of selector changes."""

    def test_registered_handlers_log_changes(self, caplog):
        register_event_handlers()
        
        with caplog.at_level(logging.INFO):
            event_publisher.publish(SelectorCreated(aggregate_id="s1", plugin_id="plugin-7", name="divide"))
            event_publisher.publish(SelectorsDeleted(aggregate_id="s1", selector_ids=["s1", "s2"]))
        
        assert "[AUDIT] Selector created: s1 - divide (plugin plugin-7)" in caplog.text
        assert "[AUDIT] Selectors deleted: s1, s2" in caplog.text

    def test_update_message(self, caplog):
        with caplog.at_level(logging.INFO):
            AuditLogHandler().handle_selector_updated(
                SelectorUpdated(aggregate_id="s1", plugin_id="plugin-7", name="renamed")
            )
        
        assert "[AUDIT] Selector updated: s1 - renamed" in caplog.text
