"""Tests for application/catalog.py."""

import pytest

from consolediag.application.catalog import MessageCatalog
from consolediag.application.reporters.console import ConsoleReporter
from consolediag.domain.exceptions.message import MessageFormatError, UnknownMessageError
from consolediag.domain.model.severity import Severity
from tests.factories import ListSink, make_config, make_location

TEMPLATES = {
    1001: "The {0} attribute is not valid on the {1} element.",
    500: "Fatal configuration error.",
    9: "",
}


class TestMessageCatalogResolve:
    """Tests for MessageCatalog.resolve."""

    def test_substitutes_args(self) -> None:
        catalog = MessageCatalog(TEMPLATES)
        assert catalog.resolve(1001, "Foo", "Component") == (
            "The Foo attribute is not valid on the Component element."
        )

    def test_no_args(self) -> None:
        assert MessageCatalog(TEMPLATES).resolve(500) == "Fatal configuration error."

    def test_unknown_id_raises(self) -> None:
        with pytest.raises(UnknownMessageError) as exc_info:
            MessageCatalog(TEMPLATES).resolve(4242)
        assert exc_info.value.message_id == 4242

    def test_missing_args_raises(self) -> None:
        with pytest.raises(MessageFormatError):
            MessageCatalog(TEMPLATES).resolve(1001, "Foo")

    def test_suppressed_is_none(self) -> None:
        catalog = MessageCatalog(TEMPLATES, suppressed=[1001])
        assert catalog.resolve(1001, "Foo", "Component") is None
        assert catalog.suppressed == frozenset({1001})

    def test_empty_text_is_none(self) -> None:
        assert MessageCatalog(TEMPLATES).resolve(9) is None

    def test_contains_and_len(self) -> None:
        catalog = MessageCatalog(TEMPLATES)
        assert 1001 in catalog
        assert 4242 not in catalog
        assert len(catalog) == 3

    def test_copies_templates(self) -> None:
        templates = {1: "one"}
        catalog = MessageCatalog(templates)
        templates[2] = "two"
        assert 2 not in catalog


class TestMessageCatalogEvent:
    """Tests for MessageCatalog.event."""

    def test_builds_event(self) -> None:
        loc = make_location("a.wxs", 12)
        event = MessageCatalog(TEMPLATES).event(
            1001, Severity.WARNING, "Foo", "Component", locations=(loc,)
        )
        assert event.id == 1001
        assert event.severity is Severity.WARNING
        assert event.locations == (loc,)
        assert event.text == "The Foo attribute is not valid on the Component element."
        assert event.args == ("Foo", "Component")

    def test_suppressed_event_is_not_reported(self) -> None:
        catalog = MessageCatalog(TEMPLATES, suppressed=[500])
        sink = ListSink()
        reporter = ConsoleReporter(make_config(), sink)
        reporter.report(catalog.event(500, Severity.ERROR))
        assert sink.messages == []
        assert reporter.last_error_number == 0

    def test_end_to_end(self) -> None:
        catalog = MessageCatalog(TEMPLATES)
        sink = ListSink()
        reporter = ConsoleReporter(make_config(), sink)
        reporter.report(catalog.event(500, Severity.ERROR))
        assert sink.texts == ["candle.exe : error CNDL0500 : Fatal configuration error."]
        assert reporter.last_error_number == 500
