"""Tests for ScanContext: active language and diagnostic collection."""

import logging

import pytest

from pepino import (
    LanguageRegistry,
    LexConfig,
    ScanContext,
    UnsupportedLanguageError,
    create_default_registry,
    lex_config_context,
)
from pepino.context import Diagnostic
from pepino.location import SourceLocation


class TestCreate:
    """ScanContext.create defaults."""

    def test_defaults(self) -> None:
        context = ScanContext.create()
        assert context.language.code == "en"
        assert context.diagnostics == []

    def test_explicit_language(self) -> None:
        assert ScanContext.create("nl").language.code == "nl"

    def test_explicit_registry(self) -> None:
        registry = create_default_registry()
        context = ScanContext.create(registry=registry)
        assert context.registry is registry

    def test_empty_registry_is_not_replaced(self) -> None:
        with pytest.raises(UnsupportedLanguageError):
            ScanContext.create(registry=LanguageRegistry())


class TestReport:
    """Recording diagnostics."""

    def test_report_appends(self) -> None:
        context = ScanContext.create()
        location = SourceLocation(3, 1)
        with lex_config_context(LexConfig(log_diagnostics=False)):
            diagnostic = context.report("File: x has a problem", location)
        assert diagnostic == Diagnostic("File: x has a problem", location)
        assert context.diagnostics == [diagnostic]
        assert context.messages == ["File: x has a problem"]

    def test_report_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        context = ScanContext.create()
        with caplog.at_level(logging.WARNING, logger="pepino"):
            context.report("File: x has a problem")
        assert [r.getMessage() for r in caplog.records] == ["File: x has a problem"]


class TestSwitchLanguage:
    """Switching the active language."""

    def test_switch(self, caplog: pytest.LogCaptureFixture) -> None:
        context = ScanContext.create()
        with caplog.at_level(logging.DEBUG, logger="pepino"):
            context.switch_language(context.registry.get("es"))
        assert context.language.code == "es"
        assert "Language switched from en to es" in caplog.text
