"""Tests for the analyzer registry."""

import pytest

from featurefence import AnalyzerRegistry, Severity, build_default_registry
from featurefence.analyzers import JavaScriptAnalyzer
from featurefence.registry import UNSUPPORTED_LANGUAGE_RULE, unsupported_language_finding


class TestAnalyzerRegistry:
    def test_lookup_is_case_insensitive(self, index):
        registry = build_default_registry(index)
        assert isinstance(registry.get("JavaScript"), JavaScriptAnalyzer)
        assert isinstance(registry.get(" js "), JavaScriptAnalyzer)

    def test_fresh_analyzer_per_lookup(self, index):
        registry = build_default_registry(index)
        assert registry.get("javascript") is not registry.get("javascript")

    def test_unknown_language(self, index):
        registry = build_default_registry(index)
        assert registry.get("brainfuck") is None
        assert registry.get("") is None
        assert "brainfuck" not in registry

    def test_supported_languages_lists_primary_names(self, index):
        assert build_default_registry(index).supported_languages() == ["javascript"]

    def test_duplicate_registration(self):
        registry = AnalyzerRegistry()
        registry.register("x", object)
        with pytest.raises(ValueError):
            registry.register("X", object)


def test_unsupported_language_finding():
    f = unsupported_language_finding("python", ["javascript"])
    assert f.rule == UNSUPPORTED_LANGUAGE_RULE
    assert f.severity is Severity.WARN
    assert "'python'" in f.message
    assert "'javascript'" in f.message
    assert (f.location.line, f.location.column) == (1, 1)
