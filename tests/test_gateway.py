"""Tests for request orchestration in the lint gateway."""

import json

import pytest

from featurefence import (
    AnalyzerFailure,
    AnalyzerRegistry,
    InvalidInput,
    LintGateway,
    PayloadTooLarge,
    Severity,
)
from featurefence.analyzer_base import BaseAnalyzer
from featurefence.gateway import GatewayState

VIEW_TRANSITION = "document.startViewTransition(() => {\n  console.log('demo');\n});"
GROUP_BY = "const groups = Object.groupBy(items, (i) => i.kind);"


class _Crashing(BaseAnalyzer):
    language = "crash"

    def _run_checks(self):
        raise RuntimeError("parser exploded")


class TestValidation:
    @pytest.mark.parametrize("code", [None, "", "   \n\t", 42, ["x"]])
    def test_missing_or_blank_code(self, gateway, code):
        with pytest.raises(InvalidInput):
            gateway.lint(code)

    def test_oversized_code(self, index, resolver):
        small = LintGateway(resolver=resolver, max_code_length=10)
        with pytest.raises(PayloadTooLarge):
            small.lint("x" * 11)

    def test_non_string_targets(self, gateway):
        with pytest.raises(InvalidInput):
            gateway.lint("a?.b", targets=5)

    def test_bad_rule_options(self, gateway):
        with pytest.raises(InvalidInput):
            gateway.lint("a?.b", options={"severity": "fatal"})


class TestDispatch:
    def test_language_defaults_to_javascript(self, gateway):
        result = gateway.lint("let a = 1;")
        assert result.language == "javascript"
        assert result.state is GatewayState.COMPLETED
        assert result.report.summary.level == "ok"

    def test_language_is_normalized(self, gateway):
        assert gateway.lint("let a = 1;", language="  JS ").language == "js"

    def test_unknown_language_degrades_to_one_warning(self, gateway):
        result = gateway.lint("++++[>+<-]", language="brainfuck")
        report = result.report
        assert len(report.items) == 1
        assert report.items[0].rule == "unsupported-language"
        assert report.items[0].severity is Severity.WARN
        assert report.summary.level == "warn"
        assert report.summary.total == 1

    def test_analyzer_built_only_for_registered_language(self, resolver):
        built = []

        def factory():
            built.append(1)
            return BaseAnalyzer()

        registry = AnalyzerRegistry()
        registry.register("plain", factory)
        gw = LintGateway(registry=registry, resolver=resolver, default_language="plain")
        gw.lint("x", language="cobol")
        assert built == []
        gw.lint("x")
        gw.lint("x")
        assert len(built) == 2

    def test_analyzer_crash_becomes_analyzer_failure(self, resolver):
        registry = AnalyzerRegistry()
        registry.register("crash", _Crashing)
        crashing = LintGateway(registry=registry, resolver=resolver, default_language="crash")
        with pytest.raises(AnalyzerFailure) as exc_info:
            crashing.lint("anything")
        assert exc_info.value.language == "crash"
        assert isinstance(exc_info.value.cause, RuntimeError)


class TestCompatibilityScenarios:
    def test_default_targets(self, gateway):
        report = gateway.lint(VIEW_TRANSITION).report
        assert report.summary.total == 1
        message = report.items[0].message
        for runtime in ("firefox 128", "ios_saf 17.6", "safari 17.6"):
            assert runtime in message
        assert "chrome" not in message

    def test_omitted_and_empty_targets_match_default_query(self, gateway):
        omitted = gateway.lint(VIEW_TRANSITION).report.to_dict()
        empty = gateway.lint(VIEW_TRANSITION, targets="").report.to_dict()
        explicit = gateway.lint(VIEW_TRANSITION, targets=">=0.5%, last 2 versions, not dead").report.to_dict()
        assert omitted == empty == explicit

    def test_feature_supported_by_default_but_not_by_legacy_target(self, gateway):
        code = "if (Object.hasOwn(obj, 'id')) {}"
        assert gateway.lint(code).report.summary.total == 0
        report = gateway.lint(code, targets="ie 11").report
        assert report.summary.total == 1
        assert "ie 11" in report.items[0].message

    def test_runtime_below_required_version(self, gateway):
        report = gateway.lint(GROUP_BY, targets="firefox >= 115").report
        assert len(report.items) == 1
        assert "firefox" in report.items[0].message
        assert "Object.groupBy" in report.items[0].message

    def test_runtime_at_or_above_required_version(self, gateway):
        report = gateway.lint(GROUP_BY, targets="firefox >= 120").report
        assert report.items == ()
        assert report.summary.level == "ok"

    def test_error_severity_option(self, gateway):
        report = gateway.lint(GROUP_BY, targets="firefox >= 115", options={"severity": "error"}).report
        assert report.summary.level == "error"
        assert report.summary.errors == 1

    def test_malformed_target_does_not_abort(self, gateway):
        result = gateway.lint(VIEW_TRANSITION, targets="not a real token")
        assert result.state is GatewayState.COMPLETED
        assert result.report.summary.total == 1
        assert result.report.annotations[0].token == "not a real token"


class TestInvariants:
    @pytest.mark.parametrize("targets", [None, "last 1 versions", "ie 11, chrome 120", "bogus"])
    def test_repeated_calls_are_identical(self, gateway, targets):
        code = "a?.b ?? c; x.at(-1); class K { #p; static {} }"
        first = json.dumps(gateway.lint(code, targets=targets).to_dict(), sort_keys=True)
        second = json.dumps(gateway.lint(code, targets=targets).to_dict(), sort_keys=True)
        assert first == second

    @pytest.mark.parametrize("language, targets", [
        ("javascript", "ie 11"),
        ("javascript", None),
        ("css", None),
    ])
    def test_total_matches_items(self, gateway, language, targets):
        code = "a?.b; Promise.any([]); [].flat();"
        report = gateway.lint(code, language=language, targets=targets).report
        s = report.summary
        assert s.total == s.errors + s.warnings == len(report.items)

    def test_result_to_dict(self, gateway):
        out = gateway.lint("let a = 1;", language="js").to_dict()
        assert out["ok"] is True
        assert out["language"] == "js"
        assert set(out) == {"ok", "language", "summary", "items", "annotations"}
