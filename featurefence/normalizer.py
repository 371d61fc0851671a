"""
Diagnostic normalizer: raw analyzer findings -> DiagnosticReport.
"""

from typing import Any, Iterable, List

from .finding import Annotation, DiagnosticReport, Finding, Severity, Summary

_ERROR_SEVERITIES = {"error", "err", "fatal", "2"}


def coerce_severity(value: Any) -> Severity:
    """Map any analyzer severity onto error or warn.

    Only explicit errors (``Severity.ERROR``, "error", ESLint's numeric 2)
    become errors; everything else is a warning.
    """
    if isinstance(value, Severity):
        return value
    if isinstance(value, bool):
        return Severity.WARN
    if str(value).strip().lower() in _ERROR_SEVERITIES:
        return Severity.ERROR
    return Severity.WARN


def summarize(items: List[Finding]) -> Summary:
    errors = sum(1 for i in items if i.severity is Severity.ERROR)
    warnings = len(items) - errors
    if errors:
        level = "error"
    elif warnings:
        level = "warn"
    else:
        level = "ok"
    return Summary(level=level, errors=errors, warnings=warnings, total=len(items))


def normalize(findings: Iterable[Finding], annotations: Iterable[Annotation] = ()) -> DiagnosticReport:
    """Build the report. Item order is the order the analyzer produced."""
    items = [
        Finding(f.rule or "(no-rule)", f.message, coerce_severity(f.severity), f.location)
        for f in findings
    ]
    return DiagnosticReport(
        summary=summarize(items),
        items=tuple(items),
        annotations=tuple(annotations),
    )
