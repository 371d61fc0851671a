"""
Finding data models for the FeatureFence diagnostic gateway.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .support import SupportTarget


class Severity(Enum):
    """Externally visible severities. There is no third level."""
    ERROR = "error"
    WARN = "warn"


@dataclass(frozen=True)
class Position:
    """1-based source span of a finding."""
    line: int
    column: int
    end_line: Optional[int] = None
    end_column: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        out = {"line": self.line, "column": self.column}
        if self.end_line is not None:
            out["endLine"] = self.end_line
        if self.end_column is not None:
            out["endColumn"] = self.end_column
        return out


@dataclass(frozen=True)
class FeatureUsage:
    """A detected occurrence of a platform feature in source text."""
    feature_id: str
    position: Position


@dataclass(frozen=True)
class Finding:
    """A single diagnostic produced by an analyzer."""
    rule: str
    message: str
    severity: Any
    location: Position

    def to_dict(self) -> Dict[str, Any]:
        severity = self.severity.value if isinstance(self.severity, Severity) else self.severity
        return {
            "rule": self.rule,
            "message": self.message,
            "severity": severity,
            "location": self.location.to_dict(),
        }


@dataclass(frozen=True)
class Annotation:
    """Non-fatal note about the request, e.g. an ignored target token."""
    message: str
    token: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"token": self.token, "message": self.message}


@dataclass(frozen=True)
class Summary:
    level: str
    errors: int
    warnings: int
    total: int


@dataclass(frozen=True)
class DiagnosticReport:
    """Normalized response contract returned to every transport."""
    summary: Summary
    items: Tuple[Finding, ...] = ()
    annotations: Tuple[Annotation, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": {
                "level": self.summary.level,
                "errors": self.summary.errors,
                "warnings": self.summary.warnings,
                "total": self.summary.total,
            },
            "items": [f.to_dict() for f in self.items],
            "annotations": [a.to_dict() for a in self.annotations],
        }


@dataclass
class CompatibilityVerdict:
    """Outcome of checking one feature against a support matrix."""
    feature_id: str
    unsupported_on: List[SupportTarget] = field(default_factory=list)

    @property
    def supported(self) -> bool:
        return not self.unsupported_on
