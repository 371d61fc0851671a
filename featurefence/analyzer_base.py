"""
Base analyzer class and analyzer options.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from .exceptions import InvalidInput
from .finding import Finding, Position, Severity
from .support import SupportMatrix


@dataclass(frozen=True)
class AnalyzerOptions:
    """Per-request options handed to an analyzer."""
    targets: SupportMatrix
    severity: Severity = Severity.WARN
    ignore: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def from_rule_options(cls, targets: SupportMatrix, rule_options: Optional[Dict[str, Any]] = None) -> "AnalyzerOptions":
        """Build options from a caller-supplied dict.

        Raises:
            InvalidInput: If a rule option has the wrong type or value
        """
        rule_options = rule_options or {}
        if not isinstance(rule_options, dict):
            raise InvalidInput("'options' must be an object")

        severity = rule_options.get("severity") or Severity.WARN.value
        if isinstance(severity, Severity):
            severity = severity.value
        if severity not in (Severity.ERROR.value, Severity.WARN.value):
            raise InvalidInput("'options.severity' must be 'warn' or 'error'")

        ignore = rule_options.get("ignore") or ()
        if not isinstance(ignore, (list, tuple, set, frozenset)) or not all(isinstance(i, str) for i in ignore):
            raise InvalidInput("'options.ignore' must be a list of feature ids")

        return cls(targets=targets, severity=Severity(severity), ignore=frozenset(ignore))


class BaseAnalyzer:
    """Base class for all analyzers.

    Instances hold per-run state, so the registry hands out a fresh one for
    every request.
    """

    language: str = ""
    aliases: Tuple[str, ...] = ()

    def __init__(self):
        self.findings: List[Finding] = []
        self.code: str = ""
        self.lines: List[str] = []
        self.options: Optional[AnalyzerOptions] = None

    def analyze(self, code: str, options: AnalyzerOptions) -> List[Finding]:
        """Run the analyzer over ``code`` and return its findings."""
        self.code = code
        self.lines = code.split("\n")
        self.options = options
        self.findings = []
        self._run_checks()
        return self.findings

    def _run_checks(self):
        """Override in subclasses to implement specific checks."""
        pass

    def _add_finding(
        self,
        rule: str,
        message: str,
        severity: Severity,
        line: int,
        column: int,
        end_line: Optional[int] = None,
        end_column: Optional[int] = None,
    ):
        """Add a finding to the list."""
        self.findings.append(
            Finding(rule, message, severity, Position(line, column, end_line, end_column))
        )
