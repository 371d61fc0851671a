"""
Gateway that runs one lint request end to end.

validating -> resolving -> analyzing -> normalizing -> completed, or failed.
Stateless between calls; the only shared data is the read-only runtime
catalog and compatibility index behind the resolver and the registry.
"""

import dataclasses
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .analyzer_base import AnalyzerOptions
from .exceptions import AnalyzerFailure, FeatureFenceError, InvalidInput, PayloadTooLarge
from .finding import DiagnosticReport
from .normalizer import normalize
from .registry import AnalyzerRegistry, build_default_registry, unsupported_language_finding
from .support import SupportMatrix
from .targets import TargetResolver

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "javascript"
DEFAULT_MAX_CODE_LENGTH = 500 * 1024


class GatewayState(Enum):
    VALIDATING = "validating"
    RESOLVING = "resolving"
    ANALYZING = "analyzing"
    NORMALIZING = "normalizing"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class LintResult:
    """Completed request: the resolved language, targets and report."""
    language: str
    report: DiagnosticReport
    targets: Optional[SupportMatrix] = None
    state: GatewayState = GatewayState.COMPLETED

    def to_dict(self) -> Dict[str, Any]:
        return {"ok": True, "language": self.language, **self.report.to_dict()}


@dataclass
class _Run:
    language: str = ""
    state: GatewayState = GatewayState.VALIDATING

    def enter(self, state: GatewayState):
        logger.debug("lint %s: %s -> %s", self.language or "?", self.state.value, state.value)
        self.state = state


class LintGateway:
    """Validates a request, dispatches it to an analyzer and normalizes the output."""

    def __init__(
        self,
        registry: Optional[AnalyzerRegistry] = None,
        resolver: Optional[TargetResolver] = None,
        default_language: str = DEFAULT_LANGUAGE,
        max_code_length: int = DEFAULT_MAX_CODE_LENGTH,
    ):
        self.registry = registry if registry is not None else build_default_registry()
        self.resolver = resolver if resolver is not None else TargetResolver()
        self.default_language = default_language
        self.max_code_length = max_code_length

    def lint(
        self,
        code: Any,
        language: Optional[str] = None,
        targets: Optional[str] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> LintResult:
        """Lint ``code`` and return a normalized report.

        Raises:
            InvalidInput: Code missing/blank/too large, or bad rule options
            AnalyzerFailure: The analyzer raised while processing the code
        """
        run = _Run()
        try:
            base_options = self._validate(code, targets, options)

            run.language = str(language or "").strip().lower() or self.default_language
            run.enter(GatewayState.RESOLVING)
            if run.language not in self.registry:
                logger.info("No analyzer for language '%s'", run.language)
                finding = unsupported_language_finding(run.language, self.registry.supported_languages())
                run.enter(GatewayState.NORMALIZING)
                report = normalize([finding])
                run.enter(GatewayState.COMPLETED)
                return LintResult(run.language, report)

            analyzer = self.registry.get(run.language)
            resolved = self.resolver.resolve(targets)

            run.enter(GatewayState.ANALYZING)
            analyzer_options = dataclasses.replace(base_options, targets=resolved.matrix)
            try:
                findings = analyzer.analyze(code, analyzer_options)
            except Exception as e:
                logger.exception("Analyzer for '%s' failed", run.language)
                raise AnalyzerFailure(run.language, e) from e

            run.enter(GatewayState.NORMALIZING)
            report = normalize(findings, resolved.annotations)
            run.enter(GatewayState.COMPLETED)
            return LintResult(run.language, report, resolved.matrix)
        except FeatureFenceError as e:
            run.enter(GatewayState.FAILED)
            logger.debug("lint failed: %s", e)
            raise

    def _validate(self, code: Any, targets: Any, options: Optional[Dict[str, Any]]) -> AnalyzerOptions:
        if not isinstance(code, str) or not code.strip():
            raise InvalidInput("Missing 'code' (string)")
        if len(code) > self.max_code_length:
            raise PayloadTooLarge(len(code), self.max_code_length)
        if targets is not None and not isinstance(targets, str):
            raise InvalidInput("'targets' must be a string")
        return AnalyzerOptions.from_rule_options(SupportMatrix(), options)
