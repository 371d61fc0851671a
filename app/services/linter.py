"""Lint service: wraps the featurefence gateway and maps to API models."""

from deps import Any, Dict, Optional, logging

from featurefence import Finding, LintGateway
from featurefence.finding import Annotation

from ..schemas import AnnotationOut, FindingOut, LintRequest, LintResponse, LocationOut, SummaryOut
from ..startup import build_gateway

logger = logging.getLogger(__name__)


def _finding_to_out(f: Finding) -> FindingOut:
    loc = f.location
    return FindingOut(
        rule=f.rule,
        message=f.message,
        severity=f.severity.value,
        location=LocationOut(
            line=loc.line,
            column=loc.column,
            end_line=loc.end_line,
            end_column=loc.end_column,
        ),
    )


def _annotation_to_out(a: Annotation) -> AnnotationOut:
    return AnnotationOut(token=a.token, message=a.message)


class LintService:
    """Wraps LintGateway for use by the API."""

    def __init__(self, gateway: Optional[LintGateway] = None):
        self._gateway = gateway

    @property
    def gateway(self) -> LintGateway:
        if self._gateway is None:
            self._gateway = build_gateway()
        return self._gateway

    def lint(self, req: LintRequest) -> LintResponse:
        """Run the gateway for one request. Gateway errors propagate to the app's handlers."""
        options: Optional[Dict[str, Any]] = None
        if req.options is not None:
            options = req.options.model_dump(exclude_none=True)
        result = self.gateway.lint(req.code, language=req.language, targets=req.targets, options=options)
        report = result.report
        return LintResponse(
            ok=True,
            language=result.language,
            summary=SummaryOut(
                level=report.summary.level,
                errors=report.summary.errors,
                warnings=report.summary.warnings,
                total=report.summary.total,
            ),
            items=[_finding_to_out(f) for f in report.items],
            annotations=[_annotation_to_out(a) for a in report.annotations],
        )
