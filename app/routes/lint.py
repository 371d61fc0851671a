"""Lint route."""

from deps import APIRouter

from ..schemas import ErrorResponse, LintRequest, LintResponse
from ..services import LintService

router = APIRouter()
lint_svc = LintService()


@router.post(
    "/api/lint",
    response_model=LintResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 413: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def lint(req: LintRequest) -> LintResponse:
    """Analyze code against the requested compatibility targets."""
    return lint_svc.lint(req)
