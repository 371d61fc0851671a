"""Pydantic request/response models."""

from typing import Literal

from deps import Any, BaseModel, ConfigDict, Dict, Field, List, Optional


# --- Request ---


class LintOptions(BaseModel):
    """Rule options for the feature-compatibility rule."""

    model_config = ConfigDict(extra="forbid")

    severity: Optional[str] = Field(default=None, description="warn (default) or error")
    ignore: Optional[List[str]] = Field(default=None, description="Feature ids to skip")


class LintRequest(BaseModel):
    """Request body for POST /api/lint.

    ``code`` is loosely typed so that a missing or non-string value reaches
    the gateway and is reported as a 400, not a schema error.
    """

    language: Optional[str] = Field(default=None, description="Language: javascript (default), js, ...")
    code: Any = Field(default=None, description="Source code to analyze")
    targets: Optional[str] = Field(default=None, description="Browserslist-style target query")
    options: Optional[LintOptions] = None


# --- Lint response ---


class LocationOut(BaseModel):
    """1-based source position."""

    model_config = ConfigDict(populate_by_name=True)

    line: int
    column: int
    end_line: Optional[int] = Field(default=None, alias="endLine")
    end_column: Optional[int] = Field(default=None, alias="endColumn")


class FindingOut(BaseModel):
    """Single diagnostic."""

    rule: str
    message: str
    severity: Literal["error", "warn"]
    location: LocationOut


class SummaryOut(BaseModel):
    level: Literal["ok", "warn", "error"]
    errors: int
    warnings: int
    total: int


class AnnotationOut(BaseModel):
    """Non-fatal note, e.g. an ignored target token."""

    token: Optional[str] = None
    message: str


class LintResponse(BaseModel):
    """Response for POST /api/lint."""

    ok: bool = True
    language: str
    summary: SummaryOut
    items: List[FindingOut] = Field(default_factory=list)
    annotations: List[AnnotationOut] = Field(default_factory=list)


# --- Other responses ---


class StatusResponse(BaseModel):
    """Response for GET /api/status."""

    ok: bool = True
    name: str
    time: str = Field(..., description="ISO-8601 UTC timestamp")
    uptime: float = Field(..., description="Seconds since process start")
    version: str


class EchoResponse(BaseModel):
    """Response for POST /api/echo."""

    method: str
    path: str
    headers: Dict[str, str]
    body: Any = None


class ErrorResponse(BaseModel):
    """Error body for every non-2xx response."""

    error: str = Field(..., description="Error message")
