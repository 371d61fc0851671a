"""FastAPI app: /api/status, /api/echo, /api/lint and the playground."""

from contextlib import asynccontextmanager

from deps import (
    CORSMiddleware,
    FastAPI,
    JSONResponse,
    Request,
    RequestValidationError,
    StarletteHTTPException,
    logging,
)
from featurefence import AnalyzerFailure, InvalidInput, PayloadTooLarge

from .config import get_log_level, get_max_body_bytes
from .routes import echo_router, lint_router, root_router, status_router
from .routes.lint import lint_svc
from .startup import validate_config

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger("featurefence.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    validate_config()
    # load the data files before the first request
    _ = lint_svc.gateway
    yield


app = FastAPI(
    title="FeatureFence Playground API",
    description="Flags platform features unsupported by a browserslist-style compatibility target.",
    version="0.1.0",
    lifespan=lifespan,
)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.middleware("http")
async def limit_body_size(request: Request, call_next):
    """Reject bodies over the configured limit before they are parsed."""
    length = request.headers.get("content-length")
    if length and length.isdigit() and int(length) > get_max_body_bytes():
        return _error(413, "Payload too large")
    return await call_next(request)


# Added last: CORS must be the outermost layer so 413s carry its headers.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PayloadTooLarge)
def _payload_too_large(_request: Request, exc: PayloadTooLarge) -> JSONResponse:
    return _error(413, str(exc))


@app.exception_handler(InvalidInput)
def _invalid_input(_request: Request, exc: InvalidInput) -> JSONResponse:
    return _error(400, str(exc))


@app.exception_handler(AnalyzerFailure)
def _analyzer_failure(_request: Request, exc: AnalyzerFailure) -> JSONResponse:
    return _error(500, "Analysis failed due to an internal error")


@app.exception_handler(RequestValidationError)
def _validation_error(_request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if not errors:
        return _error(400, "Invalid request body")
    first = errors[0]
    where = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    message = first.get("msg", "invalid value")
    return _error(400, f"Invalid request body: {where + ': ' if where else ''}{message}")


@app.exception_handler(StarletteHTTPException)
def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code in (404, 405):
        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"
        return _error(404, f"Not found: {request.method} {path}")
    return _error(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error(500, "Internal server error")


app.include_router(root_router)
app.include_router(status_router)
app.include_router(echo_router)
app.include_router(lint_router)
