"""Status route."""

from deps import APIRouter, datetime, time, timezone

from ..config import get_app_name, get_app_version
from ..schemas import StatusResponse

router = APIRouter()

_STARTED = time.monotonic()


@router.get("/api/status", response_model=StatusResponse)
def status() -> StatusResponse:
    """Liveness and build info."""
    return StatusResponse(
        ok=True,
        name=get_app_name(),
        time=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        uptime=round(time.monotonic() - _STARTED, 3),
        version=get_app_version(),
    )
