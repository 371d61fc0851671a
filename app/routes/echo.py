"""Echo route (debug utility)."""

from deps import APIRouter, HTTPException, Request, json

from ..schemas import EchoResponse

router = APIRouter()


@router.post("/api/echo", response_model=EchoResponse)
async def echo(request: Request) -> EchoResponse:
    """Return the request method, path, headers and parsed JSON body."""
    body = {}
    raw = await request.body()
    if raw and "json" in request.headers.get("content-type", ""):
        try:
            body = json.loads(raw)
        except ValueError:
            raise HTTPException(400, "Invalid JSON body")
    return EchoResponse(
        method=request.method,
        path=request.url.path,
        headers=dict(request.headers),
        body=body,
    )
