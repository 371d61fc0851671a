"""Playground route."""

from deps import APIRouter, HTMLResponse

from featurefence import DEFAULT_QUERY

from ..config import get_app_name
from ..templates import render_playground

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
@router.get("/playground", response_class=HTMLResponse)
def playground() -> str:
    """One-page HTML playground for the JSON API."""
    return render_playground(get_app_name(), DEFAULT_QUERY)
