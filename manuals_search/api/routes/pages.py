# manuals_search/api/routes/pages.py
"""Search page."""

from pathlib import Path
import anyio

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter()

WEB_DIR = Path(__file__).resolve().parents[2] / "web"


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index_page():
    """Serve the manuals search page."""
    html = await anyio.Path(WEB_DIR / "index.html").read_text(encoding="utf-8")
    return HTMLResponse(content=html)
