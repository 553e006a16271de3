# app/client_view/routes.py
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

TEMPLATE_PATH = Path(__file__).parent / "templates" / "index.html"

router = APIRouter()


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def client_page(request: Request):
    """Single-page note taking UI (list, create and detail views)."""
    html = TEMPLATE_PATH.read_text(encoding="utf-8")
    return HTMLResponse(html.replace("{{API_PREFIX}}", request.app.state.settings.API_PREFIX))
