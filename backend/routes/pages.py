"""Dashboard page — GET / serves the rendered inventory dashboard."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from backend.config import settings
from backend.deps import get_store
from engine.kernel.renderer import render_html
from engine.kernel.store import ProductStore
from engine.kernel.types import RenderOptions

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def dashboard(
    page: int | None = Query(default=None, ge=1),
    chart: bool = True,
    store: ProductStore = Depends(get_store),
) -> HTMLResponse:
    """
    Render the dashboard from the current state.

    `page` previews another page without changing the stored pagination;
    use PUT /api/view/page to move the store itself.
    """
    state = store.snapshot()
    if page is not None:
        state["pagination"]["current_page"] = page

    html = render_html(state, RenderOptions(show_chart=chart, title=settings.TITLE, base_url="/"))
    return HTMLResponse(content=html, headers={"X-Content-Type-Options": "nosniff"})
