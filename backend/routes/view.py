"""View routes — filters, sorting, pagination, the derived page, and stats."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from backend.deps import get_store
from backend.models.product import (
    FiltersRequest,
    PageRequest,
    PageSizeRequest,
    ProductResponse,
    SortingRequest,
    StatsResponse,
    ViewResponse,
)
from engine.kernel.query import category_distribution, inventory_summary, next_sort, resolve_page
from engine.kernel.store import ProductStore
from engine.kernel.types import PRODUCT_FIELDS

router = APIRouter(prefix="/api", tags=["view"])


def _view(store: ProductStore) -> ViewResponse:
    """Derive the page from one snapshot so the parameters match the items."""
    state = store.snapshot()
    page = resolve_page(state)
    return ViewResponse(
        items=[ProductResponse.from_dict(p) for p in page.items],
        total_items=page.total_items,
        total_pages=page.total_pages,
        current_page=page.current_page,
        items_per_page=page.items_per_page,
        all_on_page_selected=page.all_on_page_selected,
        filters=state["filters"],
        sorting=state["sorting"],
        selected_products=state["selected_products"],
    )


@router.get("/view", status_code=200)
async def get_view(store: ProductStore = Depends(get_store)) -> ViewResponse:
    """The currently displayed page: filter → sort → paginate."""
    return _view(store)


@router.put("/view/filters", status_code=200)
async def set_filters(req: FiltersRequest, store: ProductStore = Depends(get_store)) -> ViewResponse:
    """
    Apply the supplied filters as one command and reset the page to 1.
    Omitted filters keep their value; an empty body changes nothing.
    """
    filters = req.model_dump(exclude_none=True)
    if filters:
        store.set_filters(**filters)
    return _view(store)


@router.post("/view/filters/in-stock/toggle", status_code=200)
async def toggle_in_stock(store: ProductStore = Depends(get_store)) -> ViewResponse:
    store.toggle_in_stock_filter()
    return _view(store)


@router.put("/view/page", status_code=200)
async def set_page(req: PageRequest, store: ProductStore = Depends(get_store)) -> ViewResponse:
    """Go to a page. Pages past the end are allowed and show no items."""
    store.set_current_page(req.page)
    return _view(store)


@router.put("/view/page-size", status_code=200)
async def set_page_size(req: PageSizeRequest, store: ProductStore = Depends(get_store)) -> ViewResponse:
    store.set_items_per_page(req.items_per_page)
    return _view(store)


@router.put("/view/sorting", status_code=200)
async def set_sorting(req: SortingRequest, store: ProductStore = Depends(get_store)) -> ViewResponse:
    store.set_sorting(req.field, req.direction)
    return _view(store)


@router.post("/view/sorting/{field}", status_code=200)
async def click_sort_header(field: str, store: ProductStore = Depends(get_store)) -> ViewResponse:
    """Column header click: flip the active column, otherwise sort ascending."""
    if field not in PRODUCT_FIELDS:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=f"Unknown sort field: {field}")
    new_field, direction = next_sort(store.snapshot()["sorting"], field)
    store.set_sorting(new_field, direction)
    return _view(store)


@router.get("/stats", status_code=200)
async def get_stats(store: ProductStore = Depends(get_store)) -> StatsResponse:
    """Header figures and the category distribution chart."""
    state = store.snapshot()
    return StatsResponse(
        **inventory_summary(state),
        categories=category_distribution(state["products"]),
    )
