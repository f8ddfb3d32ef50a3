"""Product routes — list, get, create, replace, patch, delete, and selection."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status

from backend.deps import get_store
from backend.models.product import ProductForm, ProductPatch, ProductResponse, SelectionResponse
from engine.kernel.store import ProductStore

router = APIRouter(prefix="/api/products", tags=["products"])
selection_router = APIRouter(prefix="/api/selection", tags=["selection"])


def _require(store: ProductStore, product_id: str) -> dict:
    product = store.get_product(product_id)
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found.")
    return product


# ── products ────────────────────────────────────────────────────────────────


@router.get("", status_code=200)
async def list_products(store: ProductStore = Depends(get_store)) -> list[ProductResponse]:
    """All products in insertion order (unfiltered)."""
    return [ProductResponse.from_dict(p) for p in store.snapshot()["products"]]


@router.post("", status_code=201)
async def create_product(req: ProductForm, store: ProductStore = Depends(get_store)) -> ProductResponse:
    """Add a product. The store assigns the id and timestamps."""
    result = store.dispatch("product.add", {"fields": req.to_fields()})
    return ProductResponse.from_dict(result.state["products"][-1])


@router.get("/{product_id}", status_code=200)
async def get_product(product_id: str, store: ProductStore = Depends(get_store)) -> ProductResponse:
    return ProductResponse.from_dict(_require(store, product_id))


@router.put("/{product_id}", status_code=200)
async def replace_product(
    product_id: str,
    req: ProductForm,
    store: ProductStore = Depends(get_store),
) -> ProductResponse:
    """Overwrite every editable field of a product."""
    _require(store, product_id)
    store.update_product({"id": product_id, **req.to_fields()})
    return ProductResponse.from_dict(_require(store, product_id))


@router.patch("/{product_id}", status_code=200)
async def patch_product(
    product_id: str,
    req: ProductPatch,
    store: ProductStore = Depends(get_store),
) -> ProductResponse:
    """Merge the supplied fields into a product."""
    _require(store, product_id)
    store.update_product({"id": product_id, **req.to_fields()})
    return ProductResponse.from_dict(_require(store, product_id))


@router.delete("/{product_id}", status_code=204)
async def delete_product(product_id: str, store: ProductStore = Depends(get_store)) -> Response:
    """Delete a product. Deleting an unknown id is not an error."""
    store.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ── selection ───────────────────────────────────────────────────────────────


def _selection(store: ProductStore) -> SelectionResponse:
    return SelectionResponse(selected_products=store.snapshot()["selected_products"])


@selection_router.get("", status_code=200)
async def get_selection(store: ProductStore = Depends(get_store)) -> SelectionResponse:
    return _selection(store)


@selection_router.post("/all", status_code=200)
async def select_all(store: ProductStore = Depends(get_store)) -> SelectionResponse:
    store.select_all_products()
    return _selection(store)


@selection_router.delete("", status_code=200)
async def clear_selection(store: ProductStore = Depends(get_store)) -> SelectionResponse:
    store.deselect_all_products()
    return _selection(store)


@selection_router.post("/delete", status_code=200)
async def delete_selected(store: ProductStore = Depends(get_store)) -> SelectionResponse:
    """Batch delete every selected product."""
    store.delete_selected_products()
    return _selection(store)


@selection_router.put("/{product_id}", status_code=200)
async def select_product(product_id: str, store: ProductStore = Depends(get_store)) -> SelectionResponse:
    store.select_product(product_id)
    return _selection(store)


@selection_router.delete("/{product_id}", status_code=200)
async def deselect_product(product_id: str, store: ProductStore = Depends(get_store)) -> SelectionResponse:
    store.deselect_product(product_id)
    return _selection(store)


@selection_router.post("/{product_id}/toggle", status_code=200)
async def toggle_product(product_id: str, store: ProductStore = Depends(get_store)) -> SelectionResponse:
    store.toggle_product_selection(product_id)
    return _selection(store)
