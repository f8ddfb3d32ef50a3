"""Integration tests for /api/products and /api/selection."""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.asyncio

LAMP = {"name": "Desk Lamp", "category": "Furniture", "price": 19.5, "stock": 4}


# ── products ────────────────────────────────────────────────────────────────


class TestProductRoutes:
    """Tests for /api/products endpoints."""

    async def test_list_products(self, async_client):
        """GET /api/products → all twelve, insertion order."""
        res = await async_client.get("/api/products")
        assert res.status_code == 200
        data = res.json()
        assert len(data) == 12
        assert data[0]["id"] == "p7k2m9x4a"

    async def test_get_product(self, async_client):
        res = await async_client.get("/api/products/v8g3h6j1k")
        assert res.status_code == 200
        assert res.json()["name"] == "Standing Desk"

    async def test_get_unknown_product(self, async_client):
        """GET /api/products/{id} for a missing id → 404."""
        res = await async_client.get("/api/products/nope")
        assert res.status_code == 404

    async def test_create_product(self, async_client, store):
        """POST /api/products → 201 with generated id and timestamps."""
        res = await async_client.post("/api/products", json=LAMP)
        assert res.status_code == 201
        data = res.json()
        assert data["name"] == "Desk Lamp"
        assert len(data["id"]) == 9
        assert data["created_at"] == data["updated_at"]
        assert data["image"] is None
        assert store.get_product(data["id"]) is not None

    async def test_create_trims_and_blanks_optional(self, async_client):
        res = await async_client.post(
            "/api/products",
            json={**LAMP, "name": "  Desk Lamp  ", "description": "   ", "image": ""},
        )
        assert res.status_code == 201
        data = res.json()
        assert data["name"] == "Desk Lamp"
        assert data["description"] is None
        assert data["image"] is None

    async def test_create_keeps_valid_image(self, async_client):
        url = "https://images.example.com/lamp.jpg"
        res = await async_client.post("/api/products", json={**LAMP, "image": url})
        assert res.status_code == 201
        assert res.json()["image"] == url

    @pytest.mark.parametrize(
        "override",
        [
            {"name": ""},
            {"name": "   "},
            {"price": -1},
            {"stock": -5},
            {"category": "Garden"},
            {"image": "not a url"},
        ],
    )
    async def test_create_invalid(self, async_client, store, override):
        """Form rules → 422, nothing added."""
        res = await async_client.post("/api/products", json={**LAMP, **override})
        assert res.status_code == 422
        assert len(store.snapshot()["products"]) == 12

    async def test_create_rejects_unknown_fields(self, async_client):
        res = await async_client.post("/api/products", json={**LAMP, "id": "mine"})
        assert res.status_code == 422

    async def test_create_error_messages(self, async_client):
        res = await async_client.post("/api/products", json={**LAMP, "name": " ", "image": "nope"})
        messages = " ".join(err["msg"] for err in res.json()["detail"])
        assert "Product name is required" in messages
        assert "Please enter a valid URL" in messages

    async def test_replace_product(self, async_client):
        res = await async_client.put("/api/products/p7k2m9x4a", json=LAMP)
        assert res.status_code == 200
        data = res.json()
        assert data["id"] == "p7k2m9x4a"
        assert data["name"] == "Desk Lamp"
        assert data["created_at"] == "2024-01-15T09:30:00.000Z"
        assert data["updated_at"] > "2024-03-02T14:12:00.000Z"

    async def test_patch_product(self, async_client):
        res = await async_client.patch("/api/products/p7k2m9x4a", json={"stock": 3})
        assert res.status_code == 200
        data = res.json()
        assert data["stock"] == 3
        assert data["name"] == "Wireless Headphones"

    async def test_patch_null_required_field(self, async_client):
        res = await async_client.patch("/api/products/p7k2m9x4a", json={"price": None})
        assert res.status_code == 422

    async def test_patch_clears_description(self, async_client):
        res = await async_client.patch("/api/products/p7k2m9x4a", json={"description": None})
        assert res.status_code == 200
        assert res.json()["description"] is None

    async def test_update_unknown_product(self, async_client):
        res = await async_client.patch("/api/products/nope", json={"stock": 3})
        assert res.status_code == 404
        res = await async_client.put("/api/products/nope", json=LAMP)
        assert res.status_code == 404

    async def test_delete_product(self, async_client, store):
        """DELETE removes the product and its selection entry."""
        store.select_product("p7k2m9x4a")
        res = await async_client.delete("/api/products/p7k2m9x4a")
        assert res.status_code == 204
        assert store.get_product("p7k2m9x4a") is None
        assert store.snapshot()["selected_products"] == []

    async def test_delete_unknown_is_idempotent(self, async_client):
        res = await async_client.delete("/api/products/nope")
        assert res.status_code == 204


# ── selection ───────────────────────────────────────────────────────────────


class TestSelectionRoutes:
    """Tests for /api/selection endpoints."""

    async def test_empty_selection(self, async_client):
        res = await async_client.get("/api/selection")
        assert res.json() == {"selected_products": []}

    async def test_select_and_deselect(self, async_client):
        res = await async_client.put("/api/selection/p7k2m9x4a")
        assert res.json()["selected_products"] == ["p7k2m9x4a"]
        res = await async_client.put("/api/selection/p7k2m9x4a")
        assert res.json()["selected_products"] == ["p7k2m9x4a"]
        res = await async_client.delete("/api/selection/p7k2m9x4a")
        assert res.json()["selected_products"] == []

    async def test_select_unknown_id_ignored(self, async_client):
        res = await async_client.put("/api/selection/ghost")
        assert res.status_code == 200
        assert res.json()["selected_products"] == []

    async def test_toggle(self, async_client):
        res = await async_client.post("/api/selection/q3n8v1c6b/toggle")
        assert res.json()["selected_products"] == ["q3n8v1c6b"]
        res = await async_client.post("/api/selection/q3n8v1c6b/toggle")
        assert res.json()["selected_products"] == []

    async def test_select_all_and_clear(self, async_client):
        res = await async_client.post("/api/selection/all")
        assert len(res.json()["selected_products"]) == 12
        res = await async_client.delete("/api/selection")
        assert res.json()["selected_products"] == []

    async def test_delete_selected(self, async_client, store):
        await async_client.put("/api/selection/x6c1v5b3n")
        await async_client.put("/api/selection/y3b8n2m6q")
        res = await async_client.post("/api/selection/delete")
        assert res.json()["selected_products"] == []
        assert len(store.snapshot()["products"]) == 10
