"""
Seed collection for a fresh store.

Twelve products across the catalog, including out-of-stock and low-stock
items and records without an image or description.
"""

from __future__ import annotations

from typing import Any

MOCK_PRODUCTS: list[dict[str, Any]] = [
    {
        "id": "p7k2m9x4a",
        "name": "Wireless Headphones",
        "category": "Electronics",
        "price": 129.99,
        "stock": 45,
        "image": "https://images.example.com/products/headphones.jpg",
        "description": "Over-ear noise cancelling headphones with 30-hour battery life.",
        "created_at": "2024-01-15T09:30:00.000Z",
        "updated_at": "2024-03-02T14:12:00.000Z",
    },
    {
        "id": "q3n8v1c6b",
        "name": "Smart Watch",
        "category": "Electronics",
        "price": 249.5,
        "stock": 8,
        "image": "https://images.example.com/products/smartwatch.jpg",
        "description": "Fitness tracking, heart-rate monitor and GPS.",
        "created_at": "2024-01-20T11:00:00.000Z",
        "updated_at": "2024-01-20T11:00:00.000Z",
    },
    {
        "id": "r5t2w8e3d",
        "name": "Cotton T-Shirt",
        "category": "Clothing",
        "price": 19.99,
        "stock": 120,
        "image": None,
        "description": "Organic cotton crew neck, available in five colours.",
        "created_at": "2024-02-01T08:15:00.000Z",
        "updated_at": "2024-02-10T16:45:00.000Z",
    },
    {
        "id": "s9y4u7i2f",
        "name": "Denim Jacket",
        "category": "Clothing",
        "price": 89.0,
        "stock": 0,
        "image": "https://images.example.com/products/denim-jacket.jpg",
        "description": "Classic fit jacket in washed denim.",
        "created_at": "2024-02-03T10:20:00.000Z",
        "updated_at": "2024-02-28T09:05:00.000Z",
    },
    {
        "id": "t1o6p3a8g",
        "name": "Organic Coffee Beans",
        "category": "Food",
        "price": 14.75,
        "stock": 64,
        "image": None,
        "description": "Single-origin arabica, medium roast, 1kg bag.",
        "created_at": "2024-02-12T07:45:00.000Z",
        "updated_at": "2024-02-12T07:45:00.000Z",
    },
    {
        "id": "u4s9d2f7h",
        "name": "Dark Chocolate Bar",
        "category": "Food",
        "price": 3.49,
        "stock": 5,
        "image": None,
        "description": None,
        "created_at": "2024-02-14T12:00:00.000Z",
        "updated_at": "2024-02-14T12:00:00.000Z",
    },
    {
        "id": "v8g3h6j1k",
        "name": "Standing Desk",
        "category": "Furniture",
        "price": 499.0,
        "stock": 12,
        "image": "https://images.example.com/products/standing-desk.jpg",
        "description": "Electric height-adjustable desk with memory presets.",
        "created_at": "2024-02-20T15:30:00.000Z",
        "updated_at": "2024-03-05T10:10:00.000Z",
    },
    {
        "id": "w2k7l4z9m",
        "name": "Ergonomic Office Chair",
        "category": "Furniture",
        "price": 329.99,
        "stock": 0,
        "image": "https://images.example.com/products/office-chair.jpg",
        "description": "Mesh back, lumbar support and adjustable armrests.",
        "created_at": "2024-02-22T09:00:00.000Z",
        "updated_at": "2024-02-22T09:00:00.000Z",
    },
    {
        "id": "x6c1v5b3n",
        "name": "The Pragmatic Programmer",
        "category": "Books",
        "price": 42.0,
        "stock": 23,
        "image": "https://images.example.com/products/pragmatic-programmer.jpg",
        "description": "20th anniversary edition of the classic software engineering book.",
        "created_at": "2024-03-01T13:25:00.000Z",
        "updated_at": "2024-03-01T13:25:00.000Z",
    },
    {
        "id": "y3b8n2m6q",
        "name": "Cooking Basics",
        "category": "Books",
        "price": 24.95,
        "stock": 3,
        "image": None,
        "description": "Step-by-step recipes for the home kitchen.",
        "created_at": "2024-03-03T17:40:00.000Z",
        "updated_at": "2024-03-04T08:00:00.000Z",
    },
    {
        "id": "z9m4q7w1r",
        "name": "Mystery Novel Collection",
        "category": "Books",
        "price": 35.5,
        "stock": 17,
        "image": None,
        "description": None,
        "created_at": "2024-03-06T10:05:00.000Z",
        "updated_at": "2024-03-06T10:05:00.000Z",
    },
    {
        "id": "a5e2r8t4s",
        "name": "Wooden Building Blocks",
        "category": "Toys",
        "price": 29.99,
        "stock": 31,
        "image": "https://images.example.com/products/building-blocks.jpg",
        "description": "100-piece set of natural beech wood blocks.",
        "created_at": "2024-03-08T14:50:00.000Z",
        "updated_at": "2024-03-08T14:50:00.000Z",
    },
]
