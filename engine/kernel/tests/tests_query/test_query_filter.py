"""
Stockboard Query — Filter Tests

apply_filter keeps products matching category AND in-stock AND search,
preserving input order. Search is a case-insensitive substring of the name
or, when present, the description.
"""

import pytest

from engine.kernel.mock_data import MOCK_PRODUCTS
from engine.kernel.query import apply_filter


def names(products):
    return [p["name"] for p in products]


class TestCategory:
    def test_no_filters_returns_everything(self):
        assert apply_filter(MOCK_PRODUCTS, "", False, "") == list(MOCK_PRODUCTS)

    def test_books(self):
        result = apply_filter(MOCK_PRODUCTS, "Books", False, "")
        assert names(result) == ["The Pragmatic Programmer", "Cooking Basics", "Mystery Novel Collection"]

    def test_category_with_no_products(self):
        assert apply_filter(MOCK_PRODUCTS, "Other", False, "") == []


class TestInStock:
    def test_excludes_zero_stock(self):
        result = apply_filter(MOCK_PRODUCTS, "", True, "")
        assert len(result) == 10
        assert all(p["stock"] > 0 for p in result)

    def test_combined_with_category(self):
        result = apply_filter(MOCK_PRODUCTS, "Furniture", True, "")
        assert names(result) == ["Standing Desk"]


class TestSearch:
    @pytest.mark.parametrize("query", ["desk", "DESK", "Desk"])
    def test_case_insensitive_name(self, query):
        assert names(apply_filter(MOCK_PRODUCTS, "", False, query)) == ["Standing Desk"]

    def test_matches_description(self):
        result = apply_filter(MOCK_PRODUCTS, "", False, "lumbar")
        assert names(result) == ["Ergonomic Office Chair"]

    def test_missing_description_matches_by_name(self):
        result = apply_filter(MOCK_PRODUCTS, "", False, "chocolate")
        assert names(result) == ["Dark Chocolate Bar"]

    def test_missing_description_never_matches_text(self):
        products = [{**MOCK_PRODUCTS[0], "name": "Plain", "description": None}]
        assert apply_filter(products, "", False, "none") == []

    def test_all_three_predicates(self):
        result = apply_filter(MOCK_PRODUCTS, "Books", True, "o")
        assert names(result) == ["The Pragmatic Programmer", "Cooking Basics", "Mystery Novel Collection"]
        result = apply_filter(MOCK_PRODUCTS, "Clothing", True, "jacket")
        assert result == []

    def test_input_not_mutated(self):
        products = list(MOCK_PRODUCTS)
        apply_filter(products, "Books", True, "x")
        assert products == list(MOCK_PRODUCTS)
