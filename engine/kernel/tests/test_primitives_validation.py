"""
Stockboard Primitives — Validation Tests

Tests for command payload validation (structural checks).
The validator checks if payloads are well-formed before they reach the reducer.

  - product.add: requires fields name, category, price, stock
  - product.update: requires id and fields
  - product.delete / selection.*: requires id
  - filter.category / filter.search: require strings
  - filter.set: a non-empty subset of the known filters, correctly typed
  - page.set / page.size: require positive integers
  - sort.set: requires a known field (or none) and asc/desc
"""

import pytest

from engine.kernel.primitives import validate_command

VALID_FIELDS = {"name": "Desk Lamp", "category": "Furniture", "price": 19.5, "stock": 4}

# ============================================================================
# Envelope
# ============================================================================


class TestEnvelope:
    def test_unknown_type(self):
        errors = validate_command("product.archive", {})
        assert len(errors) == 1
        assert "Unknown command type" in errors[0]

    def test_payload_must_be_dict(self):
        errors = validate_command("product.delete", None)
        assert errors == ["Payload must be a non-null object"]

    @pytest.mark.parametrize(
        "type",
        ["product.delete_selected", "selection.select_all", "selection.clear", "filter.toggle_in_stock"],
    )
    def test_payloadless_commands_accept_empty_payload(self, type):
        assert validate_command(type, {}) == []


# ============================================================================
# product.add
# ============================================================================


class TestProductAddValidation:
    def test_valid(self):
        assert validate_command("product.add", {"id": "abc123def", "fields": VALID_FIELDS}) == []

    def test_valid_without_id(self):
        """The store assigns ids; structurally an id is optional."""
        assert validate_command("product.add", {"fields": VALID_FIELDS}) == []

    def test_optional_fields_may_be_null(self):
        fields = {**VALID_FIELDS, "image": None, "description": None}
        assert validate_command("product.add", {"fields": fields}) == []

    def test_missing_fields(self):
        errors = validate_command("product.add", {})
        assert any("requires 'fields'" in e for e in errors)

    @pytest.mark.parametrize("missing", ["name", "category", "price", "stock"])
    def test_missing_required_field(self, missing):
        fields = {k: v for k, v in VALID_FIELDS.items() if k != missing}
        errors = validate_command("product.add", {"fields": fields})
        assert any(f"field '{missing}'" in e for e in errors)

    def test_reducer_owned_fields_are_rejected(self):
        fields = {**VALID_FIELDS, "created_at": "2024-01-01T00:00:00.000Z"}
        errors = validate_command("product.add", {"fields": fields})
        assert any("Unknown product field: created_at" in e for e in errors)

    def test_empty_id_rejected(self):
        errors = validate_command("product.add", {"id": "", "fields": VALID_FIELDS})
        assert any("Invalid product ID" in e for e in errors)

    def test_wrong_types(self):
        fields = {"name": 3, "category": "Books", "price": "cheap", "stock": 1.5}
        errors = validate_command("product.add", {"fields": fields})
        assert "'name' must be a string" in errors
        assert "'price' must be a number" in errors
        assert "'stock' must be an integer" in errors

    def test_bool_is_not_a_number(self):
        errors = validate_command("product.add", {"fields": {**VALID_FIELDS, "price": True}})
        assert "'price' must be a number" in errors


# ============================================================================
# product.update
# ============================================================================


class TestProductUpdateValidation:
    def test_valid_partial(self):
        assert validate_command("product.update", {"id": "p7k2m9x4a", "fields": {"stock": 3}}) == []

    def test_missing_id(self):
        errors = validate_command("product.update", {"fields": {"stock": 3}})
        assert "product.update requires 'id'" in errors

    def test_unknown_field(self):
        errors = validate_command("product.update", {"id": "p7k2m9x4a", "fields": {"colour": "red"}})
        assert "Unknown product field: colour" in errors

    def test_fields_must_be_object(self):
        errors = validate_command("product.update", {"id": "p7k2m9x4a", "fields": ["stock"]})
        assert "'fields' must be an object" in errors


# ============================================================================
# id-only commands
# ============================================================================


class TestIdCommands:
    @pytest.mark.parametrize(
        "type",
        ["product.delete", "selection.select", "selection.deselect", "selection.toggle"],
    )
    def test_requires_id(self, type):
        assert validate_command(type, {}) == [f"{type} requires 'id'"]
        assert validate_command(type, {"id": "p7k2m9x4a"}) == []


# ============================================================================
# Filters, pagination, sorting
# ============================================================================


class TestViewValidation:
    def test_category_filter(self):
        assert validate_command("filter.category", {"category": ""}) == []
        assert validate_command("filter.category", {"category": None}) != []

    def test_search(self):
        assert validate_command("filter.search", {"query": "desk"}) == []
        assert validate_command("filter.search", {}) != []

    def test_set_filters(self):
        assert validate_command("filter.set", {"category": "Books", "in_stock_only": True, "search_query": ""}) == []
        assert validate_command("filter.set", {"search_query": "desk"}) == []

    def test_set_filters_needs_at_least_one(self):
        assert validate_command("filter.set", {}) == ["filter.set requires at least one filter"]

    def test_set_filters_rejects_unknown_and_mistyped(self):
        errors = validate_command("filter.set", {"colour": "red", "in_stock_only": "yes"})
        assert "Unknown filter: colour" in errors
        assert "'in_stock_only' must be a bool" in errors

    @pytest.mark.parametrize("page", [0, -1, 1.0, "2", True])
    def test_page_must_be_positive_int(self, page):
        assert validate_command("page.set", {"page": page}) != []

    def test_page_past_the_end_is_structurally_valid(self):
        assert validate_command("page.set", {"page": 999}) == []

    def test_page_size(self):
        assert validate_command("page.size", {"items_per_page": 20}) == []
        assert validate_command("page.size", {"items_per_page": 0}) != []

    @pytest.mark.parametrize("field", ["name", "price", "created_at", "", None])
    def test_sort_fields(self, field):
        assert validate_command("sort.set", {"field": field, "direction": "asc"}) == []

    def test_sort_unknown_field(self):
        errors = validate_command("sort.set", {"field": "colour", "direction": "asc"})
        assert errors == ["Unknown sort field: colour"]

    def test_sort_bad_direction(self):
        errors = validate_command("sort.set", {"field": "name", "direction": "up"})
        assert any("Invalid sort direction" in e for e in errors)

    def test_sort_requires_field_key(self):
        errors = validate_command("sort.set", {"direction": "asc"})
        assert "sort.set requires 'field'" in errors
