"""
Stockboard Reducer — Filter, Pagination and Sorting Commands

Every filter change (one filter or several through filter.set) and every
page-size change sends the user back to page 1. page.set does not clamp.
sort.set stores the field and direction verbatim; an empty field means
insertion order.
"""

import pytest

from engine.kernel.reducer import reduce


@pytest.fixture
def on_page_two(seeded, cmd):
    result = reduce(seeded, cmd("page.set", {"page": 2}))
    assert result.state["pagination"]["current_page"] == 2
    return result.state


class TestFilters:
    def test_category(self, on_page_two, cmd):
        state = reduce(on_page_two, cmd("filter.category", {"category": "Books"})).state
        assert state["filters"]["category"] == "Books"
        assert state["pagination"]["current_page"] == 1

    def test_clear_category(self, seeded, cmd):
        state = reduce(seeded, cmd("filter.category", {"category": "Books"})).state
        state = reduce(state, cmd("filter.category", {"category": ""})).state
        assert state["filters"]["category"] == ""

    def test_toggle_in_stock(self, on_page_two, cmd):
        state = reduce(on_page_two, cmd("filter.toggle_in_stock")).state
        assert state["filters"]["in_stock_only"] is True
        assert state["pagination"]["current_page"] == 1
        state = reduce(state, cmd("filter.toggle_in_stock")).state
        assert state["filters"]["in_stock_only"] is False

    def test_search(self, on_page_two, cmd):
        state = reduce(on_page_two, cmd("filter.search", {"query": "desk"})).state
        assert state["filters"]["search_query"] == "desk"
        assert state["pagination"]["current_page"] == 1

    def test_set_several_filters_at_once(self, on_page_two, cmd):
        payload = {"category": "Furniture", "in_stock_only": True, "search_query": "desk"}
        result = reduce(on_page_two, cmd("filter.set", payload))
        assert result.applied
        assert result.state["filters"] == payload
        assert result.state["pagination"]["current_page"] == 1

    def test_set_filters_keeps_omitted_ones(self, seeded, cmd):
        state = reduce(seeded, cmd("filter.search", {"query": "desk"})).state
        state = reduce(state, cmd("filter.set", {"in_stock_only": True})).state
        assert state["filters"] == {"category": "", "in_stock_only": True, "search_query": "desk"}

    def test_filters_leave_products_and_selection_alone(self, seeded, cmd):
        state = reduce(seeded, cmd("selection.select", {"id": "p7k2m9x4a"})).state
        after = reduce(state, cmd("filter.category", {"category": "Books"})).state
        assert after["products"] == state["products"]
        assert after["selected_products"] == ["p7k2m9x4a"]


class TestPagination:
    def test_set_page(self, seeded, cmd):
        state = reduce(seeded, cmd("page.set", {"page": 2})).state
        assert state["pagination"]["current_page"] == 2

    def test_page_past_the_end_is_kept(self, seeded, cmd):
        state = reduce(seeded, cmd("page.set", {"page": 99})).state
        assert state["pagination"]["current_page"] == 99

    def test_page_size_resets_page(self, on_page_two, cmd):
        state = reduce(on_page_two, cmd("page.size", {"items_per_page": 5})).state
        assert state["pagination"] == {"current_page": 1, "items_per_page": 5}


class TestSorting:
    def test_set_sorting(self, seeded, cmd):
        state = reduce(seeded, cmd("sort.set", {"field": "price", "direction": "desc"})).state
        assert state["sorting"] == {"field": "price", "direction": "desc"}

    def test_sorting_keeps_page(self, on_page_two, cmd):
        state = reduce(on_page_two, cmd("sort.set", {"field": "price", "direction": "asc"})).state
        assert state["pagination"]["current_page"] == 2

    def test_empty_field_means_unsorted(self, seeded, cmd):
        state = reduce(seeded, cmd("sort.set", {"field": "", "direction": "asc"})).state
        assert state["sorting"]["field"] is None
