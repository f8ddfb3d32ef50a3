"""
Stockboard Kernel — Renderer

Pure function: (state, options?) → HTML string (or text string)
No IO. Deterministic: same input → same output, always.

- render_html: the dashboard page (header counts, active filters, product
  table, pagination, category distribution), built from Mustache templates
- render_text: the same page for the terminal

Both read the derived page through the query pipeline; neither touches
the store.
"""

from __future__ import annotations

from typing import Any

import chevron

from engine.kernel.query import (
    category_distribution,
    format_currency,
    format_date,
    has_low_stock,
    inventory_summary,
    page_numbers,
    resolve_page,
)
from engine.kernel.types import PageView, RenderOptions

# Columns shown in the product table: (field, label)
TABLE_COLUMNS: list[tuple[str, str]] = [
    ("name", "Product"),
    ("category", "Category"),
    ("price", "Price"),
    ("stock", "Stock"),
    ("updated_at", "Last Updated"),
]

# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{{title}}</title>
  <style>
{{{css}}}
  </style>
</head>
<body>
  <header class="sb-header">
    <h1>{{title}}</h1>
    <p class="sb-counts">{{summary.total_products}} products | {{summary.selected_count}} selected</p>
  </header>
  <main class="sb-page">
    <section class="sb-filters">
      <span>Active filters:</span>
      {{#active_filters}}<span class="sb-chip">{{.}}</span>{{/active_filters}}
      {{^active_filters}}<span class="sb-muted">None</span>{{/active_filters}}
    </section>
    {{#has_selection}}
    <div class="sb-batch">{{selection_label}} selected</div>
    {{/has_selection}}
    <table class="sb-table">
      <thead>
        <tr>
          <th><input type="checkbox" {{#page.all_on_page_selected}}checked{{/page.all_on_page_selected}}></th>
          {{#columns}}<th data-field="{{field}}">{{label}} {{indicator}}</th>{{/columns}}
        </tr>
      </thead>
      <tbody>
        {{#rows}}
        <tr data-id="{{id}}"{{#selected}} class="sb-selected"{{/selected}}>
          <td><input type="checkbox" {{#selected}}checked{{/selected}}></td>
          <td>{{name}}{{#description}}<div class="sb-muted">{{description}}</div>{{/description}}</td>
          <td>{{category}}</td>
          <td>{{price}}</td>
          <td>{{stock}}{{#out_of_stock}} <span class="sb-badge sb-error">Out of stock</span>{{/out_of_stock}}{{#low_stock}} <span class="sb-badge sb-warning">Low stock</span>{{/low_stock}}</td>
          <td>{{updated}}</td>
        </tr>
        {{/rows}}
        {{^rows}}
        <tr><td colspan="6" class="sb-empty">No products found.</td></tr>
        {{/rows}}
      </tbody>
    </table>
    <nav class="sb-pagination">
      <span>Showing {{range_label}} of {{page.total_items}}</span>
      {{#pages}}<a href="{{base_url}}?page={{number}}"{{#current}} class="sb-current"{{/current}}>{{number}}</a>{{/pages}}
    </nav>
    {{#show_chart}}
    <section class="sb-chart">
      <h3>Product Distribution by Category</h3>
      {{#chart}}
      <div class="sb-bar-row">
        <span class="sb-bar-label">{{category}}</span>
        <span class="sb-bar" style="width: {{percentage}}%"></span>
        <span class="sb-bar-value">{{count}} ({{percentage}}%)</span>
      </div>
      {{/chart}}
    </section>
    {{/show_chart}}
  </main>
</body>
</html>
"""

BASE_CSS = """
body { font-family: system-ui, sans-serif; background: #f9fafb; color: #111827; margin: 0; }
.sb-header { background: #fff; padding: 24px 32px; box-shadow: 0 1px 2px rgba(0,0,0,0.05); }
.sb-page { max-width: 1200px; margin: 0 auto; padding: 32px; }
.sb-muted { color: #6b7280; font-size: 0.875rem; }
.sb-chip { background: #dbeafe; color: #1e40af; border-radius: 4px; padding: 2px 8px; margin-right: 4px; }
.sb-batch { background: #eff6ff; padding: 12px 16px; }
.sb-table { width: 100%; border-collapse: collapse; background: #fff; }
.sb-table th, .sb-table td { padding: 8px 12px; border-bottom: 1px solid #e5e7eb; text-align: left; }
.sb-selected { background: #eff6ff; }
.sb-badge { border-radius: 4px; padding: 1px 6px; font-size: 0.75rem; }
.sb-error { background: #fee2e2; color: #991b1b; }
.sb-warning { background: #fef3c7; color: #92400e; }
.sb-pagination a { margin: 0 4px; }
.sb-current { font-weight: bold; }
.sb-bar { display: inline-block; height: 8px; background: #3b82f6; }
""".strip()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def render_html(state: dict[str, Any], options: RenderOptions | None = None) -> str:
    """
    Render the dashboard page for a state.
    Pure function. No side effects. No IO.
    """
    opts = options or RenderOptions()
    return chevron.render(PAGE_TEMPLATE, _build_context(state, opts))


def render_text(state: dict[str, Any]) -> str:
    """Render the dashboard as plain text (terminal)."""
    page = resolve_page(state)
    summary = inventory_summary(state)
    selected = set(state["selected_products"])
    sorting = state["sorting"]

    lines: list[str] = []
    lines.append(f"{summary['total_products']} products | {summary['selected_count']} selected")
    filters = _active_filters(state)
    lines.append(f"Filters: {', '.join(filters) if filters else 'None'}")
    if sorting["field"]:
        lines.append(f"Sorted by: {sorting['field']} {sorting['direction']}")
    lines.append("")

    header = f"{'':3}{'ID':<10} {'Product':<28} {'Category':<12} {'Price':>10} {'Stock':>6}"
    lines.append(header)
    lines.append("-" * len(header))
    if not page.items:
        lines.append("   No products found.")
    for product in page.items:
        mark = "[x]" if product["id"] in selected else "[ ]"
        flag = ""
        if product["stock"] <= 0:
            flag = "  out of stock"
        elif has_low_stock(product["stock"]):
            flag = "  low stock"
        lines.append(
            f"{mark}{product['id']:<10} {_truncate(product['name'], 28):<28} {product['category']:<12} "
            f"{format_currency(product['price']):>10} {product['stock']:>6}{flag}"
        )

    lines.append("")
    lines.append(f"Page {page.current_page} of {page.total_pages} ({_range_label(page)} of {page.total_items})")
    return "\n".join(lines)


def render_chart_text(products: list[dict[str, Any]], width: int = 30) -> str:
    """Category distribution as horizontal text bars."""
    lines = []
    for row in category_distribution(products):
        bar = "#" * round(row["percentage"] / 100 * width)
        lines.append(f"{row['category']:<12} {bar:<{width}} {row['count']:>3} ({row['percentage']}%)")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Context building
# ---------------------------------------------------------------------------


def _build_context(state: dict[str, Any], opts: RenderOptions) -> dict[str, Any]:
    page = resolve_page(state)
    summary = inventory_summary(state)
    selected = set(state["selected_products"])
    count = summary["selected_count"]

    return {
        "title": opts.title,
        "css": BASE_CSS,
        "base_url": opts.base_url,
        "summary": summary,
        "active_filters": _active_filters(state),
        "has_selection": count > 0,
        "selection_label": f"{count} {'item' if count == 1 else 'items'}",
        "columns": _columns(state["sorting"]),
        "rows": [_row(product, product["id"] in selected) for product in page.items],
        "page": page.to_dict(),
        "range_label": _range_label(page),
        "pages": [{"number": n, "current": n == page.current_page} for n in page_numbers(page.total_pages)],
        "show_chart": opts.show_chart,
        "chart": category_distribution(state["products"]),
    }


def _row(product: dict[str, Any], selected: bool) -> dict[str, Any]:
    return {
        "id": product["id"],
        "name": product["name"],
        "description": product.get("description"),
        "category": product["category"],
        "price": format_currency(product["price"]),
        "stock": product["stock"],
        "out_of_stock": product["stock"] <= 0,
        "low_stock": 0 < product["stock"] and has_low_stock(product["stock"]),
        "updated": format_date(product["updated_at"]),
        "selected": selected,
    }


def _columns(sorting: dict[str, Any]) -> list[dict[str, str]]:
    columns = []
    for field, label in TABLE_COLUMNS:
        indicator = "↕"
        if sorting["field"] == field:
            indicator = "↑" if sorting["direction"] == "asc" else "↓"
        columns.append({"field": field, "label": label, "indicator": indicator})
    return columns


def _active_filters(state: dict[str, Any]) -> list[str]:
    filters = state["filters"]
    active = []
    if filters["category"]:
        active.append(filters["category"])
    if filters["in_stock_only"]:
        active.append("In Stock")
    if filters["search_query"]:
        active.append(f'Search: "{filters["search_query"]}"')
    return active


def _range_label(page: PageView) -> str:
    if not page.items:
        return "0"
    start = (page.current_page - 1) * page.items_per_page + 1
    return f"{start}-{start + len(page.items) - 1}"


def _truncate(text: str, width: int) -> str:
    return text if len(text) <= width else text[: width - 1] + "…"
