"""REPL for the Stockboard CLI."""

from __future__ import annotations

import shlex

from pydantic import ValidationError

from backend.models.product import ProductForm, ProductPatch
from engine.kernel.query import inventory_summary, next_sort
from engine.kernel.renderer import render_chart_text, render_text
from engine.kernel.store import CommandRejected, ProductStore
from engine.kernel.types import CATEGORIES, PRODUCT_FIELDS

HELP = """
  Viewing:
    /view                     Show the current page
    /next, /prev, /page <n>   Move between pages
    /size <n>                 Items per page
    /show <id>                Product details
    /chart                    Products per category
    /stats                    Inventory totals
    /history [n]              Recent commands
  Filtering and sorting:
    /filter <category|all>    Category filter
    /search [text]            Search names and descriptions (empty clears)
    /instock                  Toggle in-stock only
    /sort <field> [asc|desc]  Sort (no direction: flip like a header click)
    /sort none                Insertion order
  Editing:
    /add name="..." category=... price=... stock=... [image=...] [description="..."]
    /edit <id> key=value ...
    /delete <id>
  Selection:
    /select <id>, /deselect <id>, /toggle <id>
    /selectall, /clear, /deleteselected
  /help, /quit
"""


def parse_assignments(text: str) -> dict[str, str]:
    """`name="Desk lamp" price=19` → {"name": "Desk lamp", "price": "19"}"""
    fields: dict[str, str] = {}
    for token in shlex.split(text):
        key, sep, value = token.partition("=")
        if not sep:
            raise ValueError(f"Expected key=value, got {token!r}")
        fields[key.strip()] = value
    return fields


class Repl:
    """Interactive REPL over a local store."""

    def __init__(self, store: ProductStore):
        self.store = store
        self.running = True

    def start(self):
        """Start the REPL."""
        summary = inventory_summary(self.store.snapshot())
        print(f"stockboard > {summary['total_products']} products loaded. Type /help for commands.")

        while self.running:
            try:
                line = input("stockboard > ").strip()
                if not line:
                    continue
                self.handle_line(line)
            except (EOFError, KeyboardInterrupt):
                print()
                break

    def handle_line(self, line: str):
        """Run one REPL command. Store rejections are printed, not raised."""
        if not line.startswith("/"):
            print("  Commands start with '/'. Type /help for available commands.")
            return
        try:
            self._handle_command(line)
        except CommandRejected as e:
            print(f"  Rejected: {'; '.join(e.errors)}")
        except ValidationError as e:
            for err in e.errors():
                loc = ".".join(str(part) for part in err["loc"])
                print(f"  {loc}: {err['msg']}")
        except ValueError as e:
            print(f"  Error: {e}")

    def _handle_command(self, line: str):
        parts = line.split(maxsplit=1)
        cmd = parts[0].lower()
        arg = parts[1].strip() if len(parts) > 1 else ""

        if cmd == "/quit":
            self.running = False
            print("Goodbye.")
        elif cmd == "/help":
            print(HELP)
        elif cmd == "/view":
            self._view()
        elif cmd in ("/next", "/prev"):
            self._step_page(1 if cmd == "/next" else -1)
        elif cmd == "/page":
            self.store.set_current_page(self._int(arg, "/page <n>"))
            self._view()
        elif cmd == "/size":
            self.store.set_items_per_page(self._int(arg, "/size <n>"))
            self._view()
        elif cmd == "/show":
            self._show(arg)
        elif cmd == "/chart":
            print(render_chart_text(self.store.snapshot()["products"]))
        elif cmd == "/stats":
            self._stats()
        elif cmd == "/history":
            self._history(arg)
        elif cmd == "/filter":
            self._filter(arg)
        elif cmd == "/search":
            self.store.set_search_query(arg)
            self._view()
        elif cmd == "/instock":
            self.store.toggle_in_stock_filter()
            self._view()
        elif cmd == "/sort":
            self._sort(arg)
        elif cmd == "/add":
            self._add(arg)
        elif cmd == "/edit":
            self._edit(arg)
        elif cmd == "/delete":
            self.store.delete_product(self._id(arg, "/delete <id>"))
            print("  Deleted.")
        elif cmd == "/select":
            self.store.select_product(self._id(arg, "/select <id>"))
            self._selection()
        elif cmd == "/deselect":
            self.store.deselect_product(self._id(arg, "/deselect <id>"))
            self._selection()
        elif cmd == "/toggle":
            self.store.toggle_product_selection(self._id(arg, "/toggle <id>"))
            self._selection()
        elif cmd == "/selectall":
            self.store.select_all_products()
            self._selection()
        elif cmd == "/clear":
            self.store.deselect_all_products()
            self._selection()
        elif cmd == "/deleteselected":
            count = len(self.store.snapshot()["selected_products"])
            self.store.delete_selected_products()
            print(f"  Deleted {count} {'product' if count == 1 else 'products'}.")
        else:
            print(f"Unknown command: {cmd}")
            print("Type /help for available commands.")

    # -- argument helpers --

    @staticmethod
    def _int(arg: str, usage: str) -> int:
        try:
            return int(arg)
        except ValueError:
            raise ValueError(f"Usage: {usage}") from None

    @staticmethod
    def _id(arg: str, usage: str) -> str:
        if not arg:
            raise ValueError(f"Usage: {usage}")
        return arg.split()[0]

    # -- commands --

    def _view(self):
        print()
        print(render_text(self.store.snapshot()))
        print()

    def _step_page(self, delta: int):
        view = self.store.view()
        target = view.current_page + delta
        if target < 1 or target > view.total_pages:
            print("  No more pages.")
            return
        self.store.set_current_page(target)
        self._view()

    def _show(self, arg: str):
        product = self.store.get_product(self._id(arg, "/show <id>"))
        if product is None:
            print("  Product not found.")
            return
        for field in PRODUCT_FIELDS:
            value = product.get(field)
            print(f"  {field + ':':<13}{'-' if value is None else value}")

    def _stats(self):
        summary = inventory_summary(self.store.snapshot())
        print(f"  Products:      {summary['total_products']} ({summary['selected_count']} selected)")
        print(f"  Units:         {summary['total_units']}")
        print(f"  Value:         ${summary['inventory_value']:,.2f}")
        print(f"  Low stock:     {summary['low_stock_count']}")
        print(f"  Out of stock:  {summary['out_of_stock_count']}")

    def _history(self, arg: str):
        limit = self._int(arg, "/history [n]") if arg else 10
        commands = self.store.history[-limit:]
        if not commands:
            print("  No commands yet.")
            return
        for command in commands:
            print(f"  {command.sequence:>4}  {command.timestamp}  {command.type:<24} {command.payload}")

    def _filter(self, arg: str):
        if arg.lower() in ("", "all", "none"):
            self.store.set_category_filter("")
        else:
            match = next((c for c in CATEGORIES if c.lower() == arg.lower()), None)
            if match is None:
                print(f"  Unknown category. Choose from: {', '.join(CATEGORIES)}")
                return
            self.store.set_category_filter(match)
        self._view()

    def _sort(self, arg: str):
        parts = arg.split()
        if not parts:
            raise ValueError("Usage: /sort <field> [asc|desc]")
        if parts[0].lower() == "none":
            self.store.set_sorting(None, "asc")
        elif len(parts) == 1:
            field, direction = next_sort(self.store.snapshot()["sorting"], parts[0])
            self.store.set_sorting(field, direction)
        else:
            self.store.set_sorting(parts[0], parts[1].lower())
        self._view()

    def _add(self, arg: str):
        form = ProductForm(**parse_assignments(arg))
        result = self.store.dispatch("product.add", {"fields": form.to_fields()})
        product = result.state["products"][-1]
        print(f"  Added {product['name']} ({product['id']}).")

    def _edit(self, arg: str):
        product_id, _, rest = arg.partition(" ")
        if not product_id or not rest.strip():
            raise ValueError("Usage: /edit <id> key=value ...")
        if self.store.get_product(product_id) is None:
            print("  Product not found.")
            return
        patch = ProductPatch(**parse_assignments(rest))
        self.store.update_product({"id": product_id, **patch.to_fields()})
        print("  Updated.")

    def _selection(self):
        selected = self.store.snapshot()["selected_products"]
        print(f"  {len(selected)} selected{': ' + ', '.join(selected) if selected else ''}")
