"""Main entry point for the Stockboard CLI."""
from __future__ import annotations

import sys

from engine.kernel.mock_data import MOCK_PRODUCTS
from engine.kernel.renderer import render_text
from engine.kernel.store import ProductStore
from engine.kernel.types import DEFAULT_ITEMS_PER_PAGE
from stockboard_cli import __version__
from stockboard_cli.repl import Repl


def print_help():
    """Print help message."""
    print(f"""
Stockboard CLI v{__version__}

Usage:
  stockboard [options] [command]

Commands:
  show              Print the first page of the inventory and exit
  serve             Start the web dashboard (see stockboard-server)

Options:
  --no-seed         Start with an empty inventory instead of the sample data
  --page-size N     Items per page (default: {DEFAULT_ITEMS_PER_PAGE})
  -h, --help        Show this help
  -v, --version     Show version

Examples:
  stockboard                      # Interactive session on the sample inventory
  stockboard --page-size 5 show   # Print the first five products
  stockboard --no-seed            # Start from an empty inventory

REPL Commands:
  /view             Show the current page
  /filter <cat>     Filter by category
  /sort <field>     Sort like a column header click
  /add key=value    Add a product
  /help             Show REPL help
  /quit             Exit REPL
""")


def parse_args(args: list[str]) -> dict:
    """
    Parse command line arguments.

    Returns dict with:
        command: str | None (show, serve, None for REPL)
        seed: bool
        page_size: int
        show_help: bool
        show_version: bool
    """
    result = {
        "command": None,
        "seed": True,
        "page_size": DEFAULT_ITEMS_PER_PAGE,
        "show_help": False,
        "show_version": False,
    }

    i = 0
    while i < len(args):
        arg = args[i]

        if arg in ("show", "serve"):
            result["command"] = arg
        elif arg == "--no-seed":
            result["seed"] = False
        elif arg == "--page-size":
            if i + 1 < len(args) and args[i + 1].isdigit() and int(args[i + 1]) > 0:
                result["page_size"] = int(args[i + 1])
                i += 1
            else:
                print("Error: --page-size requires a positive number")
                sys.exit(1)
        elif arg in ("--help", "-h"):
            result["show_help"] = True
        elif arg in ("--version", "-v"):
            result["show_version"] = True
        elif arg.startswith("-"):
            print(f"Unknown option: {arg}")
            print("Run 'stockboard --help' for usage.")
            sys.exit(1)
        else:
            print(f"Unknown command: {arg}")
            print("Run 'stockboard --help' for usage.")
            sys.exit(1)

        i += 1

    return result


def main():
    """Main entry point."""
    args = parse_args(sys.argv[1:])

    if args["show_help"]:
        print_help()
        return

    if args["show_version"]:
        print(f"stockboard {__version__}")
        return

    if args["command"] == "serve":
        from backend.main import run

        run()
        return

    store = ProductStore(MOCK_PRODUCTS if args["seed"] else [], items_per_page=args["page_size"], source="cli")

    if args["command"] == "show":
        print(render_text(store.snapshot()))
    else:
        Repl(store).start()


if __name__ == "__main__":
    main()
