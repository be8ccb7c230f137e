"""Approuter CLI — generate the router module and inspect the route tree.

Entry point registered as ``approuter`` in ``pyproject.toml``::

    [project.scripts]
    approuter = "approuter.cli:main"
"""

import argparse
import logging
import sys


def _add_location_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--root",
        default=".",
        help="Project root; import paths are relative to it (default: .)",
    )
    parser.add_argument(
        "--app-dir",
        default="src/app",
        help="App directory, relative to --root (default: src/app)",
    )
    parser.add_argument(
        "--ext",
        action="append",
        default=None,
        help="Convention file extension, repeatable, in priority order",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``approuter`` command."""
    parser = argparse.ArgumentParser(
        prog="approuter",
        description="approuter — directory-based routes compiled to a client router module.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    # -- approuter generate ----------------------------------------------
    generate_parser = subparsers.add_parser("generate", help="Emit the router module")
    _add_location_args(generate_parser)
    generate_parser.add_argument(
        "--build",
        action="store_true",
        help="Static imports (production) instead of lazy imports (dev)",
    )
    generate_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write to this file instead of stdout",
    )

    # -- approuter routes ------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List resolved routes")
    _add_location_args(routes_parser)

    # -- approuter tree --------------------------------------------------
    tree_parser = subparsers.add_parser("tree", help="Print the scanned route tree")
    _add_location_args(tree_parser)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "generate":
        from approuter.cli._generate import run_generate

        run_generate(args)
    elif args.command == "routes":
        from approuter.cli._routes import run_routes

        run_routes(args)
    elif args.command == "tree":
        from approuter.cli._tree import run_tree

        run_tree(args)
