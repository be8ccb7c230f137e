"""``approuter routes`` — list resolved routes.

Scans the app directory and prints a table of PATTERN, PAGE and the
layout chain, in the order the router module declares them.
"""

import argparse
import os
from pathlib import Path

from approuter.cli._config import config_from_args, require_app_dir
from approuter.routing.flatten import parse_app_router


def _display(path: str, root: Path) -> str:
    return os.path.relpath(path, root).replace(os.sep, "/")


def run_routes(args: argparse.Namespace) -> None:
    """Print the resolved routes of the configured app directory."""
    config = config_from_args(args)
    require_app_dir(config)

    parsed = parse_app_router(
        config.resolved_app_dir,
        config.extensions,
        ignored_dirs=config.ignored_dirs,
    )
    if not parsed.routes:
        print("No routes found.")
        return

    root = config.resolved_root
    # Build rows: (pattern, page, layouts)
    rows: list[tuple[str, str, str]] = []
    for route in parsed.routes:
        layouts = " > ".join(_display(p, root) for p in route.layouts) or "-"
        rows.append((route.pattern, _display(route.page_path, root), layouts))

    # Column widths
    max_pattern = max(max(len(r[0]) for r in rows), 7)  # "PATTERN" header
    max_page = max(max(len(r[1]) for r in rows), 4)  # "PAGE" header

    fmt = f"{{:<{max_pattern}}}  {{:<{max_page}}}  {{}}"
    print(fmt.format("PATTERN", "PAGE", "LAYOUTS"))
    sep_len = max_pattern + max_page + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for pattern, page, layouts in rows:
        print(fmt.format(pattern, page, layouts))
