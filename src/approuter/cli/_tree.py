"""``approuter tree`` — print the scanned route tree."""

import argparse
from collections.abc import Sequence

from approuter.cli._config import config_from_args, require_app_dir
from approuter.routing.flatten import parse_app_router
from approuter.routing.types import RouteNode


def _kind(node: RouteNode) -> str:
    if node.is_group:
        return "group"
    if node.is_optional_catch_all:
        return "optional-catch-all"
    if node.is_catch_all:
        return "catch-all"
    if node.is_dynamic:
        return "dynamic"
    return "static"


def _markers(node: RouteNode) -> str:
    files = node.files
    found = [
        name
        for name, path in (
            ("page", files.page),
            ("layout", files.layout),
            ("loading", files.loading),
            ("error", files.error),
            ("not-found", files.not_found),
        )
        if path is not None
    ]
    return f" [{', '.join(found)}]" if found else ""


def format_tree(nodes: Sequence[RouteNode], depth: int = 0) -> list[str]:
    """Indented lines: segment, kind, URL pattern and declared files."""
    lines: list[str] = []
    for node in nodes:
        lines.append(f"{'  ' * depth}{node.segment}  ({_kind(node)}) {node.path}{_markers(node)}")
        lines.extend(format_tree(node.children, depth + 1))
    return lines


def run_tree(args: argparse.Namespace) -> None:
    config = config_from_args(args)
    require_app_dir(config)

    parsed = parse_app_router(
        config.resolved_app_dir,
        config.extensions,
        ignored_dirs=config.ignored_dirs,
    )
    print(config.resolved_app_dir)
    for line in format_tree(parsed.tree, depth=1):
        print(line)
