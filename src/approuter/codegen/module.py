"""Router module emission.

Assembles the import block, the grouped route configuration array and
the router exports into one JavaScript module.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from kida import Environment

from approuter.codegen._templates import EMPTY_IMPORTS, ROUTER_MODULE
from approuter.codegen.imports import collect_imports
from approuter.codegen.js import ArrayExpr, print_expr
from approuter.codegen.routes import RouteExpressionBuilder, group_routes
from approuter.routing.types import ResolvedRoute

logger = logging.getLogger("approuter.codegen")

_env = Environment(autoescape=False, trim_blocks=True, lstrip_blocks=True)


def _render(imports: Sequence[str], routes_source: str) -> str:
    template = _env.from_string(ROUTER_MODULE)
    return template.render({"imports": list(imports), "routes": routes_source})


def generate_empty_routes_code() -> str:
    """Fallback module with an empty route table and the full export surface."""
    return _render(EMPTY_IMPORTS, "[]")


def generate_routes_code(
    routes: Sequence[ResolvedRoute],
    root_dir: str | Path,
    *,
    lazy: bool = True,
    root_not_found: str | None = None,
) -> str:
    """Generate the router module for *routes*.

    Args:
        routes: Resolved routes, root route first.
        root_dir: Project root that import specifiers are relative to.
        lazy: Defer component loading (dev) or import statically (build).
        root_not_found: App-level not-found component; rendered by a
            top-level ``*`` route that replaces the whole page.

    Returns:
        JavaScript module source.
    """
    if not routes:
        return generate_empty_routes_code()

    collected = collect_imports(routes, root_dir, lazy=lazy, root_not_found=root_not_found)
    builder = RouteExpressionBuilder(collected.tables)
    definitions = group_routes(routes, builder, root_not_found=root_not_found)

    if root_not_found is not None and root_not_found in collected.tables.not_founds:
        definitions.append(builder.not_found_route(root_not_found))

    logger.debug(
        "Generated %d top-level route(s) from %d page(s), lazy=%s",
        len(definitions),
        len(routes),
        lazy,
    )
    return _render(collected.statements, print_expr(ArrayExpr(tuple(definitions))))


def generate_dev_routes_code(
    routes: Sequence[ResolvedRoute],
    root_dir: str | Path,
    *,
    root_not_found: str | None = None,
) -> str:
    """Dev server variant: every component behind ``lazy()``."""
    return generate_routes_code(routes, root_dir, lazy=True, root_not_found=root_not_found)


def generate_build_routes_code(
    routes: Sequence[ResolvedRoute],
    root_dir: str | Path,
    *,
    root_not_found: str | None = None,
) -> str:
    """Production variant: static imports for tree-shaking."""
    return generate_routes_code(routes, root_dir, lazy=False, root_not_found=root_not_found)
