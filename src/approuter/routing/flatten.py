"""Flatten the route tree into emittable routes.

Depth-first walk carrying an :class:`InheritedContext`.  Each directory
that owns a page yields one :class:`ResolvedRoute`; every directory,
page or not, passes its effective context down to its children.
"""

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from approuter.config import DEFAULT_EXTENSIONS, DEFAULT_IGNORED_DIRS
from approuter.routing.scanner import find_convention_files, scan_app_directory
from approuter.routing.types import (
    ConventionFiles,
    InheritedContext,
    ParsedApp,
    ResolvedRoute,
    RouteNode,
)

logger = logging.getLogger("approuter.scanner")


def flatten_routes(
    nodes: Sequence[RouteNode],
    context: InheritedContext | None = None,
) -> list[ResolvedRoute]:
    """Resolve every page in *nodes* against the inherited *context*.

    Routes come out in tree (document) order.
    """
    if context is None:
        context = InheritedContext()

    routes: list[ResolvedRoute] = []
    for node in nodes:
        effective = context.descend(node.files)
        if node.page_path is not None:
            routes.append(
                ResolvedRoute.from_context(node.path or "/", node.page_path, effective)
            )
        if node.children:
            routes.extend(flatten_routes(node.children, effective))
    return routes


def parse_app_router(
    app_dir: str | Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    *,
    ignored_dirs: frozenset[str] = DEFAULT_IGNORED_DIRS,
) -> ParsedApp:
    """Scan and flatten an app directory in one pass.

    Convention files directly in *app_dir* seed the context of every
    route.  A root page becomes the ``/`` route and is placed first.
    """
    extensions = tuple(extensions)
    tree = scan_app_directory(app_dir, extensions, ignored_dirs=ignored_dirs)
    root = find_convention_files(app_dir, extensions) if Path(app_dir).is_dir() else ConventionFiles()

    root_context = InheritedContext().descend(root)
    routes = flatten_routes(tree, root_context)

    if root.page is not None:
        routes.insert(0, ResolvedRoute.from_context("/", root.page, root_context))

    logger.debug("Resolved %d route(s) under %s", len(routes), app_dir)
    return ParsedApp(routes=tuple(routes), tree=tuple(tree), root=root)
