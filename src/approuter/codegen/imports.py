"""Import collection for the generated router module.

Every component file referenced by a resolved route is imported exactly
once, keyed by absolute path.  The first reference assigns the
identifier; every later reference reuses it.

Dev mode defers page, layout, error and not-found components behind
``lazy(() => import(...))``.  Loading components are always imported
statically because they render as the suspense fallback themselves.
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from approuter.codegen.js import Arrow, Call, DynamicImport, Identifier, print_expr, quote
from approuter.errors import EmissionError
from approuter.routing.types import LayoutFallbacks, ResolvedRoute

ROUTER_PACKAGE = "react-router-dom"
UI_PACKAGE = "react"

_SCRIPT_EXT_RE = re.compile(r"\.(?:tsx?|jsx?)$")
_NON_IDENT_RE = re.compile(r"[^A-Za-z0-9]+")


def normalize_import_path(file_path: str, root_dir: str | Path) -> str:
    """Strip *root_dir* and the script extension, using forward slashes.

    ``/proj/src/app/blog/page.tsx`` with root ``/proj`` becomes
    ``src/app/blog/page``.  Files outside the root keep their full path.
    """
    root = str(root_dir).rstrip("/\\")
    relative = file_path
    if root and (
        file_path == root or file_path.startswith((root + "/", root + "\\"))
    ):
        relative = file_path[len(root):]
    relative = relative.replace("\\", "/")
    relative = _SCRIPT_EXT_RE.sub("", relative)
    return relative.lstrip("/")


def to_import_path(file_path: str, root_dir: str | Path) -> str:
    """Relative import specifier (``./src/app/page``) for *file_path*."""
    normalized = normalize_import_path(file_path, root_dir)
    return normalized if normalized.startswith(".") else f"./{normalized}"


def to_root_import_path(file_path: str, root_dir: str | Path) -> str:
    """Root-absolute import specifier (``/src/app/page``) for *file_path*."""
    return "/" + normalize_import_path(file_path, root_dir)


def path_to_identifier(pattern: str) -> str:
    """PascalCase identifier fragment for a URL pattern.

    ``/`` becomes ``Root``; ``/blog/:slug`` becomes ``BlogSlug``; a bare
    ``/*`` collapses to the empty string, so callers append a counter.
    """
    if pattern in ("/", ""):
        return "Root"
    parts = _NON_IDENT_RE.split(pattern)
    return "".join(part[:1].upper() + part[1:] for part in parts if part)


def outer_not_founds(routes: Sequence[ResolvedRoute]) -> dict[str, str]:
    """Not-found rendered under each outermost layout.

    The first route, in order, that binds one to its outermost layout wins.
    """
    chosen: dict[str, str] = {}
    for route in routes:
        if route.layouts and route.layouts[0] in route.layout_not_found:
            chosen.setdefault(route.layouts[0], route.layout_not_found[route.layouts[0]])
    return chosen


@dataclass(slots=True)
class ImportTables:
    """Absolute file path to generated identifier, one table per component kind."""

    pages: dict[str, str] = field(default_factory=dict)
    layouts: dict[str, str] = field(default_factory=dict)
    loadings: dict[str, str] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)
    not_founds: dict[str, str] = field(default_factory=dict)

    def require(self, kind: str, file_path: str) -> str:
        """Identifier bound to *file_path*; raises :class:`EmissionError` if unbound."""
        table = getattr(self, kind)
        try:
            return table[file_path]
        except KeyError:
            raise EmissionError(kind, file_path) from None


@dataclass(slots=True)
class CollectedImports:
    statements: list[str]
    tables: ImportTables


class _Collector:
    """Accumulates import statements while assigning identifiers."""

    def __init__(self, root_dir: str | Path, lazy: bool) -> None:
        self.root_dir = root_dir
        self.lazy = lazy
        self.statements: list[str] = []
        self.tables = ImportTables()
        self.counters = {"layouts": 0, "loadings": 0, "errors": 0, "not_founds": 0}

    def emit(self, name: str, file_path: str, *, deferred: bool) -> None:
        specifier = to_root_import_path(file_path, self.root_dir)
        if deferred:
            factory = Call(Identifier("lazy"), (Arrow(DynamicImport(specifier)),))
            self.statements.append(f"const {name} = {print_expr(factory)};")
        else:
            self.statements.append(f"import {name} from {quote(specifier)};")

    def add(self, kind: str, prefix: str, file_path: str | None, *, deferred: bool) -> None:
        if file_path is None:
            return
        table: dict[str, str] = getattr(self.tables, kind)
        if file_path in table:
            return
        name = f"{prefix}{self.counters[kind]}"
        self.counters[kind] += 1
        table[file_path] = name
        self.emit(name, file_path, deferred=deferred)


def collect_imports(
    routes: Sequence[ResolvedRoute],
    root_dir: str | Path,
    *,
    lazy: bool = True,
    root_not_found: str | None = None,
) -> CollectedImports:
    """Build the import block and identifier tables for *routes*.

    Statement order: router library, UI library, then per route its page,
    layouts, loading, error and not-found components, then a trailing
    root not-found if no route imported it already.  A not-found is only
    imported when a layout renders it or it is the root not-found.
    """
    collector = _Collector(root_dir, lazy)

    collector.statements.append(
        f"import {{ createBrowserRouter, RouterProvider, Outlet }} from {quote(ROUTER_PACKAGE)};"
    )
    ui_names = ["Suspense", "createElement"]
    if lazy:
        ui_names.insert(0, "lazy")
    collector.statements.append(
        f"import React, {{ {', '.join(ui_names)} }} from {quote(UI_PACKAGE)};"
    )

    outer_not_found = outer_not_founds(routes)
    for index, route in enumerate(routes):
        if route.page_path not in collector.tables.pages:
            base = f"Page{path_to_identifier(route.pattern)}"
            name = f"{base}{index}"
            # "/v1" at 0 and "/v" at 10 both give PageV10; identifiers never
            # contain "_", so the separated form is always free
            if name in collector.tables.pages.values():
                name = f"{base}_{index}"
            collector.tables.pages[route.page_path] = name
            collector.emit(name, route.page_path, deferred=lazy)

        for layout_path in route.layouts:
            collector.add("layouts", "Layout", layout_path, deferred=lazy)
        if route.layouts:
            outer = route.layout_fallbacks.get(route.layouts[0], LayoutFallbacks())
            collector.add("loadings", "Loading", outer.loading_path, deferred=False)
            collector.add("errors", "ErrorBoundary", outer.error_path, deferred=lazy)
        collector.add("loadings", "Loading", route.loading_path, deferred=False)
        collector.add("errors", "ErrorBoundary", route.error_path, deferred=lazy)

        # Only not-founds some route expression renders
        if route.layouts:
            collector.add(
                "not_founds", "NotFound", outer_not_found.get(route.layouts[0]), deferred=lazy
            )
        for layout_path in route.layouts[1:]:
            collector.add(
                "not_founds", "NotFound", route.layout_not_found.get(layout_path), deferred=lazy
            )

    collector.add("not_founds", "NotFound", root_not_found, deferred=lazy)
    return CollectedImports(statements=collector.statements, tables=collector.tables)
