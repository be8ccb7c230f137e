"""Route configuration expressions.

Turns resolved routes into nested ``RouteObject`` literals::

    {
      element: <Suspense><Layout1/></Suspense>,      # inner layout
      children: [
        { path: 'dashboard/settings', element: ... },  # the page
        { path: '*', element: <NotFound1/> }           # layout's own not-found
      ]
    }

The outermost layout is not wrapped here: :func:`group_routes` attaches
it once for every route that shares it.
"""

from collections.abc import Sequence

from approuter.codegen.imports import ImportTables, outer_not_founds
from approuter.codegen.js import NULL, ArrayExpr, Call, Expr, Identifier, Literal, ObjectExpr
from approuter.routing.types import LayoutFallbacks, ResolvedRoute

DEFAULT_FALLBACK_TEXT = "Loading..."


def create_element(component: Expr, props: Expr = NULL, *children: Expr) -> Call:
    return Call(Identifier("createElement"), (component, props, *children))


def default_fallback() -> Call:
    return create_element(Literal("div"), NULL, Literal(DEFAULT_FALLBACK_TEXT))


def suspense_wrapper(component_name: str, fallback_name: str | None = None) -> Call:
    """``createElement(Suspense, { fallback }, createElement(component))``."""
    if fallback_name is not None:
        fallback: Expr = create_element(Identifier(fallback_name))
    else:
        fallback = default_fallback()
    return create_element(
        Identifier("Suspense"),
        ObjectExpr((("fallback", fallback),)),
        create_element(Identifier(component_name)),
    )


def route_object(*properties: tuple[str, Expr]) -> ObjectExpr:
    return ObjectExpr(tuple(properties), multiline=True)


class RouteExpressionBuilder:
    """Builds route configuration values against a set of import tables."""

    def __init__(self, tables: ImportTables) -> None:
        self.tables = tables

    def _fallback_name(self, route: ResolvedRoute) -> str | None:
        if route.loading_path is None:
            return None
        return self.tables.require("loadings", route.loading_path)

    def element(self, kind: str, file_path: str, route: ResolvedRoute) -> Call:
        return suspense_wrapper(self.tables.require(kind, file_path), self._fallback_name(route))

    def _with_error(self, properties: list[tuple[str, Expr]], route: ResolvedRoute) -> ObjectExpr:
        if route.error_path is not None:
            properties.append(("errorElement", self.element("errors", route.error_path, route)))
        return route_object(*properties)

    def not_found_route(self, not_found_path: str, route: ResolvedRoute | None = None) -> ObjectExpr:
        name = self.tables.require("not_founds", not_found_path)
        element = suspense_wrapper(name, self._fallback_name(route) if route else None)
        return route_object(("path", Literal("*")), ("element", element))

    def _outer_fallback(self, fallbacks: LayoutFallbacks) -> str | None:
        if fallbacks.loading_path is None:
            return None
        return self.tables.require("loadings", fallbacks.loading_path)

    def outer_not_found_route(self, not_found_path: str, fallbacks: LayoutFallbacks) -> ObjectExpr:
        name = self.tables.require("not_founds", not_found_path)
        element = suspense_wrapper(name, self._outer_fallback(fallbacks))
        return route_object(("path", Literal("*")), ("element", element))

    def layout_route(
        self, layout_path: str, fallbacks: LayoutFallbacks, children: tuple[Expr, ...]
    ) -> ObjectExpr:
        """The top-level configuration for an outermost layout."""
        fallback_name = self._outer_fallback(fallbacks)
        properties: list[tuple[str, Expr]] = [
            ("path", Literal("/")),
            ("element", suspense_wrapper(self.tables.require("layouts", layout_path), fallback_name)),
        ]
        if fallbacks.error_path is not None:
            error_name = self.tables.require("errors", fallbacks.error_path)
            properties.append(("errorElement", suspense_wrapper(error_name, fallback_name)))
        properties.append(("children", ArrayExpr(children)))
        return route_object(*properties)

    def page_route(self, route: ResolvedRoute, *, relative: bool = True) -> ObjectExpr:
        """The innermost configuration: index or path plus the page element."""
        page = self.element("pages", route.page_path, route)
        if route.is_index:
            target: tuple[str, Expr] = ("index", Literal(True))
        elif relative:
            target = ("path", Literal(route.pattern.lstrip("/")))
        else:
            target = ("path", Literal(route.pattern))
        return self._with_error([target, ("element", page)], route)

    def build(self, route: ResolvedRoute) -> ObjectExpr:
        """Nest the page inside every layout after the outermost one."""
        config = self.page_route(route)
        for layout_path in reversed(route.layouts[1:]):
            children: list[Expr] = [config]
            not_found_path = route.layout_not_found.get(layout_path)
            if not_found_path is not None:
                children.append(self.not_found_route(not_found_path, route))
            config = self._with_error(
                [
                    ("element", self.element("layouts", layout_path, route)),
                    ("children", ArrayExpr(tuple(children))),
                ],
                route,
            )
        return config


def group_routes(
    routes: Sequence[ResolvedRoute],
    builder: RouteExpressionBuilder,
    *,
    root_not_found: str | None = None,
) -> list[ObjectExpr]:
    """Top-level configurations, one per distinct outermost layout.

    Routes without any layout stay independent and keep their full
    pattern.  A layout that renders a not-found (other than the root one,
    which the module appends as a top-level sibling) gets a trailing
    ``*`` child.  The layout suspends on the loading component and
    recovers with the error component in effect where it is declared.
    """
    grouped: dict[str, list[ResolvedRoute]] = {}
    standalone: list[ResolvedRoute] = []
    for route in routes:
        if route.layouts:
            grouped.setdefault(route.layouts[0], []).append(route)
        else:
            standalone.append(route)

    outer_not_found = outer_not_founds(routes)
    definitions: list[ObjectExpr] = []
    for layout_path, members in grouped.items():
        fallbacks = members[0].layout_fallbacks.get(layout_path, LayoutFallbacks())
        children: list[Expr] = [builder.build(route) for route in members]
        own_not_found = outer_not_found.get(layout_path)
        if own_not_found is not None and own_not_found != root_not_found:
            children.append(builder.outer_not_found_route(own_not_found, fallbacks))
        definitions.append(builder.layout_route(layout_path, fallbacks, tuple(children)))

    definitions.extend(builder.page_route(route, relative=False) for route in standalone)
    return definitions
