"""Tests for approuter.codegen — route expressions and module emission."""

from collections.abc import Callable
from pathlib import Path

import pytest

from approuter.codegen.imports import collect_imports
from approuter.codegen.js import ArrayExpr, Literal, ObjectExpr, print_expr
from approuter.codegen.module import (
    generate_build_routes_code,
    generate_dev_routes_code,
    generate_empty_routes_code,
    generate_routes_code,
)
from approuter.codegen.routes import RouteExpressionBuilder, group_routes
from approuter.errors import EmissionError
from approuter.routing.flatten import parse_app_router
from approuter.routing.types import LayoutFallbacks, ResolvedRoute

# ---------------------------------------------------------------------------
# Test helpers
# ---------------------------------------------------------------------------


def _props(expr: ObjectExpr) -> dict:
    return dict(expr.properties)


def _children(expr: ObjectExpr) -> tuple:
    children = _props(expr)["children"]
    assert isinstance(children, ArrayExpr)
    return children.items


def _builder(routes, root: Path, root_not_found: str | None = None) -> RouteExpressionBuilder:
    collected = collect_imports(routes, root, lazy=False, root_not_found=root_not_found)
    return RouteExpressionBuilder(collected.tables)


def _generate(app: Path, root: Path, *, lazy: bool = False) -> str:
    parsed = parse_app_router(app)
    return generate_routes_code(parsed.routes, root, lazy=lazy, root_not_found=parsed.root_not_found)


# ---------------------------------------------------------------------------
# RouteExpressionBuilder
# ---------------------------------------------------------------------------


class TestRouteExpressionBuilder:
    def test_index_route(self) -> None:
        route = ResolvedRoute("/", "/p/app/page.tsx")
        config = _builder([route], Path("/p")).build(route)
        assert _props(config)["index"] == Literal(True)
        assert "path" not in _props(config)

    def test_relative_path(self) -> None:
        route = ResolvedRoute("/blog/:slug", "/p/app/blog/[slug]/page.tsx")
        config = _builder([route], Path("/p")).build(route)
        assert _props(config)["path"] == Literal("blog/:slug")

    def test_page_wrapped_in_suspense_with_default_fallback(self) -> None:
        route = ResolvedRoute("/a", "/p/app/a/page.tsx")
        source = print_expr(_builder([route], Path("/p")).build(route))
        assert (
            "createElement(Suspense, { fallback: createElement('div', null, 'Loading...') }, "
            "createElement(PageA0, null))"
        ) in source

    def test_loading_component_is_fallback(self) -> None:
        route = ResolvedRoute("/a", "/p/app/a/page.tsx", loading_path="/p/app/loading.tsx")
        source = print_expr(_builder([route], Path("/p")).build(route))
        assert "{ fallback: createElement(Loading0, null) }" in source

    def test_error_element(self) -> None:
        route = ResolvedRoute("/a", "/p/app/a/page.tsx", error_path="/p/app/error.tsx")
        config = _builder([route], Path("/p")).build(route)
        assert "errorElement" in _props(config)
        assert "ErrorBoundary0" in print_expr(_props(config)["errorElement"])

    def test_single_layout_is_left_to_grouping(self) -> None:
        route = ResolvedRoute("/a", "/p/app/a/page.tsx", layouts=("/p/app/layout.tsx",))
        config = _builder([route], Path("/p")).build(route)
        assert "children" not in _props(config)

    def test_inner_layouts_wrap_outward(self) -> None:
        layouts = ("/p/app/layout.tsx", "/p/app/a/layout.tsx", "/p/app/a/b/layout.tsx")
        route = ResolvedRoute("/a/b", "/p/app/a/b/page.tsx", layouts=layouts)
        config = _builder([route], Path("/p")).build(route)

        assert "Layout1" in print_expr(_props(config)["element"])
        (middle,) = _children(config)
        assert "Layout2" in print_expr(_props(middle)["element"])
        (page,) = _children(middle)
        assert _props(page)["path"] == Literal("a/b")

    def test_layout_with_own_not_found_gets_catch_all_child(self) -> None:
        layouts = ("/p/app/layout.tsx", "/p/app/shop/layout.tsx")
        route = ResolvedRoute(
            "/shop",
            "/p/app/shop/page.tsx",
            layouts=layouts,
            not_found_path="/p/app/shop/not-found.tsx",
            layout_not_found={"/p/app/shop/layout.tsx": "/p/app/shop/not-found.tsx"},
        )
        config = _builder([route], Path("/p")).build(route)
        page, catch_all = _children(config)
        assert _props(page)["path"] == Literal("shop")
        assert _props(catch_all)["path"] == Literal("*")
        assert "NotFound0" in print_expr(_props(catch_all)["element"])

    def test_every_wrapper_carries_error_element(self) -> None:
        layouts = ("/p/app/layout.tsx", "/p/app/a/layout.tsx")
        route = ResolvedRoute("/a", "/p/app/a/page.tsx", layouts=layouts, error_path="/p/app/a/error.tsx")
        config = _builder([route], Path("/p")).build(route)
        assert "errorElement" in _props(config)
        (page,) = _children(config)
        assert "errorElement" in _props(page)

    def test_unbound_page_raises(self) -> None:
        route = ResolvedRoute("/a", "/p/app/a/page.tsx")
        other = ResolvedRoute("/b", "/p/app/b/page.tsx")
        with pytest.raises(EmissionError):
            _builder([other], Path("/p")).build(route)


class TestGroupRoutes:
    def test_routes_sharing_root_layout_grouped(self) -> None:
        layout = "/p/app/layout.tsx"
        routes = [
            ResolvedRoute("/", "/p/app/page.tsx", layouts=(layout,)),
            ResolvedRoute("/about", "/p/app/about/page.tsx", layouts=(layout,)),
        ]
        (group,) = group_routes(routes, _builder(routes, Path("/p")))
        assert _props(group)["path"] == Literal("/")
        assert "Layout0" in print_expr(_props(group)["element"])
        assert len(_children(group)) == 2

    def test_layoutless_routes_keep_full_pattern(self) -> None:
        routes = [
            ResolvedRoute("/", "/p/app/page.tsx"),
            ResolvedRoute("/docs/*", "/p/app/docs/[...rest]/page.tsx"),
        ]
        index, docs = group_routes(routes, _builder(routes, Path("/p")))
        assert _props(index)["index"] == Literal(True)
        assert _props(docs)["path"] == Literal("/docs/*")

    def test_distinct_outer_layouts_grouped_separately(self) -> None:
        routes = [
            ResolvedRoute("/a", "/p/app/(x)/a/page.tsx", layouts=("/p/app/(x)/layout.tsx",)),
            ResolvedRoute("/b", "/p/app/(y)/b/page.tsx", layouts=("/p/app/(y)/layout.tsx",)),
            ResolvedRoute("/c", "/p/app/(x)/c/page.tsx", layouts=("/p/app/(x)/layout.tsx",)),
        ]
        first, second = group_routes(routes, _builder(routes, Path("/p")))
        assert len(_children(first)) == 2
        assert len(_children(second)) == 1

    def test_outer_layout_uses_its_loading_and_error(self) -> None:
        layout = "/p/app/layout.tsx"
        fallbacks = LayoutFallbacks("/p/app/loading.tsx", "/p/app/error.tsx")
        routes = [
            ResolvedRoute(
                "/",
                "/p/app/page.tsx",
                layouts=(layout,),
                loading_path=fallbacks.loading_path,
                error_path=fallbacks.error_path,
                layout_fallbacks={layout: fallbacks},
            ),
        ]
        (group,) = group_routes(routes, _builder(routes, Path("/p")))
        element = print_expr(_props(group)["element"])
        assert "Loading0" in element
        assert "Loading..." not in element
        assert "ErrorBoundary0" in print_expr(_props(group)["errorElement"])
        assert list(_props(group)) == ["path", "element", "errorElement", "children"]

    def test_outer_layout_without_fallbacks_uses_default(self) -> None:
        layout = "/p/app/layout.tsx"
        routes = [ResolvedRoute("/", "/p/app/page.tsx", layouts=(layout,))]
        (group,) = group_routes(routes, _builder(routes, Path("/p")))
        assert "Loading..." in print_expr(_props(group)["element"])
        assert "errorElement" not in _props(group)

    def test_enclosing_layout_not_found_appended(self) -> None:
        layout = "/p/app/layout.tsx"
        not_found = "/p/app/blog/not-found.tsx"
        routes = [
            ResolvedRoute("/", "/p/app/page.tsx", layouts=(layout,)),
            ResolvedRoute(
                "/blog",
                "/p/app/blog/page.tsx",
                layouts=(layout,),
                not_found_path=not_found,
                layout_not_found={layout: not_found},
            ),
        ]
        (group,) = group_routes(routes, _builder(routes, Path("/p")))
        last = _children(group)[-1]
        assert _props(last)["path"] == Literal("*")
        assert "NotFound0" in print_expr(_props(last)["element"])


# ---------------------------------------------------------------------------
# Module emission
# ---------------------------------------------------------------------------


class TestGenerateRoutesCode:
    def test_root_page_only(self, make_app: Callable[..., Path], project_root: Path) -> None:
        source = _generate(make_app("page.tsx"), project_root)
        assert source.count("index: true") == 1
        assert "import PageRoot0 from '/src/app/page';" in source
        assert "const router = createBrowserRouter(routes);" in source

    def test_export_surface(self, make_app: Callable[..., Path], project_root: Path) -> None:
        source = _generate(make_app("page.tsx"), project_root)
        assert "export function AppRouter()" in source
        assert "createElement(RouterProvider, { router: router })" in source
        assert "export { router, routes };" in source
        assert "export default AppRouter;" in source

    def test_layout_groups_children(self, make_app: Callable[..., Path], project_root: Path) -> None:
        app = make_app("layout.tsx", "page.tsx", "about/page.tsx")
        source = _generate(app, project_root)
        assert source.count("import Layout0 from '/src/app/layout';") == 1
        assert source.count("children: [") == 1
        assert "path: '/'" in source
        assert "index: true" in source
        assert "path: 'about'" in source

    def test_dev_mode_is_lazy(self, make_app: Callable[..., Path], project_root: Path) -> None:
        parsed = parse_app_router(make_app("layout.tsx", "page.tsx"))
        source = generate_dev_routes_code(parsed.routes, project_root)
        assert "const PageRoot0 = lazy(() => import('/src/app/page'));" in source
        assert "const Layout0 = lazy(() => import('/src/app/layout'));" in source

    def test_build_mode_is_static(self, make_app: Callable[..., Path], project_root: Path) -> None:
        parsed = parse_app_router(make_app("layout.tsx", "page.tsx"))
        source = generate_build_routes_code(parsed.routes, project_root)
        assert "lazy(" not in source
        assert "import Layout0 from '/src/app/layout';" in source

    def test_root_not_found_is_top_level_sibling(
        self, make_app: Callable[..., Path], project_root: Path
    ) -> None:
        app = make_app("layout.tsx", "page.tsx", "not-found.tsx")
        source = _generate(app, project_root)
        assert source.count("import NotFound0 from '/src/app/not-found';") == 1
        assert source.count("path: '*'") == 1
        # the catch-all comes after the layout group closes
        assert source.index("path: '*'") > source.index("children: [")
        assert source.rstrip().endswith("export default AppRouter;")

    def test_nested_layout_not_found(self, make_app: Callable[..., Path], project_root: Path) -> None:
        app = make_app("layout.tsx", "page.tsx", "shop/layout.tsx", "shop/not-found.tsx", "shop/page.tsx")
        source = _generate(app, project_root)
        assert "import NotFound0 from '/src/app/shop/not-found';" in source
        assert "createElement(NotFound0, null)" in source

    def test_not_found_binds_to_enclosing_layout(
        self, make_app: Callable[..., Path], project_root: Path
    ) -> None:
        app = make_app("layout.tsx", "page.tsx", "blog/not-found.tsx", "blog/page.tsx")
        source = _generate(app, project_root)
        assert "import NotFound0 from '/src/app/blog/not-found';" in source
        assert "createElement(NotFound0, null)" in source
        assert source.count("path: '*'") == 1

    def test_not_found_without_any_layout_not_imported(
        self, make_app: Callable[..., Path], project_root: Path
    ) -> None:
        app = make_app("page.tsx", "blog/not-found.tsx", "blog/page.tsx")
        source = _generate(app, project_root)
        assert "not-found" not in source
        assert "NotFound" not in source

    def test_root_layout_group_has_error_element(
        self, make_app: Callable[..., Path], project_root: Path
    ) -> None:
        app = make_app("layout.tsx", "loading.tsx", "error.tsx", "page.tsx")
        source = _generate(app, project_root)
        assert "Loading..." not in source
        assert "import ErrorBoundary0 from '/src/app/error';" in source
        assert source.count("errorElement") == 2

    def test_shared_layout_imported_once(self, make_app: Callable[..., Path], project_root: Path) -> None:
        app = make_app("layout.tsx", *(f"p{i}/page.tsx" for i in range(6)))
        source = _generate(app, project_root)
        assert source.count("from '/src/app/layout'") == 1

    def test_empty_routes_fall_back(self, project_root: Path) -> None:
        assert generate_routes_code([], project_root) == generate_empty_routes_code()


class TestGenerateEmptyRoutesCode:
    def test_exports_required_symbols(self) -> None:
        source = generate_empty_routes_code()
        assert "const routes = [];" in source
        assert "const router = createBrowserRouter(routes);" in source
        assert "export function AppRouter()" in source
        assert "export { router, routes };" in source
        assert "export default AppRouter;" in source

    def test_empty_app_directory(self, make_app: Callable[..., Path], project_root: Path) -> None:
        source = _generate(make_app(), project_root)
        assert "const routes = [];" in source
        assert "import { createBrowserRouter, RouterProvider } from 'react-router-dom';" in source
