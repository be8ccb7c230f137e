"""Approuter — directory-based routes compiled to a client router module.

Scans an app directory laid out with ``page`` / ``layout`` / ``loading`` /
``error`` / ``not-found`` files and emits a nested router configuration.

Basic usage::

    from approuter import parse_app_router, generate_routes_code

    parsed = parse_app_router("src/app")
    source = generate_routes_code(
        parsed.routes, ".", lazy=False, root_not_found=parsed.root_not_found
    )

As a bundler collaborator::

    from approuter import AppRouterPlugin, Mode

    plugin = AppRouterPlugin(mode=Mode.DEV)
    code = plugin.load(plugin.resolve_id("virtual:app-router"))
"""

__version__ = "0.1.0"
__all__ = [
    "AppRouterError",
    "AppRouterPlugin",
    "ConfigurationError",
    "EmissionError",
    "Mode",
    "ResolvedRoute",
    "RouteNode",
    "RouterConfig",
    "generate_routes_code",
    "parse_app_router",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import approuter`` fast while providing a clean top-level API.
    """
    if name in ("RouterConfig", "Mode"):
        from approuter import config

        return getattr(config, name)

    if name in ("AppRouterError", "ConfigurationError", "EmissionError"):
        from approuter import errors

        return getattr(errors, name)

    if name in ("ResolvedRoute", "RouteNode"):
        from approuter.routing import types

        return getattr(types, name)

    if name == "parse_app_router":
        from approuter.routing.flatten import parse_app_router

        return parse_app_router

    if name == "generate_routes_code":
        from approuter.codegen.module import generate_routes_code

        return generate_routes_code

    if name == "AppRouterPlugin":
        from approuter.plugin import AppRouterPlugin

        return AppRouterPlugin

    raise AttributeError(f"module 'approuter' has no attribute {name!r}")
