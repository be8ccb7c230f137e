"""Router module code generation.

Resolved routes in, JavaScript source out::

    parsed = parse_app_router("src/app")
    source = generate_routes_code(parsed.routes, ".", lazy=False)
"""

from approuter.codegen.imports import (
    CollectedImports,
    ImportTables,
    collect_imports,
    path_to_identifier,
    to_import_path,
    to_root_import_path,
)
from approuter.codegen.module import (
    generate_build_routes_code,
    generate_dev_routes_code,
    generate_empty_routes_code,
    generate_routes_code,
)
from approuter.codegen.routes import RouteExpressionBuilder, group_routes

__all__ = [
    "CollectedImports",
    "ImportTables",
    "RouteExpressionBuilder",
    "collect_imports",
    "generate_build_routes_code",
    "generate_dev_routes_code",
    "generate_empty_routes_code",
    "generate_routes_code",
    "group_routes",
    "path_to_identifier",
    "to_import_path",
    "to_root_import_path",
]
