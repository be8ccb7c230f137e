"""Directory-based routing: segment classification, scanning, flattening.

Conventions::

    src/app/
      layout.tsx            # Root layout, wraps every route
      page.tsx              # /
      not-found.tsx         # Replaces the whole page for unmatched URLs
      about/
        page.tsx            # /about
      blog/
        [slug]/
          page.tsx          # /blog/:slug
      (marketing)/
        pricing/
          page.tsx          # /pricing
      docs/
        [...rest]/
          page.tsx          # /docs/*
      _components/          # Private, never routed
"""

from approuter.routing.flatten import flatten_routes, parse_app_router
from approuter.routing.scanner import (
    find_convention_file,
    find_convention_files,
    scan_app_directory,
)
from approuter.routing.segments import SegmentInfo, SegmentKind, classify_segment
from approuter.routing.types import (
    CONVENTION_FILES,
    ConventionFiles,
    InheritedContext,
    ParsedApp,
    ResolvedRoute,
    RouteNode,
)

__all__ = [
    "CONVENTION_FILES",
    "ConventionFiles",
    "InheritedContext",
    "ParsedApp",
    "ResolvedRoute",
    "RouteNode",
    "SegmentInfo",
    "SegmentKind",
    "classify_segment",
    "find_convention_file",
    "find_convention_files",
    "flatten_routes",
    "parse_app_router",
    "scan_app_directory",
]
