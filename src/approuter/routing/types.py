"""Data models for directory-based routing.

Immutable frozen dataclasses representing the scanned route tree, the
convention files found in one directory, and the flattened routes
ready for code generation.  Built fresh on every scan and discarded
after generation.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


# Basenames recognised in every route directory, in lookup order
CONVENTION_FILES: tuple[str, ...] = ("page", "layout", "loading", "error", "not-found")


@dataclass(frozen=True, slots=True)
class ConventionFiles:
    """Convention files found directly inside one directory.

    Each attribute is an absolute path, or ``None`` when the directory
    has no file with that basename and a recognised extension.
    """

    page: str | None = None
    layout: str | None = None
    loading: str | None = None
    error: str | None = None
    not_found: str | None = None


@dataclass(frozen=True, slots=True)
class RouteNode:
    """One directory in the route tree.

    Attributes:
        segment: Raw directory name (e.g. ``"blog"``, ``"[id]"``, ``"(shop)"``).
        path: URL pattern up to and including this node (``"/"`` for root).
        files: Convention files declared directly in this directory.
        children: Child directories, sorted static, dynamic, catch-all.
        param_name: Parameter name for dynamic and catch-all segments.
    """

    segment: str
    path: str
    files: ConventionFiles = field(default_factory=ConventionFiles)
    children: tuple["RouteNode", ...] = ()
    is_dynamic: bool = False
    is_catch_all: bool = False
    is_optional_catch_all: bool = False
    is_group: bool = False
    param_name: str | None = None

    @property
    def page_path(self) -> str | None:
        return self.files.page

    @property
    def layout_path(self) -> str | None:
        return self.files.layout

    @property
    def loading_path(self) -> str | None:
        return self.files.loading

    @property
    def error_path(self) -> str | None:
        return self.files.error

    @property
    def not_found_path(self) -> str | None:
        return self.files.not_found


@dataclass(frozen=True, slots=True)
class LayoutFallbacks:
    """Loading and error components in effect where a layout is declared."""

    loading_path: str | None = None
    error_path: str | None = None


@dataclass(frozen=True, slots=True)
class InheritedContext:
    """Context passed from a directory to its children while flattening.

    Layouts accumulate outer-to-inner; loading, error and not-found are
    replaced by the nearest declaration.  A not-found file is bound to
    the layout beside it, or else to the nearest enclosing layout that
    has none bound yet.
    """

    layouts: tuple[str, ...] = ()
    loading_path: str | None = None
    error_path: str | None = None
    not_found_path: str | None = None
    layout_not_found: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )
    layout_fallbacks: Mapping[str, LayoutFallbacks] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def descend(self, files: ConventionFiles) -> "InheritedContext":
        """Return the effective context for a directory declaring *files*."""
        loading_path = files.loading or self.loading_path
        error_path = files.error or self.error_path
        layouts = self.layouts
        layout_not_found = self.layout_not_found
        layout_fallbacks = self.layout_fallbacks
        if files.layout is not None:
            layouts = (*layouts, files.layout)
            layout_fallbacks = MappingProxyType(
                {**layout_fallbacks, files.layout: LayoutFallbacks(loading_path, error_path)}
            )
        if files.not_found is not None and layouts and layouts[-1] not in layout_not_found:
            layout_not_found = MappingProxyType(
                {**layout_not_found, layouts[-1]: files.not_found}
            )
        return InheritedContext(
            layouts=layouts,
            loading_path=loading_path,
            error_path=error_path,
            not_found_path=files.not_found or self.not_found_path,
            layout_not_found=layout_not_found,
            layout_fallbacks=layout_fallbacks,
        )


@dataclass(frozen=True, slots=True)
class ResolvedRoute:
    """A page route with its layout chain and inherited fallbacks.

    Attributes:
        pattern: URL pattern (e.g. ``"/blog/:slug"``, ``"/docs/*"``).
        page_path: Absolute path of the page component.
        layouts: Absolute layout paths, outermost first.
        loading_path: Nearest loading component, own or inherited.
        error_path: Nearest error component, own or inherited.
        not_found_path: Nearest not-found component, own or inherited.
        layout_not_found: Layout path to the not-found bound to it.
        layout_fallbacks: Layout path to the loading and error in effect
            where that layout is declared.
    """

    pattern: str
    page_path: str
    layouts: tuple[str, ...] = ()
    loading_path: str | None = None
    error_path: str | None = None
    not_found_path: str | None = None
    layout_not_found: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )
    layout_fallbacks: Mapping[str, LayoutFallbacks] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @property
    def is_index(self) -> bool:
        return self.pattern == "/"

    @classmethod
    def from_context(cls, pattern: str, page_path: str, context: InheritedContext) -> "ResolvedRoute":
        return cls(
            pattern=pattern,
            page_path=page_path,
            layouts=context.layouts,
            loading_path=context.loading_path,
            error_path=context.error_path,
            not_found_path=context.not_found_path,
            layout_not_found=context.layout_not_found,
            layout_fallbacks=context.layout_fallbacks,
        )


@dataclass(frozen=True, slots=True)
class ParsedApp:
    """Complete parse of an app directory.

    Attributes:
        routes: Resolved routes; the root route, if any, comes first.
        tree: Scanned route tree below the app directory.
        root: Convention files found directly in the app directory.
    """

    routes: tuple[ResolvedRoute, ...]
    tree: tuple[RouteNode, ...]
    root: ConventionFiles = field(default_factory=ConventionFiles)

    @property
    def root_layout(self) -> str | None:
        return self.root.layout

    @property
    def root_page(self) -> str | None:
        return self.root.page

    @property
    def root_not_found(self) -> str | None:
        return self.root.not_found
