"""Virtual module plugin.

Lets a host bundler import the generated router as if it were a file::

    import AppRouter from "virtual:app-router";

The host drives three hooks: :meth:`AppRouterPlugin.resolve_id` maps the
virtual id to an internal id, :meth:`AppRouterPlugin.load` returns the
module text, and :meth:`AppRouterPlugin.handle_change` reports whether a
changed file invalidates the routes.  Nothing is written to disk.

All generation state lives in an explicit :class:`GenerationContext`;
invalidation is a method call, never an external mutation.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from approuter.codegen.module import generate_empty_routes_code, generate_routes_code
from approuter.config import Mode, RouterConfig
from approuter.routing.flatten import parse_app_router
from approuter.routing.types import CONVENTION_FILES

logger = logging.getLogger("approuter.plugin")


@dataclass(slots=True)
class GenerationContext:
    """Mutable per-plugin generation state.

    Attributes:
        config: Router configuration.
        mode: Dev (deferred imports) or build (static imports).
        cached_code: Last generated module text, ``None`` once invalidated.
        app_dir: App directory resolved on the last generation.
    """

    config: RouterConfig = field(default_factory=RouterConfig)
    mode: Mode = Mode.DEV
    cached_code: str | None = None
    app_dir: Path | None = None

    def invalidate(self) -> None:
        self.cached_code = None


@dataclass(frozen=True, slots=True)
class HotUpdate:
    """Instruction returned to the host after a route file changes.

    Route structure is never hot-swapped: the cached module is dropped
    and the client is fully reloaded.
    """

    file: str
    invalidate: bool = True
    full_reload: bool = True


def is_route_file(file_path: str | Path) -> bool:
    """True when the basename starts with a convention name (``page``, ``layout``...)."""
    basename = Path(file_path).name
    return any(basename.startswith(name) for name in CONVENTION_FILES)


def regenerate(context: GenerationContext) -> str:
    """Re-scan the app directory and regenerate the module text.

    A missing app directory logs a warning and yields the empty module,
    which is not cached so the next load scans again.
    """
    config = context.config
    app_dir = config.resolved_app_dir
    context.app_dir = app_dir

    if not app_dir.is_dir():
        logger.warning("App directory not found: %s", app_dir)
        return generate_empty_routes_code()

    parsed = parse_app_router(
        app_dir,
        config.extensions,
        ignored_dirs=config.ignored_dirs,
    )
    context.cached_code = generate_routes_code(
        parsed.routes,
        config.resolved_root,
        lazy=context.mode.lazy,
        root_not_found=parsed.root_not_found,
    )
    return context.cached_code


class AppRouterPlugin:
    """Host-facing collaborator serving the generated router module."""

    name = "approuter"

    def __init__(self, config: RouterConfig | None = None, mode: Mode = Mode.DEV) -> None:
        self.context = GenerationContext(config=config or RouterConfig(), mode=mode)

    @classmethod
    def for_command(cls, command: str, config: RouterConfig | None = None) -> "AppRouterPlugin":
        """Create a plugin for a host command (``serve`` or ``build``)."""
        return cls(config, Mode.from_command(command))

    @property
    def virtual_id(self) -> str:
        return self.context.config.virtual_module_id

    @property
    def resolved_id(self) -> str:
        return self.context.config.resolved_virtual_id

    def config_resolved(self) -> None:
        """Build mode generates eagerly, once, when configuration settles."""
        if self.context.mode is Mode.BUILD:
            regenerate(self.context)

    def resolve_id(self, module_id: str) -> str | None:
        if module_id == self.virtual_id:
            return self.resolved_id
        return None

    def load(self, module_id: str) -> str | None:
        if module_id != self.resolved_id:
            return None
        if self.context.cached_code is not None:
            logger.debug("Serving cached router module")
            return self.context.cached_code
        return regenerate(self.context)

    def is_app_file(self, file_path: str | Path) -> bool:
        app_dir = self.context.app_dir or self.context.config.resolved_app_dir
        return Path(file_path).resolve().is_relative_to(app_dir)

    def handle_change(self, file_path: str | Path) -> HotUpdate | None:
        """Invalidate the cached module when a route file under the app dir changes."""
        if not (self.is_app_file(file_path) and is_route_file(file_path)):
            return None
        logger.debug("Route file changed, invalidating router module: %s", file_path)
        self.context.invalidate()
        return HotUpdate(file=str(file_path))

    def invalidate(self) -> None:
        self.context.invalidate()
