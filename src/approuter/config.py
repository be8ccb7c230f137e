"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.  Mode is the generation tag chosen once at
startup: the dev server gets deferred imports, production builds get
static imports.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from approuter.errors import ConfigurationError

DEFAULT_EXTENSIONS: tuple[str, ...] = (".tsx", ".ts", ".jsx", ".js")

# Directories that never contribute routes, even without a leading underscore
DEFAULT_IGNORED_DIRS: frozenset[str] = frozenset(
    {"node_modules", ".git", "components", "lib", "utils", "hooks", "styles"}
)

VIRTUAL_MODULE_ID = "virtual:app-router"


class Mode(Enum):
    """Code generation mode, selected once from the host command."""

    DEV = "serve"
    BUILD = "build"

    @property
    def lazy(self) -> bool:
        """Dev mode defers component loading; build mode imports statically."""
        return self is Mode.DEV

    @classmethod
    def from_command(cls, command: str) -> "Mode":
        """Map a host command name (``serve`` / ``build``) to a mode."""
        for mode in cls:
            if mode.value == command:
                return mode
        raise ConfigurationError(
            f"Unknown command {command!r}; expected one of: "
            + ", ".join(repr(m.value) for m in cls)
        )


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(root_dir="web", app_dir="src/routes")
    """

    # Project root; import specifiers are computed relative to it
    root_dir: str | Path = "."

    # Route tree root, resolved against root_dir when relative
    app_dir: str | Path = "src/app"

    # Convention file extensions, tried in this order
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS

    ignored_dirs: frozenset[str] = DEFAULT_IGNORED_DIRS

    virtual_module_id: str = VIRTUAL_MODULE_ID

    def __post_init__(self) -> None:
        if not self.extensions:
            raise ConfigurationError("RouterConfig.extensions must not be empty")
        for ext in self.extensions:
            if not ext.startswith("."):
                raise ConfigurationError(
                    f"Extension {ext!r} must start with '.' (e.g. '.tsx')"
                )

    @property
    def resolved_root(self) -> Path:
        return Path(self.root_dir).resolve()

    @property
    def resolved_app_dir(self) -> Path:
        app_dir = Path(self.app_dir)
        if not app_dir.is_absolute():
            app_dir = self.resolved_root / app_dir
        return app_dir.resolve()

    @property
    def resolved_virtual_id(self) -> str:
        """Internal id the host bundler uses once the virtual id is resolved."""
        return "\0" + self.virtual_module_id + ".js"
