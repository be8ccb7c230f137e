"""Approuter exception hierarchy.

Shared across the scanner, code generator, plugin, and CLI so every
module raises and catches the same types.

Absence conditions (missing app directory, missing root page, no routes)
are not errors: they degrade to fallback output and never raise.
"""


class AppRouterError(Exception):
    """Base for all approuter-specific errors."""


class ConfigurationError(AppRouterError):
    """Raised when router configuration is invalid.

    Typically raised from ``RouterConfig.__post_init__`` or when a host
    command name does not map to a generation mode.
    """


class EmissionError(AppRouterError):
    """A resolved route references a component with no import binding.

    Indicates a broken contract between the import collector and the
    route expression builder, never bad user input.
    """

    def __init__(self, kind: str, file_path: str) -> None:
        self.kind = kind
        self.file_path = file_path
        super().__init__(f"No {kind} import registered for {file_path}")
