"""Build a RouterConfig from parsed CLI arguments.

Shared by every subcommand so ``--root``, ``--app-dir`` and ``--ext``
mean the same thing everywhere.
"""

import argparse
import sys

from approuter.config import DEFAULT_EXTENSIONS, RouterConfig
from approuter.errors import ConfigurationError


def config_from_args(args: argparse.Namespace) -> RouterConfig:
    """Return the config described by *args*, exiting 2 if it is invalid."""
    try:
        return RouterConfig(
            root_dir=args.root,
            app_dir=args.app_dir,
            extensions=tuple(args.ext) if args.ext else DEFAULT_EXTENSIONS,
        )
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc


def require_app_dir(config: RouterConfig) -> None:
    """Exit 1 with a message when the app directory does not exist."""
    if not config.resolved_app_dir.is_dir():
        print(f"Error: app directory not found: {config.resolved_app_dir}", file=sys.stderr)
        raise SystemExit(1)
