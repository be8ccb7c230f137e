"""Shared fixtures: build app directories on disk under tmp_path."""

from collections.abc import Callable
from pathlib import Path

import pytest

COMPONENT_SOURCE = "export default function Component() { return null; }\n"


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Resolved project root (tmp_path may sit behind a symlink)."""
    return tmp_path.resolve()


@pytest.fixture
def make_app(project_root: Path) -> Callable[..., Path]:
    """Create files under ``<root>/src/app`` and return the app directory.

    Each argument is a path relative to the app directory; a trailing
    ``/`` creates an empty directory instead of a file.
    """

    def _make(*relative_paths: str) -> Path:
        app_dir = project_root / "src" / "app"
        app_dir.mkdir(parents=True, exist_ok=True)
        for rel in relative_paths:
            target = app_dir / rel
            if rel.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(COMPONENT_SOURCE)
        return app_dir

    return _make
