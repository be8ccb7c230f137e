"""Filesystem scan of the app directory.

Walks the app directory tree and builds a :class:`RouteNode` per
retained subdirectory:

- ``page``, ``layout``, ``loading``, ``error`` and ``not-found`` files
  are located by trying each configured extension in order
- directory names are classified by :func:`classify_segment`
- directories starting with ``_`` and names in the ignore list are
  skipped (co-located components, hooks, styles)

Siblings are ordered once per directory: static segments and groups
first, then dynamic segments, then catch-alls.  Ties compare the raw
directory name, brackets and parentheses included, in ICU root
collation order.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

import icu

from approuter.config import DEFAULT_EXTENSIONS, DEFAULT_IGNORED_DIRS
from approuter.routing.segments import SegmentInfo, classify_segment
from approuter.routing.types import ConventionFiles, RouteNode

logger = logging.getLogger("approuter.scanner")

# Same ordering as a JavaScript localeCompare under ICU
_COLLATOR = icu.Collator.createInstance(icu.Locale.getRoot())


def find_convention_file(
    directory: str | Path,
    basename: str,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> str | None:
    """Return the first ``<basename><ext>`` file that exists in *directory*."""
    directory = Path(directory)
    for ext in extensions:
        candidate = directory / f"{basename}{ext}"
        if candidate.is_file():
            return str(candidate)
    return None


def find_convention_files(
    directory: str | Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> ConventionFiles:
    """Locate every convention file declared directly in *directory*."""
    extensions = tuple(extensions)
    return ConventionFiles(
        page=find_convention_file(directory, "page", extensions),
        layout=find_convention_file(directory, "layout", extensions),
        loading=find_convention_file(directory, "loading", extensions),
        error=find_convention_file(directory, "error", extensions),
        not_found=find_convention_file(directory, "not-found", extensions),
    )


def scan_app_directory(
    app_dir: str | Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    *,
    ignored_dirs: frozenset[str] = DEFAULT_IGNORED_DIRS,
    parent_path: str = "",
) -> list[RouteNode]:
    """Scan *app_dir* and return its route tree.

    Args:
        app_dir: Directory to scan.  A missing directory yields ``[]``.
        extensions: Convention file extensions in priority order.
        ignored_dirs: Directory names that never contribute routes.
        parent_path: URL pattern of the enclosing directory.

    Returns:
        Child nodes of *app_dir*, sorted per directory level.
    """
    directory = Path(app_dir)
    if not directory.is_dir():
        return []

    extensions = tuple(extensions)
    scanned: list[tuple[SegmentInfo, RouteNode]] = []

    for entry in directory.iterdir():
        if not entry.is_dir():
            continue
        if entry.name.startswith("_") or entry.name in ignored_dirs:
            logger.debug("Skipping non-route directory %s", entry)
            continue

        info = classify_segment(entry.name)
        if info.is_group:
            route_path = parent_path
        else:
            route_path = f"{parent_path}/{info.fragment}"

        node = RouteNode(
            segment=entry.name,
            path=route_path or "/",
            files=find_convention_files(entry, extensions),
            children=tuple(
                scan_app_directory(
                    entry,
                    extensions,
                    ignored_dirs=ignored_dirs,
                    parent_path=route_path,
                )
            ),
            is_dynamic=info.is_dynamic,
            is_catch_all=info.is_catch_all,
            is_optional_catch_all=info.is_optional_catch_all,
            is_group=info.is_group,
            param_name=info.param_name,
        )
        scanned.append((info, node))

    scanned.sort(key=lambda pair: (pair[0].sort_rank, collation_key(pair[1].segment)))
    return [node for _, node in scanned]


def collation_key(name: str) -> bytes:
    """Sort key under the ICU root collation (punctuation, then digits, then letters)."""
    return _COLLATOR.getSortKey(name)
