"""Filesystem helpers for git-open."""

from __future__ import annotations

import logging
import os
from pathlib import Path, PurePath

from .exceptions import PathNotFoundError, PathOutsideRepositoryError


log = logging.getLogger(__name__)


def _resolve_parent(path: Path) -> Path:
    """Resolve symlinks in the parent directories of ``path`` but not in ``path`` itself."""

    normalized = Path(os.path.abspath(path))
    if not normalized.name:
        return normalized.resolve()
    return normalized.parent.resolve() / normalized.name


def resolve_relative_path(
    repo_root: Path,
    *,
    cwd: Path,
    target: Path | None = None,
    root_only: bool = False,
) -> str:
    """Return the browse path suffix for ``target`` (or ``cwd``).

    The result is empty for the repository root and otherwise starts with
    ``/`` and uses forward slashes.
    """

    if root_only:
        return ""
    if target is not None:
        candidate = cwd / target.expanduser()
        if not candidate.exists():
            raise PathNotFoundError(target)
        resolved = _resolve_parent(candidate)
    else:
        resolved = cwd.resolve()

    root = repo_root.resolve()
    try:
        relative = os.path.relpath(resolved, root)
    except ValueError as exc:
        # different drives on Windows
        raise PathOutsideRepositoryError(resolved, root) from exc
    if relative == os.curdir:
        return ""
    if relative == os.pardir or relative.startswith(os.pardir + os.sep):
        raise PathOutsideRepositoryError(resolved, root)
    suffix = "/" + PurePath(relative).as_posix()
    log.debug("Relative path for %s: %s", resolved, suffix)
    return suffix
