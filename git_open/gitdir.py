"""Read repository metadata straight from the .git directory."""

from __future__ import annotations

import logging
from pathlib import Path

from .exceptions import DetachedHeadError, NoOriginRemoteError, NotARepositoryError


log = logging.getLogger(__name__)

GIT_DIR_NAME = ".git"
ORIGIN_SECTION = '[remote "origin"]'
HEAD_REF_PREFIX = "ref: "


def find_git_dir(start: Path) -> Path:
    """Return the nearest .git directory at or above ``start``."""

    current = Path(start).absolute()
    while True:
        candidate = current / GIT_DIR_NAME
        if candidate.is_dir():
            log.debug("Found git directory at %s", candidate)
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    raise NotARepositoryError(Path(start))


def read_origin_url(config_path: Path) -> str:
    """Return the url of the origin remote from a git config file.

    Only the subset of the config format git itself writes for remotes is
    understood: section headers on their own line and ``key = value`` entries.
    """

    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise NoOriginRemoteError(f"Could not read git config {config_path}: {exc}") from exc

    in_origin = False
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if line.startswith(ORIGIN_SECTION):
            in_origin = True
        elif line.startswith("["):
            in_origin = False
        elif in_origin:
            key, sep, value = line.partition("=")
            if sep and key.strip() == "url":
                url = value.strip()
                log.debug("Origin remote url: %s", url)
                return url
    raise NoOriginRemoteError(f"No origin remote url found in {config_path}")


def read_head_ref(head_path: Path) -> str:
    """Return the ref HEAD points at, e.g. ``refs/heads/main``."""

    try:
        content = head_path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as exc:
        raise DetachedHeadError(f"Could not read {head_path}: {exc}") from exc
    if not content.startswith(HEAD_REF_PREFIX):
        raise DetachedHeadError(
            "HEAD does not point at a branch (detached HEAD is not supported)."
        )
    return content[len(HEAD_REF_PREFIX):].strip()
