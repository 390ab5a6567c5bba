"""Resolve the browse target for the current working directory."""

from __future__ import annotations

import logging
from pathlib import Path

from .gitdir import find_git_dir, read_head_ref, read_origin_url
from .models import DEFAULT_BRANCH_REF, BrowseTarget
from .paths import resolve_relative_path
from .remote import parse_remote
from .urls import build_browse_url


log = logging.getLogger(__name__)


def resolve_branch(git_dir: Path, use_default_branch: bool = False) -> str:
    if use_default_branch:
        return DEFAULT_BRANCH_REF
    branch = read_head_ref(git_dir / "HEAD")
    log.debug("Current branch: %s", branch)
    return branch


def resolve_browse_target(
    cwd: Path | None = None,
    target: Path | None = None,
    *,
    use_default_branch: bool = False,
    root_only: bool = False,
) -> BrowseTarget:
    """Run the lookup pipeline and return the resolved target.

    Steps run in a fixed order (repository, remote, branch, path) and the
    first failure aborts with the matching ``GitOpenError``.
    """

    cwd = cwd or Path.cwd()
    git_dir = find_git_dir(cwd)
    remote_url = read_origin_url(git_dir / "config")
    repo = parse_remote(remote_url)
    branch = resolve_branch(git_dir, use_default_branch)
    relative_path = resolve_relative_path(
        git_dir.parent,
        cwd=cwd,
        target=target,
        root_only=root_only,
    )
    url = build_browse_url(repo, relative_path, branch)
    return BrowseTarget(
        git_dir=git_dir,
        remote_url=remote_url,
        repo=repo,
        branch=branch,
        relative_path=relative_path,
        url=url,
    )
