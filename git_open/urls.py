"""Assemble browse URLs for the hosting server."""

from __future__ import annotations

from urllib.parse import quote_plus

from .models import DEFAULT_BRANCH_REF, RepoInfo


def base_url(repo: RepoInfo) -> str:
    return f"https://{repo.host}/projects/{repo.project}/repos/{repo.repo_name}/browse"


def build_browse_url(repo: RepoInfo, relative_path: str, branch: str) -> str:
    """Join the base URL and ``relative_path``, pinning non-default branches.

    The path is appended verbatim; only the branch is query-escaped.
    """

    url = base_url(repo) + relative_path
    if branch != DEFAULT_BRANCH_REF:
        url += "?at=" + quote_plus(branch)
    return url
