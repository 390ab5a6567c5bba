"""Dataclasses shared across modules."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


DEFAULT_BRANCH_REF = "refs/heads/master"


@dataclass(frozen=True)
class RepoInfo:
    """Coordinates of a repository on the hosting server."""

    host: str
    project: str
    repo_name: str

    @property
    def slug(self) -> str:
        return f"{self.host}/{self.project}/{self.repo_name}"


@dataclass(frozen=True)
class BrowseTarget:
    """Everything resolved for a single invocation."""

    git_dir: Path
    remote_url: str
    repo: RepoInfo
    branch: str
    relative_path: str
    url: str

    @property
    def repo_root(self) -> Path:
        return self.git_dir.parent

    @property
    def is_default_branch(self) -> bool:
        return self.branch == DEFAULT_BRANCH_REF
