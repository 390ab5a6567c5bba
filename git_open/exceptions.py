"""Custom exception hierarchy for git-open."""

from __future__ import annotations

from pathlib import Path


class GitOpenError(Exception):
    """Base error for all custom exceptions."""


class NotARepositoryError(GitOpenError):
    """Raised when no .git directory exists above the starting directory."""

    def __init__(self, start: Path):
        super().__init__(f"Not inside a git repository: {start}")
        self.start = start


class ConfigError(GitOpenError):
    """Raised when an environment setting cannot be parsed."""


class NoOriginRemoteError(GitOpenError):
    """Raised when the origin remote URL cannot be read from the git config."""


class InvalidRemoteURLError(GitOpenError):
    """Raised when the remote URL cannot be parsed as a URL at all."""


class UnsupportedRemoteFormatError(GitOpenError):
    """Raised when the remote URL is not ssh://host/<project>/<repo>[.git]."""


class DetachedHeadError(GitOpenError):
    """Raised when HEAD does not point at a branch reference."""


class PathNotFoundError(GitOpenError):
    """Raised when an explicit path argument does not exist."""

    def __init__(self, path: Path):
        super().__init__(f"Path does not exist locally: {path}")
        self.path = path


class PathOutsideRepositoryError(GitOpenError):
    """Raised when the requested path lies outside the repository root."""

    def __init__(self, path: Path, repo_root: Path):
        super().__init__(f"Path {path} is outside the repository at {repo_root}")
        self.path = path
        self.repo_root = repo_root


class BrowserError(GitOpenError):
    """Base for browser failures; these never abort the program."""


class UnsupportedPlatformError(BrowserError):
    """Raised when there is no known open command for the platform."""

    def __init__(self, platform: str):
        super().__init__(f"unsupported platform: {platform}")
        self.platform = platform


class BrowserLaunchError(BrowserError):
    """Raised when the open command could not be spawned."""

    def __init__(self, command: list[str], reason: str):
        super().__init__(f"{' '.join(command)}: {reason}")
        self.command = command
        self.reason = reason
