"""Helpers for building throwaway repositories on disk."""

from __future__ import annotations

from pathlib import Path

DEFAULT_REMOTE = "ssh://git@git.example.com:7999/ABC/proj.git"


def make_repo(
    root: Path,
    *,
    remote: str | None = DEFAULT_REMOTE,
    head: str = "ref: refs/heads/master\n",
) -> Path:
    """Create a minimal .git directory under ``root`` and return it."""

    git_dir = root / ".git"
    git_dir.mkdir(parents=True)
    lines = [
        "[core]",
        "\trepositoryformatversion = 0",
        "\tbare = false",
    ]
    if remote is not None:
        lines += [
            '[remote "origin"]',
            f"\turl = {remote}",
            "\tfetch = +refs/heads/*:refs/remotes/origin/*",
        ]
    lines += [
        '[branch "master"]',
        "\tremote = origin",
        "\tmerge = refs/heads/master",
    ]
    (git_dir / "config").write_text("\n".join(lines) + "\n", encoding="utf-8")
    (git_dir / "HEAD").write_text(head, encoding="utf-8")
    return git_dir
