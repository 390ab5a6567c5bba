"""Tests for the repository relative path resolution."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from git_open.exceptions import PathNotFoundError, PathOutsideRepositoryError
from git_open.paths import resolve_relative_path


class ResolveRelativePathTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.base = Path(self._tmp.name)
        self.repo = self.base / "repo"
        (self.repo / "src" / "pkg").mkdir(parents=True)
        (self.repo / "src" / "pkg" / "mod.py").write_text("", encoding="utf-8")

    def test_file_relative_to_cwd(self) -> None:
        rel = resolve_relative_path(self.repo, cwd=self.repo / "src", target=Path("pkg/mod.py"))

        self.assertEqual(rel, "/src/pkg/mod.py")

    def test_absolute_file(self) -> None:
        rel = resolve_relative_path(self.repo, cwd=self.base, target=self.repo / "src" / "pkg")

        self.assertEqual(rel, "/src/pkg")

    def test_parent_segments_inside_repo(self) -> None:
        rel = resolve_relative_path(self.repo, cwd=self.repo / "src" / "pkg", target=Path(".."))

        self.assertEqual(rel, "/src")

    def test_target_equal_to_root(self) -> None:
        rel = resolve_relative_path(self.repo, cwd=self.repo / "src", target=Path(".."))

        self.assertEqual(rel, "")

    def test_implicit_uses_cwd(self) -> None:
        rel = resolve_relative_path(self.repo, cwd=self.repo / "src")

        self.assertEqual(rel, "/src")

    def test_implicit_at_root_is_empty(self) -> None:
        self.assertEqual(resolve_relative_path(self.repo, cwd=self.repo), "")

    def test_root_only_ignores_target_and_cwd(self) -> None:
        rel = resolve_relative_path(
            self.repo,
            cwd=self.repo / "src",
            target=Path("does-not-exist"),
            root_only=True,
        )

        self.assertEqual(rel, "")

    def test_missing_target(self) -> None:
        with self.assertRaises(PathNotFoundError):
            resolve_relative_path(self.repo, cwd=self.repo, target=Path("missing.txt"))

    def test_target_outside_repository(self) -> None:
        outside = self.base / "other"
        outside.mkdir()

        with self.assertRaises(PathOutsideRepositoryError):
            resolve_relative_path(self.repo, cwd=self.repo, target=outside)

    def test_symlink_inside_repository_is_not_followed(self) -> None:
        (self.repo / "docs").mkdir()
        (self.repo / "docs" / "real.md").write_text("", encoding="utf-8")
        (self.repo / "link.md").symlink_to(Path("docs") / "real.md")

        rel = resolve_relative_path(self.repo, cwd=self.repo, target=Path("link.md"))

        self.assertEqual(rel, "/link.md")

    def test_symlink_pointing_outside_repository(self) -> None:
        shared = self.base / "shared.cfg"
        shared.write_text("", encoding="utf-8")
        (self.repo / "shared.cfg").symlink_to(shared)

        rel = resolve_relative_path(self.repo, cwd=self.repo / "src", target=Path("../shared.cfg"))

        self.assertEqual(rel, "/shared.cfg")

    def test_symlinked_repository_root(self) -> None:
        alias = self.base / "alias"
        alias.symlink_to(self.repo, target_is_directory=True)

        rel = resolve_relative_path(alias, cwd=self.repo, target=Path("src/pkg/mod.py"))

        self.assertEqual(rel, "/src/pkg/mod.py")

    def test_unrelated_drive_is_outside(self) -> None:
        with mock.patch("git_open.paths.os.path.relpath", side_effect=ValueError("path is on mount 'D:'")):
            with self.assertRaises(PathOutsideRepositoryError):
                resolve_relative_path(self.repo, cwd=self.repo, target=Path("src"))

    def test_sibling_with_common_prefix_is_outside(self) -> None:
        sibling = self.base / "repo-two"
        sibling.mkdir()

        with self.assertRaises(PathOutsideRepositoryError):
            resolve_relative_path(self.repo, cwd=sibling)


if __name__ == "__main__":
    unittest.main()
