"""Tests for load_repo: .git path normalisation, missing repositories, equivalent handles."""

import tempfile
import unittest
from pathlib import Path

from gitporcelain.errors import RepositoryNotFound
from gitporcelain.repo import RepositoryHandle, init, load_repo
from gitporcelain.util import git_dir_for


class TestGitDirFor(unittest.TestCase):
    """Metadata directory derived from a user path."""

    def test_working_tree_path_gets_git_suffix(self) -> None:
        self.assertEqual(git_dir_for("repo"), "repo/.git")
        self.assertEqual(git_dir_for("/srv/work/project"), "/srv/work/project/.git")

    def test_git_dir_path_used_verbatim(self) -> None:
        self.assertEqual(git_dir_for("repo/.git"), "repo/.git")
        self.assertEqual(git_dir_for("/srv/mirrors/project.git"), "/srv/mirrors/project.git")

    def test_accepts_path_objects(self) -> None:
        self.assertEqual(git_dir_for(Path("repo")), "repo/.git")


class TestLoadRepo(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = Path(tempfile.mkdtemp(prefix="gitporcelain_load_"))
        self.repo_dir = self.tmp / "repo"
        init(self.repo_dir, initial_branch="master")

    def test_load_working_tree_and_git_dir_are_equivalent(self) -> None:
        a = load_repo(str(self.repo_dir))
        b = load_repo(str(self.repo_dir / ".git"))
        self.assertIsInstance(a, RepositoryHandle)
        self.assertEqual(a, b)
        self.assertEqual(a.git_dir, (self.repo_dir / ".git").resolve())
        self.assertEqual(a.working_dir.resolve(), self.repo_dir.resolve())
        self.assertFalse(a.bare)

    def test_load_bare_repository_by_name(self) -> None:
        bare_dir = self.tmp / "mirror.git"
        init(bare_dir, bare=True)
        handle = load_repo(str(bare_dir))
        self.assertTrue(handle.bare)
        self.assertIsNone(handle.working_dir)

    def test_missing_repository_names_original_path(self) -> None:
        missing = self.tmp / "nothing_here"
        with self.assertRaises(RepositoryNotFound) as ctx:
            load_repo(str(missing))
        msg = str(ctx.exception)
        self.assertIn(f"'{missing}'", msg)
        self.assertNotIn(f"{missing}/.git", msg)
        self.assertEqual(ctx.exception.path, str(missing))

    def test_directory_without_git_dir_is_not_found(self) -> None:
        plain = self.tmp / "plain"
        plain.mkdir()
        with self.assertRaises(RepositoryNotFound):
            load_repo(str(plain))

    def test_not_found_is_a_file_not_found_error(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_repo(str(self.tmp / "gone"))

    def test_load_does_not_create_anything(self) -> None:
        missing = self.tmp / "absent"
        with self.assertRaises(RepositoryNotFound):
            load_repo(str(missing))
        self.assertFalse(missing.exists())

    def test_handle_is_immutable(self) -> None:
        handle = load_repo(str(self.repo_dir))
        with self.assertRaises(AttributeError):
            handle.git_dir = self.tmp  # type: ignore[misc]

    def test_handle_as_context_manager(self) -> None:
        with load_repo(str(self.repo_dir)) as handle:
            self.assertTrue(handle.git_dir.is_dir())


class TestInit(unittest.TestCase):
    def test_init_creates_git_dir(self) -> None:
        d = Path(tempfile.mkdtemp(prefix="gitporcelain_init_")) / "new"
        handle = init(d, initial_branch="master")
        self.assertTrue((d / ".git").is_dir())
        self.assertEqual(handle.repo.head.reference.name, "master")


if __name__ == "__main__":
    unittest.main()
