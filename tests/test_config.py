"""Tests for config: get/set/list/unset and the identity used by commit."""

import tempfile
import unittest
from pathlib import Path

from gitporcelain.clone import clone
from gitporcelain.config import get_user_identity, get_value, list_values, set_value, unset_value
from gitporcelain.errors import InvalidConfigKeyError
from gitporcelain.porcelain import add, commit
from gitporcelain.repo import init
from gitporcelain.results import Identity
from gitporcelain.util import parse_config_key


class TestParseConfigKey(unittest.TestCase):
    def test_section_option(self) -> None:
        self.assertEqual(parse_config_key("user.name"), ("user", "name"))

    def test_subsection(self) -> None:
        self.assertEqual(parse_config_key("remote.origin.url"), ('remote "origin"', "url"))

    def test_invalid_keys(self) -> None:
        for key in ("user", "", "user.", ".name", "a..b"):
            with self.assertRaises(InvalidConfigKeyError):
                parse_config_key(key)


class TestConfigGetSetListUnset(unittest.TestCase):
    def setUp(self) -> None:
        self.repo_dir = Path(tempfile.mkdtemp(prefix="gitporcelain_config_"))
        self.handle = init(self.repo_dir, initial_branch="master")

    def test_config_set_get(self) -> None:
        set_value(self.handle, "user.name", "Alice")
        set_value(self.handle, "user.email", "alice@example.com")
        self.assertEqual(get_value(self.handle, "user.name"), "Alice")
        self.assertEqual(get_value(self.handle, "user.email"), "alice@example.com")

    def test_config_get_missing_returns_none(self) -> None:
        self.assertIsNone(get_value(self.handle, "user.nickname"))
        self.assertIsNone(get_value(self.handle, "nosection.key"))

    def test_config_list_contains_values(self) -> None:
        set_value(self.handle, "user.name", "Alice")
        values = dict(list_values(self.handle))
        self.assertEqual(values["user.name"], "Alice")
        self.assertIn("core.bare", values)

    def test_config_unset(self) -> None:
        set_value(self.handle, "user.name", "Alice")
        self.assertTrue(unset_value(self.handle, "user.name"))
        self.assertIsNone(get_value(self.handle, "user.name"))
        self.assertFalse(unset_value(self.handle, "user.name"))

    def test_config_invalid_key(self) -> None:
        with self.assertRaises(InvalidConfigKeyError):
            set_value(self.handle, "nodot", "x")

    def test_remote_subsection_after_clone(self) -> None:
        cloned = clone(str(self.repo_dir), self.repo_dir.parent / (self.repo_dir.name + "_clone"), remote_branch="origin")
        self.assertEqual(Path(get_value(cloned, "remote.origin.url")).resolve(), self.repo_dir.resolve())
        self.assertIn("remote.origin.url", dict(list_values(cloned)))


class TestUserIdentity(unittest.TestCase):
    def setUp(self) -> None:
        self.repo_dir = Path(tempfile.mkdtemp(prefix="gitporcelain_identity_"))
        self.handle = init(self.repo_dir, initial_branch="master")

    def test_identity_needs_name_and_email(self) -> None:
        self.assertIsNone(get_user_identity(self.handle))
        set_value(self.handle, "user.name", "Alice")
        self.assertIsNone(get_user_identity(self.handle))
        set_value(self.handle, "user.email", "alice@example.com")
        self.assertEqual(get_user_identity(self.handle), Identity("Alice", "alice@example.com"))

    def test_commit_uses_config_identity(self) -> None:
        set_value(self.handle, "user.name", "Alice")
        set_value(self.handle, "user.email", "alice@example.com")
        (self.repo_dir / "f").write_text("x\n")
        add(self.handle, "f")
        info = commit(self.handle, "first", author=get_user_identity(self.handle))
        self.assertEqual(str(info.author), "Alice <alice@example.com>")


if __name__ == "__main__":
    unittest.main()
