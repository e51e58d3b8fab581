"""Custom exceptions for gitporcelain."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .results import MergeResult


class PorcelainError(Exception):
    """Base exception for gitporcelain."""

    pass


class RepositoryNotFound(PorcelainError, FileNotFoundError):
    """Raised when a path does not lead to an existing metadata directory."""

    def __init__(self, path: str) -> None:
        super().__init__(f"The Git repository at '{path}' could not be located.")
        self.path = path


class CloneError(PorcelainError):
    """Raised when cloning a remote repository fails."""

    pass


class FetchError(PorcelainError):
    """Raised when fetching from a remote fails."""

    pass


class MergeError(PorcelainError):
    """Raised when a merge cannot be performed or ends in conflicts.

    ``result`` is set when the merge ran and left conflicts behind.
    """

    def __init__(self, message: str, result: Optional["MergeResult"] = None) -> None:
        super().__init__(message)
        self.result = result


class InvalidStatusFieldError(PorcelainError):
    """Raised when status is asked for a field outside the known vocabulary."""

    pass


class InvalidListModeError(PorcelainError):
    """Raised when branch listing gets an unknown mode."""

    pass


class InvalidConfigKeyError(PorcelainError):
    """Raised when a config key is invalid (e.g. not section.option)."""

    pass


class UnsupportedOperationError(PorcelainError, NotImplementedError):
    """Raised by commands that are declared but not supported yet."""

    pass
