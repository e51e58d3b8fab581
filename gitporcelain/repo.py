"""RepositoryHandle: a GitPython repository bound to one metadata directory."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from git import Repo

from .errors import RepositoryNotFound
from .util import PathLike, git_dir_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RepositoryHandle:
    """Opened repository. Two handles are equal when they share a metadata directory."""

    git_dir: Path
    repo: Repo = field(compare=False, repr=False)

    @classmethod
    def from_repo(cls, repo: Repo) -> "RepositoryHandle":
        return cls(git_dir=Path(repo.git_dir).resolve(), repo=repo)

    @property
    def working_dir(self) -> Optional[Path]:
        """Working tree root, or None for a bare repository."""
        wt = self.repo.working_tree_dir
        return Path(wt) if wt is not None else None

    @property
    def bare(self) -> bool:
        return self.repo.bare

    def close(self) -> None:
        self.repo.close()

    def __enter__(self) -> "RepositoryHandle":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def load_repo(path: PathLike) -> RepositoryHandle:
    """Load the repository at path (either the working tree or the .git folder itself).

    Raises RepositoryNotFound, naming the original path, when the metadata directory is missing.
    """
    git_dir = git_dir_for(path)
    if not Path(git_dir).exists():
        raise RepositoryNotFound(str(path))
    logger.debug("opening repository at %s", git_dir)
    repo = Repo(git_dir, search_parent_directories=True)
    return RepositoryHandle.from_repo(repo)


def init(
    target_dir: PathLike = ".",
    bare: bool = False,
    initial_branch: Optional[str] = None,
) -> RepositoryHandle:
    """Initialize (or reinitialize) a repository in target_dir and load it."""
    kwargs = {}
    if initial_branch is not None:
        kwargs["initial_branch"] = initial_branch
    repo = Repo.init(str(target_dir), mkdir=True, bare=bare, **kwargs)
    logger.info("initialized %srepository in %s", "bare " if bare else "", repo.git_dir)
    return RepositoryHandle.from_repo(repo)
