"""Result shapes returned by gitporcelain, independent of GitPython's own types."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, List, Optional, Tuple

if TYPE_CHECKING:
    import git

    from .repo import RepositoryHandle


@dataclass(frozen=True)
class Identity:
    """Name and email of an author or committer."""

    name: str
    email: str

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"


@dataclass(frozen=True)
class Ref:
    """A reference: full path (refs/heads/x), short name and target commit."""

    path: str
    name: str
    sha: str

    @classmethod
    def from_reference(cls, ref: "git.Reference") -> "Ref":
        return cls(path=ref.path, name=ref.name, sha=ref.commit.hexsha)


@dataclass(frozen=True)
class FetchResult:
    """Refs reported by a fetch, in the order the remote advertised them."""

    remote: str
    advertised_refs: List[Ref] = field(default_factory=list)


class MergeStatus(enum.Enum):
    ALREADY_UP_TO_DATE = "already-up-to-date"
    FAST_FORWARD = "fast-forward"
    MERGED = "merged"
    CONFLICTING = "conflicting"

    @property
    def is_successful(self) -> bool:
        return self is not MergeStatus.CONFLICTING


@dataclass(frozen=True)
class MergeResult:
    """Outcome of a merge: status, HEAD before and after, and conflicting paths."""

    status: MergeStatus
    base: Optional[str]
    new_head: Optional[str]
    merged: str
    conflicts: List[str] = field(default_factory=list)

    @property
    def successful(self) -> bool:
        return self.status.is_successful


@dataclass(frozen=True)
class CommitInfo:
    sha: str
    message: str
    author: Identity
    committer: Identity
    authored_at: datetime
    committed_at: datetime
    parents: Tuple[str, ...] = ()

    @classmethod
    def from_commit(cls, c: "git.Commit") -> "CommitInfo":
        return cls(
            sha=c.hexsha,
            message=str(c.message),
            author=Identity(c.author.name or "", c.author.email or ""),
            committer=Identity(c.committer.name or "", c.committer.email or ""),
            authored_at=c.authored_datetime,
            committed_at=c.committed_datetime,
            parents=tuple(p.hexsha for p in c.parents),
        )

    @property
    def summary(self) -> str:
        return self.message.split("\n", 1)[0].strip()


@dataclass(frozen=True)
class CloneOutcome:
    """Clone, fetch and merge results of clone_full, in production order."""

    repository: "RepositoryHandle"
    fetch_result: FetchResult
    merge_result: MergeResult


@dataclass(frozen=True)
class PullResult:
    fetch_result: FetchResult
    merge_result: MergeResult
