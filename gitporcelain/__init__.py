"""gitporcelain: git porcelain commands (init, clone, add, commit, branch, checkout, merge, status) over GitPython."""

from .clone import clone, clone_full
from .errors import (
    CloneError,
    FetchError,
    MergeError,
    PorcelainError,
    RepositoryNotFound,
    UnsupportedOperationError,
)
from .fetch import fetch
from .porcelain import (
    add,
    add_and_commit,
    branch_create,
    branch_delete,
    branch_list,
    checkout,
    commit,
    commit_amend,
    log,
    merge,
    pull,
    rm,
    status,
)
from .repo import RepositoryHandle, init, load_repo
from .results import CloneOutcome, CommitInfo, FetchResult, Identity, MergeResult, MergeStatus, PullResult, Ref

__all__ = [
    "RepositoryHandle",
    "init",
    "load_repo",
    "clone",
    "clone_full",
    "fetch",
    "add",
    "add_and_commit",
    "branch_create",
    "branch_delete",
    "branch_list",
    "checkout",
    "commit",
    "commit_amend",
    "log",
    "merge",
    "pull",
    "rm",
    "status",
    "CloneOutcome",
    "CommitInfo",
    "FetchResult",
    "Identity",
    "MergeResult",
    "MergeStatus",
    "PullResult",
    "Ref",
    "PorcelainError",
    "RepositoryNotFound",
    "CloneError",
    "FetchError",
    "MergeError",
    "UnsupportedOperationError",
]
