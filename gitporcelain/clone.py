"""Clone logic: clone a remote, and the clone-fetch-merge workflow built on it."""

from __future__ import annotations

import logging
from typing import Optional

from git import Git, GitCommandError, Repo

from .constants import DEFAULT_BRANCH, DEFAULT_FETCH_REMOTE
from .errors import CloneError
from .fetch import fetch
from .porcelain import merge
from .repo import RepositoryHandle
from .results import CloneOutcome
from .util import PathLike, name_from_uri

logger = logging.getLogger(__name__)


def _remote_has_refs(uri: str) -> bool:
    """True when the remote at uri advertises at least one ref."""
    return bool(Git().ls_remote("--", uri).strip())


def clone(
    uri: str,
    local_dir: Optional[PathLike] = None,
    remote_branch: str = DEFAULT_BRANCH,
    local_branch: str = DEFAULT_BRANCH,
    bare: bool = False,
) -> RepositoryHandle:
    """Clone uri into local_dir (default: last path segment of uri, minus .git).

    The new remote is named remote_branch and local_branch is checked out. An empty
    remote has no branch to check out, so local_branch is not requested from it.
    Raises CloneError when the remote cannot be read or the destination cannot be used.
    """
    if local_dir is None:
        try:
            local_dir = name_from_uri(uri)
        except ValueError as e:
            raise CloneError(str(e)) from e
    logger.debug("cloning %s into %s (remote %s, branch %s, bare=%s)", uri, local_dir, remote_branch, local_branch, bare)
    try:
        if _remote_has_refs(uri):
            repo = Repo.clone_from(uri, str(local_dir), origin=remote_branch, branch=local_branch, bare=bare)
        else:
            logger.debug("%s has no refs, cloning without a branch", uri)
            repo = Repo.clone_from(uri, str(local_dir), origin=remote_branch, bare=bare)
    except GitCommandError as e:
        raise CloneError(f"could not clone {uri} into {local_dir}: {e}") from e
    return RepositoryHandle.from_repo(repo)


def clone_full(
    uri: str,
    local_dir: Optional[PathLike] = None,
    remote_branch: str = DEFAULT_BRANCH,
    local_branch: str = DEFAULT_BRANCH,
    bare: bool = False,
) -> CloneOutcome:
    """Clone, fetch the master remote and merge the first ref it advertised.

    The fetch always targets the remote named "master", whatever remote_branch is.
    Steps run in order and stop at the first error (CloneError, FetchError or
    MergeError); a clone that succeeded stays on disk.
    """
    handle = clone(uri, local_dir, remote_branch, local_branch, bare)
    fetch_result = fetch(handle, DEFAULT_FETCH_REMOTE)
    first_ref = fetch_result.advertised_refs[0] if fetch_result.advertised_refs else None
    merge_result = merge(handle, first_ref)
    logger.info("cloned %s into %s: %s", uri, handle.git_dir, merge_result.status.value)
    return CloneOutcome(repository=handle, fetch_result=fetch_result, merge_result=merge_result)
