"""Porcelain commands: add, commit, status, branch, checkout, log, merge, rm, pull."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, NoReturn, Optional, Set, Union

from git import Actor, GitCommandError, RemoteReference
from git.exc import BadName, BadObject

from .constants import (
    DEFAULT_PULL_REMOTE,
    LIST_MODE_ALL,
    LIST_MODE_LOCAL,
    LIST_MODE_REMOTE,
    LIST_MODES,
    REF_REMOTES_PREFIX,
    STATUS_FIELDS,
)
from .errors import InvalidListModeError, InvalidStatusFieldError, MergeError, UnsupportedOperationError
from .fetch import fetch
from .repo import RepositoryHandle
from .results import CommitInfo, Identity, MergeResult, MergeStatus, PullResult, Ref

logger = logging.getLogger(__name__)


def add(handle: RepositoryHandle, file_pattern: str, update: bool = False) -> None:
    """Stage a file, or every file under a directory.

    With update=True only paths already in the index are staged (no new files).
    """
    args = ["--update"] if update else []
    handle.repo.git.add(*args, "--", file_pattern)


def _actor(identity: Optional[Identity]) -> Optional[Actor]:
    if identity is None:
        return None
    return Actor(identity.name, identity.email)


def commit(
    handle: RepositoryHandle,
    message: str,
    author: Optional[Identity] = None,
    committer: Optional[Identity] = None,
    amend: bool = False,
    all_tracked: bool = False,
) -> CommitInfo:
    """Create a commit from the index and advance the current branch.

    When only author is given it is also the committer. Without either, GitPython
    takes the identity from git config or the environment.
    amend: replace HEAD, reusing its parents and (unless given) its author.
    all_tracked: stage modified and deleted tracked files first, like `git commit -a`.
    """
    repo = handle.repo
    if all_tracked:
        repo.git.add("--update")
    if committer is None:
        committer = author
    parents = None
    if amend:
        head = repo.head.commit
        parents = list(head.parents)
        if author is None:
            author = Identity(head.author.name or "", head.author.email or "")
    c = repo.index.commit(
        message,
        parent_commits=parents,
        author=_actor(author),
        committer=_actor(committer),
    )
    logger.debug("created commit %s%s", c.hexsha[:7], " (amend)" if amend else "")
    return CommitInfo.from_commit(c)


def commit_amend(
    handle: RepositoryHandle,
    message: str,
    author: Optional[Identity] = None,
    committer: Optional[Identity] = None,
) -> CommitInfo:
    return commit(handle, message, author=author, committer=committer, amend=True)


def add_and_commit(
    handle: RepositoryHandle,
    message: str,
    author: Optional[Identity] = None,
    committer: Optional[Identity] = None,
) -> CommitInfo:
    """`git commit -a`: commit every change to tracked files."""
    return commit(handle, message, author=author, committer=committer, all_tracked=True)


def status(handle: RepositoryHandle, *fields: str) -> Dict[str, Set[str]]:
    """Return {field: set of paths} for the requested fields (all six when none given).

    added/changed/removed compare the index with HEAD; modified/missing compare the
    working tree with the index; untracked lists files git does not know and does not ignore.
    """
    selected = fields or STATUS_FIELDS
    unknown = [f for f in selected if f not in STATUS_FIELDS]
    if unknown:
        raise InvalidStatusFieldError(
            f"unknown status field(s) {', '.join(map(repr, unknown))}; expected one of {', '.join(STATUS_FIELDS)}"
        )
    repo = handle.repo
    found: Dict[str, Set[str]] = {f: set() for f in STATUS_FIELDS}

    if {"added", "changed", "removed"} & set(selected):
        if repo.head.is_valid():
            for d in repo.head.commit.diff():
                if d.change_type == "A":
                    found["added"].add(d.b_path)
                elif d.change_type == "D":
                    found["removed"].add(d.a_path)
                elif d.change_type == "R":
                    found["removed"].add(d.a_path)
                    found["added"].add(d.b_path)
                else:
                    found["changed"].add(d.b_path)
        else:
            # no commits yet: everything staged is new
            found["added"].update(str(path) for path, _stage in repo.index.entries)

    if {"modified", "missing"} & set(selected):
        for d in repo.index.diff(None):
            if d.change_type == "D":
                found["missing"].add(d.a_path)
            else:
                found["modified"].add(d.a_path)

    if "untracked" in selected:
        found["untracked"].update(repo.untracked_files)

    return {f: found[f] for f in selected}


def branch_list(handle: RepositoryHandle, mode: str = LIST_MODE_LOCAL) -> List[Ref]:
    """List branches: local heads, remote-tracking refs, or both (mode 'local', 'remote', 'all')."""
    if mode not in LIST_MODES:
        raise InvalidListModeError(f"unknown list mode {mode!r}; expected one of {', '.join(LIST_MODES)}")
    repo = handle.repo
    refs: List[Ref] = []
    if mode in (LIST_MODE_LOCAL, LIST_MODE_ALL):
        refs.extend(Ref.from_reference(h) for h in repo.heads)
    if mode in (LIST_MODE_REMOTE, LIST_MODE_ALL):
        refs.extend(Ref.from_reference(r) for r in repo.refs if isinstance(r, RemoteReference))
    return refs


def branch_create(
    handle: RepositoryHandle,
    name: str,
    force: bool = False,
    start_point: Optional[str] = None,
) -> Ref:
    """Create branch at start_point (default HEAD). Without force an existing branch is an error."""
    head = handle.repo.create_head(name, start_point or "HEAD", force=force)
    logger.debug("created branch %s at %s", name, head.commit.hexsha[:7])
    return Ref.from_reference(head)


def branch_delete(
    handle: RepositoryHandle,
    names: Union[str, Iterable[str]],
    force: bool = False,
) -> List[str]:
    """Delete branches. Unmerged branches need force=True. Returns the deleted names."""
    names = [names] if isinstance(names, str) else list(names)
    handle.repo.delete_head(*names, force=force)
    return names


def checkout(
    handle: RepositoryHandle,
    name: str,
    create_branch: bool = False,
    force: bool = False,
    start_point: Optional[str] = None,
) -> Optional[Ref]:
    """Switch to branch or commit name; optionally create the branch (at start_point).

    Returns the now-current branch, or None when HEAD is detached.
    """
    args = []
    if force:
        args.append("--force")
    if create_branch:
        args.extend(["-b", name])
        if start_point:
            args.append(start_point)
    else:
        args.append(name)
    repo = handle.repo
    repo.git.checkout(*args)
    if repo.head.is_detached:
        return None
    return Ref.from_reference(repo.head.reference)


def log(handle: RepositoryHandle, rev: str = "HEAD", max_count: Optional[int] = None) -> List[CommitInfo]:
    """Commits reachable from rev, newest first."""
    kwargs = {}
    if max_count is not None:
        kwargs["max_count"] = max_count
    return [CommitInfo.from_commit(c) for c in handle.repo.iter_commits(rev, **kwargs)]


def merge(
    handle: RepositoryHandle,
    source: Union[Ref, str, None],
    message: Optional[str] = None,
) -> MergeResult:
    """Merge source (a Ref, branch name or commit id) into the current branch.

    Fast-forwards when possible, otherwise creates a merge commit. Raises MergeError when
    there is no source, the source does not resolve, the repository is bare, an earlier
    merge is still unresolved, or the merge conflicts. In the last case the error carries a
    CONFLICTING result and the working tree is left as git left it.
    """
    if source is None:
        raise MergeError("no merge source given")
    if isinstance(source, Ref):
        label, rev = source.name, source.sha
    else:
        label = rev = str(source)
    repo = handle.repo
    if repo.bare:
        raise MergeError(f"cannot merge {label} in a bare repository")
    if Path(repo.git_dir, "MERGE_HEAD").exists():
        raise MergeError(f"cannot merge {label}: a previous merge is not concluded")
    try:
        target = repo.commit(rev)
    except (BadName, BadObject, ValueError) as e:
        raise MergeError(f"{label} - not something we can merge") from e

    head = repo.head.commit if repo.head.is_valid() else None
    base = head.hexsha if head is not None else None
    if head is not None and (head == target or repo.is_ancestor(target, head)):
        logger.debug("merge %s: already up to date", label)
        return MergeResult(MergeStatus.ALREADY_UP_TO_DATE, base, base, target.hexsha)
    fast_forward = head is None or repo.is_ancestor(head, target)

    try:
        repo.git.merge("--no-edit", "-m", message or f"Merge {label}", target.hexsha)
    except GitCommandError as e:
        conflicts = sorted(str(p) for p in repo.index.unmerged_blobs())
        if conflicts:
            result = MergeResult(MergeStatus.CONFLICTING, base, base, target.hexsha, conflicts)
            raise MergeError(f"merge of {label} has conflicts: {', '.join(conflicts)}", result=result) from e
        raise MergeError(f"merge of {label} failed: {e}") from e

    status_ = MergeStatus.FAST_FORWARD if fast_forward else MergeStatus.MERGED
    new_head = repo.head.commit.hexsha
    logger.info("merge %s: %s -> %s", label, status_.value, new_head[:7])
    return MergeResult(status_, base, new_head, target.hexsha)


def rm(handle: RepositoryHandle, file_pattern: str, cached: bool = False) -> List[str]:
    """Remove a file or directory from the index and, unless cached, the working tree."""
    return handle.repo.index.remove([file_pattern], working_tree=not cached, r=True)


def pull(
    handle: RepositoryHandle,
    remote: str = DEFAULT_PULL_REMOTE,
    branch: Optional[str] = None,
) -> PullResult:
    """Fetch remote, then merge <remote>/<branch> (default: current branch name)."""
    if branch is None:
        branch = handle.repo.active_branch.name
    fetch_result = fetch(handle, remote)
    merge_result = merge(handle, f"{REF_REMOTES_PREFIX}{remote}/{branch}")
    return PullResult(fetch_result=fetch_result, merge_result=merge_result)


def _unsupported(command: str) -> NoReturn:
    raise UnsupportedOperationError(f"{command} is not supported yet")


def cherry_pick(handle: RepositoryHandle, *args: object, **kwargs: object) -> NoReturn:
    _unsupported("cherry-pick")


def push(handle: RepositoryHandle, *args: object, **kwargs: object) -> NoReturn:
    _unsupported("push")


def rebase(handle: RepositoryHandle, *args: object, **kwargs: object) -> NoReturn:
    _unsupported("rebase")


def revert(handle: RepositoryHandle, *args: object, **kwargs: object) -> NoReturn:
    _unsupported("revert")


def tag(handle: RepositoryHandle, *args: object, **kwargs: object) -> NoReturn:
    _unsupported("tag")
