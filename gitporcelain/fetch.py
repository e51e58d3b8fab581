"""Fetch: update remote-tracking refs from a named remote and report the refs it advertised."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from git import GitCommandError

from .constants import DEFAULT_FETCH_REMOTE, REF_HEADS_PREFIX, REF_REMOTES_PREFIX
from .errors import FetchError
from .results import FetchResult, Ref

if TYPE_CHECKING:
    from .repo import RepositoryHandle

logger = logging.getLogger(__name__)


def default_refspec(remote: str) -> str:
    """Refspec used when a remote has none configured: +refs/heads/*:refs/remotes/<remote>/*"""
    return f"+{REF_HEADS_PREFIX}*:{REF_REMOTES_PREFIX}{remote}/*"


def fetch(handle: "RepositoryHandle", remote: str = DEFAULT_FETCH_REMOTE) -> FetchResult:
    """Fetch from remote. Advertised refs keep the order GitPython reports them in.

    Bare clones carry no fetch refspec, so default_refspec is used for them.
    An empty remote is not fetched from and yields no advertised refs.
    Raises FetchError if the remote is unknown or the transfer fails.
    """
    try:
        rem = handle.repo.remote(remote)
    except ValueError as e:
        raise FetchError(f"remote {remote!r} not found") from e

    try:
        listing = handle.repo.git.ls_remote("--", remote)
    except GitCommandError as e:
        raise FetchError(f"fetch from remote {remote!r} failed: {e}") from e
    if not listing.strip():
        logger.info("remote %s has no refs", remote)
        return FetchResult(remote=remote, advertised_refs=[])

    refspec: Optional[str] = None
    if not rem.config_reader.get_value("fetch", default=""):
        refspec = default_refspec(remote)

    logger.debug("fetching %s (refspec %s)", remote, refspec or "configured")
    try:
        infos = rem.fetch(refspec)
    except GitCommandError as e:
        raise FetchError(f"fetch from remote {remote!r} failed: {e}") from e

    refs = [Ref.from_reference(info.ref) for info in infos]
    logger.info("fetched %d ref(s) from %s", len(refs), remote)
    return FetchResult(remote=remote, advertised_refs=refs)
