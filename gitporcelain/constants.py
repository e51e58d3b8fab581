"""Constants for gitporcelain: default branch, remote names, status vocabulary."""

from __future__ import annotations

# Default branch and remote name used by clone (the remote is named after the branch)
DEFAULT_BRANCH = "master"

# Remote fetched by the clone-and-merge workflow, independent of the clone's remote name
DEFAULT_FETCH_REMOTE = "master"

# Remote used by pull
DEFAULT_PULL_REMOTE = "origin"

# Metadata directory
GIT_DIR_NAME = ".git"
GIT_DIR_SUFFIX = ".git"

# Ref paths
REF_HEADS_PREFIX = "refs/heads/"
REF_REMOTES_PREFIX = "refs/remotes/"

# Status selectors, in reporting order
STATUS_FIELDS = ("added", "changed", "missing", "modified", "removed", "untracked")

# Branch list modes
LIST_MODE_LOCAL = "local"
LIST_MODE_REMOTE = "remote"
LIST_MODE_ALL = "all"
LIST_MODES = (LIST_MODE_LOCAL, LIST_MODE_REMOTE, LIST_MODE_ALL)
