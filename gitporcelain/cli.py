"""CLI: argparse and command dispatch."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from git import GitCommandError

from . import config
from .clone import clone as clone_run, clone_full
from .constants import DEFAULT_BRANCH, DEFAULT_FETCH_REMOTE, DEFAULT_PULL_REMOTE, LIST_MODES, STATUS_FIELDS
from .errors import PorcelainError
from .fetch import fetch as fetch_run
from .porcelain import (
    add,
    branch_create,
    branch_delete,
    branch_list,
    checkout,
    commit,
    log,
    merge,
    pull,
    rm,
    status,
)
from .repo import RepositoryHandle, init, load_repo
from .results import Identity


def setup_logging(level: str = "WARNING", format_string: Optional[str] = None) -> None:
    """Configure root logging for the CLI (stderr, one line per record)."""
    if format_string is None:
        format_string = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_string,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
    logging.getLogger("git").setLevel(logging.WARNING)


def _repo(args: argparse.Namespace) -> RepositoryHandle:
    return load_repo(args.repo)


def _identity(value: Optional[str]) -> Optional[Identity]:
    """Parse 'Name <email>'."""
    if not value:
        return None
    name, sep, rest = value.partition("<")
    if not sep or not rest.endswith(">"):
        raise argparse.ArgumentTypeError(f"expected 'Name <email>', got {value!r}")
    return Identity(name.strip(), rest[:-1].strip())


def cmd_init(args: argparse.Namespace) -> int:
    handle = init(args.directory, bare=args.bare, initial_branch=args.initial_branch)
    print(f"Initialized empty Git repository in {handle.git_dir}")
    return 0


def cmd_clone(args: argparse.Namespace) -> int:
    if args.no_merge:
        handle = clone_run(args.uri, args.directory, args.remote, args.branch, args.bare)
        print(f"Cloned into {handle.git_dir}")
        return 0
    outcome = clone_full(args.uri, args.directory, args.remote, args.branch, args.bare)
    print(f"Cloned into {outcome.repository.git_dir}")
    print(f"Fetched {len(outcome.fetch_result.advertised_refs)} ref(s) from {outcome.fetch_result.remote}")
    print(f"Merge: {outcome.merge_result.status.value}")
    return 0


def cmd_add(args: argparse.Namespace) -> int:
    handle = _repo(args)
    for path in args.paths:
        add(handle, path, update=args.update)
    return 0


def cmd_commit(args: argparse.Namespace) -> int:
    handle = _repo(args)
    author = _identity(args.author) or config.get_user_identity(handle)
    info = commit(
        handle,
        args.message,
        author=author,
        committer=_identity(args.committer),
        amend=args.amend,
        all_tracked=args.all,
    )
    print(f"Created commit {info.sha[:7]} {info.summary}")
    return 0


def cmd_status(args: argparse.Namespace) -> int:
    handle = _repo(args)
    result = status(handle, *args.fields)
    for field in result:
        paths = sorted(result[field])
        if not paths:
            continue
        print(f"{field}:")
        for p in paths:
            print(f"  {p}")
    if not any(result.values()):
        print("nothing to commit, working tree clean")
    return 0


def cmd_branch(args: argparse.Namespace) -> int:
    handle = _repo(args)
    if args.delete:
        for name in branch_delete(handle, args.delete, force=args.force):
            print(f"Deleted branch {name}")
        return 0
    if args.name:
        ref = branch_create(handle, args.name, force=args.force, start_point=args.start_point)
        print(f"Created branch {ref.name} at {ref.sha[:7]}")
        return 0
    current = None if handle.repo.head.is_detached else handle.repo.head.reference.path
    for ref in branch_list(handle, args.mode):
        mark = "* " if ref.path == current else "  "
        print(f"{mark}{ref.name}")
    return 0


def cmd_checkout(args: argparse.Namespace) -> int:
    handle = _repo(args)
    ref = checkout(handle, args.name, create_branch=args.create, force=args.force, start_point=args.start_point)
    if ref is None:
        print(f"HEAD is now detached at {args.name}")
    else:
        print(f"Switched to branch {ref.name}")
    return 0


def cmd_log(args: argparse.Namespace) -> int:
    handle = _repo(args)
    for info in log(handle, args.rev, max_count=args.max_count):
        if args.oneline:
            print(f"{info.sha[:7]} {info.summary}")
            continue
        print(f"commit {info.sha}")
        print(f"Author: {info.author}")
        print(f"Date:   {info.authored_at.strftime('%a %b %d %H:%M:%S %Y %z')}")
        print()
        print(f"    {info.message.strip()}")
        print()
    return 0


def cmd_merge(args: argparse.Namespace) -> int:
    handle = _repo(args)
    result = merge(handle, args.source, message=args.message)
    print(f"Merge {args.source}: {result.status.value}")
    return 0


def cmd_fetch(args: argparse.Namespace) -> int:
    handle = _repo(args)
    result = fetch_run(handle, args.remote)
    for ref in result.advertised_refs:
        print(f"{ref.sha[:7]} {ref.path}")
    return 0


def cmd_pull(args: argparse.Namespace) -> int:
    handle = _repo(args)
    result = pull(handle, args.remote, args.branch)
    print(f"Merge: {result.merge_result.status.value}")
    return 0


def cmd_rm(args: argparse.Namespace) -> int:
    handle = _repo(args)
    for path in args.paths:
        for removed in rm(handle, path, cached=args.cached):
            print(f"rm '{removed}'")
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    handle = _repo(args)
    if args.list:
        for key, value in config.list_values(handle):
            print(f"{key}={value}")
        return 0
    if not args.key:
        print("Error: <key> required")
        return 1
    if args.unset:
        return 0 if config.unset_value(handle, args.key) else 1
    if args.value is not None:
        config.set_value(handle, args.key, args.value)
        return 0
    value = config.get_value(handle, args.key)
    if value is None:
        return 1
    print(value)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="gitporcelain", description="Git porcelain commands over GitPython")
    parser.add_argument("-C", "--repo", default=".", help="Repository path (working tree or .git folder)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    sub = parser.add_subparsers(dest="command")

    p_init = sub.add_parser("init", help="Initialize a new repository")
    p_init.add_argument("directory", nargs="?", default=".")
    p_init.add_argument("--bare", action="store_true")
    p_init.add_argument("--initial-branch", default=None)

    p_clone = sub.add_parser("clone", help="Clone a repository, fetch master and merge it")
    p_clone.add_argument("uri")
    p_clone.add_argument("directory", nargs="?", default=None)
    p_clone.add_argument("--remote", default=DEFAULT_BRANCH, help="Name of the remote created by the clone")
    p_clone.add_argument("--branch", default=DEFAULT_BRANCH, help="Branch to check out")
    p_clone.add_argument("--bare", action="store_true")
    p_clone.add_argument("--no-merge", action="store_true", help="Only clone, skip fetch and merge")

    p_add = sub.add_parser("add", help="Add files/directories to the staging area")
    p_add.add_argument("paths", nargs="+")
    p_add.add_argument("-u", "--update", action="store_true", help="Only stage files already tracked")

    p_commit = sub.add_parser("commit", help="Create a commit")
    p_commit.add_argument("-m", "--message", required=True)
    p_commit.add_argument("--author", default=None, help="'Name <email>'")
    p_commit.add_argument("--committer", default=None, help="'Name <email>'")
    p_commit.add_argument("--amend", action="store_true")
    p_commit.add_argument("-a", "--all", action="store_true", help="Stage modified and deleted tracked files")

    p_status = sub.add_parser("status", help="Show working tree status")
    p_status.add_argument("fields", nargs="*", metavar="field", help=f"One of {', '.join(STATUS_FIELDS)}")

    p_branch = sub.add_parser("branch", help="List, create or delete branches")
    p_branch.add_argument("name", nargs="?")
    p_branch.add_argument("start_point", nargs="?")
    p_branch.add_argument("-d", "--delete", nargs="+", metavar="BRANCH")
    p_branch.add_argument("-f", "--force", action="store_true")
    p_branch.add_argument("--mode", choices=LIST_MODES, default="local")

    p_checkout = sub.add_parser("checkout", help="Switch branch or create new branch, or detach HEAD")
    p_checkout.add_argument("name")
    p_checkout.add_argument("start_point", nargs="?")
    p_checkout.add_argument("-b", dest="create", action="store_true")
    p_checkout.add_argument("-f", "--force", action="store_true")

    p_log = sub.add_parser("log", help="Show commit log")
    p_log.add_argument("rev", nargs="?", default="HEAD")
    p_log.add_argument("-n", "--max-count", type=int, default=None)
    p_log.add_argument("--oneline", action="store_true")

    p_merge = sub.add_parser("merge", help="Merge a branch or commit into the current branch")
    p_merge.add_argument("source")
    p_merge.add_argument("-m", "--message", default=None)

    p_fetch = sub.add_parser("fetch", help="Fetch from a remote")
    p_fetch.add_argument("remote", nargs="?", default=DEFAULT_FETCH_REMOTE)

    p_pull = sub.add_parser("pull", help="Fetch and merge the remote branch")
    p_pull.add_argument("remote", nargs="?", default=DEFAULT_PULL_REMOTE)
    p_pull.add_argument("branch", nargs="?", default=None)

    p_rm = sub.add_parser("rm", help="Remove from index and working tree")
    p_rm.add_argument("paths", nargs="+")
    p_rm.add_argument("--cached", action="store_true", help="Keep the working tree copy")

    p_config = sub.add_parser("config", help="Read or write repository config")
    p_config.add_argument("key", nargs="?")
    p_config.add_argument("value", nargs="?")
    p_config.add_argument("--unset", action="store_true")
    p_config.add_argument("--list", action="store_true")

    args = parser.parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "WARNING")
    if not args.command:
        parser.print_help()
        return 0

    handlers = {
        "init": cmd_init,
        "clone": cmd_clone,
        "add": cmd_add,
        "commit": cmd_commit,
        "status": cmd_status,
        "branch": cmd_branch,
        "checkout": cmd_checkout,
        "log": cmd_log,
        "merge": cmd_merge,
        "fetch": cmd_fetch,
        "pull": cmd_pull,
        "rm": cmd_rm,
        "config": cmd_config,
    }
    handler = handlers[args.command]
    try:
        return handler(args) or 0
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}")
        return 2
    except (PorcelainError, GitCommandError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
