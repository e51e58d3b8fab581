"""Helper functions: path normalisation, clone directory names, config keys."""

from __future__ import annotations

import os
from typing import Union

from .constants import GIT_DIR_NAME, GIT_DIR_SUFFIX
from .errors import InvalidConfigKeyError

PathLike = Union[str, "os.PathLike[str]"]


def git_dir_for(path: PathLike) -> str:
    """Return the metadata directory for path.

    A path ending in ``.git`` is taken verbatim, anything else gets ``/.git`` appended.
    """
    p = os.fspath(path)
    if p.endswith(GIT_DIR_SUFFIX):
        return p
    return f"{p}/{GIT_DIR_NAME}"


def name_from_uri(uri: str) -> str:
    """Derive a clone directory name from the last path segment of uri.

    ``https://host/org/project.git`` -> ``project``, ``git@host:project`` -> ``project``.
    Raises ValueError if no name can be derived.
    """
    s = uri.strip().rstrip("/")
    if s.endswith("/" + GIT_DIR_NAME):
        s = s[: -len(GIT_DIR_NAME) - 1].rstrip("/")
    name = s.replace("\\", "/").rsplit("/", 1)[-1]
    name = name.rsplit(":", 1)[-1]
    if name.endswith(GIT_DIR_SUFFIX):
        name = name[: -len(GIT_DIR_SUFFIX)]
    if not name:
        raise ValueError(f"cannot derive a directory name from {uri!r}")
    return name


def parse_config_key(key: str) -> tuple[str, str]:
    """Return (section, option). Raises InvalidConfigKeyError if key invalid.

    Subsections are kept: ``remote.origin.url`` -> (``remote "origin"``, ``url``).
    """
    parts = key.split(".")
    if len(parts) < 2 or not all(p.strip() for p in parts):
        raise InvalidConfigKeyError(f"invalid config key: {key!r} (expected section.option)")
    section, option = parts[0].strip(), parts[-1].strip()
    if len(parts) > 2:
        sub = ".".join(parts[1:-1])
        section = f'{section} "{sub}"'
    return section, option
