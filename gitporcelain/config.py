"""Repository configuration: read/write .git/config through GitPython's config parser."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Tuple

from .results import Identity
from .util import parse_config_key

if TYPE_CHECKING:
    from .repo import RepositoryHandle

CONFIG_LEVEL = "repository"


def get_value(handle: "RepositoryHandle", key: str) -> Optional[str]:
    """Get config value for key (section.option). Return None if missing."""
    section, option = parse_config_key(key)
    reader = handle.repo.config_reader(CONFIG_LEVEL)
    if reader.has_section(section) and reader.has_option(section, option):
        return str(reader.get(section, option))
    return None


def set_value(handle: "RepositoryHandle", key: str, value: str) -> None:
    """Set config value. Creates section if needed."""
    section, option = parse_config_key(key)
    with handle.repo.config_writer(CONFIG_LEVEL) as writer:
        writer.set_value(section, option, value)


def unset_value(handle: "RepositoryHandle", key: str) -> bool:
    """Remove config option. Remove section if empty. Return True if something removed."""
    section, option = parse_config_key(key)
    with handle.repo.config_writer(CONFIG_LEVEL) as writer:
        if not writer.has_section(section) or not writer.has_option(section, option):
            return False
        writer.remove_option(section, option)
        if not writer.options(section):
            writer.remove_section(section)
    return True


def list_values(handle: "RepositoryHandle") -> List[Tuple[str, str]]:
    """Return [(key, value), ...] sorted by key (section.option)."""
    reader = handle.repo.config_reader(CONFIG_LEVEL)
    result: List[Tuple[str, str]] = []
    for section in sorted(reader.sections()):
        name = section
        if ' "' in section and section.endswith('"'):
            head, sub = section.split(' "', 1)
            name = f"{head}.{sub[:-1]}"
        for option in sorted(reader.options(section)):
            result.append((f"{name}.{option}", str(reader.get(section, option))))
    return result


def get_user_identity(handle: "RepositoryHandle") -> Optional[Identity]:
    """Return Identity from user.name and user.email if both set, else None."""
    name = get_value(handle, "user.name")
    email = get_value(handle, "user.email")
    if name is not None and email is not None:
        return Identity(name, email)
    return None
