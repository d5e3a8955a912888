"""
Deepest-wins resolution and local mutation over a loaded store.

Resolvers only read ``ProjectorData``; mutators touch the map of exactly one
directory and never its ancestors or descendants.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from .ancestry import DirectoryInput, ancestor_chain, directory_key
from .schemas import ProjectorData


def resolve_all(data: ProjectorData, current_dir: DirectoryInput) -> Mapping[str, str]:
    """Merge every ancestor's values, root first, so deeper directories win."""
    merged: dict[str, str] = {}
    for path in reversed(ancestor_chain(current_dir)):
        values = data.projector.get(directory_key(path))
        if values:
            merged.update(values)
    return MappingProxyType(merged)


def resolve_one(data: ProjectorData, current_dir: DirectoryInput, key: str) -> str | None:
    """Return the value from the closest ancestor defining ``key``."""
    for path in ancestor_chain(current_dir):
        values = data.projector.get(directory_key(path))
        if values is not None and key in values:
            return values[key]
    return None


def set_value(data: ProjectorData, current_dir: DirectoryInput, key: str, value: str) -> None:
    data.projector.setdefault(directory_key(current_dir), {})[key] = value


def remove_value(data: ProjectorData, current_dir: DirectoryInput, key: str) -> bool:
    """Remove ``key`` from ``current_dir`` only. Returns whether anything was removed."""
    values = data.projector.get(directory_key(current_dir))
    if values is None or key not in values:
        return False
    del values[key]
    return True
