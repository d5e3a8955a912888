"""Ancestor chain computation for directory paths."""

from __future__ import annotations

from pathlib import PurePath
from typing import TypeAlias


DirectoryInput: TypeAlias = str | PurePath


def ancestor_chain(directory: DirectoryInput) -> list[PurePath]:
    """Return ``directory`` followed by each parent up to the root.

    The root is the first path that is its own parent. No filesystem access
    happens here, so the paths need not exist.
    """
    current = PurePath(directory)
    chain = [current]
    while current.parent != current:
        current = current.parent
        chain.append(current)
    return chain


def directory_key(directory: DirectoryInput) -> str:
    """Normalize a directory into the string key used in the store document."""
    return str(PurePath(directory))
