"""Projector facade binding a store location, a directory and loaded data."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path, PurePath
from typing import TYPE_CHECKING

from .resolver import remove_value, resolve_all, resolve_one, set_value
from .schemas import ProjectorConfig, ProjectorData

if TYPE_CHECKING:
    from store.repository import LoadStatus


class Projector:
    """Per-directory values for one current directory."""

    def __init__(
        self,
        config: Path,
        pwd: PurePath,
        data: ProjectorData | None = None,
        load_status: "LoadStatus | None" = None,
    ) -> None:
        self.config = config
        self.pwd = pwd
        self.data = data if data is not None else ProjectorData()
        self.load_status = load_status

    @classmethod
    def from_config(cls, config: ProjectorConfig) -> "Projector":
        """Load the store named by ``config`` scoped to its working directory."""
        from store.repository import load_store

        result = load_store(config.config)
        return cls(config.config, config.pwd, result.data, result.status)

    def get_value_all(self) -> Mapping[str, str]:
        return resolve_all(self.data, self.pwd)

    def get_value(self, key: str) -> str | None:
        return resolve_one(self.data, self.pwd, key)

    def set_value(self, key: str, value: str) -> None:
        set_value(self.data, self.pwd, key, value)

    def remove_value(self, key: str) -> bool:
        return remove_value(self.data, self.pwd, key)

    def save(self) -> None:
        from store.repository import save_store

        save_store(self.data, self.config)
