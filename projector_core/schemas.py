from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .ancestry import directory_key


TBaseSchema = TypeVar("TBaseSchema", bound="BaseSchema")


class BaseSchema(BaseModel):
    def to_json(self) -> str:
        return self.model_dump_json()

    def to_dict(self) -> dict[str, object]:
        return self.model_dump()

    @classmethod
    def from_json(cls: type[TBaseSchema], data: str) -> TBaseSchema:
        return cls.model_validate_json(data)

    @classmethod
    def from_dict(cls: type[TBaseSchema], data: Mapping[str, object]) -> TBaseSchema:
        return cls.model_validate(data)


class ProjectorData(BaseSchema):
    """Persisted document: absolute directory path -> key -> value."""

    projector: dict[str, dict[str, str]] = Field(default_factory=dict)

    @field_validator("projector")
    @classmethod
    def normalize_paths(cls, value: dict[str, dict[str, str]]) -> dict[str, dict[str, str]]:
        # "/a/" and "/a" name one directory; later entries win per key
        normalized: dict[str, dict[str, str]] = {}
        for path, values in value.items():
            normalized.setdefault(directory_key(path), {}).update(values)
        return normalized


class Operation(BaseSchema):
    model_config = ConfigDict(frozen=True)

    kind: Literal["print", "add", "remove"]
    key: str | None = None
    value: str | None = None

    @model_validator(mode="after")
    def check_arguments(self) -> "Operation":
        if self.kind in ("add", "remove") and self.key is None:
            raise ValueError(f"{self.kind} operation requires a key")
        if self.kind == "add" and self.value is None:
            raise ValueError("add operation requires a value")
        if self.kind != "add" and self.value is not None:
            raise ValueError(f"{self.kind} operation does not take a value")
        return self

    @classmethod
    def print_all(cls) -> "Operation":
        return cls(kind="print")

    @classmethod
    def print_one(cls, key: str) -> "Operation":
        return cls(kind="print", key=key)

    @classmethod
    def add(cls, key: str, value: str) -> "Operation":
        return cls(kind="add", key=key, value=value)

    @classmethod
    def remove(cls, key: str) -> "Operation":
        return cls(kind="remove", key=key)


class ProjectorConfig(BaseSchema):
    """Everything one invocation needs, resolved once at process start."""

    model_config = ConfigDict(frozen=True)

    operation: Operation
    pwd: Path
    config: Path
