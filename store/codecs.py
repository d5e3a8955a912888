"""
Document codecs for the projector store file.
"""

from __future__ import annotations

from pathlib import Path
from typing import cast

import yaml

from projector_core.schemas import ProjectorData


YAML_SUFFIXES = (".yaml", ".yml")


def is_yaml(location: str | Path) -> bool:
    return Path(location).suffix.lower() in YAML_SUFFIXES


def encode_document(data: ProjectorData, location: str | Path) -> str:
    """Serialize the whole store in the format implied by ``location``."""
    if is_yaml(location):
        return yaml.safe_dump(data.to_dict(), default_flow_style=False, sort_keys=True)
    return data.to_json()


def decode_document(text: str, location: str | Path) -> ProjectorData:
    """Parse a store document.

    Raises:
        ValueError: If the text is not a valid document. ``yaml.YAMLError`` and
            pydantic's ``ValidationError`` both surface as ``ValueError`` here.
    """
    if not is_yaml(location):
        return ProjectorData.from_json(text)

    try:
        payload = cast(object, yaml.safe_load(text))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML document: {e}") from e
    if not isinstance(payload, dict):
        raise ValueError("Store document must be a mapping")
    return ProjectorData.from_dict(cast(dict[str, object], payload))
