"""
File-backed store: whole-document load and save.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from projector_core.schemas import ProjectorData

from .codecs import decode_document, encode_document

logger = logging.getLogger(__name__)


class LoadStatus(str, Enum):
    ABSENT = "absent"
    LOADED = "loaded"
    RECOVERED = "recovered"


@dataclass
class LoadResult:
    data: ProjectorData
    status: LoadStatus
    error: str | None = None


def load_store(location: str | Path) -> LoadResult:
    """Load the store document at ``location``.

    Never raises for a missing or corrupt file: both produce an empty store,
    distinguished by ``LoadResult.status``.
    """
    path = Path(location)
    if not path.exists():
        logger.debug(f"No store at {path}, starting empty")
        return LoadResult(data=ProjectorData(), status=LoadStatus.ABSENT)

    try:
        text = path.read_text(encoding="utf-8")
        data = decode_document(text, path)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        logger.warning(f"Ignoring unreadable store {path}: {e}")
        return LoadResult(data=ProjectorData(), status=LoadStatus.RECOVERED, error=str(e))

    logger.debug(f"Loaded {len(data.projector)} directories from {path}")
    return LoadResult(data=data, status=LoadStatus.LOADED)


def save_store(data: ProjectorData, location: str | Path) -> None:
    """Write the whole store to ``location``, creating parent directories.

    The document is written to a sibling temporary file and renamed over the
    target. ``OSError`` propagates to the caller.
    """
    path = Path(location)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = encode_document(data, path)

    tmp_path = path.with_name(f"{path.name}.tmp.{os.getpid()}")
    try:
        tmp_path.write_text(payload, encoding="utf-8")
        tmp_path.replace(path)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise
    logger.debug(f"Saved {len(data.projector)} directories to {path}")
