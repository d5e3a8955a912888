"""
Projector Core Module

Directory-scoped key/value resolution.

This module provides:
- The persisted document model (directory path -> key/value map)
- Ancestor chain computation for a directory
- Deepest-wins resolution across ancestors
- Local set/remove mutations scoped to one directory
"""

__version__ = "0.1.0"

from .errors import ConfigError, OperationError, ProjectorError
from .projector import Projector
from .resolver import remove_value, resolve_all, resolve_one, set_value
from .schemas import Operation, ProjectorConfig, ProjectorData

__all__ = [
    "ConfigError",
    "Operation",
    "OperationError",
    "Projector",
    "ProjectorConfig",
    "ProjectorData",
    "ProjectorError",
    "remove_value",
    "resolve_all",
    "resolve_one",
    "set_value",
]
