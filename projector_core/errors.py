"""Exceptions raised by projector."""

from __future__ import annotations


class ProjectorError(ValueError):
    """Base class for user-facing projector errors."""


class ConfigError(ProjectorError):
    """Store location or current directory could not be determined."""


class OperationError(ProjectorError):
    """Command arguments do not describe a valid operation."""
