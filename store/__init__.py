"""
Store Module

Persistence layer for the projector document.

This module provides:
- Whole-document load with an explicit outcome (absent / loaded / recovered)
- Whole-document save with parent directory creation
- JSON and YAML document codecs selected by file suffix
"""

__version__ = "0.1.0"

from .repository import LoadResult, LoadStatus, load_store, save_store

__all__ = ["LoadResult", "LoadStatus", "load_store", "save_store"]
