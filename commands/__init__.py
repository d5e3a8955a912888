"""
Commands Module

Configuration and CLI for the projector tool.

This module provides:
- Mapping of positional arguments to a single operation
- Store location and working directory defaulting
- The typer application wiring one operation per process
"""

__version__ = "0.1.0"
