"""Process configuration: operation parsing and location defaulting."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from pathlib import Path

from projector_core.errors import ConfigError, OperationError
from projector_core.schemas import Operation, ProjectorConfig


STORE_DIR_NAME = "projector"
STORE_FILE_NAME = "projector.json"


def parse_operation(args: Sequence[str] | None) -> Operation:
    """Turn positional arguments into one operation.

    ``[]`` prints everything, ``[key]`` prints one value, ``["add", key, value]``
    sets a value and ``["rmv", key]`` removes one.

    Raises:
        OperationError: If the argument count does not fit the verb.
    """
    args = list(args or [])
    if not args:
        return Operation.print_all()

    term = args[0]
    if term == "add":
        if len(args) != 3:
            raise OperationError(f"add operation expects 2 arguments but got {len(args) - 1}")
        return Operation.add(args[1], args[2])

    if term == "rmv":
        if len(args) != 2:
            raise OperationError(f"rmv operation expects 1 arguments but got {len(args) - 1}")
        return Operation.remove(args[1])

    if len(args) > 1:
        raise OperationError(
            f"print operation expects 0 or 1 arguments but got {len(args) - 1}"
        )
    return Operation.print_one(term)


def default_store_path(environ: Mapping[str, str]) -> Path:
    home = environ.get("HOME")
    if not home:
        raise ConfigError("unable to get HOME")
    return Path(home) / STORE_DIR_NAME / STORE_FILE_NAME


def _current_dir() -> Path:
    try:
        return Path.cwd()
    except OSError as e:
        raise ConfigError(f"errored getting current dir: {e}") from e


def build_config(
    args: Sequence[str] | None,
    config: Path | None = None,
    pwd: Path | None = None,
    environ: Mapping[str, str] | None = None,
    cwd: Path | None = None,
) -> ProjectorConfig:
    """Resolve everything one invocation needs.

    Explicit ``config``/``pwd`` win over defaults. ``environ`` and ``cwd`` are
    only consulted for defaults and fall back to the real process values.

    Raises:
        OperationError: If ``args`` is malformed.
        ConfigError: If a default cannot be determined.
    """
    operation = parse_operation(args)

    if config is None:
        config = default_store_path(os.environ if environ is None else environ)

    if pwd is None:
        pwd = cwd if cwd is not None else _current_dir()
    elif not pwd.is_absolute():
        pwd = (cwd if cwd is not None else _current_dir()) / pwd

    return ProjectorConfig(operation=operation, pwd=pwd, config=config)
