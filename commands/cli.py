"""CLI interface for projector."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer

from commands.config import build_config
from projector_core.errors import ProjectorError
from projector_core.projector import Projector
from store.repository import LoadStatus

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Per-directory key/value store. Deeper directories override their ancestors.",
    add_completion=False,
)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


@app.command()
def projector(
    args: Optional[list[str]] = typer.Argument(
        None,
        help="Nothing to print all values, KEY to print one, 'add KEY VALUE', or 'rmv KEY'",
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Store file (default: $HOME/projector/projector.json)"
    ),
    pwd: Optional[Path] = typer.Option(
        None, "--pwd", "-p", help="Directory to resolve from (default: working directory)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Print, add or remove values for the current directory."""
    _setup_logging(verbose)

    try:
        settings = build_config(args, config=config, pwd=pwd)
    except ProjectorError as e:
        typer.secho(f"❌ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    proj = Projector.from_config(settings)
    operation = settings.operation
    logger.debug(f"Running {operation.kind} in {settings.pwd} against {settings.config}")

    if operation.kind == "print":
        if operation.key is None:
            typer.echo(json.dumps(dict(proj.get_value_all()), ensure_ascii=False))
        else:
            value = proj.get_value(operation.key)
            if value is not None:
                typer.echo(value)
        return

    if proj.load_status is LoadStatus.RECOVERED:
        logger.warning(f"Overwriting unreadable store {settings.config}")

    key = operation.key or ""
    if operation.kind == "add":
        proj.set_value(key, operation.value or "")
    elif not proj.remove_value(key):
        logger.debug(f"No '{key}' set directly on {settings.pwd}, nothing removed")

    try:
        proj.save()
    except OSError as e:
        typer.secho(f"❌ Failed to save {settings.config}: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
