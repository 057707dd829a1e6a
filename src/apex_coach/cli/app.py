"""Shared Typer app object, shared option types, store and logging setup."""

import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from loguru import logger

from ..io.store import JsonStore, get_default_data_dir

# Shared --data-dir option type used across all commands
DataDirOption = Annotated[
    Optional[Path],
    typer.Option(
        "--data-dir",
        "-p",
        help="Directory holding profile, plan and history (default: $APEX_COACH_HOME or ~/.apex-coach)",
    ),
]

app = typer.Typer(
    name="apex-coach",
    help="Hypertrophy workout planner with RIR-based coaching feedback.",
    no_args_is_help=True,
)

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>"


def setup_logging(verbose: bool = False) -> None:
    """Route apex_coach log output to stderr."""
    logger.remove()
    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level="DEBUG" if verbose else "WARNING",
        colorize=True,
    )
    logger.enable("apex_coach")


def get_store(data_dir: Path | None) -> JsonStore:
    """Get store from directory or default location."""
    if data_dir is None:
        data_dir = get_default_data_dir()
    return JsonStore(data_dir)
