"""
CLI entry point using Typer.

Provides commands for plan management and coaching:
- init: Create profile and first plan
- plan / week / describe-day / swap: Inspect the plan
- log-session / history: Log and list workouts
- suggestions / apply / review / progress: Coaching feedback
"""

from typing import Annotated

import typer

from .app import app, setup_logging
from .commands import analysis, planning, profile, sessions  # noqa: F401  (registers commands)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging on stderr"),
    ] = False,
) -> None:
    """
    Hypertrophy workout planner with RIR-based coaching feedback.
    """
    setup_logging(verbose)


if __name__ == "__main__":
    app()
