"""Coaching commands: suggestions, apply, review, progress."""

from typing import Annotated, Optional

import typer

from ...core.analysis import generate_weekly_review, get_exercise_progress, weekly_summary
from ...core.planner import parse_week_start
from ...io.serializers import ValidationError
from .. import views
from ..app import DataDirOption, app, get_store


@app.command()
def suggestions(
    show_all: Annotated[
        bool,
        typer.Option("--all", "-a", help="Include suggestions already applied"),
    ] = False,
    data_dir: DataDirOption = None,
) -> None:
    """
    List stored coaching suggestions.
    """
    store = get_store(data_dir)

    try:
        stored = store.load_suggestions()
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if not show_all:
        stored = [s for s in stored if not s.applied]

    views.print_suggestions(stored)


@app.command()
def apply(
    suggestion_id: Annotated[str, typer.Argument(help="Suggestion id as shown by 'suggestions'")],
    data_dir: DataDirOption = None,
) -> None:
    """
    Mark a suggestion as applied.
    """
    store = get_store(data_dir)

    try:
        found = store.mark_suggestion_applied(suggestion_id)
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if not found:
        views.print_error(f"No suggestion with id '{suggestion_id}'")
        raise typer.Exit(1)

    views.print_success(f"Applied {suggestion_id}")


@app.command()
def review(
    week_of: Annotated[
        Optional[str],
        typer.Option("--week-of", "-w", help="Any date in the week to review (YYYY-MM-DD, default: today)"),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show suggestions without storing them"),
    ] = False,
    data_dir: DataDirOption = None,
) -> None:
    """
    Review one week of training.

    Checks every plan exercise for stagnation and for a week that was too
    easy, then prints adherence for the week.
    """
    store = get_store(data_dir)
    plan = store.load_plan()
    if plan is None:
        views.print_error(f"No plan found in {store.data_dir}")
        views.print_info("Run 'init' first to create a profile and plan.")
        raise typer.Exit(1)

    try:
        week_start = parse_week_start(week_of)
    except ValueError:
        views.print_error(f"Invalid date: {week_of}. Expected YYYY-MM-DD")
        raise typer.Exit(1)

    try:
        new = generate_weekly_review(week_start, plan, store)
        if not dry_run:
            for suggestion in new:
                store.append_suggestion(suggestion)
        summary = weekly_summary(week_start, store)
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    views.print_suggestions(new, title="Weekly Review")
    views.print_weekly_summary(summary)


@app.command()
def progress(
    exercise_id: Annotated[str, typer.Argument(help="Exercise id, e.g. ex-1")],
    data_dir: DataDirOption = None,
) -> None:
    """
    Show the weight trend of one exercise.
    """
    store = get_store(data_dir)

    try:
        result = get_exercise_progress(exercise_id, store)
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    views.print_progress(exercise_id, result)
