"""Session commands: log-session, history, and interactive set entry."""

from datetime import date as date_cls
from datetime import datetime
from typing import Annotated, Optional

import typer

from ...core.analysis import analyze_workout
from ...core.models import GeneratedPlan, WorkoutDay
from ...core.planner import refresh_previous_sessions, week_start_for, weekly_schedule
from ...core.session import IncompleteSessionError, SessionLogger
from ...io.serializers import ValidationError, parse_exercise_set, parse_set_spec, validate_date
from .. import views
from ..app import DataDirOption, app, get_store


def _scheduled_day(plan: GeneratedPlan, on: date_cls) -> WorkoutDay | None:
    """Plan day scheduled for a calendar date, or None on a rest day."""
    for current, day in weekly_schedule(plan, week_start_for(on)):
        if current == on:
            return day
    return None


def _interactive_sets(session_logger: SessionLogger) -> None:
    """
    Prompt for every prescribed set of the day.

    Each prompt accepts WEIGHTxREPS@RIR (e.g. 185x8@1).  Pressing Enter
    repeats the previous set, or the last session's values for the first
    set of an exercise.
    """
    views.console.print()
    views.console.print(f"[bold]{session_logger.day.name}[/bold]")
    views.console.print(
        "  Enter sets as [cyan]WEIGHTxREPS@RIR[/cyan], e.g. [green]185x8@1[/green]"
        "  (RIR: 0=failure … 5=easy)\n"
    )

    for exercise in session_logger.day.exercises:
        default: str | None = None
        if exercise.previous_session is not None:
            prev = exercise.previous_session
            default = f"{prev.weight:g}x{prev.reps}@2"

        views.console.print(f"[bold]{exercise.name}[/bold] [dim]{exercise.sets}×{exercise.reps}[/dim]")
        while not session_logger.is_exercise_complete(exercise.id):
            set_num = session_logger.completed_sets(exercise.id) + 1
            hint = f" [{default}]" if default else ""
            raw = views.console.input(f"  Set {set_num}/{exercise.sets}{hint}: ").strip()
            if not raw and default:
                raw = default
            try:
                weight, reps, rir = parse_set_spec(raw)
                session_logger.log_set(exercise.id, weight, reps, rir)
            except (ValidationError, ValueError) as e:
                views.print_error(str(e))
                continue
            default = raw


@app.command("log-session")
def log_session(
    day_id: Annotated[
        Optional[str],
        typer.Option("--day", help="Plan day id, e.g. push-1 (default: today's scheduled day)"),
    ] = None,
    sets: Annotated[
        Optional[list[str]],
        typer.Option("--set", "-s", help="EXERCISE_ID=WEIGHTxREPS@RIR (repeatable), e.g. ex-1=185x8@1"),
    ] = None,
    date: Annotated[
        Optional[str],
        typer.Option("--date", "-d", help="Session date (YYYY-MM-DD, default: today)"),
    ] = None,
    duration: Annotated[
        Optional[int],
        typer.Option("--duration", help="Session length in minutes"),
    ] = None,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Save without confirmation"),
    ] = False,
    data_dir: DataDirOption = None,
) -> None:
    """
    Log a completed workout and get coaching feedback.

    Run without --set for interactive set-by-set entry.
    Or supply every set for one-liner use:

      apex-coach log-session --day legs-1 --yes \\
        --set ex-10=225x8@2 --set ex-10=225x8@2 ...
    """
    store = get_store(data_dir)
    plan = store.load_plan()
    if plan is None:
        views.print_error(f"No plan found in {store.data_dir}")
        views.print_info("Run 'init' first to create a profile and plan.")
        raise typer.Exit(1)

    if date is None:
        date = datetime.now().strftime("%Y-%m-%d")
    try:
        validate_date(date)
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if day_id is None:
        day = _scheduled_day(plan, datetime.strptime(date, "%Y-%m-%d").date())
        if day is None:
            views.print_error(f"{date} is a rest day. Pick a day with --day.")
            raise typer.Exit(1)
    else:
        day = plan.day_by_id(day_id)
        if day is None:
            known = ", ".join(d.id for d in plan.days)
            views.print_error(f"Unknown day '{day_id}'. Plan days: {known}")
            raise typer.Exit(1)

    try:
        history = store.load_workout_history()
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    day = refresh_previous_sessions(day, history)
    session_logger = SessionLogger(day, session_date=date)

    if sets:
        for entry in sets:
            try:
                exercise_id, weight, reps, rir = parse_exercise_set(entry)
                session_logger.log_set(exercise_id, weight, reps, rir)
            except (ValidationError, ValueError) as e:
                views.print_error(str(e))
                raise typer.Exit(1)
    else:
        _interactive_sets(session_logger)

    try:
        session = session_logger.finish(duration_minutes=duration)
    except IncompleteSessionError as e:
        views.print_error(str(e))
        raise typer.Exit(1)
    except ValueError as e:
        views.print_error(f"Invalid session data: {e}")
        raise typer.Exit(1)

    views.console.print()
    views.console.print(f"[bold]{session.day_name}[/bold] on {session.date}")
    views.print_session_sets(session)

    if not yes and not views.confirm_action("Save this workout?"):
        views.print_info("Cancelled.")
        raise typer.Exit(0)

    store.append_workout(session)
    views.print_success(f"Logged {session.day_name} ({len(session.sets)} sets)")

    suggestions = analyze_workout(session, day, store)
    try:
        for suggestion in suggestions:
            store.append_suggestion(suggestion)
    except ValidationError as e:
        views.print_error(f"Workout saved, but suggestions could not be stored: {e}")
        raise typer.Exit(1)

    views.console.print()
    views.print_suggestions(suggestions)


@app.command()
def history(
    limit: Annotated[
        Optional[int],
        typer.Option("--last", "-n", help="Show only the most recent N workouts"),
    ] = None,
    data_dir: DataDirOption = None,
) -> None:
    """
    Display logged workouts.
    """
    store = get_store(data_dir)

    try:
        sessions = store.load_workout_history()
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if limit is not None and limit > 0:
        sessions = sessions[-limit:]

    views.print_history(sessions)
