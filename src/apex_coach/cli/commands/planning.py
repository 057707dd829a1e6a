"""Planning commands: plan, week, describe-day, swap."""

import json
from typing import Annotated, Optional

import typer

from ...core.exercises import get_swap_alternatives
from ...core.metrics import completed_day_slots
from ...core.models import GeneratedPlan
from ...core.planner import (
    generate_plan,
    get_workout_day_description,
    parse_week_start,
    refresh_previous_sessions,
    weekly_schedule,
)
from ...io.serializers import ValidationError, plan_to_dict
from ...io.store import JsonStore
from .. import views
from ..app import DataDirOption, app, get_store


def _load_plan_or_exit(store: JsonStore) -> GeneratedPlan:
    plan = store.load_plan()
    if plan is None:
        views.print_error(f"No plan found in {store.data_dir}")
        views.print_info("Run 'init' first to create a profile and plan.")
        raise typer.Exit(1)
    return plan


def _with_latest_sessions(plan: GeneratedPlan, store: JsonStore) -> GeneratedPlan:
    """Plan copy whose previous-session values reflect logged history."""
    try:
        history = store.load_workout_history()
    except ValidationError as e:
        views.print_warning(str(e))
        return plan
    return GeneratedPlan(
        split=plan.split,
        days=[refresh_previous_sessions(day, history) for day in plan.days],
        rationale=plan.rationale,
    )


@app.command()
def plan(
    regenerate: Annotated[
        bool,
        typer.Option("--regenerate", "-r", help="Rebuild the plan from the saved profile"),
    ] = False,
    json_out: Annotated[
        bool,
        typer.Option("--json", "-j", help="Output as JSON for machine processing"),
    ] = False,
    data_dir: DataDirOption = None,
) -> None:
    """
    Show the current training plan.
    """
    store = get_store(data_dir)

    if regenerate:
        profile = store.load_profile()
        if profile is None:
            views.print_error(f"No profile found in {store.data_dir}")
            views.print_info("Run 'init' first to create a profile.")
            raise typer.Exit(1)
        current = generate_plan(profile)
        store.save_plan(current)
        if not json_out:
            views.print_success("Plan regenerated.")
    else:
        current = _load_plan_or_exit(store)

    current = _with_latest_sessions(current, store)

    if json_out:
        print(json.dumps(plan_to_dict(current), indent=2))
        return

    views.print_plan(current)


@app.command()
def week(
    date: Annotated[
        Optional[str],
        typer.Option("--date", "-d", help="Any date in the week (YYYY-MM-DD, default: today)"),
    ] = None,
    data_dir: DataDirOption = None,
) -> None:
    """
    Show which plan day falls on each weekday.
    """
    store = get_store(data_dir)
    current = _load_plan_or_exit(store)

    try:
        week_start = parse_week_start(date)
    except ValueError:
        views.print_error(f"Invalid date: {date}. Expected YYYY-MM-DD")
        raise typer.Exit(1)

    try:
        history = store.load_workout_history()
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    done = completed_day_slots(history, week_start)
    views.print_week(weekly_schedule(current, week_start), done)


@app.command("describe-day")
def describe_day(
    name: Annotated[str, typer.Argument(help="Workout day name, e.g. 'Push Day 1'")],
) -> None:
    """
    Describe the focus of a workout day.
    """
    views.console.print(f"[bold]{name}[/bold]: {get_workout_day_description(name)}")


@app.command()
def swap(
    name: Annotated[str, typer.Argument(help="Exercise name, e.g. 'Barbell Bench Press'")],
    data_dir: DataDirOption = None,
) -> None:
    """
    List swap alternatives for an exercise.
    """
    alternatives = get_swap_alternatives(name)

    # Exercises outside the table carry their alternatives in the plan
    if not alternatives:
        saved = get_store(data_dir).load_plan()
        if saved is not None:
            for day in saved.days:
                for exercise in day.exercises:
                    if exercise.name == name and exercise.alternatives:
                        alternatives = list(exercise.alternatives)
                        break
                if alternatives:
                    break

    if not alternatives:
        views.print_info(f"No alternatives known for {name}.")
        return

    views.console.print(f"[bold]{name}[/bold] alternatives:")
    for alt in alternatives:
        views.console.print(f"  • {alt}")
