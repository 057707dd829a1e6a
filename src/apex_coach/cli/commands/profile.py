"""Profile command: init."""

from typing import Annotated, Optional

import typer
from loguru import logger

from ...core.models import UserProfile
from ...core.planner import generate_plan
from .. import views
from ..app import DataDirOption, app, get_store


@app.command()
def init(
    goal: Annotated[
        str,
        typer.Option("--goal", "-g", help="Gain Muscle | Lose Weight | Strength | Endurance"),
    ] = "Gain Muscle",
    experience: Annotated[
        str,
        typer.Option("--experience", "-e", help="Beginner | Intermediate | Advanced"),
    ] = "Intermediate",
    metabolism: Annotated[
        str,
        typer.Option("--metabolism", "-m", help="Fast | Normal | Slow"),
    ] = "Normal",
    days_per_week: Annotated[
        int,
        typer.Option("--days-per-week", "-d", help="Training days per week (1-7)"),
    ] = 4,
    split: Annotated[
        str,
        typer.Option(
            "--split",
            "-s",
            help="AI Decide | Push/Pull/Legs | Upper/Lower | Arnold Split | Full Body",
        ),
    ] = "AI Decide",
    focus: Annotated[
        Optional[list[str]],
        typer.Option("--focus", "-f", help="Focus area (repeatable): Chest | Arms | Glutes | Mobility/Health"),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing profile and plan"),
    ] = False,
    data_dir: DataDirOption = None,
) -> None:
    """
    Create a profile and generate the first plan.

      apex-coach init --goal "Gain Muscle" --experience Intermediate \\
        --days-per-week 6 --focus Chest --focus Mobility/Health
    """
    store = get_store(data_dir)

    if store.exists() and not force:
        views.print_warning(f"Profile already exists in {store.data_dir}")
        views.print_info("Use --force to overwrite it and regenerate the plan.")
        raise typer.Exit(1)

    try:
        profile = UserProfile(
            goal=goal,  # type: ignore
            experience_level=experience,  # type: ignore
            metabolism_type=metabolism,  # type: ignore
            days_per_week=days_per_week,
            split_preference=split,  # type: ignore
            focus_areas=frozenset(focus or []),
        )
    except ValueError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    store.init()
    store.save_profile(profile)
    plan = generate_plan(profile)
    store.save_plan(plan)
    logger.debug("Initialized data directory {}", store.data_dir)

    views.print_success(f"Profile saved to {store.data_dir}")
    views.print_plan(plan)
