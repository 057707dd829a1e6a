"""
Rich console output for apex-coach.

Tables for plans, weekly schedules, history and suggestions.
"""

from datetime import date

from rich.console import Console
from rich.table import Table

from ..core.metrics import mean, rir_label
from ..core.models import (
    AISuggestion,
    Exercise,
    ExerciseProgress,
    ExerciseSwap,
    GeneratedPlan,
    VolumeChange,
    WeeklySummary,
    WeightChange,
    WorkoutDay,
    WorkoutSession,
)
from ..core.planner import get_workout_day_description

console = Console()

_TREND_MARKERS = {
    "up": "[green]↑ up[/green]",
    "down": "[red]↓ down[/red]",
    "stable": "[yellow]→ stable[/yellow]",
}


def _fmt_previous(exercise: Exercise) -> str:
    previous = exercise.previous_session
    if previous is None:
        return "-"
    return f"{previous.weight:g} × {previous.reps}"


def format_day_table(day: WorkoutDay) -> Table:
    """
    Create a Rich table for one workout day.

    Args:
        day: Day to display

    Returns:
        Rich Table object
    """
    table = Table(title=f"{day.name} [dim]({day.id})[/dim]", title_justify="left")

    table.add_column("ID", style="dim")
    table.add_column("Exercise", style="bold")
    table.add_column("Pattern", style="magenta")
    table.add_column("Muscle", style="green")
    table.add_column("Sets×Reps", justify="right")
    table.add_column("Last", justify="right", style="cyan")

    for exercise in day.exercises:
        table.add_row(
            exercise.id,
            exercise.name,
            exercise.movement_pattern,
            exercise.muscle_group,
            f"{exercise.sets}×{exercise.reps}",
            _fmt_previous(exercise),
        )

    return table


def print_plan(plan: GeneratedPlan) -> None:
    """Print split, rationale and every day of a plan."""
    console.print()
    console.print(f"[bold cyan]{plan.split}[/bold cyan]")
    console.print(f"[dim]{plan.rationale}[/dim]")
    for day in plan.days:
        console.print()
        console.print(format_day_table(day))
        console.print(f"[dim]{get_workout_day_description(day.name)}[/dim]")


def print_week(
    schedule: list[tuple[date, WorkoutDay | None]],
    completed: set[tuple[str, str]],
) -> None:
    """
    Print the weekday schedule for one week.

    A date is ticked only when a completed session was logged against the
    plan day scheduled for it.

    Args:
        schedule: (date, day) pairs as returned by weekly_schedule
        completed: (ISO date, day id) pairs that have a completed session
    """
    table = Table(title="This Week")

    table.add_column("Date", style="cyan")
    table.add_column("Day")
    table.add_column("Workout", style="bold")
    table.add_column("Sets", justify="right")
    table.add_column("Done", justify="center")

    today = date.today()
    for current, day in schedule:
        iso = current.isoformat()
        date_cell = f"[bold]{iso}[/bold]" if current == today else iso
        if day is None:
            table.add_row(date_cell, current.strftime("%a"), "[dim]Rest[/dim]", "", "")
        else:
            done = "[green]✓[/green]" if (iso, day.id) in completed else ""
            table.add_row(date_cell, current.strftime("%a"), day.name, str(day.total_sets), done)

    console.print(table)


def format_history_table(sessions: list[WorkoutSession]) -> Table:
    """Create a Rich table displaying logged sessions."""
    table = Table(title="Workout History")

    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Date", style="cyan")
    table.add_column("Workout", style="magenta")
    table.add_column("Sets", justify="right")
    table.add_column("Volume", justify="right", style="bold")
    table.add_column("Avg RIR", justify="right")
    table.add_column("Min", justify="right")

    for i, session in enumerate(sessions, 1):
        volume = sum(s.weight * s.reps for s in session.sets)
        avg_rir = mean([float(s.rir) for s in session.sets])
        table.add_row(
            str(i),
            session.date,
            session.day_name,
            str(len(session.sets)),
            f"{volume:,.0f}",
            f"{avg_rir:.1f}" if session.sets else "-",
            str(session.duration_minutes) if session.duration_minutes is not None else "-",
        )

    return table


def print_history(sessions: list[WorkoutSession]) -> None:
    """Print session history to console."""
    if not sessions:
        console.print("[yellow]No workouts logged yet.[/yellow]")
        return

    console.print(format_history_table(sessions))


def print_session_sets(session: WorkoutSession) -> None:
    """Print the sets of one session with their RIR labels."""
    for logged in session.sets:
        console.print(
            f"  {logged.exercise_name}: {logged.weight:g} × {logged.reps} "
            f"@ RIR {logged.rir} [dim]({rir_label(logged.rir)})[/dim]"
        )


def _fmt_change(suggestion: AISuggestion) -> str:
    payload = suggestion.payload
    if isinstance(payload, WeightChange):
        return f"{payload.current:g} → {payload.suggested}"
    if isinstance(payload, VolumeChange):
        return payload.change
    if isinstance(payload, ExerciseSwap):
        return f"{payload.from_exercise} → {payload.to_exercise}"
    return "-"


def print_suggestions(suggestions: list[AISuggestion], title: str = "Coaching Suggestions") -> None:
    """Print suggestions as a table followed by their reasons."""
    if not suggestions:
        console.print("[dim]No suggestions.[/dim]")
        return

    table = Table(title=title)

    table.add_column("ID", style="dim")
    table.add_column("Type", style="magenta")
    table.add_column("Exercise", style="bold")
    table.add_column("Change", style="cyan")
    table.add_column("Applied", justify="center")

    for s in suggestions:
        table.add_row(
            s.id,
            s.type,
            s.exercise_name,
            _fmt_change(s),
            "[green]✓[/green]" if s.applied else "",
        )

    console.print(table)
    for s in suggestions:
        console.print(f"  [bold]{s.exercise_name}[/bold]: {s.reason}")


def print_weekly_summary(summary: WeeklySummary) -> None:
    """Print adherence and pending suggestions for one week."""
    console.print()
    console.print(
        f"[bold]Week {summary.week_start} → {summary.week_end}[/bold]  "
        f"{summary.workouts_completed}/{summary.total_workouts} workouts"
    )
    console.print(summary.progress_summary)
    if summary.suggestions:
        console.print()
        print_suggestions(summary.suggestions, title="Pending Suggestions")


def print_progress(exercise_id: str, progress: ExerciseProgress) -> None:
    """Print the progress summary of one exercise."""
    console.print(f"[bold]{exercise_id}[/bold]")
    console.print(f"  Trend:         {_TREND_MARKERS[progress.trend]}")
    console.print(f"  Weight change: {progress.weight_change:+.1f}")
    console.print(f"  Avg RIR:       {progress.avg_rir:.1f}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{message}[/green]")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {message}[/red]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning: {message}[/yellow]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]{message}[/blue]")


def confirm_action(message: str) -> bool:
    """
    Prompt user for confirmation.

    Returns:
        True if confirmed, False otherwise
    """
    response = console.input(f"{message} [y/N]: ")
    return response.lower() in ("y", "yes")
