"""
History queries and small statistics helpers.

Pure functions over lists of WorkoutSession.  History is always taken in
stored (insertion) order, so "the last N sets" is a suffix of that order.
"""

import math
from datetime import date, datetime, timedelta

from .config import FAILURE_RIR, OPTIMAL_RIR_MAX, WEEK_LENGTH_DAYS
from .models import LoggedSet, WorkoutSession


def completed_sessions(history: list[WorkoutSession]) -> list[WorkoutSession]:
    """Sessions that were finalized, in stored order."""
    return [s for s in history if s.completed]


def exercise_sets(
    history: list[WorkoutSession],
    exercise_id: str,
    exclude_session_id: str | None = None,
) -> list[LoggedSet]:
    """
    All logged sets for an exercise across completed sessions.

    Args:
        history: Stored workout history
        exercise_id: Exercise.id to collect
        exclude_session_id: Optionally leave out one session (the one being analysed)

    Returns:
        Sets in chronological (stored) order
    """
    return [
        logged
        for session in completed_sessions(history)
        if session.id != exclude_session_id
        for logged in session.sets
        if logged.exercise_id == exercise_id
    ]


def session_date(session: WorkoutSession) -> date:
    return datetime.strptime(session.date, "%Y-%m-%d").date()


def week_window(week_start: date) -> tuple[date, date]:
    """Inclusive (first, last) dates of the 7-day window starting at week_start."""
    return week_start, week_start + timedelta(days=WEEK_LENGTH_DAYS - 1)


def sessions_in_week(history: list[WorkoutSession], week_start: date) -> list[WorkoutSession]:
    """Completed sessions dated inside the week window."""
    first, last = week_window(week_start)
    return [s for s in completed_sessions(history) if first <= session_date(s) <= last]


def completed_day_slots(history: list[WorkoutSession], week_start: date) -> set[tuple[str, str]]:
    """(date, day_id) pairs of the week that have a completed session."""
    return {(s.date, s.day_id) for s in sessions_in_week(history, week_start)}


def mean(values: list[float]) -> float:
    """Arithmetic mean; 0.0 for an empty list."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def count_rir_at_most(sets: list[LoggedSet], rir: int) -> int:
    return sum(1 for s in sets if s.rir <= rir)


def count_rir_equal(sets: list[LoggedSet], rir: int) -> int:
    return sum(1 for s in sets if s.rir == rir)


def rir_zone(rir: int) -> str:
    """
    Classify an RIR value.

    Returns:
        "failure" for 0, "optimal" for 1–2, "easy" for 3 and above
    """
    if rir == FAILURE_RIR:
        return "failure"
    if rir <= OPTIMAL_RIR_MAX:
        return "optimal"
    return "easy"


_RIR_LABELS: dict[str, str] = {
    "failure": "Failure / Empty Tank",
    "optimal": "Optimal Stimulus",
    "easy": "Warmup / Too Easy",
}


def rir_label(rir: int) -> str:
    """Human-readable label for an RIR value."""
    return _RIR_LABELS[rir_zone(rir)]
