"""
Coaching rules: post-workout feedback, weekly review, exercise progress.

Every entry point reads history from an explicitly passed store and
returns suggestions rather than writing them; the caller decides what to
persist.  Missing or insufficient data never raises; it simply yields
no suggestions (or the default progress summary).
"""

from __future__ import annotations

import uuid
from datetime import date, datetime
from typing import TYPE_CHECKING

from loguru import logger

from .config import (
    DEFAULT_PROGRESS_RIR,
    EASY_RIR_MIN,
    FAILURE_RIR,
    FAILURE_STREAK_MIN,
    HISTORY_WINDOW_SETS,
    LOW_RIR_STREAK_MIN,
    MIN_HISTORY_POINTS,
    OPTIMAL_RIR_MAX,
    PROGRESS_MIN_SETS,
    PROGRESS_WINDOW,
    STAGNATION_GROWTH,
    STAGNATION_MIN_SETS,
    STAGNATION_WINDOW,
    TREND_THRESHOLD,
    VOLUME_DOWN,
    VOLUME_UP,
    WEEKLY_EASY_RIR,
    WEEKLY_MIN_SETS,
    WEIGHT_PROGRESSION_FACTOR,
)
from .metrics import (
    count_rir_at_most,
    count_rir_equal,
    exercise_sets,
    mean,
    round_half_up,
    sessions_in_week,
    week_window,
)
from .models import (
    AISuggestion,
    ExerciseProgress,
    ExerciseSwap,
    GeneratedPlan,
    SuggestionPayload,
    Trend,
    VolumeChange,
    WeeklySummary,
    WeightChange,
    WorkoutDay,
    WorkoutSession,
)

if TYPE_CHECKING:
    from ..io.store import Storage


def new_suggestion_id(prefix: str, exercise_id: str) -> str:
    """Unique id per emission, even for several suggestions in one instant."""
    return f"{prefix}-{exercise_id}-{uuid.uuid4().hex[:12]}"


def _suggestion(
    prefix: str,
    exercise_id: str,
    exercise_name: str,
    payload: SuggestionPayload,
    reason: str,
    now: datetime,
) -> AISuggestion:
    suggestion = AISuggestion(
        id=new_suggestion_id(prefix, exercise_id),
        exercise_id=exercise_id,
        exercise_name=exercise_name,
        payload=payload,
        reason=reason,
        timestamp=now.isoformat(timespec="seconds"),
    )
    logger.debug("Suggestion {} for {}: {}", suggestion.type, exercise_name, payload)
    return suggestion


def analyze_workout(
    session: WorkoutSession,
    plan_day: WorkoutDay,
    store: Storage,
    now: datetime | None = None,
) -> list[AISuggestion]:
    """
    Immediate feedback for a just-finished session.

    For every logged set whose exercise is still in ``plan_day``, the last
    three historical sets of that exercise (completed sessions, stored
    order, excluding ``session`` itself) are compared with the new set:

    - weight: ≥2 history sets at RIR ≤2 and the new set at RIR ≤2
      → suggest weight × 1.05 rounded half-up
    - volume up: new set at RIR ≥4 → "+1 set"
    - volume down: new set at RIR 0 and ≥2 history sets at RIR 0 → "-1 set"

    The rules are independent, so one set can trigger several of them.
    Exercises with fewer than two historical sets are skipped entirely.

    Args:
        session: The session being analysed
        plan_day: Plan day the session was logged against
        store: Storage collaborator supplying workout history
        now: Timestamp for emitted suggestions (default: current time)

    Returns:
        Suggestions in logged-set order
    """
    now = now or datetime.now()
    history = store.load_workout_history()
    suggestions: list[AISuggestion] = []

    for logged in session.sets:
        exercise = plan_day.exercise_by_id(logged.exercise_id)
        if exercise is None:
            continue

        recent = exercise_sets(history, logged.exercise_id, exclude_session_id=session.id)
        recent = recent[-HISTORY_WINDOW_SETS:]
        if len(recent) < MIN_HISTORY_POINTS:
            logger.debug(
                "Skipping {}: only {} historical sets", logged.exercise_name, len(recent)
            )
            continue

        if (
            count_rir_at_most(recent, OPTIMAL_RIR_MAX) >= LOW_RIR_STREAK_MIN
            and logged.rir <= OPTIMAL_RIR_MAX
        ):
            suggested = round_half_up(logged.weight * WEIGHT_PROGRESSION_FACTOR)
            suggestions.append(
                _suggestion(
                    "weight",
                    logged.exercise_id,
                    logged.exercise_name,
                    WeightChange(current=logged.weight, suggested=suggested),
                    f"You've consistently hit {logged.rir} RIR on {logged.exercise_name}. "
                    f"Increase weight to {suggested}lbs to maintain progressive overload.",
                    now,
                )
            )

        if logged.rir >= EASY_RIR_MIN:
            suggestions.append(
                _suggestion(
                    "volume",
                    logged.exercise_id,
                    logged.exercise_name,
                    VolumeChange(change=VOLUME_UP),
                    f"Your RIR of {logged.rir} indicates {logged.exercise_name} is too easy. "
                    "Add 1 set to increase volume and stimulus.",
                    now,
                )
            )

        if (
            logged.rir == FAILURE_RIR
            and count_rir_equal(recent, FAILURE_RIR) >= FAILURE_STREAK_MIN
        ):
            suggestions.append(
                _suggestion(
                    "volume-reduce",
                    logged.exercise_id,
                    logged.exercise_name,
                    VolumeChange(change=VOLUME_DOWN),
                    f"You're hitting failure consistently on {logged.exercise_name}. "
                    "Reduce volume by 1 set to allow better recovery and form.",
                    now,
                )
            )

    return suggestions


def generate_weekly_review(
    week_start: date,
    plan: GeneratedPlan,
    store: Storage,
    now: datetime | None = None,
) -> list[AISuggestion]:
    """
    Aggregate review of one week of training.

    The window is the inclusive seven days starting at ``week_start``.
    For every plan exercise (plan order) with sets logged that week:

    - stagnation: with ≥8 all-time sets, if the mean weight of the last 4
      is within 2% of the 4 before it and the exercise has alternatives,
      suggest swapping to the first alternative
    - volume: weekly mean RIR above 3 over at least 3 sets → "+1 set"

    Args:
        week_start: First day of the window
        plan: Plan whose exercises are reviewed
        store: Storage collaborator supplying workout history
        now: Timestamp for emitted suggestions (default: current time)

    Returns:
        Suggestions in plan traversal order
    """
    now = now or datetime.now()
    history = store.load_workout_history()
    week_sessions = sessions_in_week(history, week_start)
    suggestions: list[AISuggestion] = []

    for day in plan.days:
        for exercise in day.exercises:
            week_sets = [
                s for session in week_sessions for s in session.sets if s.exercise_id == exercise.id
            ]
            if not week_sets:
                continue

            avg_rir = mean([s.rir for s in week_sets])

            all_sets = exercise_sets(history, exercise.id)
            if len(all_sets) >= STAGNATION_MIN_SETS:
                recent_avg = mean([s.weight for s in all_sets[-STAGNATION_WINDOW:]])
                older_avg = mean(
                    [s.weight for s in all_sets[-2 * STAGNATION_WINDOW : -STAGNATION_WINDOW]]
                )
                if recent_avg <= older_avg * STAGNATION_GROWTH and exercise.alternatives:
                    target = exercise.alternatives[0]
                    suggestions.append(
                        _suggestion(
                            "swap",
                            exercise.id,
                            exercise.name,
                            ExerciseSwap(from_exercise=exercise.name, to_exercise=target),
                            f"{exercise.name} shows no progress over the last 4 weeks. "
                            f"Consider swapping to {target} for a new stimulus while "
                            f"maintaining the {exercise.movement_pattern} pattern.",
                            now,
                        )
                    )

            if avg_rir > WEEKLY_EASY_RIR and len(week_sets) >= WEEKLY_MIN_SETS:
                suggestions.append(
                    _suggestion(
                        "volume-weekly",
                        exercise.id,
                        exercise.name,
                        VolumeChange(change=VOLUME_UP),
                        f"Weekly average RIR of {avg_rir:.1f} indicates {exercise.name} "
                        "is too easy. Increase volume by adding 1 set per session.",
                        now,
                    )
                )

    return suggestions


def get_exercise_progress(exercise_id: str, store: Storage) -> ExerciseProgress:
    """
    Summarise weight progress for one exercise.

    Compares the mean weight of the last 4 logged sets with the up-to-4
    sets before them.  With fewer than 4 sets in total the default
    (stable, RIR 2, no change) is returned.
    """
    history = exercise_sets(store.load_workout_history(), exercise_id)
    if len(history) < PROGRESS_MIN_SETS:
        return ExerciseProgress(trend="stable", avg_rir=DEFAULT_PROGRESS_RIR, weight_change=0.0)

    recent = history[-PROGRESS_WINDOW:]
    older = history[-2 * PROGRESS_WINDOW : -PROGRESS_WINDOW]

    recent_avg = mean([s.weight for s in recent])
    older_avg = mean([s.weight for s in older]) if older else recent_avg
    weight_change = recent_avg - older_avg

    trend: Trend = "stable"
    if weight_change > TREND_THRESHOLD:
        trend = "up"
    elif weight_change < -TREND_THRESHOLD:
        trend = "down"

    return ExerciseProgress(
        trend=trend,
        avg_rir=mean([float(s.rir) for s in recent]),
        weight_change=weight_change,
    )


def _progress_sentence(completed: int, total: int) -> str:
    if completed == 0:
        return "No workouts completed this week. Let's get started!"
    if completed < total * 0.5:
        return f"You completed {completed} of {total} workouts. Consider increasing consistency."
    if completed < total:
        return f"Great progress! You completed {completed} of {total} workouts."
    return f"Excellent! You completed all {completed} workouts this week."


def weekly_summary(week_start: date, store: Storage) -> WeeklySummary:
    """
    Adherence summary for the week starting at ``week_start``.

    Counts completed sessions in the window against the number of plan
    days, and gathers stored suggestions from that window that have not
    been applied yet.
    """
    first, last = week_window(week_start)
    completed = len(sessions_in_week(store.load_workout_history(), week_start))
    plan = store.load_plan()
    total = len(plan.days) if plan is not None else 0

    pending = [
        s
        for s in store.load_suggestions()
        if not s.applied and first <= datetime.fromisoformat(s.timestamp).date() <= last
    ]

    return WeeklySummary(
        week_start=first.isoformat(),
        week_end=last.isoformat(),
        workouts_completed=completed,
        total_workouts=total,
        suggestions=pending,
        progress_summary=_progress_sentence(completed, total),
    )
