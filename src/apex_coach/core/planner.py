"""
Plan generation for apex-coach.

Generates a deterministic weekly plan from a UserProfile.  The split is
resolved from the user's preference (or from training days when the
user lets the app decide), then every day template of that split is
expanded into concrete exercises: gated slots are kept only when their
focus area was selected and a mobility warmup is prepended when
Mobility/Health is a focus.
"""

from datetime import date, datetime, timedelta

from loguru import logger

from .config import (
    DEFAULT_WEEKDAY_SCHEDULE,
    PPL_MIN_DAYS,
    UPPER_LOWER_MIN_DAYS,
    WARMUP_REPS,
    WARMUP_SETS,
    WEEK_LENGTH_DAYS,
    WEEKDAY_SCHEDULES,
)
from .exercises.registry import get_metadata
from .models import (
    Exercise,
    GeneratedPlan,
    PreviousSession,
    Split,
    UserProfile,
    WorkoutDay,
    WorkoutSession,
)
from .templates import (
    DAY_DESCRIPTIONS,
    DEFAULT_DAY_DESCRIPTION,
    SPLIT_TEMPLATES,
    DayTemplate,
    ExerciseSlot,
    WarmupSlot,
)

MOBILITY_FOCUS = "Mobility/Health"


def resolve_split(profile: UserProfile) -> Split:
    """
    Choose the split for a profile.

    An explicit preference is used verbatim.  "AI Decide" thresholds on
    training days: 6+ → Push/Pull/Legs, 4–5 → Upper/Lower, fewer →
    Full Body.  Arnold Split is only reachable as an explicit choice.

    Args:
        profile: Validated user profile

    Returns:
        Split label
    """
    if profile.split_preference != "AI Decide":
        return profile.split_preference  # type: ignore[return-value]
    if profile.days_per_week >= PPL_MIN_DAYS:
        return "Push/Pull/Legs"
    if profile.days_per_week >= UPPER_LOWER_MIN_DAYS:
        return "Upper/Lower"
    return "Full Body"


def _warmup_exercise(slot: WarmupSlot) -> Exercise:
    return Exercise(
        id=slot.id,
        name=slot.name,
        movement_pattern=slot.movement_pattern,
        muscle_group=slot.muscle_group,
        sets=WARMUP_SETS,
        reps=WARMUP_REPS,
        reasoning=slot.reasoning,
        alternatives=[],
    )


def _slot_exercise(slot: ExerciseSlot) -> Exercise:
    """Expand a slot, taking metadata from the table or from the slot itself."""
    metadata = get_metadata(slot.name)
    if metadata is not None:
        reasoning = metadata.reasoning
        alternatives = list(metadata.alternatives)
        previous = metadata.previous_session()
    elif slot.inline is not None:
        reasoning = slot.inline.reasoning
        alternatives = list(slot.inline.alternatives)
        previous = (
            PreviousSession(weight=slot.inline.previous_weight, reps=slot.inline.previous_reps)
            if slot.inline.previous_weight is not None and slot.inline.previous_reps is not None
            else None
        )
    else:
        reasoning, alternatives, previous = "", [], None

    return Exercise(
        id=slot.id,
        name=slot.name,
        movement_pattern=slot.movement_pattern,
        muscle_group=slot.muscle_group,
        sets=slot.sets,
        reps=slot.reps,
        reasoning=reasoning,
        alternatives=alternatives,
        previous_session=previous,
    )


def build_day(template: DayTemplate, profile: UserProfile) -> WorkoutDay:
    """
    Expand a day template for a profile.

    Args:
        template: Day template from SPLIT_TEMPLATES
        profile: User profile (focus areas drive gated slots and warmup)

    Returns:
        WorkoutDay with exercises in slot order
    """
    exercises: list[Exercise] = []
    if profile.has_focus(MOBILITY_FOCUS):
        exercises.append(_warmup_exercise(template.warmup))
    for slot in template.slots:
        if slot.focus is not None and not profile.has_focus(slot.focus):
            continue
        exercises.append(_slot_exercise(slot))
    return WorkoutDay(id=template.id, name=template.name, exercises=exercises)


def build_rationale(split: str, profile: UserProfile) -> str:
    """Assemble the display-only explanation of the generated plan."""
    rationale = f"Generated a {split} split optimized for {profile.goal.lower()}. "
    if profile.metabolism_type == "Fast":
        rationale += "Higher volume programming to match your fast metabolism. "
    if profile.has_focus(MOBILITY_FOCUS):
        rationale += "Dynamic warmups included for mobility and injury prevention. "
    if profile.experience_level == "Beginner":
        rationale += "Progressive overload structure suitable for beginners."
    else:
        rationale += "Advanced periodization with varied rep ranges and optimal exercise selection."
    return rationale


def generate_plan(profile: UserProfile) -> GeneratedPlan:
    """
    Generate a weekly plan for a profile.

    Pure function of the profile and the static exercise table: the same
    profile always yields an identical plan.

    Args:
        profile: Validated user profile

    Returns:
        GeneratedPlan with split label, ordered days and rationale
    """
    split = resolve_split(profile)
    days = [build_day(t, profile) for t in SPLIT_TEMPLATES[split]]
    logger.debug(
        "Generated {} plan: {} days, {} exercises",
        split,
        len(days),
        sum(len(d.exercises) for d in days),
    )
    return GeneratedPlan(split=split, days=days, rationale=build_rationale(split, profile))


def get_workout_day_description(day_name: str) -> str:
    """
    Describe a workout day by name.

    Exact match first, then the longest description key the name starts
    with (so "Push Day 2" finds "Push Day"), then a generic sentence.
    """
    if day_name in DAY_DESCRIPTIONS:
        return DAY_DESCRIPTIONS[day_name]
    matches = [key for key in DAY_DESCRIPTIONS if day_name.startswith(key)]
    if matches:
        return DAY_DESCRIPTIONS[max(matches, key=len)]
    return DEFAULT_DAY_DESCRIPTION


def week_start_for(day: date) -> date:
    """Return the Monday of the week containing ``day``."""
    return day - timedelta(days=day.weekday())


def weekly_schedule(
    plan: GeneratedPlan,
    week_start: date,
) -> list[tuple[date, WorkoutDay | None]]:
    """
    Lay plan days onto the calendar week starting at ``week_start``.

    Plan days rotate over a fixed weekday schedule chosen by the number of
    plan days (3 → Mon/Wed/Fri, 4 → Mon/Wed/Fri/Sun, 5 → Mon/Tue/Thu/Fri/Sun,
    6 → Mon–Sat, anything else → Mon/Wed/Fri).

    Returns:
        Seven (date, day) pairs; day is None on rest days
    """
    schedule = WEEKDAY_SCHEDULES.get(len(plan.days), DEFAULT_WEEKDAY_SCHEDULE)
    week: list[tuple[date, WorkoutDay | None]] = []
    for offset in range(WEEK_LENGTH_DAYS):
        current = week_start + timedelta(days=offset)
        weekday = current.weekday()
        if plan.days and weekday in schedule:
            index = schedule.index(weekday) % len(plan.days)
            week.append((current, plan.days[index]))
        else:
            week.append((current, None))
    return week


def refresh_previous_sessions(
    day: WorkoutDay,
    history: list[WorkoutSession],
) -> WorkoutDay:
    """
    Return a copy of ``day`` with previous-session values from history.

    For each exercise the most recent session (by stored order) that logged
    it supplies its first logged set as the new previous-session snapshot.
    Exercises never logged keep their seed values.
    """
    exercises: list[Exercise] = []
    for exercise in day.exercises:
        previous = exercise.previous_session
        for session in reversed(history):
            logged = session.sets_for(exercise.id)
            if logged:
                previous = PreviousSession(weight=logged[0].weight, reps=logged[0].reps)
                break
        exercises.append(
            Exercise(
                id=exercise.id,
                name=exercise.name,
                movement_pattern=exercise.movement_pattern,
                muscle_group=exercise.muscle_group,
                sets=exercise.sets,
                reps=exercise.reps,
                reasoning=exercise.reasoning,
                alternatives=list(exercise.alternatives),
                previous_session=previous,
            )
        )
    return WorkoutDay(id=day.id, name=day.name, exercises=exercises)


def parse_week_start(value: str | None) -> date:
    """Parse a YYYY-MM-DD string (default today) and snap it to Monday."""
    day = datetime.strptime(value, "%Y-%m-%d").date() if value else date.today()
    return week_start_for(day)
