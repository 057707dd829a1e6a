"""
Data models for apex-coach.

All core dataclasses representing the user profile, generated plans,
logged workouts and coaching suggestions.  Enumerated values are plain
strings (the labels shown to the user) typed with Literal aliases;
validation happens in ``__post_init__``.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar, Literal, Union

from .config import RIR_MAX, RIR_MIN

Goal = Literal["Gain Muscle", "Lose Weight", "Strength", "Endurance"]
ExperienceLevel = Literal["Beginner", "Intermediate", "Advanced"]
MetabolismType = Literal["Fast", "Normal", "Slow"]
SplitPreference = Literal[
    "AI Decide", "Push/Pull/Legs", "Upper/Lower", "Arnold Split", "Full Body"
]
Split = Literal["Push/Pull/Legs", "Upper/Lower", "Arnold Split", "Full Body"]
FocusArea = Literal["Chest", "Arms", "Glutes", "Mobility/Health"]
Trend = Literal["up", "down", "stable"]
SuggestionType = Literal["weight", "volume", "swap"]

GOALS: tuple[str, ...] = ("Gain Muscle", "Lose Weight", "Strength", "Endurance")
EXPERIENCE_LEVELS: tuple[str, ...] = ("Beginner", "Intermediate", "Advanced")
METABOLISM_TYPES: tuple[str, ...] = ("Fast", "Normal", "Slow")
SPLITS: tuple[str, ...] = ("Push/Pull/Legs", "Upper/Lower", "Arnold Split", "Full Body")
SPLIT_PREFERENCES: tuple[str, ...] = ("AI Decide",) + SPLITS
FOCUS_AREAS: tuple[str, ...] = ("Chest", "Arms", "Glutes", "Mobility/Health")


def clamp_rir(rir: int) -> int:
    """Clamp a reps-in-reserve value into the supported 0–5 range."""
    return max(RIR_MIN, min(RIR_MAX, int(rir)))


def _validate_date(date_str: str) -> None:
    """Validate date string is ISO format YYYY-MM-DD."""
    if not re.match(r"^\d{4}-\d{2}-\d{2}$", date_str):
        raise ValueError(f"Invalid date format: {date_str}. Expected YYYY-MM-DD")
    try:
        datetime.strptime(date_str, "%Y-%m-%d")
    except ValueError as e:
        raise ValueError(f"Invalid date: {date_str}") from e


@dataclass(frozen=True)
class UserProfile:
    """
    Training profile captured at onboarding.

    Immutable once submitted; a changed profile means a new profile and a
    regenerated plan.
    """

    goal: Goal
    experience_level: ExperienceLevel
    metabolism_type: MetabolismType
    days_per_week: int
    split_preference: SplitPreference = "AI Decide"
    focus_areas: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Validate profile data."""
        if self.goal not in GOALS:
            raise ValueError(f"Invalid goal: {self.goal!r}. Must be one of {GOALS}")
        if self.experience_level not in EXPERIENCE_LEVELS:
            raise ValueError(
                f"Invalid experience_level: {self.experience_level!r}. "
                f"Must be one of {EXPERIENCE_LEVELS}"
            )
        if self.metabolism_type not in METABOLISM_TYPES:
            raise ValueError(
                f"Invalid metabolism_type: {self.metabolism_type!r}. "
                f"Must be one of {METABOLISM_TYPES}"
            )
        if not 1 <= self.days_per_week <= 7:
            raise ValueError(f"days_per_week must be between 1 and 7, got {self.days_per_week}")
        if self.split_preference not in SPLIT_PREFERENCES:
            raise ValueError(
                f"Invalid split_preference: {self.split_preference!r}. "
                f"Must be one of {SPLIT_PREFERENCES}"
            )
        # Accept any iterable of areas but always store a frozenset
        object.__setattr__(self, "focus_areas", frozenset(self.focus_areas))
        for area in self.focus_areas:
            if area not in FOCUS_AREAS:
                raise ValueError(f"Invalid focus area: {area!r}. Must be one of {FOCUS_AREAS}")

    def has_focus(self, area: str) -> bool:
        """Return True if the given focus area was selected."""
        return area in self.focus_areas


@dataclass
class PreviousSession:
    """Weight and reps from the last time an exercise was performed."""

    weight: float
    reps: int


@dataclass
class Exercise:
    """
    One prescribed exercise within a workout day.

    ``alternatives`` lists biomechanically equivalent exercises that can be
    swapped in while keeping the same movement pattern.
    """

    id: str
    name: str
    movement_pattern: str  # e.g. "Vertical Pull", "Warmup"
    muscle_group: str
    sets: int
    reps: int
    reasoning: str
    alternatives: list[str] = field(default_factory=list)
    previous_session: PreviousSession | None = None

    def __post_init__(self) -> None:
        if self.sets <= 0:
            raise ValueError("sets must be positive")
        if self.reps <= 0:
            raise ValueError("reps must be positive")


@dataclass
class WorkoutDay:
    """A single training day: an ordered list of exercises."""

    id: str
    name: str
    exercises: list[Exercise] = field(default_factory=list)

    def exercise_by_id(self, exercise_id: str) -> Exercise | None:
        """Look up an exercise by id; None if it is no longer in the day."""
        for exercise in self.exercises:
            if exercise.id == exercise_id:
                return exercise
        return None

    @property
    def total_sets(self) -> int:
        """Sum of prescribed sets across all exercises."""
        return sum(e.sets for e in self.exercises)


@dataclass
class GeneratedPlan:
    """A complete weekly plan produced from a UserProfile."""

    split: str
    days: list[WorkoutDay]
    rationale: str

    def day_by_id(self, day_id: str) -> WorkoutDay | None:
        """Look up a day by id; None if absent."""
        for day in self.days:
            if day.id == day_id:
                return day
        return None


@dataclass
class LoggedSet:
    """
    A single set performed during a session.

    ``exercise_id`` is a non-owning reference to Exercise.id in the plan day
    the set was logged against; the exercise may since have disappeared.
    """

    exercise_id: str
    exercise_name: str
    weight: float
    reps: int
    rir: int
    timestamp: str  # ISO-8601 datetime

    def __post_init__(self) -> None:
        """Validate set data and clamp RIR."""
        if self.weight < 0:
            raise ValueError("weight must be non-negative")
        if self.reps < 0:
            raise ValueError("reps must be non-negative")
        self.rir = clamp_rir(self.rir)


@dataclass
class WorkoutSession:
    """
    A logged workout against one plan day.

    ``day_id`` is a weak reference to WorkoutDay.id; ``day_name`` is a
    snapshot taken at logging time.
    """

    id: str
    day_id: str
    day_name: str
    date: str  # ISO format: YYYY-MM-DD
    sets: list[LoggedSet] = field(default_factory=list)
    completed: bool = False
    duration_minutes: int | None = None

    def __post_init__(self) -> None:
        _validate_date(self.date)
        if self.duration_minutes is not None and self.duration_minutes < 0:
            raise ValueError("duration_minutes must be non-negative")

    def sets_for(self, exercise_id: str) -> list[LoggedSet]:
        """Sets logged for one exercise, in logging order."""
        return [s for s in self.sets if s.exercise_id == exercise_id]


# ---------------------------------------------------------------------------
# Suggestions: a tagged union of three payload shapes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class WeightChange:
    """Increase the working weight of an exercise."""

    kind: ClassVar[SuggestionType] = "weight"

    current: float
    suggested: int


@dataclass(frozen=True)
class VolumeChange:
    """Add or remove sets, e.g. ``"+1 set"`` or ``"-1 set"``."""

    kind: ClassVar[SuggestionType] = "volume"

    change: str


@dataclass(frozen=True)
class ExerciseSwap:
    """Replace one exercise with an alternative."""

    kind: ClassVar[SuggestionType] = "swap"

    from_exercise: str
    to_exercise: str


SuggestionPayload = Union[WeightChange, VolumeChange, ExerciseSwap]


@dataclass
class AISuggestion:
    """
    A coaching recommendation produced by the analyzer.

    ``applied`` is the only field that changes after creation.
    """

    id: str
    exercise_id: str
    exercise_name: str
    payload: SuggestionPayload
    reason: str
    timestamp: str  # ISO-8601 datetime
    applied: bool = False

    @property
    def type(self) -> SuggestionType:
        return self.payload.kind


@dataclass(frozen=True)
class ExerciseProgress:
    """Recent-vs-older progress summary for one exercise."""

    trend: Trend
    avg_rir: float
    weight_change: float


@dataclass
class WeeklySummary:
    """Adherence summary for one calendar week."""

    week_start: str
    week_end: str
    workouts_completed: int
    total_workouts: int
    suggestions: list[AISuggestion]
    progress_summary: str
