"""
Active-session set logging.

SessionLogger accumulates sets against one plan day and turns them into
a completed WorkoutSession once every exercise has reached its
prescribed number of sets.
"""

import uuid
from datetime import date, datetime

from loguru import logger

from .models import LoggedSet, WorkoutDay, WorkoutSession, clamp_rir


class IncompleteSessionError(ValueError):
    """Raised when finishing a session before all prescribed sets are logged."""

    pass


def new_session_id() -> str:
    return f"workout-{uuid.uuid4().hex[:12]}"


class SessionLogger:
    """
    Collects logged sets for one workout day.

    Sets are kept per exercise; ``finish()`` emits them exercise by
    exercise in plan order.
    """

    def __init__(self, day: WorkoutDay, session_date: str | None = None):
        """
        Start logging a session.

        Args:
            day: Plan day being trained
            session_date: ISO date of the session (default: today)
        """
        self.day = day
        self.session_date = session_date or date.today().isoformat()
        self._sets: dict[str, list[LoggedSet]] = {e.id: [] for e in day.exercises}

    def log_set(
        self,
        exercise_id: str,
        weight: float,
        reps: int,
        rir: int,
        timestamp: datetime | None = None,
    ) -> LoggedSet:
        """
        Record one set.

        Args:
            exercise_id: Exercise.id within the day
            weight: Load used (must be positive)
            reps: Reps performed (must be positive)
            rir: Reps in reserve, clamped into 0–5
            timestamp: When the set was performed (default: now)

        Returns:
            The logged set

        Raises:
            ValueError: If the exercise is not in the day or weight/reps are not positive
        """
        exercise = self.day.exercise_by_id(exercise_id)
        if exercise is None:
            raise ValueError(f"Exercise '{exercise_id}' is not part of {self.day.name}")
        if weight <= 0 or reps <= 0:
            raise ValueError("weight and reps must be positive")

        logged = LoggedSet(
            exercise_id=exercise_id,
            exercise_name=exercise.name,
            weight=float(weight),
            reps=int(reps),
            rir=clamp_rir(rir),
            timestamp=(timestamp or datetime.now()).isoformat(timespec="seconds"),
        )
        self._sets[exercise_id].append(logged)
        logger.debug(
            "Logged {} set {}/{}: {}x{} @ RIR {}",
            exercise.name,
            len(self._sets[exercise_id]),
            exercise.sets,
            logged.weight,
            logged.reps,
            logged.rir,
        )
        return logged

    def completed_sets(self, exercise_id: str) -> int:
        return len(self._sets.get(exercise_id, []))

    def is_exercise_complete(self, exercise_id: str) -> bool:
        exercise = self.day.exercise_by_id(exercise_id)
        if exercise is None:
            return False
        return self.completed_sets(exercise_id) >= exercise.sets

    def is_complete(self) -> bool:
        """True when every exercise has at least its prescribed sets."""
        return all(self.is_exercise_complete(e.id) for e in self.day.exercises)

    def remaining(self) -> dict[str, int]:
        """Sets still missing per exercise id (only exercises with a shortfall)."""
        return {
            e.id: e.sets - self.completed_sets(e.id)
            for e in self.day.exercises
            if self.completed_sets(e.id) < e.sets
        }

    def finish(self, duration_minutes: int | None = None) -> WorkoutSession:
        """
        Finalize the session.

        Raises:
            IncompleteSessionError: If any exercise is short of its prescribed sets
        """
        missing = self.remaining()
        if missing:
            detail = ", ".join(f"{ex_id} ({n} left)" for ex_id, n in missing.items())
            raise IncompleteSessionError(f"Session incomplete: {detail}")

        sets = [s for e in self.day.exercises for s in self._sets[e.id]]
        return WorkoutSession(
            id=new_session_id(),
            day_id=self.day.id,
            day_name=self.day.name,
            date=self.session_date,
            sets=sets,
            completed=True,
            duration_minutes=duration_minutes,
        )
