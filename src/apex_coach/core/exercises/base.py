"""
Base types for the static exercise table.

ExerciseMetadata is the read-only record the planner consults when it
places a table-backed exercise into a workout day.
"""

from dataclasses import dataclass, field

from ..models import PreviousSession


@dataclass(frozen=True)
class ExerciseMetadata:
    """Reasoning, swap alternatives and seed values for one exercise."""

    name: str
    reasoning: str
    alternatives: tuple[str, ...] = field(default_factory=tuple)
    previous_weight: float | None = None
    previous_reps: int | None = None

    def previous_session(self) -> PreviousSession | None:
        """Seed previous-session snapshot, or None if the table has none."""
        if self.previous_weight is None or self.previous_reps is None:
            return None
        return PreviousSession(weight=self.previous_weight, reps=self.previous_reps)
