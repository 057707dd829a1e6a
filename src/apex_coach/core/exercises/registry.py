"""
Exercise metadata registry.

The table is loaded from YAML once at import time.  If it cannot be
loaded a RuntimeError is raised; the planner cannot run without it.
"""

from .base import ExerciseMetadata


def _build_registry() -> dict[str, ExerciseMetadata]:
    from .loader import load_exercise_table

    loaded = load_exercise_table()
    if not loaded:
        raise RuntimeError(
            "apex-coach: the exercise table could not be loaded. "
            "Check that src/apex_coach/exercises.yaml is present and valid."
        )
    return loaded


EXERCISE_TABLE: dict[str, ExerciseMetadata] = _build_registry()


def get_metadata(exercise_name: str) -> ExerciseMetadata | None:
    """Return the table entry for an exercise name, or None if absent."""
    return EXERCISE_TABLE.get(exercise_name)


def get_swap_alternatives(exercise_name: str) -> list[str]:
    """
    Return swap alternatives for an exercise.

    Args:
        exercise_name: Display name, e.g. "Lat Pulldown"

    Returns:
        Ordered alternatives; empty list if the exercise is not in the table
    """
    metadata = EXERCISE_TABLE.get(exercise_name)
    return list(metadata.alternatives) if metadata is not None else []
