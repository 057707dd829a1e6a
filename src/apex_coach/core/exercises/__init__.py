"""
Static exercise table for apex-coach.

Maps exercise names to the reasoning, swap alternatives and seed values
the planner attaches to table-backed exercises.
"""

from .base import ExerciseMetadata
from .registry import EXERCISE_TABLE, get_metadata, get_swap_alternatives

__all__ = [
    "ExerciseMetadata",
    "EXERCISE_TABLE",
    "get_metadata",
    "get_swap_alternatives",
]
