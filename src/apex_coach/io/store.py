"""
Storage for profile, plan, workout history and suggestions.

The coaching core never touches a global store: every operation that
needs history receives a ``Storage`` object.  Two implementations are
provided: ``JsonStore`` (files in a data directory) and ``MemoryStore``
(in-process, used by tests and library callers).
"""

import json
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Protocol

from loguru import logger

from ..core.config import DATA_DIR_ENV, DEFAULT_DATA_DIR_NAME
from ..core.models import AISuggestion, GeneratedPlan, UserProfile, WorkoutSession
from .serializers import (
    ValidationError,
    dict_to_plan,
    dict_to_suggestion,
    dict_to_user_profile,
    json_line_to_session,
    plan_to_dict,
    session_to_json_line,
    suggestion_to_dict,
    user_profile_to_dict,
)


class Storage(Protocol):
    """Key-value storage contract consumed by the coaching core."""

    def load_plan(self) -> GeneratedPlan | None: ...

    def save_plan(self, plan: GeneratedPlan) -> None: ...

    def load_profile(self) -> UserProfile | None: ...

    def save_profile(self, profile: UserProfile) -> None: ...

    def load_workout_history(self) -> list[WorkoutSession]: ...

    def append_workout(self, session: WorkoutSession) -> None: ...

    def load_suggestions(self) -> list[AISuggestion]: ...

    def append_suggestion(self, suggestion: AISuggestion) -> None: ...

    def mark_suggestion_applied(self, suggestion_id: str) -> bool: ...


class _HistoryQueries(ABC):
    """Read helpers shared by both store implementations."""

    @abstractmethod
    def load_workout_history(self) -> list[WorkoutSession]:
        """All logged sessions in insertion order."""
        raise NotImplementedError

    def workouts_for_day(self, day_id: str) -> list[WorkoutSession]:
        """All sessions logged against a plan day, in stored order."""
        return [w for w in self.load_workout_history() if w.day_id == day_id]

    def last_workout_for_exercise(self, exercise_id: str) -> WorkoutSession | None:
        """Most recent session containing a set for the exercise, or None."""
        for workout in reversed(self.load_workout_history()):
            if workout.sets_for(exercise_id):
                return workout
        return None


class JsonStore(_HistoryQueries):
    """
    Stores apex-coach data as files in one directory.

    - profile.json      user profile
    - plan.json         current generated plan (replaced on regeneration)
    - workouts.jsonl    one session per line, append-only
    - suggestions.json  list of suggestions
    """

    def __init__(self, data_dir: str | Path):
        """
        Initialize the store.

        Args:
            data_dir: Directory holding the data files
        """
        self.data_dir = Path(data_dir)
        self.profile_path = self.data_dir / "profile.json"
        self.plan_path = self.data_dir / "plan.json"
        self.workouts_path = self.data_dir / "workouts.jsonl"
        self.suggestions_path = self.data_dir / "suggestions.json"

    def exists(self) -> bool:
        """Check if a profile has been saved."""
        return self.profile_path.exists()

    def init(self) -> None:
        """Create the data directory and an empty history file if missing."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        if not self.workouts_path.exists():
            self.workouts_path.touch()

    def _read_json(self, path: Path):
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _write_json(self, path: Path, data) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def load_profile(self) -> UserProfile | None:
        """
        Load user profile from profile.json.

        Returns:
            UserProfile if file exists and is valid, None otherwise
        """
        if not self.profile_path.exists():
            return None
        try:
            return dict_to_user_profile(self._read_json(self.profile_path))
        except (json.JSONDecodeError, ValidationError, TypeError, KeyError, AttributeError) as e:
            logger.warning("Ignoring unreadable profile {}: {}", self.profile_path, e)
            return None

    def save_profile(self, profile: UserProfile) -> None:
        self._write_json(self.profile_path, user_profile_to_dict(profile))

    def load_plan(self) -> GeneratedPlan | None:
        """
        Load the saved plan.

        Returns:
            GeneratedPlan if file exists and is valid, None otherwise
        """
        if not self.plan_path.exists():
            return None
        try:
            return dict_to_plan(self._read_json(self.plan_path))
        except (json.JSONDecodeError, ValidationError, TypeError, KeyError, AttributeError) as e:
            logger.warning("Ignoring unreadable plan {}: {}", self.plan_path, e)
            return None

    def save_plan(self, plan: GeneratedPlan) -> None:
        """Replace the saved plan wholesale."""
        self._write_json(self.plan_path, plan_to_dict(plan))

    def load_workout_history(self) -> list[WorkoutSession]:
        """
        Load all sessions in insertion order.

        Returns:
            List of WorkoutSession; empty if no history file exists

        Raises:
            ValidationError: If a line cannot be parsed
        """
        if not self.workouts_path.exists():
            return []

        sessions: list[WorkoutSession] = []
        with open(self.workouts_path, "r", encoding="utf-8") as f:
            for line_num, line in enumerate(f, 1):
                line = line.strip()
                if not line:
                    continue
                try:
                    sessions.append(json_line_to_session(line))
                except (ValidationError, ValueError, TypeError, KeyError, AttributeError) as e:
                    raise ValidationError(
                        f"Error parsing line {line_num} in {self.workouts_path}: {e}"
                    ) from e

        logger.debug("Loaded {} sessions from {}", len(sessions), self.workouts_path)
        return sessions

    def append_workout(self, session: WorkoutSession) -> None:
        """Append a session to the history file."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        with open(self.workouts_path, "a", encoding="utf-8") as f:
            f.write(session_to_json_line(session) + "\n")
        logger.debug("Appended session {} ({})", session.id, session.day_name)

    def load_suggestions(self) -> list[AISuggestion]:
        """
        Load stored suggestions in insertion order.

        Raises:
            ValidationError: If the file is corrupt
        """
        if not self.suggestions_path.exists():
            return []
        try:
            raw = self._read_json(self.suggestions_path)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid JSON in {self.suggestions_path}: {e}") from e
        if not isinstance(raw, list):
            raise ValidationError(f"Expected a list in {self.suggestions_path}")
        return [dict_to_suggestion(d) for d in raw]

    def _write_suggestions(self, suggestions: list[AISuggestion]) -> None:
        self._write_json(self.suggestions_path, [suggestion_to_dict(s) for s in suggestions])

    def append_suggestion(self, suggestion: AISuggestion) -> None:
        suggestions = self.load_suggestions()
        suggestions.append(suggestion)
        self._write_suggestions(suggestions)

    def mark_suggestion_applied(self, suggestion_id: str) -> bool:
        """
        Mark a suggestion applied in place.

        Idempotent: applying twice leaves a single applied entry.

        Returns:
            True if the suggestion exists, False otherwise
        """
        suggestions = self.load_suggestions()
        found = False
        for s in suggestions:
            if s.id == suggestion_id:
                found = True
                if not s.applied:
                    s.applied = True
                    self._write_suggestions(suggestions)
                break
        return found


class MemoryStore(_HistoryQueries):
    """In-process store with the same behaviour as JsonStore."""

    def __init__(
        self,
        history: list[WorkoutSession] | None = None,
        plan: GeneratedPlan | None = None,
        profile: UserProfile | None = None,
    ):
        self._history: list[WorkoutSession] = list(history or [])
        self._plan = plan
        self._profile = profile
        self._suggestions: list[AISuggestion] = []

    def load_plan(self) -> GeneratedPlan | None:
        return self._plan

    def save_plan(self, plan: GeneratedPlan) -> None:
        self._plan = plan

    def load_profile(self) -> UserProfile | None:
        return self._profile

    def save_profile(self, profile: UserProfile) -> None:
        self._profile = profile

    def load_workout_history(self) -> list[WorkoutSession]:
        return list(self._history)

    def append_workout(self, session: WorkoutSession) -> None:
        self._history.append(session)

    def load_suggestions(self) -> list[AISuggestion]:
        return list(self._suggestions)

    def append_suggestion(self, suggestion: AISuggestion) -> None:
        self._suggestions.append(suggestion)

    def mark_suggestion_applied(self, suggestion_id: str) -> bool:
        for s in self._suggestions:
            if s.id == suggestion_id:
                s.applied = True
                return True
        return False


def get_default_data_dir() -> Path:
    """
    Get the default data directory.

    ``$APEX_COACH_HOME`` when set, otherwise ``~/.apex-coach``.
    """
    env = os.environ.get(DATA_DIR_ENV)
    if env:
        return Path(env).expanduser()
    return Path.home() / DEFAULT_DATA_DIR_NAME


def get_default_store() -> JsonStore:
    """Get a JsonStore at the default data directory."""
    return JsonStore(get_default_data_dir())
