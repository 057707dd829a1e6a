"""
JSON serialization for apex-coach data models.

Handles conversion between dataclasses and JSON-compatible dicts.
"""

import json
import re
from datetime import datetime
from typing import Any

from ..core.models import (
    AISuggestion,
    Exercise,
    ExerciseSwap,
    GeneratedPlan,
    LoggedSet,
    PreviousSession,
    SuggestionPayload,
    UserProfile,
    VolumeChange,
    WeightChange,
    WorkoutDay,
    WorkoutSession,
    clamp_rir,
)


class ValidationError(Exception):
    """Raised when data validation fails."""

    pass


def validate_date(date_str: str) -> str:
    """
    Validate and normalize date string to ISO format.

    Args:
        date_str: Date string to validate

    Returns:
        Normalized YYYY-MM-DD string

    Raises:
        ValidationError: If date format is invalid
    """
    if not isinstance(date_str, str) or not re.match(r"^\d{4}-\d{2}-\d{2}$", date_str):
        raise ValidationError(f"Invalid date format: {date_str}. Expected YYYY-MM-DD")

    try:
        datetime.strptime(date_str, "%Y-%m-%d")
    except ValueError as e:
        raise ValidationError(f"Invalid date: {date_str}") from e

    return date_str


def validate_timestamp(value: str) -> str:
    """Validate an ISO-8601 datetime string."""
    try:
        datetime.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid timestamp: {value!r}") from e
    return value


def validate_non_negative(value: int | float, name: str) -> int | float:
    """
    Validate that a value is non-negative.

    Raises:
        ValidationError: If value is not a number or is negative
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{name} must be a number, got {value!r}")
    if value < 0:
        raise ValidationError(f"{name} must be non-negative, got {value}")
    return value


def _require_list(value: Any, name: str) -> list:
    if not isinstance(value, list):
        raise ValidationError(f"{name} must be a list, got {type(value).__name__}")
    return value


def _require(data: dict[str, Any], *keys: str) -> None:
    if not isinstance(data, dict):
        raise ValidationError(f"Expected an object, got {type(data).__name__}")
    missing = [k for k in keys if k not in data]
    if missing:
        raise ValidationError(f"Missing fields: {', '.join(missing)}")


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------


def user_profile_to_dict(profile: UserProfile) -> dict[str, Any]:
    return {
        "goal": profile.goal,
        "experience_level": profile.experience_level,
        "metabolism_type": profile.metabolism_type,
        "days_per_week": profile.days_per_week,
        "split_preference": profile.split_preference,
        "focus_areas": sorted(profile.focus_areas),
    }


def dict_to_user_profile(data: dict[str, Any]) -> UserProfile:
    """
    Convert dict to UserProfile.

    Raises:
        ValidationError: If data is invalid
    """
    _require(data, "goal", "experience_level", "metabolism_type", "days_per_week")
    try:
        return UserProfile(
            goal=data["goal"],
            experience_level=data["experience_level"],
            metabolism_type=data["metabolism_type"],
            days_per_week=int(data["days_per_week"]),
            split_preference=data.get("split_preference", "AI Decide"),
            focus_areas=frozenset(data.get("focus_areas") or []),
        )
    except (TypeError, ValueError) as e:
        raise ValidationError(str(e)) from e


# ---------------------------------------------------------------------------
# Plan
# ---------------------------------------------------------------------------


def exercise_to_dict(exercise: Exercise) -> dict[str, Any]:
    d: dict[str, Any] = {
        "id": exercise.id,
        "name": exercise.name,
        "movement_pattern": exercise.movement_pattern,
        "muscle_group": exercise.muscle_group,
        "sets": exercise.sets,
        "reps": exercise.reps,
        "reasoning": exercise.reasoning,
        "alternatives": list(exercise.alternatives),
    }
    if exercise.previous_session is not None:
        d["previous_session"] = {
            "weight": exercise.previous_session.weight,
            "reps": exercise.previous_session.reps,
        }
    return d


def dict_to_exercise(data: dict[str, Any]) -> Exercise:
    _require(data, "id", "name", "sets", "reps")
    previous = data.get("previous_session")
    try:
        return Exercise(
            id=str(data["id"]),
            name=str(data["name"]),
            movement_pattern=str(data.get("movement_pattern", "")),
            muscle_group=str(data.get("muscle_group", "")),
            sets=int(data["sets"]),
            reps=int(data["reps"]),
            reasoning=str(data.get("reasoning", "")),
            alternatives=[str(a) for a in data.get("alternatives", [])],
            previous_session=(
                PreviousSession(weight=float(previous["weight"]), reps=int(previous["reps"]))
                if previous
                else None
            ),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ValidationError(f"Invalid exercise {data.get('id')!r}: {e}") from e


def plan_to_dict(plan: GeneratedPlan) -> dict[str, Any]:
    return {
        "split": plan.split,
        "rationale": plan.rationale,
        "days": [
            {
                "id": day.id,
                "name": day.name,
                "exercises": [exercise_to_dict(e) for e in day.exercises],
            }
            for day in plan.days
        ],
    }


def dict_to_plan(data: dict[str, Any]) -> GeneratedPlan:
    """
    Convert dict to GeneratedPlan.

    Raises:
        ValidationError: If data is invalid
    """
    _require(data, "split", "days")
    days = []
    for raw_day in _require_list(data["days"], "days"):
        _require(raw_day, "id", "name")
        exercises = _require_list(raw_day.get("exercises", []), "exercises")
        days.append(
            WorkoutDay(
                id=str(raw_day["id"]),
                name=str(raw_day["name"]),
                exercises=[dict_to_exercise(e) for e in exercises],
            )
        )
    return GeneratedPlan(split=str(data["split"]), days=days, rationale=str(data.get("rationale", "")))


# ---------------------------------------------------------------------------
# Sessions
# ---------------------------------------------------------------------------


def logged_set_to_dict(logged: LoggedSet) -> dict[str, Any]:
    return {
        "exercise_id": logged.exercise_id,
        "exercise_name": logged.exercise_name,
        "weight": logged.weight,
        "reps": logged.reps,
        "rir": logged.rir,
        "timestamp": logged.timestamp,
    }


def dict_to_logged_set(data: dict[str, Any]) -> LoggedSet:
    """
    Convert dict to LoggedSet.  RIR outside 0–5 is clamped, not rejected.

    Raises:
        ValidationError: If data is invalid
    """
    _require(data, "exercise_id", "weight", "reps", "rir", "timestamp")
    validate_non_negative(data["weight"], "weight")
    validate_non_negative(data["reps"], "reps")
    validate_timestamp(data["timestamp"])

    try:
        return LoggedSet(
            exercise_id=str(data["exercise_id"]),
            exercise_name=str(data.get("exercise_name", "")),
            weight=float(data["weight"]),
            reps=int(data["reps"]),
            rir=int(data["rir"]),
            timestamp=data["timestamp"],
        )
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid set for {data['exercise_id']!r}: {e}") from e


def session_to_dict(session: WorkoutSession) -> dict[str, Any]:
    d: dict[str, Any] = {
        "id": session.id,
        "day_id": session.day_id,
        "day_name": session.day_name,
        "date": session.date,
        "completed": session.completed,
        "sets": [logged_set_to_dict(s) for s in session.sets],
    }
    if session.duration_minutes is not None:
        d["duration_minutes"] = session.duration_minutes
    return d


def dict_to_session(data: dict[str, Any]) -> WorkoutSession:
    """
    Convert dict to WorkoutSession.

    Raises:
        ValidationError: If data is invalid
    """
    _require(data, "id", "day_id", "date")
    validate_date(data["date"])
    duration = data.get("duration_minutes")
    if duration is not None:
        validate_non_negative(duration, "duration_minutes")

    return WorkoutSession(
        id=str(data["id"]),
        day_id=str(data["day_id"]),
        day_name=str(data.get("day_name", "")),
        date=data["date"],
        sets=[dict_to_logged_set(s) for s in _require_list(data.get("sets", []), "sets")],
        completed=bool(data.get("completed", False)),
        duration_minutes=int(duration) if duration is not None else None,
    )


def session_to_json_line(session: WorkoutSession) -> str:
    """Serialize a session to a single JSON line (no trailing newline)."""
    return json.dumps(session_to_dict(session), separators=(",", ":"))


def json_line_to_session(line: str) -> WorkoutSession:
    """
    Deserialize a JSON line to a WorkoutSession.

    Raises:
        ValidationError: If JSON is invalid or data validation fails
    """
    try:
        data = json.loads(line.strip())
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON: {e}") from e

    return dict_to_session(data)


# ---------------------------------------------------------------------------
# Suggestions
# ---------------------------------------------------------------------------


def payload_to_dict(payload: SuggestionPayload) -> dict[str, Any]:
    if isinstance(payload, WeightChange):
        return {"current": payload.current, "suggested": payload.suggested}
    if isinstance(payload, VolumeChange):
        return {"change": payload.change}
    return {"from": payload.from_exercise, "to": payload.to_exercise}


def dict_to_payload(kind: str, data: dict[str, Any]) -> SuggestionPayload:
    """
    Build the payload variant selected by ``kind``.

    Raises:
        ValidationError: If the kind is unknown or its fields are missing
    """
    if kind == "weight":
        _require(data, "current", "suggested")
        try:
            return WeightChange(current=float(data["current"]), suggested=int(data["suggested"]))
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Invalid weight suggestion: {e}") from e
    if kind == "volume":
        _require(data, "change")
        return VolumeChange(change=str(data["change"]))
    if kind == "swap":
        _require(data, "from", "to")
        return ExerciseSwap(from_exercise=str(data["from"]), to_exercise=str(data["to"]))
    raise ValidationError(f"Invalid suggestion type: {kind!r}. Must be weight, volume or swap")


def suggestion_to_dict(suggestion: AISuggestion) -> dict[str, Any]:
    return {
        "id": suggestion.id,
        "type": suggestion.type,
        "exercise_id": suggestion.exercise_id,
        "exercise_name": suggestion.exercise_name,
        **payload_to_dict(suggestion.payload),
        "reason": suggestion.reason,
        "timestamp": suggestion.timestamp,
        "applied": suggestion.applied,
    }


def dict_to_suggestion(data: dict[str, Any]) -> AISuggestion:
    """
    Convert dict to AISuggestion.

    Raises:
        ValidationError: If data is invalid
    """
    _require(data, "id", "type", "timestamp")
    validate_timestamp(data["timestamp"])
    return AISuggestion(
        id=str(data["id"]),
        exercise_id=str(data.get("exercise_id", "")),
        exercise_name=str(data.get("exercise_name", "")),
        payload=dict_to_payload(data["type"], data),
        reason=str(data.get("reason", "")),
        timestamp=data["timestamp"],
        applied=bool(data.get("applied", False)),
    )


# ---------------------------------------------------------------------------
# CLI set input
# ---------------------------------------------------------------------------

_DEFAULT_RIR = 2  # Used when RIR is omitted from a set


def parse_set_spec(spec: str) -> tuple[float, int, int]:
    """
    Parse one logged set written as ``WEIGHTxREPS[@RIR]``.

    Examples:
        "185x8@1"  → (185.0, 8, 1)
        "22.5x12"  → (22.5, 12, 2)   RIR defaults to 2
        "135 x 8 @ 3" → (135.0, 8, 3)

    Returns:
        (weight, reps, rir); RIR is clamped into 0–5

    Raises:
        ValidationError: If format is invalid or weight/reps are not positive
    """
    text = spec.strip()
    m = re.fullmatch(r"(\d+(?:\.\d+)?)\s*[xX×]\s*(\d+)(?:\s*@\s*(-?\d+))?", text)
    if not m:
        raise ValidationError(
            f"Invalid set format: '{spec}'. Use WEIGHTxREPS@RIR, e.g. 185x8@1"
        )

    weight = float(m.group(1))
    reps = int(m.group(2))
    rir = int(m.group(3)) if m.group(3) is not None else _DEFAULT_RIR

    if weight <= 0:
        raise ValidationError(f"Weight must be positive: {weight}")
    if reps <= 0:
        raise ValidationError(f"Reps must be positive: {reps}")

    return weight, reps, clamp_rir(rir)


def parse_exercise_set(entry: str) -> tuple[str, float, int, int]:
    """
    Parse ``EXERCISE_ID=WEIGHTxREPS[@RIR]`` as given to ``log-session --set``.

    Returns:
        (exercise_id, weight, reps, rir)

    Raises:
        ValidationError: If the entry is malformed
    """
    if "=" not in entry:
        raise ValidationError(
            f"Invalid set entry: '{entry}'. Use EXERCISE_ID=WEIGHTxREPS@RIR, e.g. ex-1=185x8@1"
        )
    exercise_id, _, spec = entry.partition("=")
    exercise_id = exercise_id.strip()
    if not exercise_id:
        raise ValidationError(f"Missing exercise id in '{entry}'")
    weight, reps, rir = parse_set_spec(spec)
    return exercise_id, weight, reps, rir
