"""
Tests for model validation, serializer validation and set parsing.
"""

import pytest

from apex_coach.core.models import Exercise, LoggedSet, UserProfile, WorkoutSession
from apex_coach.io.serializers import (
    ValidationError,
    dict_to_logged_set,
    dict_to_session,
    dict_to_suggestion,
    json_line_to_session,
    parse_exercise_set,
    parse_set_spec,
    validate_date,
)


class TestParseSetSpec:
    @pytest.mark.parametrize(
        "spec,expected",
        [
            ("185x8@1", (185.0, 8, 1)),
            ("22.5x12", (22.5, 12, 2)),
            ("135 x 8 @ 3", (135.0, 8, 3)),
            ("100X5@0", (100.0, 5, 0)),
        ],
    )
    def test_valid(self, spec, expected):
        assert parse_set_spec(spec) == expected

    def test_rir_clamped(self):
        assert parse_set_spec("100x5@9")[2] == 5
        assert parse_set_spec("100x5@-2")[2] == 0

    @pytest.mark.parametrize("spec", ["", "185", "x8", "185x", "abcx8@1", "185x8@"])
    def test_invalid_format(self, spec):
        with pytest.raises(ValidationError):
            parse_set_spec(spec)

    @pytest.mark.parametrize("spec", ["0x8@1", "185x0@1"])
    def test_non_positive_rejected(self, spec):
        with pytest.raises(ValidationError):
            parse_set_spec(spec)


class TestParseExerciseSet:
    def test_valid(self):
        assert parse_exercise_set("ex-1=185x8@1") == ("ex-1", 185.0, 8, 1)

    def test_whitespace_around_id(self):
        assert parse_exercise_set(" ex-10 =225x8")[0] == "ex-10"

    @pytest.mark.parametrize("entry", ["185x8@1", "=185x8@1", "ex-1=bad"])
    def test_invalid(self, entry):
        with pytest.raises(ValidationError):
            parse_exercise_set(entry)


class TestValidateDate:
    def test_valid(self):
        assert validate_date("2026-01-12") == "2026-01-12"

    @pytest.mark.parametrize("value", ["2026/01/12", "2026-13-01", "12-01-2026", ""])
    def test_invalid(self, value):
        with pytest.raises(ValidationError):
            validate_date(value)


class TestRecordValidation:
    def _set_dict(self, **overrides):
        d = {
            "exercise_id": "ex-1",
            "exercise_name": "Bench",
            "weight": 185,
            "reps": 8,
            "rir": 1,
            "timestamp": "2026-01-12T10:00:00",
        }
        d.update(overrides)
        return d

    def test_logged_set_rir_clamped(self):
        assert dict_to_logged_set(self._set_dict(rir=7)).rir == 5

    def test_logged_set_negative_weight(self):
        with pytest.raises(ValidationError):
            dict_to_logged_set(self._set_dict(weight=-5))

    @pytest.mark.parametrize("weight", ["heavy", None, True, [185]])
    def test_logged_set_non_numeric_weight(self, weight):
        with pytest.raises(ValidationError, match="weight"):
            dict_to_logged_set(self._set_dict(weight=weight))

    def test_session_sets_must_be_list(self):
        with pytest.raises(ValidationError, match="sets"):
            dict_to_session({"id": "w1", "day_id": "push-1", "date": "2026-01-12", "sets": None})

    def test_logged_set_missing_field(self):
        d = self._set_dict()
        del d["timestamp"]
        with pytest.raises(ValidationError):
            dict_to_logged_set(d)

    def test_session_bad_date(self):
        with pytest.raises(ValidationError):
            dict_to_session({"id": "w1", "day_id": "push-1", "date": "yesterday"})

    def test_session_defaults(self):
        session = dict_to_session({"id": "w1", "day_id": "push-1", "date": "2026-01-12"})
        assert session.sets == []
        assert session.completed is False
        assert session.duration_minutes is None

    def test_json_line_invalid(self):
        with pytest.raises(ValidationError):
            json_line_to_session("not json")

    def test_suggestion_unknown_type(self):
        with pytest.raises(ValidationError):
            dict_to_suggestion({"id": "s1", "type": "rest", "timestamp": "2026-01-12T10:00:00"})

    def test_suggestion_missing_payload(self):
        with pytest.raises(ValidationError):
            dict_to_suggestion({"id": "s1", "type": "weight", "timestamp": "2026-01-12T10:00:00"})


class TestModelValidation:
    def test_profile_rejects_unknown_goal(self):
        with pytest.raises(ValueError):
            UserProfile(
                goal="Get Huge",  # type: ignore[arg-type]
                experience_level="Beginner",
                metabolism_type="Normal",
                days_per_week=3,
            )

    @pytest.mark.parametrize("days", [0, 8])
    def test_profile_rejects_days_out_of_range(self, days):
        with pytest.raises(ValueError):
            UserProfile(
                goal="Strength",
                experience_level="Beginner",
                metabolism_type="Normal",
                days_per_week=days,
            )

    def test_profile_rejects_unknown_focus(self):
        with pytest.raises(ValueError):
            UserProfile(
                goal="Strength",
                experience_level="Beginner",
                metabolism_type="Normal",
                days_per_week=3,
                focus_areas=frozenset({"Calves"}),
            )

    def test_profile_focus_coerced_to_frozenset(self):
        profile = UserProfile(
            goal="Strength",
            experience_level="Beginner",
            metabolism_type="Normal",
            days_per_week=3,
            focus_areas=["Arms", "Arms"],  # type: ignore[arg-type]
        )
        assert profile.focus_areas == frozenset({"Arms"})
        assert profile.has_focus("Arms")

    def test_exercise_requires_positive_prescription(self):
        with pytest.raises(ValueError):
            Exercise("ex-1", "Bench", "Horizontal Push", "Chest", 0, 8, "")

    def test_logged_set_clamps_rir(self):
        logged = LoggedSet("ex-1", "Bench", 100, 5, 11, "2026-01-12T10:00:00")
        assert logged.rir == 5

    def test_logged_set_rejects_negative_reps(self):
        with pytest.raises(ValueError):
            LoggedSet("ex-1", "Bench", 100, -1, 2, "2026-01-12T10:00:00")

    def test_session_rejects_bad_date(self):
        with pytest.raises(ValueError):
            WorkoutSession(id="w1", day_id="push-1", day_name="Push Day 1", date="2026-02-30")
