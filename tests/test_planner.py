"""
Tests for plan generation.

Covers split resolution, gated slots, the mobility warmup, rationale
assembly, day descriptions and the weekday schedule.
"""

from datetime import date

import pytest

from apex_coach.core.exercises import get_metadata, get_swap_alternatives
from apex_coach.core.models import SPLITS, LoggedSet, PreviousSession, UserProfile, WorkoutSession
from apex_coach.core.planner import (
    generate_plan,
    get_workout_day_description,
    parse_week_start,
    refresh_previous_sessions,
    resolve_split,
    week_start_for,
    weekly_schedule,
)


# ===========================================================================
# Helpers
# ===========================================================================

def _profile(
    days_per_week: int = 6,
    split: str = "AI Decide",
    focus: tuple[str, ...] = (),
    goal: str = "Gain Muscle",
    experience: str = "Intermediate",
    metabolism: str = "Normal",
) -> UserProfile:
    """Build a UserProfile with sensible defaults."""
    return UserProfile(
        goal=goal,  # type: ignore[arg-type]
        experience_level=experience,  # type: ignore[arg-type]
        metabolism_type=metabolism,  # type: ignore[arg-type]
        days_per_week=days_per_week,
        split_preference=split,  # type: ignore[arg-type]
        focus_areas=frozenset(focus),
    )


def _names(day) -> list[str]:
    return [e.name for e in day.exercises]


def _session(session_id: str, day_id: str, date_str: str, sets: list[tuple[str, float, int]]) -> WorkoutSession:
    return WorkoutSession(
        id=session_id,
        day_id=day_id,
        day_name=day_id,
        date=date_str,
        sets=[
            LoggedSet(ex_id, ex_id, weight, reps, 2, f"{date_str}T10:00:00")
            for ex_id, weight, reps in sets
        ],
        completed=True,
    )


# ===========================================================================
# Split resolution
# ===========================================================================

class TestResolveSplit:
    @pytest.mark.parametrize("split", SPLITS)
    def test_explicit_preference_used_verbatim(self, split):
        for days in (1, 3, 6, 7):
            plan = generate_plan(_profile(days_per_week=days, split=split))
            assert plan.split == split

    @pytest.mark.parametrize(
        "days,expected",
        [
            (7, "Push/Pull/Legs"),
            (6, "Push/Pull/Legs"),
            (5, "Upper/Lower"),
            (4, "Upper/Lower"),
            (3, "Full Body"),
            (2, "Full Body"),
            (1, "Full Body"),
        ],
    )
    def test_ai_decide_thresholds(self, days, expected):
        assert resolve_split(_profile(days_per_week=days)) == expected

    def test_arnold_never_auto_selected(self):
        for days in range(1, 8):
            assert resolve_split(_profile(days_per_week=days)) != "Arnold Split"


# ===========================================================================
# Plan structure
# ===========================================================================

class TestGeneratePlan:
    def test_deterministic(self):
        profile = _profile(focus=("Chest", "Mobility/Health"), metabolism="Fast")
        assert generate_plan(profile) == generate_plan(profile)

    def test_ppl_days(self):
        plan = generate_plan(_profile(days_per_week=6))
        assert [d.id for d in plan.days] == ["push-1", "pull-1", "legs-1"]
        assert [d.name for d in plan.days] == ["Push Day 1", "Pull Day 1", "Leg Day 1"]

    def test_push_day_without_focus(self):
        push = generate_plan(_profile()).days[0]
        assert _names(push) == [
            "Barbell Bench Press",
            "Overhead Press",
            "Face Pulls",
            "Tricep Dips",
        ]
        bench = push.exercises[0]
        assert (bench.id, bench.sets, bench.reps) == ("ex-1", 4, 8)
        assert bench.movement_pattern == "Horizontal Push"

    def test_table_metadata_attached(self):
        bench = generate_plan(_profile()).days[0].exercises[0]
        meta = get_metadata("Barbell Bench Press")
        assert meta is not None
        assert bench.reasoning == meta.reasoning
        assert bench.alternatives == list(meta.alternatives)
        assert bench.previous_session == PreviousSession(weight=185, reps=8)

    def test_inline_metadata_for_exercises_outside_table(self):
        ohp = generate_plan(_profile()).days[0].exercises[1]
        assert ohp.name == "Overhead Press"
        assert get_metadata("Overhead Press") is None
        assert ohp.alternatives[0] == "Dumbbell Shoulder Press"
        assert ohp.previous_session == PreviousSession(weight=135, reps=8)

    def test_upper_lower_days(self):
        plan = generate_plan(_profile(days_per_week=4))
        assert [d.id for d in plan.days] == ["upper-1", "lower-1"]

    def test_full_body_single_day(self):
        plan = generate_plan(_profile(days_per_week=2))
        assert len(plan.days) == 1
        assert plan.days[0].name == "Full Body Day 1"

    def test_arnold_days(self):
        plan = generate_plan(_profile(split="Arnold Split"))
        assert [d.name for d in plan.days] == [
            "Chest & Back Day",
            "Shoulders & Arms Day",
            "Leg Day",
        ]

    def test_exercise_ids_unique_within_day(self):
        everything = ("Chest", "Arms", "Glutes", "Mobility/Health")
        for split in SPLITS:
            for day in generate_plan(_profile(split=split, focus=everything)).days:
                ids = [e.id for e in day.exercises]
                assert len(ids) == len(set(ids))


class TestGatedSlots:
    @pytest.mark.parametrize(
        "split,day_index",
        [
            ("Push/Pull/Legs", 0),
            ("Arnold Split", 0),
        ],
    )
    def test_chest_gates_incline_fly(self, split, day_index):
        with_chest = generate_plan(_profile(split=split, focus=("Chest",))).days[day_index]
        without = generate_plan(_profile(split=split)).days[day_index]
        assert "Incline Cable Fly" in _names(with_chest)
        assert "Incline Cable Fly" not in _names(without)

    def test_arms_gates_tricep_dips_on_arnold_arms_day(self):
        with_arms = generate_plan(_profile(split="Arnold Split", focus=("Arms",))).days[1]
        without = generate_plan(_profile(split="Arnold Split")).days[1]
        assert with_arms.name == "Shoulders & Arms Day"
        assert _names(with_arms)[-2:] == ["Zottman Curls", "Tricep Dips"]
        assert "Tricep Dips" not in _names(without)

    def test_tricep_dips_ungated_on_push(self):
        without = generate_plan(_profile()).days[0]
        assert "Tricep Dips" in _names(without)

    def test_chest_fly_slot_position(self):
        push = generate_plan(_profile(focus=("Chest",))).days[0]
        assert _names(push).index("Incline Cable Fly") == 2

    @pytest.mark.parametrize(
        "split,day_index",
        [
            ("Push/Pull/Legs", 1),
            ("Upper/Lower", 0),
            ("Arnold Split", 1),
            ("Full Body", 0),
        ],
    )
    def test_arms_gates_zottman(self, split, day_index):
        with_arms = generate_plan(_profile(split=split, focus=("Arms",))).days[day_index]
        without = generate_plan(_profile(split=split)).days[day_index]
        assert "Zottman Curls" in _names(with_arms)
        assert "Zottman Curls" not in _names(without)

    @pytest.mark.parametrize(
        "split,day_index",
        [
            ("Push/Pull/Legs", 2),
            ("Upper/Lower", 1),
            ("Arnold Split", 2),
        ],
    )
    def test_glutes_gates_hip_thrust(self, split, day_index):
        with_glutes = generate_plan(_profile(split=split, focus=("Glutes",))).days[day_index]
        without = generate_plan(_profile(split=split)).days[day_index]
        assert "Hip Thrust" in _names(with_glutes)
        assert "Hip Thrust" not in _names(without)


class TestMobilityWarmup:
    @pytest.mark.parametrize("split", SPLITS)
    def test_warmup_prepended_to_every_day(self, split):
        plan = generate_plan(_profile(split=split, focus=("Mobility/Health",)))
        for day in plan.days:
            first = day.exercises[0]
            assert first.movement_pattern == "Warmup"
            assert (first.sets, first.reps) == (1, 10)
            warmups = [e for e in day.exercises if e.movement_pattern == "Warmup"]
            assert len(warmups) == 1

    @pytest.mark.parametrize("split", SPLITS)
    def test_no_warmup_without_mobility(self, split):
        plan = generate_plan(_profile(split=split, focus=("Chest", "Arms", "Glutes")))
        for day in plan.days:
            assert all(e.movement_pattern != "Warmup" for e in day.exercises)

    def test_push_warmup_identity(self):
        push = generate_plan(_profile(focus=("Mobility/Health",))).days[0]
        assert push.exercises[0].id == "warmup-1"
        assert push.exercises[0].name == "Dynamic Shoulder Warmup"


class TestRationale:
    def test_starts_with_split_and_goal(self):
        plan = generate_plan(_profile(goal="Strength"))
        assert plan.rationale.startswith("Generated a Push/Pull/Legs split optimized for strength. ")

    def test_fast_metabolism_sentence(self):
        fast = generate_plan(_profile(metabolism="Fast")).rationale
        normal = generate_plan(_profile()).rationale
        assert "fast metabolism" in fast
        assert "fast metabolism" not in normal

    def test_mobility_sentence(self):
        plan = generate_plan(_profile(focus=("Mobility/Health",)))
        assert "Dynamic warmups included" in plan.rationale

    def test_closing_sentence_by_experience(self):
        beginner = generate_plan(_profile(experience="Beginner")).rationale
        advanced = generate_plan(_profile(experience="Advanced")).rationale
        assert beginner.endswith("suitable for beginners.")
        assert advanced.endswith("optimal exercise selection.")


# ===========================================================================
# Lookups
# ===========================================================================

class TestLookups:
    def test_swap_alternatives_ordered(self):
        assert get_swap_alternatives("Lat Pulldown") == [
            "Weighted Pull-Ups",
            "Meadows Row",
            "Cable Pulldown",
        ]

    def test_swap_alternatives_unknown(self):
        assert get_swap_alternatives("Kettlebell Juggling") == []

    def test_day_description_exact(self):
        assert get_workout_day_description("Chest & Back Day").startswith("Antagonist")

    def test_day_description_prefix(self):
        assert get_workout_day_description("Push Day 2") == get_workout_day_description("Push Day")

    def test_day_description_default(self):
        text = get_workout_day_description("Mystery Day")
        assert text == "Structured training session built around compound lifts."


# ===========================================================================
# Calendar
# ===========================================================================

class TestWeeklySchedule:
    def test_week_start_is_monday(self):
        assert week_start_for(date(2026, 1, 15)) == date(2026, 1, 12)
        assert parse_week_start("2026-01-18") == date(2026, 1, 12)

    def test_parse_week_start_rejects_garbage(self):
        with pytest.raises(ValueError):
            parse_week_start("not-a-date")

    def test_three_day_plan_on_mon_wed_fri(self):
        plan = generate_plan(_profile(split="Arnold Split"))
        schedule = weekly_schedule(plan, date(2026, 1, 12))
        assert len(schedule) == 7
        trained = [(d.weekday(), day.id) for d, day in schedule if day is not None]
        assert trained == [(0, "chest-back-1"), (2, "shoulders-arms-1"), (4, "arnold-legs-1")]

    def test_one_day_plan_repeats(self):
        plan = generate_plan(_profile(days_per_week=2))
        schedule = weekly_schedule(plan, date(2026, 1, 12))
        trained = [d.weekday() for d, day in schedule if day is not None]
        assert trained == [0, 2, 4]
        assert all(day.id == "full-1" for _, day in schedule if day is not None)


class TestRefreshPreviousSessions:
    def test_latest_logged_set_replaces_seed(self):
        push = generate_plan(_profile()).days[0]
        history = [
            _session("w1", "push-1", "2026-01-05", [("ex-1", 185, 8)]),
            _session("w2", "push-1", "2026-01-12", [("ex-1", 190, 7), ("ex-1", 190, 6)]),
        ]
        refreshed = refresh_previous_sessions(push, history)
        assert refreshed.exercises[0].previous_session == PreviousSession(weight=190, reps=7)

    def test_unlogged_exercises_keep_seed(self):
        push = generate_plan(_profile()).days[0]
        refreshed = refresh_previous_sessions(push, [])
        assert refreshed == push

    def test_original_day_unchanged(self):
        push = generate_plan(_profile()).days[0]
        history = [_session("w1", "push-1", "2026-01-05", [("ex-1", 200, 5)])]
        refresh_previous_sessions(push, history)
        assert push.exercises[0].previous_session == PreviousSession(weight=185, reps=8)
