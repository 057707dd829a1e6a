"""
Split templates for plan generation.

Each split maps to a fixed ordered list of day templates; each day
template is a fixed ordered list of exercise slots.  A slot is either
unconditional or gated on one focus area.  Slots for exercises that are
in the static table only carry the prescription; the rest embed their
reasoning, alternatives and seed values inline.
"""

from dataclasses import dataclass, field

from .config import WARMUP_PATTERN


@dataclass(frozen=True)
class InlineMetadata:
    """Reasoning and alternatives for an exercise missing from the table."""

    reasoning: str
    alternatives: tuple[str, ...]
    previous_weight: float | None = None
    previous_reps: int | None = None


@dataclass(frozen=True)
class ExerciseSlot:
    """One exercise position within a day template."""

    id: str
    name: str
    movement_pattern: str
    muscle_group: str
    sets: int
    reps: int
    focus: str | None = None  # focus area gate; None = always included
    inline: InlineMetadata | None = None


@dataclass(frozen=True)
class WarmupSlot:
    """Mobility warmup prepended when Mobility/Health is a focus area."""

    id: str
    name: str
    muscle_group: str
    reasoning: str
    movement_pattern: str = WARMUP_PATTERN


@dataclass(frozen=True)
class DayTemplate:
    """A workout day: id, display name, warmup and exercise slots."""

    id: str
    name: str
    warmup: WarmupSlot
    slots: tuple[ExerciseSlot, ...] = field(default_factory=tuple)


# =============================================================================
# Exercises that are not in the static table
# =============================================================================

OVERHEAD_PRESS = InlineMetadata(
    reasoning=(
        "Vertical pressing pattern for anterior deltoids. Complements horizontal "
        "pressing for complete shoulder development."
    ),
    alternatives=("Dumbbell Shoulder Press", "Arnold Press", "Push Press"),
    previous_weight=135,
    previous_reps=8,
)

TRICEP_DIPS = InlineMetadata(
    reasoning=(
        "Tricep finisher with bodyweight progression. Targets all three tricep "
        "heads for complete arm development."
    ),
    alternatives=("Overhead Tricep Extension", "Close-Grip Bench", "Cable Pushdowns"),
    previous_weight=0,
    previous_reps=10,
)

ROMANIAN_DEADLIFT = InlineMetadata(
    reasoning=(
        "Hamstring and glute developer with emphasis on eccentric loading. "
        "Complements squat pattern."
    ),
    alternatives=("Leg Curls", "Good Mornings", "Single-Leg RDL"),
    previous_weight=225,
    previous_reps=8,
)

HIP_THRUST = InlineMetadata(
    reasoning=(
        "Direct glute activation with high loading potential. Targets glute max "
        "for size and strength."
    ),
    alternatives=("Bulgarian Split Squat", "Lunges", "Step-Ups"),
    previous_weight=185,
    previous_reps=12,
)

# =============================================================================
# Warmups
# =============================================================================

_SHOULDER_WARMUP_REASONING = (
    "5-minute dynamic warmup targeting shoulder mobility and activation. "
    "Prepares rotator cuff and scapular stabilizers for heavy pressing."
)
_BACK_WARMUP_REASONING = (
    "Activates lats and scapular retractors. Prepares posterior chain for heavy pulling."
)
_LOWER_WARMUP_REASONING = (
    "Hip mobility and activation drills. Prepares hip flexors, glutes, and quads "
    "for heavy loading."
)
_UPPER_WARMUP_REASONING = (
    "Band dislocates, scapular push-ups and thoracic rotations. Prepares shoulders "
    "and upper back for pressing and pulling."
)
_FULL_BODY_WARMUP_REASONING = (
    "Full-range mobility flow covering hips, thoracic spine and shoulders. "
    "Raises core temperature before compound lifts."
)
_CHEST_BACK_WARMUP_REASONING = (
    "Band pull-aparts and light push-ups. Opens the chest and activates the "
    "upper back for antagonist supersets."
)

# =============================================================================
# Push/Pull/Legs
# =============================================================================

PUSH_DAY = DayTemplate(
    id="push-1",
    name="Push Day 1",
    warmup=WarmupSlot("warmup-1", "Dynamic Shoulder Warmup", "Shoulders", _SHOULDER_WARMUP_REASONING),
    slots=(
        ExerciseSlot("ex-1", "Barbell Bench Press", "Horizontal Push", "Chest", 4, 8),
        ExerciseSlot("ex-2", "Overhead Press", "Vertical Push", "Shoulders", 3, 8, inline=OVERHEAD_PRESS),
        ExerciseSlot("ex-3", "Incline Cable Fly", "Isolation", "Chest", 3, 12, focus="Chest"),
        ExerciseSlot("ex-4", "Face Pulls", "Horizontal Pull", "Rear Delts", 3, 15),
        ExerciseSlot("ex-5", "Tricep Dips", "Isolation", "Triceps", 3, 10, inline=TRICEP_DIPS),
    ),
)

PULL_DAY = DayTemplate(
    id="pull-1",
    name="Pull Day 1",
    warmup=WarmupSlot("warmup-2", "Dynamic Back Warmup", "Back", _BACK_WARMUP_REASONING),
    slots=(
        ExerciseSlot("ex-6", "Deadlift", "Hip Hinge", "Back", 4, 5),
        ExerciseSlot("ex-7", "Lat Pulldown", "Vertical Pull", "Back", 4, 10),
        ExerciseSlot("ex-8", "Zottman Curls", "Isolation", "Biceps", 3, 10, focus="Arms"),
    ),
)

LEG_DAY = DayTemplate(
    id="legs-1",
    name="Leg Day 1",
    warmup=WarmupSlot("warmup-3", "Dynamic Lower Body Warmup", "Legs", _LOWER_WARMUP_REASONING),
    slots=(
        ExerciseSlot("ex-10", "Back Squat", "Squat", "Legs", 4, 8),
        ExerciseSlot("ex-11", "Romanian Deadlift", "Hip Hinge", "Legs", 3, 8, inline=ROMANIAN_DEADLIFT),
        ExerciseSlot("ex-12", "Hip Thrust", "Hip Extension", "Glutes", 3, 12, focus="Glutes", inline=HIP_THRUST),
    ),
)

# =============================================================================
# Upper/Lower
# =============================================================================

UPPER_DAY = DayTemplate(
    id="upper-1",
    name="Upper Day 1",
    warmup=WarmupSlot("warmup-upper", "Dynamic Upper Body Warmup", "Upper Body", _UPPER_WARMUP_REASONING),
    slots=(
        ExerciseSlot("ex-upper-1", "Barbell Bench Press", "Horizontal Push", "Chest", 4, 8),
        ExerciseSlot("ex-upper-2", "Lat Pulldown", "Vertical Pull", "Back", 4, 10),
        ExerciseSlot("ex-upper-3", "Overhead Press", "Vertical Push", "Shoulders", 3, 8, inline=OVERHEAD_PRESS),
        ExerciseSlot("ex-upper-4", "Face Pulls", "Horizontal Pull", "Rear Delts", 3, 15),
        ExerciseSlot("ex-upper-5", "Zottman Curls", "Isolation", "Biceps", 3, 10, focus="Arms"),
    ),
)

LOWER_DAY = DayTemplate(
    id="lower-1",
    name="Lower Day 1",
    warmup=WarmupSlot("warmup-lower", "Dynamic Lower Body Warmup", "Legs", _LOWER_WARMUP_REASONING),
    slots=(
        ExerciseSlot("ex-lower-1", "Back Squat", "Squat", "Legs", 4, 8),
        ExerciseSlot("ex-lower-2", "Romanian Deadlift", "Hip Hinge", "Legs", 3, 8, inline=ROMANIAN_DEADLIFT),
        ExerciseSlot("ex-lower-3", "Hip Thrust", "Hip Extension", "Glutes", 3, 12, focus="Glutes", inline=HIP_THRUST),
    ),
)

# =============================================================================
# Full Body
# =============================================================================

FULL_BODY_DAY = DayTemplate(
    id="full-1",
    name="Full Body Day 1",
    warmup=WarmupSlot("warmup-full", "Dynamic Full Body Warmup", "Full Body", _FULL_BODY_WARMUP_REASONING),
    slots=(
        ExerciseSlot("ex-full-1", "Back Squat", "Squat", "Legs", 3, 8),
        ExerciseSlot("ex-full-2", "Barbell Bench Press", "Horizontal Push", "Chest", 3, 8),
        ExerciseSlot("ex-full-3", "Lat Pulldown", "Vertical Pull", "Back", 3, 10),
        ExerciseSlot("ex-full-4", "Romanian Deadlift", "Hip Hinge", "Legs", 3, 8, inline=ROMANIAN_DEADLIFT),
        ExerciseSlot("ex-full-5", "Face Pulls", "Horizontal Pull", "Rear Delts", 2, 15),
        ExerciseSlot("ex-full-6", "Zottman Curls", "Isolation", "Biceps", 3, 10, focus="Arms"),
    ),
)

# =============================================================================
# Arnold Split
# =============================================================================

CHEST_BACK_DAY = DayTemplate(
    id="chest-back-1",
    name="Chest & Back Day",
    warmup=WarmupSlot("warmup-chest-back", "Dynamic Chest & Back Warmup", "Chest & Back", _CHEST_BACK_WARMUP_REASONING),
    slots=(
        ExerciseSlot("ex-cb-1", "Barbell Bench Press", "Horizontal Push", "Chest", 4, 8),
        ExerciseSlot("ex-cb-2", "Lat Pulldown", "Vertical Pull", "Back", 4, 10),
        ExerciseSlot("ex-cb-3", "Incline Cable Fly", "Isolation", "Chest", 3, 12, focus="Chest"),
        ExerciseSlot("ex-cb-4", "Deadlift", "Hip Hinge", "Back", 3, 5),
    ),
)

SHOULDERS_ARMS_DAY = DayTemplate(
    id="shoulders-arms-1",
    name="Shoulders & Arms Day",
    warmup=WarmupSlot("warmup-shoulders-arms", "Dynamic Shoulder Warmup", "Shoulders", _SHOULDER_WARMUP_REASONING),
    slots=(
        ExerciseSlot("ex-sa-1", "Overhead Press", "Vertical Push", "Shoulders", 4, 8, inline=OVERHEAD_PRESS),
        ExerciseSlot("ex-sa-2", "Face Pulls", "Horizontal Pull", "Rear Delts", 3, 15),
        ExerciseSlot("ex-sa-3", "Zottman Curls", "Isolation", "Biceps", 3, 10, focus="Arms"),
        ExerciseSlot("ex-sa-4", "Tricep Dips", "Isolation", "Triceps", 3, 10, focus="Arms", inline=TRICEP_DIPS),
    ),
)

ARNOLD_LEG_DAY = DayTemplate(
    id="arnold-legs-1",
    name="Leg Day",
    warmup=WarmupSlot("warmup-arnold-legs", "Dynamic Lower Body Warmup", "Legs", _LOWER_WARMUP_REASONING),
    slots=(
        ExerciseSlot("ex-al-1", "Back Squat", "Squat", "Legs", 4, 8),
        ExerciseSlot("ex-al-2", "Romanian Deadlift", "Hip Hinge", "Legs", 3, 8, inline=ROMANIAN_DEADLIFT),
        ExerciseSlot("ex-al-3", "Hip Thrust", "Hip Extension", "Glutes", 3, 12, focus="Glutes", inline=HIP_THRUST),
    ),
)

SPLIT_TEMPLATES: dict[str, tuple[DayTemplate, ...]] = {
    "Push/Pull/Legs": (PUSH_DAY, PULL_DAY, LEG_DAY),
    "Upper/Lower": (UPPER_DAY, LOWER_DAY),
    "Full Body": (FULL_BODY_DAY,),
    "Arnold Split": (CHEST_BACK_DAY, SHOULDERS_ARMS_DAY, ARNOLD_LEG_DAY),
}

# Day descriptions, keyed by day name without the trailing number.
DAY_DESCRIPTIONS: dict[str, str] = {
    "Push Day": "Chest, shoulders and triceps. Heavy pressing first, accessories after.",
    "Pull Day": "Back and biceps. Hinge and vertical pulling for thickness and width.",
    "Leg Day": "Quads, hamstrings and glutes. Squat and hinge patterns with heavy loading.",
    "Upper Day": "Balanced upper body session pairing pressing with pulling.",
    "Lower Day": "Lower body strength and hypertrophy built on squat and hinge patterns.",
    "Full Body Day": "Every major movement pattern in one session at moderate volume.",
    "Chest & Back Day": "Antagonist pairing of chest and back for high density training.",
    "Shoulders & Arms Day": "Delts, biceps and triceps with a vertical press anchor.",
}
DEFAULT_DAY_DESCRIPTION = "Structured training session built around compound lifts."
