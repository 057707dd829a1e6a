"""
Configuration constants for plan generation and coaching analysis.

All adjustable thresholds are centralized here for easy tuning.
"""

from typing import Final

# =============================================================================
# SPLIT RESOLUTION ("AI Decide")
# =============================================================================

PPL_MIN_DAYS: Final[int] = 6  # daysPerWeek >= 6 -> Push/Pull/Legs
UPPER_LOWER_MIN_DAYS: Final[int] = 4  # 4..5 -> Upper/Lower, below -> Full Body

# =============================================================================
# PRESCRIPTIONS
# =============================================================================

WARMUP_SETS: Final[int] = 1
WARMUP_REPS: Final[int] = 10
WARMUP_PATTERN: Final[str] = "Warmup"

# =============================================================================
# REPS IN RESERVE
# =============================================================================

RIR_MIN: Final[int] = 0
RIR_MAX: Final[int] = 5
OPTIMAL_RIR_MAX: Final[int] = 2  # 1-2 RIR is the hypertrophy sweet spot
EASY_RIR_MIN: Final[int] = 4  # RIR at or above this means the set was too easy
FAILURE_RIR: Final[int] = 0

# =============================================================================
# POST-WORKOUT ANALYSIS
# =============================================================================

HISTORY_WINDOW_SETS: Final[int] = 3  # most recent historical sets considered
MIN_HISTORY_POINTS: Final[int] = 2  # fewer historical sets -> no feedback
LOW_RIR_STREAK_MIN: Final[int] = 2  # history sets at <= OPTIMAL_RIR_MAX
FAILURE_STREAK_MIN: Final[int] = 2  # history sets at FAILURE_RIR
WEIGHT_PROGRESSION_FACTOR: Final[float] = 1.05  # +5% load

VOLUME_UP: Final[str] = "+1 set"
VOLUME_DOWN: Final[str] = "-1 set"

# =============================================================================
# WEEKLY REVIEW
# =============================================================================

WEEK_LENGTH_DAYS: Final[int] = 7
STAGNATION_MIN_SETS: Final[int] = 8  # all-time sets before stagnation is judged
STAGNATION_WINDOW: Final[int] = 4  # sets per recent/older group
STAGNATION_GROWTH: Final[float] = 1.02  # < 2% growth counts as stagnant
WEEKLY_EASY_RIR: Final[float] = 3.0  # weekly mean RIR above this -> add volume
WEEKLY_MIN_SETS: Final[int] = 3

# =============================================================================
# EXERCISE PROGRESS
# =============================================================================

PROGRESS_MIN_SETS: Final[int] = 4
PROGRESS_WINDOW: Final[int] = 4
TREND_THRESHOLD: Final[float] = 2.0  # weight units between recent and older means
DEFAULT_PROGRESS_RIR: Final[float] = 2.0

# =============================================================================
# WEEKLY SCHEDULE (weekday indexes, Monday = 0)
# =============================================================================

WEEKDAY_SCHEDULES: Final[dict[int, list[int]]] = {
    3: [0, 2, 4],  # Mon, Wed, Fri
    4: [0, 2, 4, 6],  # Mon, Wed, Fri, Sun
    5: [0, 1, 3, 4, 6],  # Mon, Tue, Thu, Fri, Sun
    6: [0, 1, 2, 3, 4, 5],  # Mon-Sat
}
DEFAULT_WEEKDAY_SCHEDULE: Final[list[int]] = [0, 2, 4]

# =============================================================================
# STORAGE
# =============================================================================

DATA_DIR_ENV: Final[str] = "APEX_COACH_HOME"
DEFAULT_DATA_DIR_NAME: Final[str] = ".apex-coach"
