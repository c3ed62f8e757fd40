"""Enumerations and scheduling constants for the schedule engine."""

from enum import Enum, IntEnum, auto


class WorkoutType(str, Enum):
    """Kind of session a template entry prescribes.

    Values are the lowercase labels used by the program catalog and
    carried on ScheduledWorkout.workout_type.
    """

    REST = "rest"
    RECOVERY = "recovery"
    PACE = "pace"
    VERTICAL = "vertical"
    STANDARD = "standard"
    CUSTOM = "custom"


class Priority(IntEnum):
    """Adaptation rule tiers: lower value runs first.

    SCHEDULING rules move dates; LOAD rules adjust the prescribed work
    on whatever dates the scheduling tier settled on.
    """

    SCHEDULING = 0
    LOAD = 1


class WorkoutState(IntEnum):
    """Derived per-entry progress state (never stored)."""

    LOCKED = auto()
    UNLOCKED = auto()
    COMPLETED = auto()


class RuckingGoal(str, Enum):
    """User goal that selects a MARCH weekly pattern."""

    MILITARY = "military"
    HIKING = "hiking"
    GORUCK_BASIC = "goruck_basic"
    GORUCK_TOUGH = "goruck_tough"
    WEIGHT_LOSS = "weight_loss"
    LONGEVITY = "longevity"


class ExperienceLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


def parse_workout_type(label: str) -> WorkoutType:
    """Map a free-form catalog label ("Recovery Ruck", "rest", ...) to a WorkoutType."""
    text = label.strip().lower()
    if text == "rest":
        return WorkoutType.REST
    if "recovery" in text:
        return WorkoutType.RECOVERY
    if "pace" in text:
        return WorkoutType.PACE
    if "vertical" in text:
        return WorkoutType.VERTICAL
    if "standard" in text or "test" in text or text == "ruck":
        return WorkoutType.STANDARD
    return WorkoutType.CUSTOM


# ---------------------------------------------------------------------------
# Calendar constants
# ---------------------------------------------------------------------------
DAYS_PER_WEEK = 7

# ISO weekday numbers (Mon=1 ... Sun=7)
ISO_WEEKDAYS = frozenset(range(1, 8))

# Used when the user has not picked any training days: Tue / Thu / Sun
FALLBACK_PREFERRED_DAYS = frozenset({2, 4, 7})

# ---------------------------------------------------------------------------
# Feedback deload constants
# ---------------------------------------------------------------------------
DELOAD_FEEDBACK_WINDOW_DAYS = 7  # Feedback older than a week is ignored
DELOAD_RPE_THRESHOLD = 8  # RPE >= 8 on the 1-10 scale triggers a deload
DELOAD_DISTANCE_FACTOR = 0.9  # 10% reduction of upcoming distances
DELOAD_MIN_DISTANCE_MILES = 1.0

# ---------------------------------------------------------------------------
# MARCH progression constants
# ---------------------------------------------------------------------------
EARLY_WEEKS_DISTANCE_INCREMENT_MILES = 0.25  # Weeks 1-2
LATER_WEEKS_DISTANCE_INCREMENT_MILES = 0.5
EARLY_WEEKS_CUTOFF = 2
LOAD_TEST_WEIGHT_INCREMENT_LBS = 5.0
DEFAULT_WEIGHT_INCREMENT_LBS = 2.0
MAX_WEIGHT_INCREASE_LBS = 20.0
