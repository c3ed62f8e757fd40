"""MARCH session catalog and goal-based plan templates.

Personalized plans are assembled from seven ruck session kinds. A user's
goal picks a weekly pattern and plan length; distances and carried
weight progress week over week. Weeks are flattened into one contiguous
template so day numbers stay valid for positional completion matching.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from schedule_engine.models.enums import (
    DEFAULT_WEIGHT_INCREMENT_LBS,
    EARLY_WEEKS_CUTOFF,
    EARLY_WEEKS_DISTANCE_INCREMENT_MILES,
    LATER_WEEKS_DISTANCE_INCREMENT_MILES,
    LOAD_TEST_WEIGHT_INCREMENT_LBS,
    MAX_WEIGHT_INCREASE_LBS,
    ExperienceLevel,
    RuckingGoal,
    WorkoutType,
)
from schedule_engine.models.template import ProgramTemplate, WorkoutTemplateEntry

MARCH_PROGRAM_ID = "aaaa1111-2222-3333-4444-555555555555"
MARCH_PROGRAM_TITLE = "MARCH Personalized Plan"


class MarchSession(str, Enum):
    RECOVERY = "Recovery Ruck"
    PACE_PUSHER = "Pace Pusher Ruck"
    VERTICAL_GRIND = "Vertical Grind Ruck"
    LOAD_TEST = "Load Test Ruck"
    ENDURANCE = "Endurance Ruck"
    INTEGRATED_PT = "Integrated PT Ruck"
    STANDARD_TEST = "Standard Test Ruck"


@dataclass(frozen=True)
class SessionDescriptor:
    session: MarchSession
    workout_type: WorkoutType
    purpose: str
    default_distance_miles: float
    target_pace_minutes: float | None = None


SESSION_CATALOG: dict[MarchSession, SessionDescriptor] = {
    MarchSession.RECOVERY: SessionDescriptor(
        MarchSession.RECOVERY,
        WorkoutType.RECOVERY,
        "Low-weight, Zone 2 maintenance. Focus on gait and joint health.",
        2.0,
    ),
    MarchSession.PACE_PUSHER: SessionDescriptor(
        MarchSession.PACE_PUSHER,
        WorkoutType.PACE,
        "Alternate 15-min/mile efforts with recovery pace.",
        3.0,
        15.0,
    ),
    MarchSession.VERTICAL_GRIND: SessionDescriptor(
        MarchSession.VERTICAL_GRIND,
        WorkoutType.VERTICAL,
        "Prioritize elevation over speed; keep HR high on the ascent.",
        3.0,
    ),
    MarchSession.LOAD_TEST: SessionDescriptor(
        MarchSession.LOAD_TEST,
        WorkoutType.CUSTOM,
        "Max-effort sustained pace with heavier weight.",
        4.0,
        15.5,
    ),
    MarchSession.ENDURANCE: SessionDescriptor(
        MarchSession.ENDURANCE,
        WorkoutType.CUSTOM,
        "High distance, low intensity; gear and hydration check.",
        6.0,
    ),
    MarchSession.INTEGRATED_PT: SessionDescriptor(
        MarchSession.INTEGRATED_PT,
        WorkoutType.CUSTOM,
        "Short ruck with 3-5 PT stops (ruck on).",
        2.5,
    ),
    MarchSession.STANDARD_TEST: SessionDescriptor(
        MarchSession.STANDARD_TEST,
        WorkoutType.STANDARD,
        "Benchmark (e.g., 12 miles in 3 hours).",
        8.0,
        15.0,
    ),
}

_R = MarchSession.RECOVERY
_P = MarchSession.PACE_PUSHER
_V = MarchSession.VERTICAL_GRIND
_L = MarchSession.LOAD_TEST
_E = MarchSession.ENDURANCE
_PT = MarchSession.INTEGRATED_PT
_S = MarchSession.STANDARD_TEST

_GENERAL_FITNESS_PATTERN = (
    (_R, _P, _E),
    (_R, _P, _V, _E),
    (_P, _PT, _E),
    (_R, _P, _E, _V),
    (_P, _L, _E),
    (_R, _S, _E),
)

_MILITARY_PATTERN = (
    (_P, _R, _PT),
    (_P, _V, _E),
    (_P, _L, _PT, _R),
    (_P, _E, _S),
    (_P, _V, _L),
    (_P, _PT, _E),
    (_P, _S, _R),
    (_P, _L, _S),
)

_HIKING_PATTERN = (
    (_R, _V, _E),
    (_V, _P, _E),
    (_V, _PT, _E),
    (_V, _E, _L),
    (_P, _V, _E),
    (_V, _S, _E),
)

_EVENT_PATTERN = (
    (_R, _PT, _E),
    (_P, _PT, _E),
    (_P, _L, _E),
    (_P, _PT, _V),
    (_P, _L, _E),
    (_P, _PT, _S),
    (_P, _L, _E),
    (_S, _R, _E),
)

# goal -> (plan length in weeks, weekly pattern)
GOAL_PLANS: dict[RuckingGoal, tuple[int, tuple[tuple[MarchSession, ...], ...]]] = {
    RuckingGoal.MILITARY: (8, _MILITARY_PATTERN),
    RuckingGoal.HIKING: (6, _HIKING_PATTERN),
    RuckingGoal.GORUCK_BASIC: (8, _EVENT_PATTERN),
    RuckingGoal.GORUCK_TOUGH: (8, _EVENT_PATTERN),
    RuckingGoal.WEIGHT_LOSS: (6, _GENERAL_FITNESS_PATTERN),
    RuckingGoal.LONGEVITY: (6, _GENERAL_FITNESS_PATTERN),
}


def progressive_distance(descriptor: SessionDescriptor, week: int) -> float:
    """Default distance plus a weekly increment (smaller in the first two weeks)."""
    increment = (
        EARLY_WEEKS_DISTANCE_INCREMENT_MILES
        if week <= EARLY_WEEKS_CUTOFF
        else LATER_WEEKS_DISTANCE_INCREMENT_MILES
    )
    return descriptor.default_distance_miles + max(0, week - 1) * increment


def progressive_weight(base_weight_lbs: float, session: MarchSession, week: int) -> float:
    """Carried weight for *week*, capped at base + 20 lb."""
    per_week = (
        LOAD_TEST_WEIGHT_INCREMENT_LBS
        if session == MarchSession.LOAD_TEST
        else DEFAULT_WEIGHT_INCREMENT_LBS
    )
    weight = base_weight_lbs + max(0, week - 1) * per_week
    return min(weight, base_weight_lbs + MAX_WEIGHT_INCREASE_LBS)


def session_instructions(descriptor: SessionDescriptor, weight_lbs: float) -> str:
    return (
        f"{descriptor.session.value}: {descriptor.purpose}\n"
        f"Target weight: {int(weight_lbs)} lbs"
    )


def build_march_template(
    goal: RuckingGoal,
    experience: ExperienceLevel = ExperienceLevel.INTERMEDIATE,
    base_weight_lbs: float = 20.0,
    baseline_pace_minutes: float = 16.0,
) -> ProgramTemplate:
    """Assemble a personalized MARCH plan for *goal*.

    Args:
        goal: Selects plan length and weekly session pattern.
        experience: Recorded as the template difficulty.
        base_weight_lbs: Week-1 ruck weight.
        baseline_pace_minutes: Pace used for sessions without a fixed target.

    Returns:
        A ProgramTemplate whose day numbers run 1..N across all weeks.
    """
    duration_weeks, pattern = GOAL_PLANS[goal]

    entries: list[WorkoutTemplateEntry] = []
    for week in range(1, duration_weeks + 1):
        sessions = pattern[week - 1] if week <= len(pattern) else pattern[-1]
        for session in sessions:
            descriptor = SESSION_CATALOG[session]
            weight = progressive_weight(base_weight_lbs, session, week)
            entries.append(
                WorkoutTemplateEntry(
                    day_number=len(entries) + 1,
                    workout_type=descriptor.workout_type,
                    workout_id=f"march-w{week}-{len(entries) + 1}",
                    title=session.value,
                    distance_miles=progressive_distance(descriptor, week),
                    target_pace_minutes=descriptor.target_pace_minutes or baseline_pace_minutes,
                    instructions=session_instructions(descriptor, weight),
                )
            )

    return ProgramTemplate(
        program_id=MARCH_PROGRAM_ID,
        title=MARCH_PROGRAM_TITLE,
        entries=tuple(entries),
        difficulty=experience.value,
    )
