# personal_trainer/routines/policy.py
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class FitnessGoal(Enum):
    LOSE_WEIGHT = "lose_weight"
    BUILD_MUSCLE = "build_muscle"
    IMPROVE_ENDURANCE = "improve_endurance"
    GENERAL_FITNESS = "general_fitness"
    INCREASE_STRENGTH = "increase_strength"
    TONE_UP = "tone_up"


class Gender(Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
    PREFER_NOT_TO_SAY = "prefer_not_to_say"


class ExperienceLevel(Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class WorkoutDuration(Enum):
    SHORT = "short"
    MEDIUM = "medium"
    STANDARD = "standard"
    LONG = "long"
    EXTENDED = "extended"


class WorkoutSplit(Enum):
    FULL_BODY = "full_body"
    UPPER_LOWER = "upper_lower"
    PUSH_PULL_LEGS = "push_pull_legs"


class MuscleFrequency(Enum):
    ONCE = 1
    TWICE = 2
    THREE_TIMES = 3


class DifficultyFeedback(Enum):
    TOO_EASY = "too_easy"
    JUST_RIGHT = "just_right"
    TOO_HARD = "too_hard"


@dataclass(frozen=True)
class GoalPolicy:
    label: str
    description: str
    cardio_ratio: float
    sets_range: Tuple[int, int]  # inclusive
    reps_range: Tuple[int, int]  # inclusive
    rest_seconds: int
    base_calories: int
    icon: str


@dataclass(frozen=True)
class DurationPolicy:
    minutes: int
    exercise_count: int  # strength exercises, finisher excluded
    cardio_minutes: int


GOAL_POLICY: Dict[FitnessGoal, GoalPolicy] = {
    FitnessGoal.LOSE_WEIGHT: GoalPolicy(
        "Lose Weight", "Burn fat with high-intensity cardio and metabolic training",
        0.5, (3, 4), (12, 15), 30, 400, "flame.fill"),
    FitnessGoal.BUILD_MUSCLE: GoalPolicy(
        "Build Muscle", "Hypertrophy-focused weight training for muscle growth",
        0.1, (4, 5), (8, 12), 60, 300, "figure.strengthtraining.traditional"),
    FitnessGoal.IMPROVE_ENDURANCE: GoalPolicy(
        "Improve Endurance", "Cardio-heavy program to boost stamina and heart health",
        0.7, (2, 3), (15, 20), 30, 350, "figure.run"),
    FitnessGoal.GENERAL_FITNESS: GoalPolicy(
        "General Fitness", "Balanced mix of strength, cardio, and flexibility",
        0.3, (3, 4), (10, 12), 60, 300, "heart.fill"),
    FitnessGoal.INCREASE_STRENGTH: GoalPolicy(
        "Increase Strength", "Heavy compound lifts for maximum strength gains",
        0.1, (4, 5), (4, 6), 120, 250, "dumbbell.fill"),
    FitnessGoal.TONE_UP: GoalPolicy(
        "Tone & Define", "Moderate weights with higher reps for definition",
        0.3, (3, 4), (12, 15), 60, 350, "figure.mixed.cardio"),
}

DURATION_POLICY: Dict[WorkoutDuration, DurationPolicy] = {
    WorkoutDuration.SHORT: DurationPolicy(30, 4, 5),
    WorkoutDuration.MEDIUM: DurationPolicy(45, 6, 8),
    WorkoutDuration.STANDARD: DurationPolicy(60, 7, 10),
    WorkoutDuration.LONG: DurationPolicy(75, 8, 12),
    WorkoutDuration.EXTENDED: DurationPolicy(90, 10, 15),
}

SPLIT_MIN_DAYS: Dict[WorkoutSplit, int] = {
    WorkoutSplit.FULL_BODY: 2,
    WorkoutSplit.UPPER_LOWER: 3,
    WorkoutSplit.PUSH_PULL_LEGS: 3,
}

# Difficulty adjustment bounds
MAX_SETS = 5
MIN_SETS = 2
MIN_REPS = 6
REP_STEP = 2

MIN_DAYS_PER_WEEK = 1
MAX_DAYS_PER_WEEK = 6


def goal_policy(goal: FitnessGoal) -> GoalPolicy:
    return GOAL_POLICY[goal]


def duration_policy(duration: WorkoutDuration) -> DurationPolicy:
    return DURATION_POLICY[duration]


def duration_for_minutes(minutes: int) -> WorkoutDuration:
    """Closest duration tier for a session length in minutes."""
    return min(DURATION_POLICY, key=lambda tier: abs(DURATION_POLICY[tier].minutes - minutes))
