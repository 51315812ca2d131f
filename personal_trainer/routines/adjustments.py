# personal_trainer/routines/adjustments.py
from typing import List, Sequence

import numpy as np

from personal_trainer.data.catalog import Exercise
from personal_trainer.routines.policy import (
    MAX_SETS,
    MIN_REPS,
    MIN_SETS,
    REP_STEP,
    DifficultyFeedback,
    FitnessGoal,
    goal_policy
)


def adjust_for_goal(exercises: Sequence[Exercise], goal: FitnessGoal, rng: np.random.Generator) -> List[Exercise]:
    """
    Stamp exercises with goal-appropriate sets and reps.

    Each exercise gets its own draw from the goal's inclusive set and rep
    ranges. Everything else passes through untouched.

    Args:
        exercises: Selected exercises
        goal: Fitness goal whose ranges apply
        rng: Random source

    Returns:
        Re-parameterized exercises
    """
    policy = goal_policy(goal)
    sets_low, sets_high = policy.sets_range
    reps_low, reps_high = policy.reps_range

    return [
        exercise.with_sets_reps(
            int(rng.integers(sets_low, sets_high + 1)),
            int(rng.integers(reps_low, reps_high + 1)),
        )
        for exercise in exercises
    ]


def scale_exercises(exercises: Sequence[Exercise], exercise_count: int) -> List[Exercise]:
    """Keep the first ``exercise_count`` exercises; never pads."""
    return list(exercises[:max(exercise_count, 0)])


def adjust_for_difficulty(exercises: Sequence[Exercise], feedback: DifficultyFeedback) -> List[Exercise]:
    """
    Nudge sets and reps after a session based on how it felt.

    too_easy adds a set (capped at 5) and two reps. too_hard removes a set
    (not below 2) and two reps (not below 6). just_right changes nothing.

    Args:
        exercises: Exercises from an existing day plan
        feedback: Post-session difficulty feedback

    Returns:
        New list of exercises
    """
    if feedback is DifficultyFeedback.TOO_EASY:
        return [
            e.with_sets_reps(min(e.default_sets + 1, MAX_SETS), e.default_reps + REP_STEP)
            for e in exercises
        ]
    if feedback is DifficultyFeedback.TOO_HARD:
        return [
            e.with_sets_reps(max(e.default_sets - 1, MIN_SETS), max(e.default_reps - REP_STEP, MIN_REPS))
            for e in exercises
        ]
    return list(exercises)
