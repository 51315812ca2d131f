import pytest

from personal_trainer.data.catalog import Exercise, ExerciseCatalog
from personal_trainer.routines.adjustments import adjust_for_difficulty, adjust_for_goal, scale_exercises
from personal_trainer.routines.policy import GOAL_POLICY, DifficultyFeedback, FitnessGoal


@pytest.mark.parametrize("goal", list(FitnessGoal))
def test_goal_adjustment_stays_in_range(goal, rng):
    exercises = ExerciseCatalog.default().strength()
    policy = GOAL_POLICY[goal]

    adjusted = adjust_for_goal(exercises, goal, rng)

    assert len(adjusted) == len(exercises)
    for exercise in adjusted:
        assert policy.sets_range[0] <= exercise.default_sets <= policy.sets_range[1]
        assert policy.reps_range[0] <= exercise.default_reps <= policy.reps_range[1]


def test_goal_adjustment_reaches_both_range_ends(rng):
    exercises = ExerciseCatalog.default().strength() * 5
    adjusted = adjust_for_goal(exercises, FitnessGoal.INCREASE_STRENGTH, rng)

    assert {e.default_sets for e in adjusted} == {4, 5}
    assert {e.default_reps for e in adjusted} == {4, 5, 6}


def test_goal_adjustment_keeps_other_fields(small_catalog, rng):
    exercises = small_catalog.strength()
    adjusted = adjust_for_goal(exercises, FitnessGoal.TONE_UP, rng)

    for before, after in zip(exercises, adjusted):
        assert after.name == before.name
        assert after.muscle_groups == before.muscle_groups
        assert after.exercise_type is before.exercise_type
        assert after.instructions == before.instructions


def test_scale_exercises_trims_without_padding(small_catalog):
    exercises = small_catalog.strength()

    assert scale_exercises(exercises, 4) == exercises[:4]
    assert scale_exercises(exercises, 50) == exercises
    assert scale_exercises(exercises, 0) == []
    assert scale_exercises([], 7) == []


def _exercise(sets, reps):
    return Exercise(name="Bicep Curls", muscle_groups=("Biceps",), default_sets=sets, default_reps=reps)


@pytest.mark.parametrize("sets,reps,expected", [
    (3, 10, (4, 12)),
    (5, 12, (5, 14)),
    (4, 20, (5, 22)),
])
def test_too_easy(sets, reps, expected):
    (adjusted,) = adjust_for_difficulty([_exercise(sets, reps)], DifficultyFeedback.TOO_EASY)
    assert (adjusted.default_sets, adjusted.default_reps) == expected


@pytest.mark.parametrize("sets,reps,expected", [
    (4, 12, (3, 10)),
    (2, 8, (2, 6)),
    (3, 7, (2, 6)),
    (2, 6, (2, 6)),
])
def test_too_hard(sets, reps, expected):
    (adjusted,) = adjust_for_difficulty([_exercise(sets, reps)], DifficultyFeedback.TOO_HARD)
    assert (adjusted.default_sets, adjusted.default_reps) == expected


def test_just_right_is_identity(small_catalog):
    exercises = small_catalog.strength()
    assert adjust_for_difficulty(exercises, DifficultyFeedback.JUST_RIGHT) == exercises


def test_difficulty_bounds_hold_for_whole_catalog():
    exercises = ExerciseCatalog.default().strength()

    easier = adjust_for_difficulty(exercises, DifficultyFeedback.TOO_EASY)
    harder = adjust_for_difficulty(exercises, DifficultyFeedback.TOO_HARD)

    for before, after in zip(exercises, easier):
        assert after.default_sets <= 5
        assert after.default_reps >= before.default_reps
    for after in harder:
        assert after.default_sets >= 2
        assert after.default_reps >= 6


def test_difficulty_adjustment_does_not_mutate(small_catalog):
    exercises = small_catalog.strength()
    before = [(e.default_sets, e.default_reps) for e in exercises]
    adjust_for_difficulty(exercises, DifficultyFeedback.TOO_EASY)
    assert [(e.default_sets, e.default_reps) for e in exercises] == before
