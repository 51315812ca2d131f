import numpy as np
import pytest

from personal_trainer.data.catalog import ExerciseCatalog
from personal_trainer.data.classification import ClassificationTables
from personal_trainer.routines.cardio import (
    HIGH_INTENSITY_CARDIO,
    LOW_INTENSITY_CARDIO,
    STEADY_STATE_CARDIO,
    CardioFinisherComposer,
    finisher_minutes
)
from personal_trainer.routines.filtering import ProfileFilter
from personal_trainer.routines.policy import DURATION_POLICY, FitnessGoal, WorkoutDuration
from personal_trainer.routines.profile import UserProfile
from personal_trainer.routines.selection import CategorySelector


def composer(catalog=None, tables=None, seed=0):
    catalog = catalog or ExerciseCatalog.default()
    return CardioFinisherComposer(
        catalog,
        ProfileFilter(tables or ClassificationTables.default()),
        CategorySelector(np.random.default_rng(seed)),
    )


def names(exercises):
    return {e.name for e in exercises}


@pytest.mark.parametrize("seed", range(5))
def test_senior_gets_low_impact_cardio(seed):
    tables = ClassificationTables.default()
    finisher = composer(seed=seed).finish(UserProfile(age=65, goal=FitnessGoal.LOSE_WEIGHT))

    assert 1 <= len(finisher) <= 2
    assert names(finisher) <= tables.low_impact
    assert all(e.is_cardio for e in finisher)


@pytest.mark.parametrize("goal", [FitnessGoal.BUILD_MUSCLE, FitnessGoal.INCREASE_STRENGTH])
def test_strength_goals_get_one_low_intensity_exercise(goal):
    finisher = composer().finish(UserProfile(age=30, goal=goal))

    assert len(finisher) == 1
    assert names(finisher) <= LOW_INTENSITY_CARDIO
    assert finisher[0].default_sets == 1
    assert finisher[0].default_reps == 10


@pytest.mark.parametrize("goal", [FitnessGoal.LOSE_WEIGHT, FitnessGoal.TONE_UP])
def test_fat_loss_goals_get_high_intensity(goal):
    finisher = composer().finish(UserProfile(age=30, goal=goal))
    assert len(finisher) == 2
    assert names(finisher) <= HIGH_INTENSITY_CARDIO


def test_endurance_gets_steady_state():
    finisher = composer().finish(UserProfile(age=30, goal=FitnessGoal.IMPROVE_ENDURANCE))
    assert len(finisher) == 2
    assert names(finisher) <= STEADY_STATE_CARDIO


def test_general_fitness_uses_whole_cardio_pool():
    catalog = ExerciseCatalog.default()
    finisher = composer(catalog).finish(UserProfile(age=30, goal=FitnessGoal.GENERAL_FITNESS))
    assert len(finisher) == 2
    assert names(finisher) <= names(catalog.cardio())


@pytest.mark.parametrize("duration", list(WorkoutDuration))
@pytest.mark.parametrize("goal", list(FitnessGoal))
def test_finisher_minutes_match_budget(duration, goal):
    budget = DURATION_POLICY[duration].cardio_minutes
    finisher = composer().finish(UserProfile(age=30, goal=goal, duration=duration))

    total = finisher_minutes(finisher)
    assert budget - len(finisher) < total <= budget


def test_middle_aged_loses_high_impact_cardio():
    tables = ClassificationTables.default()
    for seed in range(10):
        finisher = composer(seed=seed).finish(UserProfile(age=50, goal=FitnessGoal.LOSE_WEIGHT))
        assert not names(finisher) & tables.high_impact


def test_minor_never_gets_advanced_cardio():
    tables = ClassificationTables.default()
    for seed in range(10):
        finisher = composer(seed=seed).finish(UserProfile(age=15, goal=FitnessGoal.LOSE_WEIGHT))
        assert not names(finisher) & tables.advanced_only


def test_excluded_names_are_skipped(small_catalog, small_tables):
    finisher = composer(small_catalog, small_tables).finish(
        UserProfile(age=30, goal=FitnessGoal.GENERAL_FITNESS),
        exclude=["Burpees", "Jump Rope"],
    )
    assert names(finisher) == {"Stationary Bike"}
    assert finisher[0].default_reps == 10


def test_falls_back_to_candidates_when_goal_pool_is_empty(small_catalog):
    # No low-impact tags at all, so seniors fall back to what survived the filter
    tables = ClassificationTables.build(high_impact=["Burpees", "Jump Rope"])
    finisher = composer(small_catalog, tables).finish(UserProfile(age=70))

    assert names(finisher) == {"Stationary Bike"}


def test_no_cardio_available(small_catalog, small_tables):
    strength_only = ExerciseCatalog(small_catalog.strength())
    assert composer(strength_only, small_tables).finish(UserProfile(age=30)) == []


def test_finisher_minutes_ignores_strength(small_catalog):
    assert finisher_minutes(small_catalog.strength()) == 0
    assert finisher_minutes(None) == 0
