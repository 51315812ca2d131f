import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from personal_trainer.data.catalog import Exercise, ExerciseCatalog, ExerciseType
from personal_trainer.data.classification import ClassificationTables
from personal_trainer.routines.policy import ExperienceLevel, FitnessGoal, WorkoutSplit
from personal_trainer.routines.profile import UserProfile


def make_exercise(name, muscles, exercise_type=ExerciseType.STRENGTH, sets=3, reps=10):
    return Exercise(
        name=name,
        muscle_groups=tuple(muscles),
        exercise_type=exercise_type,
        default_sets=sets,
        default_reps=reps,
    )


@pytest.fixture
def small_catalog():
    return ExerciseCatalog([
        make_exercise("Bench Press", ["Chest", "Triceps", "Shoulders"], ExerciseType.COMPOUND, 4, 8),
        make_exercise("Push-Ups", ["Chest", "Triceps", "Shoulders"], ExerciseType.COMPOUND),
        make_exercise("Dumbbell Flyes", ["Chest"]),
        make_exercise("Pull-Ups", ["Back", "Biceps"], ExerciseType.COMPOUND),
        make_exercise("Lat Pulldown", ["Back", "Biceps"], ExerciseType.COMPOUND),
        make_exercise("Barbell Squats", ["Quads", "Glutes", "Hamstrings"], ExerciseType.COMPOUND, 4, 6),
        make_exercise("Leg Press", ["Quads", "Glutes", "Hamstrings"], ExerciseType.COMPOUND),
        make_exercise("Lateral Raises", ["Shoulders"]),
        make_exercise("Planks", ["Core"], reps=60),
        make_exercise("Burpees", ["Cardio", "Full Body"], ExerciseType.CARDIO, 1, 10),
        make_exercise("Stationary Bike", ["Cardio", "Legs"], ExerciseType.CARDIO, 1, 10),
        make_exercise("Jump Rope", ["Cardio", "Calves"], ExerciseType.CARDIO, 1, 10),
    ])


@pytest.fixture
def small_tables():
    return ClassificationTables.build(
        advanced_only=["Pull-Ups", "Barbell Squats"],
        beginner_friendly=["Push-Ups", "Lat Pulldown", "Leg Press", "Planks", "Stationary Bike"],
        low_impact=["Dumbbell Flyes", "Lat Pulldown", "Leg Press", "Stationary Bike"],
        high_impact=["Barbell Squats", "Burpees", "Jump Rope"],
        glute_focused=["Leg Press"],
        upper_body_mass=["Bench Press", "Pull-Ups"],
    )


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def adult_profile():
    return UserProfile(
        age=30,
        goal=FitnessGoal.BUILD_MUSCLE,
        experience=ExperienceLevel.INTERMEDIATE,
        split=WorkoutSplit.PUSH_PULL_LEGS,
    )
