"""Plan generation: profile filtering, selection, day composition and adjustments."""

from personal_trainer.routines.adjustments import adjust_for_difficulty, adjust_for_goal, scale_exercises
from personal_trainer.routines.cardio import CardioFinisherComposer
from personal_trainer.routines.filtering import ProfileFilter
from personal_trainer.routines.policy import (
    DifficultyFeedback,
    ExperienceLevel,
    FitnessGoal,
    Gender,
    MuscleFrequency,
    WorkoutDuration,
    WorkoutSplit
)
from personal_trainer.routines.profile import UserProfile, age_from_birth_date
from personal_trainer.routines.rationale import RationaleGenerator
from personal_trainer.routines.selection import CategorySelector
from personal_trainer.routines.workout_generator import (
    GeneratedWorkoutDay,
    WorkoutPlanGenerator,
    format_plans_for_display,
    generate_personalized_plans,
    generate_plans,
    plans_to_frame,
    replace_exercise,
    summarize_week
)

__all__ = [
    'adjust_for_difficulty',
    'adjust_for_goal',
    'scale_exercises',
    'CardioFinisherComposer',
    'ProfileFilter',
    'DifficultyFeedback',
    'ExperienceLevel',
    'FitnessGoal',
    'Gender',
    'MuscleFrequency',
    'WorkoutDuration',
    'WorkoutSplit',
    'UserProfile',
    'age_from_birth_date',
    'RationaleGenerator',
    'CategorySelector',
    'GeneratedWorkoutDay',
    'WorkoutPlanGenerator',
    'format_plans_for_display',
    'generate_personalized_plans',
    'generate_plans',
    'plans_to_frame',
    'replace_exercise',
    'summarize_week'
]
