# personal_trainer/routines/workout_generator.py
import math
import logging
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from personal_trainer.data.catalog import Exercise, ExerciseCatalog, CATEGORY_RULES
from personal_trainer.data.classification import ClassificationTables
from personal_trainer.routines.adjustments import adjust_for_difficulty, adjust_for_goal, scale_exercises
from personal_trainer.routines.cardio import CardioFinisherComposer, finisher_minutes
from personal_trainer.routines.filtering import ProfileFilter
from personal_trainer.routines.policy import (
    MAX_DAYS_PER_WEEK,
    MIN_DAYS_PER_WEEK,
    SPLIT_MIN_DAYS,
    DifficultyFeedback,
    FitnessGoal,
    Gender,
    MuscleFrequency,
    WorkoutDuration,
    WorkoutSplit,
    duration_policy,
    goal_policy
)
from personal_trainer.routines.profile import UserProfile
from personal_trainer.routines.rationale import RationaleGenerator
from personal_trainer.routines.selection import CategorySelector, CategoryRequest, make_rng

logger = logging.getLogger(__name__)

MINUTES_PER_EXERCISE = 7


@dataclass(frozen=True)
class DayTemplate:
    """
    Category-weight template for one kind of training day.

    ``slots`` are ordered (category, count) pairs. Categories may repeat;
    the selector skips anything already picked, so interleaving categories
    keeps a trimmed session balanced.
    """
    name: str
    description: str
    icon: str
    label: str
    kind: str
    slots: Tuple[Tuple[str, int], ...]


# Define day templates
FULL_BODY_TEMPLATES = (
    DayTemplate(
        name="Full Body",
        description="Compound-led session covering chest, back, legs, shoulders and core",
        icon="figure.highintensity.intervaltraining",
        label="full body",
        kind='full_body',
        slots=(('chest', 1), ('back', 1), ('quads', 1), ('shoulders', 1), ('core', 1),
               ('hamstrings', 1), ('chest', 1), ('back', 1), ('quads', 1), ('core', 1)),
    ),
    DayTemplate(
        name="Full Body",
        description="Posterior chain emphasis with chest, shoulders and core",
        icon="figure.highintensity.intervaltraining",
        label="full body",
        kind='full_body',
        slots=(('back', 1), ('hamstrings', 1), ('chest', 1), ('shoulders', 1), ('core', 1),
               ('glutes', 1), ('quads', 1), ('back', 1), ('shoulders', 1), ('core', 1)),
    ),
)

UPPER_TEMPLATES = (
    DayTemplate(
        name="Upper Body",
        description="Chest and back focus",
        icon="figure.arms.open",
        label="upper body",
        kind='upper',
        slots=(('chest', 1), ('back', 1), ('shoulders', 1), ('chest', 1), ('back', 1),
               ('biceps', 1), ('triceps', 1), ('chest', 1), ('back', 1), ('shoulders', 1)),
    ),
    DayTemplate(
        name="Upper Body",
        description="Shoulders and arms focus",
        icon="figure.strengthtraining.traditional",
        label="upper body",
        kind='upper',
        slots=(('shoulders', 1), ('back', 1), ('chest', 1), ('biceps', 1), ('triceps', 1),
               ('shoulders', 1), ('biceps', 1), ('triceps', 1), ('back', 1), ('shoulders', 1)),
    ),
)

LOWER_TEMPLATES = (
    DayTemplate(
        name="Lower Body",
        description="Quad and glute focus",
        icon="figure.walk",
        label="lower body",
        kind='lower',
        slots=(('quads', 1), ('glutes', 1), ('hamstrings', 1), ('quads', 1), ('core', 1),
               ('calves', 1), ('glutes', 1), ('quads', 1), ('core', 1), ('calves', 1)),
    ),
    DayTemplate(
        name="Lower Body",
        description="Hamstring and posterior chain focus",
        icon="figure.walk.circle.fill",
        label="lower body",
        kind='lower',
        slots=(('hamstrings', 1), ('glutes', 1), ('quads', 1), ('hamstrings', 1), ('core', 1),
               ('calves', 1), ('hamstrings', 1), ('glutes', 1), ('core', 1), ('quads', 1)),
    ),
)

PUSH_TEMPLATES = (
    DayTemplate(
        name="Push",
        description="Chest focused push",
        icon="arrow.up.circle.fill",
        label="push",
        kind='push',
        slots=(('chest', 1), ('shoulders', 1), ('triceps', 1), ('chest', 1), ('shoulders', 1),
               ('triceps', 1), ('chest', 2), ('shoulders', 1), ('triceps', 1)),
    ),
    DayTemplate(
        name="Push",
        description="Shoulder focused push",
        icon="arrow.up.circle.fill",
        label="push",
        kind='push',
        slots=(('shoulders', 1), ('chest', 1), ('triceps', 1), ('shoulders', 1), ('chest', 1),
               ('triceps', 1), ('shoulders', 2), ('chest', 1), ('triceps', 1)),
    ),
)

PULL_TEMPLATES = (
    DayTemplate(
        name="Pull",
        description="Back width focus",
        icon="arrow.down.circle.fill",
        label="pull",
        kind='pull',
        slots=(('back_width', 2), ('back', 1), ('biceps', 1), ('rear_delts', 1), ('back', 1),
               ('biceps', 1), ('back', 1), ('rear_delts', 1), ('biceps', 1)),
    ),
    DayTemplate(
        name="Pull",
        description="Back thickness focus",
        icon="arrow.down.circle.fill",
        label="pull",
        kind='pull',
        slots=(('back_thickness', 2), ('back', 1), ('biceps', 1), ('rear_delts', 1), ('back', 1),
               ('biceps', 1), ('back', 1), ('rear_delts', 1), ('biceps', 1)),
    ),
)

LEGS_TEMPLATES = (
    DayTemplate(
        name="Legs",
        description="Quad dominant",
        icon="figure.walk.circle.fill",
        label="leg",
        kind='legs',
        slots=(('quads', 2), ('glutes', 1), ('hamstrings', 1), ('calves', 1), ('core', 1),
               ('quads', 1), ('glutes', 1), ('calves', 1), ('core', 1)),
    ),
    DayTemplate(
        name="Legs",
        description="Hamstring dominant",
        icon="figure.walk.circle.fill",
        label="leg",
        kind='legs',
        slots=(('hamstrings', 2), ('glutes', 1), ('quads', 1), ('calves', 1), ('core', 1),
               ('hamstrings', 1), ('glutes', 1), ('calves', 1), ('core', 1)),
    ),
)

# Day kinds that receive an extra emphasis slot for a gender/goal pairing
GLUTE_EMPHASIS_KINDS = frozenset(['lower', 'legs', 'full_body'])
MASS_EMPHASIS_KINDS = frozenset(['upper', 'push', 'pull', 'full_body'])

# Non-personalized plans pick the split from the day count
LEGACY_SPLITS: Dict[int, WorkoutSplit] = {
    1: WorkoutSplit.FULL_BODY,
    2: WorkoutSplit.UPPER_LOWER,
    3: WorkoutSplit.PUSH_PULL_LEGS,
    4: WorkoutSplit.UPPER_LOWER,
    5: WorkoutSplit.PUSH_PULL_LEGS,
    6: WorkoutSplit.PUSH_PULL_LEGS,
}

# Training days (1) and rest days (0), Monday first
SCHEDULE_PATTERNS: Dict[int, List[int]] = {
    1: [1, 0, 0, 0, 0, 0, 0],
    2: [1, 0, 0, 1, 0, 0, 0],
    3: [1, 0, 1, 0, 1, 0, 0],
    4: [1, 1, 0, 1, 1, 0, 0],
    5: [1, 1, 1, 0, 1, 1, 0],
    6: [1, 1, 1, 1, 1, 1, 0],
}
WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


@dataclass(frozen=True)
class GeneratedWorkoutDay:
    """One generated training day: strength block followed by any cardio finisher."""
    name: str
    description: str
    exercises: Tuple[Exercise, ...]
    icon: str
    rationale: str = ""

    @property
    def exercise_names(self) -> List[str]:
        return [e.name for e in self.exercises]

    @property
    def strength_exercises(self) -> List[Exercise]:
        return [e for e in self.exercises if not e.is_cardio]

    @property
    def finisher(self) -> List[Exercise]:
        return [e for e in self.exercises if e.is_cardio]

    @property
    def estimated_duration(self) -> int:
        """Minutes: about 7 per strength exercise plus the finisher."""
        return len(self.strength_exercises) * MINUTES_PER_EXERCISE + finisher_minutes(self.finisher)

    @property
    def estimated_calories(self) -> int:
        strength = sum(e.calories_per_minute * MINUTES_PER_EXERCISE for e in self.strength_exercises)
        cardio = sum(e.calories_per_minute * e.default_reps for e in self.finisher)
        return strength + cardio


class WorkoutPlanGenerator:
    """
    Generate weekly training plans from the exercise catalog.

    Personalized plans filter every category for the user's age and
    experience, stamp goal-specific sets and reps, trim to the session
    length and add a cardio finisher and rationale. Non-personalized plans
    run the same composition without those profile steps.
    """
    def __init__(self,
                 catalog: Optional[ExerciseCatalog] = None,
                 tables: Optional[ClassificationTables] = None,
                 seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None):
        """
        Initialize the workout plan generator.

        Args:
            catalog: Exercise catalog (defaults to the bundled library)
            tables: Classification tables (defaults to the bundled tables)
            seed: Seed for the random source, for reproducible plans
            rng: Random source; takes precedence over ``seed``
        """
        self.catalog = catalog if catalog is not None else ExerciseCatalog.default()
        self.tables = tables if tables is not None else ClassificationTables.default()
        self.rng = make_rng(seed, rng)

        self.profile_filter = ProfileFilter(self.tables)
        self.selector = CategorySelector(self.rng)
        self.cardio = CardioFinisherComposer(self.catalog, self.profile_filter, self.selector)
        self.rationale = RationaleGenerator()

    # Public entry points

    def generate_personalized_plans(self, profile: UserProfile, days_per_week: int) -> List[GeneratedWorkoutDay]:
        """
        Create one plan per training day for a user profile.

        Args:
            profile: User profile
            days_per_week: Requested training days (clamped to 1-6)

        Returns:
            Ordered list of day plans
        """
        profile = profile.normalized()
        days = clamp_days(days_per_week)

        if days < SPLIT_MIN_DAYS[profile.split]:
            logger.info("%d days is below the recommended minimum for %s",
                        days, profile.split.value)

        plans = self._compose(profile.split, days, profile.muscle_frequency, profile, profile.duration)
        logger.debug("Generated %d personalized days (%s, %s)",
                     len(plans), profile.split.value, profile.goal.value)
        return plans

    def generate_plans(self, days_per_week: int) -> List[GeneratedWorkoutDay]:
        """
        Create a non-personalized split for a number of training days.

        Exercises keep their catalog sets and reps and there is no cardio
        finisher.

        Args:
            days_per_week: Requested training days (clamped to 1-6)

        Returns:
            Ordered list of day plans
        """
        days = clamp_days(days_per_week)
        split = LEGACY_SPLITS[days]
        return self._compose(split, days, MuscleFrequency.TWICE, None, WorkoutDuration.STANDARD)

    @staticmethod
    def adjust_for_difficulty(exercises: Sequence[Exercise], feedback: DifficultyFeedback) -> List[Exercise]:
        return adjust_for_difficulty(exercises, feedback)

    def alternatives_for(self,
                         day: GeneratedWorkoutDay,
                         index: int,
                         profile: Optional[UserProfile] = None) -> List[Exercise]:
        """
        Replacement candidates for the exercise at ``index``.

        Args:
            day: Day the exercise belongs to; its other exercises are never suggested
            index: Position of the exercise in ``day.exercises``
            profile: When given, candidates the profile's age and experience
                rules would exclude are dropped

        Returns:
            Candidates, most shared muscle groups first
        """
        exercise = day.exercises[index]
        candidates = self.catalog.alternatives_for(exercise, exclude=day.exercise_names)
        if profile is None:
            return candidates

        allowed = {e.name for e in self.profile_filter.filter(candidates, profile.normalized())}
        return [e for e in candidates if e.name in allowed]

    # Composition

    def _compose(self,
                 split: WorkoutSplit,
                 days: int,
                 frequency: MuscleFrequency,
                 profile: Optional[UserProfile],
                 duration: WorkoutDuration) -> List[GeneratedWorkoutDay]:
        base_pools = self._category_pools(profile)

        if split is WorkoutSplit.FULL_BODY:
            plans = self._compose_full_body(days, frequency, base_pools, profile, duration)
        elif split is WorkoutSplit.UPPER_LOWER:
            plans = self._compose_upper_lower(days, frequency, base_pools, profile, duration)
        else:
            plans = self._compose_push_pull_legs(days, frequency, base_pools, profile, duration)

        return label_days(plans)

    def _compose_full_body(self, days, frequency, base_pools, profile, duration) -> List[GeneratedWorkoutDay]:
        sessions = min(days, 2 * frequency.value)
        plans = []
        for i in range(sessions):
            template = FULL_BODY_TEMPLATES[i % 2]
            # Past the two templates every session gets freshly shuffled pools
            pools = self._reshuffle(base_pools) if i >= len(FULL_BODY_TEMPLATES) else base_pools
            plans.append(self._build_day(template, pools, profile, duration))
        return plans

    def _compose_upper_lower(self, days, frequency, base_pools, profile, duration) -> List[GeneratedWorkoutDay]:
        upper_days = min(math.ceil(days / 2), frequency.value)
        lower_days = min(days // 2, frequency.value)

        uppers = self._sessions(UPPER_TEMPLATES, upper_days, base_pools, profile, duration)
        lowers = self._sessions(LOWER_TEMPLATES, lower_days, base_pools, profile, duration)

        # Interleave upper, lower, upper, lower, ...
        plans = []
        for i in range(max(len(uppers), len(lowers))):
            if i < len(uppers):
                plans.append(uppers[i])
            if i < len(lowers):
                plans.append(lowers[i])
        return plans

    def _sessions(self, templates, count, base_pools, profile, duration) -> List[GeneratedWorkoutDay]:
        """Alternate between templates; only the first session uses the priority-ordered pools."""
        sessions = []
        for i in range(count):
            pools = self._reshuffle(base_pools) if i else base_pools
            sessions.append(self._build_day(templates[i % len(templates)], pools, profile, duration))
        return sessions

    def _compose_push_pull_legs(self, days, frequency, base_pools, profile, duration) -> List[GeneratedWorkoutDay]:
        cycles = max(1, frequency.value)
        plans = []
        for cycle in range(cycles):
            pools = self._reshuffle(base_pools) if cycle >= 2 else base_pools
            for templates in (PUSH_TEMPLATES, PULL_TEMPLATES, LEGS_TEMPLATES):
                if len(plans) >= days:
                    return plans
                plans.append(self._build_day(templates[cycle % 2], pools, profile, duration))
        return plans

    def _build_day(self,
                   template: DayTemplate,
                   pools: Dict[str, List[Exercise]],
                   profile: Optional[UserProfile],
                   duration: WorkoutDuration) -> GeneratedWorkoutDay:
        requests: List[CategoryRequest] = [(pools[category], count) for category, count in template.slots]
        if profile is not None:
            requests = self._emphasis_requests(template, pools, profile) + requests

        strength = self.selector.select(requests)
        if profile is not None:
            strength = adjust_for_goal(strength, profile.goal, self.rng)
        strength = scale_exercises(strength, duration_policy(duration).exercise_count)

        finisher: List[Exercise] = []
        rationale = ""
        if profile is not None:
            finisher = self.cardio.finish(profile, exclude=[e.name for e in strength])
            rationale = self.rationale.rationale(profile, template.label)

        return GeneratedWorkoutDay(
            name=template.name,
            description=template.description,
            exercises=tuple(strength + finisher),
            icon=template.icon,
            rationale=rationale,
        )

    def _emphasis_requests(self,
                           template: DayTemplate,
                           pools: Dict[str, List[Exercise]],
                           profile: UserProfile) -> List[CategoryRequest]:
        if profile.gender is Gender.FEMALE and profile.goal is FitnessGoal.TONE_UP:
            group, kinds = self.tables.glute_focused, GLUTE_EMPHASIS_KINDS
        elif profile.gender is Gender.MALE and profile.goal in (FitnessGoal.BUILD_MUSCLE, FitnessGoal.INCREASE_STRENGTH):
            group, kinds = self.tables.upper_body_mass, MASS_EMPHASIS_KINDS
        else:
            return []

        if template.kind not in kinds:
            return []

        # Only draw from the day's own categories, keeping pool priority order
        emphasis = []
        seen = set()
        for category, _ in template.slots:
            for exercise in pools[category]:
                if exercise.name in group and exercise.name not in seen:
                    seen.add(exercise.name)
                    emphasis.append(exercise)
        return [(emphasis, 1)]

    def _category_pools(self, profile: Optional[UserProfile]) -> Dict[str, List[Exercise]]:
        pools = self.catalog.categories()
        if profile is None:
            return pools
        return {name: self.profile_filter.filter(pool, profile) for name, pool in pools.items()}

    def _reshuffle(self, pools: Dict[str, List[Exercise]]) -> Dict[str, List[Exercise]]:
        return {name: self.selector.shuffled(pools[name]) for name in CATEGORY_RULES}

    # Display

    def format_plans_for_display(self,
                                 plans: Sequence[GeneratedWorkoutDay],
                                 profile: Optional[UserProfile] = None) -> Dict:
        """Format generated days for display or JSON export."""
        return format_plans_for_display(plans, profile)


def clamp_days(days_per_week: int) -> int:
    """Clamp requested days into the supported 1-6 range."""
    days = min(max(int(days_per_week), MIN_DAYS_PER_WEEK), MAX_DAYS_PER_WEEK)
    if days != days_per_week:
        logger.warning("days_per_week=%s clamped to %d", days_per_week, days)
    return days


def label_days(plans: Sequence[GeneratedWorkoutDay]) -> List[GeneratedWorkoutDay]:
    """
    Suffix multi-word day names with A, B, C... when a name repeats.

    Single-word names such as "Push" are left as they are.
    """
    counts: Dict[str, int] = {}
    for plan in plans:
        counts[plan.name] = counts.get(plan.name, 0) + 1

    seen: Dict[str, int] = {}
    labeled = []
    for plan in plans:
        if " " in plan.name and counts[plan.name] > 1:
            index = seen.get(plan.name, 0)
            seen[plan.name] = index + 1
            plan = replace(plan, name=f"{plan.name} {chr(ord('A') + index)}")
        labeled.append(plan)
    return labeled


def replace_exercise(day: GeneratedWorkoutDay, index: int, new_exercise: Exercise) -> GeneratedWorkoutDay:
    """
    Swap one exercise in a day, keeping the old slot's sets and reps.

    An out-of-range index, or an exercise already elsewhere in the day,
    leaves the day unchanged.
    """
    if not 0 <= index < len(day.exercises):
        return day

    current = day.exercises[index]
    others = [e.name for i, e in enumerate(day.exercises) if i != index]
    if new_exercise.name in others:
        logger.warning("%s is already in %s", new_exercise.name, day.name)
        return day

    exercises = list(day.exercises)
    exercises[index] = new_exercise.with_sets_reps(current.default_sets, current.default_reps)
    return replace(day, exercises=tuple(exercises))


def plans_to_frame(plans: Sequence[GeneratedWorkoutDay]) -> pd.DataFrame:
    """
    Flatten generated days into one row per exercise.

    Args:
        plans: Generated day plans

    Returns:
        DataFrame with day, exercise and prescription columns
    """
    rows = []
    for day_number, plan in enumerate(plans, start=1):
        for order, exercise in enumerate(plan.exercises, start=1):
            rows.append({
                'day': day_number,
                'day_name': plan.name,
                'order': order,
                'exercise': exercise.name,
                'exercise_type': exercise.exercise_type.value,
                'muscle_groups': ", ".join(exercise.muscle_groups),
                'sets': exercise.default_sets,
                'reps': exercise.default_reps,
                'is_finisher': exercise.is_cardio,
            })
    columns = ['day', 'day_name', 'order', 'exercise', 'exercise_type',
               'muscle_groups', 'sets', 'reps', 'is_finisher']
    return pd.DataFrame(rows, columns=columns)


def sets_per_muscle(plans: Sequence[GeneratedWorkoutDay]) -> pd.Series:
    """Weekly strength sets per muscle group, largest first."""
    rows = [
        {'muscle': muscle, 'sets': exercise.default_sets}
        for plan in plans
        for exercise in plan.strength_exercises
        for muscle in exercise.muscle_groups
    ]
    if not rows:
        return pd.Series(dtype='int64', name='sets')
    df = pd.DataFrame(rows)
    return df.groupby('muscle')['sets'].sum().sort_values(ascending=False)


def summarize_week(plans: Sequence[GeneratedWorkoutDay]) -> Dict:
    """Weekly totals used in plan summaries."""
    return {
        'days': len(plans),
        'total_exercises': sum(len(plan.exercises) for plan in plans),
        'total_sets': sum(e.default_sets for plan in plans for e in plan.strength_exercises),
        'estimated_minutes': sum(plan.estimated_duration for plan in plans),
        'estimated_calories': sum(plan.estimated_calories for plan in plans),
        'sets_per_muscle': {muscle: int(sets) for muscle, sets in sets_per_muscle(plans).items()},
    }


def generate_personalized_plans(profile: UserProfile,
                                days_per_week: int,
                                seed: Optional[int] = None) -> List[GeneratedWorkoutDay]:
    return WorkoutPlanGenerator(seed=seed).generate_personalized_plans(profile, days_per_week)


def generate_plans(days_per_week: int, seed: Optional[int] = None) -> List[GeneratedWorkoutDay]:
    return WorkoutPlanGenerator(seed=seed).generate_plans(days_per_week)


def format_plans_for_display(plans: Sequence[GeneratedWorkoutDay],
                             profile: Optional[UserProfile] = None) -> Dict:
    """
    Format generated days for user-friendly display.

    Args:
        plans: Generated day plans
        profile: Profile the plans were generated for, if any

    Returns:
        Formatted plan for display or JSON export
    """
    rest = profile.recommended_rest_seconds if profile else 60

    if profile:
        policy = goal_policy(profile.goal)
        goal = policy.label
        split = profile.split.value.replace('_', ' ').title()
        display = {
            'name': f"{profile.experience.value.capitalize()} {split} - {goal} Program",
            'description': f"A {len(plans)}-day {split.lower()} plan focused on {goal.lower()}.",
            'details': {
                'Experience Level': profile.experience.value.capitalize(),
                'Goal': goal,
                'Days Per Week': len(plans),
                'Split Type': split,
                'Session Length': f"{duration_policy(profile.duration).minutes} min",
                'Cardio Share': f"{round(policy.cardio_ratio * 100)}%",
            },
        }
    else:
        display = {
            'name': f"{len(plans)}-Day Split",
            'description': f"A {len(plans)}-day training split.",
            'details': {'Days Per Week': len(plans)},
        }

    # Format weekly schedule
    pattern = SCHEDULE_PATTERNS.get(len(plans), SCHEDULE_PATTERNS[MAX_DAYS_PER_WEEK])
    upcoming = iter(plans)
    schedule = []
    for weekday, trains in zip(WEEKDAYS, pattern):
        plan = next(upcoming, None) if trains else None
        schedule.append(f"{weekday}: {plan.name}" if plan else f"{weekday}: Rest Day")
    display['weekly_schedule'] = schedule

    # Format workouts
    workouts = []
    for plan in plans:
        exercises = []
        for exercise in plan.exercises:
            exercises.append({
                'name': exercise.name,
                'type': exercise.exercise_type.value.capitalize(),
                'target': ", ".join(exercise.muscle_groups) or 'Multiple',
                'sets': exercise.default_sets,
                'reps': f"{exercise.default_reps} min" if exercise.is_cardio else exercise.default_reps,
                'rest': 'None' if exercise.is_cardio else f"{rest} sec",
                'notes': 'Cardio finisher' if exercise.is_cardio else 'Strength exercise',
                'instructions': exercise.instructions,
            })
        workouts.append({
            'name': plan.name,
            'description': plan.description,
            'rationale': plan.rationale,
            'estimated_duration': plan.estimated_duration,
            'exercises': exercises,
        })
    display['workouts'] = workouts
    display['summary'] = summarize_week(plans)

    return display

