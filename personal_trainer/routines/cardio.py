# personal_trainer/routines/cardio.py
import logging
from typing import FrozenSet, List, Optional, Sequence

from personal_trainer.data.catalog import Exercise, ExerciseCatalog
from personal_trainer.routines.filtering import SENIOR_AGE, ProfileFilter
from personal_trainer.routines.policy import FitnessGoal, duration_policy
from personal_trainer.routines.profile import UserProfile
from personal_trainer.routines.selection import CategorySelector

logger = logging.getLogger(__name__)

HIGH_INTENSITY_CARDIO: FrozenSet[str] = frozenset([
    "Burpees", "Mountain Climbers", "High Knees", "Jump Rope", "Sprint Intervals",
    "Battle Ropes", "Kettlebell Swings", "Box Jumps", "Jumping Jacks",
])

LOW_INTENSITY_CARDIO: FrozenSet[str] = frozenset([
    "Stationary Bike", "Elliptical", "Incline Walking", "Rowing Machine",
])

STEADY_STATE_CARDIO: FrozenSet[str] = frozenset([
    "Treadmill Running", "Rowing Machine", "Stationary Bike", "Elliptical",
    "Stair Climber", "Jump Rope",
])

FINISHER_SIZE = 2


class CardioFinisherComposer:
    """
    Build the short cardio block that closes a strength session.

    The finisher is sized so its total minutes match the duration tier's
    cardio budget however many exercises end up in it.
    """
    def __init__(self,
                 catalog: ExerciseCatalog,
                 profile_filter: ProfileFilter,
                 selector: CategorySelector):
        self.catalog = catalog
        self.profile_filter = profile_filter
        self.selector = selector

    def finish(self, profile: UserProfile, exclude: Sequence[str] = ()) -> List[Exercise]:
        """
        Choose and time the cardio finisher for a profile.

        Args:
            profile: User profile
            exclude: Exercise names already used in the day

        Returns:
            1-2 cardio exercises, each a single timed set
        """
        candidates = [
            e for e in self.profile_filter.filter(self.catalog.cardio(), profile)
            if e.name not in exclude
        ]
        pool, count = self._finisher_pool(candidates, profile)
        if not pool:
            # Goal-specific options were all filtered out
            pool = candidates

        chosen = self.selector.sample(pool, count)
        minutes = duration_policy(profile.duration).cardio_minutes // max(1, len(chosen))

        if not chosen:
            logger.debug("No cardio available for finisher (goal=%s, age=%d)", profile.goal.value, profile.age)

        return [exercise.as_cardio(minutes) for exercise in chosen]

    def _finisher_pool(self, candidates: List[Exercise], profile: UserProfile):
        tables = self.profile_filter.tables

        if profile.age >= SENIOR_AGE:
            return [e for e in candidates if tables.is_low_impact(e.name)], FINISHER_SIZE

        goal = profile.goal
        if goal in (FitnessGoal.LOSE_WEIGHT, FitnessGoal.TONE_UP):
            return _named(candidates, HIGH_INTENSITY_CARDIO), FINISHER_SIZE
        if goal in (FitnessGoal.BUILD_MUSCLE, FitnessGoal.INCREASE_STRENGTH):
            return _named(candidates, LOW_INTENSITY_CARDIO), 1
        if goal is FitnessGoal.IMPROVE_ENDURANCE:
            return _named(candidates, STEADY_STATE_CARDIO), FINISHER_SIZE
        return candidates, FINISHER_SIZE


def _named(exercises: List[Exercise], names: FrozenSet[str]) -> List[Exercise]:
    return [e for e in exercises if e.name in names]


def finisher_minutes(exercises: Optional[Sequence[Exercise]]) -> int:
    """Total minutes of a finisher block."""
    return sum(e.default_reps for e in exercises or () if e.is_cardio)
