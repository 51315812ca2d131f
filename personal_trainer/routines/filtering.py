# personal_trainer/routines/filtering.py
from typing import Callable, List, Optional, Sequence

from personal_trainer.data.catalog import Exercise
from personal_trainer.data.classification import ClassificationTables
from personal_trainer.routines.policy import ExperienceLevel
from personal_trainer.routines.profile import UserProfile

MINOR_AGE = 18
MIDDLE_AGE = 45
SENIOR_AGE = 55


def stable_partition(exercises: Sequence[Exercise], predicate: Callable[[Exercise], bool]) -> List[Exercise]:
    """Move exercises matching ``predicate`` to the front, keeping relative order on both sides."""
    front = [e for e in exercises if predicate(e)]
    back = [e for e in exercises if not predicate(e)]
    return front + back


class ProfileFilter:
    """
    Narrow and reorder an exercise list for a user's age and experience.

    Age rules always run first, then exactly one experience rule. The result
    only ever contains exercises from the input, so applying the filter a
    second time with the same profile changes nothing.
    """
    def __init__(self, tables: Optional[ClassificationTables] = None):
        self.tables = tables or ClassificationTables.default()

    def filter(self, exercises: Sequence[Exercise], profile: UserProfile) -> List[Exercise]:
        """
        Apply age and experience rules.

        Args:
            exercises: Candidate exercises, in priority order
            profile: User profile

        Returns:
            Filtered exercises
        """
        result = self._apply_age_rules(list(exercises), profile.age)
        return self._apply_experience_rules(result, profile.experience)

    def _apply_age_rules(self, exercises: List[Exercise], age: int) -> List[Exercise]:
        tables = self.tables

        if age < MINOR_AGE:
            exercises = [e for e in exercises if not tables.is_advanced(e.name)]

        if age >= SENIOR_AGE:
            exercises = [e for e in exercises if not tables.is_high_impact(e.name)]
            exercises = stable_partition(exercises, lambda e: tables.is_low_impact(e.name))
        elif age >= MIDDLE_AGE:
            # Only high-impact cardio is dropped; strength work stays
            exercises = [e for e in exercises if not (e.is_cardio and tables.is_high_impact(e.name))]

        return exercises

    def _apply_experience_rules(self, exercises: List[Exercise], experience: ExperienceLevel) -> List[Exercise]:
        tables = self.tables

        if experience is ExperienceLevel.BEGINNER:
            exercises = [e for e in exercises if not tables.is_advanced(e.name)]
            return stable_partition(exercises, lambda e: tables.is_beginner_friendly(e.name))

        if experience is ExperienceLevel.ADVANCED:
            return stable_partition(exercises, lambda e: e.is_compound)

        return exercises
