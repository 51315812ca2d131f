# personal_trainer/routines/profile.py
import logging
from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import Dict, Optional, Type, TypeVar, Union

from personal_trainer.routines.policy import (
    ExperienceLevel,
    FitnessGoal,
    Gender,
    MuscleFrequency,
    WorkoutDuration,
    WorkoutSplit,
    duration_for_minutes,
    goal_policy
)

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def age_from_birth_date(birth_date: Union[date, str], today: Optional[date] = None) -> int:
    """
    Whole years between a birth date and today.

    Args:
        birth_date: Date of birth, or an ISO ``YYYY-MM-DD`` string
        today: Reference date (defaults to ``date.today()``)

    Returns:
        Age in years (negative for dates in the future)
    """
    if isinstance(birth_date, str):
        birth_date = date.fromisoformat(birth_date)
    today = today or date.today()
    had_birthday = (today.month, today.day) >= (birth_date.month, birth_date.day)
    return today.year - birth_date.year - (0 if had_birthday else 1)


@dataclass(frozen=True)
class UserProfile:
    """
    Physical profile and training preferences consumed by plan generation.
    """
    age: int
    gender: Gender = Gender.PREFER_NOT_TO_SAY
    goal: FitnessGoal = FitnessGoal.GENERAL_FITNESS
    experience: ExperienceLevel = ExperienceLevel.BEGINNER
    duration: WorkoutDuration = WorkoutDuration.STANDARD
    split: WorkoutSplit = WorkoutSplit.FULL_BODY
    muscle_frequency: MuscleFrequency = MuscleFrequency.TWICE
    height_inches: float = 0.0
    weight_pounds: float = 150.0

    @classmethod
    def from_dict(cls, user_input: Dict, today: Optional[date] = None) -> "UserProfile":
        """
        User-friendly constructor from loosely typed input.

        Unknown tags fall back to the profile defaults. Accepts either ``age``
        or ``birth_date``; ``duration`` may be a tier name or minutes.

        Args:
            user_input: Dictionary with user preferences
            today: Reference date used with ``birth_date``

        Returns:
            UserProfile
        """
        if user_input.get('birth_date') is not None:
            age = age_from_birth_date(user_input['birth_date'], today=today)
        else:
            age = int(user_input.get('age', 30))

        duration = user_input.get('duration', WorkoutDuration.STANDARD)
        if isinstance(duration, int) and not isinstance(duration, bool):
            duration = duration_for_minutes(duration)

        return cls(
            age=age,
            gender=_parse_tag(Gender, user_input.get('gender'), Gender.PREFER_NOT_TO_SAY),
            goal=_parse_tag(FitnessGoal, user_input.get('goal'), FitnessGoal.GENERAL_FITNESS),
            experience=_parse_tag(ExperienceLevel, user_input.get('experience'), ExperienceLevel.BEGINNER),
            duration=_parse_tag(WorkoutDuration, duration, WorkoutDuration.STANDARD),
            split=_parse_tag(WorkoutSplit, user_input.get('split'), WorkoutSplit.FULL_BODY),
            muscle_frequency=_parse_frequency(user_input.get('frequency', 2)),
            height_inches=float(user_input.get('height_inches', 0.0)),
            weight_pounds=float(user_input.get('weight_pounds', 150.0)),
        )

    def normalized(self) -> "UserProfile":
        """Copy with out-of-domain values clamped (negative age becomes 0)."""
        if self.age < 0:
            logger.warning("Negative age %d clamped to 0", self.age)
            return replace(self, age=0)
        return self

    @property
    def bmi(self) -> float:
        # BMI = (weight in pounds x 703) / (height in inches)^2
        if self.height_inches <= 0:
            return 0.0
        return (self.weight_pounds * 703) / (self.height_inches * self.height_inches)

    @property
    def bmi_category(self) -> str:
        bmi = self.bmi
        if bmi < 18.5:
            return "Underweight"
        if bmi < 25:
            return "Normal"
        if bmi < 30:
            return "Overweight"
        return "Obese"

    @property
    def recommended_rest_seconds(self) -> int:
        return goal_policy(self.goal).rest_seconds

    @property
    def recommended_calories_burn(self) -> int:
        """Calories to target per workout, scaled from a 150 lb reference."""
        return int(goal_policy(self.goal).base_calories * (self.weight_pounds / 150.0))


def _parse_tag(enum_cls: Type[E], value, default: E) -> E:
    if value is None:
        return default
    if isinstance(value, enum_cls):
        return value
    key = str(value).strip().lower().replace(' ', '_').replace('-', '_').replace('/', '_')
    try:
        return enum_cls(key)
    except ValueError:
        logger.warning("Unknown %s '%s', using %s", enum_cls.__name__, value, default.value)
        return default


def _parse_frequency(value) -> MuscleFrequency:
    if isinstance(value, MuscleFrequency):
        return value
    if isinstance(value, str):
        # Accept tag names ("once", "three_times") as well as counts
        key = value.strip().upper().replace(' ', '_').replace('-', '_')
        if key in MuscleFrequency.__members__:
            return MuscleFrequency[key]
    try:
        times = int(value)
    except (TypeError, ValueError):
        logger.warning("Unknown muscle frequency '%s', using twice per week", value)
        return MuscleFrequency.TWICE
    clamped = min(max(times, 1), 3)
    if clamped != times:
        logger.warning("Muscle frequency %d clamped to %d", times, clamped)
    return MuscleFrequency(clamped)
