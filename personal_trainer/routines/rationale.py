# personal_trainer/routines/rationale.py
from typing import Dict, Optional

from personal_trainer.routines.filtering import MIDDLE_AGE, MINOR_AGE, SENIOR_AGE
from personal_trainer.routines.policy import ExperienceLevel, FitnessGoal, Gender
from personal_trainer.routines.profile import UserProfile

GOAL_TEMPLATES: Dict[FitnessGoal, str] = {
    FitnessGoal.LOSE_WEIGHT: (
        "This {label} session keeps rest short and reps high, then closes with "
        "high-intensity cardio to maximize calorie burn."
    ),
    FitnessGoal.BUILD_MUSCLE: (
        "This {label} session uses moderate reps and extra sets to drive muscle growth."
    ),
    FitnessGoal.IMPROVE_ENDURANCE: (
        "This {label} session favors lighter loads for higher reps, paired with "
        "steady-state cardio to build stamina."
    ),
    FitnessGoal.GENERAL_FITNESS: (
        "This {label} session balances strength work with cardio for all-round fitness."
    ),
    FitnessGoal.INCREASE_STRENGTH: (
        "This {label} session centers on heavy, low-rep work to build maximal strength."
    ),
    FitnessGoal.TONE_UP: (
        "This {label} session pairs moderate weights with higher reps to improve "
        "muscle definition."
    ),
}

EXPERIENCE_TEMPLATES: Dict[ExperienceLevel, str] = {
    ExperienceLevel.BEGINNER: (
        "Beginner-friendly movements come first so you can master form before adding load."
    ),
    ExperienceLevel.INTERMEDIATE: (
        "A mix of compound and isolation work keeps progress steady."
    ),
    ExperienceLevel.ADVANCED: (
        "Compound lifts lead the session to make the most of your training age."
    ),
}

UNDER_18_NOTE = (
    "Advanced lifts are left out while you are still growing, with the focus on "
    "safe technique."
)
MIDDLE_AGE_NOTE = "High-impact cardio has been swapped for joint-friendly options."
SENIOR_NOTE = (
    "Low-impact movements are prioritized to protect your joints while "
    "maintaining strength."
)

FEMALE_TONE_NOTE = "Glute-focused movements are emphasized to shape the lower body."
MALE_MASS_NOTE = "Upper-body compound lifts are emphasized to build mass through the chest and back."


class RationaleGenerator:
    """Explain, in plain sentences, why a day was put together the way it was."""

    def rationale(self, profile: UserProfile, label: str) -> str:
        """
        Render the rationale for one day.

        Args:
            profile: User profile
            label: Short description of the day's type, e.g. "upper body"

        Returns:
            Space-joined sentences
        """
        sentences = [GOAL_TEMPLATES[profile.goal].format(label=label)]

        age_note = self._age_note(profile.age)
        if age_note:
            sentences.append(age_note)

        sentences.append(EXPERIENCE_TEMPLATES[profile.experience])

        closing = self._closing_note(profile)
        if closing:
            sentences.append(closing)

        return " ".join(sentences)

    @staticmethod
    def _age_note(age: int) -> Optional[str]:
        if age < MINOR_AGE:
            return UNDER_18_NOTE
        if age >= SENIOR_AGE:
            return SENIOR_NOTE
        if age >= MIDDLE_AGE:
            return MIDDLE_AGE_NOTE
        return None

    @staticmethod
    def _closing_note(profile: UserProfile) -> Optional[str]:
        if profile.gender is Gender.FEMALE and profile.goal is FitnessGoal.TONE_UP:
            return FEMALE_TONE_NOTE
        if profile.gender is Gender.MALE and profile.goal in (FitnessGoal.BUILD_MUSCLE, FitnessGoal.INCREASE_STRENGTH):
            return MALE_MASS_NOTE
        return None
