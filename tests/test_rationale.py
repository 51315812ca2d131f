import pytest

from personal_trainer.routines.policy import ExperienceLevel, FitnessGoal, Gender
from personal_trainer.routines.profile import UserProfile
from personal_trainer.routines.rationale import (
    EXPERIENCE_TEMPLATES,
    FEMALE_TONE_NOTE,
    GOAL_TEMPLATES,
    MALE_MASS_NOTE,
    MIDDLE_AGE_NOTE,
    SENIOR_NOTE,
    UNDER_18_NOTE,
    RationaleGenerator
)


def test_sentence_order():
    profile = UserProfile(age=50, goal=FitnessGoal.LOSE_WEIGHT, experience=ExperienceLevel.ADVANCED)

    text = RationaleGenerator().rationale(profile, "upper body")

    assert text == " ".join([
        GOAL_TEMPLATES[FitnessGoal.LOSE_WEIGHT].format(label="upper body"),
        MIDDLE_AGE_NOTE,
        EXPERIENCE_TEMPLATES[ExperienceLevel.ADVANCED],
    ])


@pytest.mark.parametrize("age,note", [
    (12, UNDER_18_NOTE),
    (17, UNDER_18_NOTE),
    (45, MIDDLE_AGE_NOTE),
    (54, MIDDLE_AGE_NOTE),
    (55, SENIOR_NOTE),
    (82, SENIOR_NOTE),
])
def test_age_bracket_sentence(age, note):
    text = RationaleGenerator().rationale(UserProfile(age=age), "push")
    assert note in text


@pytest.mark.parametrize("age", [18, 30, 44])
def test_no_age_sentence_for_adults(age):
    text = RationaleGenerator().rationale(UserProfile(age=age), "push")
    for note in (UNDER_18_NOTE, MIDDLE_AGE_NOTE, SENIOR_NOTE):
        assert note not in text


def test_label_is_inserted():
    text = RationaleGenerator().rationale(UserProfile(age=30), "leg")
    assert text.startswith("This leg session")


@pytest.mark.parametrize("gender,goal,closing", [
    (Gender.FEMALE, FitnessGoal.TONE_UP, FEMALE_TONE_NOTE),
    (Gender.MALE, FitnessGoal.BUILD_MUSCLE, MALE_MASS_NOTE),
    (Gender.MALE, FitnessGoal.INCREASE_STRENGTH, MALE_MASS_NOTE),
])
def test_closing_sentence(gender, goal, closing):
    text = RationaleGenerator().rationale(UserProfile(age=30, gender=gender, goal=goal), "full body")
    assert text.endswith(closing)


@pytest.mark.parametrize("gender,goal", [
    (Gender.MALE, FitnessGoal.TONE_UP),
    (Gender.FEMALE, FitnessGoal.BUILD_MUSCLE),
    (Gender.OTHER, FitnessGoal.INCREASE_STRENGTH),
    (Gender.PREFER_NOT_TO_SAY, FitnessGoal.TONE_UP),
])
def test_no_closing_sentence_otherwise(gender, goal):
    text = RationaleGenerator().rationale(UserProfile(age=30, gender=gender, goal=goal), "full body")
    assert FEMALE_TONE_NOTE not in text
    assert MALE_MASS_NOTE not in text


def test_rationale_is_deterministic():
    profile = UserProfile(age=60, gender=Gender.FEMALE, goal=FitnessGoal.TONE_UP)
    generator = RationaleGenerator()
    assert generator.rationale(profile, "lower body") == generator.rationale(profile, "lower body")
