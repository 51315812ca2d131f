# personal_trainer/data/classification.py
from dataclasses import dataclass
from functools import lru_cache
from typing import FrozenSet, Iterable


@dataclass(frozen=True)
class ClassificationTables:
    """
    Named sets of exercise names used to gate and reorder selection.

    - advanced_only: technically demanding lifts kept away from beginners and minors
    - beginner_friendly: machine / bodyweight movements that are easy to learn
    - low_impact: joint-friendly options promoted for older lifters
    - high_impact: jumping, heavy spinal loading and other high-stress work
    - glute_focused, upper_body_mass: preference groupings for emphasis slots
    """
    advanced_only: FrozenSet[str] = frozenset()
    beginner_friendly: FrozenSet[str] = frozenset()
    low_impact: FrozenSet[str] = frozenset()
    high_impact: FrozenSet[str] = frozenset()
    glute_focused: FrozenSet[str] = frozenset()
    upper_body_mass: FrozenSet[str] = frozenset()

    @classmethod
    def build(cls, **tables: Iterable[str]) -> "ClassificationTables":
        """Build tables from any iterables of names."""
        return cls(**{key: frozenset(names) for key, names in tables.items()})

    @classmethod
    def default(cls) -> "ClassificationTables":
        return load_default_tables()

    def is_advanced(self, name: str) -> bool:
        return name in self.advanced_only

    def is_beginner_friendly(self, name: str) -> bool:
        return name in self.beginner_friendly

    def is_low_impact(self, name: str) -> bool:
        return name in self.low_impact

    def is_high_impact(self, name: str) -> bool:
        return name in self.high_impact


@lru_cache(maxsize=None)
def load_default_tables() -> ClassificationTables:
    return ClassificationTables.build(
        advanced_only=[
            "Deadlift", "Barbell Squats", "Good Mornings", "Pull-Ups",
            "Hanging Leg Raises", "Skull Crushers", "Bulgarian Split Squats",
            "Box Jumps", "Sprint Intervals",
        ],
        beginner_friendly=[
            "Push-Ups", "Dumbbell Flyes", "Lat Pulldown", "Seated Cable Row",
            "Dumbbell Rows", "Face Pulls", "Lateral Raises", "Front Raises",
            "Bicep Curls", "Hammer Curls", "Tricep Pushdown", "Leg Press",
            "Leg Extensions", "Leg Curls", "Goblet Squats", "Glute Bridges",
            "Calf Raises", "Seated Calf Raises", "Planks",
            "Stationary Bike", "Elliptical", "Incline Walking", "Rowing Machine",
        ],
        low_impact=[
            "Dumbbell Flyes", "Cable Crossover", "Lat Pulldown", "Seated Cable Row",
            "Face Pulls", "Lateral Raises", "Reverse Flyes", "Bicep Curls",
            "Hammer Curls", "Tricep Pushdown", "Leg Press", "Leg Extensions",
            "Leg Curls", "Glute Bridges", "Seated Calf Raises", "Planks",
            "Stationary Bike", "Elliptical", "Rowing Machine", "Incline Walking",
        ],
        high_impact=[
            "Deadlift", "Barbell Squats", "Good Mornings", "Walking Lunges",
            "Bulgarian Split Squats", "Tricep Dips",
            "Burpees", "Box Jumps", "Jumping Jacks", "High Knees", "Jump Rope",
            "Sprint Intervals", "Treadmill Running", "Mountain Climbers",
        ],
        glute_focused=[
            "Hip Thrusts", "Glute Bridges", "Romanian Deadlift",
            "Bulgarian Split Squats", "Walking Lunges", "Goblet Squats",
        ],
        upper_body_mass=[
            "Bench Press", "Incline Dumbbell Press", "Barbell Rows", "Pull-Ups",
            "Overhead Press", "Tricep Dips", "Lat Pulldown", "Arnold Press",
        ],
    )
