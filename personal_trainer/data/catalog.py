# personal_trainer/data/catalog.py
import os
import logging
from dataclasses import dataclass, replace
from enum import Enum
from functools import lru_cache
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

import pandas as pd

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = os.path.join(os.path.dirname(__file__), "exercises.csv")

REQUIRED_COLUMNS = ['name', 'muscle_groups', 'exercise_type', 'default_sets', 'default_reps']

# Separators used inside a single CSV cell
MUSCLE_SEPARATOR = ";"
TIP_SEPARATOR = "|"


class CatalogError(ValueError):
    """Raised when exercise catalog data cannot be turned into exercises."""


class ExerciseType(Enum):
    COMPOUND = "compound"
    STRENGTH = "strength"  # isolation strength work
    CARDIO = "cardio"


@dataclass(frozen=True)
class Exercise:
    """
    A single catalog exercise.

    The name is the identity key: two records with the same name are treated
    as the same exercise when selecting and classifying. ``default_sets`` and
    ``default_reps`` carry the prescription; plan generation re-stamps them
    through ``with_sets_reps`` / ``as_cardio`` and never mutates a record.
    For cardio exercises ``default_reps`` is a duration in minutes.
    """
    name: str
    muscle_groups: Tuple[str, ...]
    instructions: str = ""
    exercise_type: ExerciseType = ExerciseType.STRENGTH
    default_sets: int = 3
    default_reps: int = 10
    calories_per_minute: int = 5
    form_tips: Tuple[str, ...] = ()
    icon: str = "figure.strengthtraining.traditional"

    @property
    def exercise_id(self) -> str:
        return self.name.lower().replace(" ", "_").replace("-", "_")

    @property
    def is_cardio(self) -> bool:
        return self.exercise_type is ExerciseType.CARDIO

    @property
    def is_compound(self) -> bool:
        return self.exercise_type is ExerciseType.COMPOUND

    def targets(self, *muscles: str) -> bool:
        """True if any of the given muscle group tags is on this exercise."""
        return any(muscle in self.muscle_groups for muscle in muscles)

    def with_sets_reps(self, sets: int, reps: int) -> "Exercise":
        return replace(self, default_sets=int(sets), default_reps=int(reps))

    def as_cardio(self, minutes: int) -> "Exercise":
        """Re-stamp as a single timed block of ``minutes``."""
        return replace(self, default_sets=1, default_reps=int(minutes))


def _strength(exercise: Exercise) -> bool:
    return not exercise.is_cardio


# Muscle-group categories used as units of selection. Only strength work is
# eligible; cardio is handled by the finisher.
CATEGORY_RULES: Dict[str, Callable[[Exercise], bool]] = {
    'chest': lambda e: e.targets("Chest", "Upper Chest"),
    'back': lambda e: e.targets("Back", "Upper Back"),
    'shoulders': lambda e: e.targets("Shoulders", "Rear Delts"),
    'biceps': lambda e: e.targets("Biceps"),
    'triceps': lambda e: e.targets("Triceps") and not e.targets("Chest"),
    'quads': lambda e: e.targets("Quads"),
    'hamstrings': lambda e: e.targets("Hamstrings") and not e.targets("Quads"),
    'glutes': lambda e: e.targets("Glutes") and not e.targets("Quads"),
    'calves': lambda e: e.targets("Calves"),
    'core': lambda e: e.targets("Core"),
    'rear_delts': lambda e: e.targets("Rear Delts"),
    'back_width': lambda e: e.targets("Back", "Upper Back") and ("Pull" in e.name or "Lat" in e.name),
    'back_thickness': lambda e: e.targets("Back", "Upper Back") and ("Row" in e.name or "Deadlift" in e.name),
}


class ExerciseCatalog:
    """
    Immutable, ordered collection of exercises with category lookups.
    """
    def __init__(self, exercises: Iterable[Exercise]):
        """
        Initialize the catalog

        Args:
            exercises: Exercise records, in catalog order

        Raises:
            CatalogError: If two records share a name
        """
        self.exercises: Tuple[Exercise, ...] = tuple(exercises)
        self._by_name: Dict[str, Exercise] = {}
        for exercise in self.exercises:
            if exercise.name in self._by_name:
                raise CatalogError(f"Duplicate exercise name in catalog: {exercise.name}")
            self._by_name[exercise.name] = exercise

    def __len__(self) -> int:
        return len(self.exercises)

    def __iter__(self) -> Iterator[Exercise]:
        return iter(self.exercises)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> "ExerciseCatalog":
        """
        Build a catalog from a DataFrame shaped like ``exercises.csv``.

        Args:
            df: DataFrame with one row per exercise

        Returns:
            ExerciseCatalog
        """
        missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
        if missing:
            raise CatalogError(f"Catalog is missing required columns: {missing}")

        # Optional text columns come back as NaN when empty
        df = df.copy()
        for col in ['instructions', 'icon', 'form_tips']:
            if col not in df.columns:
                df[col] = ""
            df[col] = df[col].fillna("")
        if 'calories_per_minute' not in df.columns:
            df['calories_per_minute'] = 5

        exercises = []
        for row in df.itertuples(index=False):
            try:
                exercise_type = ExerciseType(str(row.exercise_type).strip().lower())
            except ValueError:
                raise CatalogError(f"Unknown exercise type '{row.exercise_type}' for {row.name}") from None

            exercises.append(Exercise(
                name=str(row.name).strip(),
                muscle_groups=_split_cell(row.muscle_groups, MUSCLE_SEPARATOR),
                instructions=str(row.instructions),
                exercise_type=exercise_type,
                default_sets=int(row.default_sets),
                default_reps=int(row.default_reps),
                calories_per_minute=int(row.calories_per_minute),
                form_tips=_split_cell(row.form_tips, TIP_SEPARATOR),
                icon=str(row.icon) or "figure.strengthtraining.traditional",
            ))

        return cls(exercises)

    @classmethod
    def from_csv(cls, path: Optional[str] = None) -> "ExerciseCatalog":
        """
        Load a catalog from CSV.

        Args:
            path: CSV path; defaults to the bundled exercise library

        Returns:
            ExerciseCatalog
        """
        path = path or DEFAULT_CATALOG_PATH
        df = pd.read_csv(path)
        catalog = cls.from_frame(df)
        logger.debug("Loaded %d exercises from %s", len(catalog), path)
        return catalog

    @classmethod
    def default(cls) -> "ExerciseCatalog":
        return load_default_catalog()

    def to_frame(self) -> pd.DataFrame:
        """Export the catalog in the same shape ``from_frame`` reads."""
        return pd.DataFrame([
            {
                'name': e.name,
                'muscle_groups': MUSCLE_SEPARATOR.join(e.muscle_groups),
                'instructions': e.instructions,
                'exercise_type': e.exercise_type.value,
                'default_sets': e.default_sets,
                'default_reps': e.default_reps,
                'calories_per_minute': e.calories_per_minute,
                'icon': e.icon,
                'form_tips': TIP_SEPARATOR.join(e.form_tips),
            }
            for e in self.exercises
        ])

    def get(self, name: str) -> Optional[Exercise]:
        return self._by_name.get(name)

    def strength(self) -> List[Exercise]:
        return [e for e in self.exercises if _strength(e)]

    def cardio(self) -> List[Exercise]:
        return [e for e in self.exercises if e.is_cardio]

    def category(self, name: str) -> List[Exercise]:
        """
        Strength exercises belonging to a muscle-group category.

        Args:
            name: Category key from ``CATEGORY_RULES``

        Returns:
            Exercises in catalog order

        Raises:
            KeyError: If the category is unknown
        """
        rule = CATEGORY_RULES[name]
        return [e for e in self.exercises if _strength(e) and rule(e)]

    def categories(self) -> Dict[str, List[Exercise]]:
        return {name: self.category(name) for name in CATEGORY_RULES}

    def alternatives_for(self, exercise: Exercise, exclude: Iterable[str] = ()) -> List[Exercise]:
        """
        Find replacement candidates for an exercise.

        Candidates are the same kind as ``exercise`` (cardio for cardio,
        strength for strength) and share at least one muscle group with it.
        The exercise itself and any names in ``exclude`` (typically the rest
        of the current workout) are skipped.

        Args:
            exercise: Exercise to replace
            exclude: Names that must not be suggested

        Returns:
            Candidates, most shared muscle groups first
        """
        excluded = set(exclude) | {exercise.name}
        target = set(exercise.muscle_groups)

        scored = []
        for candidate in self.exercises:
            if candidate.name in excluded or candidate.is_cardio != exercise.is_cardio:
                continue
            shared = len(target.intersection(candidate.muscle_groups))
            if shared:
                scored.append((shared, candidate))

        # sorted() is stable, so ties keep catalog order
        return [candidate for _, candidate in sorted(scored, key=lambda item: -item[0])]


def _split_cell(value, separator: str) -> Tuple[str, ...]:
    if not isinstance(value, str):
        return ()
    return tuple(part.strip() for part in value.split(separator) if part.strip())


@lru_cache(maxsize=None)
def load_default_catalog() -> ExerciseCatalog:
    """The bundled exercise library, loaded once."""
    return ExerciseCatalog.from_csv(DEFAULT_CATALOG_PATH)
