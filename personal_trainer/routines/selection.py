# personal_trainer/routines/selection.py
import logging
from typing import List, Optional, Sequence, Set, Tuple

import numpy as np

from personal_trainer.data.catalog import Exercise

logger = logging.getLogger(__name__)

CategoryRequest = Tuple[Sequence[Exercise], int]


def make_rng(seed: Optional[int] = None, rng: Optional[np.random.Generator] = None) -> np.random.Generator:
    """Return ``rng`` if given, otherwise a fresh generator seeded with ``seed``."""
    if rng is not None:
        return rng
    return np.random.default_rng(seed)


class CategorySelector:
    """
    Draw a bounded, duplicate-free sample of exercises from category pools.

    This is the single selection primitive shared by every split and day.
    """
    def __init__(self, rng: Optional[np.random.Generator] = None):
        """
        Args:
            rng: Random source; inject a seeded generator for reproducible plans
        """
        self.rng = make_rng(rng=rng)

    def select(self, categories: Sequence[CategoryRequest], exclude: Sequence[str] = ()) -> List[Exercise]:
        """
        Select exercises for each (pool, count) pair in order.

        Exercises already chosen for an earlier pair (matched by name) are
        not eligible again. A pool with fewer eligible exercises than
        requested contributes all of them. Sampled exercises keep their
        relative pool order, so a pool's priority ordering carries through.

        Args:
            categories: List of (exercise pool, desired count)
            exclude: Names that are never eligible

        Returns:
            Selected exercises
        """
        selected: List[Exercise] = []
        used: Set[str] = set(exclude)

        for pool, count in categories:
            available = _unique_by_name(e for e in pool if e.name not in used)
            if count <= 0 or not available:
                continue

            if len(available) <= count:
                chosen = available
            else:
                picks = self.rng.choice(len(available), size=count, replace=False)
                chosen = [available[i] for i in sorted(picks)]

            selected.extend(chosen)
            used.update(e.name for e in chosen)

        return selected

    def sample(self, pool: Sequence[Exercise], count: int) -> List[Exercise]:
        """Sample up to ``count`` exercises from a single pool."""
        return self.select([(pool, count)])

    def shuffled(self, pool: Sequence[Exercise]) -> List[Exercise]:
        """A re-shuffled copy of a pool."""
        order = self.rng.permutation(len(pool))
        return [pool[i] for i in order]


def _unique_by_name(exercises) -> List[Exercise]:
    seen: Set[str] = set()
    unique = []
    for exercise in exercises:
        if exercise.name not in seen:
            seen.add(exercise.name)
            unique.append(exercise)
    return unique
