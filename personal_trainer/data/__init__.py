"""Exercise catalog and classification tables."""

from personal_trainer.data.catalog import (
    CATEGORY_RULES,
    CatalogError,
    Exercise,
    ExerciseCatalog,
    ExerciseType,
    load_default_catalog
)
from personal_trainer.data.classification import ClassificationTables, load_default_tables

__all__ = [
    'CATEGORY_RULES',
    'CatalogError',
    'Exercise',
    'ExerciseCatalog',
    'ExerciseType',
    'load_default_catalog',
    'ClassificationTables',
    'load_default_tables'
]
