import pandas as pd
import pytest

from personal_trainer.data.catalog import CatalogError, Exercise, ExerciseCatalog, ExerciseType


def test_default_catalog_contents():
    catalog = ExerciseCatalog.default()

    assert len(catalog) == 57
    assert len(catalog.strength()) == 42
    assert len(catalog.cardio()) == 15
    assert "Bench Press" in catalog
    assert "Treadmill Running" in catalog


def test_default_catalog_is_cached():
    assert ExerciseCatalog.default() is ExerciseCatalog.default()


def test_csv_cells_are_split():
    bench = ExerciseCatalog.default().get("Bench Press")

    assert bench.muscle_groups == ("Chest", "Triceps", "Shoulders")
    assert bench.exercise_type is ExerciseType.COMPOUND
    assert bench.default_sets == 4
    assert bench.default_reps == 8
    assert len(bench.form_tips) == 6
    assert bench.form_tips[0] == "Keep feet flat on the floor, shoulder-width apart"


def test_empty_form_tips_become_empty_tuple():
    flyes = ExerciseCatalog.default().get("Dumbbell Flyes")
    assert flyes.form_tips == ()


def test_categories_only_hold_strength_work():
    catalog = ExerciseCatalog.default()
    for name, pool in catalog.categories().items():
        assert pool, name
        assert not any(e.is_cardio for e in pool)


def test_category_exclusions():
    catalog = ExerciseCatalog.default()

    triceps = [e.name for e in catalog.category('triceps')]
    assert "Tricep Dips" not in triceps
    assert "Tricep Pushdown" in triceps

    hamstrings = [e.name for e in catalog.category('hamstrings')]
    assert "Barbell Squats" not in hamstrings
    assert "Romanian Deadlift" in hamstrings

    assert [e.name for e in catalog.category('rear_delts')] == ["Face Pulls", "Reverse Flyes"]


def test_unknown_category_raises(small_catalog):
    with pytest.raises(KeyError):
        small_catalog.category('forearms')


def test_duplicate_names_rejected():
    exercise = Exercise(name="Planks", muscle_groups=("Core",))
    with pytest.raises(CatalogError):
        ExerciseCatalog([exercise, exercise])


def test_missing_columns_rejected():
    df = pd.DataFrame({'name': ["Planks"], 'muscle_groups': ["Core"]})
    with pytest.raises(CatalogError, match="missing required columns"):
        ExerciseCatalog.from_frame(df)


def test_unknown_exercise_type_rejected():
    df = pd.DataFrame({
        'name': ["Planks"],
        'muscle_groups': ["Core"],
        'exercise_type': ["yoga"],
        'default_sets': [3],
        'default_reps': [60],
    })
    with pytest.raises(CatalogError, match="Unknown exercise type"):
        ExerciseCatalog.from_frame(df)


def test_catalog_error_is_value_error():
    assert issubclass(CatalogError, ValueError)


def test_frame_export_reloads(small_catalog):
    reloaded = ExerciseCatalog.from_frame(small_catalog.to_frame())
    assert [e.name for e in reloaded] == [e.name for e in small_catalog]
    assert reloaded.get("Burpees").is_cardio


def test_from_csv(tmp_path, small_catalog):
    path = tmp_path / "catalog.csv"
    small_catalog.to_frame().to_csv(path, index=False)

    catalog = ExerciseCatalog.from_csv(str(path))
    assert len(catalog) == len(small_catalog)
    assert catalog.get("Planks").default_reps == 60


def test_transformations_return_new_records():
    planks = Exercise(name="Planks", muscle_groups=("Core",), default_sets=3, default_reps=60)

    harder = planks.with_sets_reps(4, 90)
    timed = planks.as_cardio(5)

    assert (planks.default_sets, planks.default_reps) == (3, 60)
    assert (harder.default_sets, harder.default_reps) == (4, 90)
    assert (timed.default_sets, timed.default_reps) == (1, 5)
    assert harder.name == planks.name


def test_exercise_id():
    assert Exercise(name="Push-Ups", muscle_groups=()).exercise_id == "push_ups"


def test_alternatives_for(small_catalog):
    bench = small_catalog.get("Bench Press")

    alternatives = [e.name for e in small_catalog.alternatives_for(bench)]

    assert "Bench Press" not in alternatives
    assert alternatives[0] == "Push-Ups"
    assert "Lateral Raises" in alternatives
    assert "Planks" not in alternatives


def test_alternatives_respect_exclusions(small_catalog):
    bench = small_catalog.get("Bench Press")

    alternatives = [e.name for e in small_catalog.alternatives_for(bench, exclude=["Push-Ups"])]

    assert "Push-Ups" not in alternatives
    assert alternatives[0] == "Dumbbell Flyes"


def test_alternatives_keep_exercise_kind():
    catalog = ExerciseCatalog([
        Exercise("Calf Raises", ("Calves",)),
        Exercise("Seated Calf Raises", ("Calves",)),
        Exercise("Jump Rope", ("Cardio", "Calves"), exercise_type=ExerciseType.CARDIO, default_sets=1),
        Exercise("Stationary Bike", ("Cardio", "Legs"), exercise_type=ExerciseType.CARDIO, default_sets=1),
    ])

    strength = [e.name for e in catalog.alternatives_for(catalog.get("Calf Raises"))]
    cardio = [e.name for e in catalog.alternatives_for(catalog.get("Jump Rope"))]

    assert strength == ["Seated Calf Raises"]
    assert cardio == ["Stationary Bike"]


def test_default_catalog_never_mixes_strength_and_cardio():
    catalog = ExerciseCatalog.default()

    for exercise in catalog:
        alternatives = catalog.alternatives_for(exercise)
        assert all(e.is_cardio == exercise.is_cardio for e in alternatives), exercise.name
