# main.py
import os
import argparse

from personal_trainer.config import load_settings
from personal_trainer.data.catalog import ExerciseCatalog
from personal_trainer.data.classification import ClassificationTables
from personal_trainer.routines import cli


def parse_args(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(description='Personal Trainer plan generator')
    parser.add_argument('--catalog', help='Exercise catalog CSV (defaults to the bundled library)')
    parser.add_argument('--show_catalog', action='store_true', help='Print exercise counts per category')
    parser.add_argument('--export_catalog', type=str, help='Write the catalog to a CSV file')
    parser.add_argument('--generate_workout', action='store_true',
                        help='Generate a workout plan (remaining options go to the plan CLI)')

    return parser.parse_known_args(argv)


def show_catalog(catalog, tables):
    """Print a short overview of the catalog and its classification tags"""
    df = catalog.to_frame()
    print(f"{len(df)} exercises")
    print(df['exercise_type'].value_counts().to_string())

    print("\nCategories:")
    for name, pool in catalog.categories().items():
        print(f"  {name}: {len(pool)}")

    print("\nTags:")
    for tag in ['advanced_only', 'beginner_friendly', 'low_impact', 'high_impact',
                'glute_focused', 'upper_body_mass']:
        print(f"  {tag}: {len(getattr(tables, tag))}")


def main(argv=None):
    """Main function"""
    args, remaining = parse_args(argv)
    settings = load_settings()
    catalog_path = args.catalog or settings.catalog_path

    if args.show_catalog or args.export_catalog:
        catalog = ExerciseCatalog.from_csv(catalog_path)

        if args.show_catalog:
            show_catalog(catalog, ClassificationTables.default())

        if args.export_catalog:
            os.makedirs(os.path.dirname(args.export_catalog) or '.', exist_ok=True)
            catalog.to_frame().to_csv(args.export_catalog, index=False)
            print(f"Catalog saved to {args.export_catalog}")

    if args.generate_workout:
        print("Generating workout plan...")
        if args.catalog:
            remaining = remaining + ['--catalog', args.catalog]
        cli.main(remaining)

    print("Done.")


if __name__ == '__main__':
    main()
