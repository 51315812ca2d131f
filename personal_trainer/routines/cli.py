# personal_trainer/routines/cli.py
import argparse
import json
import os
import logging
from dataclasses import replace

from personal_trainer.config import load_settings
from personal_trainer.data.catalog import ExerciseCatalog
from personal_trainer.routines.adjustments import adjust_for_difficulty
from personal_trainer.routines.policy import (
    DifficultyFeedback,
    ExperienceLevel,
    FitnessGoal,
    Gender,
    WorkoutDuration,
    WorkoutSplit
)
from personal_trainer.routines.profile import UserProfile
from personal_trainer.routines.workout_generator import WorkoutPlanGenerator, plans_to_frame


def _choices(enum_cls):
    return [member.value for member in enum_cls]


def build_parser():
    """Build the command line parser"""
    parser = argparse.ArgumentParser(description='Generate personalized weekly training plans')

    # User profile
    parser.add_argument('--age', type=int, default=30, help='User age in years')
    parser.add_argument('--birth-date', help='Date of birth (YYYY-MM-DD); overrides --age')
    parser.add_argument('--gender', choices=_choices(Gender), default='prefer_not_to_say', help='User gender')
    parser.add_argument('--goal', choices=_choices(FitnessGoal), default='general_fitness', help='Fitness goal')
    parser.add_argument('--experience', choices=_choices(ExperienceLevel),
                        default='beginner', help='User experience level')
    parser.add_argument('--split', choices=_choices(WorkoutSplit), default='full_body', help='Workout split type')
    parser.add_argument('--duration', choices=_choices(WorkoutDuration),
                        default='standard', help='Session length tier')
    parser.add_argument('--frequency', type=int, default=2, help='Times each muscle is trained per week (1-3)')
    parser.add_argument('--height', type=float, default=0.0, help='Height in inches')
    parser.add_argument('--weight', type=float, default=150.0, help='Weight in pounds')
    parser.add_argument('--days', type=int, default=3, help='Number of workout days per week')

    # Generation options
    parser.add_argument('--seed', type=int, help='Random seed for reproducible plans')
    parser.add_argument('--catalog', help='Exercise catalog CSV (defaults to the bundled library)')
    parser.add_argument('--legacy', action='store_true',
                        help='Generate a plain split from --days only, ignoring the profile')
    parser.add_argument('--feedback', choices=_choices(DifficultyFeedback),
                        help='Preview the plan adjusted for post-session feedback')

    # Output options
    parser.add_argument('--output', type=str, help='Output file path to save the plan (JSON)')
    parser.add_argument('--csv', type=str, help='Output file path to save one row per exercise (CSV)')
    parser.add_argument('--pretty', action='store_true', help='Pretty print the plan (text format)')
    parser.add_argument('--plot', action='store_true', help='Save weekly volume and session length charts')
    parser.add_argument('--config', help='Path to a .env file with PT_* settings')
    parser.add_argument('--verbose', action='store_true', help='Log generation details')

    return parser


def parse_args(argv=None):
    """Parse command line arguments"""
    return build_parser().parse_args(argv)


def pretty_print_plan(plan):
    """Format and print the plan in a user-friendly way"""
    print("\n" + "="*80)
    print(f" {plan['name']} ".center(80, "="))
    print("="*80)

    print(f"\n{plan['description']}\n")

    print("PROGRAM DETAILS:")
    for key, value in plan['details'].items():
        print(f"{key}: {value}")

    print("\nWEEKLY SCHEDULE:")
    for day in plan['weekly_schedule']:
        print(f"  {day}")

    print("\nWORKOUTS:")
    for i, workout in enumerate(plan['workouts']):
        print(f"\n{i+1}. {workout['name']} - {workout['description']} (~{workout['estimated_duration']} min):")
        print("-" * 80)
        if workout['rationale']:
            print(f"  {workout['rationale']}\n")

        for j, exercise in enumerate(workout['exercises']):
            print(f"  {j+1}. {exercise['name']}")
            print(f"     {exercise['sets']} sets × {exercise['reps']} | Rest: {exercise['rest']}")
            print(f"     Target: {exercise['target']} | Type: {exercise['type']}")
            print(f"     Notes: {exercise['notes']}")
            if exercise['instructions']:
                print(f"     Instructions: {exercise['instructions'][:100]}")
            print()

    summary = plan['summary']
    print("\nWEEKLY SUMMARY:")
    print("-" * 80)
    print(f"Exercises: {summary['total_exercises']} | Strength sets: {summary['total_sets']}")
    print(f"Estimated time: {summary['estimated_minutes']} min | Estimated calories: {summary['estimated_calories']}")

    print("="*80)
    print(" End of Program ".center(80, "="))
    print("="*80 + "\n")


def apply_feedback(plans, feedback):
    """Adjust each day's strength block for difficulty feedback; finishers are left alone."""
    adjusted = []
    for plan in plans:
        strength = adjust_for_difficulty(plan.strength_exercises, feedback)
        adjusted.append(replace(plan, exercises=tuple(strength + plan.finisher)))
    return adjusted


def _ensure_parent(path):
    os.makedirs(os.path.dirname(path) or '.', exist_ok=True)


def main(argv=None):
    """Main function to run the CLI plan generator"""
    args = parse_args(argv)
    settings = load_settings(args.config)

    logging.basicConfig(level=logging.DEBUG if args.verbose else settings.log_level,
                        format="%(levelname)s %(name)s: %(message)s")

    seed = args.seed if args.seed is not None else settings.random_seed
    catalog = ExerciseCatalog.from_csv(args.catalog or settings.catalog_path)

    # Initialize the plan generator
    generator = WorkoutPlanGenerator(catalog=catalog, seed=seed)

    if args.legacy:
        profile = None
        plans = generator.generate_plans(args.days)
    else:
        # Create user profile from args
        user_input = {
            'age': args.age,
            'birth_date': args.birth_date,
            'gender': args.gender,
            'goal': args.goal,
            'experience': args.experience,
            'split': args.split,
            'duration': args.duration,
            'frequency': args.frequency,
            'height_inches': args.height,
            'weight_pounds': args.weight
        }
        profile = UserProfile.from_dict(user_input)
        plans = generator.generate_personalized_plans(profile, args.days)

    if args.feedback:
        plans = apply_feedback(plans, DifficultyFeedback(args.feedback))

    # Format for display
    display_plan = generator.format_plans_for_display(plans, profile)

    # Output options
    if args.output:
        _ensure_parent(args.output)
        with open(args.output, 'w') as f:
            json.dump(display_plan, f, indent=2)
        print(f"Workout plan saved to {args.output}")

    if args.csv:
        _ensure_parent(args.csv)
        plans_to_frame(plans).to_csv(args.csv, index=False)
        print(f"Exercise table saved to {args.csv}")

    if args.plot:
        from personal_trainer.utils.visualization import plot_session_minutes, plot_weekly_volume

        os.makedirs(settings.output_dir, exist_ok=True)
        plot_weekly_volume(plans, save_path=os.path.join(settings.output_dir, "weekly_volume.png"), show=False)
        plot_session_minutes(plans, save_path=os.path.join(settings.output_dir, "session_minutes.png"), show=False)

    if args.pretty or not (args.output or args.csv):
        pretty_print_plan(display_plan)

    print("Workout plan generated successfully!")
    return 0


if __name__ == "__main__":
    main()
