# personal_trainer/utils/visualization.py
import numpy as np
import matplotlib.pyplot as plt
import seaborn as sns
from typing import Optional, Sequence, Tuple

from personal_trainer.routines.cardio import finisher_minutes
from personal_trainer.routines.workout_generator import (
    MINUTES_PER_EXERCISE,
    GeneratedWorkoutDay,
    plans_to_frame,
    sets_per_muscle
)


def plot_weekly_volume(plans: Sequence[GeneratedWorkoutDay],
                       title: str = "Weekly Sets per Muscle Group",
                       figsize: Tuple[int, int] = (10, 6),
                       save_path: Optional[str] = None,
                       show: bool = True):
    """
    Plot total strength sets per muscle group across the week

    Args:
        plans: Generated day plans
        title: Plot title
        figsize: Figure size
        save_path: Optional path to save the figure
        show: Whether to display the figure

    Returns:
        Matplotlib axes
    """
    volume = sets_per_muscle(plans)
    if volume.empty:
        raise ValueError("No strength sets to plot")

    plt.figure(figsize=figsize)
    ax = sns.barplot(x=volume.values, y=volume.index, orient='h', color="steelblue")

    # Add set counts at the end of each bar
    for i, sets in enumerate(volume.values):
        ax.text(sets + 0.2, i, str(int(sets)), va='center')

    plt.title(title)
    plt.xlabel('Sets')
    plt.ylabel('Muscle Group')

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path)
        print(f"Weekly volume plot saved to {save_path}")

    if show:
        plt.show()
    return ax


def plot_session_minutes(plans: Sequence[GeneratedWorkoutDay],
                         title: str = "Estimated Session Length",
                         figsize: Tuple[int, int] = (10, 6),
                         save_path: Optional[str] = None,
                         show: bool = True):
    """
    Plot strength and cardio minutes for each training day as stacked bars

    Args:
        plans: Generated day plans
        title: Plot title
        figsize: Figure size
        save_path: Optional path to save the figure
        show: Whether to display the figure

    Returns:
        Matplotlib axes
    """
    labels = [f"{i}. {plan.name}" for i, plan in enumerate(plans, start=1)]
    strength = np.array([len(plan.strength_exercises) * MINUTES_PER_EXERCISE for plan in plans])
    cardio = np.array([finisher_minutes(plan.finisher) for plan in plans])

    plt.figure(figsize=figsize)
    palette = sns.color_palette("muted", 2)
    ax = plt.gca()
    ax.bar(labels, strength, color=palette[0], label='Strength')
    ax.bar(labels, cardio, bottom=strength, color=palette[1], label='Cardio finisher')

    plt.title(title)
    plt.xlabel('Day')
    plt.ylabel('Minutes')
    plt.xticks(rotation=45, ha='right')
    plt.legend()

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path)
        print(f"Session length plot saved to {save_path}")

    if show:
        plt.show()
    return ax


def plot_exercise_types(plans: Sequence[GeneratedWorkoutDay],
                        title: Optional[str] = None,
                        figsize: Tuple[int, int] = (10, 6),
                        save_path: Optional[str] = None,
                        show: bool = True):
    """
    Plot how many compound, isolation and cardio exercises each day holds

    Args:
        plans: Generated day plans
        title: Plot title
        figsize: Figure size
        save_path: Optional path to save the figure
        show: Whether to display the figure

    Returns:
        Matplotlib axes
    """
    df = plans_to_frame(plans)
    if df.empty:
        raise ValueError("No exercises to plot")

    # Day names repeat across the week, so label by position
    df['label'] = df['day'].astype(str) + ". " + df['day_name']
    counts = df.groupby(['label', 'exercise_type'], sort=False).size().reset_index(name='count')

    plt.figure(figsize=figsize)
    ax = sns.barplot(data=counts, x='label', y='count', hue='exercise_type')

    plt.title(title or 'Exercise Types per Day')
    plt.xlabel('Day')
    plt.ylabel('Exercises')
    plt.xticks(rotation=45, ha='right')

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path)
        print(f"Exercise type plot saved to {save_path}")

    if show:
        plt.show()
    return ax
