"""Plotting helpers for generated plans."""

from personal_trainer.utils.visualization import (
    plot_weekly_volume,
    plot_session_minutes,
    plot_exercise_types
)

__all__ = [
    'plot_weekly_volume',
    'plot_session_minutes',
    'plot_exercise_types'
]
