"""
Core math modules

Расчёт смещения и евклидова расстояния по маршруту.
"""

from src.core.math.displacement import (
    calculate_path_distance,
    checked_distance,
    compute_displacement,
    compute_distance,
    parse_magnitude,
)

__all__ = [
    "parse_magnitude",
    "compute_displacement",
    "compute_distance",
    "calculate_path_distance",
    "checked_distance",
]
