"""
Malus' law — интенсивность света после анализатора

Интенсивность поляризованного света, прошедшего через анализатор,
повёрнутый на угол theta относительно оси поляризатора:

    I = I0 * cos²(theta)

Угол задаётся в градусах. При I0 >= 0 результат лежит в [0, I0].
"""

import math

from physmath.core.math.numerical_safeguards import (
    degrees_to_radians,
    validate_finite,
)


def transmitted_intensity(initial_intensity: float, angle_degrees: float) -> float:
    """
    Интенсивность прошедшего света по закону Малюса.

    Args:
        initial_intensity: Интенсивность падающего поляризованного света
        angle_degrees: Угол между осями поляризатора и анализатора (градусы)

    Returns:
        Интенсивность прошедшего света (в единицах initial_intensity)

    Raises:
        ValueError: Если любой аргумент NaN/Inf

    Examples:
        >>> transmitted_intensity(100.0, 0.0)
        100.0
    """
    validate_finite(initial_intensity, "initial_intensity")
    validate_finite(angle_degrees, "angle_degrees")

    theta = degrees_to_radians(angle_degrees)
    return initial_intensity * math.cos(theta) ** 2
