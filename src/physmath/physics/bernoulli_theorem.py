"""
Bernoulli's theorem — полное давление в стационарном потоке

Закон сохранения энергии для стационарного несжимаемого потока:

    P_total = P + 0.5 * rho * v² + rho * g * h

где
    P   — статическое давление (Па)
    rho — плотность жидкости (кг/м³)
    v   — скорость потока (м/с)
    h   — высота над опорным уровнем (м)
    g   — ускорение свободного падения (м/с²)
"""

from physmath.core.math.numerical_safeguards import validate_finite
from physmath.physics.constants import GRAVITY_STANDARD


def total_pressure(
    pressure: float,
    density: float,
    velocity: float,
    height: float,
    gravity: float = GRAVITY_STANDARD,
) -> float:
    """
    Полное давление по уравнению Бернулли.

    Args:
        pressure: Статическое давление (Па)
        density: Плотность жидкости (кг/м³)
        velocity: Скорость потока (м/с)
        height: Высота над опорным уровнем (м)
        gravity: Ускорение свободного падения (default: GRAVITY_STANDARD)

    Returns:
        Полное давление (Па)

    Raises:
        ValueError: Если любой аргумент NaN/Inf

    Examples:
        >>> total_pressure(101325.0, 1.225, 0.0, 0.0)
        101325.0
    """
    validate_finite(pressure, "pressure")
    validate_finite(density, "density")
    validate_finite(velocity, "velocity")
    validate_finite(height, "height")
    validate_finite(gravity, "gravity")

    dynamic_pressure = 0.5 * density * velocity**2
    hydrostatic_pressure = density * gravity * height

    return pressure + dynamic_pressure + hydrostatic_pressure
