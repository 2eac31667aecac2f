"""
Brewster's law — угол полной поляризации отражённого света

При падении под углом Брюстера отражённый свет полностью поляризован:

    theta_B = atan(n2 / n1)

n1 — показатель преломления среды падения, n2 — второй среды.
Результат возвращается в градусах.

Показатели преломления обязаны быть положительными: при n1 = 0 отношение
n2 / n1 не определено, и функция отклоняет такой вход (ValueError), а не
возвращает inf/NaN или "исправленный" угол.
"""

import math

from physmath.core.math.numerical_safeguards import (
    radians_to_degrees,
    validate_positive,
)


def brewster_angle(n1: float, n2: float) -> float:
    """
    Угол Брюстера.

    Args:
        n1: Показатель преломления первой среды (> 0)
        n2: Показатель преломления второй среды (> 0)

    Returns:
        Угол Брюстера в градусах, в диапазоне (0, 90)

    Raises:
        ValueError: Если n1 или n2 <= 0 или NaN/Inf

    Examples:
        >>> round(brewster_angle(1.0, 1.0), 6)
        45.0
    """
    validate_positive(n1, "n1")
    validate_positive(n2, "n2")

    angle_rad = math.atan(n2 / n1)
    return radians_to_degrees(angle_rad)
