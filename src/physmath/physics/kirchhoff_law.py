"""
Kirchhoff's voltage law — проверка баланса напряжений в контуре

Алгебраическая сумма напряжений в любом замкнутом контуре равна нулю.
Проверка выполняется с абсолютным допуском:

    |sum(V_k)| < tol,  tol = KVL_TOLERANCE_DEFAULT = 1e-6

Пустой контур тривиально удовлетворяет закону (сумма = 0).
"""

import math
from collections.abc import Iterable

from physmath.core.math.numerical_safeguards import validate_finite, validate_positive
from physmath.physics.constants import KVL_TOLERANCE_DEFAULT


def loop_voltage_sum(voltages: Iterable[float]) -> float:
    """
    Алгебраическая сумма напряжений контура.

    math.fsum не теряет точность при сокращении больших слагаемых
    разного знака.

    Args:
        voltages: Напряжения контура (В), со знаком

    Returns:
        Сумма напряжений (В)

    Raises:
        ValueError: Если любое напряжение NaN/Inf
    """
    values = list(voltages)

    for index, voltage in enumerate(values):
        validate_finite(voltage, f"voltages[{index}]")

    return math.fsum(values)


def voltage_law_satisfied(
    voltages: Iterable[float],
    tol: float = KVL_TOLERANCE_DEFAULT,
) -> bool:
    """
    Проверка закона напряжений Кирхгофа.

    Args:
        voltages: Напряжения контура (В), со знаком
        tol: Абсолютный допуск на сумму (default: 1e-6, строго > 0)

    Returns:
        True если |sum(voltages)| < tol

    Raises:
        ValueError: Если tol <= 0 или напряжения содержат NaN/Inf

    Examples:
        >>> voltage_law_satisfied([10.0, -4.0, -6.0])
        True
        >>> voltage_law_satisfied([12.0, -5.0, -4.0])
        False
        >>> voltage_law_satisfied([])
        True
    """
    validate_positive(tol, "tol")

    return abs(loop_voltage_sum(voltages)) < tol
