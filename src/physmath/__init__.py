"""
physmath — complex numbers and classic physics formulas

Публичный API:
- Complex, ComplexDivisionByZero: комплексное число как неизменяемое значение
- total_pressure: уравнение Бернулли
- brewster_angle: закон Брюстера
- voltage_law_satisfied, loop_voltage_sum: закон напряжений Кирхгофа
- transmitted_intensity: закон Малюса
"""

from physmath.core.math.complex_number import Complex, ComplexDivisionByZero
from physmath.physics import (
    GRAVITY_STANDARD,
    KVL_TOLERANCE_DEFAULT,
    brewster_angle,
    loop_voltage_sum,
    total_pressure,
    transmitted_intensity,
    voltage_law_satisfied,
)

__version__ = "0.1.0"

__all__ = [
    "Complex",
    "ComplexDivisionByZero",
    "GRAVITY_STANDARD",
    "KVL_TOLERANCE_DEFAULT",
    "brewster_angle",
    "loop_voltage_sum",
    "total_pressure",
    "transmitted_intensity",
    "voltage_law_satisfied",
]
