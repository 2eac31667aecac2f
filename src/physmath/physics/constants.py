"""
Физические константы и параметры по умолчанию для формул пакета physics.
"""

from typing import Final

# Стандартное ускорение свободного падения (м/с²)
GRAVITY_STANDARD: Final[float] = 9.80665

# Допуск на сумму напряжений в замкнутом контуре (В)
# |sum(V)| < KVL_TOLERANCE_DEFAULT → закон Кирхгофа выполнен
KVL_TOLERANCE_DEFAULT: Final[float] = 1e-6
