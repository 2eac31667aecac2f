"""
Physics formula evaluators для physmath

Чистые функции без состояния: каждая вычисляет одну формулу.
"""

# Constants
from physmath.physics.constants import GRAVITY_STANDARD, KVL_TOLERANCE_DEFAULT

# Bernoulli's theorem
from physmath.physics.bernoulli_theorem import total_pressure

# Brewster's law
from physmath.physics.brewster_law import brewster_angle

# Kirchhoff's voltage law
from physmath.physics.kirchhoff_law import loop_voltage_sum, voltage_law_satisfied

# Malus' law
from physmath.physics.malus_law import transmitted_intensity

__all__ = [
    # Constants
    "GRAVITY_STANDARD",
    "KVL_TOLERANCE_DEFAULT",
    # Bernoulli
    "total_pressure",
    # Brewster
    "brewster_angle",
    # Kirchhoff
    "loop_voltage_sum",
    "voltage_law_satisfied",
    # Malus
    "transmitted_intensity",
]
