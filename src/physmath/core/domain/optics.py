"""
Optics — Модели оптических систем

Immutable Pydantic модели:
- OpticalInterface: граница двух сред (угол Брюстера)
- PolarizerPair: поляризатор + анализатор (закон Малюса)
"""

from pydantic import BaseModel, Field

from physmath.physics.brewster_law import brewster_angle
from physmath.physics.malus_law import transmitted_intensity


# =============================================================================
# OPTICAL INTERFACE
# =============================================================================


class OpticalInterface(BaseModel):
    """Граница раздела двух сред с показателями преломления n1 → n2."""

    n1: float = Field(..., gt=0, description="Показатель преломления среды падения")
    n2: float = Field(..., gt=0, description="Показатель преломления второй среды")

    model_config = {"frozen": True, "allow_inf_nan": False}

    def brewster_angle(self) -> float:
        """Угол Брюстера в градусах."""
        return brewster_angle(self.n1, self.n2)


# =============================================================================
# POLARIZER PAIR
# =============================================================================


class PolarizerPair(BaseModel):
    """
    Поляризатор и анализатор, повёрнутые друг относительно друга.

    Интенсивность падающего света неотрицательна, поэтому прошедшая
    интенсивность всегда лежит в [0, initial_intensity].
    """

    initial_intensity: float = Field(
        ..., ge=0, description="Интенсивность поляризованного света на входе анализатора"
    )
    angle_degrees: float = Field(..., description="Угол между осями (градусы)")

    model_config = {"frozen": True, "allow_inf_nan": False}

    def transmitted_intensity(self) -> float:
        """Интенсивность прошедшего света по закону Малюса."""
        return transmitted_intensity(self.initial_intensity, self.angle_degrees)
