"""
FluidState — Модель состояния потока жидкости

Immutable Pydantic модель входных данных для уравнения Бернулли.
"""

from pydantic import BaseModel, Field

from physmath.physics.bernoulli_theorem import total_pressure
from physmath.physics.constants import GRAVITY_STANDARD


class FluidState(BaseModel):
    """
    Состояние потока в точке линии тока.

    Immutable модель (frozen=True), NaN/Inf отклоняются при создании.
    """

    pressure: float = Field(..., description="Статическое давление (Па)")
    density: float = Field(..., ge=0, description="Плотность жидкости (кг/м³)")
    velocity: float = Field(..., description="Скорость потока (м/с)")
    height: float = Field(..., description="Высота над опорным уровнем (м)")

    model_config = {"frozen": True, "allow_inf_nan": False}

    def total_pressure(self, gravity: float = GRAVITY_STANDARD) -> float:
        """
        Полное давление по уравнению Бернулли.

        Args:
            gravity: Ускорение свободного падения (м/с²)

        Returns:
            Полное давление (Па)
        """
        return total_pressure(
            self.pressure, self.density, self.velocity, self.height, gravity=gravity
        )
