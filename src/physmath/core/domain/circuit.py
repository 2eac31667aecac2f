"""
VoltageLoop — Модель замкнутого контура цепи

Immutable Pydantic модель для проверки закона напряжений Кирхгофа.
"""

from pydantic import BaseModel, Field

from physmath.physics.constants import KVL_TOLERANCE_DEFAULT
from physmath.physics.kirchhoff_law import loop_voltage_sum, voltage_law_satisfied


class VoltageLoop(BaseModel):
    """
    Замкнутый контур: напряжения на элементах со знаком обхода.

    Пустой контур допустим и считается сбалансированным.
    """

    voltages: tuple[float, ...] = Field(
        default=(), description="Напряжения на элементах контура (В), со знаком"
    )

    model_config = {"frozen": True, "allow_inf_nan": False}

    def voltage_sum(self) -> float:
        """Алгебраическая сумма напряжений (В)."""
        return loop_voltage_sum(self.voltages)

    def is_balanced(self, tol: float = KVL_TOLERANCE_DEFAULT) -> bool:
        """
        Проверка закона напряжений Кирхгофа для контура.

        Args:
            tol: Абсолютный допуск на сумму (В)

        Returns:
            True если |sum(voltages)| < tol
        """
        return voltage_law_satisfied(self.voltages, tol=tol)
