"""
Тесты для доменных моделей: FluidState, OpticalInterface, PolarizerPair, VoltageLoop

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Делегирование в физические формулы
3. Immutability (frozen=True)
4. Отклонение NaN/Inf и нарушений ограничений
"""

import pytest
from pydantic import ValidationError

from physmath.core.domain import FluidState, OpticalInterface, PolarizerPair, VoltageLoop
from physmath.physics import (
    brewster_angle,
    total_pressure,
    transmitted_intensity,
)


# =============================================================================
# FLUID STATE
# =============================================================================


class TestFluidState:
    """Тесты для модели FluidState"""

    @pytest.fixture
    def sea_level_air(self) -> FluidState:
        """Воздух на уровне моря"""
        return FluidState(pressure=101325.0, density=1.225, velocity=10.0, height=5.0)

    def test_total_pressure_delegates(self, sea_level_air: FluidState) -> None:
        """Модель считает то же, что и функция"""
        assert sea_level_air.total_pressure() == total_pressure(101325.0, 1.225, 10.0, 5.0)

    def test_custom_gravity(self, sea_level_air: FluidState) -> None:
        """gravity передаётся в формулу"""
        assert sea_level_air.total_pressure(gravity=0.0) == 101325.0 + 61.25

    def test_immutable(self, sea_level_air: FluidState) -> None:
        """frozen=True"""
        with pytest.raises(ValidationError):
            sea_level_air.velocity = 20.0  # type: ignore

    def test_negative_density_rejected(self) -> None:
        """Плотность >= 0"""
        with pytest.raises(ValidationError) as exc_info:
            FluidState(pressure=0.0, density=-1.0, velocity=0.0, height=0.0)
        assert "density" in str(exc_info.value)

    def test_nan_rejected(self) -> None:
        """NaN отклоняется на уровне модели"""
        with pytest.raises(ValidationError):
            FluidState(pressure=float("nan"), density=1.0, velocity=0.0, height=0.0)


# =============================================================================
# OPTICS
# =============================================================================


class TestOpticalInterface:
    """Тесты для модели OpticalInterface"""

    def test_brewster_angle_delegates(self) -> None:
        """Модель считает то же, что и функция"""
        interface = OpticalInterface(n1=1.0, n2=1.5)
        assert interface.brewster_angle() == brewster_angle(1.0, 1.5)

    def test_zero_index_rejected(self) -> None:
        """n1 = 0 отклоняется при создании"""
        with pytest.raises(ValidationError) as exc_info:
            OpticalInterface(n1=0.0, n2=1.5)
        assert "n1" in str(exc_info.value)

    def test_inf_rejected(self) -> None:
        """Inf отклоняется"""
        with pytest.raises(ValidationError):
            OpticalInterface(n1=1.0, n2=float("inf"))

    def test_immutable(self) -> None:
        """frozen=True"""
        interface = OpticalInterface(n1=1.0, n2=1.5)
        with pytest.raises(ValidationError):
            interface.n2 = 2.0  # type: ignore


class TestPolarizerPair:
    """Тесты для модели PolarizerPair"""

    def test_transmitted_intensity_delegates(self) -> None:
        """Модель считает то же, что и функция"""
        pair = PolarizerPair(initial_intensity=100.0, angle_degrees=45.0)
        assert pair.transmitted_intensity() == transmitted_intensity(100.0, 45.0)

    def test_negative_intensity_rejected(self) -> None:
        """Интенсивность >= 0"""
        with pytest.raises(ValidationError) as exc_info:
            PolarizerPair(initial_intensity=-1.0, angle_degrees=0.0)
        assert "initial_intensity" in str(exc_info.value)


# =============================================================================
# CIRCUIT
# =============================================================================


class TestVoltageLoop:
    """Тесты для модели VoltageLoop"""

    def test_balanced(self) -> None:
        """[10, -4, -6] сбалансирован"""
        loop = VoltageLoop(voltages=[10.0, -4.0, -6.0])
        assert loop.voltage_sum() == 0.0
        assert loop.is_balanced() is True

    def test_unbalanced(self) -> None:
        """[12, -5, -4] не сбалансирован"""
        loop = VoltageLoop(voltages=[12.0, -5.0, -4.0])
        assert loop.voltage_sum() == 3.0
        assert loop.is_balanced() is False
        assert loop.is_balanced(tol=5.0) is True

    def test_empty_default(self) -> None:
        """Пустой контур по умолчанию"""
        loop = VoltageLoop()
        assert loop.voltages == ()
        assert loop.is_balanced() is True

    def test_list_stored_as_tuple(self) -> None:
        """Список приводится к неизменяемому tuple"""
        loop = VoltageLoop(voltages=[1.0, -1.0])
        assert loop.voltages == (1.0, -1.0)

    def test_nan_voltage_rejected(self) -> None:
        """NaN напряжение отклоняется"""
        with pytest.raises(ValidationError):
            VoltageLoop(voltages=[1.0, float("nan")])
