"""
Complex — комплексное число как неизменяемое значение

Реализация поля комплексных чисел с перегруженными операторами:
- Конструирование в прямоугольной (real, imaginary) и полярной (magnitude, angle) форме
- Сложение, вычитание, умножение, деление, сопряжение
- Модуль abs() и аргумент arg()
- Форматирование "(R + Ii)" / "(R - |I|i)"

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Экземпляр неизменяем (frozen dataclass): операции всегда возвращают новое значение
2. Равенство — точное покомпонентное сравнение float, БЕЗ epsilon
3. Деление на ноль проверяется точно (обе компоненты == 0.0), БЕЗ epsilon
4. NaN/Inf компоненты не валидируются: результат операций над ними не специфицирован

ВНИМАНИЕ: точное равенство небезопасно для результатов вычислений с плавающей
точкой. Для приближённых сравнений используйте Complex.is_close().
"""

import logging
import math
import numbers
import sys
from dataclasses import InitVar, dataclass
from typing import Final

from physmath.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
)

logger = logging.getLogger(__name__)

# Наименьший нормализованный float: |делитель|² ниже этого порога теряет
# значащие биты (subnormal) или обнуляется
DENOM_MIN_NORMAL: Final[float] = sys.float_info.min


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ComplexDivisionByZero(ZeroDivisionError):
    """
    Деление на комплексный ноль (0 + 0i).

    Наследуется от ZeroDivisionError, поэтому перехватывается так же, как
    деление на ноль встроенных чисел.
    """

    pass


# =============================================================================
# COMPLEX
# =============================================================================


def _coerce(value: object) -> "Complex | None":
    """Приведение операнда к Complex; None если тип не поддерживается."""
    if isinstance(value, Complex):
        return value
    if isinstance(value, numbers.Complex):
        # int, float, Fraction, встроенный complex
        return Complex(float(value.real), float(value.imag))
    return None


def _format_component(value: float) -> str:
    # %g: 6 значащих цифр, как у std::ostream по умолчанию
    return f"{value:g}"


@dataclass(frozen=True)
class Complex:
    """
    Комплексное число.

    Complex(x, y)                 -> x + y i              (прямоугольная форма)
    Complex(x, y, is_polar=True)  -> x * e^{i y}          (x = модуль, y = угол в радианах)
    Complex()                     -> 0 + 0i               (аддитивная единица)

    Полярная форма пересчитывается в прямоугольную при конструировании:
        real = x * cos(y), imaginary = x * sin(y)

    Вещественные скаляры (int, float) автоматически приводятся к Complex(x, 0)
    с любой стороны операторов + - * /.
    """

    real: float = 0.0
    imaginary: float = 0.0
    is_polar: InitVar[bool] = False

    def __post_init__(self, is_polar: bool) -> None:
        x, y = float(self.real), float(self.imaginary)

        if is_polar:
            real, imaginary = x * math.cos(y), x * math.sin(y)
        else:
            real, imaginary = x, y

        # frozen dataclass: прямое присваивание запрещено
        object.__setattr__(self, "real", real)
        object.__setattr__(self, "imaginary", imaginary)

    @classmethod
    def from_polar(cls, magnitude: float, angle: float) -> "Complex":
        """Явный полярный конструктор: magnitude * e^{i angle}."""
        return cls(magnitude, angle, is_polar=True)

    # ---------- accessors ----------

    @property
    def imag(self) -> float:
        """Алиас imaginary (совместимость с встроенным complex)."""
        return self.imaginary

    def abs(self) -> float:
        """
        Модуль комплексного числа: sqrt(real² + imaginary²).

        Returns:
            Модуль (всегда >= 0)
        """
        return math.hypot(self.real, self.imaginary)

    def arg(self) -> float:
        """
        Аргумент (угол) в радианах: atan2(imaginary, real).

        Returns:
            Угол в диапазоне [-pi, pi]; 0 для комплексного нуля.
            -pi только при imaginary == -0.0 (например, ~Complex(-1, 0)):
            atan2 сохраняет знак нуля
        """
        return math.atan2(self.imaginary, self.real)

    def conjugate(self) -> "Complex":
        """Комплексно сопряжённое: real - imaginary i."""
        return Complex(self.real, -self.imaginary)

    def is_close(
        self,
        other: "Complex",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """
        Приближённое покомпонентное сравнение (в отличие от ==).

        Args:
            other: Второе значение
            rel_tol: Относительная толерантность
            abs_tol: Абсолютная толерантность

        Returns:
            True если обе компоненты близки
        """
        return math.isclose(
            self.real, other.real, rel_tol=rel_tol, abs_tol=abs_tol
        ) and math.isclose(
            self.imaginary, other.imaginary, rel_tol=rel_tol, abs_tol=abs_tol
        )

    # ---------- field operations ----------

    def __add__(self, other: object) -> "Complex":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(self.real + rhs.real, self.imaginary + rhs.imaginary)

    def __radd__(self, other: object) -> "Complex":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + self

    def __sub__(self, other: object) -> "Complex":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(self.real - rhs.real, self.imaginary - rhs.imaginary)

    def __rsub__(self, other: object) -> "Complex":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> "Complex":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        # (a + bi)(c + di) = (ac - bd) + (ad + bc)i
        return Complex(
            self.real * rhs.real - self.imaginary * rhs.imaginary,
            self.real * rhs.imaginary + self.imaginary * rhs.real,
        )

    def __rmul__(self, other: object) -> "Complex":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs * self

    def __truediv__(self, other: object) -> "Complex":
        """
        Деление: умножение на сопряжённый делитель и деление на |делитель|².

        Raises:
            ComplexDivisionByZero: Если делитель точно равен 0 + 0i
        """
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented

        if rhs.real == 0.0 and rhs.imaginary == 0.0:
            logger.debug("Division of %s by zero complex number", self)
            raise ComplexDivisionByZero("Division by zero complex number")

        denominator = rhs.real * rhs.real + rhs.imaginary * rhs.imaginary

        if denominator < DENOM_MIN_NORMAL or not math.isfinite(denominator):
            # |делитель|² не представим в float с полной точностью (underflow/overflow)
            return self._scaled_quotient(rhs)

        numerator = self * rhs.conjugate()
        return Complex(numerator.real / denominator, numerator.imaginary / denominator)

    def __rtruediv__(self, other: object) -> "Complex":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def _scaled_quotient(self, divisor: "Complex") -> "Complex":
        """
        Деление методом Смита (масштабирование отношением компонент).

        Используется только когда real² + imaginary² делителя не представим:
        например, делитель 1e-300 + 0i даёт |делитель|² = 0.0 из-за underflow.
        """
        a, b = self.real, self.imaginary
        c, d = divisor.real, divisor.imaginary

        if abs(c) >= abs(d):
            ratio = d / c
            scale = c + d * ratio
            return Complex((a + b * ratio) / scale, (b - a * ratio) / scale)

        ratio = c / d
        scale = c * ratio + d
        return Complex((a * ratio + b) / scale, (b * ratio - a) / scale)

    def __invert__(self) -> "Complex":
        """~z — комплексно сопряжённое."""
        return self.conjugate()

    def __neg__(self) -> "Complex":
        return Complex(-self.real, -self.imaginary)

    def __abs__(self) -> float:
        return self.abs()

    # ---------- conversions ----------

    def __complex__(self) -> complex:
        return complex(self.real, self.imaginary)

    def __str__(self) -> str:
        if self.imaginary < 0:
            return (
                f"({_format_component(self.real)} - "
                f"{_format_component(-self.imaginary)}i)"
            )
        return (
            f"({_format_component(self.real)} + "
            f"{_format_component(self.imaginary)}i)"
        )
