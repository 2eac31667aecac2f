"""
Numerical Safeguards — базовые численные примитивы

Модуль содержит общие проверки и преобразования, на которые опираются
complex_number и физические формулы:
- Проверка float на NaN/Inf
- Сравнения float с учётом машинной точности
- Валидация входных параметров (ValueError с именем параметра)
- Конверсия углов градусы <-> радианы
- Округление half-away-from-zero (семантика C std::round)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Валидаторы никогда не исправляют значение молча: либо пропускают, либо ValueError
2. Конверсия углов использует один и тот же коэффициент pi/180 во всех модулях
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close для относительных сравнений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Используется в is_close для абсолютных сравнений
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Коэффициенты конверсии углов
DEG_PER_RAD: Final[float] = 180.0 / math.pi
RAD_PER_DEG: Final[float] = math.pi / 180.0


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Обёртка над math.isclose с толерантностями по умолчанию для библиотеки.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# УГЛЫ
# =============================================================================


def degrees_to_radians(degrees: float) -> float:
    """Конверсия градусов в радианы: degrees * pi/180."""
    return degrees * RAD_PER_DEG


def radians_to_degrees(radians: float) -> float:
    """Конверсия радиан в градусы: radians * 180/pi."""
    return radians * DEG_PER_RAD


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_away(value: float, ndigits: int = 0) -> float:
    """
    Округление до ndigits знаков после запятой, половины — от нуля.

    Встроенный round() использует banker's rounding (2.5 → 2). Эталонные
    значения формул получены округлением std::round(x * 10^n) / 10^n,
    поэтому для сравнения с ними используется эта функция.

    Args:
        value: Значение для округления
        ndigits: Количество знаков после запятой (>= 0)

    Returns:
        Округлённое значение

    Raises:
        ValueError: Если ndigits < 0 или value NaN/Inf

    Examples:
        >>> round_half_away(2.5)
        3.0
        >>> round_half_away(-2.5)
        -3.0
        >>> round_half_away(56.3099, 2)
        56.31
    """
    if ndigits < 0:
        raise ValueError(f"ndigits must be non-negative, got {ndigits}")

    validate_finite(value, "value")

    scale = 10.0**ndigits
    ratio = value * scale

    if ratio >= 0:
        steps = math.floor(ratio + 0.5)
    else:
        steps = math.ceil(ratio - 0.5)

    return steps / scale


# =============================================================================
# ВАЛИДАЦИЯ И ПРОВЕРКИ
# =============================================================================


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение строго положительное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    validate_finite(value, name)

    if value <= 0:
        raise ValueError(f"{name} must be positive (> 0), got {value}")

