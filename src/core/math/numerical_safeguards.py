"""
Numerical Safeguards — скалярные примитивы ядра

Модуль задаёт единственную толерантность для приближённых сравнений float
и вспомогательные операции над скалярами:
- epsilon-сравнение (используется Tuple и Matrix)
- округление до заданного числа знаков (round half away from zero)
- проверка конечности и ограничение диапазона

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. EPSILON — единственный допуск в ядре, других толерантностей не вводится
2. round_to применяется только для отображения/сравнения, не в алгебре
"""

import math
import sys
from typing import Final

# =============================================================================
# EPSILON
# =============================================================================

# Машинный epsilon для binary64: наименьшее d, при котором 1.0 + d != 1.0
EPSILON: Final[float] = sys.float_info.epsilon


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def epsilon_equal(a: float, b: float) -> bool:
    """
    Приближённое равенство двух float.

    Алгоритм:
        abs(a - b) < EPSILON

    Args:
        a: Первое значение
        b: Второе значение

    Returns:
        True если значения отличаются меньше чем на EPSILON

    Examples:
        >>> 0.1 + 0.2 == 0.3
        False
        >>> epsilon_equal(0.1 + 0.2, 0.3)
        True
        >>> epsilon_equal(1.0, 1.0 + 1e-9)
        False
    """
    return abs(a - b) < EPSILON


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_to(value: float, decimal_places: int) -> float:
    """
    Округление до decimal_places знаков после запятой.

    Значение умножается на 10^decimal_places, округляется до ближайшего
    целого (половина — от нуля) и делится обратно.

    Args:
        value: Значение для округления
        decimal_places: Количество знаков после запятой (>= 0)

    Returns:
        Округлённое значение

    Raises:
        ValueError: Если decimal_places < 0

    Examples:
        >>> round_to(-0.30075187, 5)
        -0.30075
        >>> round_to(2.5, 0)
        3.0
        >>> round_to(-2.5, 0)
        -3.0
    """
    if decimal_places < 0:
        raise ValueError(f"decimal_places must be non-negative, got {decimal_places}")

    if not is_valid_float(value):
        return value

    factor = 10.0**decimal_places
    scaled = value * factor

    # при таком порядке величины у float нет дробной части
    if not is_valid_float(scaled):
        return value

    # round half away from zero (встроенный round() округляет к чётному)
    if scaled >= 0:
        steps = math.floor(scaled + 0.5)
    else:
        steps = math.ceil(scaled - 0.5)

    return steps / factor


# =============================================================================
# ПРОВЕРКИ И ОГРАНИЧЕНИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float конечным (не NaN, не Inf).
    """
    return math.isfinite(value)


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(1.5, 0.0, 1.0)
        1.0
        >>> clamp(-0.5, 0.0, 1.0)
        0.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result
