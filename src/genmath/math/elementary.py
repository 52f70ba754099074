"""
Elementary — Элементарные скалярные операции над Real

Модуль содержит базовые обобщённые операции:
- abs/min/max/clamp/sign
- ceil/floor/round (округление от нуля на половине)
- power/root/log
- zero_or_value, lerp, range_fraction
- truncating_divide (целочисленное деление к нулю)

Каждая операция проверяет вид аргументов на входе (TypeSet.REAL, если не
указано иное) и возвращает результат в представлении первичного операнда.
Величины не валидируются: ноль, NaN и Inf обрабатываются арифметикой нативно.
"""

from typing import Any

import numpy as np

from src.genmath.domain.numeric_kind import TypeSet, cast_like, require_kind, require_same_kind
from src.genmath.math.ieee import ieee_divide, ieee_log, ieee_pow

# =============================================================================
# СРАВНЕНИЯ И ОГРАНИЧЕНИЯ
# =============================================================================


def absolute(val: Any) -> Any:
    """
    Абсолютное значение.

    Для целых фиксированной ширины минимальное значение остаётся
    отрицательным (two's-complement wrap), как и при нативном отрицании.

    Examples:
        >>> absolute(-3)
        3
        >>> absolute(-2.5)
        2.5
    """
    require_kind(val, TypeSet.REAL, "val")
    if val < 0:
        return -val
    return val


def minimum(a: Any, b: Any) -> Any:
    """Меньшее из двух значений одного представления (при равенстве или NaN возвращается b)"""
    require_same_kind(TypeSet.REAL, a=a, b=b)
    if a < b:
        return a
    return b


def maximum(a: Any, b: Any) -> Any:
    """Большее из двух значений одного представления (при равенстве или NaN возвращается b)"""
    require_same_kind(TypeSet.REAL, a=a, b=b)
    if a > b:
        return a
    return b


def clamp(min_value: Any, value: Any, max_value: Any) -> Any:
    """
    Ограничение значения в диапазоне [min_value, max_value].

    Границы не проверяются на порядок: при min_value > max_value нижняя
    граница проверяется первой. Все три аргумента должны разделять одно
    представление.

    Args:
        min_value: Нижняя граница
        value: Исходное значение
        max_value: Верхняя граница

    Returns:
        Значение, ограниченное диапазоном

    Raises:
        NumericKindError: Если представления аргументов различаются

    Examples:
        >>> clamp(0.0, 5.0, 10.0)
        5.0
        >>> clamp(0.0, -1.0, 10.0)
        0.0
        >>> clamp(0, 15, 10)
        10
    """
    require_same_kind(TypeSet.REAL, min_value=min_value, value=value, max_value=max_value)

    if value < min_value:
        return min_value
    if value > max_value:
        return max_value
    return value


def sign(val: Any) -> Any:
    """
    Знак значения: -1 для отрицательных, 1 для всех остальных.

    Ноль (и NaN) дают 1.

    Examples:
        >>> sign(-4)
        -1
        >>> sign(0)
        1
        >>> sign(2.5)
        1.0
    """
    require_kind(val, TypeSet.REAL, "val")
    if val < 0:
        return cast_like(-1, val)
    return cast_like(1, val)


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def ceil(val: Any) -> Any:
    """Округление вверх; Inf и NaN сохраняются для float"""
    require_kind(val, TypeSet.REAL, "val")
    return cast_like(float(np.ceil(np.float64(val))), val)


def floor(val: Any) -> Any:
    """Округление вниз; Inf и NaN сохраняются для float"""
    require_kind(val, TypeSet.REAL, "val")
    return cast_like(float(np.floor(np.float64(val))), val)


def round_half_away(val: Any) -> Any:
    """
    Округление до ближайшего целого, половина — от нуля.

    В отличие от round() (банковское округление) 2.5 → 3.0, -2.5 → -3.0.

    Дробная часть (x - trunc(x)) вычисляется точно, поэтому значения
    чуть меньше половины (0.49999999999999994) не округляются вверх.

    Examples:
        >>> round_half_away(2.5)
        3.0
        >>> round_half_away(-2.5)
        -3.0
        >>> round_half_away(0.49999999999999994)
        0.0
    """
    require_kind(val, TypeSet.REAL, "val")
    x = np.float64(val)
    whole = np.trunc(x)
    with np.errstate(invalid="ignore"):
        if abs(x - whole) >= 0.5:
            whole += np.copysign(1.0, x)
    return cast_like(float(whole), val)


# =============================================================================
# СТЕПЕНИ И ЛОГАРИФМЫ
# =============================================================================


def truncating_divide(numerator: int, denominator: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Python // округляет к минус бесконечности; здесь частное усекается,
    как у целочисленного деления фиксированной ширины.

    Raises:
        ZeroDivisionError: Если denominator == 0 (нативно, без перехвата)

    Examples:
        >>> truncating_divide(-7, 2)
        -3
        >>> truncating_divide(7, -2)
        -3
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def power(val: Any, exp: Any) -> Any:
    """
    Возведение в степень через float64.

    Examples:
        >>> power(2, 10)
        1024
        >>> power(-8.0, 0.5)
        nan
    """
    require_kind(val, TypeSet.REAL, "val")
    require_kind(exp, TypeSet.REAL, "exp")
    return cast_like(ieee_pow(val, exp), val)


def root(val: Any, degree: Any) -> Any:
    """
    Корень степени degree: power(val, 1 / degree).

    1 / degree вычисляется в арифметике типа degree:
    - для целых частное усекается (root(8, 3) == power(8, 0) == 1),
      а degree == 0 поднимает ZeroDivisionError
    - для float 1 / 0.0 == Inf, и результат равен power(val, Inf)

    Examples:
        >>> root(16.0, 2.0)
        4.0
        >>> root(8, 3)
        1
    """
    require_kind(val, TypeSet.REAL, "val")
    degree_type = require_kind(degree, TypeSet.REAL, "degree")

    if degree_type.integer:
        exponent = cast_like(truncating_divide(1, int(degree)), degree)
    else:
        exponent = cast_like(ieee_divide(1.0, degree), degree)

    return power(val, exponent)


def log(base: Any, val: Any) -> Any:
    """
    Логарифм val по основанию base: ln(val) / ln(base).

    Examples:
        >>> log(2.0, 8.0)
        3.0
        >>> log(10, 1000)
        2
    """
    require_kind(base, TypeSet.REAL, "base")
    require_kind(val, TypeSet.REAL, "val")
    return cast_like(ieee_divide(ieee_log(val), ieee_log(base)), val)


# =============================================================================
# ИНТЕРПОЛЯЦИЯ
# =============================================================================


def zero_or_value(condition: Any, val: Any) -> Any:
    """
    val при истинном condition, иначе ноль типа val.

    Args:
        condition: bool или numpy.bool_ (TypeSet.BOOL)
        val: Возвращаемое значение

    Examples:
        >>> zero_or_value(True, 5)
        5
        >>> zero_or_value(False, 2.5)
        0.0
    """
    require_kind(condition, TypeSet.BOOL, "condition")
    require_kind(val, TypeSet.REAL, "val")
    if condition:
        return val
    return cast_like(0, val)


def lerp(start: Any, end: Any, amount: float) -> Any:
    """
    Линейная интерполяция: start + T((end - start) * amount).

    amount не ограничивается [0, 1]: значения вне диапазона экстраполируют.
    Для целых смещение усекается к нулю перед сложением.

    Args:
        start: Начальное значение
        end: Конечное значение
        amount: Доля пути от start к end

    Returns:
        Интерполированное значение в представлении start

    Examples:
        >>> lerp(0.0, 10.0, 0.25)
        2.5
        >>> lerp(0, 10, 0.25)
        2
        >>> lerp(10, 20, 1.5)
        25
    """
    require_kind(start, TypeSet.REAL, "start")
    require_kind(end, TypeSet.REAL, "end")
    require_kind(amount, TypeSet.REAL, "amount")

    diff = end - start
    offset = float(diff) * float(amount)
    return start + cast_like(offset, start)


def range_fraction(start: Any, end: Any, val: Any) -> float:
    """
    Обратная интерполяция: доля пути val между start и end.

    При start == end результат по IEEE-754 (Inf или NaN).

    Examples:
        >>> range_fraction(0, 10, 5)
        0.5
        >>> range_fraction(10.0, 20.0, 25.0)
        1.5
    """
    require_kind(start, TypeSet.REAL, "start")
    require_kind(end, TypeSet.REAL, "end")
    require_kind(val, TypeSet.REAL, "val")
    return ieee_divide(float(val - start), float(end - start))
