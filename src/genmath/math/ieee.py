"""
IEEE — Float64 арифметика с семантикой IEEE-754

Модуль выполняет плавающие деление, остаток, степень и логарифм так, как их
определяет IEEE-754, а не так, как их поднимают операторы Python float:
- x / 0.0 → ±Inf или NaN (а не ZeroDivisionError)
- fmod(x, 0.0) → NaN (а не ValueError)
- log(0.0) → -Inf, log(-1.0) → NaN
- pow(-8.0, 1/3) → NaN

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль никогда не перехватывается и не заменяется fallback
2. NaN/Inf пропагируют без изменений
3. Подавляются только предупреждения numpy, результат возвращается как есть
4. Целочисленная арифметика сюда не относится: она идёт на Python int и
   поднимает ZeroDivisionError
"""

import math
from typing import Final

import numpy as np

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# IEEE-АРИФМЕТИКА
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление binary64 без защиты от нуля.

    Args:
        numerator: Числитель (любое вещественное значение)
        denominator: Знаменатель (может быть нулём)

    Returns:
        numerator / denominator по IEEE-754

    Examples:
        >>> ieee_divide(6.0, 4.0)
        1.5
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def ieee_fmod(value: float, divisor: float) -> float:
    """
    Усекающий остаток binary64 (знак результата следует value).

    Examples:
        >>> ieee_fmod(7.0, 3.0)
        1.0
        >>> ieee_fmod(-7.0, 3.0)
        -1.0
        >>> ieee_fmod(7.0, 0.0)
        nan
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.fmod(np.float64(value), np.float64(divisor)))


def ieee_pow(base: float, exponent: float) -> float:
    """Степень binary64; вне области определения возвращает NaN, при переполнении Inf"""
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.power(np.float64(base), np.float64(exponent)))


def ieee_log(value: float) -> float:
    """Натуральный логарифм binary64: log(0) = -Inf, log(x < 0) = NaN"""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.log(np.float64(value)))


# =============================================================================
# ПРОВЕРКИ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(0.1 + 0.2, 0.3)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
