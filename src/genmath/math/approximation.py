"""
Approximation — Численная производная и интеграл

Модуль аппроксимирует производную и интеграл функции, переданной вызывающим:
- quick_derivative: оценка по двум симметричным отсчётам
- quick_integral: составная формула трапеций с фиксированным шагом

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (поведение сохраняется буквально):
1. quick_derivative делит разность отсчётов на ОТНОШЕНИЕ x_hi / x_lo,
   а не на разность x_hi - x_lo:
       quick_derivative(5, 1, f(x)=x) == (6 - 4) / (6 / 4) ≈ 1.3333
   При at == 0 знаменатель равен -1, при at == resolution он равен ±Inf
2. quick_integral всегда интегрирует по возрастающему интервалу: при
   from_ > to границы меняются местами, и знак результата не меняется
3. Площадь последнего (укороченного) шага считается с полным resolution,
   а не с фактической шириной to - x_lo
4. formula должна быть чистой и определённой на всём отрезке; это не
   проверяется

ФОРМУЛЫ:
    derivative = (f(at + r) - f(at - r)) / ((at + r) / (at - r))
    integral   = Σ r * (f(x_k) + f(x_k+1)) / 2,  x_k+1 = min(x_k + r, to)
"""

import logging
from typing import Any, Callable

from src.genmath.domain.numeric_kind import TypeSet, require_kind
from src.genmath.math.ieee import ieee_divide, is_valid_float

logger = logging.getLogger(__name__)

Formula = Callable[[Any], Any]


# =============================================================================
# ПРОИЗВОДНАЯ
# =============================================================================


def quick_derivative(at: Any, resolution: Any, formula: Formula) -> float:
    """
    Быстрая оценка производной formula в точке at.

    Отсчёты берутся в at + resolution и at - resolution. Деление выполняется
    по IEEE-754: нулевой x_lo даёт бесконечный знаменатель, а не исключение.

    Args:
        at: Точка оценки (TypeSet.REAL)
        resolution: Полуширина окна отсчётов (TypeSet.REAL)
        formula: Чистая функция Real → Real

    Returns:
        Оценка наклона (float)

    Examples:
        >>> quick_derivative(5.0, 1.0, lambda x: x)
        1.3333333333333333
        >>> quick_derivative(0.0, 1.0, lambda x: x)
        -2.0
    """
    require_kind(at, TypeSet.REAL, "at")
    require_kind(resolution, TypeSet.REAL, "resolution")

    x_hi = at + resolution
    x_lo = at - resolution
    y_hi = formula(x_hi)
    y_lo = formula(x_lo)

    return ieee_divide(y_hi - y_lo, ieee_divide(x_hi, x_lo))


# =============================================================================
# ИНТЕГРАЛ
# =============================================================================


def quick_integral(from_: Any, to: Any, resolution: Any, formula: Formula) -> float:
    """
    Интеграл formula на отрезке [from_, to] по формуле трапеций.

    Алгоритм:
        1. Если from_ > to, границы меняются местами
        2. x_lo = from_
        3. x_hi = min(x_lo + resolution, to)
        4. area += resolution * (f(x_lo) + f(x_hi)) / 2
        5. Если x_hi >= to — стоп, иначе x_lo = x_hi и шаг 3

    Шаг выполняется хотя бы один раз: при from_ == to результат равен
    resolution * f(to). Результат точен для постоянной функции, только если
    длина отрезка кратна resolution.

    Args:
        from_: Левая граница (TypeSet.REAL)
        to: Правая граница (TypeSet.REAL)
        resolution: Шаг (TypeSet.REAL, > 0)
        formula: Чистая функция Real → Real

    Returns:
        Приближённая площадь (float)

    Raises:
        ValueError: Если цикл не может завершиться: resolution <= 0 или NaN,
            границы не конечны или не представимы в float64, либо шаг
            поглощается точностью float

    Examples:
        >>> quick_integral(0, 10, 1, lambda x: 1)
        10.0
        >>> quick_integral(10, 0, 1, lambda x: 1)
        10.0
        >>> quick_integral(0, 2.5, 1, lambda x: 1)
        3.0
    """
    require_kind(from_, TypeSet.REAL, "from_")
    require_kind(to, TypeSet.REAL, "to")
    require_kind(resolution, TypeSet.REAL, "resolution")

    if not resolution > 0:
        raise ValueError(f"resolution must be positive, got {resolution}")
    try:
        finite_bounds = is_valid_float(from_) and is_valid_float(to)
    except OverflowError as e:
        # int за пределами binary64
        raise ValueError(f"Integration bounds must be finite, got [{from_}, {to}]") from e
    if not finite_bounds:
        raise ValueError(f"Integration bounds must be finite, got [{from_}, {to}]")

    if from_ > to:
        from_, to = to, from_

    area = 0.0
    steps = 0
    x_lo = from_

    while True:
        x_hi = x_lo + resolution
        if x_hi > to:
            x_hi = to
        elif x_hi <= x_lo:
            raise ValueError(f"resolution {resolution} is too small to advance past {x_lo}")

        y_lo = formula(x_lo)
        y_hi = formula(x_hi)
        area += resolution * (y_lo + y_hi) / 2
        steps += 1

        if x_hi >= to:
            break
        x_lo = x_hi

    logger.debug(
        "quick_integral over [%s, %s] with resolution %s: %d steps, area=%s",
        from_,
        to,
        resolution,
        steps,
        area,
    )
    return float(area)
