"""
Ranges — Пересечение и объединение замкнутых интервалов

Интервалы замкнутые: касание концами считается пересечением.
Объединение возвращает огибающую двух интервалов, а не их пересечение.
Все четыре границы должны разделять одно представление: концы огибающей
берутся из входов без преобразования.
"""

from typing import Any, NamedTuple

from src.genmath.domain.numeric_kind import TypeSet, cast_like, require_same_kind
from src.genmath.math.elementary import maximum, minimum


class RangeMerge(NamedTuple):
    """Результат combine_ranges_if_overlap"""

    overlap: bool
    start: Any
    end: Any


def ranges_overlap(start_a: Any, end_a: Any, start_b: Any, end_b: Any) -> bool:
    """
    Пересекаются ли [start_a, end_a] и [start_b, end_b].

    Examples:
        >>> ranges_overlap(0, 5, 5, 10)
        True
        >>> ranges_overlap(0, 4, 5, 10)
        False
    """
    require_same_kind(TypeSet.REAL, start_a=start_a, end_a=end_a, start_b=start_b, end_b=end_b)
    return bool(start_a <= end_b and start_b <= end_a)


def combine_ranges_if_overlap(start_a: Any, end_a: Any, start_b: Any, end_b: Any) -> RangeMerge:
    """
    Объединение двух интервалов, если они пересекаются.

    Args:
        start_a: Начало первого интервала
        end_a: Конец первого интервала
        start_b: Начало второго интервала
        end_b: Конец второго интервала

    Returns:
        RangeMerge(True, min(start_a, start_b), max(end_a, end_b)) при
        пересечении, иначе RangeMerge(False, 0, 0) с нулями типа start_a

    Examples:
        >>> combine_ranges_if_overlap(0, 5, 3, 10)
        RangeMerge(overlap=True, start=0, end=10)
        >>> combine_ranges_if_overlap(0, 2, 5, 10)
        RangeMerge(overlap=False, start=0, end=0)
    """
    if not ranges_overlap(start_a, end_a, start_b, end_b):
        zero = cast_like(0, start_a)
        return RangeMerge(False, zero, zero)

    return RangeMerge(True, minimum(start_a, start_b), maximum(end_a, end_b))
