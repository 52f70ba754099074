"""
Modulo — Знаковый остаток и разложение на целую часть и остаток

Модуль содержит операции, корректность которых зависит от знаков и
граничных случаев:
- imod: остаток через 64-битный беззнаковый промежуточный путь
- fmod: остаток в плавающей арифметике (IEEE-754)
- iwhole_rem: целое разложение value = whole + rem (whole = value / mod)
- fint_frac: разложение float на целую и дробную части
- fwhole_rem: плавающее разложение на кратное mod и остаток

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Остаток усекающий (как у деления к нулю), не евклидов и не floor-модуль:
   знак результата следует знаку val, знак div не влияет
       imod(-7, 3) == -1, imod(7, -3) == 1, imod(-7, -3) == -1
2. Деление на ноль не перехватывается: целочисленный путь поднимает
   ZeroDivisionError, плавающий даёт NaN
3. imod корректен только для модулей, представимых в 64 битах; большие
   величины усекаются маской U64_MASK без сигнализации
4. iwhole_rem намеренно возвращает rem = value - whole, а не
   value - whole * mod (асимметрия с fwhole_rem сохраняется)
"""

import math
from typing import Any, NamedTuple

from src.genmath.domain.numeric_kind import TypeSet, require_kind
from src.genmath.math.constants import U64_MASK
from src.genmath.math.elementary import truncating_divide
from src.genmath.math.ieee import ieee_divide, ieee_fmod

# =============================================================================
# ТИПЫ
# =============================================================================


class WholeRem(NamedTuple):
    """Разложение значения на целую часть и остаток"""

    whole: Any
    rem: Any


class IntFrac(NamedTuple):
    """Разложение float на целую и дробную части (обе со знаком значения)"""

    integer: Any
    fraction: Any


# =============================================================================
# ЗНАКОВЫЙ ОСТАТОК
# =============================================================================


def _to_u64(value: Any) -> int:
    """Модуль значения в промежуточном uint64: усечение к нулю, затем маска"""
    return abs(int(value)) & U64_MASK


def imod(val: Any, div: Any) -> Any:
    """
    Остаток от деления через целочисленный 64-битный путь.

    Алгоритм:
        1. Модули |val| и |div| усекаются к нулю и переводятся в uint64
        2. Берётся беззнаковый остаток
        3. Результат переводится обратно в тип val
        4. Результат отрицается, если val был отрицательным

    Дробные операнды усекаются до остатка: imod(7.9, 2.5) == imod(7, 2) == 1.0.
    Модуль div, усечённый до нуля (div == 0 или |div| < 1), поднимает
    ZeroDivisionError. NaN/Inf в операндах поднимают ValueError/OverflowError
    при переводе в целое.

    Args:
        val: Делимое (TypeSet.REAL)
        div: Делитель (TypeSet.REAL), ненулевой

    Returns:
        Остаток в представлении val, со знаком val

    Raises:
        ZeroDivisionError: Если |div| усекается до нуля (нативно)

    Examples:
        >>> imod(-7, 3)
        -1
        >>> imod(7, -3)
        1
        >>> imod(-7, -3)
        -1
        >>> imod(7, 3)
        1
    """
    val_type = require_kind(val, TypeSet.REAL, "val")
    require_kind(div, TypeSet.REAL, "div")

    negative = val < 0
    u_mod = _to_u64(val) % _to_u64(div)

    mod = val_type.cast(u_mod)
    if negative:
        # Отрицание после приведения: для float -0.0 при нулевом остатке
        mod = -mod
    return mod


def fmod(val: Any, div: Any) -> Any:
    """
    Остаток от деления в плавающей арифметике.

    Тот же знаковый контракт, что и у imod, но остаток модулей вычисляется
    усекающим fmod в float64 без перевода в целые, поэтому дробные операнды
    не усекаются: fmod(7.5, 2.0) == 1.5.

    Деление на ноль даёт NaN. Для целого val NaN не представим, и
    преобразование результата поднимает ValueError.

    Args:
        val: Делимое (TypeSet.REAL)
        div: Делитель (TypeSet.REAL)

    Returns:
        Остаток в представлении val, со знаком val

    Examples:
        >>> fmod(-7.0, 3.0)
        -1.0
        >>> fmod(7.5, -2.0)
        1.5
        >>> fmod(7.0, 0.0)
        nan
    """
    val_type = require_kind(val, TypeSet.REAL, "val")
    require_kind(div, TypeSet.REAL, "div")

    negative = val < 0
    f_mod = ieee_fmod(abs(float(val)), abs(float(div)))
    if negative:
        f_mod = -f_mod
    return val_type.cast(f_mod)


# =============================================================================
# РАЗЛОЖЕНИЕ НА ЦЕЛУЮ ЧАСТЬ И ОСТАТОК
# =============================================================================


def iwhole_rem(value: Any, mod: Any) -> WholeRem:
    """
    Целочисленное разложение value.

    Контракт (сохраняется буквально):
        whole = value / mod   (деление с усечением к нулю)
        rem   = value - whole

    rem НЕ равен value - whole * mod: iwhole_rem(7, 3) == (2, 5), а не
    (6, 1). Выполняется только whole + rem == value.

    Args:
        value: Разлагаемое значение (TypeSet.INTEGER)
        mod: Делитель (TypeSet.INTEGER)

    Returns:
        WholeRem(whole, rem) в представлении value

    Raises:
        ZeroDivisionError: Если mod == 0 (нативно)

    Examples:
        >>> iwhole_rem(7, 3)
        WholeRem(whole=2, rem=5)
        >>> iwhole_rem(-7, 2)
        WholeRem(whole=-3, rem=-4)
    """
    value_type = require_kind(value, TypeSet.INTEGER, "value")
    require_kind(mod, TypeSet.INTEGER, "mod")

    raw_value = int(value)
    whole = truncating_divide(raw_value, int(mod))
    rem = raw_value - whole
    return WholeRem(value_type.cast(whole), value_type.cast(rem))


def fint_frac(value: Any) -> IntFrac:
    """
    Разложение float на целую и дробную части.

    Обе части несут знак value: fint_frac(-3.75) == (-3.0, -0.75).
    Для Inf дробная часть 0.0, для NaN обе части NaN.

    Args:
        value: Разлагаемое значение (TypeSet.FLOAT)

    Returns:
        IntFrac(integer, fraction), integer + fraction == value

    Examples:
        >>> fint_frac(3.75)
        IntFrac(integer=3.0, fraction=0.75)
    """
    value_type = require_kind(value, TypeSet.FLOAT, "value")
    fraction, integer = math.modf(float(value))
    return IntFrac(value_type.cast(integer), value_type.cast(fraction))


def fwhole_rem(value: Any, mod: Any) -> WholeRem:
    """
    Плавающее разложение value на кратное mod и остаток.

    Алгоритм:
        scale = value / mod
        (n, f) = fint_frac(scale)
        whole = n * mod
        rem   = f * mod

    whole кратно mod, whole + rem ≈ value с точностью float. Знак обеих
    частей следует знаку scale. При mod == 0 scale == ±Inf, и whole == NaN.

    Args:
        value: Разлагаемое значение (TypeSet.REAL)
        mod: Делитель (TypeSet.REAL)

    Returns:
        WholeRem(whole, rem) в представлении value

    Examples:
        >>> fwhole_rem(7.5, 2.0)
        WholeRem(whole=6.0, rem=1.5)
        >>> fwhole_rem(-7.5, 2.0)
        WholeRem(whole=-6.0, rem=-1.5)
    """
    value_type = require_kind(value, TypeSet.REAL, "value")
    require_kind(mod, TypeSet.REAL, "mod")

    scale = ieee_divide(value, mod)
    integer, fraction = fint_frac(scale)
    f_mod = float(mod)
    return WholeRem(value_type.cast(integer * f_mod), value_type.cast(fraction * f_mod))
