"""
Trigonometry — Тригонометрические функции над Real

Вычисления в float64 (numpy), результат возвращается в представлении
аргумента. Вне области определения (acos(2.0)) результат NaN.
"""

from typing import Any, Callable

import numpy as np

from src.genmath.domain.numeric_kind import TypeSet, cast_like, require_kind
from src.genmath.math.constants import DEG2RAD, RAD2DEG


def _apply(
    fn: Callable[[np.float64], np.float64],
    value: Any,
    name: str,
    in_scale: float = 1.0,
    out_scale: float = 1.0,
) -> Any:
    require_kind(value, TypeSet.REAL, name)
    with np.errstate(invalid="ignore"):
        result = float(fn(np.float64(value) * in_scale)) * out_scale
    return cast_like(result, value)


# =============================================================================
# РАДИАНЫ
# =============================================================================


def cos(radians: Any) -> Any:
    """Косинус угла в радианах"""
    return _apply(np.cos, radians, "radians")


def sin(radians: Any) -> Any:
    """Синус угла в радианах"""
    return _apply(np.sin, radians, "radians")


def tan(radians: Any) -> Any:
    """Тангенс угла в радианах"""
    return _apply(np.tan, radians, "radians")


def acos(ratio: Any) -> Any:
    """Арккосинус в радианах"""
    return _apply(np.arccos, ratio, "ratio")


def asin(ratio: Any) -> Any:
    """Арксинус в радианах"""
    return _apply(np.arcsin, ratio, "ratio")


def atan(ratio: Any) -> Any:
    """Арктангенс в радианах"""
    return _apply(np.arctan, ratio, "ratio")


# =============================================================================
# ГРАДУСЫ
# =============================================================================


def cos_deg(degrees: Any) -> Any:
    """Косинус угла в градусах"""
    return _apply(np.cos, degrees, "degrees", in_scale=DEG2RAD)


def sin_deg(degrees: Any) -> Any:
    """Синус угла в градусах"""
    return _apply(np.sin, degrees, "degrees", in_scale=DEG2RAD)


def tan_deg(degrees: Any) -> Any:
    """Тангенс угла в градусах"""
    return _apply(np.tan, degrees, "degrees", in_scale=DEG2RAD)


def acos_deg(ratio: Any) -> Any:
    """Арккосинус в градусах"""
    return _apply(np.arccos, ratio, "ratio", out_scale=RAD2DEG)


def asin_deg(ratio: Any) -> Any:
    """Арксинус в градусах"""
    return _apply(np.arcsin, ratio, "ratio", out_scale=RAD2DEG)


def atan_deg(ratio: Any) -> Any:
    """Арктангенс в градусах"""
    return _apply(np.arctan, ratio, "ratio", out_scale=RAD2DEG)
