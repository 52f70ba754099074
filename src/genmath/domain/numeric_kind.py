"""
NumericKind — Классификация числовых представлений

Модуль описывает таксономию числовых типов, которой ограничена каждая
операция библиотеки:
- Integer: целые фиксированной ширины (int8..int64, uint8..uint64) и Python int
- Float: IEEE-754 binary32/binary64 (numpy.float32, numpy.float64, Python float)
- Complex: пары real/imaginary (только для полноты объединения Number)
- Signed / Unsigned: ортогональная знаковая способность
- Real = Integer ∪ Float
- Number = Real ∪ Complex

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Float всегда Signed; беззнаковые целые никогда не Signed
2. Bool не входит в Number
3. Результат T-операции принимает представление первичного операнда
4. Сужающие преобразования целых выполняются с two's-complement wrap
"""

import logging
from enum import Enum
from typing import Any, Final

import numpy as np
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NumericKindError(TypeError):
    """
    Значение не принадлежит требуемому набору числовых типов.

    Единственная ошибка, которую библиотека поднимает сама на входе операций.
    Арифметические сбои (деление на ноль, NaN/Inf) сюда не относятся и
    распространяются нативно.
    """

    pass


# =============================================================================
# ОПИСАНИЕ ЧИСЛОВОГО ТИПА
# =============================================================================


class NumericType(BaseModel):
    """
    Конкретное числовое представление.

    Immutable модель (frozen=True): реестр типов создаётся один раз при
    импорте и не меняется.
    """

    name: str = Field(..., min_length=1, description="Имя представления (например, 'int8')")
    bits: int | None = Field(
        default=None, gt=0, description="Ширина в битах (None для Python int произвольной ширины)"
    )

    # Способности
    integer: bool = Field(default=False, description="Целое представление")
    floating: bool = Field(default=False, description="IEEE-754 float")
    complex: bool = Field(default=False, description="Комплексная пара")
    boolean: bool = Field(default=False, description="Логическое значение")
    signed: bool = Field(default=False, description="Допускает отрицательные значения")

    # Границы (только для целых фиксированной ширины)
    min_value: int | None = Field(default=None, description="Минимальное значение")
    max_value: int | None = Field(default=None, description="Максимальное значение")

    model_config = {"frozen": True}  # Immutable

    @property
    def is_real(self) -> bool:
        return self.integer or self.floating

    def cast(self, value: Any) -> Any:
        """
        Явное преобразование значения в это представление.

        Правила:
        - float → integer: усечение к нулю (int())
        - integer → integer фиксированной ширины: two's-complement wrap
        - float64 → float32: округление через numpy
        - NaN/Inf → integer: ValueError/OverflowError из int() (нативно)

        Args:
            value: Исходное значение любого числового представления

        Returns:
            Значение этого представления (Python scalar или numpy scalar)

        Examples:
            >>> numeric_type_named("int8").cast(300)
            np.int8(44)
            >>> numeric_type_named("uint8").cast(-1)
            np.uint8(255)
            >>> numeric_type_named("int").cast(-3.9)
            -3
        """
        scalar_type = _SCALAR_TYPES[self.name]

        if self.boolean:
            return scalar_type(bool(value))

        if self.integer:
            raw = int(value)
            if self.bits is None:
                return raw
            wrapped = raw & ((1 << self.bits) - 1)
            if self.signed and wrapped >= 1 << (self.bits - 1):
                wrapped -= 1 << self.bits
            if wrapped != raw:
                logger.debug("Wrapped %r into %s as %d", value, self.name, wrapped)
            return scalar_type(wrapped)

        return scalar_type(value)


# =============================================================================
# РЕЕСТР ТИПОВ
# =============================================================================


def _int_type(name: str, bits: int, signed: bool) -> NumericType:
    if signed:
        lo, hi = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        lo, hi = 0, (1 << bits) - 1
    return NumericType(
        name=name, bits=bits, integer=True, signed=signed, min_value=lo, max_value=hi
    )


_TYPES: Final[tuple[NumericType, ...]] = (
    _int_type("int8", 8, signed=True),
    _int_type("int16", 16, signed=True),
    _int_type("int32", 32, signed=True),
    _int_type("int64", 64, signed=True),
    _int_type("uint8", 8, signed=False),
    _int_type("uint16", 16, signed=False),
    _int_type("uint32", 32, signed=False),
    _int_type("uint64", 64, signed=False),
    NumericType(name="int", integer=True, signed=True),
    NumericType(name="float32", bits=32, floating=True, signed=True),
    NumericType(name="float64", bits=64, floating=True, signed=True),
    NumericType(name="float", bits=64, floating=True, signed=True),
    NumericType(name="complex64", bits=64, complex=True),
    NumericType(name="complex128", bits=128, complex=True),
    NumericType(name="complex", bits=128, complex=True),
    NumericType(name="bool", boolean=True),
)

_BY_NAME: Final[dict[str, NumericType]] = {t.name: t for t in _TYPES}

_SCALAR_TYPES: Final[dict[str, type]] = {
    "int8": np.int8,
    "int16": np.int16,
    "int32": np.int32,
    "int64": np.int64,
    "uint8": np.uint8,
    "uint16": np.uint16,
    "uint32": np.uint32,
    "uint64": np.uint64,
    "int": int,
    "float32": np.float32,
    "float64": np.float64,
    "float": float,
    "complex64": np.complex64,
    "complex128": np.complex128,
    "complex": complex,
    "bool": bool,
}


def numeric_type_named(name: str) -> NumericType:
    """
    Описание типа по имени.

    Raises:
        KeyError: Если имя не зарегистрировано
    """
    return _BY_NAME[name]


def numeric_type_of(value: Any) -> NumericType:
    """
    Классификация значения.

    numpy-скаляры классифицируются по dtype (np.longlong и np.int64 дают
    одно описание), Python-скаляры по типу с учётом подклассов. bool
    проверяется раньше int.

    Args:
        value: Классифицируемое значение

    Returns:
        NumericType значения

    Raises:
        NumericKindError: Если значение не является числовым скаляром
            из реестра (str, float16, longdouble, массивы и т.п.)
    """
    if isinstance(value, np.generic):
        numeric_type = _BY_NAME.get(value.dtype.name)
        if numeric_type is not None:
            return numeric_type
        raise NumericKindError(f"Unsupported numpy scalar type: {value.dtype.name}")

    if isinstance(value, bool):
        return _BY_NAME["bool"]
    if isinstance(value, int):
        return _BY_NAME["int"]
    if isinstance(value, float):
        return _BY_NAME["float"]
    if isinstance(value, complex):
        return _BY_NAME["complex"]

    raise NumericKindError(f"Not a numeric scalar: {value!r} ({type(value).__name__})")


def cast_like(value: Any, template: Any) -> Any:
    """
    Преобразование value в представление template.

    Используется каждой T-операцией для восстановления типа результата
    по первичному операнду.

    Examples:
        >>> cast_like(2.9, 7)
        2
        >>> cast_like(1, np.float32(0.5))
        np.float32(1.0)
    """
    return numeric_type_of(template).cast(value)


# =============================================================================
# НАБОРЫ ТИПОВ (CONSTRAINTS)
# =============================================================================


class TypeSet(str, Enum):
    """Набор числовых типов, которым ограничена операция"""

    INTEGER = "integer"
    FLOAT = "float"
    COMPLEX = "complex"
    SIGNED = "signed"
    UNSIGNED = "unsigned"
    REAL = "real"
    NUMBER = "number"
    BOOL = "bool"

    def contains(self, numeric_type: NumericType) -> bool:
        """
        Принадлежит ли представление набору.

        Examples:
            >>> TypeSet.SIGNED.contains(numeric_type_named("float32"))
            True
            >>> TypeSet.SIGNED.contains(numeric_type_named("uint8"))
            False
            >>> TypeSet.NUMBER.contains(numeric_type_named("bool"))
            False
        """
        if self is TypeSet.INTEGER:
            return numeric_type.integer
        if self is TypeSet.FLOAT:
            return numeric_type.floating
        if self is TypeSet.COMPLEX:
            return numeric_type.complex
        if self is TypeSet.SIGNED:
            return numeric_type.is_real and numeric_type.signed
        if self is TypeSet.UNSIGNED:
            return numeric_type.integer and not numeric_type.signed
        if self is TypeSet.REAL:
            return numeric_type.is_real
        if self is TypeSet.NUMBER:
            return numeric_type.is_real or numeric_type.complex
        return numeric_type.boolean

    def members(self) -> tuple[NumericType, ...]:
        """Все зарегистрированные представления набора"""
        return tuple(t for t in _TYPES if self.contains(t))


def require_kind(value: Any, type_set: TypeSet, name: str = "value") -> NumericType:
    """
    Проверка принадлежности значения набору типов на входе операции.

    Проверяется только вид значения, но не его величина: NaN, Inf и ноль
    проходят проверку и обрабатываются арифметикой нативно.

    Args:
        value: Проверяемое значение
        type_set: Требуемый набор
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        NumericType значения

    Raises:
        NumericKindError: Если значение не принадлежит набору
    """
    try:
        numeric_type = numeric_type_of(value)
    except NumericKindError as e:
        raise NumericKindError(f"{name} must be {type_set.value}, got {value!r}") from e

    if not type_set.contains(numeric_type):
        raise NumericKindError(
            f"{name} must be {type_set.value}, got {value!r} ({numeric_type.name})"
        )
    return numeric_type


def require_same_kind(type_set: TypeSet, **operands: Any) -> NumericType:
    """
    Проверка операндов, которые должны разделять одно представление.

    Операции, возвращающие один из операндов (min/max/clamp, объединение
    интервалов), не приводят результат к чужому типу: clamp(0.5, 0, 10)
    дал бы 0 вне [0.5, 10]. Поэтому смешение представлений отклоняется,
    в том числе int с numpy.int64 и float с numpy.float64.

    Args:
        type_set: Требуемый набор
        **operands: Операнды по именам параметров (в порядке сигнатуры)

    Returns:
        Общий NumericType операндов

    Raises:
        NumericKindError: Если операнд вне набора или его представление
            отличается от представления первого операнда

    Examples:
        >>> require_same_kind(TypeSet.REAL, a=1, b=2).name
        'int'
    """
    first_name: str | None = None
    first_type: NumericType | None = None

    for name, value in operands.items():
        numeric_type = require_kind(value, type_set, name)
        if first_type is None:
            first_name, first_type = name, numeric_type
        elif numeric_type.name != first_type.name:
            raise NumericKindError(
                f"{name} must share the numeric type of {first_name} ({first_type.name}), "
                f"got {value!r} ({numeric_type.name})"
            )

    if first_type is None:
        raise ValueError("require_same_kind needs at least one operand")
    return first_type
