"""
SpecialValues — NaN и бесконечности из точных битовых шаблонов

Значения собираются реинтерпретацией фиксированного битового шаблона, а не
берутся из float("nan") / math.inf / numpy.nan: библиотечные константы не
гарантируют нужный знак и payload.

Раскладка binary32:  S | EEEEEEEE  | Q | payload (22 бита)
Раскладка binary64:  S | EEEEEEEEEEE | Q | payload (51 бит)
Q — бит quiet: 1 у quiet NaN, 0 у signalling NaN (payload тогда ненулевой).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 32-битные значения возвращаются как numpy.float32 через view, без
   преобразования через float64 (которое может «успокоить» signalling NaN)
2. 64-битные значения возвращаются как Python float через struct (побайтовое
   копирование)
3. float32_bits(f()) == *_32_BITS и float64_bits(f()) == *_64_BITS бит в бит
"""

import struct
from typing import Final

import numpy as np

# =============================================================================
# БИТОВЫЕ ШАБЛОНЫ BINARY32
# =============================================================================

QNAN32_BITS: Final[int] = 0xFFC00001
SNAN32_BITS: Final[int] = 0xFF800001
PINF32_BITS: Final[int] = 0x7F800000
NINF32_BITS: Final[int] = 0xFF800000

# =============================================================================
# БИТОВЫЕ ШАБЛОНЫ BINARY64
# =============================================================================

QNAN64_BITS: Final[int] = 0xFFF8000000000001
SNAN64_BITS: Final[int] = 0xFFF0000000000001
PINF64_BITS: Final[int] = 0x7FF0000000000000
NINF64_BITS: Final[int] = 0xFFF0000000000000


# =============================================================================
# РЕИНТЕРПРЕТАЦИЯ БИТОВ
# =============================================================================


def float32_from_bits(bits: int) -> np.float32:
    """
    Реинтерпретация 32-битного шаблона как binary32.

    Raises:
        OverflowError: Если bits не помещается в uint32
    """
    return np.array(bits, dtype=np.uint32).view(np.float32)[()]


def float32_bits(value: np.float32) -> int:
    """
    Битовый шаблон binary32.

    Для numpy.float32 биты читаются без преобразования. Python float сначала
    округляется до float32, и payload signalling NaN при этом не гарантирован.
    """
    return int(np.array(value, dtype=np.float32).view(np.uint32)[()])


def float64_from_bits(bits: int) -> float:
    """
    Реинтерпретация 64-битного шаблона как binary64.

    Raises:
        struct.error: Если bits не помещается в uint64
    """
    return struct.unpack("<d", struct.pack("<Q", bits))[0]


def float64_bits(value: float) -> int:
    """Битовый шаблон binary64"""
    return struct.unpack("<Q", struct.pack("<d", value))[0]


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def qnan32() -> np.float32:
    """Quiet NaN binary32 (0xFFC00001)"""
    return float32_from_bits(QNAN32_BITS)


def snan32() -> np.float32:
    """Signalling NaN binary32 (0xFF800001)"""
    return float32_from_bits(SNAN32_BITS)


def pinf32() -> np.float32:
    """+Inf binary32 (0x7F800000)"""
    return float32_from_bits(PINF32_BITS)


def ninf32() -> np.float32:
    """-Inf binary32 (0xFF800000)"""
    return float32_from_bits(NINF32_BITS)


def qnan64() -> float:
    """Quiet NaN binary64 (0xFFF8000000000001)"""
    return float64_from_bits(QNAN64_BITS)


def snan64() -> float:
    """Signalling NaN binary64 (0xFFF0000000000001)"""
    return float64_from_bits(SNAN64_BITS)


def pinf64() -> float:
    """+Inf binary64 (0x7FF0000000000000)"""
    return float64_from_bits(PINF64_BITS)


def ninf64() -> float:
    """-Inf binary64 (0xFFF0000000000000)"""
    return float64_from_bits(NINF64_BITS)
