"""
Constants — Именованные математические константы и границы типов

Все значения заданы литералами, а не вычисляются. Математические константы
записаны с запасом точности и округляются до ближайшего binary64 при разборе.
"""

from typing import Final

# =============================================================================
# МАТЕМАТИЧЕСКИЕ КОНСТАНТЫ
# =============================================================================

DEG2RAD: Final[float] = 0.017453292519943295769  # Tau / 360
RAD2DEG: Final[float] = 57.295779513082320876798  # 360 / Tau
PI: Final[float] = 3.14159265358979323846  # Circumference / Diameter
TAU: Final[float] = 6.28318530717958647692  # 2 * Pi
E: Final[float] = 2.71828182845904523536  # Euler's constant
PHI: Final[float] = 1.61803398874989484820  # Golden ratio

LOG_E_2: Final[float] = 0.69314718055994530942
LOG_2_E: Final[float] = 1.44269504088896340736
LOG_2_10: Final[float] = 3.32192809488736234787
LOG_10_2: Final[float] = 0.30102999566398119521
LOG_E_10: Final[float] = 2.30258509299404568402
LOG_10_E: Final[float] = 0.43429448190325182765

SQRT_2: Final[float] = 1.41421356237309504880
SQRT_E: Final[float] = 1.64872127070012814685
SQRT_PHI: Final[float] = 1.27201964951406896425
SQRT_PI: Final[float] = 1.77245385090551602730
SQRT_TAU: Final[float] = 2.50662827463100050242


# =============================================================================
# ГРАНИЦЫ ЦЕЛЫХ ТИПОВ
# =============================================================================

MAX_U8: Final[int] = 255
MAX_I8: Final[int] = 127
MIN_I8: Final[int] = -128
MAX_U16: Final[int] = 65535
MAX_I16: Final[int] = 32767
MIN_I16: Final[int] = -32768
MAX_U32: Final[int] = 4294967295
MAX_I32: Final[int] = 2147483647
MIN_I32: Final[int] = -2147483648
MAX_U64: Final[int] = 18446744073709551615
MAX_I64: Final[int] = 9223372036854775807
MIN_I64: Final[int] = -9223372036854775808

# Маска промежуточного uint64 в imod
U64_MASK: Final[int] = 0xFFFFFFFFFFFFFFFF


# =============================================================================
# ГРАНИЦЫ FLOAT ТИПОВ
# =============================================================================

MAX_F32: Final[float] = 3.4028234663852886e38
SMALL_F32: Final[float] = 1.401298464324817e-45  # Наименьший subnormal binary32
MAX_F64: Final[float] = 1.7976931348623157e308
SMALL_F64: Final[float] = 5e-324  # Наименьший subnormal binary64
