"""
Core math modules для genmath

Обобщённые математические примитивы над числовыми видами Real.
"""

# Approximation
from src.genmath.math.approximation import quick_derivative, quick_integral

# Elementary
from src.genmath.math.elementary import (
    absolute,
    ceil,
    clamp,
    floor,
    lerp,
    log,
    maximum,
    minimum,
    power,
    range_fraction,
    root,
    round_half_away,
    sign,
    truncating_divide,
    zero_or_value,
)

# IEEE float64 primitives
from src.genmath.math.ieee import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    ieee_divide,
    ieee_fmod,
    ieee_log,
    ieee_pow,
    is_close,
    is_valid_float,
)

# Modulo
from src.genmath.math.modulo import (
    IntFrac,
    WholeRem,
    fint_frac,
    fmod,
    fwhole_rem,
    imod,
    iwhole_rem,
)

# Ranges
from src.genmath.math.ranges import RangeMerge, combine_ranges_if_overlap, ranges_overlap

# Special values
from src.genmath.math.special_values import (
    NINF32_BITS,
    NINF64_BITS,
    PINF32_BITS,
    PINF64_BITS,
    QNAN32_BITS,
    QNAN64_BITS,
    SNAN32_BITS,
    SNAN64_BITS,
    float32_bits,
    float32_from_bits,
    float64_bits,
    float64_from_bits,
    ninf32,
    ninf64,
    pinf32,
    pinf64,
    qnan32,
    qnan64,
    snan32,
    snan64,
)

# Trigonometry
from src.genmath.math.trigonometry import (
    acos,
    acos_deg,
    asin,
    asin_deg,
    atan,
    atan_deg,
    cos,
    cos_deg,
    sin,
    sin_deg,
    tan,
    tan_deg,
)

__all__ = [
    # Approximation
    "quick_derivative",
    "quick_integral",
    # Elementary
    "absolute",
    "ceil",
    "clamp",
    "floor",
    "lerp",
    "log",
    "maximum",
    "minimum",
    "power",
    "range_fraction",
    "root",
    "round_half_away",
    "sign",
    "truncating_divide",
    "zero_or_value",
    # IEEE — Constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # IEEE — Functions
    "ieee_divide",
    "ieee_fmod",
    "ieee_log",
    "ieee_pow",
    "is_close",
    "is_valid_float",
    # Modulo — Types
    "IntFrac",
    "WholeRem",
    # Modulo — Functions
    "fint_frac",
    "fmod",
    "fwhole_rem",
    "imod",
    "iwhole_rem",
    # Ranges
    "RangeMerge",
    "combine_ranges_if_overlap",
    "ranges_overlap",
    # Special values — Bit patterns
    "NINF32_BITS",
    "NINF64_BITS",
    "PINF32_BITS",
    "PINF64_BITS",
    "QNAN32_BITS",
    "QNAN64_BITS",
    "SNAN32_BITS",
    "SNAN64_BITS",
    # Special values — Functions
    "float32_bits",
    "float32_from_bits",
    "float64_bits",
    "float64_from_bits",
    "ninf32",
    "ninf64",
    "pinf32",
    "pinf64",
    "qnan32",
    "qnan64",
    "snan32",
    "snan64",
    # Trigonometry
    "acos",
    "acos_deg",
    "asin",
    "asin_deg",
    "atan",
    "atan_deg",
    "cos",
    "cos_deg",
    "sin",
    "sin_deg",
    "tan",
    "tan_deg",
]
