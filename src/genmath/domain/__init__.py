"""
Domain types: numeric-kind taxonomy.

Contains the runtime classification of numeric representations that every
operation in genmath.math is constrained by.
"""

from src.genmath.domain.numeric_kind import (
    NumericKindError,
    NumericType,
    TypeSet,
    cast_like,
    numeric_type_named,
    numeric_type_of,
    require_kind,
    require_same_kind,
)

__all__ = [
    "NumericKindError",
    "NumericType",
    "TypeSet",
    "cast_like",
    "numeric_type_named",
    "numeric_type_of",
    "require_kind",
    "require_same_kind",
]
