"""
Domain types: теги числовых видов, пределы и неизменяемое NumericValue.
"""

from numconv.domain.kinds import (
    BIG_INTEGER_MAX_DIGITS,
    FLOAT32_MAX,
    FLOAT32_OVERFLOW_THRESHOLD,
    FLOAT64_MAX,
    FLOAT64_OVERFLOW_THRESHOLD,
    INT8_MAX,
    INT8_MIN,
    INT16_MAX,
    INT16_MIN,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    INTEGER_RANGES,
    NumberKind,
    resolve_kind,
)
from numconv.domain.value import NUMPY_DTYPES, NumericValue, is_float32_exact, number_of

__all__ = [
    # Kinds
    "NumberKind",
    "resolve_kind",
    # Limits
    "INT8_MIN",
    "INT8_MAX",
    "INT16_MIN",
    "INT16_MAX",
    "INT32_MIN",
    "INT32_MAX",
    "INT64_MIN",
    "INT64_MAX",
    "INTEGER_RANGES",
    "FLOAT32_MAX",
    "FLOAT64_MAX",
    "FLOAT32_OVERFLOW_THRESHOLD",
    "FLOAT64_OVERFLOW_THRESHOLD",
    "BIG_INTEGER_MAX_DIGITS",
    # Value
    "NumericValue",
    "NUMPY_DTYPES",
    "is_float32_exact",
    "number_of",
]
