"""
numconv — точная конверсия числовых значений

Конвертирует значение любого поддерживаемого вида (int8..int64, float32,
float64, big integer, big decimal) в другой вид или разбирает текст,
точно решая, возможна ли конверсия без потери информации.

    >>> from numconv import NumberKind, convert, fits_into, parse
    >>> convert(127, NumberKind.INT8).value
    127
    >>> fits_into(128, NumberKind.INT8)
    False
    >>> parse("2.5", NumberKind.FLOAT32).value
    2.5
"""

from numconv.conversion import (
    ConversionOutcome,
    coerce,
    convert,
    fits_into,
    parse,
    parse_plain_int,
    try_convert,
    try_parse,
)
from numconv.domain import NumberKind, NumericValue, number_of
from numconv.errors import (
    MalformedNumberError,
    NonFiniteValueError,
    NumberConversionError,
    UnsupportedKindError,
    ValueDoesNotFitError,
)
from numconv.math import text_of, to_pivot
from numconv.number_methods import abs_value, null_to_zero, zero

__all__ = [
    # Types
    "NumberKind",
    "NumericValue",
    "ConversionOutcome",
    # Conversion
    "coerce",
    "convert",
    "fits_into",
    "number_of",
    "parse",
    "parse_plain_int",
    "text_of",
    "to_pivot",
    "try_convert",
    "try_parse",
    # Number methods
    "abs_value",
    "null_to_zero",
    "zero",
    # Errors
    "MalformedNumberError",
    "NonFiniteValueError",
    "NumberConversionError",
    "UnsupportedKindError",
    "ValueDoesNotFitError",
]
