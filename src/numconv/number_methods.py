"""
Number Methods — Вспомогательные операции над NumericValue

- zero(kind): ноль каждого вида
- null_to_zero(value, kind): None → ноль, иначе convert(value, kind)
- abs_value(value): модуль в том же виде (без переполнения через wrap)
"""

from decimal import Decimal
from types import MappingProxyType
from typing import Any, Final, Mapping, Union

from numconv.conversion.converter import convert
from numconv.domain.kinds import NumberKind, resolve_kind
from numconv.domain.value import NumericValue, number_of


# =============================================================================
# НУЛИ
# =============================================================================

ZEROS: Final[Mapping[NumberKind, NumericValue]] = MappingProxyType(
    {
        NumberKind.INT8: NumericValue(kind=NumberKind.INT8, value=0),
        NumberKind.INT16: NumericValue(kind=NumberKind.INT16, value=0),
        NumberKind.INT32: NumericValue(kind=NumberKind.INT32, value=0),
        NumberKind.INT64: NumericValue(kind=NumberKind.INT64, value=0),
        NumberKind.FLOAT32: NumericValue(kind=NumberKind.FLOAT32, value=0.0),
        NumberKind.FLOAT64: NumericValue(kind=NumberKind.FLOAT64, value=0.0),
        NumberKind.BIG_INTEGER: NumericValue(kind=NumberKind.BIG_INTEGER, value=0),
        NumberKind.BIG_DECIMAL: NumericValue(kind=NumberKind.BIG_DECIMAL, value=Decimal(0)),
    }
)


def zero(kind: Union[NumberKind, str]) -> NumericValue:
    """Ноль заданного вида"""
    return ZEROS[resolve_kind(kind)]


def null_to_zero(value: Any, kind: Union[NumberKind, str]) -> NumericValue:
    """
    None → ноль заданного вида, иначе convert(value, kind).

    Examples:
        >>> null_to_zero(None, NumberKind.INT32).value
        0
        >>> null_to_zero(7, NumberKind.INT32).value
        7
    """
    if value is None:
        return zero(kind)
    return convert(value, kind)


# =============================================================================
# МОДУЛЬ
# =============================================================================


def abs_value(value: Any) -> NumericValue:
    """
    Модуль значения в том же виде.

    Для fixed-width целых abs(MIN) не представим (abs(-128) для int8):
    вместо wrap-around вызывается ValueDoesNotFitError.

    Raises:
        ValueDoesNotFitError: модуль не помещается в вид значения
        UnsupportedKindError: вид значения не поддерживается

    Examples:
        >>> abs_value(-5).value
        5
        >>> abs_value(NumericValue(kind=NumberKind.FLOAT32, value=-0.5)).value
        0.5
    """
    number = number_of(value)
    payload = number.value
    if isinstance(payload, Decimal):
        magnitude: Union[int, float, Decimal] = payload.copy_abs()
    else:
        magnitude = abs(payload)

    if number.kind.is_fixed_width_integer:
        return convert(magnitude, number.kind)
    return NumericValue(kind=number.kind, value=magnitude)
