"""
Coerce — Приведение произвольного объекта к числу заданного вида

Маршрутизация:
- bool → 1 / 0, затем convert()
- str → parse()
- всё остальное → convert() (NumericValue, int, float, Decimal, numpy scalar)
"""

from typing import Any, Union

from numconv.conversion.converter import convert
from numconv.conversion.parser import parse
from numconv.domain.kinds import NumberKind, resolve_kind
from numconv.domain.value import NumericValue


def coerce(obj: Any, target: Union[NumberKind, str]) -> NumericValue:
    """
    Приведение объекта к NumericValue вида target.

    Raises:
        ValueDoesNotFitError, NonFiniteValueError, MalformedNumberError,
        UnsupportedKindError: как у convert()/parse()

    Examples:
        >>> coerce(True, NumberKind.INT8).value
        1
        >>> coerce("42", NumberKind.INT16).value
        42
        >>> coerce(2.0, NumberKind.INT64).value
        2
    """
    target = resolve_kind(target)
    if isinstance(obj, bool):
        return convert(1 if obj else 0, target)
    if isinstance(obj, str):
        return parse(obj, target)
    return convert(obj, target)
