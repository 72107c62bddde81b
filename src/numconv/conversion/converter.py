"""
Converter — Точная конверсия числовых значений

Алгоритм convert(value, target):
1. Вид источника == target → значение возвращается без изменений
2. value → pivot (точный Decimal, NaN/Inf отвергаются)
3. float-цели: ближайшее представимое значение; ±inf при конечном pivot
   означает переполнение → отказ. Округление допускается.
4. Целые и BIG_INTEGER цели: pivot обязан быть целым и в диапазоне
   (для BIG_INTEGER: не длиннее BIG_INTEGER_MAX_DIGITS цифр).
   Любое округление или выход за диапазон → отказ, а не округлённый результат.
5. Отказ → ValueDoesNotFitError(value, target, reason)

Точные процедуры (одна на целевой вид) сигнализируют о потере через
встроенные ArithmeticError/OverflowError; диспетчер переводит их в
структурированную ошибку.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Единственное место, где принимается авторитетное решение о потерях
2. fits_into() согласован с convert() для любого входа
3. Результат либо полностью успешен, либо исключение (без частичных значений)
"""

import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from functools import partial
from types import MappingProxyType
from typing import Any, Callable, Final, Mapping, Optional, Union

from numconv.domain.kinds import (
    BIG_INTEGER_MAX_DIGITS,
    INTEGER_RANGES,
    NumberKind,
    resolve_kind,
)
from numconv.domain.value import NumericValue, number_of
from numconv.errors import (
    MalformedNumberError,
    NonFiniteValueError,
    NumberConversionError,
    ValueDoesNotFitError,
)
from numconv.math.floating import nearest_float32, nearest_float64
from numconv.math.pivot import has_big_integer_size, is_integral, to_pivot

logger = logging.getLogger(__name__)

Payload = Union[int, float, Decimal]

# Ошибки данных, которые try_* превращают в ConversionOutcome.
# UnsupportedKindError сюда не входит: это ошибка вызывающего кода.
DATA_ERRORS: Final = (ValueDoesNotFitError, NonFiniteValueError, MalformedNumberError)


# =============================================================================
# ТОЧНЫЕ ПРОЦЕДУРЫ (pivot → payload целевого вида)
# =============================================================================


def _exact_integer(pivot: Decimal, kind: NumberKind) -> int:
    bounds = INTEGER_RANGES.get(kind)
    if bounds is not None and not bounds[0] <= pivot <= bounds[1]:
        raise OverflowError(f"outside [{bounds[0]}, {bounds[1]}]")
    if bounds is None and not has_big_integer_size(pivot):
        raise OverflowError(f"more than {BIG_INTEGER_MAX_DIGITS} digits")
    if not is_integral(pivot):
        raise ArithmeticError("fractional part would be lost")
    return int(pivot)


def _exact_float(pivot: Decimal, nearest: Callable[[Decimal], float]) -> float:
    result = nearest(pivot)
    if math.isinf(result):
        raise OverflowError("magnitude exceeds largest finite value")
    return result


def _exact_decimal(pivot: Decimal) -> Decimal:
    return pivot


_EXACT_CONVERSIONS: Final[Mapping[NumberKind, Callable[[Decimal], Payload]]] = MappingProxyType(
    {
        NumberKind.INT8: partial(_exact_integer, kind=NumberKind.INT8),
        NumberKind.INT16: partial(_exact_integer, kind=NumberKind.INT16),
        NumberKind.INT32: partial(_exact_integer, kind=NumberKind.INT32),
        NumberKind.INT64: partial(_exact_integer, kind=NumberKind.INT64),
        NumberKind.BIG_INTEGER: partial(_exact_integer, kind=NumberKind.BIG_INTEGER),
        NumberKind.FLOAT32: partial(_exact_float, nearest=nearest_float32),
        NumberKind.FLOAT64: partial(_exact_float, nearest=nearest_float64),
        NumberKind.BIG_DECIMAL: _exact_decimal,
    }
)


def narrow(pivot: Decimal, target: NumberKind, original: Any) -> NumericValue:
    """
    Второй шаг конверсии: pivot → значение целевого вида.

    Args:
        pivot: Точное Decimal представление
        target: Целевой вид
        original: Исходное значение (или текст) для сообщения об ошибке

    Returns:
        NumericValue вида target

    Raises:
        ValueDoesNotFitError: если target не представляет pivot без потерь
    """
    try:
        payload = _EXACT_CONVERSIONS[target](pivot)
    except ArithmeticError as e:
        logger.debug("%s does not fit into %s: %s", original, target.value, e)
        raise ValueDoesNotFitError(original, target, str(e)) from e
    return NumericValue(kind=target, value=payload)


# =============================================================================
# PUBLIC API
# =============================================================================


def convert(value: Any, target: Union[NumberKind, str]) -> NumericValue:
    """
    Конверсия значения в target без потери информации.

    Args:
        value: NumericValue или сырое значение (int, float, Decimal, numpy scalar)
        target: Целевой вид (NumberKind или строка)

    Returns:
        NumericValue вида target

    Raises:
        ValueDoesNotFitError: значение не помещается в target
        NonFiniteValueError: NaN/Inf при различающихся видах
        UnsupportedKindError: вид значения или тег не поддерживаются

    Examples:
        >>> convert(127, NumberKind.INT8).value
        127
        >>> convert(128, NumberKind.INT8)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ValueDoesNotFitError: 128 does not fit into int8 (outside [-128, 127])
        >>> convert(0.1, NumberKind.FLOAT32).value
        0.10000000149011612
    """
    target = resolve_kind(target)
    number = number_of(value, target)

    if number.kind is target:
        return number

    pivot = to_pivot(number, target)
    return narrow(pivot, target, number.value)


# =============================================================================
# CONVERSION OUTCOME
# =============================================================================


@dataclass(frozen=True, eq=False)
class ConversionOutcome:
    """
    Результат конверсии без исключения: значение либо ошибка.

    Два результата равны, если совпадают target, значение и категория ошибки
    (тип исключения). Текст сообщения не сравнивается.
    """

    target: NumberKind
    value: Optional[NumericValue] = None
    error: Optional[NumberConversionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> NumericValue:
        """Значение или исходное исключение"""
        if self.error is not None:
            raise self.error
        if self.value is None:
            raise ValueError(f"outcome for {self.target.value} holds neither a value nor an error")
        return self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConversionOutcome):
            return NotImplemented
        return (
            self.target is other.target
            and self.value == other.value
            and type(self.error) is type(other.error)
        )


def try_convert(value: Any, target: Union[NumberKind, str]) -> ConversionOutcome:
    """
    convert() без исключений для ошибок данных.

    Raises:
        UnsupportedKindError: не перехватывается (ошибка вызова)
    """
    target = resolve_kind(target)
    try:
        return ConversionOutcome(target=target, value=convert(value, target))
    except DATA_ERRORS as e:
        return ConversionOutcome(target=target, error=e)
