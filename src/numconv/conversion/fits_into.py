"""
Fits Into — Предикаты допустимости конверсии без её выполнения

Отвечает на вопрос "потеряет ли информацию конверсия value → target",
не создавая pivot и не конструируя исключений.

Для каждого целевого вида — своя таблица предикатов, ключ — вид ИСТОЧНИКА:
правило "помещается ли Decimal в int64" отличается от правила
"помещается ли int64 в int32". Все таблицы неизменяемы и строятся при импорте.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. fits_into(v, T) is True ⇔ convert(v, T) завершается успешно
2. Целевые float-виды допускают округление; отказ только по величине
   (|x| >= порога переполнения) или для NaN/Inf
3. Целевые целые виды не допускают ни дробной части, ни выхода за диапазон
   (BIG_INTEGER ограничен BIG_INTEGER_MAX_DIGITS цифрами)
4. Отсутствие предиката для вида источника → UnsupportedKindError,
   а не False
"""

import logging
import math
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Callable, Final, Mapping, Union

from numconv.domain.kinds import (
    FLOAT32_OVERFLOW_THRESHOLD,
    FLOAT64_OVERFLOW_THRESHOLD,
    INTEGER_RANGES,
    NumberKind,
    resolve_kind,
)
from numconv.domain.value import number_of
from numconv.errors import NonFiniteValueError, UnsupportedKindError
from numconv.math.pivot import has_big_integer_size, is_integral

logger = logging.getLogger(__name__)

Payload = Union[int, float, Decimal]
Predicate = Callable[[Payload], bool]


# =============================================================================
# ПРИМИТИВНЫЕ ПРЕДИКАТЫ
# =============================================================================


def _yes(value: Payload) -> bool:
    return True


def _finite(value: float) -> bool:
    return math.isfinite(value)


def _int_in_range(lo: int, hi: int) -> Predicate:
    def test(value: int) -> bool:
        return lo <= value <= hi

    return test


def _float_in_range(lo: int, hi: int) -> Predicate:
    # Сравнение float с int в Python точное; inf.is_integer() и nan.is_integer() ложны
    def test(value: float) -> bool:
        return value.is_integer() and lo <= value <= hi

    return test


def _decimal_in_range(lo: int, hi: int) -> Predicate:
    def test(value: Decimal) -> bool:
        return lo <= value <= hi and is_integral(value)

    return test


def _float_is_integer(value: float) -> bool:
    return value.is_integer()


def _decimal_is_big_integer(value: Decimal) -> bool:
    return has_big_integer_size(value) and is_integral(value)


def _below(threshold: int) -> Predicate:
    """|value| строго меньше порога (для int и Decimal)"""

    def test(value: Union[int, Decimal]) -> bool:
        magnitude = value.copy_abs() if isinstance(value, Decimal) else abs(value)
        return magnitude < threshold

    return test


def _finite_below(threshold: int) -> Predicate:
    def test(value: float) -> bool:
        return math.isfinite(value) and abs(value) < threshold

    return test


# =============================================================================
# ТАБЛИЦЫ ПРЕДИКАТОВ (по целевому виду)
# =============================================================================


def _fixed_width_table(target: NumberKind) -> Mapping[NumberKind, Predicate]:
    lo, hi = INTEGER_RANGES[target]
    table: dict[NumberKind, Predicate] = {
        NumberKind.FLOAT32: _float_in_range(lo, hi),
        NumberKind.FLOAT64: _float_in_range(lo, hi),
        NumberKind.BIG_INTEGER: _int_in_range(lo, hi),
        NumberKind.BIG_DECIMAL: _decimal_in_range(lo, hi),
    }
    for source, (source_lo, source_hi) in INTEGER_RANGES.items():
        # Источник не шире цели → всегда помещается
        if lo <= source_lo and source_hi <= hi:
            table[source] = _yes
        else:
            table[source] = _int_in_range(lo, hi)
    return MappingProxyType(table)


_FITS_INTO: Final[Mapping[NumberKind, Mapping[NumberKind, Predicate]]] = MappingProxyType(
    {
        NumberKind.INT8: _fixed_width_table(NumberKind.INT8),
        NumberKind.INT16: _fixed_width_table(NumberKind.INT16),
        NumberKind.INT32: _fixed_width_table(NumberKind.INT32),
        NumberKind.INT64: _fixed_width_table(NumberKind.INT64),
        NumberKind.BIG_INTEGER: MappingProxyType(
            {
                NumberKind.INT8: _yes,
                NumberKind.INT16: _yes,
                NumberKind.INT32: _yes,
                NumberKind.INT64: _yes,
                NumberKind.FLOAT32: _float_is_integer,
                NumberKind.FLOAT64: _float_is_integer,
                NumberKind.BIG_INTEGER: _yes,
                NumberKind.BIG_DECIMAL: _decimal_is_big_integer,
            }
        ),
        NumberKind.BIG_DECIMAL: MappingProxyType(
            {
                NumberKind.INT8: _yes,
                NumberKind.INT16: _yes,
                NumberKind.INT32: _yes,
                NumberKind.INT64: _yes,
                NumberKind.FLOAT32: _finite,
                NumberKind.FLOAT64: _finite,
                NumberKind.BIG_INTEGER: _yes,
                NumberKind.BIG_DECIMAL: _yes,
            }
        ),
        NumberKind.FLOAT64: MappingProxyType(
            {
                NumberKind.INT8: _yes,
                NumberKind.INT16: _yes,
                NumberKind.INT32: _yes,
                NumberKind.INT64: _yes,
                NumberKind.FLOAT32: _finite,
                NumberKind.FLOAT64: _yes,
                NumberKind.BIG_INTEGER: _below(FLOAT64_OVERFLOW_THRESHOLD),
                NumberKind.BIG_DECIMAL: _below(FLOAT64_OVERFLOW_THRESHOLD),
            }
        ),
        NumberKind.FLOAT32: MappingProxyType(
            {
                NumberKind.INT8: _yes,
                NumberKind.INT16: _yes,
                NumberKind.INT32: _yes,
                NumberKind.INT64: _yes,
                NumberKind.FLOAT32: _yes,
                NumberKind.FLOAT64: _finite_below(FLOAT32_OVERFLOW_THRESHOLD),
                NumberKind.BIG_INTEGER: _below(FLOAT32_OVERFLOW_THRESHOLD),
                NumberKind.BIG_DECIMAL: _below(FLOAT32_OVERFLOW_THRESHOLD),
            }
        ),
    }
)


# =============================================================================
# PUBLIC API
# =============================================================================


def predicate_for(source: NumberKind, target: NumberKind) -> Predicate:
    """
    Предикат допустимости для пары (source, target).

    Raises:
        UnsupportedKindError: если для пары не зарегистрирован предикат
    """
    predicate = _FITS_INTO[target].get(source)
    if predicate is None:
        raise UnsupportedKindError(
            None, target, reason=f"no conversion path from {source.value} to {target.value}"
        )
    return predicate


def fits_into(value: Any, target: Union[NumberKind, str]) -> bool:
    """
    Можно ли конвертировать value в target без потери информации.

    Источник — NumericValue или сырое значение (int, float, Decimal,
    numpy scalar). Одинаковый вид источника и цели всегда True.

    Args:
        value: Проверяемое значение
        target: Целевой вид (NumberKind или строка, например 'int32')

    Returns:
        True если convert(value, target) завершится успешно

    Raises:
        UnsupportedKindError: если вид значения или тег не поддерживаются

    Examples:
        >>> fits_into(127, NumberKind.INT8)
        True
        >>> fits_into(128, "int8")
        False
        >>> fits_into(0.5, NumberKind.INT64)
        False
        >>> fits_into(1e300, NumberKind.FLOAT32)
        False
    """
    target = resolve_kind(target)
    try:
        number = number_of(value, target)
    except NonFiniteValueError:
        logger.debug("Non-finite %r does not fit into %s", value, target.value)
        return False
    return predicate_for(number.kind, target)(number.value)
