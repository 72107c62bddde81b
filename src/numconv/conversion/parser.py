"""
Parser — Разбор текста в числовое значение заданного вида

Текст сначала разбирается в Decimal (принимает и целые, и дробные литералы),
затем проходит тот же шаг pivot → target, что и convert().

Грамматика (только ASCII цифры, без пробелов, '_', NaN и Infinity):
    [+-]? (digits ('.' digits?)? | '.' digits) ([eE] [+-]? digits)?

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Некорректный текст → MalformedNumberError (не ValueDoesNotFitError)
2. parse(text_of(v), T) == convert(v, T) для любого конечного v
"""

import logging
import re
from decimal import Decimal
from typing import Any, Final, Pattern, Union

from numconv.conversion.converter import DATA_ERRORS, ConversionOutcome, narrow
from numconv.domain.kinds import NumberKind, resolve_kind
from numconv.domain.value import NumericValue
from numconv.errors import MalformedNumberError, UnsupportedKindError

logger = logging.getLogger(__name__)


# =============================================================================
# ГРАММАТИКА
# =============================================================================

DECIMAL_LITERAL: Final[Pattern[str]] = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)

PLAIN_INTEGER_LITERAL: Final[Pattern[str]] = re.compile(r"[+-]?[0-9]+")


def _parse_decimal(text: Any, target: NumberKind) -> Decimal:
    if not isinstance(text, str):
        logger.debug("Not a string: %r", text)
        raise MalformedNumberError(text, target, "not a string")
    if not text:
        raise MalformedNumberError(text, target, "empty string")
    if DECIMAL_LITERAL.fullmatch(text) is None:
        logger.debug("Malformed number %r for %s", text, target.value)
        raise MalformedNumberError(text, target)
    return Decimal(text)


# =============================================================================
# PUBLIC API
# =============================================================================


def parse(text: str, target: Union[NumberKind, str]) -> NumericValue:
    """
    Разбор строки в значение вида target.

    Args:
        text: Десятичный литерал ('42', '-0.5', '1e3', '.25')
        target: Целевой вид (NumberKind или строка)

    Returns:
        NumericValue вида target

    Raises:
        MalformedNumberError: текст не является числом (включая '' и None)
        ValueDoesNotFitError: число не помещается в target без потерь
        UnsupportedKindError: тег не поддерживается

    Examples:
        >>> parse("127", NumberKind.INT8).value
        127
        >>> parse("1e2", NumberKind.INT32).value
        100
        >>> parse("0.1", NumberKind.FLOAT64).value
        0.1
    """
    target = resolve_kind(target)
    pivot = _parse_decimal(text, target)
    return narrow(pivot, target, text)


def try_parse(text: str, target: Union[NumberKind, str]) -> ConversionOutcome:
    """parse() без исключений для ошибок данных"""
    target = resolve_kind(target)
    try:
        return ConversionOutcome(target=target, value=parse(text, target))
    except DATA_ERRORS as e:
        return ConversionOutcome(target=target, error=e)


def parse_plain_int(text: str, target: Union[NumberKind, str] = NumberKind.INT32) -> int:
    """
    Строгий разбор целого числа.

    Значительно строже parse(): запрещены десятичная точка, дробная часть
    (даже из одних нулей) и научная нотация.

    Недопустимые примеры:
        '7F'     — не число
        '.7'     — не целое
        '7.0'    — дробная часть
        '7.'     — десятичная точка
        '3.4e+2' — научная нотация
        '123456789123456789' — переполнение int32

    Args:
        text: Строка с целым числом
        target: Целочисленный вид (по умолчанию INT32)

    Returns:
        int в диапазоне target

    Raises:
        MalformedNumberError: текст не является простым целым
        ValueDoesNotFitError: число вне диапазона target
        UnsupportedKindError: target не целочисленный
    """
    target = resolve_kind(target)
    if not target.is_integral:
        raise UnsupportedKindError(
            text, target, reason=f"{target.value} is not an integer kind"
        )

    # Корректный десятичный литерал, но не простое целое
    if (
        isinstance(text, str)
        and PLAIN_INTEGER_LITERAL.fullmatch(text) is None
        and DECIMAL_LITERAL.fullmatch(text) is not None
    ):
        if "e" in text.lower():
            raise MalformedNumberError(text, target, "scientific notation not allowed")
        if text.endswith("."):
            raise MalformedNumberError(text, target, "decimal point not allowed")
        if "." in text:
            raise MalformedNumberError(text, target, "decimal fraction not allowed")

    pivot = _parse_decimal(text, target)
    return narrow(pivot, target, text).value
