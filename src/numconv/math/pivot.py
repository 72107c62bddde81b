"""
Pivot — Каноническое десятичное представление без потерь

Любое конечное NumericValue переводится в Decimal, не теряя ни одной цифры:
- int → Decimal(int) (точно, контекст точности не применяется)
- float → Decimal(float) — точное двоичное значение, а не кратчайший литерал
  (Decimal(0.1) == 0.1000000000000000055511151231257827...)
- Decimal → как есть

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Шаг value → pivot никогда не теряет информацию
2. NaN/Inf не доходят до pivot (NonFiniteValueError)
3. Над pivot не выполняется арифметика с контекстом (только сравнения)
"""

import math
from decimal import Decimal
from typing import Optional

from numconv.domain.kinds import BIG_INTEGER_MAX_DIGITS, NumberKind
from numconv.domain.value import NumericValue
from numconv.errors import NonFiniteValueError


def to_pivot(number: NumericValue, target: Optional[NumberKind] = None) -> Decimal:
    """
    Точное Decimal представление значения.

    Args:
        number: Исходное значение
        target: Целевой вид (только для сообщения об ошибке)

    Returns:
        Decimal, равный исходному значению

    Raises:
        NonFiniteValueError: если значение NaN или бесконечность

    Examples:
        >>> to_pivot(NumericValue(kind=NumberKind.INT8, value=-5))
        Decimal('-5')
        >>> to_pivot(NumericValue(kind=NumberKind.FLOAT64, value=0.5))
        Decimal('0.5')
    """
    value = number.value
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float) and not math.isfinite(value):
        raise NonFiniteValueError(value, target)
    return Decimal(value)


def text_of(number: NumericValue) -> str:
    """
    Точная текстовая форма значения (строка pivot).

    parse(text_of(v), kind) возвращает тот же результат, что convert(v, kind).
    """
    return str(to_pivot(number))


def is_integral(pivot: Decimal) -> bool:
    """Pivot не имеет дробной части (1.000 — целое, 1.5 — нет)"""
    return pivot == pivot.to_integral_value()


def has_big_integer_size(pivot: Decimal) -> bool:
    """Целая часть pivot не длиннее BIG_INTEGER_MAX_DIGITS цифр"""
    # adjusted() равен порядку старшей цифры; у нуля он зависит только от экспоненты
    return pivot.is_zero() or pivot.adjusted() < BIG_INTEGER_MAX_DIGITS
