"""
Floating — Ближайшее представимое float32/float64 значение для pivot

Округление round-to-nearest-even:
- float64: float(Decimal) корректно округляет и даёт ±inf при переполнении
- float32: точная проверка порога по pivot, затем pivot → binary64 с
  округлением к нечётному (round-to-odd) и binary64 → binary32 через numpy

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Переполнение определяется по pivot до любого округления
2. Результат float32 равен ближайшему binary32 к pivot (без двойного округления):
   round-to-odd в 53 битах сохраняет признак "выше/ниже середины" для 24 бит
"""

import math
from decimal import Decimal

import numpy as np

from numconv.domain.kinds import FLOAT32_OVERFLOW_THRESHOLD, FLOAT64_OVERFLOW_THRESHOLD


def _signed_inf(pivot: Decimal) -> float:
    return -math.inf if pivot.is_signed() else math.inf


def _has_odd_significand(value: float) -> bool:
    return int(np.float64(value).view(np.int64)) & 1 == 1


def _round_to_odd_float64(pivot: Decimal) -> float:
    """
    Округление pivot к binary64 с округлением к нечётному.

    Точно представимый pivot возвращается как есть. Иначе из двух соседних
    binary64 выбирается тот, у которого младший бит мантиссы равен 1.
    """
    nearest = float(pivot)
    exact = Decimal(nearest)
    if exact == pivot:
        return nearest

    # Соседние binary64, между которыми лежит pivot
    if exact > pivot:
        below, above = math.nextafter(nearest, -math.inf), nearest
    else:
        below, above = nearest, math.nextafter(nearest, math.inf)
    return below if _has_odd_significand(below) else above


def nearest_float64(pivot: Decimal) -> float:
    """
    Ближайшее binary64 значение.

    Returns:
        float; ±inf если |pivot| >= FLOAT64_OVERFLOW_THRESHOLD
    """
    if pivot.copy_abs() >= FLOAT64_OVERFLOW_THRESHOLD:
        return _signed_inf(pivot)
    return float(pivot)


def nearest_float32(pivot: Decimal) -> float:
    """
    Ближайшее binary32 значение (возвращается как Python float).

    Returns:
        float, точно представимый в binary32; ±inf если
        |pivot| >= FLOAT32_OVERFLOW_THRESHOLD

    Examples:
        >>> nearest_float32(Decimal("0.1"))
        0.10000000149011612
        >>> nearest_float32(Decimal(2**60 + 2**36 + 1)) == float(2**60 + 2**37)
        True
        >>> nearest_float32(Decimal(2**128))
        inf
    """
    if pivot.copy_abs() >= FLOAT32_OVERFLOW_THRESHOLD:
        return _signed_inf(pivot)
    return float(np.float32(_round_to_odd_float64(pivot)))
