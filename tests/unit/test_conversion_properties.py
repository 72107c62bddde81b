"""
Свойства конверсии на детерминированной сетке значений

Проверяет для каждой пары (значение, целевой вид):
1. fits_into(v, T) согласован с успехом convert(v, T)
2. convert(v, v.kind) возвращает v
3. Расширение fixed-width целых обратимо
4. parse(text_of(v), T) даёт тот же результат, что convert(v, T)
"""

from decimal import Decimal
from fractions import Fraction
from typing import List

import numpy as np
import pytest

from numconv.conversion import convert, fits_into, try_convert, try_parse
from numconv.domain.kinds import (
    BIG_INTEGER_MAX_DIGITS,
    FLOAT32_MAX,
    FLOAT64_MAX,
    INT16_MAX,
    INT16_MIN,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    INTEGER_RANGES,
    NumberKind,
)
from numconv.domain.value import NumericValue
from numconv.math import text_of, to_pivot

# =============================================================================
# СЕТКА ЗНАЧЕНИЙ
# =============================================================================


def _values(kind: NumberKind, *payloads: object) -> List[NumericValue]:
    return [NumericValue(kind=kind, value=p) for p in payloads]


SAMPLES: List[NumericValue] = [
    *_values(NumberKind.INT8, -128, -1, 0, 1, 127),
    *_values(NumberKind.INT16, INT16_MIN, 300, INT16_MAX),
    *_values(NumberKind.INT32, INT32_MIN, 70000, INT32_MAX),
    *_values(NumberKind.INT64, INT64_MIN, 2**40, INT64_MAX),
    *_values(
        NumberKind.FLOAT32,
        0.5,
        -1.5,
        3.0,
        float(np.float32(0.1)),
        float(np.float32(1e-45)),
        FLOAT32_MAX,
        float("inf"),
        float("nan"),
    ),
    *_values(
        NumberKind.FLOAT64,
        0.1,
        -2.5,
        128.0,
        2.0**63,
        -(2.0**63),
        1e300,
        5e-324,
        FLOAT64_MAX,
        float("-inf"),
        float("nan"),
    ),
    *_values(
        NumberKind.BIG_INTEGER,
        0,
        2**63,
        -(2**63) - 1,
        10**40,
        2**1024,
        # Около середины между соседними binary32
        2**60 + 2**36 + 1,
        -(2**60) - 2**36 - 1,
        2**60 + 2**36 - 1,
        2**60 + 3 * 2**36,
    ),
    *_values(
        NumberKind.BIG_DECIMAL,
        Decimal("0"),
        Decimal("1.000"),
        Decimal("-7.25"),
        Decimal("1e400"),
        Decimal("1e-400"),
        Decimal("3.4028235677973366E+38"),
        Decimal("1.000000059604644775390625000000000001"),
        Decimal("1.000000059604644775390624999999999999"),
        # Больше BIG_INTEGER_MAX_DIGITS цифр
        Decimal(10**BIG_INTEGER_MAX_DIGITS),
        Decimal("1E+999999999"),
        Decimal("-1E+999999999"),
    ),
]

FINITE_SAMPLES: List[NumericValue] = [v for v in SAMPLES if v.is_finite]


def _id(value: NumericValue) -> str:
    text = str(value.value)
    if len(text) > 40:
        text = f"{text[:20]}...({len(text)} chars)"
    return f"{value.kind.value}:{text}"


# =============================================================================
# ТЕСТЫ СОГЛАСОВАННОСТИ
# =============================================================================


class TestFitsIntoAgreesWithConvert:
    """fits_into() и convert() принимают одно и то же решение"""

    @pytest.mark.parametrize("target", list(NumberKind))
    @pytest.mark.parametrize("value", SAMPLES, ids=_id)
    def test_agreement(self, value: NumericValue, target: NumberKind) -> None:
        assert fits_into(value, target) is try_convert(value, target).ok


class TestIdentityConversion:
    """convert(v, v.kind) возвращает v"""

    @pytest.mark.parametrize("value", SAMPLES, ids=_id)
    def test_identity(self, value: NumericValue) -> None:
        assert convert(value, value.kind) is value


class TestWideningRoundTrip:
    """Расширение целых и обратное сужение возвращают исходное значение"""

    @pytest.mark.parametrize(
        "value", [v for v in SAMPLES if v.kind.is_fixed_width_integer], ids=_id
    )
    def test_round_trip(self, value: NumericValue) -> None:
        lo, hi = INTEGER_RANGES[value.kind]
        wider = [
            kind
            for kind, (kind_lo, kind_hi) in INTEGER_RANGES.items()
            if kind_lo <= lo and hi <= kind_hi
        ]
        for target in [*wider, NumberKind.BIG_INTEGER, NumberKind.BIG_DECIMAL]:
            widened = convert(value, target)
            assert widened.kind is target
            assert convert(widened, value.kind) == value


class TestParseAgreesWithConvert:
    """parse(text_of(v), T) совпадает с convert(v, T)"""

    @pytest.mark.parametrize("target", list(NumberKind))
    @pytest.mark.parametrize("value", FINITE_SAMPLES, ids=_id)
    def test_agreement(self, value: NumericValue, target: NumberKind) -> None:
        assert try_parse(text_of(value), target) == try_convert(value, target)


class TestFloat32IsNearest:
    """Результат FLOAT32 не дальше от точного значения, чем соседние binary32"""

    @pytest.mark.parametrize(
        "value",
        [v for v in FINITE_SAMPLES if fits_into(v, NumberKind.FLOAT32)],
        ids=_id,
    )
    def test_nearest(self, value: NumericValue) -> None:
        exact = Fraction(to_pivot(value))
        result = np.float32(convert(value, NumberKind.FLOAT32).value)
        error = abs(exact - Fraction(float(result)))
        for direction in (-np.inf, np.inf):
            neighbour = np.nextafter(result, np.float32(direction))
            if np.isfinite(neighbour):
                assert error <= abs(exact - Fraction(float(neighbour)))
