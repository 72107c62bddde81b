"""
Тесты для zero / null_to_zero / abs_value / coerce
"""

from decimal import Decimal

import numpy as np
import pytest

from numconv.conversion import coerce
from numconv.domain.kinds import INT8_MIN, INT64_MIN, NumberKind
from numconv.domain.value import NumericValue
from numconv.errors import MalformedNumberError, UnsupportedKindError, ValueDoesNotFitError
from numconv.number_methods import ZEROS, abs_value, null_to_zero, zero

# =============================================================================
# ТЕСТЫ НУЛЕЙ
# =============================================================================


class TestZero:
    """Тесты для zero и null_to_zero"""

    def test_zero_for_every_kind(self) -> None:
        for kind in NumberKind:
            z = zero(kind)
            assert z.kind is kind
            assert z.value == 0

    def test_zero_payload_types(self) -> None:
        assert type(zero(NumberKind.INT8).value) is int
        assert type(zero(NumberKind.FLOAT32).value) is float
        assert type(zero(NumberKind.BIG_DECIMAL).value) is Decimal

    def test_zero_string_kind(self) -> None:
        assert zero("float64") is ZEROS[NumberKind.FLOAT64]

    def test_null_to_zero_none(self) -> None:
        assert null_to_zero(None, NumberKind.BIG_DECIMAL).value == Decimal(0)

    def test_null_to_zero_converts(self) -> None:
        result = null_to_zero(7, NumberKind.INT16)
        assert result == NumericValue(kind=NumberKind.INT16, value=7)

    def test_null_to_zero_does_not_fit(self) -> None:
        with pytest.raises(ValueDoesNotFitError):
            null_to_zero(300, NumberKind.INT8)


# =============================================================================
# ТЕСТЫ МОДУЛЯ
# =============================================================================


class TestAbsValue:
    """Тесты для abs_value"""

    def test_fixed_width(self) -> None:
        result = abs_value(NumericValue(kind=NumberKind.INT8, value=-127))
        assert result.kind is NumberKind.INT8
        assert result.value == 127

    def test_fixed_width_min_does_not_wrap(self) -> None:
        """abs(MIN) не представим → ошибка, а не MIN"""
        with pytest.raises(ValueDoesNotFitError):
            abs_value(NumericValue(kind=NumberKind.INT8, value=INT8_MIN))
        with pytest.raises(ValueDoesNotFitError):
            abs_value(np.int64(INT64_MIN))

    def test_numpy_kind_preserved(self) -> None:
        assert abs_value(np.int16(-3)).kind is NumberKind.INT16

    def test_big_integer(self) -> None:
        assert abs_value(-(10**40)).value == 10**40

    def test_float(self) -> None:
        result = abs_value(-2.5)
        assert result.kind is NumberKind.FLOAT64
        assert result.value == 2.5

    def test_float_non_finite(self) -> None:
        assert abs_value(float("-inf")).value == float("inf")

    def test_decimal_exact(self) -> None:
        """Модуль Decimal без округления контекстом"""
        d = Decimal("-1." + "3" * 60)
        assert abs_value(d).value == d.copy_abs()

    def test_unsupported(self) -> None:
        with pytest.raises(UnsupportedKindError):
            abs_value("-1")


# =============================================================================
# ТЕСТЫ COERCE
# =============================================================================


class TestCoerce:
    """Тесты для coerce"""

    def test_bool(self) -> None:
        assert coerce(True, NumberKind.INT8).value == 1
        assert coerce(False, NumberKind.BIG_DECIMAL).value == Decimal(0)

    def test_text(self) -> None:
        assert coerce("42", NumberKind.INT16).value == 42
        with pytest.raises(MalformedNumberError):
            coerce("forty-two", NumberKind.INT16)

    def test_numbers(self) -> None:
        assert coerce(np.float32(2.0), NumberKind.INT8).value == 2
        assert coerce(Decimal("2.5"), NumberKind.FLOAT64).value == 2.5

    def test_does_not_fit(self) -> None:
        with pytest.raises(ValueDoesNotFitError):
            coerce("1000", NumberKind.INT8)

    def test_unsupported(self) -> None:
        with pytest.raises(UnsupportedKindError):
            coerce(None, NumberKind.INT8)
