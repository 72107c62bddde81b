"""
NumericValue — Неизменяемое числовое значение с тегом вида

Tagged union над поддерживаемыми видами:
- INT8/INT16/INT32/INT64, BIG_INTEGER → payload int
- FLOAT32/FLOAT64 → payload float (FLOAT32 — точно представимое в binary32)
- BIG_DECIMAL → payload Decimal (только конечные)

Immutable Pydantic модель (frozen=True). Конструирование с несовместимым
payload вызывает pydantic.ValidationError.

number_of() — адаптер для "сырых" Python/numpy значений.
"""

import math
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Final, Mapping, Optional, Union

import numpy as np
from pydantic import BaseModel, Field, field_validator, model_validator

from numconv.domain.kinds import BYTE_WIDTHS, FLOAT32_MAX, INTEGER_RANGES, NumberKind
from numconv.errors import NonFiniteValueError, UnsupportedKindError


# =============================================================================
# NUMPY ИНТЕРОП
# =============================================================================

# Fixed-width numpy dtype для каждого вида
NUMPY_DTYPES: Final[Mapping[NumberKind, type]] = MappingProxyType(
    {
        NumberKind.INT8: np.int8,
        NumberKind.INT16: np.int16,
        NumberKind.INT32: np.int32,
        NumberKind.INT64: np.int64,
        NumberKind.FLOAT32: np.float32,
        NumberKind.FLOAT64: np.float64,
    }
)

_SIGNED_BY_WIDTH: Final[Mapping[int, NumberKind]] = {
    BYTE_WIDTHS[kind]: kind for kind in INTEGER_RANGES
}

_FLOATING_BY_WIDTH: Final[Mapping[int, NumberKind]] = {
    4: NumberKind.FLOAT32,
    8: NumberKind.FLOAT64,
}


def is_float32_exact(value: float) -> bool:
    """Проверка, что float точно представим в binary32 (NaN/Inf считаются представимыми)"""
    if not math.isfinite(value):
        return True
    if abs(value) > FLOAT32_MAX:
        return False
    return float(np.float32(value)) == value


# =============================================================================
# NUMERIC VALUE MODEL
# =============================================================================


class NumericValue(BaseModel):
    """
    Числовое значение с явным тегом вида.

    Immutable модель (frozen=True). Значение создаётся на границе вызова
    и никогда не изменяется; конверсия всегда создаёт новый экземпляр.
    """

    kind: NumberKind = Field(..., description="Вид числа")
    value: Union[int, float, Decimal] = Field(..., description="Payload (int, float или Decimal)")

    model_config = {"frozen": True}

    @field_validator("value", mode="plain")
    @classmethod
    def validate_payload_type(cls, v: Any) -> Union[int, float, Decimal]:
        """
        Payload принимается как есть (без lax-коэрсии pydantic).

        bool отвергается: True/False не являются числовым значением.
        """
        if isinstance(v, bool):
            raise ValueError("bool is not a numeric payload")
        if isinstance(v, np.generic):
            v = v.item()
        if isinstance(v, float):
            return float(v)
        if isinstance(v, (int, Decimal)):
            return v
        raise ValueError(f"unsupported payload type: {type(v).__name__}")

    @model_validator(mode="after")
    def validate_payload_matches_kind(self) -> "NumericValue":
        """Payload согласован с видом: тип, диапазон, представимость"""
        kind = self.kind
        v = self.value

        if kind.is_integral:
            if not isinstance(v, int):
                raise ValueError(f"{kind.value} payload must be int, got {type(v).__name__}")
            bounds = INTEGER_RANGES.get(kind)
            if bounds is not None and not bounds[0] <= v <= bounds[1]:
                raise ValueError(
                    f"{kind.value} payload must be in [{bounds[0]}, {bounds[1]}], got {v}"
                )
        elif kind.is_floating:
            if not isinstance(v, float):
                raise ValueError(f"{kind.value} payload must be float, got {type(v).__name__}")
            if kind is NumberKind.FLOAT32 and not is_float32_exact(v):
                raise ValueError(f"float32 payload must be exactly representable, got {v!r}")
        else:
            if not isinstance(v, Decimal):
                raise ValueError(f"{kind.value} payload must be Decimal, got {type(v).__name__}")
            if not v.is_finite():
                raise ValueError(f"{kind.value} payload must be finite, got {v}")

        return self

    @property
    def is_finite(self) -> bool:
        if self.kind.is_floating:
            return math.isfinite(self.value)
        return True

    def numpy(self) -> np.generic:
        """
        Значение как numpy scalar соответствующей ширины.

        Raises:
            UnsupportedKindError: для BIG_INTEGER/BIG_DECIMAL (нет fixed-width dtype)
        """
        dtype = NUMPY_DTYPES.get(self.kind)
        if dtype is None:
            raise UnsupportedKindError(
                self.value, self.kind, reason=f"{self.kind.value} has no numpy scalar type"
            )
        return dtype(self.value)

    def __str__(self) -> str:
        return str(self.value)


# =============================================================================
# АДАПТЕР СЫРЫХ ЗНАЧЕНИЙ
# =============================================================================


def number_of(obj: Any, target: Optional[NumberKind] = None) -> NumericValue:
    """
    Приведение сырого значения к NumericValue.

    Правила:
    - NumericValue → как есть
    - numpy signed int (1/2/4/8 байт) → INT8..INT64
    - numpy float32/float64 → FLOAT32/FLOAT64
    - int → BIG_INTEGER, float → FLOAT64, Decimal → BIG_DECIMAL
    - всё остальное (bool, complex, str, None, unsigned/float16 numpy) → unsupported

    Args:
        obj: Исходное значение
        target: Целевой вид (только для сообщений об ошибках)

    Returns:
        NumericValue

    Raises:
        UnsupportedKindError: если вид значения не поддерживается
        NonFiniteValueError: если Decimal равен NaN/Infinity
    """
    if isinstance(obj, NumericValue):
        return obj

    if isinstance(obj, bool):
        raise UnsupportedKindError(obj, target, reason="bool is not a number")

    if isinstance(obj, np.signedinteger):
        kind = _SIGNED_BY_WIDTH.get(obj.itemsize)
        if kind is not None:
            return NumericValue(kind=kind, value=int(obj))
    elif isinstance(obj, np.floating):
        kind = _FLOATING_BY_WIDTH.get(obj.itemsize)
        if kind is not None:
            return NumericValue(kind=kind, value=float(obj))
    elif isinstance(obj, int):
        return NumericValue(kind=NumberKind.BIG_INTEGER, value=obj)
    elif isinstance(obj, float):
        return NumericValue(kind=NumberKind.FLOAT64, value=obj)
    elif isinstance(obj, Decimal):
        if not obj.is_finite():
            raise NonFiniteValueError(obj, target)
        return NumericValue(kind=NumberKind.BIG_DECIMAL, value=obj)

    raise UnsupportedKindError(
        obj, target, reason=f"unsupported number type: {type(obj).__name__}"
    )
