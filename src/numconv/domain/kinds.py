"""
NumberKind — Теги числовых типов и их пределы

Единственный источник истины для:
- перечня поддерживаемых числовых видов (fixed-width int, float, big)
- диапазонов целочисленных типов
- максимумов float32/float64 и порогов переполнения

Все таблицы неизменяемы (MappingProxyType) и строятся один раз при импорте.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пороги переполнения float заданы точными int (без округления)
2. Значение переполняет float-тип iff |x| >= MAX + ulp(MAX)/2
   (round-to-nearest-even: ровно на пороге округляется к inf)
"""

from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping

from numconv.errors import UnsupportedKindError


# =============================================================================
# ENUMS
# =============================================================================


class NumberKind(str, Enum):
    """Вид числового значения (Target Type Tag)"""

    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    BIG_INTEGER = "big_integer"
    BIG_DECIMAL = "big_decimal"

    @property
    def display_name(self) -> str:
        """Имя типа для сообщений об ошибках"""
        return self.value

    @property
    def is_fixed_width_integer(self) -> bool:
        return self in INTEGER_RANGES

    @property
    def is_floating(self) -> bool:
        return self in (NumberKind.FLOAT32, NumberKind.FLOAT64)

    @property
    def is_integral(self) -> bool:
        """Целочисленный вид (fixed-width или BIG_INTEGER)"""
        return self.is_fixed_width_integer or self is NumberKind.BIG_INTEGER


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ ДИАПАЗОНЫ
# =============================================================================

INT8_MIN: Final[int] = -(2**7)
INT8_MAX: Final[int] = 2**7 - 1
INT16_MIN: Final[int] = -(2**15)
INT16_MAX: Final[int] = 2**15 - 1
INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

# Включительные границы [min, max] для fixed-width целых
INTEGER_RANGES: Final[Mapping[NumberKind, tuple[int, int]]] = MappingProxyType(
    {
        NumberKind.INT8: (INT8_MIN, INT8_MAX),
        NumberKind.INT16: (INT16_MIN, INT16_MAX),
        NumberKind.INT32: (INT32_MIN, INT32_MAX),
        NumberKind.INT64: (INT64_MIN, INT64_MAX),
    }
)

# Размер fixed-width видов в байтах (для numpy scalar интеропа)
BYTE_WIDTHS: Final[Mapping[NumberKind, int]] = MappingProxyType(
    {
        NumberKind.INT8: 1,
        NumberKind.INT16: 2,
        NumberKind.INT32: 4,
        NumberKind.INT64: 8,
        NumberKind.FLOAT32: 4,
        NumberKind.FLOAT64: 8,
    }
)


# =============================================================================
# FLOAT ПРЕДЕЛЫ
# =============================================================================

# Наибольшее конечное binary32: (2 - 2^-23) * 2^127
FLOAT32_MAX: Final[float] = float(2**128 - 2**104)

# Наибольшее конечное binary64: (2 - 2^-52) * 2^1023
FLOAT64_MAX: Final[float] = float(2**1024 - 2**971)

# Пороги переполнения: MAX + ulp(MAX)/2, точные целые.
# |x| >= порога → ближайшее представимое значение = inf
FLOAT32_OVERFLOW_THRESHOLD: Final[int] = 2**128 - 2**103
FLOAT64_OVERFLOW_THRESHOLD: Final[int] = 2**1024 - 2**970


# =============================================================================
# BIG INTEGER ПРЕДЕЛЫ
# =============================================================================

# Максимум десятичных цифр результата BIG_INTEGER (совпадает с
# sys.int_info.default_max_str_digits). Текст '1e999999999' короткий,
# но int из него содержит миллиард цифр.
BIG_INTEGER_MAX_DIGITS: Final[int] = 4300


def resolve_kind(kind: "NumberKind | str") -> NumberKind:
    """
    Приведение тега к NumberKind.

    Args:
        kind: NumberKind или его строковое значение ('int32', 'float64', ...)

    Returns:
        NumberKind

    Raises:
        UnsupportedKindError: если тег неизвестен
    """
    if isinstance(kind, NumberKind):
        return kind
    if isinstance(kind, str):
        try:
            return NumberKind(kind)
        except ValueError:
            pass
    raise UnsupportedKindError(None, None, reason=f"unknown number kind: {kind!r}")
