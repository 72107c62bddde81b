"""
Conversion Failure — иерархия исключений числовой конверсии

Категории:
- ValueDoesNotFitError: значение не помещается в целевой тип без потерь
  (диапазон или дробная часть)
- NonFiniteValueError: NaN/Inf на входе
- MalformedNumberError: текст не является числом
- UnsupportedKindError: для вида значения нет пути конверсии (ошибка вызова)

Первые три наследуют ValueError (проблема данных), последняя — TypeError
(проблема кода). Все несут value, target и reason для диагностики.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from numconv.domain.kinds import NumberKind


# =============================================================================
# BASE
# =============================================================================


class NumberConversionError(Exception):
    """Базовое исключение числовой конверсии."""

    def __init__(
        self,
        value: Any,
        target: Optional["NumberKind"],
        reason: str = "",
        message: str = "",
    ) -> None:
        if not message:
            message = self.default_message(value, target, reason)
        super().__init__(message)
        self.value = value
        self.target = target
        self.reason = reason

    @staticmethod
    def default_message(value: Any, target: Optional["NumberKind"], reason: str) -> str:
        """Сообщение по умолчанию: что, во что и почему"""
        type_name = target.display_name if target is not None else "number"
        if value is None:
            message = f"Cannot convert None into {type_name}"
        elif isinstance(value, str):
            message = f'Cannot convert "{value}" into {type_name}'
        else:
            message = f"Cannot convert {type(value).__name__} {value} into {type_name}"
        if reason:
            message = f"{message}: {reason}"
        return message


# =============================================================================
# КАТЕГОРИИ
# =============================================================================


class ValueDoesNotFitError(NumberConversionError, ValueError):
    """Значение не помещается в целевой тип без потери информации."""

    def __init__(self, value: Any, target: "NumberKind", reason: str = "") -> None:
        message = f"{value} does not fit into {target.display_name}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(value, target, reason, message)


class NonFiniteValueError(NumberConversionError, ValueError):
    """NaN или бесконечность не имеют точного десятичного эквивалента."""

    def __init__(self, value: Any, target: Optional["NumberKind"]) -> None:
        super().__init__(value, target, reason="value is not finite")


class MalformedNumberError(NumberConversionError, ValueError):
    """Текст не разбирается ни в какое число."""

    def __init__(self, value: Any, target: "NumberKind", reason: str = "") -> None:
        message = f"{value} not parsable into {target.display_name}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(value, target, reason, message)


class UnsupportedKindError(NumberConversionError, TypeError):
    """Для вида значения (или тега) не определён путь конверсии."""


__all__ = [
    "MalformedNumberError",
    "NonFiniteValueError",
    "NumberConversionError",
    "UnsupportedKindError",
    "ValueDoesNotFitError",
]
