"""Input guards and the truncating rounder shared by every formula."""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, Mapping

from .constants import ROUND_FACTOR


class ValidationError(ValueError):
    """Raised when a formula input is not a finite number with the required sign."""

    def __init__(self, field: str, value: Any, message: str | None = None) -> None:
        self.field = field
        self.value = value
        self.message = message or f'Invalid value for "{field}": {value}. Expected a number > 0.'
        super().__init__(self.message)


def _is_finite_number(value: Any) -> bool:
    # bool is a Real subclass but never a physical measurement.
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


def validate_positive_inputs(inputs: Mapping[str, Any]) -> None:
    """Check that every value is a finite number > 0.

    Entries are checked in insertion order and the first violation raises
    ``ValidationError`` carrying the field name and the offending value.
    """

    for field, value in inputs.items():
        if not _is_finite_number(value):
            raise ValidationError(
                field,
                value,
                f'Invalid number for "{field}": {value}. Expected a finite number > 0.',
            )
        if value <= 0:
            raise ValidationError(field, value)


def validate_non_negative(field: str, value: Any) -> None:
    """Guard for inputs where zero is meaningful (the cone apex angle)."""

    if not _is_finite_number(value):
        raise ValidationError(
            field,
            value,
            f'Invalid number for "{field}": {value}. Expected a finite number >= 0.',
        )
    if value < 0:
        raise ValidationError(
            field,
            value,
            f'Invalid value for "{field}": {value}. Expected a number >= 0.',
        )


def round3(value: float, field: str = "result") -> float:
    """Truncate toward zero at three decimals; ``-0.0`` becomes ``0.0``.

    ``field`` names the published value in the ``ValidationError`` raised when
    the value, or the value scaled to thousandths, is not finite.
    """

    if not math.isfinite(value) or not math.isfinite(value * ROUND_FACTOR):
        raise ValidationError(field, value, f'Result "{field}" is not a finite number: {value}.')
    # math.trunc yields an int, so the quotient is never -0.0.
    return math.trunc(value * ROUND_FACTOR) / ROUND_FACTOR
