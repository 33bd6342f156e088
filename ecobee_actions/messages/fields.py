"""Value coercion for function parameters supplied by rule scripts."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from numbers import Number
from typing import Any

from .types import InvalidFunctionParameter


def require_bool(value: Any, parameter: str) -> bool:
    if not isinstance(value, bool):
        raise InvalidFunctionParameter(
            f"{parameter} must be a boolean, got {value!r}", parameter=parameter
        )
    return value


def require_int(value: Any, parameter: str) -> int:
    """Accept integers and integral numbers, reject booleans and fractions."""
    if isinstance(value, bool) or not isinstance(value, Number):
        raise InvalidFunctionParameter(
            f"{parameter} must be an integer, got {value!r}", parameter=parameter
        )
    if isinstance(value, int):
        return value
    integral = to_decimal(value, parameter)
    if integral != integral.to_integral_value():
        raise InvalidFunctionParameter(
            f"{parameter} must be a whole number, got {value!r}", parameter=parameter
        )
    return int(integral)


def require_text(value: Any, parameter: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidFunctionParameter(f"{parameter} is required", parameter=parameter)
    return value


def to_decimal(value: Any, parameter: str) -> Decimal:
    """Convert a caller-facing number (or numeric string) to Decimal.

    Going through ``str`` keeps ``72.5`` as ``Decimal('72.5')`` rather than
    the binary float expansion.
    """
    if isinstance(value, bool) or value is None:
        raise InvalidFunctionParameter(
            f"{parameter} must be numeric, got {value!r}", parameter=parameter
        )
    try:
        result = Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise InvalidFunctionParameter(
            f"{parameter} must be numeric, got {value!r}", parameter=parameter
        ) from exc
    if not result.is_finite():
        raise InvalidFunctionParameter(
            f"{parameter} must be finite, got {value!r}", parameter=parameter
        )
    return result
