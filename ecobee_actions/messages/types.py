"""Closed value sets used by ecobee function parameters.

Every enum carries the vendor literal as its value. Callers hand in plain
strings from rule scripts, so each enum exposes ``parse`` which accepts an
existing member or an exact literal and rejects everything else.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Type, TypeVar


class InvalidFunctionParameter(ValueError):
    """Raised when a function parameter cannot be parsed or validated."""

    def __init__(self, message: str, *, parameter: Optional[str] = None) -> None:
        super().__init__(message)
        self.parameter = parameter


_E = TypeVar("_E", bound="VendorEnum")


class VendorEnum(str, Enum):
    """Base for enums whose values are ecobee API literals."""

    @classmethod
    def parse(cls: Type[_E], value: Any, *, parameter: Optional[str] = None) -> _E:
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member

        valid = ", ".join(member.value for member in cls)
        name = parameter or cls.__name__
        raise InvalidFunctionParameter(
            f"Invalid {name} '{value}'. Valid values: {valid}.",
            parameter=parameter,
        )

    @classmethod
    def parse_optional(
        cls: Type[_E], value: Any, *, parameter: Optional[str] = None
    ) -> Optional[_E]:
        if value is None:
            return None
        return cls.parse(value, parameter=parameter)


class HoldType(VendorEnum):
    """How long a hold lasts."""

    DATE_TIME = "dateTime"  # until the given end date/time
    NEXT_TRANSITION = "nextTransition"
    INDEFINITE = "indefinite"
    HOLD_HOURS = "holdHours"


class FanMode(VendorEnum):
    AUTO = "auto"
    ON = "on"


class VentilatorMode(VendorEnum):
    AUTO = "auto"
    MIN_ON_TIME = "minontime"
    ON = "on"
    OFF = "off"


class AckType(VendorEnum):
    """Acknowledgement responses for an alert."""

    ACCEPT = "accept"
    DECLINE = "decline"
    DEFER = "defer"
    UNACKNOWLEDGED = "unacknowledged"


class PlugState(VendorEnum):
    ON = "on"
    OFF = "off"
    RESUME = "resume"


__all__ = [
    "AckType",
    "FanMode",
    "HoldType",
    "InvalidFunctionParameter",
    "PlugState",
    "VendorEnum",
    "VentilatorMode",
]
