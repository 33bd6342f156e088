"""Temperature conversion between the local scale and ecobee fixed point.

The ecobee API expresses every temperature as an integer in tenths of a
degree Fahrenheit (``72.5°F`` is ``725``) regardless of the thermostat's
display unit. Rule scripts work in whichever scale the installation is
configured for.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any

from .fields import to_decimal
from .types import InvalidFunctionParameter

_NINE = Decimal(9)
_FIVE = Decimal(5)
_THIRTY_TWO = Decimal(32)
_TEN = Decimal(10)


class TemperatureScale(str, Enum):
    FAHRENHEIT = "F"
    CELSIUS = "C"

    @classmethod
    def parse(cls, value: Any) -> "TemperatureScale":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip().upper()
            for member in cls:
                if text in (member.value, member.name):
                    return member
        raise InvalidFunctionParameter(
            f"Invalid temperature scale '{value}'. Valid values: F, C.",
            parameter="temperature_scale",
        )


@dataclass(slots=True, frozen=True)
class Temperature:
    """A temperature in ecobee units (tenths of a degree Fahrenheit)."""

    value: int

    @classmethod
    def from_local(
        cls,
        local: Any,
        scale: TemperatureScale = TemperatureScale.FAHRENHEIT,
        *,
        parameter: str = "temperature",
        relative: bool = False,
    ) -> "Temperature":
        """Convert a local reading, or a local offset when ``relative`` is set."""
        degrees = to_decimal(local, parameter)
        if scale is TemperatureScale.CELSIUS:
            degrees = degrees * _NINE / _FIVE
            if not relative:
                degrees += _THIRTY_TWO
        tenths = (degrees * _TEN).quantize(Decimal(1), rounding=ROUND_HALF_UP)
        return cls(int(tenths))

    def to_local(self, scale: TemperatureScale = TemperatureScale.FAHRENHEIT) -> Decimal:
        fahrenheit = Decimal(self.value) / _TEN
        if scale is TemperatureScale.CELSIUS:
            celsius = (fahrenheit - _THIRTY_TWO) * _FIVE / _NINE
            return celsius.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
        return fahrenheit

    def __str__(self) -> str:
        return f"{self.to_local()}°F"
