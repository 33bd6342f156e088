"""Event fields accepted by the setHold function.

A hold is described by a subset of the thermostat ``Event`` object. Rule
scripts pass those fields as a loose name/value mapping; ``HoldEvent``
turns it into explicit optional slots and parks anything it does not know
in ``ignored`` so it never reaches the wire.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional

from .fields import require_bool, require_int, require_text
from .temperature import Temperature, TemperatureScale
from .types import FanMode, VentilatorMode

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class HoldEvent:
    is_occupied: Optional[bool] = None
    is_cool_off: Optional[bool] = None
    is_heat_off: Optional[bool] = None
    cool_hold_temp: Optional[Temperature] = None
    heat_hold_temp: Optional[Temperature] = None
    fan: Optional[FanMode] = None
    vent: Optional[VentilatorMode] = None
    ventilator_min_on_time: Optional[int] = None
    is_optional: Optional[bool] = None
    is_temperature_relative: Optional[bool] = None
    cool_relative_temp: Optional[Temperature] = None
    heat_relative_temp: Optional[Temperature] = None
    is_temperature_absolute: Optional[bool] = None
    fan_min_on_time: Optional[int] = None
    hold_climate_ref: Optional[str] = None
    ignored: Dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_mapping(
        cls,
        params: Mapping[str, Any],
        scale: TemperatureScale = TemperatureScale.FAHRENHEIT,
    ) -> "HoldEvent":
        """Build an event from wire-named fields.

        Unknown names are logged and dropped; a known name with a value of
        the wrong type raises InvalidFunctionParameter.
        """
        event = cls()
        for key, value in params.items():
            spec = EVENT_FIELDS.get(key)
            if spec is None:
                LOGGER.warning(
                    "Unrecognized event field '%s' with value '%s' ignored.", key, value
                )
                event.ignored[key] = value
                continue
            attribute, parser = spec
            setattr(event, attribute, parser(value, key, scale))
        return event

    def as_params(self) -> Dict[str, Any]:
        """Return populated fields keyed by their ecobee names."""
        params: Dict[str, Any] = {}
        for wire_name, (attribute, _) in EVENT_FIELDS.items():
            value = getattr(self, attribute)
            if value is None:
                continue
            if isinstance(value, Temperature):
                value = value.value
            elif isinstance(value, (FanMode, VentilatorMode)):
                value = value.value
            params[wire_name] = value
        return params


FieldParser = Callable[[Any, str, TemperatureScale], Any]


def _bool(value: Any, name: str, scale: TemperatureScale) -> bool:
    return require_bool(value, name)


def _int(value: Any, name: str, scale: TemperatureScale) -> int:
    return require_int(value, name)


def _text(value: Any, name: str, scale: TemperatureScale) -> str:
    return require_text(value, name)


def _temperature(value: Any, name: str, scale: TemperatureScale) -> Temperature:
    return Temperature.from_local(value, scale, parameter=name)


def _relative_temperature(value: Any, name: str, scale: TemperatureScale) -> Temperature:
    return Temperature.from_local(value, scale, parameter=name, relative=True)


def _fan(value: Any, name: str, scale: TemperatureScale) -> FanMode:
    return FanMode.parse(value, parameter=name)


def _vent(value: Any, name: str, scale: TemperatureScale) -> VentilatorMode:
    return VentilatorMode.parse(value, parameter=name)


# ecobee field name -> (HoldEvent attribute, parser)
EVENT_FIELDS: Dict[str, tuple[str, FieldParser]] = {
    "isOccupied": ("is_occupied", _bool),
    "isCoolOff": ("is_cool_off", _bool),
    "isHeatOff": ("is_heat_off", _bool),
    "coolHoldTemp": ("cool_hold_temp", _temperature),
    "heatHoldTemp": ("heat_hold_temp", _temperature),
    "fan": ("fan", _fan),
    "vent": ("vent", _vent),
    "ventilatorMinOnTime": ("ventilator_min_on_time", _int),
    "isOptional": ("is_optional", _bool),
    "isTemperatureRelative": ("is_temperature_relative", _bool),
    "coolRelativeTemp": ("cool_relative_temp", _relative_temperature),
    "heatRelativeTemp": ("heat_relative_temp", _relative_temperature),
    "isTemperatureAbsolute": ("is_temperature_absolute", _bool),
    "fanMinOnTime": ("fan_min_on_time", _int),
    "holdClimateRef": ("hold_climate_ref", _text),
}
