"""Typed request objects for ecobee thermostat functions."""

from .event import EVENT_FIELDS, HoldEvent
from .functions import (
    AcknowledgeFunction,
    ControlPlugFunction,
    CreateVacationFunction,
    DeleteVacationFunction,
    EcobeeFunction,
    ResetPreferencesFunction,
    ResumeProgramFunction,
    SendMessageFunction,
    SetHoldFunction,
    SetOccupiedFunction,
    UpdateSensorFunction,
)
from .temperature import Temperature, TemperatureScale
from .types import (
    AckType,
    FanMode,
    HoldType,
    InvalidFunctionParameter,
    PlugState,
    VentilatorMode,
)

__all__ = [
    "AckType",
    "AcknowledgeFunction",
    "ControlPlugFunction",
    "CreateVacationFunction",
    "DeleteVacationFunction",
    "EVENT_FIELDS",
    "EcobeeFunction",
    "FanMode",
    "HoldEvent",
    "HoldType",
    "InvalidFunctionParameter",
    "PlugState",
    "ResetPreferencesFunction",
    "ResumeProgramFunction",
    "SendMessageFunction",
    "SetHoldFunction",
    "SetOccupiedFunction",
    "Temperature",
    "TemperatureScale",
    "UpdateSensorFunction",
    "VentilatorMode",
]
