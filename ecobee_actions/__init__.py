"""ecobee-actions: invoke ecobee thermostat functions from automation rules."""

from .actions import (
    ACTION_DOCS,
    ActionConfigurationError,
    ActionDoc,
    EcobeeActionError,
    EcobeeActions,
    ParamDoc,
    describe_actions,
)
from .core.protocols import ActionProvider, ActionService, StaticActionService
from .messages import (
    AckType,
    FanMode,
    HoldEvent,
    HoldType,
    InvalidFunctionParameter,
    PlugState,
    Temperature,
    TemperatureScale,
    VentilatorMode,
)

__version__ = "0.1.0"

__all__ = [
    "ACTION_DOCS",
    "AckType",
    "ActionConfigurationError",
    "ActionDoc",
    "ActionProvider",
    "ActionService",
    "EcobeeActionError",
    "EcobeeActions",
    "FanMode",
    "HoldEvent",
    "HoldType",
    "InvalidFunctionParameter",
    "ParamDoc",
    "PlugState",
    "StaticActionService",
    "Temperature",
    "TemperatureScale",
    "VentilatorMode",
    "describe_actions",
]
