"""Request descriptors for ecobee thermostat functions.

Each descriptor carries only the fields its function accepts and renders
itself as the ``{"type": ..., "params": ...}`` object the ecobee
``/thermostat`` endpoint expects. Absent optional values are left out of
``params`` so the thermostat applies its own defaults.

Constructors accept either enum members or their literal strings and
validate in ``__post_init__``; a bad value raises InvalidFunctionParameter.

See https://www.ecobee.com/home/developer/api/documentation/v1/functions/using-functions.shtml
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar, Dict, Optional

from .. import constants
from ..function_names import EcobeeFunctionNames
from .event import HoldEvent
from .fields import require_bool, require_int, require_text
from .temperature import Temperature
from .types import AckType, FanMode, HoldType, InvalidFunctionParameter, PlugState

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class EcobeeFunction:
    """Base type for function requests."""

    function_type: ClassVar[str] = ""

    def params(self) -> Dict[str, Any]:
        return {}

    def as_payload(self) -> Dict[str, Any]:
        return {"type": self.function_type, "params": self.params()}


@dataclass(slots=True)
class AcknowledgeFunction(EcobeeFunction):
    """Acknowledge an alert."""

    function_type: ClassVar[str] = EcobeeFunctionNames.ACKNOWLEDGE

    thermostat_identifier: str
    ack_ref: str
    ack_type: AckType
    remind_me_later: Optional[bool] = None

    def __post_init__(self) -> None:
        require_text(self.thermostat_identifier, "thermostatIdentifier")
        require_text(self.ack_ref, "ackRef")
        self.ack_type = AckType.parse(self.ack_type, parameter="ackType")
        if self.remind_me_later is not None:
            require_bool(self.remind_me_later, "remindMeLater")

    def params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "thermostatIdentifier": self.thermostat_identifier,
            "ackRef": self.ack_ref,
            "ackType": self.ack_type.value,
        }
        if self.remind_me_later is not None:
            params["remindMeLater"] = self.remind_me_later
        return params


@dataclass(slots=True)
class ControlPlugFunction(EcobeeFunction):
    """Hold a plug on or off, or resume its program."""

    function_type: ClassVar[str] = EcobeeFunctionNames.CONTROL_PLUG

    plug_name: str
    plug_state: PlugState
    start_date_time: Optional[datetime] = None
    end_date_time: Optional[datetime] = None
    hold_type: Optional[HoldType] = None
    hold_hours: Optional[int] = None

    def __post_init__(self) -> None:
        require_text(self.plug_name, "plugName")
        self.plug_state = PlugState.parse(self.plug_state, parameter="plugState")
        self.hold_type, self.hold_hours = _validate_hold(
            self.hold_type, self.hold_hours, self.start_date_time, self.end_date_time
        )

    def params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "plugName": self.plug_name,
            "plugState": self.plug_state.value,
        }
        params.update(_window_params(self.start_date_time, self.end_date_time))
        params.update(_hold_params(self.hold_type, self.hold_hours))
        return params


@dataclass(slots=True)
class CreateVacationFunction(EcobeeFunction):
    """Create a vacation event.

    Without start/end the vacation begins immediately and lasts 14 days.
    """

    function_type: ClassVar[str] = EcobeeFunctionNames.CREATE_VACATION

    name: str
    cool_hold_temp: Temperature
    heat_hold_temp: Temperature
    start_date_time: Optional[datetime] = None
    end_date_time: Optional[datetime] = None
    fan: Optional[FanMode] = None
    fan_min_on_time: Optional[int] = None

    def __post_init__(self) -> None:
        require_text(self.name, "name")
        _require_temperature(self.cool_hold_temp, "coolHoldTemp")
        _require_temperature(self.heat_hold_temp, "heatHoldTemp")
        _validate_window(self.start_date_time, self.end_date_time)
        self.fan = FanMode.parse_optional(self.fan, parameter="fan")
        if self.fan_min_on_time is not None:
            minutes = require_int(self.fan_min_on_time, "fanMinOnTime")
            if not (
                constants.MIN_FAN_ON_TIME_MINUTES
                <= minutes
                <= constants.MAX_FAN_ON_TIME_MINUTES
            ):
                raise InvalidFunctionParameter(
                    f"fanMinOnTime must be between {constants.MIN_FAN_ON_TIME_MINUTES} "
                    f"and {constants.MAX_FAN_ON_TIME_MINUTES}, got {minutes}",
                    parameter="fanMinOnTime",
                )
            self.fan_min_on_time = minutes

    def params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "name": self.name,
            "coolHoldTemp": self.cool_hold_temp.value,
            "heatHoldTemp": self.heat_hold_temp.value,
        }
        params.update(_window_params(self.start_date_time, self.end_date_time))
        if self.fan is not None:
            params["fan"] = self.fan.value
        if self.fan_min_on_time is not None:
            params["fanMinOnTime"] = self.fan_min_on_time
        return params


@dataclass(slots=True)
class DeleteVacationFunction(EcobeeFunction):
    function_type: ClassVar[str] = EcobeeFunctionNames.DELETE_VACATION

    name: str

    def __post_init__(self) -> None:
        require_text(self.name, "name")

    def params(self) -> Dict[str, Any]:
        return {"name": self.name}


@dataclass(slots=True)
class ResetPreferencesFunction(EcobeeFunction):
    function_type: ClassVar[str] = EcobeeFunctionNames.RESET_PREFERENCES


@dataclass(slots=True)
class ResumeProgramFunction(EcobeeFunction):
    """Remove the running event, or all events when ``resume_all`` is set."""

    function_type: ClassVar[str] = EcobeeFunctionNames.RESUME_PROGRAM

    resume_all: Optional[bool] = None

    def __post_init__(self) -> None:
        if self.resume_all is not None:
            require_bool(self.resume_all, "resumeAll")

    def params(self) -> Dict[str, Any]:
        if self.resume_all is None:
            return {}
        return {"resumeAll": self.resume_all}


@dataclass(slots=True)
class SendMessageFunction(EcobeeFunction):
    """Send an alert message; text beyond 500 characters is truncated."""

    function_type: ClassVar[str] = EcobeeFunctionNames.SEND_MESSAGE

    text: str

    def __post_init__(self) -> None:
        require_text(self.text, "text")
        if len(self.text) > constants.MAX_MESSAGE_LENGTH:
            LOGGER.debug(
                "Message text truncated from %d to %d characters",
                len(self.text),
                constants.MAX_MESSAGE_LENGTH,
            )
            self.text = self.text[: constants.MAX_MESSAGE_LENGTH]

    def params(self) -> Dict[str, Any]:
        return {"text": self.text}


@dataclass(slots=True)
class SetHoldFunction(EcobeeFunction):
    """Put the thermostat into a hold described by ``event``.

    The event fields are sent alongside the hold parameters rather than
    nested, which is how the setHold function expects them.
    """

    function_type: ClassVar[str] = EcobeeFunctionNames.SET_HOLD

    event: HoldEvent = field(default_factory=HoldEvent)
    hold_type: Optional[HoldType] = None
    hold_hours: Optional[int] = None
    start_date_time: Optional[datetime] = None
    end_date_time: Optional[datetime] = None

    def __post_init__(self) -> None:
        if not isinstance(self.event, HoldEvent):
            raise InvalidFunctionParameter(
                f"event must be a HoldEvent, got {type(self.event).__name__}",
                parameter="event",
            )
        self.hold_type, self.hold_hours = _validate_hold(
            self.hold_type, self.hold_hours, self.start_date_time, self.end_date_time
        )

    def params(self) -> Dict[str, Any]:
        params = self.event.as_params()
        params.update(_window_params(self.start_date_time, self.end_date_time))
        params.update(_hold_params(self.hold_type, self.hold_hours))
        return params


@dataclass(slots=True)
class SetOccupiedFunction(EcobeeFunction):
    """Switch an EMS thermostat between occupied and unoccupied."""

    function_type: ClassVar[str] = EcobeeFunctionNames.SET_OCCUPIED

    occupied: bool
    start_date_time: Optional[datetime] = None
    end_date_time: Optional[datetime] = None
    hold_type: Optional[HoldType] = None
    hold_hours: Optional[int] = None

    def __post_init__(self) -> None:
        require_bool(self.occupied, "occupied")
        self.hold_type, self.hold_hours = _validate_hold(
            self.hold_type, self.hold_hours, self.start_date_time, self.end_date_time
        )

    def params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {"occupied": self.occupied}
        params.update(_window_params(self.start_date_time, self.end_date_time))
        params.update(_hold_params(self.hold_type, self.hold_hours))
        return params


@dataclass(slots=True)
class UpdateSensorFunction(EcobeeFunction):
    """Rename a remote sensor (both halves of the enclosure are renamed)."""

    function_type: ClassVar[str] = EcobeeFunctionNames.UPDATE_SENSOR

    name: str
    device_id: str
    sensor_id: str

    def __post_init__(self) -> None:
        require_text(self.name, "name")
        if len(self.name) > constants.MAX_SENSOR_NAME_LENGTH:
            raise InvalidFunctionParameter(
                f"name must be at most {constants.MAX_SENSOR_NAME_LENGTH} characters",
                parameter="name",
            )
        require_text(self.device_id, "deviceId")
        require_text(self.sensor_id, "sensorId")

    def params(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "deviceId": self.device_id,
            "sensorId": self.sensor_id,
        }


def _require_temperature(value: Any, parameter: str) -> None:
    if not isinstance(value, Temperature):
        raise InvalidFunctionParameter(
            f"{parameter} is required", parameter=parameter
        )


def _validate_window(
    start: Optional[datetime], end: Optional[datetime]
) -> None:
    for name, value in (("startDateTime", start), ("endDateTime", end)):
        if value is not None and not isinstance(value, datetime):
            raise InvalidFunctionParameter(
                f"{name} must be a datetime, got {value!r}", parameter=name
            )
    if start is None or end is None:
        return
    if (start.utcoffset() is None) != (end.utcoffset() is None):
        raise InvalidFunctionParameter(
            "startDateTime and endDateTime must both be naive or both be timezone-aware",
            parameter="endDateTime",
        )
    if end < start:
        raise InvalidFunctionParameter(
            "endDateTime must not be earlier than startDateTime",
            parameter="endDateTime",
        )


def _validate_hold(
    hold_type: Any,
    hold_hours: Any,
    start: Optional[datetime],
    end: Optional[datetime],
) -> tuple[Optional[HoldType], Optional[int]]:
    _validate_window(start, end)
    parsed_type = HoldType.parse_optional(hold_type, parameter="holdType")

    hours: Optional[int] = None
    if hold_hours is not None:
        hours = require_int(hold_hours, "holdHours")
        if hours <= 0:
            raise InvalidFunctionParameter(
                f"holdHours must be positive, got {hours}", parameter="holdHours"
            )

    if parsed_type is HoldType.HOLD_HOURS and hours is None:
        raise InvalidFunctionParameter(
            "holdHours must be specified when using holdType='holdHours'",
            parameter="holdHours",
        )
    if parsed_type is HoldType.DATE_TIME and (start is None or end is None):
        raise InvalidFunctionParameter(
            "startDateTime and endDateTime must be specified when using "
            "holdType='dateTime'",
            parameter="holdType",
        )
    return parsed_type, hours


def _window_params(
    start: Optional[datetime], end: Optional[datetime]
) -> Dict[str, str]:
    params: Dict[str, str] = {}
    if start is not None:
        params["startDate"] = start.strftime(constants.WIRE_DATE_FORMAT)
        params["startTime"] = start.strftime(constants.WIRE_TIME_FORMAT)
    if end is not None:
        params["endDate"] = end.strftime(constants.WIRE_DATE_FORMAT)
        params["endTime"] = end.strftime(constants.WIRE_TIME_FORMAT)
    return params


def _hold_params(
    hold_type: Optional[HoldType], hold_hours: Optional[int]
) -> Dict[str, Any]:
    params: Dict[str, Any] = {}
    if hold_type is not None:
        params["holdType"] = hold_type.value
    if hold_hours is not None:
        params["holdHours"] = hold_hours
    return params
