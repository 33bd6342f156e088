"""Rule-facing facade for ecobee thermostat functions.

Every public method builds one function request, resolves the configured
provider and hands the request over. Methods always return a bool: parse
errors, a missing provider and provider failures are logged and reported
as ``False`` so a single failed action never aborts the calling rule.

Example::

    actions = EcobeeActions(binding.get_service)
    actions.set_hold("registered", cool_hold_temp=76, heat_hold_temp=68,
                     hold_type="nextTransition")

See https://www.ecobee.com/home/developer/api/documentation/v1/functions/using-functions.shtml
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, TypeVar

from .config import ActionsConfig
from .core.protocols import ActionProvider, ServiceLookup, StaticActionService
from .messages import (
    AcknowledgeFunction,
    ControlPlugFunction,
    CreateVacationFunction,
    DeleteVacationFunction,
    EcobeeFunction,
    HoldEvent,
    InvalidFunctionParameter,
    ResetPreferencesFunction,
    ResumeProgramFunction,
    SendMessageFunction,
    SetHoldFunction,
    SetOccupiedFunction,
    Temperature,
    TemperatureScale,
    UpdateSensorFunction,
)

LOGGER = logging.getLogger(__name__)


class EcobeeActionError(RuntimeError):
    """Base class for facade errors."""


class ActionConfigurationError(EcobeeActionError):
    """Raised when no ecobee service or provider is available."""


@dataclass(slots=True, frozen=True)
class ParamDoc:
    name: str
    text: str

    @property
    def optional(self) -> bool:
        return self.text.startswith("(opt)")


@dataclass(slots=True, frozen=True)
class ActionDoc:
    """Description of one action as shown to rule authors."""

    name: str
    text: str
    params: Tuple[ParamDoc, ...]


ACTION_DOCS: Dict[str, ActionDoc] = {}

_F = TypeVar("_F", bound=Callable[..., bool])

_HOLD_TYPE_DOC = (
    "(opt) The hold duration type. "
    "Valid values: dateTime, nextTransition, indefinite, holdHours."
)
_HOLD_HOURS_DOC = (
    "(opt) The number of hours to hold for, "
    "used and required if hold_type='holdHours'."
)


def _action(text: str, /, **params: str) -> Callable[[_F], _F]:
    """Register rule-facing documentation for a facade method."""

    def decorator(method: _F) -> _F:
        ACTION_DOCS[method.__name__] = ActionDoc(
            name=method.__name__,
            text=text,
            params=tuple(ParamDoc(name, doc) for name, doc in params.items()),
        )
        return method

    return decorator


def describe_actions() -> List[ActionDoc]:
    """Return the documentation of every action in declaration order."""
    return list(ACTION_DOCS.values())


class EcobeeActions:
    """Invokes ecobee functions through an externally configured provider."""

    def __init__(
        self,
        lookup: ServiceLookup,
        *,
        temperature_scale: TemperatureScale = TemperatureScale.FAHRENHEIT,
    ) -> None:
        self._lookup = lookup
        self._scale = TemperatureScale.parse(temperature_scale)

    @classmethod
    def for_provider(
        cls,
        provider: Optional[ActionProvider],
        *,
        temperature_scale: TemperatureScale = TemperatureScale.FAHRENHEIT,
    ) -> "EcobeeActions":
        service = StaticActionService(provider)
        return cls(lambda: service, temperature_scale=temperature_scale)

    @classmethod
    def from_config(cls, config: ActionsConfig, lookup: ServiceLookup) -> "EcobeeActions":
        return cls(lookup, temperature_scale=config.ecobee.temperature_scale)

    @property
    def temperature_scale(self) -> TemperatureScale:
        return self._scale

    # ------------------------------------------------------------------
    # Alerts and messages
    # ------------------------------------------------------------------

    @_action(
        "The acknowledge function allows an alert to be acknowledged.",
        selection="The thermostat selection to acknowledge the alert for.",
        thermostat_identifier="The thermostat identifier to acknowledge the alert for.",
        ack_ref="The acknowledge ref of the alert.",
        ack_type="The type of acknowledgement. Valid values: accept, decline, defer, unacknowledged.",
        remind_me_later="(opt) Whether to remind at a later date, if this is a defer acknowledgement.",
    )
    def acknowledge(
        self,
        selection: str,
        thermostat_identifier: str,
        ack_ref: str,
        ack_type: str,
        remind_me_later: Optional[bool] = None,
    ) -> bool:
        return self._call(
            "acknowledge",
            selection,
            lambda: AcknowledgeFunction(
                thermostat_identifier, ack_ref, ack_type, remind_me_later
            ),
        )

    @_action(
        "Control the on/off state of a plug by setting a hold on the plug.",
        selection="The thermostat selection controlling the plug.",
        plug_name="The name of the plug. Ensure each plug has a unique name.",
        plug_state="The state to put the plug into. Valid values: on, off, resume.",
        start_date_time="(opt) The start date/time in thermostat time.",
        end_date_time="(opt) The end date/time in thermostat time.",
        hold_type=_HOLD_TYPE_DOC,
        hold_hours=_HOLD_HOURS_DOC,
    )
    def control_plug(
        self,
        selection: str,
        plug_name: str,
        plug_state: str,
        start_date_time: Optional[datetime] = None,
        end_date_time: Optional[datetime] = None,
        hold_type: Optional[str] = None,
        hold_hours: Optional[int] = None,
    ) -> bool:
        return self._call(
            "control_plug",
            selection,
            lambda: ControlPlugFunction(
                plug_name,
                plug_state,
                start_date_time,
                end_date_time,
                hold_type,
                hold_hours,
            ),
        )

    # ------------------------------------------------------------------
    # Vacations
    # ------------------------------------------------------------------

    @_action(
        "The create vacation function creates a vacation event on the thermostat.",
        selection="The thermostat selection for creating the vacation.",
        name="The vacation event name. It must be unique.",
        cool_hold_temp="The temperature at which to set the cool vacation hold.",
        heat_hold_temp="The temperature at which to set the heat vacation hold.",
        start_date_time="(opt) The start date/time in thermostat time.",
        end_date_time="(opt) The end date/time in thermostat time.",
        fan="(opt) The fan mode during the vacation. Values: auto, on. Default: auto",
        fan_min_on_time="(opt) The minimum number of minutes to run the fan each hour. Range: 0-60, Default: 0",
    )
    def create_vacation(
        self,
        selection: str,
        name: str,
        cool_hold_temp: Any,
        heat_hold_temp: Any,
        start_date_time: Optional[datetime] = None,
        end_date_time: Optional[datetime] = None,
        fan: Optional[str] = None,
        fan_min_on_time: Optional[int] = None,
    ) -> bool:
        def build() -> EcobeeFunction:
            return CreateVacationFunction(
                name,
                Temperature.from_local(cool_hold_temp, self._scale, parameter="coolHoldTemp"),
                Temperature.from_local(heat_hold_temp, self._scale, parameter="heatHoldTemp"),
                start_date_time,
                end_date_time,
                fan,
                fan_min_on_time,
            )

        return self._call("create_vacation", selection, build)

    @_action(
        "The delete vacation function deletes a vacation event from a thermostat.",
        selection="The thermostat selection to delete the vacation from.",
        name="The vacation event name to delete.",
    )
    def delete_vacation(self, selection: str, name: str) -> bool:
        return self._call(
            "delete_vacation", selection, lambda: DeleteVacationFunction(name)
        )

    # ------------------------------------------------------------------
    # Settings and program
    # ------------------------------------------------------------------

    @_action(
        "The reset preferences function sets all of the user configurable "
        "settings back to the factory default values.",
        selection="The thermostat selection to reset preferences.",
    )
    def reset_preferences(self, selection: str) -> bool:
        return self._call(
            "reset_preferences", selection, lambda: ResetPreferencesFunction()
        )

    @_action(
        "The resume program function removes the currently running event "
        "providing the event is not a mandatory demand response event.",
        selection="The thermostat selection to resume the program on.",
        resume_all="(opt) Resume to the next event (false) or all the way to the program (true).",
    )
    def resume_program(self, selection: str, resume_all: Optional[bool] = None) -> bool:
        return self._call(
            "resume_program", selection, lambda: ResumeProgramFunction(resume_all)
        )

    @_action(
        "The send message function allows an alert message to be sent to the thermostat.",
        selection="The thermostat selection to send the message to.",
        text="The message text to send. Text will be truncated to 500 characters if longer.",
    )
    def send_message(self, selection: str, text: str) -> bool:
        return self._call("send_message", selection, lambda: SendMessageFunction(text))

    # ------------------------------------------------------------------
    # Holds
    # ------------------------------------------------------------------

    @_action(
        "The set hold function sets the thermostat into a hold with the "
        "specified temperature or climate ref.",
        selection="The thermostat selection to set the hold on.",
        cool_hold_temp="(opt) The temperature at which to set the cool hold.",
        heat_hold_temp="(opt) The temperature at which to set the heat hold.",
        hold_climate_ref="(opt) The climate to take coolHoldTemp, heatHoldTemp and fan from. "
        "When given, the temperatures are not required.",
        start_date_time="(opt) The start date/time in thermostat time.",
        end_date_time="(opt) The end date/time in thermostat time.",
        hold_type=_HOLD_TYPE_DOC,
        hold_hours=_HOLD_HOURS_DOC,
    )
    def set_hold(
        self,
        selection: str,
        cool_hold_temp: Any = None,
        heat_hold_temp: Any = None,
        hold_climate_ref: Optional[str] = None,
        start_date_time: Optional[datetime] = None,
        end_date_time: Optional[datetime] = None,
        hold_type: Optional[str] = None,
        hold_hours: Optional[int] = None,
    ) -> bool:
        params: Dict[str, Any] = {}
        if cool_hold_temp is not None:
            params["coolHoldTemp"] = cool_hold_temp
        if heat_hold_temp is not None:
            params["heatHoldTemp"] = heat_hold_temp
        if hold_climate_ref is not None:
            params["holdClimateRef"] = hold_climate_ref
        return self._set_hold(
            "set_hold",
            selection,
            params,
            hold_type,
            hold_hours,
            start_date_time,
            end_date_time,
        )

    @_action(
        "The set hold function sets the thermostat into a hold with the "
        "specified event parameters.",
        selection="The thermostat selection to set the hold on.",
        params="The map of event fields, e.g. {'coolHoldTemp': 76, 'fan': 'on'}. "
        "Unrecognized fields are ignored.",
        hold_type=_HOLD_TYPE_DOC,
        hold_hours=_HOLD_HOURS_DOC,
        start_date_time="(opt) The start date/time in thermostat time.",
        end_date_time="(opt) The end date/time in thermostat time.",
    )
    def set_hold_params(
        self,
        selection: str,
        params: Mapping[str, Any],
        hold_type: Optional[str] = None,
        hold_hours: Optional[int] = None,
        start_date_time: Optional[datetime] = None,
        end_date_time: Optional[datetime] = None,
    ) -> bool:
        return self._set_hold(
            "set_hold_params",
            selection,
            params,
            hold_type,
            hold_hours,
            start_date_time,
            end_date_time,
        )

    @_action(
        "The function switches a thermostat from occupied mode to unoccupied, "
        "or vice versa (EMS MODELS ONLY).",
        selection="The selection of EMS model thermostat to set occupied.",
        occupied="The climate to use for the temperature, occupied (true) or unoccupied (false).",
        start_date_time="(opt) The start date/time in thermostat time.",
        end_date_time="(opt) The end date/time in thermostat time.",
        hold_type=_HOLD_TYPE_DOC,
        hold_hours=_HOLD_HOURS_DOC,
    )
    def set_occupied(
        self,
        selection: str,
        occupied: bool,
        start_date_time: Optional[datetime] = None,
        end_date_time: Optional[datetime] = None,
        hold_type: Optional[str] = None,
        hold_hours: Optional[int] = None,
    ) -> bool:
        return self._call(
            "set_occupied",
            selection,
            lambda: SetOccupiedFunction(
                occupied, start_date_time, end_date_time, hold_type, hold_hours
            ),
        )

    # ------------------------------------------------------------------
    # Sensors
    # ------------------------------------------------------------------

    @_action(
        "The update sensor function allows the caller to update the name of "
        "an ecobee3 remote sensor.",
        selection="The thermostat selection owning the sensor.",
        name="The new sensor name. Has a max length of 32.",
        device_id="The enclosure id of the sensor, e.g. rs:100.",
        sensor_id="The identifier of the sensor within the enclosure, e.g. 1.",
    )
    def update_sensor(
        self, selection: str, name: str, device_id: str, sensor_id: str
    ) -> bool:
        return self._call(
            "update_sensor",
            selection,
            lambda: UpdateSensorFunction(name, device_id, sensor_id),
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _set_hold(
        self,
        action: str,
        selection: str,
        params: Mapping[str, Any],
        hold_type: Optional[str],
        hold_hours: Optional[int],
        start_date_time: Optional[datetime],
        end_date_time: Optional[datetime],
    ) -> bool:
        def build() -> EcobeeFunction:
            if not isinstance(params, Mapping):
                raise InvalidFunctionParameter(
                    f"params must be a mapping, got {type(params).__name__}",
                    parameter="params",
                )
            return SetHoldFunction(
                HoldEvent.from_mapping(params, self._scale),
                hold_type,
                hold_hours,
                start_date_time,
                end_date_time,
            )

        return self._call(action, selection, build)

    def _resolve_provider(self, selection: str) -> ActionProvider:
        service = self._lookup()
        if service is None:
            raise ActionConfigurationError(
                f"Ecobee Service is not configured, Action for selection {selection} not queued."
            )

        provider = service.get_action_provider()
        if provider is None:
            raise ActionConfigurationError(
                f"Ecobee Action Provider is not configured, Action for selection {selection} not queued."
            )

        return provider

    def _call(
        self, action: str, selection: str, build: Callable[[], EcobeeFunction]
    ) -> bool:
        try:
            function = build()
            LOGGER.debug(
                "Attempting to call Ecobee function '%s' against selection '%s'",
                function,
                selection,
            )
            provider = self._resolve_provider(selection)
            accepted = bool(provider.call_ecobee(selection, function))
        except InvalidFunctionParameter as exc:
            LOGGER.error(
                "Ecobee action %s rejected for selection '%s': %s",
                action,
                selection,
                exc,
            )
            return False
        except ActionConfigurationError as exc:
            LOGGER.error(
                "Ecobee action %s not queued for selection '%s': %s",
                action,
                selection,
                exc,
            )
            return False
        except Exception:
            LOGGER.exception(
                "Ecobee action %s failed for selection '%s'", action, selection
            )
            return False

        if not accepted:
            LOGGER.warning(
                "Ecobee function %s was not accepted for selection '%s'",
                function.function_type,
                selection,
            )
        return accepted


__all__ = [
    "ACTION_DOCS",
    "ActionConfigurationError",
    "ActionDoc",
    "EcobeeActionError",
    "EcobeeActions",
    "ParamDoc",
    "describe_actions",
]
