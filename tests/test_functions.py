"""Tests for ecobee function request descriptors."""

from datetime import datetime, timezone

import pytest

from ecobee_actions.function_names import EcobeeFunctionNames
from ecobee_actions.messages import (
    AckType,
    AcknowledgeFunction,
    ControlPlugFunction,
    CreateVacationFunction,
    DeleteVacationFunction,
    FanMode,
    HoldEvent,
    HoldType,
    InvalidFunctionParameter,
    PlugState,
    ResetPreferencesFunction,
    ResumeProgramFunction,
    SendMessageFunction,
    SetHoldFunction,
    SetOccupiedFunction,
    Temperature,
    UpdateSensorFunction,
)

START = datetime(2026, 12, 20, 8, 30)
END = datetime(2027, 1, 3, 18, 0, 5)


def test_acknowledge_payload():
    function = AcknowledgeFunction("318324702718", "8788373", "defer", True)

    assert function.ack_type is AckType.DEFER
    assert function.as_payload() == {
        "type": "acknowledge",
        "params": {
            "thermostatIdentifier": "318324702718",
            "ackRef": "8788373",
            "ackType": "defer",
            "remindMeLater": True,
        },
    }


def test_acknowledge_omits_absent_remind_me_later():
    function = AcknowledgeFunction("318324702718", "8788373", AckType.ACCEPT)

    assert "remindMeLater" not in function.params()


def test_acknowledge_rejects_unknown_ack_type():
    with pytest.raises(InvalidFunctionParameter) as excinfo:
        AcknowledgeFunction("318324702718", "8788373", "ignore")

    assert excinfo.value.parameter == "ackType"


def test_control_plug_payload_with_hold_hours():
    function = ControlPlugFunction(
        "Garage", "on", hold_type="holdHours", hold_hours=2
    )

    assert function.plug_state is PlugState.ON
    assert function.as_payload() == {
        "type": "controlPlug",
        "params": {
            "plugName": "Garage",
            "plugState": "on",
            "holdType": "holdHours",
            "holdHours": 2,
        },
    }


def test_control_plug_renders_window_in_thermostat_time():
    function = ControlPlugFunction("Garage", "off", START, END, HoldType.DATE_TIME)

    assert function.params() == {
        "plugName": "Garage",
        "plugState": "off",
        "startDate": "2026-12-20",
        "startTime": "08:30:00",
        "endDate": "2027-01-03",
        "endTime": "18:00:05",
        "holdType": "dateTime",
    }


def test_hold_hours_hold_type_requires_hours():
    with pytest.raises(InvalidFunctionParameter) as excinfo:
        ControlPlugFunction("Garage", "on", hold_type="holdHours")

    assert excinfo.value.parameter == "holdHours"


def test_date_time_hold_type_requires_both_ends():
    with pytest.raises(InvalidFunctionParameter):
        SetOccupiedFunction(True, start_date_time=START, hold_type="dateTime")


def test_end_before_start_is_rejected():
    with pytest.raises(InvalidFunctionParameter):
        SetOccupiedFunction(True, start_date_time=END, end_date_time=START)


@pytest.mark.parametrize("hours", [0, -3, 1.5, "2"])
def test_hold_hours_must_be_positive_integer(hours):
    with pytest.raises(InvalidFunctionParameter):
        SetOccupiedFunction(True, hold_type="holdHours", hold_hours=hours)


def test_window_must_be_datetimes():
    with pytest.raises(InvalidFunctionParameter):
        SetOccupiedFunction(True, start_date_time="2026-12-20")


def test_create_vacation_payload():
    function = CreateVacationFunction(
        "Ski trip",
        Temperature(800),
        Temperature(550),
        START,
        END,
        "on",
        20,
    )

    assert function.fan is FanMode.ON
    assert function.as_payload() == {
        "type": "createVacation",
        "params": {
            "name": "Ski trip",
            "coolHoldTemp": 800,
            "heatHoldTemp": 550,
            "startDate": "2026-12-20",
            "startTime": "08:30:00",
            "endDate": "2027-01-03",
            "endTime": "18:00:05",
            "fan": "on",
            "fanMinOnTime": 20,
        },
    }


def test_create_vacation_minimal_payload():
    function = CreateVacationFunction("Ski trip", Temperature(800), Temperature(550))

    assert function.params() == {
        "name": "Ski trip",
        "coolHoldTemp": 800,
        "heatHoldTemp": 550,
    }


@pytest.mark.parametrize("minutes", [-1, 61])
def test_create_vacation_fan_min_on_time_range(minutes):
    with pytest.raises(InvalidFunctionParameter) as excinfo:
        CreateVacationFunction(
            "Ski trip", Temperature(800), Temperature(550), fan_min_on_time=minutes
        )

    assert excinfo.value.parameter == "fanMinOnTime"


def test_create_vacation_requires_temperatures():
    with pytest.raises(InvalidFunctionParameter):
        CreateVacationFunction("Ski trip", None, Temperature(550))


def test_delete_vacation_payload():
    assert DeleteVacationFunction("Ski trip").as_payload() == {
        "type": "deleteVacation",
        "params": {"name": "Ski trip"},
    }


def test_delete_vacation_requires_name():
    with pytest.raises(InvalidFunctionParameter):
        DeleteVacationFunction("  ")


def test_reset_preferences_has_no_params():
    assert ResetPreferencesFunction().as_payload() == {
        "type": "resetPreferences",
        "params": {},
    }


def test_resume_program_payload():
    assert ResumeProgramFunction().params() == {}
    assert ResumeProgramFunction(True).as_payload() == {
        "type": "resumeProgram",
        "params": {"resumeAll": True},
    }


def test_resume_program_rejects_non_boolean():
    with pytest.raises(InvalidFunctionParameter):
        ResumeProgramFunction("yes")


def test_send_message_truncates_long_text():
    function = SendMessageFunction("x" * 600)

    assert len(function.text) == 500
    assert function.as_payload()["type"] == "sendMessage"


def test_set_hold_flattens_event_fields():
    event = HoldEvent.from_mapping({"coolHoldTemp": 76, "holdClimateRef": "home"})
    function = SetHoldFunction(event, "nextTransition")

    assert function.as_payload() == {
        "type": "setHold",
        "params": {
            "coolHoldTemp": 760,
            "holdClimateRef": "home",
            "holdType": "nextTransition",
        },
    }


def test_set_hold_leaves_ignored_fields_off_the_wire():
    event = HoldEvent.from_mapping({"bogusField": 1})

    assert SetHoldFunction(event).params() == {}


def test_set_hold_requires_hold_event():
    with pytest.raises(InvalidFunctionParameter):
        SetHoldFunction({"coolHoldTemp": 76})


def test_set_occupied_payload():
    function = SetOccupiedFunction(False, hold_type="indefinite")

    assert function.as_payload() == {
        "type": "setOccupied",
        "params": {"occupied": False, "holdType": "indefinite"},
    }


def test_set_occupied_requires_boolean():
    with pytest.raises(InvalidFunctionParameter):
        SetOccupiedFunction(None)


def test_update_sensor_payload():
    function = UpdateSensorFunction("Bedroom", "rs:100", "1")

    assert function.as_payload() == {
        "type": "updateSensor",
        "params": {"name": "Bedroom", "deviceId": "rs:100", "sensorId": "1"},
    }


def test_update_sensor_name_length_limit():
    with pytest.raises(InvalidFunctionParameter):
        UpdateSensorFunction("n" * 33, "rs:100", "1")


def test_function_types_match_vendor_names():
    assert SetHoldFunction.function_type in EcobeeFunctionNames.HOLD_FUNCTIONS
    assert SetOccupiedFunction.function_type in EcobeeFunctionNames.HOLD_FUNCTIONS
    assert ControlPlugFunction.function_type in EcobeeFunctionNames.HOLD_FUNCTIONS
    assert UpdateSensorFunction.function_type == EcobeeFunctionNames.UPDATE_SENSOR


def test_mixed_naive_and_aware_window_is_rejected():
    with pytest.raises(InvalidFunctionParameter) as excinfo:
        SetOccupiedFunction(
            True,
            start_date_time=START,
            end_date_time=END.replace(tzinfo=timezone.utc),
        )

    assert excinfo.value.parameter == "endDateTime"


def test_aware_window_is_accepted():
    function = ControlPlugFunction(
        "Garage",
        "on",
        START.replace(tzinfo=timezone.utc),
        END.replace(tzinfo=timezone.utc),
        "dateTime",
    )

    assert function.params()["startTime"] == "08:30:00"
