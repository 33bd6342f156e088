"""Tests for set-hold event field mapping."""

import logging

import pytest

from ecobee_actions.messages import (
    EVENT_FIELDS,
    FanMode,
    HoldEvent,
    InvalidFunctionParameter,
    Temperature,
    TemperatureScale,
    VentilatorMode,
)


def test_single_recognized_field_populates_only_its_slot():
    event = HoldEvent.from_mapping({"coolHoldTemp": 72.5})

    assert event.cool_hold_temp == Temperature(725)
    assert event == HoldEvent(cool_hold_temp=Temperature(725))
    assert event.as_params() == {"coolHoldTemp": 725}


def test_unrecognized_field_is_logged_and_ignored(caplog):
    caplog.set_level(logging.WARNING)

    event = HoldEvent.from_mapping({"bogusField": 1, "heatHoldTemp": 68})

    assert event.ignored == {"bogusField": 1}
    assert event.as_params() == {"heatHoldTemp": 680}
    assert "Unrecognized event field 'bogusField' with value '1' ignored." in caplog.text


def test_field_order_does_not_matter():
    forward = HoldEvent.from_mapping(
        {"coolHoldTemp": 76, "heatHoldTemp": 68, "fan": "on", "isOccupied": True}
    )
    backward = HoldEvent.from_mapping(
        {"isOccupied": True, "fan": "on", "heatHoldTemp": 68, "coolHoldTemp": 76}
    )

    assert forward == backward
    assert forward.as_params() == backward.as_params()


def test_every_whitelisted_field_is_accepted():
    params = {
        "isOccupied": True,
        "isCoolOff": False,
        "isHeatOff": False,
        "coolHoldTemp": 76,
        "heatHoldTemp": 68,
        "fan": "auto",
        "vent": "minontime",
        "ventilatorMinOnTime": 15,
        "isOptional": True,
        "isTemperatureRelative": False,
        "coolRelativeTemp": 2,
        "heatRelativeTemp": 1.5,
        "isTemperatureAbsolute": True,
        "fanMinOnTime": 10,
        "holdClimateRef": "away",
    }
    assert set(params) == set(EVENT_FIELDS)

    event = HoldEvent.from_mapping(params)

    assert event.fan is FanMode.AUTO
    assert event.vent is VentilatorMode.MIN_ON_TIME
    assert event.heat_relative_temp == Temperature(15)
    assert event.ignored == {}
    assert event.as_params() == {
        "isOccupied": True,
        "isCoolOff": False,
        "isHeatOff": False,
        "coolHoldTemp": 760,
        "heatHoldTemp": 680,
        "fan": "auto",
        "vent": "minontime",
        "ventilatorMinOnTime": 15,
        "isOptional": True,
        "isTemperatureRelative": False,
        "coolRelativeTemp": 20,
        "heatRelativeTemp": 15,
        "isTemperatureAbsolute": True,
        "fanMinOnTime": 10,
        "holdClimateRef": "away",
    }


def test_temperatures_use_the_given_scale():
    event = HoldEvent.from_mapping({"coolHoldTemp": 24}, TemperatureScale.CELSIUS)

    assert event.cool_hold_temp == Temperature(752)


@pytest.mark.parametrize(
    "params",
    [
        {"isOccupied": "yes"},
        {"fan": "turbo"},
        {"vent": 1},
        {"fanMinOnTime": "ten"},
        {"coolHoldTemp": "hot"},
        {"holdClimateRef": ""},
    ],
)
def test_wrongly_typed_known_field_raises(params):
    with pytest.raises(InvalidFunctionParameter) as excinfo:
        HoldEvent.from_mapping(params)

    assert excinfo.value.parameter == next(iter(params))


def test_empty_mapping_yields_empty_event():
    assert HoldEvent.from_mapping({}).as_params() == {}


def test_relative_temperatures_are_offsets_not_readings():
    event = HoldEvent.from_mapping(
        {"coolRelativeTemp": 2, "coolHoldTemp": 2}, TemperatureScale.CELSIUS
    )

    assert event.cool_relative_temp == Temperature(36)
    assert event.cool_hold_temp == Temperature(356)
