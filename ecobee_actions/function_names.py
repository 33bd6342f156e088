"""Centralized ecobee function type names.

These names appear as the ``type`` member of every function object sent to
the ecobee ``/thermostat`` endpoint:

    {"selection": {...}, "functions": [{"type": "setHold", "params": {...}}]}

See https://www.ecobee.com/home/developer/api/documentation/v1/functions/using-functions.shtml
"""

from __future__ import annotations


class EcobeeFunctionNames:
    """Function type constants as defined by the ecobee API."""

    # -------------------------------------------------------------------------
    # Alerts and messages
    # -------------------------------------------------------------------------

    ACKNOWLEDGE = "acknowledge"
    """Acknowledge an alert."""

    SEND_MESSAGE = "sendMessage"
    """Send an alert message to the thermostat."""

    # -------------------------------------------------------------------------
    # Holds and events
    # -------------------------------------------------------------------------

    SET_HOLD = "setHold"
    """Put the thermostat into a temperature or climate hold."""

    SET_OCCUPIED = "setOccupied"
    """Switch an EMS thermostat between occupied and unoccupied."""

    CONTROL_PLUG = "controlPlug"
    """Hold a smart plug on or off."""

    RESUME_PROGRAM = "resumeProgram"
    """Remove the running event and return to the program."""

    # -------------------------------------------------------------------------
    # Vacations
    # -------------------------------------------------------------------------

    CREATE_VACATION = "createVacation"
    """Create a vacation event."""

    DELETE_VACATION = "deleteVacation"
    """Delete a vacation event by name."""

    # -------------------------------------------------------------------------
    # Settings and sensors
    # -------------------------------------------------------------------------

    RESET_PREFERENCES = "resetPreferences"
    """Reset user configurable settings to factory defaults."""

    UPDATE_SENSOR = "updateSensor"
    """Rename a remote sensor."""

    # -------------------------------------------------------------------------
    # Function Sets
    # -------------------------------------------------------------------------

    HOLD_FUNCTIONS = frozenset({SET_HOLD, SET_OCCUPIED, CONTROL_PLUG})
    """Functions that accept a hold duration policy."""
