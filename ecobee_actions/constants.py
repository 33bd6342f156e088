"""Constants used across the ecobee-actions package."""

from __future__ import annotations

from pathlib import Path

APP_NAME = "ecobee-actions"
DEFAULT_CONFIG_FILENAME = f"{APP_NAME}.cfg"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / APP_NAME / DEFAULT_CONFIG_FILENAME

DEFAULT_TEMPERATURE_SCALE = "F"

# Vendor-side limits
MAX_MESSAGE_LENGTH = 500
MAX_SENSOR_NAME_LENGTH = 32
MIN_FAN_ON_TIME_MINUTES = 0
MAX_FAN_ON_TIME_MINUTES = 60

WIRE_DATE_FORMAT = "%Y-%m-%d"
WIRE_TIME_FORMAT = "%H:%M:%S"
