"""Core utility functions shared across modules."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional


def parse_iso8601(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 string into a datetime.

    Unlike most timestamps, ecobee start/end times are expressed in thermostat
    local time, so naive values stay naive and aware values keep their offset.
    Anything that is not a non-empty ISO-8601 string yields None.
    """
    if isinstance(value, datetime):
        return value

    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    if text.endswith("Z"):
        text = text[:-1] + "+00:00"

    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None
