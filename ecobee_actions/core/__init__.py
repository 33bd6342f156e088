"""Core primitives for ecobee-actions."""

from .protocols import ActionProvider, ActionService, ServiceLookup, StaticActionService
from .utils import parse_iso8601

__all__ = [
    "ActionProvider",
    "ActionService",
    "ServiceLookup",
    "StaticActionService",
    "parse_iso8601",
]
