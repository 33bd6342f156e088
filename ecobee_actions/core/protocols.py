"""Protocol definitions for the ecobee provider boundary.

The facade never talks to the ecobee API itself. An external binding owns
the authenticated HTTP client and exposes it as an ``ActionProvider``;
a service object hands the provider out once the binding is configured.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..messages.functions import EcobeeFunction


@runtime_checkable
class ActionProvider(Protocol):
    """Performs function calls against the ecobee API."""

    def call_ecobee(self, selection: str, function: "EcobeeFunction") -> bool:
        """Invoke ``function`` against the thermostats matched by ``selection``.

        Args:
            selection: Opaque thermostat selection, passed through untouched.
            function: The request descriptor to send.

        Returns:
            True if the API accepted the function.

        Raises:
            Exception: Any transport or API failure.
        """
        ...


@runtime_checkable
class ActionService(Protocol):
    """Hands out the currently configured provider, if any."""

    def get_action_provider(self) -> Optional[ActionProvider]: ...


# Zero-argument lookup returning the active service, or None when the binding
# is not configured. Called on every action; results are never cached.
ServiceLookup = Callable[[], Optional[ActionService]]


class StaticActionService:
    """ActionService that always returns the same provider."""

    def __init__(self, provider: Optional[ActionProvider]) -> None:
        self._provider = provider

    def get_action_provider(self) -> Optional[ActionProvider]:
        return self._provider


__all__ = [
    "ActionProvider",
    "ActionService",
    "ServiceLookup",
    "StaticActionService",
]
