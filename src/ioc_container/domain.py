"""Domain models used throughout the container."""

from dataclasses import dataclass
from typing import Any, Callable

__all__ = ["Factory", "ServiceDefinition"]


Factory = Callable[[Any], Any]
"""Type alias for service factories.

A factory receives the container resolving it and returns the service instance,
so it may resolve other services or read parameters while building its own:

Example:
    >>> def make_repository(container) -> Repository:
    ...     return Repository(container.make("db"), container.get_parameter("table"))
"""


@dataclass(frozen=True)
class ServiceDefinition:
    """Represents a registered service.

    Attributes:
        alias: The unique name the service is registered and resolved under.
        factory: The callable producing the service, invoked with the container.
        is_factory: If True, every resolution calls the factory again. If False,
            the first result is cached and returned for all later resolutions.
    """

    alias: str
    factory: Factory
    is_factory: bool = False
