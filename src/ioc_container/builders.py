"""High level entry point for constructing containers from plain mappings."""

from typing import Any, Mapping, Optional, Union

from ioc_container.container import Container
from ioc_container.domain import Factory
from ioc_container.errors import InvalidArgumentError

__all__ = ["ServiceSpec", "make_container"]


ServiceSpec = Union[Factory, tuple[Factory, bool]]
"""A factory on its own (registered as a singleton), or a ``(factory, is_factory)`` pair."""


def make_container(
    services: Optional[Mapping[str, ServiceSpec]] = None,
    parameters: Optional[Mapping[str, Any]] = None,
) -> Container:
    """Construct a :class:`Container` pre-loaded with parameters and services.

    Parameters are added before services are registered. Since factories only
    run when a service is first resolved, the order of entries in ``services``
    does not matter.

    Args:
        services: Mapping of aliases to a factory, or to a ``(factory, is_factory)``
            pair for services that should be rebuilt on every resolution.
        parameters: Mapping of parameter names to values, typically application
            settings read by the factories.

    Returns:
        The populated container.

    Raises:
        InvalidArgumentError: If an alias or parameter name is not a string, or a
            service entry is malformed.

    Example:
        >>> container = make_container(
        ...     services={
        ...         "db": lambda c: Database(c.get_parameter("dsn")),
        ...         "session": (lambda c: Session(c.make("db")), True),
        ...     },
        ...     parameters={"dsn": "sqlite://"},
        ... )
    """
    container = Container()

    for name, value in (parameters or {}).items():
        container.add_parameter(name, value)

    for alias, entry in (services or {}).items():
        if isinstance(entry, tuple):
            if len(entry) != 2:
                raise InvalidArgumentError(
                    f"Service '{alias}' must be a factory or a (factory, is_factory) pair."
                )
            factory, is_factory = entry
        else:
            factory, is_factory = entry, False
        container.register(alias, factory, is_factory)

    return container
