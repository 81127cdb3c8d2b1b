"""The service container: registration, resolution and parameters.

A :class:`Container` maps string aliases to factories. Resolving an alias calls
its factory with the container itself, so factories compose by resolving the
services and parameters they need:

    >>> container = Container()
    >>> container.add_parameter("dsn", "sqlite://")
    >>> container.register("db", lambda c: Database(c.get_parameter("dsn")))
    >>> container.register("users", lambda c: UserRepository(c.make("db")))
    >>> container.make("users").db is container.make("db")
    True

Services are singletons unless registered with ``is_factory=True``, in which
case every resolution builds a new instance.
"""

from typing import Any, Callable, Optional

from ioc_container.domain import Factory, ServiceDefinition
from ioc_container.errors import InvalidArgumentError
from ioc_container.instances import InstanceCache
from ioc_container.parameters import ParameterStore
from ioc_container.registry import ServiceRegistry, inferred_name

__all__ = ["Container"]


class Container:
    """Service locator holding service definitions, singleton instances and parameters.

    Every operation validates its arguments before touching any state, so a
    failed call leaves the container exactly as it was.
    """

    def __init__(self):
        self._registry = ServiceRegistry()
        self._instances = InstanceCache()
        self._parameters = ParameterStore()

    def register(self, alias: str, factory: Factory, is_factory: bool = False):
        """Register a new service.

        No instance is created here; the factory runs on the first call to
        :meth:`make`.

        Args:
            alias: The name the service is resolved under.
            factory: Callable receiving this container and returning the service.
            is_factory: If False (default), the first instance is cached and
                returned by every later :meth:`make`. If True, every call to
                :meth:`make` builds a new instance.

        Raises:
            InvalidArgumentError: If the alias is not a string, the factory is not
                callable or the factory flag is not a boolean.
            AlreadyRegisteredError: If the alias is already registered.
        """
        _require_string(alias, "Service")
        if not callable(factory):
            raise InvalidArgumentError(f"Factory for service '{alias}' must be callable.")
        if not isinstance(is_factory, bool):
            raise InvalidArgumentError("Factory argument must be boolean.")

        self._registry.register(ServiceDefinition(alias, factory, is_factory))

    def provides(
        self, alias: Optional[str] = None, is_factory: bool = False
    ) -> Callable:
        """Decorator to register a function or class as a service factory.

        Args:
            alias: Optional alias to assign; defaults to the class name, or the
                function name with 'make_' prefix removed.
            is_factory: See :meth:`register`.

        Returns:
            A decorator that registers its target and returns it unchanged.

        Example:
            @container.provides()
            def make_mailer(container) -> Mailer:
                return Mailer(container.get_parameter("smtp_host"))
        """

        def decorator(target):
            self.register(
                alias if alias is not None else inferred_name(target), target, is_factory
            )
            return target

        return decorator

    def make(self, alias: str) -> Any:
        """Resolve a service.

        Args:
            alias: The service alias.

        Returns:
            The cached instance for singleton services, or a fresh instance for
            services registered with ``is_factory=True``.

        Raises:
            InvalidArgumentError: If the alias is not a string.
            NotRegisteredError: If the alias is not registered.
        """
        _require_string(alias, "Service")
        definition = self._registry[alias]

        if definition.is_factory:
            return definition.factory(self)

        return self._instances.get_or_create(alias, lambda: definition.factory(self))

    def has_service(self, alias: str) -> bool:
        """Determine whether a service has been registered under ``alias``."""
        _require_string(alias, "Service")
        return alias in self._registry

    def registered_services(self) -> list[str]:
        """Aliases of all registered services, in registration order."""
        return self._registry.registered_aliases()

    def add_parameter(self, name: str, value: Any):
        """Add a parameter.

        Raises:
            InvalidArgumentError: If the name is not a string.
            ParameterExistsError: If a parameter with the same name already exists.
        """
        _require_string(name, "Given parameter")
        self._parameters.add(name, value)

    def get_parameter(self, name: str) -> Any:
        """Get a parameter's value.

        Raises:
            InvalidArgumentError: If the name is not a string.
            ParameterNotFoundError: If the parameter does not exist.
        """
        _require_string(name, "Given parameter")
        return self._parameters.get(name)

    def update_parameter(self, name: str, value: Any):
        """Replace the value of an existing parameter.

        Raises:
            InvalidArgumentError: If the name is not a string.
            ParameterNotFoundError: If the parameter does not exist.
        """
        _require_string(name, "Given parameter")
        self._parameters.update(name, value)

    def remove_parameter(self, name: str):
        """Remove a parameter. Removing a missing parameter does nothing.

        Raises:
            InvalidArgumentError: If the name is not a string.
        """
        _require_string(name, "Given parameter")
        self._parameters.remove(name)

    def has_parameter(self, name: str) -> bool:
        _require_string(name, "Given parameter")
        return name in self._parameters

    def parameter_names(self) -> list[str]:
        return self._parameters.names()

    def __contains__(self, alias: str) -> bool:
        return self.has_service(alias)


def _require_string(name: Any, kind: str):
    if not isinstance(name, str):
        raise InvalidArgumentError(f"{kind} name must be a string, not {type(name).__name__}.")
