"""Registration and lookup of service definitions."""

import inspect
import logging
from typing import Any

from ioc_container.domain import ServiceDefinition
from ioc_container.errors import AlreadyRegisteredError, NotRegisteredError

__all__ = ["ServiceRegistry", "inferred_name"]

logger = logging.getLogger(__name__)


def inferred_name(target: Any) -> str:
    """Derive a service alias from class or function name, removing 'make_' prefix if present.

    Args:
        target: The function or class to derive a name from.

    Returns:
        The class name, or the function name with any 'make_' prefix removed.

    Example:
        >>> inferred_name(Database)       # Returns "Database"
        >>> inferred_name(make_database)  # Returns "database"
        >>> inferred_name(my_service)     # Returns "my_service"
    """
    if inspect.isclass(target):
        return target.__name__

    name = getattr(target, "__name__", None)
    if name is None:
        # functools.partial and callable instances have no __name__
        return type(target).__name__

    if name.startswith("make_"):
        return name[5:]
    else:
        return name


class ServiceRegistry:
    """Registry of service definitions, keyed by alias.

    Definitions are immutable once registered and are never removed; an alias
    can therefore only ever refer to a single factory for the lifetime of the
    registry.
    """

    def __init__(self):
        self._definitions: dict[str, ServiceDefinition] = {}

    def register(self, definition: ServiceDefinition):
        """Register a service definition.

        Args:
            definition: The definition to store under its alias.

        Raises:
            AlreadyRegisteredError: If the alias is already registered.
        """
        if definition.alias in self._definitions:
            raise AlreadyRegisteredError(
                f"Service named '{definition.alias}' already exists."
            )

        self._definitions[definition.alias] = definition
        logger.debug(
            "Registered service '%s' (%s)",
            definition.alias,
            "factory" if definition.is_factory else "singleton",
        )

    def registered_aliases(self) -> list[str]:
        """Return the registered aliases in registration order."""
        return list(self._definitions)

    def __getitem__(self, alias: str) -> ServiceDefinition:
        if alias not in self._definitions:
            raise NotRegisteredError(f"Service '{alias}' not registered.")
        return self._definitions[alias]

    def __contains__(self, alias: str) -> bool:
        return alias in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)
