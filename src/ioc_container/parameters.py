"""Named configuration values held alongside services.

Parameters are independent of service definitions: they are plain values that
factories can read from the container while building a service.
"""

import logging
from typing import Any

from ioc_container.errors import ParameterExistsError, ParameterNotFoundError

__all__ = ["ParameterStore"]

logger = logging.getLogger(__name__)


class ParameterStore:
    """Mapping of parameter names to arbitrary values.

    Adding requires the name to be new, updating and reading require it to
    exist, and removal is idempotent.

    Example:
        >>> parameters = ParameterStore()
        >>> parameters.add("dsn", "sqlite://")
        >>> parameters.update("dsn", "postgresql://db/app")
        >>> parameters.get("dsn")
        'postgresql://db/app'
    """

    def __init__(self):
        self._values: dict[str, Any] = {}

    def add(self, name: str, value: Any):
        if name in self._values:
            raise ParameterExistsError(
                f"Parameter with '{name}' name already exists. "
                "If you want to update the parameter's value, use update_parameter()."
            )
        self._values[name] = value
        logger.debug("Added parameter '%s'", name)

    def get(self, name: str) -> Any:
        self._require(name)
        return self._values[name]

    def update(self, name: str, value: Any):
        self._require(name)
        self._values[name] = value
        logger.debug("Updated parameter '%s'", name)

    def remove(self, name: str):
        if name in self._values:
            del self._values[name]
            logger.debug("Removed parameter '%s'", name)

    def names(self) -> list[str]:
        return list(self._values)

    def _require(self, name: str):
        if name not in self._values:
            raise ParameterNotFoundError(f"Required parameter '{name}' not found.")

    def __contains__(self, name: str) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)
