"""Cache of singleton service instances.

Each alias holds at most one instance. Once cached, an instance is never
replaced, so every resolution after the first returns the very same object.

The check-then-create sequence is serialised per alias. Concurrent first
resolutions of one alias therefore build a single instance, while unrelated
singletons are built independently, including from other threads that a
factory starts and waits for. A short-lived guard lock protects only the table
of per-alias locks and is never held while a factory runs.
"""

import logging
import threading
from typing import Any, Callable

__all__ = ["InstanceCache"]

logger = logging.getLogger(__name__)


class InstanceCache:
    """Instances of singleton services, keyed by alias."""

    def __init__(self):
        self._instances: dict[str, Any] = {}
        self._locks: dict[str, threading.RLock] = {}
        self._guard = threading.Lock()

    def get_or_create(self, alias: str, create: Callable[[], Any]) -> Any:
        """Return the instance cached for ``alias``, creating it on first use.

        Args:
            alias: The service alias.
            create: Zero-argument callable building the instance. Only invoked
                when nothing is cached yet.

        Returns:
            The cached instance.

        If ``create`` raises, the exception propagates and nothing is cached.
        """
        if alias in self._instances:
            return self._instances[alias]

        with self._lock_for(alias):
            if alias not in self._instances:
                instance = create()
                self._instances[alias] = instance
                logger.debug("Created singleton instance of '%s'", alias)
            return self._instances[alias]

    def _lock_for(self, alias: str) -> threading.RLock:
        with self._guard:
            if alias not in self._locks:
                self._locks[alias] = threading.RLock()
            return self._locks[alias]

    def __contains__(self, alias: str) -> bool:
        return alias in self._instances

    def __len__(self) -> int:
        return len(self._instances)
