"""Connection profile registry.

The resolver only needs ``get_connection_details``; any object with that
method satisfies :class:`ConnectionManager`. :class:`ConnectionRegistry`
is the in-process default, and :func:`get_connection_manager` returns the
process-wide instance used when nothing is injected.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional, Protocol, runtime_checkable

from pvfs_bridge.connections.details import ConnectionDetails

logger = logging.getLogger(__name__)


@runtime_checkable
class ConnectionManager(Protocol):
    """Source of connection profiles by logical name."""

    def get_connection_details(self, name: str) -> Optional[ConnectionDetails]:
        """Return the profile registered under ``name``, or None."""
        ...


class ConnectionRegistry:
    """Thread-safe in-memory connection registry."""

    def __init__(self) -> None:
        self._connections: Dict[str, ConnectionDetails] = {}
        self._lock = threading.Lock()

    def register(self, details: ConnectionDetails) -> None:
        if not details.name or not details.name.strip():
            raise ValueError("Connection name is required")
        with self._lock:
            self._connections[details.name] = details
        logger.debug(f"Registered connection '{details.name}' of type '{details.type}'")

    def unregister(self, name: str) -> None:
        with self._lock:
            self._connections.pop(name, None)

    def get_connection_details(self, name: str) -> Optional[ConnectionDetails]:
        with self._lock:
            return self._connections.get(name)

    def names(self) -> List[str]:
        with self._lock:
            return sorted(self._connections)

    def clear(self) -> None:
        with self._lock:
            self._connections.clear()


_default_manager: ConnectionManager = ConnectionRegistry()


def get_connection_manager() -> ConnectionManager:
    """Return the process-wide connection manager."""
    return _default_manager


def set_connection_manager(manager: ConnectionManager) -> None:
    """Replace the process-wide connection manager."""
    global _default_manager
    _default_manager = manager
