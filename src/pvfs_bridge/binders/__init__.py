"""Binder table keyed on connection type.

Types without an entry fall through to :func:`bind_passthrough`. New
backend families are supported with :func:`register_binder`.
"""

from __future__ import annotations

import threading
from typing import Dict

from pvfs_bridge.constants import HCP_TYPE, S3_TYPES

from .base import Binder, ResolvedPair
from .content_platform import bind_content_platform
from .object_store import bind_object_store
from .passthrough import bind_passthrough

_BINDERS: Dict[str, Binder] = {connection_type: bind_object_store for connection_type in S3_TYPES}
_BINDERS[HCP_TYPE] = bind_content_platform
_LOCK = threading.Lock()


def register_binder(connection_type: str, binder: Binder) -> None:
    """Route connections of ``connection_type`` to ``binder``."""
    if not connection_type or not connection_type.strip():
        raise ValueError("connection_type is required")
    with _LOCK:
        _BINDERS[connection_type.strip()] = binder


def unregister_binder(connection_type: str) -> None:
    with _LOCK:
        _BINDERS.pop(connection_type, None)


def get_binder(connection_type: str) -> Binder:
    with _LOCK:
        return _BINDERS.get(connection_type, bind_passthrough)


__all__ = [
    "Binder",
    "ResolvedPair",
    "bind_content_platform",
    "bind_object_store",
    "bind_passthrough",
    "get_binder",
    "register_binder",
    "unregister_binder",
]
