"""Connection profiles and the registry that serves them."""

from .details import ConnectionDetails, GenericDetails, HCPDetails, S3Details, persisted
from .properties import get_props_from_connection_details
from .registry import (
    ConnectionManager,
    ConnectionRegistry,
    get_connection_manager,
    set_connection_manager,
)

__all__ = [
    "ConnectionDetails",
    "GenericDetails",
    "HCPDetails",
    "S3Details",
    "persisted",
    "get_props_from_connection_details",
    "ConnectionManager",
    "ConnectionRegistry",
    "get_connection_manager",
    "set_connection_manager",
]
