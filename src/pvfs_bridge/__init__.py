"""pvfs bridge - named-connection virtual filesystem URIs for object stores.

``pvfs://<connection>/<path>`` URIs are resolved against registered
connection profiles and rewritten into backend URIs (``s3a://...`` for
S3 and Hitachi Content Platform connections) together with the backend
configuration needed to open them.
"""

from __future__ import annotations

from .configuration import Configuration
from .connections import (
    ConnectionDetails,
    ConnectionRegistry,
    GenericDetails,
    HCPDetails,
    S3Details,
    get_connection_manager,
    set_connection_manager,
)
from .exceptions import (
    BackendMismatchError,
    MalformedObjectStorePathError,
    MalformedPvfsUriError,
    MissingCredentialsError,
    NotInitializedError,
    ProfileAccessError,
    PvfsError,
    UnknownProfileError,
)
from .resolver import get_filesystem, real_path, resolve_uri_and_conf
from .fs.delegating import DelegatingFileSystem
from .fs.path import Path

__version__ = "0.3.0"

__all__ = [
    "Configuration",
    "ConnectionDetails",
    "ConnectionRegistry",
    "GenericDetails",
    "HCPDetails",
    "S3Details",
    "get_connection_manager",
    "set_connection_manager",
    "BackendMismatchError",
    "MalformedObjectStorePathError",
    "MalformedPvfsUriError",
    "MissingCredentialsError",
    "NotInitializedError",
    "ProfileAccessError",
    "PvfsError",
    "UnknownProfileError",
    "get_filesystem",
    "real_path",
    "resolve_uri_and_conf",
    "DelegatingFileSystem",
    "Path",
]
