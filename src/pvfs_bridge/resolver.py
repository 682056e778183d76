"""Resolve pvfs URIs into backend URIs and configurations.

A pvfs URI names a connection profile instead of a host::

    pvfs://<connection name>/<path>

:func:`resolve_uri_and_conf` looks the connection up, hands it to the
binder registered for its type and returns the rewritten URI together
with the configuration the binder populated. URIs with any other scheme
are returned unchanged, so the function doubles as a normalize-if-needed
helper.
"""

from __future__ import annotations

import logging
from typing import Optional, Union
from urllib.parse import SplitResult, urlsplit

from pvfs_bridge.binders import ResolvedPair, get_binder
from pvfs_bridge.configuration import Configuration
from pvfs_bridge.connections.registry import ConnectionManager, get_connection_manager
from pvfs_bridge.constants import PVFS_SCHEME
from pvfs_bridge.exceptions import MalformedPvfsUriError, UnknownProfileError
from pvfs_bridge.fs.base import FileSystem
from pvfs_bridge.fs.factory import FileSystemFactory, get_filesystem_factory
from pvfs_bridge.fs.path import Path

logger = logging.getLogger(__name__)

UriLike = Union[str, Path, SplitResult]


def _split(uri: UriLike) -> SplitResult:
    if isinstance(uri, Path):
        return uri.to_uri()
    if isinstance(uri, SplitResult):
        return uri
    return urlsplit(uri)


def _text(uri: UriLike) -> str:
    if isinstance(uri, SplitResult):
        return str(Path(uri))
    return str(uri)


def is_pvfs(uri: UriLike) -> bool:
    return _split(uri).scheme.lower().startswith(PVFS_SCHEME)


def resolve_uri_and_conf(
    uri: UriLike,
    conf: Optional[Configuration] = None,
    connection_manager: Optional[ConnectionManager] = None,
) -> ResolvedPair:
    """Rewrite a pvfs URI for its backend.

    Args:
        uri: URI to resolve; non-pvfs URIs pass through unchanged
        conf: Configuration to populate in place (a new one when omitted)
        connection_manager: Profile source (process-wide manager when omitted)

    Returns:
        ResolvedPair of backend URI and populated configuration

    Raises:
        MalformedPvfsUriError: When the URI has no scheme or no connection name
        UnknownProfileError: When no connection is registered under the name
        MalformedObjectStorePathError: When an object-store path lacks a bucket
        MissingCredentialsError: When an object-store connection has no usable keys
    """
    if conf is None:
        conf = Configuration()

    parts = _split(uri)
    if not parts.scheme:
        raise MalformedPvfsUriError(f"URI has no scheme: '{_text(uri)}'")
    if not parts.scheme.lower().startswith(PVFS_SCHEME):
        return ResolvedPair(_text(uri), conf)

    name = parts.netloc
    if not name:
        raise MalformedPvfsUriError(f"pvfs URI has no connection name: '{_text(uri)}'")

    manager = connection_manager if connection_manager is not None else get_connection_manager()
    details = manager.get_connection_details(name)
    if details is None:
        raise UnknownProfileError(name)

    binder = get_binder(details.type)
    logger.debug(f"Resolving connection '{name}' of type '{details.type}' with {binder.__name__}")
    return binder(parts, conf, details)


def real_path(file: UriLike, connection_manager: Optional[ConnectionManager] = None) -> Path:
    """Return the backend path for ``file`` using a fresh configuration."""
    return Path(resolve_uri_and_conf(file, Configuration(), connection_manager).uri)


def get_filesystem(
    uri: UriLike,
    conf: Optional[Configuration] = None,
    *,
    connection_manager: Optional[ConnectionManager] = None,
    filesystem_factory: Optional[FileSystemFactory] = None,
) -> FileSystem:
    """Resolve ``uri`` and return the backend filesystem serving it."""
    pair = resolve_uri_and_conf(uri, conf, connection_manager)
    factory = filesystem_factory if filesystem_factory is not None else get_filesystem_factory()
    return factory.get(pair.uri, pair.conf)
