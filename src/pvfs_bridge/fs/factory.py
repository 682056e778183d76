"""Backend filesystem factory.

The resolver produces a backend URI and configuration; a factory turns
that pair into a :class:`FileSystem`. Any object with a matching ``get``
satisfies :class:`FileSystemFactory`.

:class:`FsspecFileSystemFactory` is the default: ``s3a`` URIs are served
by the driver class named in ``fs.s3a.impl`` (s3fs unless overridden)
with credentials, endpoint, signer, retries and TLS posture taken from the
configuration; any other scheme is handed to fsspec, which configures
itself from the URI.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional, Protocol, runtime_checkable
from urllib.parse import urlsplit

import fsspec
from cachetools import LRUCache
from fsspec.core import url_to_fs

from pvfs_bridge.aws.client_factory import get_client_factory
from pvfs_bridge.config import factory_config
from pvfs_bridge.configuration import Configuration
from pvfs_bridge.constants import S3A_IMPL, S3A_SCHEME
from pvfs_bridge.fs.base import FileSystem
from pvfs_bridge.fs.fsspec_backend import FsspecFileSystem
from pvfs_bridge.utils import load_class

logger = logging.getLogger(__name__)


@runtime_checkable
class FileSystemFactory(Protocol):
    """Produces backend filesystems from a URI and configuration."""

    def get(self, uri: str, conf: Configuration) -> FileSystem:
        """Return a filesystem for ``uri``; equal inputs yield the same instance."""
        ...


class FsspecFileSystemFactory:
    """Create and cache fsspec-backed filesystems per (uri, configuration)."""

    def __init__(self, cache_size: Optional[int] = None) -> None:
        self._cache: LRUCache = LRUCache(maxsize=cache_size or factory_config.CACHE_SIZE)
        self._lock = threading.Lock()

    def get(self, uri: str, conf: Configuration) -> FileSystem:
        parts = urlsplit(uri)
        scheme = parts.scheme or "file"
        key = (scheme, parts.netloc, conf.fingerprint())

        with self._lock:
            cached = self._cache.get(key)
            if cached is not None:
                return cached

            backend = FsspecFileSystem(self._create(uri, scheme, conf), f"{scheme}://{parts.netloc}")
            self._cache[key] = backend

        logger.info(f"Created backend filesystem for {scheme}://{parts.netloc}")
        return backend

    def _create(self, uri: str, scheme: str, conf: Configuration) -> fsspec.AbstractFileSystem:
        if scheme == S3A_SCHEME:
            impl = conf.get(S3A_IMPL)
            fs_cls = load_class(impl) if impl else fsspec.get_filesystem_class(S3A_SCHEME)
            options = get_client_factory(conf).s3fs_options(conf)
            return fs_cls(**options)
        fs, _ = url_to_fs(uri)
        return fs

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()


_default_factory: FileSystemFactory = FsspecFileSystemFactory()


def get_filesystem_factory() -> FileSystemFactory:
    """Return the process-wide backend filesystem factory."""
    return _default_factory


def set_filesystem_factory(factory: FileSystemFactory) -> None:
    global _default_factory
    _default_factory = factory
