"""Filesystem facade for the ``pvfs`` scheme.

:class:`DelegatingFileSystem` resolves the first path it sees to a
backend filesystem, pins that backend for the rest of its life and
forwards every operation to it with pvfs paths rewritten to backend
paths.

Example:
    >>> fs = DelegatingFileSystem(connection_manager=registry)
    >>> with fs.open(Path("pvfs://prod/bucket1/dir/file.csv")) as handle:
    ...     data = handle.read()
    >>> fs.get_uri()
    's3a://bucket1'
"""

from __future__ import annotations

import logging
import threading
from typing import BinaryIO, List, Optional

from pvfs_bridge.configuration import Configuration
from pvfs_bridge.connections.registry import ConnectionManager
from pvfs_bridge.constants import PVFS_SCHEME
from pvfs_bridge.exceptions import BackendMismatchError, NotInitializedError, PvfsError
from pvfs_bridge.fs.base import FileStatus, FileSystem
from pvfs_bridge.fs.factory import FileSystemFactory, get_filesystem_factory
from pvfs_bridge.fs.path import Path
from pvfs_bridge.resolver import resolve_uri_and_conf

logger = logging.getLogger(__name__)


class DelegatingFileSystem(FileSystem):
    """Filesystem advertising ``pvfs`` and delegating to one pinned backend.

    Args:
        conf: Configuration handed to the binders (a new one when omitted)
        connection_manager: Profile source (process-wide manager when omitted)
        filesystem_factory: Backend factory (process-wide factory when omitted)
    """

    def __init__(
        self,
        conf: Optional[Configuration] = None,
        *,
        connection_manager: Optional[ConnectionManager] = None,
        filesystem_factory: Optional[FileSystemFactory] = None,
    ) -> None:
        self._conf = conf if conf is not None else Configuration()
        self._connection_manager = connection_manager
        self._factory = filesystem_factory if filesystem_factory is not None else get_filesystem_factory()
        self._fs: Optional[FileSystem] = None
        self._connection: Optional[str] = None
        self._lock = threading.Lock()

    @property
    def conf(self) -> Configuration:
        return self._conf

    def get_scheme(self) -> str:
        return PVFS_SCHEME

    def make_qualified(self, path: Path) -> Path:
        return super().make_qualified(self._update_path(path))

    def get_uri(self) -> str:
        return self._pinned().get_uri()

    def get_working_directory(self) -> Path:
        return self._pinned().get_working_directory()

    def open(self, path: Path, buffer_size: Optional[int] = None) -> BinaryIO:
        return self._get_fs(path).open(self._update_path(path), buffer_size)

    def create(self, path: Path, overwrite: bool = True, buffer_size: Optional[int] = None) -> BinaryIO:
        return self._get_fs(path).create(self._update_path(path), overwrite, buffer_size)

    def append(self, path: Path, buffer_size: Optional[int] = None) -> BinaryIO:
        return self._get_fs(path).append(self._update_path(path), buffer_size)

    def rename(self, src: Path, dst: Path) -> bool:
        return self._get_fs(src).rename(self._update_path(src), self._update_path(dst))

    def delete(self, path: Path, recursive: bool = False) -> bool:
        return self._get_fs(path).delete(self._update_path(path), recursive)

    def list_status(self, path: Path) -> List[FileStatus]:
        return self._get_fs(path).list_status(self._update_path(path))

    def mkdirs(self, path: Path, permission: Optional[int] = None) -> bool:
        return self._get_fs(path).mkdirs(self._update_path(path), permission)

    def get_file_status(self, path: Path) -> FileStatus:
        return self._get_fs(path).get_file_status(self._update_path(path))

    def set_working_directory(self, path: Path) -> None:
        self._get_fs(path).set_working_directory(self._update_path(path))

    def _pinned(self) -> FileSystem:
        fs = self._fs
        if fs is None:
            raise NotInitializedError("No backend filesystem yet; perform a path operation first")
        return fs

    def _get_fs(self, path: Path) -> FileSystem:
        if self._fs is None:
            with self._lock:
                if self._fs is None:
                    self._fs = self._pin(path)
        return self._fs

    def _pin(self, path: Path) -> FileSystem:
        # The factory caches by uri and conf, so this does not create duplicate backends
        try:
            pair = resolve_uri_and_conf(path, self._conf, self._connection_manager)
            fs = self._factory.get(pair.uri, pair.conf)
        except (PvfsError, OSError, ValueError, ImportError) as e:
            raise NotInitializedError(f"Failed to initialize backend filesystem for '{path}': {e}") from e

        if path.scheme == PVFS_SCHEME:
            self._connection = path.authority
        logger.info(f"Pinned backend {fs.get_uri()} for {path}")
        return fs

    def _update_path(self, path: Path) -> Path:
        """Rewrite a pvfs path for the backend, refusing other connections once pinned.

        Raises:
            BackendMismatchError: When the path belongs to a different
                connection or backend than the pinned one
        """
        if path.scheme != PVFS_SCHEME:
            return path
        fs = self._fs
        if fs is None:
            return Path(resolve_uri_and_conf(path, self._conf, self._connection_manager).uri)

        if self._connection is not None:
            if path.authority != self._connection:
                raise BackendMismatchError(self._connection, path.authority)
            return Path(resolve_uri_and_conf(path, self._conf, self._connection_manager).uri)

        # Pinned through a backend path: resolve on a copy so a mismatch leaves conf untouched
        conf = self._conf.copy()
        resolved = Path(resolve_uri_and_conf(path, conf, self._connection_manager).uri)
        pinned_uri = fs.get_uri()
        if f"{resolved.scheme}://{resolved.authority}" != pinned_uri:
            raise BackendMismatchError(pinned_uri, path.authority)
        self._conf.update(conf)
        return resolved

    def __repr__(self) -> str:
        pinned = self._fs.get_uri() if self._fs is not None else None
        return f"DelegatingFileSystem(pinned={pinned!r})"
