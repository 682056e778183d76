"""Filesystem interface shared by the pvfs facade and backend drivers."""

from __future__ import annotations

import posixpath
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO, List, Optional
from urllib.parse import urlsplit

from pvfs_bridge.fs.path import SEPARATOR, Path


@dataclass(frozen=True)
class FileStatus:
    """Metadata for a single file or directory.

    Attributes:
        path: Fully qualified path of the entry
        length: Size in bytes (0 for directories)
        is_dir: Whether the entry is a directory
        modification_time: Last modification as a POSIX timestamp, if known
    """

    path: Path
    length: int = 0
    is_dir: bool = False
    modification_time: Optional[float] = None

    @property
    def is_file(self) -> bool:
        return not self.is_dir


class FileSystem(ABC):
    """Minimal filesystem contract.

    Concrete filesystems implement the operations; :meth:`make_qualified`
    and :meth:`exists` are derived from them.
    """

    @abstractmethod
    def get_scheme(self) -> str: ...

    @abstractmethod
    def get_uri(self) -> str:
        """Return ``scheme://authority`` of this filesystem."""

    @abstractmethod
    def open(self, path: Path, buffer_size: Optional[int] = None) -> BinaryIO: ...

    @abstractmethod
    def create(self, path: Path, overwrite: bool = True, buffer_size: Optional[int] = None) -> BinaryIO: ...

    @abstractmethod
    def append(self, path: Path, buffer_size: Optional[int] = None) -> BinaryIO: ...

    @abstractmethod
    def rename(self, src: Path, dst: Path) -> bool: ...

    @abstractmethod
    def delete(self, path: Path, recursive: bool = False) -> bool: ...

    @abstractmethod
    def list_status(self, path: Path) -> List[FileStatus]: ...

    @abstractmethod
    def mkdirs(self, path: Path, permission: Optional[int] = None) -> bool: ...

    @abstractmethod
    def get_file_status(self, path: Path) -> FileStatus:
        """Return the status of ``path``.

        Raises:
            FileNotFoundError: When the path does not exist
        """

    @abstractmethod
    def set_working_directory(self, path: Path) -> None: ...

    @abstractmethod
    def get_working_directory(self) -> Path: ...

    def make_qualified(self, path: Path) -> Path:
        """Fill in scheme, authority and working directory for ``path``.

        Paths that already carry a scheme are returned unchanged.
        """
        if path.scheme:
            return path
        fs_uri = urlsplit(self.get_uri())
        target = path.path
        if not path.is_absolute():
            working = self.get_working_directory().path or SEPARATOR
            target = posixpath.join(working, target)
        return Path.of(fs_uri.scheme, path.authority or fs_uri.netloc, posixpath.normpath(target))

    def exists(self, path: Path) -> bool:
        try:
            self.get_file_status(path)
        except FileNotFoundError:
            return False
        return True

    def close(self) -> None:
        """Release resources held by this filesystem."""

    def __enter__(self) -> FileSystem:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
