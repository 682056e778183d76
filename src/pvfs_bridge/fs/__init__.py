"""Filesystem interface, paths and backend factories.

The pvfs facade lives in :mod:`pvfs_bridge.fs.delegating`; it depends on
the resolver and is therefore not imported here.
"""

from .base import FileStatus, FileSystem
from .factory import (
    FileSystemFactory,
    FsspecFileSystemFactory,
    get_filesystem_factory,
    set_filesystem_factory,
)
from .fsspec_backend import FsspecFileSystem
from .path import Path

__all__ = [
    "FileStatus",
    "FileSystem",
    "FileSystemFactory",
    "FsspecFileSystem",
    "FsspecFileSystemFactory",
    "Path",
    "get_filesystem_factory",
    "set_filesystem_factory",
]
