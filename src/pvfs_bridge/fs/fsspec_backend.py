"""Adapter exposing an fsspec filesystem through :class:`FileSystem`."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, BinaryIO, Dict, List, Optional

import fsspec

from pvfs_bridge.fs.base import FileStatus, FileSystem
from pvfs_bridge.fs.path import SEPARATOR, Path

logger = logging.getLogger(__name__)


def _modification_time(info: Dict[str, Any]) -> Optional[float]:
    for key in ("mtime", "LastModified", "last_modified", "created"):
        value = info.get(key)
        if value is None:
            continue
        if isinstance(value, datetime):
            return value.timestamp()
        try:
            return float(value)
        except (TypeError, ValueError):
            continue
    return None


class FsspecFileSystem(FileSystem):
    """Backend filesystem driven by an ``fsspec.AbstractFileSystem``.

    Args:
        fs: The fsspec filesystem doing the I/O
        uri: ``scheme://authority`` this backend was created for
    """

    def __init__(self, fs: fsspec.AbstractFileSystem, uri: str) -> None:
        self._fs = fs
        root = Path(uri)
        self._scheme = root.scheme
        self._authority = root.authority
        self._uri = f"{self._scheme}://{self._authority}"
        self._working_directory = Path.of(self._scheme, self._authority, SEPARATOR)

    @property
    def fs(self) -> fsspec.AbstractFileSystem:
        return self._fs

    def get_scheme(self) -> str:
        return self._scheme

    def get_uri(self) -> str:
        return self._uri

    def _native(self, path: Path) -> str:
        return self._fs._strip_protocol(str(self.make_qualified(path)))

    def _status(self, info: Dict[str, Any]) -> FileStatus:
        name = info["name"]
        if self._authority:
            qualified = f"{self._scheme}://{name.lstrip(SEPARATOR)}"
        else:
            qualified = f"{self._scheme}://{name}"
        is_dir = info.get("type") == "directory"
        return FileStatus(
            path=Path(qualified),
            length=0 if is_dir else int(info.get("size") or 0),
            is_dir=is_dir,
            modification_time=_modification_time(info),
        )

    def open(self, path: Path, buffer_size: Optional[int] = None) -> BinaryIO:
        kwargs = {"block_size": buffer_size} if buffer_size else {}
        return self._fs.open(self._native(path), "rb", **kwargs)

    def create(self, path: Path, overwrite: bool = True, buffer_size: Optional[int] = None) -> BinaryIO:
        native = self._native(path)
        if not overwrite and self._fs.exists(native):
            raise FileExistsError(f"File already exists: {path}")
        kwargs = {"block_size": buffer_size} if buffer_size else {}
        return self._fs.open(native, "wb", **kwargs)

    def append(self, path: Path, buffer_size: Optional[int] = None) -> BinaryIO:
        kwargs = {"block_size": buffer_size} if buffer_size else {}
        return self._fs.open(self._native(path), "ab", **kwargs)

    def rename(self, src: Path, dst: Path) -> bool:
        source = self._native(src)
        if not self._fs.exists(source):
            return False
        self._fs.mv(source, self._native(dst), recursive=True)
        return True

    def delete(self, path: Path, recursive: bool = False) -> bool:
        native = self._native(path)
        if not self._fs.exists(native):
            return False
        self._fs.rm(native, recursive=recursive)
        return True

    def list_status(self, path: Path) -> List[FileStatus]:
        return [self._status(info) for info in self._fs.ls(self._native(path), detail=True)]

    def mkdirs(self, path: Path, permission: Optional[int] = None) -> bool:
        self._fs.makedirs(self._native(path), exist_ok=True)
        return True

    def get_file_status(self, path: Path) -> FileStatus:
        return self._status(self._fs.info(self._native(path)))

    def set_working_directory(self, path: Path) -> None:
        self._working_directory = self.make_qualified(path)

    def get_working_directory(self) -> Path:
        return self._working_directory

    def __repr__(self) -> str:
        return f"FsspecFileSystem(uri={self._uri!r}, fs={type(self._fs).__name__})"
