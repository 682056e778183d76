"""Test configuration for pytest."""

from __future__ import annotations

import io
from typing import Dict, List, Optional, Tuple

import fsspec
import pytest

from pvfs_bridge.configuration import Configuration
from pvfs_bridge.connections import ConnectionRegistry, GenericDetails, HCPDetails, S3Details
from pvfs_bridge.fs.base import FileStatus, FileSystem
from pvfs_bridge.fs.path import Path


@pytest.fixture(autouse=True)
def clean_pvfs_environment(monkeypatch):
    """Keep PVFS_* variables from the developer's shell out of the tests."""
    for name in (
        "PVFS_S3_IMPL",
        "PVFS_BUFFER_DIR",
        "PVFS_S3_ATTEMPTS_MAXIMUM",
        "PVFS_HCP_FORWARD_PROXY",
        "PVFS_SELF_SIGNED_CA_BUNDLE",
        "PVFS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def s3_details() -> S3Details:
    return S3Details(name="prod", type="s3", accessKey="AK", secretKey="SK")


@pytest.fixture
def hcp_details() -> HCPDetails:
    return HCPDetails(
        name="hcp1",
        namespace="ns",
        tenant="t",
        host="h.example",
        port="443",
        username="u",
        password="p",
        acceptSelfSignedCertificate=True,
    )


@pytest.fixture
def registry(s3_details, hcp_details) -> ConnectionRegistry:
    registry = ConnectionRegistry()
    registry.register(s3_details)
    registry.register(hcp_details)
    registry.register(GenericDetails(name="hdfs1", type="hdfs"))
    registry.register(GenericDetails(name="mem1", type="memory"))
    return registry


@pytest.fixture
def memory_store():
    """Empty the process-wide fsspec memory filesystem around a test."""
    fs = fsspec.filesystem("memory")
    fs.store.clear()
    fs.pseudo_dirs.clear()
    fs.pseudo_dirs.append("")
    yield fs
    fs.store.clear()
    fs.pseudo_dirs.clear()
    fs.pseudo_dirs.append("")


class FakeBackend(FileSystem):
    """Dictionary-backed filesystem that records every call."""

    def __init__(self, uri: str) -> None:
        self.uri = uri
        self.files: Dict[str, bytes] = {}
        self.dirs: set = set()
        self.calls: List[Tuple] = []
        root = Path(uri)
        self.working_directory = Path.of(root.scheme, root.authority, "/")

    def get_scheme(self) -> str:
        return Path(self.uri).scheme

    def get_uri(self) -> str:
        return self.uri

    def _writer(self, key: str, initial: bytes = b"") -> io.BytesIO:
        files = self.files

        class _Writer(io.BytesIO):
            def close(self) -> None:
                files[key] = self.getvalue()
                super().close()

        writer = _Writer()
        writer.write(initial)
        return writer

    def open(self, path: Path, buffer_size: Optional[int] = None):
        self.calls.append(("open", str(path)))
        return io.BytesIO(self.files[str(path)])

    def create(self, path: Path, overwrite: bool = True, buffer_size: Optional[int] = None):
        self.calls.append(("create", str(path)))
        if not overwrite and str(path) in self.files:
            raise FileExistsError(str(path))
        return self._writer(str(path))

    def append(self, path: Path, buffer_size: Optional[int] = None):
        self.calls.append(("append", str(path)))
        return self._writer(str(path), self.files.get(str(path), b""))

    def rename(self, src: Path, dst: Path) -> bool:
        self.calls.append(("rename", str(src), str(dst)))
        if str(src) not in self.files:
            return False
        self.files[str(dst)] = self.files.pop(str(src))
        return True

    def delete(self, path: Path, recursive: bool = False) -> bool:
        self.calls.append(("delete", str(path), recursive))
        return self.files.pop(str(path), None) is not None

    def list_status(self, path: Path) -> List[FileStatus]:
        self.calls.append(("list_status", str(path)))
        prefix = str(path).rstrip("/") + "/"
        return [FileStatus(Path(key), len(data)) for key, data in sorted(self.files.items()) if key.startswith(prefix)]

    def mkdirs(self, path: Path, permission: Optional[int] = None) -> bool:
        self.calls.append(("mkdirs", str(path)))
        self.dirs.add(str(path))
        return True

    def get_file_status(self, path: Path) -> FileStatus:
        self.calls.append(("get_file_status", str(path)))
        if str(path) in self.dirs:
            return FileStatus(path, 0, is_dir=True)
        if str(path) not in self.files:
            raise FileNotFoundError(str(path))
        return FileStatus(path, len(self.files[str(path)]))

    def set_working_directory(self, path: Path) -> None:
        self.calls.append(("set_working_directory", str(path)))
        self.working_directory = path

    def get_working_directory(self) -> Path:
        return self.working_directory


class FakeFactory:
    """Backend factory handing out one FakeBackend per scheme and authority."""

    def __init__(self) -> None:
        self.backends: Dict[Tuple[str, str], FakeBackend] = {}
        self.requests: List[Tuple[str, Dict[str, str]]] = []

    def get(self, uri: str, conf: Configuration) -> FakeBackend:
        self.requests.append((uri, conf.to_dict()))
        path = Path(uri)
        key = (path.scheme, path.authority)
        if key not in self.backends:
            self.backends[key] = FakeBackend(f"{path.scheme}://{path.authority}")
        return self.backends[key]


@pytest.fixture
def fake_factory() -> FakeFactory:
    return FakeFactory()
