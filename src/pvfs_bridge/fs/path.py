"""URI-backed filesystem path value object."""

from __future__ import annotations

from typing import Union
from urllib.parse import SplitResult, urlsplit

SEPARATOR = "/"

PathLike = Union[str, "Path", SplitResult]


class Path:
    """Immutable path made of an optional scheme, authority and path.

    Examples:
        >>> p = Path("pvfs://prod/bucket1/dir/file.csv")
        >>> p.scheme, p.authority, p.path
        ('pvfs', 'prod', '/bucket1/dir/file.csv')
        >>> str(Path("relative/file"))
        'relative/file'
    """

    __slots__ = ("_uri",)

    def __init__(self, value: PathLike) -> None:
        if isinstance(value, Path):
            self._uri: SplitResult = value._uri
        elif isinstance(value, SplitResult):
            self._uri = value
        else:
            if not isinstance(value, str) or not value:
                raise ValueError(f"Cannot create a Path from {value!r}")
            self._uri = urlsplit(value)

    @classmethod
    def of(cls, scheme: str, authority: str, path: str) -> Path:
        return cls(SplitResult(scheme, authority, path, "", ""))

    def to_uri(self) -> SplitResult:
        return self._uri

    @property
    def scheme(self) -> str:
        return self._uri.scheme

    @property
    def authority(self) -> str:
        return self._uri.netloc

    @property
    def path(self) -> str:
        return self._uri.path

    @property
    def name(self) -> str:
        return self._uri.path.rstrip(SEPARATOR).rsplit(SEPARATOR, 1)[-1]

    def is_absolute(self) -> bool:
        return self._uri.path.startswith(SEPARATOR)

    def __str__(self) -> str:
        uri = self._uri
        text = uri.path
        if uri.scheme:
            text = f"{uri.scheme}://{uri.netloc}{uri.path}"
        elif uri.netloc:
            text = f"//{uri.netloc}{uri.path}"
        if uri.query:
            text += f"?{uri.query}"
        if uri.fragment:
            text += f"#{uri.fragment}"
        return text

    def __repr__(self) -> str:
        return f"Path({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))
