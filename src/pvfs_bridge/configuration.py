"""Mutable string-keyed configuration bag shared with backend drivers."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Dict, Iterator, Mapping, Optional


class Configuration(MutableMapping):
    """String to string mapping of backend tuning keys.

    Binders add or overwrite the keys they own and never remove others.
    A single instance must not be shared across concurrent resolutions.
    """

    def __init__(self, values: Optional[Mapping[str, str]] = None) -> None:
        self._values: Dict[str, str] = {}
        if values:
            for key, value in values.items():
                self.set(key, value)

    def set(self, key: str, value: str) -> None:
        if value is None:
            raise ValueError(f"Configuration value for '{key}' cannot be None")
        self._values[str(key)] = str(value)

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self._values.get(key)
        if value is None:
            return default
        return value.strip().lower() == "true"

    def get_int(self, key: str, default: int) -> int:
        value = self._values.get(key)
        if not value:
            return default
        return int(value)

    def copy(self) -> Configuration:
        return Configuration(self._values)

    def to_dict(self) -> Dict[str, str]:
        return dict(self._values)

    def fingerprint(self) -> tuple:
        """Hashable view of the contents, used as part of cache keys."""
        return tuple(sorted(self._values.items()))

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __setitem__(self, key: str, value: str) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        del self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Configuration({len(self._values)} keys)"
