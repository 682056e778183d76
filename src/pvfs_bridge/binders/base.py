"""Shared types for binders.

A binder rewrites a pvfs URI for one backend family and writes the
backend's credentials and tuning into the configuration it is given.
Binders do no network I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable
from urllib.parse import SplitResult

from pvfs_bridge.config import bridge_config
from pvfs_bridge.configuration import Configuration
from pvfs_bridge.connections.details import ConnectionDetails
from pvfs_bridge.constants import MAX_ERROR_RETRIES, S3A_IMPL, SECURE_CONNECTIONS


@dataclass(frozen=True)
class ResolvedPair:
    """Backend URI and the configuration it must be opened with."""

    uri: str
    conf: Configuration

    @property
    def scheme(self) -> str:
        return self.uri.split("://", 1)[0] if "://" in self.uri else ""


Binder = Callable[[SplitResult, Configuration, ConnectionDetails], ResolvedPair]


def set_s3a_defaults(conf: Configuration) -> None:
    """Write the driver settings shared by every s3a-backed binder."""
    conf.set(S3A_IMPL, bridge_config.s3a_impl)
    conf.set(SECURE_CONNECTIONS, "true")
    conf.set(MAX_ERROR_RETRIES, bridge_config.attempts_maximum)
