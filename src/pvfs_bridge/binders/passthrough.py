"""Binder for connection types whose backend configures itself from the URI."""

from __future__ import annotations

from urllib.parse import SplitResult

from pvfs_bridge.binders.base import ResolvedPair
from pvfs_bridge.configuration import Configuration
from pvfs_bridge.connections.details import ConnectionDetails


def bind_passthrough(uri: SplitResult, conf: Configuration, details: ConnectionDetails) -> ResolvedPair:
    # Only the scheme changes; pvfs://hdfs1/tmp/x -> hdfs://hdfs1/tmp/x
    return ResolvedPair(f"{details.type}://{uri.netloc}{uri.path}", conf)
