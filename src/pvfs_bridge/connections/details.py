"""Connection profile records.

A connection profile names a remote store and carries the attributes
needed to reach it. Attributes that belong to the persisted profile are
declared with :func:`persisted`; only those are visible to the binders
through :func:`pvfs_bridge.connections.properties.get_props_from_connection_details`.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

PERSIST = "persist"


def persisted(default: Any = None) -> Any:
    """Declare a dataclass field as persistable profile metadata."""
    return field(default=default, metadata={PERSIST: True})


@dataclass
class ConnectionDetails:
    """Base connection profile.

    Attributes:
        name: Logical connection name, used as the pvfs URI authority
        type: Backend type tag (``s3``, ``hcp``, ``hdfs``, ...)
    """

    name: str
    type: str = ""
    description: Optional[str] = persisted()


@dataclass
class S3Details(ConnectionDetails):
    """Amazon S3 (or S3-compatible) object-store connection."""

    type: str = "s3"
    accessKey: Optional[str] = persisted()
    secretKey: Optional[str] = persisted()
    sessionToken: Optional[str] = persisted()
    credentialsFilePath: Optional[str] = persisted()
    region: Optional[str] = persisted()


@dataclass
class HCPDetails(ConnectionDetails):
    """Hitachi Content Platform connection, reached through its S3 endpoint."""

    type: str = "hcp"
    namespace: Optional[str] = persisted()
    host: Optional[str] = persisted()
    port: Optional[str] = persisted()
    tenant: Optional[str] = persisted()
    username: Optional[str] = persisted()
    password: Optional[str] = persisted()
    proxyHost: Optional[str] = persisted()
    proxyPort: Optional[str] = persisted()
    acceptSelfSignedCertificate: bool = persisted(False)


@dataclass
class GenericDetails(ConnectionDetails):
    """Connection whose backend configures itself from the URI alone."""

    type: str = "hdfs"
