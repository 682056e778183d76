"""Object-store credential providers and S3 client factories."""

from __future__ import annotations

from .credentials import (
    BasicCredentialsProvider,
    PropertiesFileCredentialsProvider,
    TemporaryCredentialsProvider,
    credentials_from_configuration,
)
from .client_factory import (
    DefaultS3ClientFactory,
    S3ClientFactory,
    SelfSignedS3ClientFactory,
    get_client_factory,
)

__all__ = [
    "BasicCredentialsProvider",
    "PropertiesFileCredentialsProvider",
    "TemporaryCredentialsProvider",
    "credentials_from_configuration",
    "DefaultS3ClientFactory",
    "S3ClientFactory",
    "SelfSignedS3ClientFactory",
    "get_client_factory",
]
