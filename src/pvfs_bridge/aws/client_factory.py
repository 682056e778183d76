"""S3 client construction from a bridge configuration.

The factory named by ``fs.s3a.s3.client.factory.impl`` decides how the
object-store client talks TLS. :class:`DefaultS3ClientFactory` verifies
certificates normally. :class:`SelfSignedS3ClientFactory` accepts
self-signed certificate chains and does not check hostnames; it is only
selected when a connection profile explicitly opts in.

The same factory also produces the keyword arguments the fsspec backend
passes to s3fs, so boto3 clients and s3fs filesystems built from one
configuration share their TLS posture.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union

import boto3
from botocore.config import Config

from pvfs_bridge.aws.credentials import credentials_from_configuration
from pvfs_bridge.config import bridge_config
from pvfs_bridge.configuration import Configuration
from pvfs_bridge.constants import (
    ENDPOINT,
    MAX_ERROR_RETRIES,
    PROXY_HOST,
    PROXY_PORT,
    S3_CLIENT_FACTORY_IMPL,
    SECURE_CONNECTIONS,
    SIGNING_ALGORITHM,
)
from pvfs_bridge.utils import load_class

logger = logging.getLogger(__name__)

# Signer names used in the configuration mapped to botocore signature versions
SIGNATURE_VERSIONS = {
    "S3SignerType": "s3",
    "AWSS3V4SignerType": "s3v4",
}


class S3ClientFactory:
    """Build S3 clients and s3fs options from a configuration."""

    def verify(self) -> Union[bool, str]:
        """TLS verification setting: True, False or a CA bundle path."""
        return True

    def use_ssl(self, conf: Configuration) -> bool:
        return conf.get_bool(SECURE_CONNECTIONS, default=True)

    def endpoint_url(self, conf: Configuration) -> Optional[str]:
        endpoint = conf.get(ENDPOINT)
        if not endpoint:
            return None
        if "://" in endpoint:
            return endpoint
        scheme = "https" if self.use_ssl(conf) else "http"
        return f"{scheme}://{endpoint}"

    def config_kwargs(self, conf: Configuration) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {"retries": {"max_attempts": conf.get_int(MAX_ERROR_RETRIES, 3)}}

        signer = conf.get(SIGNING_ALGORITHM)
        if signer:
            kwargs["signature_version"] = SIGNATURE_VERSIONS.get(signer, signer)

        proxy_host = conf.get(PROXY_HOST)
        if proxy_host:
            proxy_port = conf.get(PROXY_PORT)
            proxy = f"http://{proxy_host}:{proxy_port}" if proxy_port else f"http://{proxy_host}"
            kwargs["proxies"] = {"http": proxy, "https": proxy}
        return kwargs

    def client_kwargs(self, conf: Configuration) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {"verify": self.verify()}
        endpoint_url = self.endpoint_url(conf)
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        return kwargs

    def create_s3_client(self, conf: Configuration) -> Any:
        """Create a boto3 S3 client.

        Raises:
            MissingCredentialsError: When the configuration carries no credentials
        """
        credentials = credentials_from_configuration(conf)
        session = boto3.Session(
            aws_access_key_id=credentials.access_key,
            aws_secret_access_key=credentials.secret_key,
            aws_session_token=credentials.token,
        )
        return session.client(
            "s3",
            use_ssl=self.use_ssl(conf),
            config=Config(**self.config_kwargs(conf)),
            **self.client_kwargs(conf),
        )

    def s3fs_options(self, conf: Configuration) -> Dict[str, Any]:
        """Keyword arguments for an ``s3fs.S3FileSystem`` matching this client."""
        credentials = credentials_from_configuration(conf)
        options: Dict[str, Any] = {
            "key": credentials.access_key,
            "secret": credentials.secret_key,
            "use_ssl": self.use_ssl(conf),
            "client_kwargs": self.client_kwargs(conf),
            "config_kwargs": self.config_kwargs(conf),
        }
        if credentials.token:
            options["token"] = credentials.token
        return options


class DefaultS3ClientFactory(S3ClientFactory):
    """Client factory with standard certificate verification."""


class SelfSignedS3ClientFactory(S3ClientFactory):
    """Client factory that trusts self-signed certificates.

    With no CA bundle configured, botocore is told not to verify, which
    skips both chain and hostname checks. Setting
    ``PVFS_SELF_SIGNED_CA_BUNDLE`` verifies the chain against that bundle
    instead.
    """

    def verify(self) -> Union[bool, str]:
        ca_bundle = bridge_config.self_signed_ca_bundle
        if ca_bundle:
            return ca_bundle
        return False

    def _warn(self, conf: Configuration) -> None:
        logger.warning(
            f"Creating S3 client for {self.endpoint_url(conf) or 'default endpoint'} "
            "that accepts self-signed certificates"
        )

    def create_s3_client(self, conf: Configuration) -> Any:
        self._warn(conf)
        return super().create_s3_client(conf)

    def s3fs_options(self, conf: Configuration) -> Dict[str, Any]:
        self._warn(conf)
        return super().s3fs_options(conf)


def get_client_factory(conf: Configuration) -> S3ClientFactory:
    """Instantiate the client factory named by the configuration."""
    factory_path = conf.get(S3_CLIENT_FACTORY_IMPL)
    if not factory_path:
        return DefaultS3ClientFactory()
    factory_cls = load_class(factory_path)
    return factory_cls()
