"""Object-store credential providers.

Providers return :class:`botocore.credentials.Credentials` so the values
can be handed straight to boto3 sessions or s3fs.

- :class:`PropertiesFileCredentialsProvider` reads ``accessKey``,
  ``secretKey`` and optionally ``sessionToken`` from a properties file
- :class:`BasicCredentialsProvider` reads static keys from a configuration
- :class:`TemporaryCredentialsProvider` reads static keys plus the session
  token from a configuration and refuses to run without the token
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from botocore.credentials import Credentials
from dotenv import dotenv_values

from pvfs_bridge.configuration import Configuration
from pvfs_bridge.constants import ACCESS_KEY, AWS_CREDENTIALS_PROVIDER, SECRET_KEY, SESSION_TOKEN
from pvfs_bridge.exceptions import MissingCredentialsError
from pvfs_bridge.utils import load_class

logger = logging.getLogger(__name__)


class PropertiesFileCredentialsProvider:
    """Load credentials from a ``key=value`` properties file.

    The file is parsed with python-dotenv, so only ``=`` separates keys from
    values. The ``key: value`` and ``key value`` forms that Java properties
    files also allow are not recognised and leave the key undefined.
    """

    METHOD = "properties-file"

    def __init__(self, credentials_file_path: Optional[str]) -> None:
        if not credentials_file_path:
            raise MissingCredentialsError(
                "No access key / secret key configured and no credentials file path provided"
            )
        self.credentials_file_path = credentials_file_path

    def get_credentials(self) -> Credentials:
        """Read the credentials file.

        Raises:
            MissingCredentialsError: When the file is missing or lacks either key
        """
        path = os.path.expanduser(self.credentials_file_path)
        if not os.path.isfile(path):
            raise MissingCredentialsError(f"Credentials file does not exist: '{self.credentials_file_path}'")

        values = dotenv_values(path)
        access_key = (values.get("accessKey") or "").strip()
        secret_key = (values.get("secretKey") or "").strip()
        if not access_key or not secret_key:
            raise MissingCredentialsError(
                f"Credentials file '{self.credentials_file_path}' must define both accessKey and secretKey"
            )

        token = (values.get("sessionToken") or "").strip() or None
        logger.debug(f"Loaded credentials from {self.credentials_file_path} (session token: {token is not None})")
        return Credentials(access_key, secret_key, token=token, method=self.METHOD)


class BasicCredentialsProvider:
    """Static access key / secret key pair taken from a configuration."""

    METHOD = "configuration"

    def __init__(self, conf: Configuration) -> None:
        self.conf = conf

    def get_credentials(self) -> Credentials:
        access_key = self.conf.get(ACCESS_KEY, "")
        secret_key = self.conf.get(SECRET_KEY, "")
        if not access_key or not secret_key:
            raise MissingCredentialsError(f"Configuration must define {ACCESS_KEY} and {SECRET_KEY}")
        return Credentials(access_key, secret_key, method=self.METHOD)


class TemporaryCredentialsProvider(BasicCredentialsProvider):
    """Session credentials taken from a configuration."""

    METHOD = "temporary-configuration"

    def get_credentials(self) -> Credentials:
        basic = super().get_credentials()
        token = self.conf.get(SESSION_TOKEN, "")
        if not token:
            raise MissingCredentialsError(f"Session credentials require {SESSION_TOKEN}")
        return Credentials(basic.access_key, basic.secret_key, token=token, method=self.METHOD)


def credentials_from_configuration(conf: Configuration) -> Credentials:
    """Build credentials using the provider named by the configuration.

    Falls back to :class:`BasicCredentialsProvider` when no provider is set.
    """
    provider_path = conf.get(AWS_CREDENTIALS_PROVIDER)
    provider_cls = load_class(provider_path) if provider_path else BasicCredentialsProvider
    return provider_cls(conf).get_credentials()
