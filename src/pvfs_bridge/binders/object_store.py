"""Binder for S3 object-store connections (types ``s3``, ``s3a``, ``s3n``).

The pvfs path carries the bucket as its first segment::

    pvfs://prod/bucket1/dir/file.csv  ->  s3a://bucket1/dir/file.csv

Static keys from the profile are used when both are present; otherwise
the keys (and an optional session token) come from the profile's
credentials properties file.
"""

from __future__ import annotations

import logging
from urllib.parse import SplitResult

from pvfs_bridge.aws.credentials import PropertiesFileCredentialsProvider
from pvfs_bridge.binders.base import ResolvedPair, set_s3a_defaults
from pvfs_bridge.config import bridge_config
from pvfs_bridge.configuration import Configuration
from pvfs_bridge.connections.details import ConnectionDetails
from pvfs_bridge.connections.properties import get_props_from_connection_details
from pvfs_bridge.constants import (
    ACCESS_KEY,
    AWS_CREDENTIALS_PROVIDER,
    BUFFER_DIR,
    S3A_SCHEME,
    SECRET_KEY,
    SESSION_TOKEN,
    TEMPORARY_CREDENTIALS_PROVIDER,
)
from pvfs_bridge.exceptions import MalformedObjectStorePathError

logger = logging.getLogger(__name__)


def split_bucket_path(uri: SplitResult) -> tuple[str, str]:
    """Split ``/<bucket>/<key...>`` into the bucket and ``/<key...>``.

    Trailing slashes are dropped, so ``/b/dir/`` yields ``("b", "/dir")``.

    Raises:
        MalformedObjectStorePathError: When the path has no bucket segment
    """
    segments = uri.path.split("/")
    while len(segments) > 1 and not segments[-1]:
        segments.pop()
    if len(segments) < 2 or not segments[1]:
        raise MalformedObjectStorePathError(uri.geturl())
    return segments[1], "/" + "/".join(segments[2:])


def bind_object_store(uri: SplitResult, conf: Configuration, details: ConnectionDetails) -> ResolvedPair:
    bucket, key_path = split_bucket_path(uri)
    props = get_props_from_connection_details(details)

    access_key = props.get("accessKey", "")
    secret_key = props.get("secretKey", "")
    session_token = props.get("sessionToken", "")

    if not access_key or not secret_key:
        provider = PropertiesFileCredentialsProvider(props.get("credentialsFilePath", ""))
        credentials = provider.get_credentials()
        access_key = credentials.access_key
        secret_key = credentials.secret_key
        if credentials.token:
            session_token = credentials.token

    conf.set(ACCESS_KEY, access_key)
    conf.set(SECRET_KEY, secret_key)
    if session_token:
        # Session tokens are only honoured by the temporary credentials provider
        conf.set(AWS_CREDENTIALS_PROVIDER, TEMPORARY_CREDENTIALS_PROVIDER)
        conf.set(SESSION_TOKEN, session_token)
    set_s3a_defaults(conf)
    conf.set(BUFFER_DIR, bridge_config.buffer_dir)

    logger.debug(f"Bound connection '{details.name}' to bucket '{bucket}' (session token: {bool(session_token)})")
    return ResolvedPair(f"{S3A_SCHEME}://{bucket}{key_path}", conf)
