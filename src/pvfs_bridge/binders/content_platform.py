"""Binder for Hitachi Content Platform connections (type ``hcp``).

HCP exposes an S3-compatible endpoint per tenant, so the object-store
driver is reused with a platform-specific configuration:

- the access key is the base64 encoded username and the secret key is
  the hex MD5 digest of the password; both are fixed by the platform's
  S3 authentication scheme
- the endpoint is ``<tenant>.<host>[:<port>]``
- requests are signed with the legacy S3 signer
- the namespace becomes the bucket; the pvfs path is kept verbatim
"""

from __future__ import annotations

import base64
import hashlib
import logging
from urllib.parse import SplitResult

from pvfs_bridge.binders.base import ResolvedPair, set_s3a_defaults
from pvfs_bridge.config import bridge_config
from pvfs_bridge.configuration import Configuration
from pvfs_bridge.connections.details import ConnectionDetails
from pvfs_bridge.connections.properties import get_props_from_connection_details
from pvfs_bridge.constants import (
    ACCESS_KEY,
    ENDPOINT,
    HCP_SIGNER_TYPE,
    PROXY_HOST,
    PROXY_PORT,
    S3_CLIENT_FACTORY_IMPL,
    S3A_SCHEME,
    SECRET_KEY,
    SELF_SIGNED_CLIENT_FACTORY,
    SIGNING_ALGORITHM,
)

logger = logging.getLogger(__name__)


def hcp_access_key(username: str) -> str:
    return base64.b64encode(username.encode("utf-8")).decode("ascii")


def hcp_secret_key(password: str) -> str:
    return hashlib.md5(password.encode("utf-8")).hexdigest()


def hcp_endpoint(tenant: str, host: str, port: str = "") -> str:
    host_port = f"{host}:{port}" if port else host
    return f"{tenant}.{host_port}"


def bind_content_platform(uri: SplitResult, conf: Configuration, details: ConnectionDetails) -> ResolvedPair:
    props = get_props_from_connection_details(details)
    namespace = props.get("namespace", "")
    accept_self_signed = props.get("acceptSelfSignedCertificate", "").strip().lower() == "true"

    conf.set(ACCESS_KEY, hcp_access_key(props.get("username", "")))
    conf.set(SECRET_KEY, hcp_secret_key(props.get("password", "")))
    conf.set(ENDPOINT, hcp_endpoint(props.get("tenant", ""), props.get("host", ""), props.get("port", "")))
    conf.set(SIGNING_ALGORITHM, HCP_SIGNER_TYPE)
    set_s3a_defaults(conf)

    if accept_self_signed:
        conf.set(S3_CLIENT_FACTORY_IMPL, SELF_SIGNED_CLIENT_FACTORY)

    proxy_host = props.get("proxyHost", "")
    if proxy_host and bridge_config.hcp_forward_proxy:
        conf.set(PROXY_HOST, proxy_host)
        proxy_port = props.get("proxyPort", "")
        if proxy_port:
            conf.set(PROXY_PORT, proxy_port)

    logger.debug(
        f"Bound connection '{details.name}' to namespace '{namespace}' at {conf.get(ENDPOINT)} "
        f"(self-signed: {accept_self_signed})"
    )
    return ResolvedPair(f"{S3A_SCHEME}://{namespace}{uri.path}", conf)
