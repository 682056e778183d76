"""Tests for the Hitachi Content Platform binder."""

from __future__ import annotations

import base64
import hashlib
from urllib.parse import urlsplit

from pvfs_bridge.binders.content_platform import (
    bind_content_platform,
    hcp_access_key,
    hcp_endpoint,
    hcp_secret_key,
)
from pvfs_bridge.configuration import Configuration
from pvfs_bridge.connections.details import HCPDetails
from pvfs_bridge.constants import (
    ACCESS_KEY,
    ENDPOINT,
    MAX_ERROR_RETRIES,
    PROXY_HOST,
    PROXY_PORT,
    S3_CLIENT_FACTORY_IMPL,
    S3A_IMPL,
    SECRET_KEY,
    SECURE_CONNECTIONS,
    SELF_SIGNED_CLIENT_FACTORY,
    SIGNING_ALGORITHM,
)


def _bind(uri: str, details: HCPDetails):
    return bind_content_platform(urlsplit(uri), Configuration(), details)


class TestCredentialDerivation:
    def test_access_key_is_base64_username(self):
        assert hcp_access_key("u") == base64.b64encode(b"u").decode()
        assert hcp_access_key("u") == "dQ=="

    def test_secret_key_is_md5_hex_password(self):
        assert hcp_secret_key("p") == hashlib.md5(b"p").hexdigest()

    def test_endpoint_with_and_without_port(self):
        assert hcp_endpoint("t", "h.example", "443") == "t.h.example:443"
        assert hcp_endpoint("t", "h.example") == "t.h.example"


class TestBindContentPlatform:
    def test_full_profile(self, hcp_details):
        pair = _bind("pvfs://hcp1/a/b", hcp_details)

        assert pair.uri == "s3a://ns/a/b"
        assert pair.conf[ENDPOINT] == "t.h.example:443"
        assert pair.conf[ACCESS_KEY] == base64.b64encode(b"u").decode()
        assert pair.conf[SECRET_KEY] == hashlib.md5(b"p").hexdigest()
        assert pair.conf[SIGNING_ALGORITHM] == "S3SignerType"
        assert pair.conf[S3A_IMPL] == "s3fs.S3FileSystem"
        assert pair.conf[SECURE_CONNECTIONS] == "true"
        assert pair.conf[MAX_ERROR_RETRIES] == "3"
        assert pair.conf[S3_CLIENT_FACTORY_IMPL] == SELF_SIGNED_CLIENT_FACTORY

    def test_no_port_no_self_signed(self):
        details = HCPDetails(name="h", namespace="ns", tenant="t", host="h.example", username="u", password="p")

        pair = _bind("pvfs://h/x/y", details)

        assert pair.uri == "s3a://ns/x/y"
        assert pair.conf[ENDPOINT] == "t.h.example"
        assert S3_CLIENT_FACTORY_IMPL not in pair.conf

    def test_path_is_kept_verbatim(self, hcp_details):
        assert _bind("pvfs://hcp1/deep/dir/file.txt", hcp_details).uri == "s3a://ns/deep/dir/file.txt"

    def test_proxy_not_forwarded_by_default(self):
        details = HCPDetails(name="h", namespace="ns", proxyHost="proxy", proxyPort="8080")

        conf = _bind("pvfs://h/x", details).conf

        assert PROXY_HOST not in conf
        assert PROXY_PORT not in conf

    def test_proxy_forwarded_when_enabled(self, monkeypatch):
        monkeypatch.setenv("PVFS_HCP_FORWARD_PROXY", "true")
        details = HCPDetails(name="h", namespace="ns", proxyHost="proxy", proxyPort="8080")

        conf = _bind("pvfs://h/x", details).conf

        assert conf[PROXY_HOST] == "proxy"
        assert conf[PROXY_PORT] == "8080"
