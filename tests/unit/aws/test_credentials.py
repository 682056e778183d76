"""Tests for object-store credential providers."""

from __future__ import annotations

import pytest

from pvfs_bridge.aws.credentials import (
    BasicCredentialsProvider,
    PropertiesFileCredentialsProvider,
    TemporaryCredentialsProvider,
    credentials_from_configuration,
)
from pvfs_bridge.configuration import Configuration
from pvfs_bridge.constants import (
    ACCESS_KEY,
    AWS_CREDENTIALS_PROVIDER,
    SECRET_KEY,
    SESSION_TOKEN,
    TEMPORARY_CREDENTIALS_PROVIDER,
)
from pvfs_bridge.exceptions import MissingCredentialsError


class TestPropertiesFileCredentialsProvider:
    def test_reads_static_keys(self, tmp_path):
        path = tmp_path / "c.props"
        path.write_text("# credentials\naccessKey=AK2\nsecretKey=SK2\n", encoding="utf-8")

        credentials = PropertiesFileCredentialsProvider(str(path)).get_credentials()

        assert credentials.access_key == "AK2"
        assert credentials.secret_key == "SK2"
        assert credentials.token is None

    def test_reads_session_token(self, tmp_path):
        path = tmp_path / "c.props"
        path.write_text("accessKey=AK2\nsecretKey=SK2\nsessionToken=TK2\n", encoding="utf-8")

        credentials = PropertiesFileCredentialsProvider(str(path)).get_credentials()

        assert credentials.token == "TK2"

    def test_empty_path_is_missing_credentials(self):
        with pytest.raises(MissingCredentialsError) as exc_info:
            PropertiesFileCredentialsProvider("")

        assert exc_info.value.error_code == "MISSING_CREDENTIALS"

    def test_absent_file_is_missing_credentials(self, tmp_path):
        provider = PropertiesFileCredentialsProvider(str(tmp_path / "absent.props"))

        with pytest.raises(MissingCredentialsError, match="does not exist"):
            provider.get_credentials()

    def test_file_without_secret_is_missing_credentials(self, tmp_path):
        path = tmp_path / "c.props"
        path.write_text("accessKey=AK2\n", encoding="utf-8")

        with pytest.raises(MissingCredentialsError, match="accessKey and secretKey"):
            PropertiesFileCredentialsProvider(str(path)).get_credentials()

    def test_colon_separated_keys_are_not_read(self, tmp_path):
        path = tmp_path / "c.props"
        path.write_text("accessKey: AK2\nsecretKey: SK2\n", encoding="utf-8")

        with pytest.raises(MissingCredentialsError, match="accessKey and secretKey"):
            PropertiesFileCredentialsProvider(str(path)).get_credentials()


class TestConfigurationProviders:
    def test_basic_provider_reads_keys(self):
        conf = Configuration({ACCESS_KEY: "AK", SECRET_KEY: "SK"})

        credentials = BasicCredentialsProvider(conf).get_credentials()

        assert (credentials.access_key, credentials.secret_key, credentials.token) == ("AK", "SK", None)

    def test_basic_provider_requires_keys(self):
        with pytest.raises(MissingCredentialsError):
            BasicCredentialsProvider(Configuration()).get_credentials()

    def test_temporary_provider_requires_token(self):
        conf = Configuration({ACCESS_KEY: "AK", SECRET_KEY: "SK"})

        with pytest.raises(MissingCredentialsError, match=SESSION_TOKEN):
            TemporaryCredentialsProvider(conf).get_credentials()

    def test_configured_provider_is_loaded_by_name(self):
        conf = Configuration(
            {
                ACCESS_KEY: "AK",
                SECRET_KEY: "SK",
                SESSION_TOKEN: "TK",
                AWS_CREDENTIALS_PROVIDER: TEMPORARY_CREDENTIALS_PROVIDER,
            }
        )

        credentials = credentials_from_configuration(conf)

        assert credentials.token == "TK"
        assert credentials.method == TemporaryCredentialsProvider.METHOD

    def test_basic_provider_is_the_fallback(self):
        conf = Configuration({ACCESS_KEY: "AK", SECRET_KEY: "SK", SESSION_TOKEN: "ignored"})

        credentials = credentials_from_configuration(conf)

        assert credentials.token is None
        assert credentials.method == BasicCredentialsProvider.METHOD
