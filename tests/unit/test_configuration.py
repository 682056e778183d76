"""Tests for the configuration bag."""

from __future__ import annotations

import pytest

from pvfs_bridge.configuration import Configuration


class TestConfiguration:
    def test_values_are_stored_as_strings(self):
        conf = Configuration({"a": 1})
        conf["b"] = True

        assert conf["a"] == "1"
        assert conf.get("b") == "True"
        assert conf.get("missing") is None

    def test_none_values_are_rejected(self):
        with pytest.raises(ValueError, match="cannot be None"):
            Configuration().set("key", None)

    def test_get_bool_and_get_int(self):
        conf = Configuration({"flag": "TRUE", "off": "no", "retries": "5"})

        assert conf.get_bool("flag") is True
        assert conf.get_bool("off") is False
        assert conf.get_bool("missing", default=True) is True
        assert conf.get_int("retries", 3) == 5
        assert conf.get_int("missing", 3) == 3

    def test_copy_is_independent(self):
        conf = Configuration({"a": "1"})
        clone = conf.copy()
        clone["a"] = "2"

        assert conf["a"] == "1"
        assert clone.to_dict() == {"a": "2"}

    def test_fingerprint_ignores_insertion_order(self):
        first = Configuration({"a": "1", "b": "2"})
        second = Configuration({"b": "2", "a": "1"})

        assert first.fingerprint() == second.fingerprint()
        hash(first.fingerprint())

    def test_behaves_as_mutable_mapping(self):
        conf = Configuration({"a": "1", "b": "2"})
        del conf["a"]

        assert list(conf) == ["b"]
        assert len(conf) == 1
        assert "b" in conf
