"""
Tests for configuration and shared utilities.
"""

import json

import pytest

from grantstore.common.utils import generate_secure_handle, hash_string, is_missing
from grantstore.core.config import StoreConfig
from grantstore.grants import DefaultHandleGenerationService


class TestStoreConfig:
    """Test store configuration"""

    def test_defaults(self):
        config = StoreConfig()

        assert config.backend == "memory"
        assert config.require_filter_predicate is False
        assert config.handle_length == 32
        assert config.validate()

    def test_from_env(self, monkeypatch):
        """Test configuration is read from GRANTSTORE_ variables"""
        monkeypatch.setenv("GRANTSTORE_REQUIRE_FILTER_PREDICATE", "true")
        monkeypatch.setenv("GRANTSTORE_HANDLE_LENGTH", "48")

        config = StoreConfig.from_env()

        assert config.backend == "memory"
        assert config.require_filter_predicate is True
        assert config.handle_length == 48

    def test_from_env_bad_int_falls_back(self, monkeypatch):
        monkeypatch.setenv("GRANTSTORE_HANDLE_LENGTH", "lots")

        assert StoreConfig.from_env().handle_length == 32

    def test_from_json_file(self, tmp_path):
        path = tmp_path / "grantstore.json"
        path.write_text(json.dumps({"require-filter-predicate": True, "unknown": 1}))

        config = StoreConfig.from_file(str(path))

        assert config.require_filter_predicate is True

    def test_from_yaml_file(self, tmp_path):
        path = tmp_path / "grantstore.yaml"
        path.write_text("backend: memory\nhandle_length: 64\n")

        config = StoreConfig.from_file(str(path))

        assert config.handle_length == 64

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            StoreConfig.from_file(str(tmp_path / "absent.json"))

    def test_unsupported_file(self, tmp_path):
        path = tmp_path / "grantstore.ini"
        path.write_text("[grantstore]\n")

        with pytest.raises(ValueError):
            StoreConfig.from_file(str(path))

    @pytest.mark.parametrize("kwargs", [
        {"backend": ""},
        {"handle_length": 8},
        {"handle_length": "32"},
        {"require_filter_predicate": "yes"},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            StoreConfig(**kwargs).validate()

    def test_to_dict(self):
        assert StoreConfig().to_dict() == {
            'backend': 'memory',
            'require_filter_predicate': False,
            'handle_length': 32,
        }


class TestUtilities:
    """Test hashing and handle generation"""

    def test_hash_string_known_value(self):
        """Test the base64 SHA-256 digest of a known input"""
        assert hash_string("") == "47DEQpj8HBSa+/TImW+5JCeuQeRkm5NMpJWZG3hSuFU="
        assert hash_string("", output="hex") == (
            "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
        )

    def test_hash_string_unsupported(self):
        with pytest.raises(ValueError):
            hash_string("x", algorithm="md5")
        with pytest.raises(ValueError):
            hash_string("x", output="base32")

    def test_generate_secure_handle(self):
        handle = generate_secure_handle()

        assert len(handle) == 64
        assert handle == handle.upper()
        assert ":" not in handle
        assert generate_secure_handle() != handle

    def test_generate_secure_handle_length(self):
        assert len(generate_secure_handle(16)) == 32
        with pytest.raises(ValueError):
            generate_secure_handle(0)

    @pytest.mark.asyncio
    async def test_default_handle_generation_service(self):
        service = DefaultHandleGenerationService(length=20)

        assert len(await service.generate()) == 40

    @pytest.mark.parametrize("value,expected", [
        (None, True), ("", True), ("  ", True), ("x", False),
    ])
    def test_is_missing(self, value, expected):
        assert is_missing(value) is expected
