"""Tests for Library Catalog configuration.

These tests cover:
1. Default values
2. Environment variable loading
3. Validation of enumerated and patterned settings
4. The cached configuration instance
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from library_catalog.config import CatalogConfig, get_config, reset_config


class TestCatalogConfig:
    """Test configuration behavior."""

    def test_default_configuration(self):
        config = CatalogConfig(_env_file=None)

        assert config.server_name == "library-catalog"
        assert config.server_version == "0.1.0"
        assert config.transport == "stdio"
        assert config.debug is False
        assert config.log_level == "INFO"
        assert config.id_strategy == "sequential"
        assert config.is_development is False

    def test_environment_variable_loading(self):
        env_vars = {
            "LIBRARY_CATALOG_SERVER_NAME": "test-catalog",
            "LIBRARY_CATALOG_SERVER_VERSION": "2.0.0",
            "LIBRARY_CATALOG_DEBUG": "true",
            "LIBRARY_CATALOG_LOG_LEVEL": "DEBUG",
            "LIBRARY_CATALOG_ID_STRATEGY": "legacy",
        }

        with patch.dict(os.environ, env_vars):
            config = CatalogConfig(_env_file=None)

        assert config.server_name == "test-catalog"
        assert config.server_version == "2.0.0"
        assert config.debug is True
        assert config.log_level == "DEBUG"
        assert config.id_strategy == "legacy"
        assert config.is_development is True

    def test_enumerated_settings_ignore_case(self):
        config = CatalogConfig(_env_file=None, log_level="warning", id_strategy=" LEGACY ")

        assert config.log_level == "WARNING"
        assert config.id_strategy == "legacy"

    @pytest.mark.parametrize("level", ["TRACE", "verbose", ""])
    def test_invalid_log_level(self, level):
        with pytest.raises(ValidationError):
            CatalogConfig(_env_file=None, log_level=level)

    def test_invalid_id_strategy(self):
        with pytest.raises(ValidationError):
            CatalogConfig(_env_file=None, id_strategy="random")

    def test_server_name_validation(self):
        for name in ["library-catalog", "cat-123", "abc"]:
            assert CatalogConfig(_env_file=None, server_name=name).server_name == name

        for name in ["Library_Catalog", "library catalog", "ab", "a" * 51]:
            with pytest.raises(ValidationError):
                CatalogConfig(_env_file=None, server_name=name)

    def test_version_validation(self):
        for version in ["1.0.0", "0.1.0", "1.0.0-beta.1"]:
            assert CatalogConfig(_env_file=None, server_version=version).server_version == version

        for version in ["1.0", "v1.0.0", "latest"]:
            with pytest.raises(ValidationError):
                CatalogConfig(_env_file=None, server_version=version)

    def test_only_stdio_transport_is_supported(self):
        with pytest.raises(ValidationError):
            CatalogConfig(_env_file=None, transport="streamable_http")

    def test_server_info(self):
        config = CatalogConfig(_env_file=None, server_name="my-catalog", server_version="1.2.3")

        assert config.server_info == {
            "name": "my-catalog",
            "version": "1.2.3",
            "transport": "stdio",
        }


class TestConfigSingleton:
    """Test the cached configuration instance."""

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_reset_config_reloads_environment(self):
        first = get_config()

        with patch.dict(os.environ, {"LIBRARY_CATALOG_ID_STRATEGY": "legacy"}):
            assert get_config() is first
            reset_config()
            second = get_config()

        assert second is not first
        assert second.id_strategy == "legacy"
