"""Unit tests for Config and related Pydantic models (initializr.config).

Tests cover:
- NamingConfig and VersionConfig defaults and validation
- Config save/load round trip
- Config.from_env
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from initializr.config import Config, NamingConfig, VersionConfig
from initializr.version import Version


# ---------------------------------------------------------------------------
# NamingConfig
# ---------------------------------------------------------------------------


class TestNamingConfig:
    @pytest.mark.unit
    def test_defaults(self):
        naming = NamingConfig()
        assert naming.application_name_suffix == "Application"
        assert naming.fallback_application_name == "Application"
        assert "SpringBootApplication" in naming.invalid_application_names
        assert naming.default_package_name == "com.example.demo"
        assert naming.invalid_package_names == ["org.springframework"]

    @pytest.mark.unit
    def test_empty_fallback_rejected(self):
        with pytest.raises(ValidationError):
            NamingConfig(fallback_application_name="")


# ---------------------------------------------------------------------------
# VersionConfig
# ---------------------------------------------------------------------------


class TestVersionConfig:
    @pytest.mark.unit
    def test_defaults(self):
        versions = VersionConfig()
        assert versions.platform_name == "Spring Boot"
        assert versions.minimum_platform_version == "1.5.0"
        assert versions.minimum_version == Version(1, 5, 0)

    @pytest.mark.unit
    def test_malformed_minimum_rejected(self):
        with pytest.raises(ValidationError):
            VersionConfig(minimum_platform_version="one.five")


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


class TestConfig:
    @pytest.mark.unit
    def test_defaults(self):
        config = Config()
        assert config.metadata_path is None
        assert isinstance(config.naming, NamingConfig)
        assert isinstance(config.versions, VersionConfig)

    @pytest.mark.unit
    def test_save_and_load(self, tmp_path: Path):
        config = Config(
            metadata_path=Path("metadata.yml"),
            versions=VersionConfig(minimum_platform_version="2.0.0"),
        )
        target = config.save(tmp_path / "nested" / "config.json")
        assert target.exists()
        loaded = Config.load(target)
        assert loaded == config

    @pytest.mark.unit
    def test_from_env_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = Config.from_env()
        assert config == Config()

    @pytest.mark.unit
    def test_from_env_overrides(self):
        env = {
            "INITIALIZR_METADATA_PATH": "/etc/initializr/metadata.yml",
            "INITIALIZR_PLATFORM_NAME": "Platform",
            "INITIALIZR_MIN_PLATFORM_VERSION": "2.0.0",
            "INITIALIZR_FALLBACK_APPLICATION_NAME": "Main",
            "INITIALIZR_DEFAULT_PACKAGE_NAME": "org.acme",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()
        assert config.metadata_path == Path("/etc/initializr/metadata.yml")
        assert config.versions.platform_name == "Platform"
        assert config.versions.minimum_platform_version == "2.0.0"
        assert config.naming.fallback_application_name == "Main"
        assert config.naming.default_package_name == "org.acme"

    @pytest.mark.unit
    def test_from_env_invalid_minimum(self):
        with patch.dict(os.environ, {"INITIALIZR_MIN_PLATFORM_VERSION": "latest"}, clear=True):
            with pytest.raises(ValidationError):
                Config.from_env()
