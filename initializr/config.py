"""Conversion settings for initializr-core.

Settings that steer request conversion: the naming fallbacks used when a
request leaves its application or package name blank, the platform name
and minimum version enforced on explicit boot versions, and where the
metadata catalog is read from. Values come from a JSON file or from
``INITIALIZR_*`` environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from initializr.version import MalformedVersion, Version, VersionParser


class NamingConfig(BaseModel):
    """Rules used to derive application and package names."""

    application_name_suffix: str = Field(default="Application", min_length=1)
    fallback_application_name: str = Field(
        default="Application",
        min_length=1,
        description="Used when no valid application name can be derived",
    )
    invalid_application_names: list[str] = Field(
        default_factory=lambda: ["SpringApplication", "SpringBootApplication"]
    )
    default_package_name: str = Field(default="com.example.demo", min_length=1)
    invalid_package_names: list[str] = Field(
        default_factory=lambda: ["org.springframework"]
    )


class VersionConfig(BaseModel):
    """Platform version constraints."""

    platform_name: str = Field(default="Spring Boot", min_length=1)
    minimum_platform_version: str = Field(
        default="1.5.0", description="Oldest platform version a request may ask for"
    )

    @field_validator("minimum_platform_version")
    @classmethod
    def _check_parsable(cls, value: str) -> str:
        try:
            VersionParser().parse(value)
        except MalformedVersion as exc:
            raise ValueError(str(exc)) from exc
        return value

    @property
    def minimum_version(self) -> Version:
        return VersionParser().parse(self.minimum_platform_version)


class Config(BaseModel):
    """Global initializr-core configuration.

    Instances are typically created once by the CLI entry point (or by the
    request-handling layer embedding the converter) and passed to
    ``RequestToDescriptionConverter``.
    """

    metadata_path: Optional[Path] = Field(
        default=None, description="Metadata document loaded when none is given explicitly"
    )
    naming: NamingConfig = Field(default_factory=NamingConfig)
    versions: VersionConfig = Field(default_factory=VersionConfig)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            INITIALIZR_METADATA_PATH, INITIALIZR_PLATFORM_NAME,
            INITIALIZR_MIN_PLATFORM_VERSION, INITIALIZR_FALLBACK_APPLICATION_NAME,
            INITIALIZR_DEFAULT_PACKAGE_NAME.
        """
        naming_kwargs: dict[str, Any] = {}
        if os.environ.get("INITIALIZR_FALLBACK_APPLICATION_NAME"):
            naming_kwargs["fallback_application_name"] = os.environ[
                "INITIALIZR_FALLBACK_APPLICATION_NAME"
            ]
        if os.environ.get("INITIALIZR_DEFAULT_PACKAGE_NAME"):
            naming_kwargs["default_package_name"] = os.environ["INITIALIZR_DEFAULT_PACKAGE_NAME"]

        version_kwargs: dict[str, Any] = {}
        if os.environ.get("INITIALIZR_PLATFORM_NAME"):
            version_kwargs["platform_name"] = os.environ["INITIALIZR_PLATFORM_NAME"]
        if os.environ.get("INITIALIZR_MIN_PLATFORM_VERSION"):
            version_kwargs["minimum_platform_version"] = os.environ[
                "INITIALIZR_MIN_PLATFORM_VERSION"
            ]

        metadata_path = os.environ.get("INITIALIZR_METADATA_PATH")
        return cls(
            metadata_path=Path(metadata_path) if metadata_path else None,
            naming=NamingConfig(**naming_kwargs),
            versions=VersionConfig(**version_kwargs),
        )
