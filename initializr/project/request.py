"""Raw project generation request."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from initializr.metadata import InitializrMetadata


class ProjectRequest(BaseModel):
    """A user-supplied, possibly partial, project generation request.

    Field names accept both snake_case and the camelCase parameter names of
    the web API (``groupId``, ``bootVersion``, ``baseDir``, ...). Nothing is
    validated here beyond basic types; catalog checks happen during
    conversion.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    type: Optional[str] = Field(default=None, description="Project type identifier")
    language: Optional[str] = Field(default=None)
    packaging: Optional[str] = Field(default=None)
    boot_version: Optional[str] = Field(default=None, description="Spring Boot version")
    java_version: Optional[str] = Field(default=None)
    dependencies: list[str] = Field(default_factory=list)

    group_id: Optional[str] = Field(default=None)
    artifact_id: Optional[str] = Field(default=None)
    name: Optional[str] = Field(default=None)
    version: Optional[str] = Field(default=None)
    application_name: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    package_name: Optional[str] = Field(default=None)
    base_dir: Optional[str] = Field(default=None)

    def initialize(self, metadata: InitializrMetadata) -> "ProjectRequest":
        """Populate every field with the catalog defaults.

        Mirrors what the web form does before user parameters are bound:
        selections take the default entry of each capability and text fields
        take the catalog text defaults. ``application_name`` and
        ``base_dir`` are left unset. Returns ``self`` for chaining.
        """
        for field_name, capability in (
            ("type", metadata.types),
            ("language", metadata.languages),
            ("packaging", metadata.packagings),
            ("boot_version", metadata.boot_versions),
            ("java_version", metadata.java_versions),
        ):
            default = capability.default()
            setattr(self, field_name, default.id if default else None)

        self.group_id = metadata.group_id
        self.artifact_id = metadata.artifact_id
        self.name = metadata.name
        self.version = metadata.version
        self.description = metadata.description
        self.package_name = metadata.package_name
        return self
