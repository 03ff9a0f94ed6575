"""Immutable description of a validated project.

A ``ProjectDescription`` is the only output of a conversion. Every value in
it was either drawn from the metadata catalog or explicitly defaulted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from initializr.version import Version


# ---------------------------------------------------------------------------
# Build systems
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BuildSystem:
    """Base class of the supported build systems."""

    id: str = ""

    @property
    def dialect(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class MavenBuildSystem(BuildSystem):
    id: str = "maven"


@dataclass(frozen=True)
class GradleBuildSystem(BuildSystem):
    """Gradle, using either the Groovy or the Kotlin DSL."""

    id: str = "gradle"
    build_dialect: str = "groovy"

    @property
    def dialect(self) -> Optional[str]:
        return self.build_dialect


# ---------------------------------------------------------------------------
# Resolved descriptors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PackagingDescriptor:
    id: str


@dataclass(frozen=True)
class LanguageDescriptor:
    """A language together with the JVM version the project targets."""

    id: str
    jvm_version: str


@dataclass(frozen=True)
class ResolvedDependency:
    """A catalog dependency resolved to its build coordinates."""

    id: str
    group_id: str
    artifact_id: str
    version: Optional[str] = None
    scope: str = "compile"


# ---------------------------------------------------------------------------
# Project description
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ProjectDescription:
    """Validated, normalized description of the project to generate."""

    application_name: str
    group_id: Optional[str]
    artifact_id: Optional[str]
    name: Optional[str]
    version: Optional[str]
    package_name: str
    base_directory: Optional[str]
    description: Optional[str]
    build_system: BuildSystem
    packaging: PackagingDescriptor
    language: LanguageDescriptor
    platform_version: Version
    dependencies: tuple[ResolvedDependency, ...] = field(default_factory=tuple)

    @property
    def dependency_ids(self) -> list[str]:
        return [dependency.id for dependency in self.dependencies]

    def get_dependency(self, id: str) -> Optional[ResolvedDependency]:
        for dependency in self.dependencies:
            if dependency.id == id:
                return dependency
        return None

    def to_dict(self) -> dict[str, Any]:
        """Plain, JSON-serialisable representation."""
        return {
            "applicationName": self.application_name,
            "groupId": self.group_id,
            "artifactId": self.artifact_id,
            "name": self.name,
            "version": self.version,
            "packageName": self.package_name,
            "baseDirectory": self.base_directory,
            "description": self.description,
            "buildSystem": {"id": self.build_system.id, "dialect": self.build_system.dialect},
            "packaging": self.packaging.id,
            "language": {"id": self.language.id, "jvmVersion": self.language.jvm_version},
            "platformVersion": str(self.platform_version),
            "dependencies": [
                {
                    "id": dependency.id,
                    "groupId": dependency.group_id,
                    "artifactId": dependency.artifact_id,
                    "version": dependency.version,
                    "scope": dependency.scope,
                }
                for dependency in self.dependencies
            ],
        }

    def summary(self) -> dict[str, str]:
        """Human-readable key/value pairs for console display."""
        build = self.build_system.id
        if self.build_system.dialect:
            build = f"{build} ({self.build_system.dialect})"
        return {
            "Application": self.application_name,
            "Group": self.group_id or "-",
            "Artifact": self.artifact_id or "-",
            "Package": self.package_name,
            "Build system": build,
            "Packaging": self.packaging.id,
            "Language": f"{self.language.id} {self.language.jvm_version}",
            "Platform version": str(self.platform_version),
            "Dependencies": ", ".join(self.dependency_ids) or "-",
        }
