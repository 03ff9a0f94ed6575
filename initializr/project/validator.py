"""Check a normalized request against the metadata catalog.

Checks run in a fixed order and stop at the first violation, so the same
request always reports the same error:

1. type exists
2. type declares a build system (``build`` tag)
3. explicit Spring Boot version parses and meets the minimum
4. packaging exists
5. language exists
6. every dependency exists
7. every dependency supports the platform version
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TypeVar

from initializr.config import VersionConfig
from initializr.metadata import (
    Dependency,
    InitializrMetadata,
    Language,
    MetadataElement,
    Packaging,
    SingleSelectCapability,
    Type,
)
from initializr.version import MalformedVersion, Version, VersionParser

from .errors import FieldCategory, InternalInconsistency, InvalidProjectRequest
from .request import ProjectRequest

METADATA_HINT = "check project metadata"

E = TypeVar("E", bound=MetadataElement)


@dataclass(frozen=True)
class ResolvedFields:
    """Catalog entries a request resolved to."""

    type: Type
    build_tag: str
    platform_version: Version
    packaging: Packaging
    language: Language
    jvm_version: str
    dependencies: tuple[Dependency, ...]


class RequestValidator:
    """Resolves each request field against the catalog, failing fast."""

    def __init__(self, versions: Optional[VersionConfig] = None) -> None:
        self.versions = versions or VersionConfig()
        self._parser = VersionParser()

    def validate(self, request: ProjectRequest, metadata: InitializrMetadata) -> ResolvedFields:
        """Resolve *request* or raise :class:`InvalidProjectRequest`.

        Raises:
            InvalidProjectRequest: On the first field that fails its check.
            InternalInconsistency: If the catalog lacks a default needed for
                an omitted field.
        """
        type_ = self._resolve(metadata.types, request.type, FieldCategory.TYPE)
        build_tag = type_.build_tag
        if not build_tag:
            raise InvalidProjectRequest(
                FieldCategory.BUILD_TAG,
                f"Invalid type '{type_.id}' (missing build tag) {METADATA_HINT}",
            )

        platform_version = self._resolve_platform_version(request, metadata)
        packaging = self._resolve(metadata.packagings, request.packaging, FieldCategory.PACKAGING)
        language = self._resolve(metadata.languages, request.language, FieldCategory.LANGUAGE)
        dependencies = self._resolve_dependencies(request, metadata)
        self._check_compatibility(dependencies, platform_version)

        return ResolvedFields(
            type=type_,
            build_tag=build_tag,
            platform_version=platform_version,
            packaging=packaging,
            language=language,
            jvm_version=self._resolve_jvm_version(request, metadata),
            dependencies=dependencies,
        )

    # -- Individual checks -------------------------------------------------

    def _resolve(
        self,
        capability: SingleSelectCapability[E],
        id: Optional[str],
        category: FieldCategory,
    ) -> E:
        """Look *id* up in *capability*, using its flagged default when *id* is blank.

        Only an entry flagged as default qualifies; a capability without one
        cannot serve an omitted field.
        """
        if not id:
            default = capability.default()
            if default is None:
                raise InternalInconsistency(f"Metadata defines no default {capability.id}")
            return default
        element = capability.get(id)
        if element is None:
            raise InvalidProjectRequest(
                category, f"Unknown {category.value} '{id}' {METADATA_HINT}"
            )
        return element

    def _resolve_platform_version(
        self, request: ProjectRequest, metadata: InitializrMetadata
    ) -> Version:
        raw = (request.boot_version or "").strip()
        if not raw:
            default = metadata.boot_versions.default()
            if default is None:
                raise InternalInconsistency("Metadata defines no default bootVersion")
            try:
                return self._parser.parse(default.id)
            except MalformedVersion as exc:
                raise InternalInconsistency(
                    f"Default bootVersion '{default.id}' is not a valid version"
                ) from exc

        version = self._parser.safe_parse(raw)
        minimum = self.versions.minimum_version
        if version is None or version < minimum:
            raise InvalidProjectRequest(
                FieldCategory.VERSION,
                f"Invalid {self.versions.platform_name} version {raw} "
                f"must be {self.versions.minimum_platform_version} or higher",
            )
        return version

    def _resolve_dependencies(
        self, request: ProjectRequest, metadata: InitializrMetadata
    ) -> tuple[Dependency, ...]:
        resolved: dict[str, Dependency] = {}
        for id in request.dependencies:
            dependency = metadata.dependencies.get(id)
            if dependency is None:
                raise InvalidProjectRequest(
                    FieldCategory.DEPENDENCY, f"Unknown dependency '{id}' {METADATA_HINT}"
                )
            resolved.setdefault(dependency.id, dependency)
        return tuple(resolved.values())

    def _check_compatibility(
        self, dependencies: tuple[Dependency, ...], platform_version: Version
    ) -> None:
        for dependency in dependencies:
            version_range = dependency.range()
            if version_range is not None and not version_range.match(platform_version):
                raise InvalidProjectRequest(
                    FieldCategory.COMPATIBILITY,
                    f"Dependency '{dependency.id}' is not compatible with "
                    f"{self.versions.platform_name} {platform_version}",
                )

    def _resolve_jvm_version(self, request: ProjectRequest, metadata: InitializrMetadata) -> str:
        if request.java_version:
            return request.java_version
        default = metadata.java_versions.default()
        if default is None:
            raise InternalInconsistency("Metadata defines no default javaVersion")
        return default.id
