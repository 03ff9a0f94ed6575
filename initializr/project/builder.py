"""Assemble validated request fields into a ``ProjectDescription``."""

from __future__ import annotations

from typing import Callable

from .description import (
    BuildSystem,
    GradleBuildSystem,
    LanguageDescriptor,
    MavenBuildSystem,
    PackagingDescriptor,
    ProjectDescription,
    ResolvedDependency,
)
from .errors import InternalInconsistency
from .request import ProjectRequest
from .validator import ResolvedFields


def _gradle(dialect: str | None) -> BuildSystem:
    return GradleBuildSystem(build_dialect=dialect) if dialect else GradleBuildSystem()


def _maven(dialect: str | None) -> BuildSystem:
    return MavenBuildSystem()


# Build tag -> build system factory. Closed set: adding a build system means
# adding an entry here.
BUILD_SYSTEMS: dict[str, Callable[[str | None], BuildSystem]] = {
    "gradle": _gradle,
    "maven": _maven,
}


def build_system_for(tag: str, dialect: str | None = None) -> BuildSystem:
    """Return the build system a type's ``build`` tag refers to.

    Raises:
        InternalInconsistency: If *tag* is not a supported build system.
    """
    factory = BUILD_SYSTEMS.get(tag)
    if factory is None:
        raise InternalInconsistency(
            f"Unsupported build system '{tag}' (known: {', '.join(sorted(BUILD_SYSTEMS))})"
        )
    return factory(dialect)


class DescriptionBuilder:
    """Maps a normalized request and its resolved fields 1:1 onto a description."""

    def build(self, request: ProjectRequest, resolved: ResolvedFields) -> ProjectDescription:
        if not request.application_name or not request.package_name:
            raise InternalInconsistency("Request must be normalized before building")
        return ProjectDescription(
            application_name=request.application_name,
            group_id=request.group_id,
            artifact_id=request.artifact_id,
            name=request.name,
            version=request.version,
            package_name=request.package_name,
            base_directory=request.base_dir,
            description=request.description,
            build_system=build_system_for(
                resolved.build_tag, resolved.type.tags.get("dialect")
            ),
            packaging=PackagingDescriptor(resolved.packaging.id),
            language=LanguageDescriptor(resolved.language.id, resolved.jvm_version),
            platform_version=resolved.platform_version,
            dependencies=tuple(
                ResolvedDependency(
                    id=dependency.id,
                    group_id=dependency.coordinates()[0],
                    artifact_id=dependency.coordinates()[1],
                    version=dependency.version,
                    scope=dependency.scope,
                )
                for dependency in resolved.dependencies
            ),
        )
