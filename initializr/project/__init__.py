"""Project request conversion.

Turns a raw ``ProjectRequest`` into an immutable ``ProjectDescription``,
resolving every field against the metadata catalog.

Usage::

    from initializr.metadata import MetadataBuilder
    from initializr.project import ProjectRequest, RequestToDescriptionConverter

    metadata = MetadataBuilder.with_defaults().build()
    request = ProjectRequest().initialize(metadata)
    description = RequestToDescriptionConverter().convert(request, metadata)
"""

from initializr.project.builder import BUILD_SYSTEMS, DescriptionBuilder, build_system_for
from initializr.project.converter import RequestToDescriptionConverter, convert
from initializr.project.description import (
    BuildSystem,
    GradleBuildSystem,
    LanguageDescriptor,
    MavenBuildSystem,
    PackagingDescriptor,
    ProjectDescription,
    ResolvedDependency,
)
from initializr.project.errors import FieldCategory, InternalInconsistency, InvalidProjectRequest
from initializr.project.normalizer import RequestNormalizer
from initializr.project.request import ProjectRequest
from initializr.project.validator import RequestValidator, ResolvedFields

__all__ = [
    "BUILD_SYSTEMS",
    "BuildSystem",
    "DescriptionBuilder",
    "FieldCategory",
    "GradleBuildSystem",
    "InternalInconsistency",
    "InvalidProjectRequest",
    "LanguageDescriptor",
    "MavenBuildSystem",
    "PackagingDescriptor",
    "ProjectDescription",
    "ProjectRequest",
    "RequestNormalizer",
    "RequestToDescriptionConverter",
    "RequestValidator",
    "ResolvedDependency",
    "ResolvedFields",
    "build_system_for",
    "convert",
]
