"""initializr-core: validation and normalization of project generation requests.

Usage::

    from initializr import MetadataBuilder, ProjectRequest, convert

    metadata = MetadataBuilder.with_defaults().build()
    description = convert(ProjectRequest(artifact_id="demo"), metadata)
    print(description.application_name)  # DemoApplication
"""

from initializr.metadata import InitializrMetadata, MetadataBuilder, load_metadata
from initializr.project import (
    InternalInconsistency,
    InvalidProjectRequest,
    ProjectDescription,
    ProjectRequest,
    RequestToDescriptionConverter,
    convert,
)
from initializr.version import Version

__all__ = [
    "InitializrMetadata",
    "InternalInconsistency",
    "InvalidProjectRequest",
    "MetadataBuilder",
    "ProjectDescription",
    "ProjectRequest",
    "RequestToDescriptionConverter",
    "Version",
    "convert",
    "load_metadata",
]
