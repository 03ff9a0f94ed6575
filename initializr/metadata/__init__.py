"""Initializr metadata catalog.

Enumerates the legal values of every project request field and the defaults
used when a request omits one.

Usage::

    from initializr.metadata import MetadataBuilder, load_metadata

    metadata = MetadataBuilder.with_defaults().build()
    metadata = load_metadata("metadata.yml")
"""

from initializr.metadata.builder import MetadataBuilder
from initializr.metadata.holder import MetadataHolder
from initializr.metadata.loader import MetadataLoadError, load_metadata, parse_metadata
from initializr.metadata.models import (
    BootVersion,
    DependenciesCapability,
    Dependency,
    DependencyGroup,
    InitializrMetadata,
    JavaVersion,
    Language,
    MetadataElement,
    Packaging,
    SingleSelectCapability,
    Type,
)

__all__ = [
    "BootVersion",
    "DependenciesCapability",
    "Dependency",
    "DependencyGroup",
    "InitializrMetadata",
    "JavaVersion",
    "Language",
    "MetadataBuilder",
    "MetadataElement",
    "MetadataHolder",
    "MetadataLoadError",
    "Packaging",
    "SingleSelectCapability",
    "Type",
    "load_metadata",
    "parse_metadata",
]
