"""Convert a raw project request into a validated ``ProjectDescription``.

The pipeline is fixed: normalize, validate against the catalog, build. The
first failure propagates unchanged and no partial description is returned.
Conversion is synchronous and side-effect free; callers share a read-only
catalog snapshot and pass their own request instance.
"""

from __future__ import annotations

from typing import Optional

from initializr.config import Config
from initializr.metadata import InitializrMetadata

from .builder import DescriptionBuilder
from .description import ProjectDescription
from .normalizer import RequestNormalizer
from .request import ProjectRequest
from .validator import RequestValidator


class RequestToDescriptionConverter:
    """Orchestrates normalizer, validator and builder."""

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config or Config()
        self.normalizer = RequestNormalizer(self.config.naming)
        self.validator = RequestValidator(self.config.versions)
        self.builder = DescriptionBuilder()

    def convert(
        self, request: ProjectRequest, metadata: InitializrMetadata
    ) -> ProjectDescription:
        """Convert *request* using the *metadata* snapshot.

        Raises:
            InvalidProjectRequest: If a field is unknown or invalid.
            InternalInconsistency: If the catalog is malformed.
        """
        normalized = self.normalizer.normalize(request)
        resolved = self.validator.validate(normalized, metadata)
        return self.builder.build(normalized, resolved)


_default_converter: Optional[RequestToDescriptionConverter] = None


def convert(request: ProjectRequest, metadata: InitializrMetadata) -> ProjectDescription:
    """Convert with a converter using the default configuration."""
    global _default_converter
    if _default_converter is None:
        _default_converter = RequestToDescriptionConverter()
    return _default_converter.convert(request, metadata)
