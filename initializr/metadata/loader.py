"""Load metadata catalogs from JSON or YAML documents.

Documents use the camelCase keys of the public Initializr metadata format.
A document may be wrapped in a top-level ``initializr`` key, as found in
Spring Boot ``application.yml`` files.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import InitializrMetadata

_YAML_SUFFIXES = {".yml", ".yaml"}


class MetadataLoadError(Exception):
    """Raised when a metadata document cannot be read or is invalid."""

    def __init__(self, message: str, source: str = "") -> None:
        self.source = source
        super().__init__(message)


def parse_metadata(data: Any, source: str = "<memory>") -> InitializrMetadata:
    """Validate an already-decoded document.

    Args:
        data: Decoded document (mapping at the top level).
        source: Where the document came from, used in error messages.

    Raises:
        MetadataLoadError: If the document is not a mapping or fails validation.
    """
    if not isinstance(data, dict):
        raise MetadataLoadError(
            f"Metadata document {source} must be a mapping, got {type(data).__name__}",
            source=source,
        )
    if set(data) == {"initializr"} and isinstance(data["initializr"], dict):
        data = data["initializr"]
    try:
        return InitializrMetadata.model_validate(data)
    except ValidationError as exc:
        raise MetadataLoadError(f"Invalid metadata in {source}: {exc}", source=source) from exc


def load_metadata(path: str | Path) -> InitializrMetadata:
    """Read and validate a metadata document from disk.

    The format is chosen from the file suffix: ``.yml``/``.yaml`` are read as
    YAML, anything else as JSON.

    Raises:
        MetadataLoadError: If the file is missing, unparsable or invalid.
    """
    file_path = Path(path)
    try:
        raw = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise MetadataLoadError(
            f"Metadata file not readable: {file_path} ({exc})", source=str(file_path)
        ) from exc

    try:
        if file_path.suffix.lower() in _YAML_SUFFIXES:
            data = yaml.safe_load(raw)
        else:
            data = json.loads(raw)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise MetadataLoadError(
            f"Metadata file {file_path} is not well formed: {exc}", source=str(file_path)
        ) from exc

    return parse_metadata(data, source=str(file_path))
