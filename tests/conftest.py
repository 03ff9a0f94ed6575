"""Shared pytest fixtures for the initializr-core test suite.

Provides reusable fixtures for:
- The standard metadata catalog and catalog builders
- Initialized project requests
- Converters with default configuration
- Metadata documents written to temporary files
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
import yaml

from initializr.config import Config
from initializr.metadata import InitializrMetadata, MetadataBuilder
from initializr.project import ProjectRequest, RequestToDescriptionConverter


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

@pytest.fixture
def metadata() -> InitializrMetadata:
    """Standard catalog: maven/gradle types, jar/war, java/groovy/kotlin, Boot 2.1.1 default."""
    return (
        MetadataBuilder.with_defaults()
        .add_dependency_group("Web", "web", "security")
        .add_dependency_group("SQL", "data-jpa", "jdbc")
        .build()
    )


@pytest.fixture
def metadata_document() -> dict[str, Any]:
    """A metadata document in the public camelCase format."""
    return {
        "types": [
            {"id": "maven-project", "name": "Maven Project", "default": True,
             "tags": {"build": "maven", "format": "project"}},
            {"id": "gradle-project", "name": "Gradle Project",
             "tags": {"build": "gradle", "format": "project"}},
        ],
        "packagings": [
            {"id": "jar", "name": "Jar", "default": True},
            {"id": "war", "name": "War"},
        ],
        "languages": [
            {"id": "java", "name": "Java", "default": True},
            {"id": "kotlin", "name": "Kotlin"},
        ],
        "javaVersions": [
            {"id": "11", "name": "11", "default": True},
            {"id": "1.8", "name": "8"},
        ],
        "bootVersions": [
            {"id": "2.1.1.RELEASE", "name": "2.1.1", "default": True},
            {"id": "2.0.7.RELEASE", "name": "2.0.7"},
        ],
        "dependencies": [
            {
                "name": "Web",
                "content": [
                    {"id": "web", "name": "Spring Web"},
                    {
                        "id": "webflux",
                        "name": "Spring Reactive Web",
                        "compatibilityRange": "2.0.0.RELEASE",
                    },
                ],
            },
            {
                "name": "Cloud",
                "content": [
                    {
                        "id": "cloud-legacy",
                        "name": "Legacy Cloud",
                        "groupId": "org.springframework.cloud",
                        "artifactId": "spring-cloud-legacy",
                        "version": "1.4.0.RELEASE",
                        "compatibilityRange": "[1.5.0.RELEASE,2.0.0.M1)",
                    }
                ],
            },
        ],
        "groupId": "org.acme",
        "artifactId": "sample",
        "name": "sample",
        "description": "Sample project",
        "packageName": "org.acme.sample",
        "version": "1.0.0-SNAPSHOT",
    }


@pytest.fixture
def metadata_json_file(tmp_path: Path, metadata_document: dict[str, Any]) -> Path:
    path = tmp_path / "metadata.json"
    path.write_text(json.dumps(metadata_document), encoding="utf-8")
    return path


@pytest.fixture
def metadata_yaml_file(tmp_path: Path, metadata_document: dict[str, Any]) -> Path:
    """The same document, wrapped in an ``initializr`` key like application.yml."""
    path = tmp_path / "metadata.yml"
    path.write_text(yaml.safe_dump({"initializr": metadata_document}), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Requests & converters
# ---------------------------------------------------------------------------

@pytest.fixture
def project_request(metadata: InitializrMetadata) -> ProjectRequest:
    """A request populated with the catalog defaults, as the web form does."""
    return ProjectRequest().initialize(metadata)


@pytest.fixture
def converter() -> RequestToDescriptionConverter:
    return RequestToDescriptionConverter(Config())
