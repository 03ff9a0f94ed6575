"""Unit tests for RequestValidator (initializr.project.validator).

Tests cover:
- Resolution of every field to its catalog entry
- Catalog defaults for omitted fields
- Fixed validation order
- Internal inconsistencies for catalogs without defaults
"""

from __future__ import annotations

import pytest

from initializr.config import VersionConfig
from initializr.metadata import InitializrMetadata, MetadataBuilder
from initializr.project import (
    FieldCategory,
    InternalInconsistency,
    InvalidProjectRequest,
    ProjectRequest,
    RequestValidator,
)
from initializr.version import Version


@pytest.fixture
def validator() -> RequestValidator:
    return RequestValidator()


class TestResolution:
    @pytest.mark.unit
    def test_resolves_explicit_fields(self, validator, metadata: InitializrMetadata):
        request = ProjectRequest(
            type="gradle-project",
            packaging="war",
            language="kotlin",
            boot_version="2.0.3.RELEASE",
            java_version="11",
            dependencies=["web", "jdbc"],
        )
        resolved = validator.validate(request, metadata)
        assert resolved.type.id == "gradle-project"
        assert resolved.build_tag == "gradle"
        assert resolved.packaging.id == "war"
        assert resolved.language.id == "kotlin"
        assert resolved.platform_version == Version.parse("2.0.3.RELEASE")
        assert resolved.jvm_version == "11"
        assert [dependency.id for dependency in resolved.dependencies] == ["web", "jdbc"]

    @pytest.mark.unit
    def test_defaults_for_omitted_fields(self, validator, metadata: InitializrMetadata):
        resolved = validator.validate(ProjectRequest(), metadata)
        assert resolved.type.id == "maven-project"
        assert resolved.packaging.id == "jar"
        assert resolved.language.id == "java"
        assert resolved.platform_version == Version.parse("2.1.1.RELEASE")
        assert resolved.jvm_version == "1.8"
        assert resolved.dependencies == ()

    @pytest.mark.unit
    def test_minimum_version_is_accepted(self, validator, metadata: InitializrMetadata):
        resolved = validator.validate(ProjectRequest(boot_version="1.5.0"), metadata)
        assert resolved.platform_version == Version(1, 5, 0)

    @pytest.mark.unit
    def test_minimum_compared_numerically(self, validator, metadata: InitializrMetadata):
        resolved = validator.validate(ProjectRequest(boot_version="1.10.0"), metadata)
        assert resolved.platform_version == Version(1, 10, 0)

    @pytest.mark.unit
    def test_minimum_release_candidate_rejected(self, validator, metadata: InitializrMetadata):
        with pytest.raises(InvalidProjectRequest, match="1.5.0.RC1 must be 1.5.0 or higher"):
            validator.validate(ProjectRequest(boot_version="1.5.0.RC1"), metadata)

    @pytest.mark.unit
    def test_platform_name_is_configurable(self, metadata: InitializrMetadata):
        validator = RequestValidator(VersionConfig(platform_name="Platform"))
        with pytest.raises(InvalidProjectRequest, match="^Invalid Platform version 1.0.0 "):
            validator.validate(ProjectRequest(boot_version="1.0.0"), metadata)


class TestOrder:
    @pytest.mark.unit
    def test_build_tag_checked_before_version(self, validator):
        metadata = MetadataBuilder.with_defaults().add_type("bare").build()
        request = ProjectRequest(type="bare", boot_version="1.0.0")
        with pytest.raises(InvalidProjectRequest) as exc_info:
            validator.validate(request, metadata)
        assert exc_info.value.category is FieldCategory.BUILD_TAG

    @pytest.mark.unit
    def test_version_checked_before_packaging(self, validator, metadata: InitializrMetadata):
        request = ProjectRequest(boot_version="1.0.0", packaging="star")
        with pytest.raises(InvalidProjectRequest) as exc_info:
            validator.validate(request, metadata)
        assert exc_info.value.category is FieldCategory.VERSION

    @pytest.mark.unit
    def test_packaging_checked_before_language(self, validator, metadata: InitializrMetadata):
        request = ProjectRequest(packaging="star", language="english")
        with pytest.raises(InvalidProjectRequest) as exc_info:
            validator.validate(request, metadata)
        assert exc_info.value.category is FieldCategory.PACKAGING

    @pytest.mark.unit
    def test_language_checked_before_dependencies(self, validator, metadata: InitializrMetadata):
        request = ProjectRequest(language="english", dependencies=["invalid"])
        with pytest.raises(InvalidProjectRequest) as exc_info:
            validator.validate(request, metadata)
        assert exc_info.value.category is FieldCategory.LANGUAGE

    @pytest.mark.unit
    def test_first_unknown_dependency_reported(self, validator, metadata: InitializrMetadata):
        request = ProjectRequest(dependencies=["web", "first", "second"])
        with pytest.raises(InvalidProjectRequest, match="Unknown dependency 'first'"):
            validator.validate(request, metadata)


class TestInternalInconsistency:
    @pytest.mark.unit
    def test_missing_default_boot_version(self, validator):
        metadata = (
            MetadataBuilder().add_type("maven-project", default=True, build="maven").build()
        )
        with pytest.raises(InternalInconsistency, match="no default bootVersion"):
            validator.validate(ProjectRequest(), metadata)

    @pytest.mark.unit
    def test_missing_default_type(self, validator):
        with pytest.raises(InternalInconsistency, match="no default type"):
            validator.validate(ProjectRequest(), MetadataBuilder().build())

    @pytest.mark.unit
    def test_malformed_default_boot_version(self, validator):
        metadata = (
            MetadataBuilder.with_defaults().add_boot_version("2.x-latest", default=True).build()
        )
        with pytest.raises(InternalInconsistency, match="not a valid version"):
            validator.validate(ProjectRequest(), metadata)

    @pytest.mark.unit
    def test_missing_default_java_version(self, validator):
        metadata = (
            MetadataBuilder()
            .add_default_types()
            .add_default_packagings()
            .add_default_languages()
            .add_default_boot_versions()
            .build()
        )
        with pytest.raises(InternalInconsistency, match="no default javaVersion"):
            validator.validate(ProjectRequest(), metadata)

    @pytest.mark.unit
    def test_unflagged_packaging_is_not_a_default(self, validator):
        metadata = (
            MetadataBuilder()
            .add_default_types()
            .add_packaging("jar")
            .add_default_languages()
            .add_default_java_versions()
            .add_default_boot_versions()
            .build()
        )
        with pytest.raises(InternalInconsistency, match="no default packaging"):
            validator.validate(ProjectRequest(), metadata)
        resolved = validator.validate(ProjectRequest(packaging="jar"), metadata)
        assert resolved.packaging.id == "jar"
