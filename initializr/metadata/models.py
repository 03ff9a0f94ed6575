"""Pydantic v2 models for the Initializr metadata catalog.

The catalog enumerates every legal value a project request may use (build
types, packagings, languages, Java and Spring Boot versions, dependencies)
together with the defaults applied when a request omits a field. Every
model is frozen and holds only tuples and read-only mappings, so a catalog
instance is a snapshot that can be shared between concurrent conversions.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Generic, Mapping, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator
from pydantic.alias_generators import to_camel

from initializr.version import MalformedVersion, VersionRange

DEFAULT_DEPENDENCY_GROUP_ID = "org.springframework.boot"
DEFAULT_STARTER_PREFIX = "spring-boot-starter-"

_MODEL_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Catalog entries
# ---------------------------------------------------------------------------


class MetadataElement(BaseModel):
    """Base class for every selectable catalog entry."""

    model_config = _MODEL_CONFIG

    id: str = Field(..., min_length=1, description="Identifier used in requests")
    name: str = Field(default="", description="Human-readable label")
    description: str = Field(default="")
    default: bool = Field(default=False, description="Whether this entry is the default choice")


class Type(MetadataElement):
    """A project type, e.g. ``maven-project`` or ``gradle-build``.

    ``tags`` carry the build system (``build``), an optional build dialect
    (``dialect``) and the archive format (``format``).
    """

    action: str = Field(default="/starter.zip")
    tags: Mapping[str, str] = Field(default_factory=dict)

    @field_validator("tags")
    @classmethod
    def _read_only_tags(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("tags")
    def _serialize_tags(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    @property
    def build_tag(self) -> Optional[str]:
        return self.tags.get("build")


class Packaging(MetadataElement):
    """Archive packaging (``jar``, ``war``)."""


class Language(MetadataElement):
    """JVM language (``java``, ``kotlin``, ``groovy``)."""


class JavaVersion(MetadataElement):
    """Supported JVM runtime version."""


class BootVersion(MetadataElement):
    """Supported Spring Boot platform version."""


class Dependency(MetadataElement):
    """A selectable dependency (starter or library)."""

    group_id: Optional[str] = Field(default=None)
    artifact_id: Optional[str] = Field(default=None)
    version: Optional[str] = Field(default=None)
    scope: str = Field(default="compile")
    compatibility_range: Optional[str] = Field(
        default=None, description="Spring Boot versions this dependency supports"
    )

    @field_validator("compatibility_range")
    @classmethod
    def _check_range(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            try:
                VersionRange.parse(value)
            except MalformedVersion as exc:
                raise ValueError(str(exc)) from exc
        return value

    def coordinates(self) -> tuple[str, str]:
        """Return ``(group_id, artifact_id)``, falling back to the Boot starter naming."""
        return (
            self.group_id or DEFAULT_DEPENDENCY_GROUP_ID,
            self.artifact_id or f"{DEFAULT_STARTER_PREFIX}{self.id}",
        )

    def range(self) -> Optional[VersionRange]:
        if self.compatibility_range is None:
            return None
        return VersionRange.parse(self.compatibility_range)


class DependencyGroup(BaseModel):
    """A named group of dependencies (``Web``, ``SQL``, ...)."""

    model_config = _MODEL_CONFIG

    name: str
    content: tuple[Dependency, ...] = Field(default_factory=tuple)


# ---------------------------------------------------------------------------
# Capabilities: uniform keyed lookup per entity kind
# ---------------------------------------------------------------------------

T = TypeVar("T", bound=MetadataElement)


class SingleSelectCapability(BaseModel, Generic[T]):
    """An ordered set of entries of one kind, at most one flagged as default."""

    model_config = _MODEL_CONFIG

    id: str
    content: tuple[T, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def _check_unique_ids(self) -> "SingleSelectCapability[T]":
        seen: set[str] = set()
        for element in self.content:
            if element.id in seen:
                raise ValueError(f"Duplicate {self.id} entry '{element.id}'")
            seen.add(element.id)
        return self

    def get(self, id: Optional[str]) -> Optional[T]:
        """Return the entry with the given identifier, or ``None``."""
        if not id:
            return None
        for element in self.content:
            if element.id == id:
                return element
        return None

    def default(self) -> Optional[T]:
        """Return the entry flagged as default, or ``None``.

        An unflagged first entry is not promoted: a catalog without a flagged
        default is incomplete, and requests that omit the field fail with
        :class:`~initializr.project.InternalInconsistency`.
        """
        for element in self.content:
            if element.default:
                return element
        return None

    def ids(self) -> list[str]:
        return [element.id for element in self.content]


class DependenciesCapability(BaseModel):
    """Dependencies, organised in groups but looked up by identifier."""

    model_config = _MODEL_CONFIG

    id: str = "dependencies"
    content: tuple[DependencyGroup, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def _check_unique_ids(self) -> "DependenciesCapability":
        seen: set[str] = set()
        for dependency in self.all():
            if dependency.id in seen:
                raise ValueError(f"Duplicate dependency '{dependency.id}'")
            seen.add(dependency.id)
        return self

    def all(self) -> list[Dependency]:
        """Every dependency, in group order."""
        return [dependency for group in self.content for dependency in group.content]

    def get(self, id: Optional[str]) -> Optional[Dependency]:
        if not id:
            return None
        for dependency in self.all():
            if dependency.id == id:
                return dependency
        return None

    def ids(self) -> list[str]:
        return [dependency.id for dependency in self.all()]


# ---------------------------------------------------------------------------
# Catalog root
# ---------------------------------------------------------------------------

_SINGLE_SELECT_FIELDS: dict[str, str] = {
    "types": "type",
    "packagings": "packaging",
    "languages": "language",
    "javaVersions": "javaVersion",
    "java_versions": "javaVersion",
    "bootVersions": "bootVersion",
    "boot_versions": "bootVersion",
}


class InitializrMetadata(BaseModel):
    """Complete, immutable metadata catalog."""

    model_config = _MODEL_CONFIG

    types: SingleSelectCapability[Type] = Field(
        default_factory=lambda: SingleSelectCapability[Type](id="type")
    )
    packagings: SingleSelectCapability[Packaging] = Field(
        default_factory=lambda: SingleSelectCapability[Packaging](id="packaging")
    )
    languages: SingleSelectCapability[Language] = Field(
        default_factory=lambda: SingleSelectCapability[Language](id="language")
    )
    java_versions: SingleSelectCapability[JavaVersion] = Field(
        default_factory=lambda: SingleSelectCapability[JavaVersion](id="javaVersion")
    )
    boot_versions: SingleSelectCapability[BootVersion] = Field(
        default_factory=lambda: SingleSelectCapability[BootVersion](id="bootVersion")
    )
    dependencies: DependenciesCapability = Field(default_factory=DependenciesCapability)

    # Text defaults
    group_id: str = Field(default="com.example")
    artifact_id: str = Field(default="demo")
    name: str = Field(default="demo")
    description: str = Field(default="Demo project for Spring Boot")
    package_name: str = Field(default="com.example.demo")
    version: str = Field(default="0.0.1-SNAPSHOT")

    @model_validator(mode="before")
    @classmethod
    def _wrap_plain_lists(cls, data: Any) -> Any:
        """Accept bare lists for capabilities, as found in metadata documents."""
        if not isinstance(data, dict):
            return data
        wrapped = dict(data)
        for key, capability_id in _SINGLE_SELECT_FIELDS.items():
            if isinstance(wrapped.get(key), list):
                wrapped[key] = {"id": capability_id, "content": wrapped[key]}
        if isinstance(wrapped.get("dependencies"), list):
            wrapped["dependencies"] = {"id": "dependencies", "content": wrapped["dependencies"]}
        return wrapped

    def summary(self) -> dict[str, str]:
        """Counts and defaults, for display purposes."""
        boot = self.boot_versions.default()
        return {
            "Types": ", ".join(self.types.ids()) or "-",
            "Packagings": ", ".join(self.packagings.ids()) or "-",
            "Languages": ", ".join(self.languages.ids()) or "-",
            "Default Spring Boot": boot.id if boot else "-",
            "Dependencies": str(len(self.dependencies.all())),
        }
