"""Fluent construction of metadata catalogs.

``MetadataBuilder`` accumulates raw entries and validates them all at once in
:meth:`MetadataBuilder.build`, so a catalog assembled in code goes through
exactly the same checks as one loaded from a document.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from .models import Dependency, InitializrMetadata, Type


class MetadataBuilder:
    """Builds an :class:`InitializrMetadata` snapshot step by step.

    Usage::

        metadata = (
            MetadataBuilder.with_defaults()
            .add_type("example-type", build="gradle")
            .build()
        )
    """

    def __init__(self) -> None:
        self._types: list[dict[str, Any]] = []
        self._packagings: list[dict[str, Any]] = []
        self._languages: list[dict[str, Any]] = []
        self._java_versions: list[dict[str, Any]] = []
        self._boot_versions: list[dict[str, Any]] = []
        self._dependency_groups: list[dict[str, Any]] = []
        self._texts: dict[str, str] = {}

    # -- Presets -----------------------------------------------------------

    @classmethod
    def with_defaults(cls) -> "MetadataBuilder":
        """A builder pre-populated with the standard Spring Boot catalog."""
        return cls().add_basic_defaults()

    def add_basic_defaults(self) -> "MetadataBuilder":
        return (
            self.add_default_types()
            .add_default_packagings()
            .add_default_languages()
            .add_default_java_versions()
            .add_default_boot_versions()
        )

    def add_default_types(self) -> "MetadataBuilder":
        return (
            self.add_type("maven-build", build="maven", format="build")
            .add_type("maven-project", default=True, build="maven", format="project")
            .add_type("gradle-build", build="gradle", format="build")
            .add_type("gradle-project", build="gradle", format="project")
        )

    def add_default_packagings(self) -> "MetadataBuilder":
        return self.add_packaging("jar", default=True).add_packaging("war")

    def add_default_languages(self) -> "MetadataBuilder":
        return (
            self.add_language("java", default=True)
            .add_language("groovy")
            .add_language("kotlin")
        )

    def add_default_java_versions(self) -> "MetadataBuilder":
        return self.add_java_version("1.8", default=True).add_java_version("11")

    def add_default_boot_versions(self) -> "MetadataBuilder":
        return (
            self.add_boot_version("1.5.17.RELEASE")
            .add_boot_version("2.1.1.RELEASE", default=True)
            .add_boot_version("2.2.0.BUILD-SNAPSHOT")
        )

    # -- Entries -----------------------------------------------------------

    def add_type(
        self,
        type_or_id: Union[Type, str],
        *,
        default: bool = False,
        **tags: str,
    ) -> "MetadataBuilder":
        """Add a project type.

        Args:
            type_or_id: A ready-made ``Type`` or the identifier of a new one.
            default: Whether the new type is the default choice.
            **tags: Tags of the new type (``build="gradle"``, ``dialect=...``).
        """
        if isinstance(type_or_id, Type):
            self._replace(self._types, type_or_id.model_dump())
        else:
            self._replace(
                self._types,
                {"id": type_or_id, "name": type_or_id, "default": default, "tags": dict(tags)},
            )
        return self

    def add_packaging(self, id: str, *, default: bool = False) -> "MetadataBuilder":
        self._replace(self._packagings, {"id": id, "name": id.capitalize(), "default": default})
        return self

    def add_language(self, id: str, *, default: bool = False) -> "MetadataBuilder":
        self._replace(self._languages, {"id": id, "name": id.capitalize(), "default": default})
        return self

    def add_java_version(self, id: str, *, default: bool = False) -> "MetadataBuilder":
        self._replace(self._java_versions, {"id": id, "name": id, "default": default})
        return self

    def add_boot_version(self, id: str, *, default: bool = False) -> "MetadataBuilder":
        if default:
            for existing in self._boot_versions:
                existing["default"] = False
        self._replace(self._boot_versions, {"id": id, "name": id, "default": default})
        return self

    def add_dependency_group(
        self, name: str, *dependencies: Union[Dependency, str]
    ) -> "MetadataBuilder":
        """Add a group; plain strings become dependencies with that identifier."""
        content: list[dict[str, Any]] = []
        for dependency in dependencies:
            if isinstance(dependency, Dependency):
                content.append(dependency.model_dump())
            else:
                content.append({"id": dependency, "name": dependency})
        self._dependency_groups.append({"name": name, "content": content})
        return self

    def set_text_defaults(
        self,
        *,
        group_id: Optional[str] = None,
        artifact_id: Optional[str] = None,
        name: Optional[str] = None,
        description: Optional[str] = None,
        package_name: Optional[str] = None,
        version: Optional[str] = None,
    ) -> "MetadataBuilder":
        values = {
            "group_id": group_id,
            "artifact_id": artifact_id,
            "name": name,
            "description": description,
            "package_name": package_name,
            "version": version,
        }
        self._texts.update({key: value for key, value in values.items() if value is not None})
        return self

    # -- Build -------------------------------------------------------------

    def build(self) -> InitializrMetadata:
        """Validate the accumulated entries and return a frozen catalog.

        Raises:
            pydantic.ValidationError: If an entry is invalid or duplicated.
        """
        return InitializrMetadata.model_validate(
            {
                "types": list(self._types),
                "packagings": list(self._packagings),
                "languages": list(self._languages),
                "java_versions": list(self._java_versions),
                "boot_versions": list(self._boot_versions),
                "dependencies": list(self._dependency_groups),
                **self._texts,
            }
        )

    @staticmethod
    def _replace(entries: list[dict[str, Any]], entry: dict[str, Any]) -> None:
        """Append *entry*, replacing any previous entry with the same id."""
        entries[:] = [existing for existing in entries if existing["id"] != entry["id"]]
        entries.append(entry)
