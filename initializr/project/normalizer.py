"""Fill in derived defaults on a raw request before validation."""

from __future__ import annotations

from typing import Optional

from initializr.config import NamingConfig
from initializr.utils import (
    capitalize,
    clean_package_name,
    is_java_identifier,
    split_camel_case,
    unsplit_words,
)

from .request import ProjectRequest


class RequestNormalizer:
    """Derives the application and package names a request leaves blank.

    Only naming fields are touched; catalog-backed fields are left for the
    validator to resolve.
    """

    def __init__(self, naming: Optional[NamingConfig] = None) -> None:
        self.naming = naming or NamingConfig()

    def normalize(self, request: ProjectRequest) -> ProjectRequest:
        """Return a normalized copy of *request*; the input is not modified."""
        normalized = request.model_copy(deep=True)
        if not (normalized.application_name or "").strip():
            normalized.application_name = self.generate_application_name(
                normalized.name or normalized.artifact_id
            )
        normalized.package_name = self.generate_package_name(normalized)
        return normalized

    def generate_application_name(self, name: Optional[str]) -> str:
        """Derive a main class name from a project name.

        ``"demo"`` becomes ``"DemoApplication"`` and ``"my-cool_app"``
        becomes ``"MyCoolAppApplication"``. Names that do not produce a valid
        Java identifier, or that clash with a reserved class name, yield the
        fallback name.
        """
        if not name or not name.strip():
            return self.naming.fallback_application_name

        candidate = unsplit_words(split_camel_case(name.strip()))
        suffix = self.naming.application_name_suffix
        if not candidate.endswith(suffix):
            candidate = f"{candidate}{suffix}"
        candidate = capitalize(candidate)

        if not is_java_identifier(candidate) or candidate in self.naming.invalid_application_names:
            return self.naming.fallback_application_name
        return candidate

    def generate_package_name(self, request: ProjectRequest) -> str:
        """Clean the requested package name, deriving it from group/artifact if blank."""
        package_name = (request.package_name or "").strip()
        if not package_name and request.group_id and request.artifact_id:
            package_name = f"{request.group_id}.{request.artifact_id}"
        if not package_name:
            return self.naming.default_package_name

        candidate = clean_package_name(package_name)
        if (
            not is_java_identifier(candidate.replace(".", ""))
            or candidate in self.naming.invalid_package_names
        ):
            return self.naming.default_package_name
        return candidate
