"""Errors raised while converting a project request."""

from __future__ import annotations

from enum import Enum


class FieldCategory(str, Enum):
    """Request field a validation failure relates to."""

    TYPE = "type"
    BUILD_TAG = "build_tag"
    VERSION = "version"
    PACKAGING = "packaging"
    LANGUAGE = "language"
    DEPENDENCY = "dependency"
    COMPATIBILITY = "compatibility"


class InvalidProjectRequest(Exception):
    """The request references something the catalog does not allow.

    The message is meant to be shown to the user verbatim.
    """

    def __init__(self, category: FieldCategory, message: str) -> None:
        self.category = category
        self.message = message
        super().__init__(message)


class InternalInconsistency(Exception):
    """The catalog breaks an assumption of the converter.

    Never caused by user input; indicates malformed metadata.
    """
