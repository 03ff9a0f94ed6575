"""Structured platform version parsing.

Versions follow the ``major.minor.patch[.QUALIFIER]`` scheme used by the
Spring Boot release train (``2.1.1.RELEASE``, ``1.2.3.M4``, ``2.0.0-RC1``).
Ordering is numeric, never lexical, so ``1.10.0`` sorts after ``1.5.0``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional


class MalformedVersion(ValueError):
    """Raised when a string does not follow the version grammar."""

    def __init__(self, raw: str, reason: str = "") -> None:
        self.raw = raw
        message = f"Invalid version format '{raw}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


# Qualifiers in ascending order. A version without qualifier is a release.
KNOWN_QUALIFIERS: tuple[str, ...] = ("M", "RC", "BUILD-SNAPSHOT", "RELEASE")

_RELEASE = "RELEASE"

_VERSION_REGEX = re.compile(
    r"^(\d+)\.(\d+)\.(\d+)(?:[.-]([A-Za-z][A-Za-z-]*)(\d*))?$"
)


@dataclass(frozen=True)
class Qualifier:
    """Pre-release / release marker attached to a version."""

    id: str
    number: Optional[int] = None

    def __str__(self) -> str:
        return self.id if self.number is None else f"{self.id}{self.number}"

    @property
    def rank(self) -> int:
        """Position in ``KNOWN_QUALIFIERS`` or ``-1`` for unknown qualifiers."""
        try:
            return KNOWN_QUALIFIERS.index(self.id)
        except ValueError:
            return -1


@dataclass(frozen=True)
class Version:
    """A parsed platform version.

    Equality is structural: ``2.1.1`` and ``2.1.1.RELEASE`` are different
    values even though neither orders before the other.
    """

    major: int
    minor: int
    patch: int
    qualifier: Optional[Qualifier] = None

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.qualifier is not None:
            text = f"{text}.{self.qualifier}"
        return text

    @classmethod
    def parse(cls, raw: str) -> "Version":
        """Shortcut for ``VersionParser().parse(raw)``."""
        return VersionParser().parse(raw)

    # -- Ordering ----------------------------------------------------------

    def _sort_key(self) -> tuple[int, int, int, int, str, int]:
        qualifier = self.qualifier or Qualifier(_RELEASE)
        rank = qualifier.rank
        return (
            self.major,
            self.minor,
            self.patch,
            rank,
            qualifier.id if rank == -1 else "",
            qualifier.number or 0,
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._sort_key() >= other._sort_key()


class VersionParser:
    """Parses free-form version strings into :class:`Version` values."""

    def parse(self, raw: str) -> Version:
        """Parse *raw* or raise :class:`MalformedVersion`."""
        if raw is None:
            raise MalformedVersion("None", "version must not be empty")
        text = raw.strip()
        match = _VERSION_REGEX.match(text)
        if match is None:
            raise MalformedVersion(
                raw, "expected major.minor.patch with an optional qualifier"
            )
        major, minor, patch, qualifier_id, qualifier_number = match.groups()
        qualifier: Optional[Qualifier] = None
        if qualifier_id:
            qualifier = Qualifier(
                id=qualifier_id.upper(),
                number=int(qualifier_number) if qualifier_number else None,
            )
        return Version(int(major), int(minor), int(patch), qualifier)

    def safe_parse(self, raw: Optional[str]) -> Optional[Version]:
        """Parse *raw*, returning ``None`` instead of raising."""
        if not raw:
            return None
        try:
            return self.parse(raw)
        except MalformedVersion:
            return None
