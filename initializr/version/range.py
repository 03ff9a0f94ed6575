"""Version ranges used to express dependency compatibility.

Two notations are accepted:

* a bare version (``1.5.0.RELEASE``): inclusive lower bound, no upper bound;
* an interval (``[1.5.0.RELEASE,2.0.0.M1)``) where ``[``/``]`` are inclusive
  and ``(``/``)`` exclusive bounds.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .parser import MalformedVersion, Version, VersionParser


@dataclass(frozen=True)
class VersionRange:
    """A contiguous range of versions."""

    lower: Version
    lower_inclusive: bool = True
    upper: Optional[Version] = None
    upper_inclusive: bool = False

    @classmethod
    def parse(cls, text: str) -> "VersionRange":
        """Parse a range expression or raise :class:`MalformedVersion`."""
        parser = VersionParser()
        raw = (text or "").strip()
        if not raw:
            raise MalformedVersion(text or "", "range must not be empty")

        if raw[0] not in "[(":
            return cls(lower=parser.parse(raw))

        if raw[-1] not in "])":
            raise MalformedVersion(text, "range must end with ']' or ')'")
        bounds = raw[1:-1].split(",")
        if len(bounds) != 2:
            raise MalformedVersion(text, "range must define a lower and an upper bound")

        lower = parser.parse(bounds[0])
        upper = parser.parse(bounds[1])
        if upper < lower:
            raise MalformedVersion(text, "upper bound is lower than the lower bound")
        return cls(
            lower=lower,
            lower_inclusive=raw[0] == "[",
            upper=upper,
            upper_inclusive=raw[-1] == "]",
        )

    def match(self, version: Version) -> bool:
        """Return ``True`` if *version* falls within this range."""
        if self.lower_inclusive:
            if version < self.lower:
                return False
        elif version <= self.lower:
            return False

        if self.upper is None:
            return True
        if self.upper_inclusive:
            return version <= self.upper
        return version < self.upper

    def __str__(self) -> str:
        if self.upper is None:
            return f">={self.lower}"
        left = "[" if self.lower_inclusive else "("
        right = "]" if self.upper_inclusive else ")"
        return f"{left}{self.lower},{self.upper}{right}"
