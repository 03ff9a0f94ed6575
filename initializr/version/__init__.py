"""Platform version parsing and comparison.

Usage::

    from initializr.version import Version, VersionRange

    boot = Version.parse("2.1.1.RELEASE")
    assert boot >= Version.parse("1.5.0")
    assert VersionRange.parse("[2.0.0.RELEASE,2.2.0.M1)").match(boot)
"""

from initializr.version.parser import (
    KNOWN_QUALIFIERS,
    MalformedVersion,
    Qualifier,
    Version,
    VersionParser,
)
from initializr.version.range import VersionRange

__all__ = [
    "KNOWN_QUALIFIERS",
    "MalformedVersion",
    "Qualifier",
    "Version",
    "VersionParser",
    "VersionRange",
]
