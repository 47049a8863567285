"""
Version Parsing and Comparison
==============================

Semantic-version precedence for Go module versions, following the rules the
go tool itself applies:

- ``vMAJOR[.MINOR[.PATCH[-PRERELEASE][+BUILD]]]``; ``v1`` and ``v1.2`` are
  shorthand for ``v1.0.0`` and ``v1.2.0``
- pre-releases sort before the release they precede
- build metadata never affects ordering

Comparison is permissive: strings that are not valid versions sort below
every valid version and compare equal to each other. Pseudo-versions such as
``v0.0.0-20190101000000-abcdef123456`` are ordinary pre-releases here.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

_VERSION_PATTERN = re.compile(
    r"^v(0|[1-9]\d*)"
    r"(?:\.(0|[1-9]\d*)"
    r"(?:\.(0|[1-9]\d*)"
    r"(?:-([0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+([0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r")?)?$"
)


@dataclass
class Version:
    """
    Represents a parsed semantic version.

    Supports formats like:
    - v1.2.3
    - v1.2 / v1 (shorthand)
    - v1.2.3-rc.1 (pre-release)
    - v1.2.3+incompatible (build metadata, ignored for ordering)
    """

    major: int
    minor: int = 0
    patch: int = 0
    prerelease: Tuple[str, ...] = ()
    build: Tuple[str, ...] = ()

    def __str__(self) -> str:
        text = f"v{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        if self.build:
            text += "+" + ".".join(self.build)
        return text

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    def compare(self, other: "Version") -> int:
        """Return -1, 0 or 1 as self sorts before, with, or after other."""
        core = (self.major, self.minor, self.patch)
        other_core = (other.major, other.minor, other.patch)
        if core != other_core:
            return -1 if core < other_core else 1
        return _compare_prerelease(self.prerelease, other.prerelease)

    def __lt__(self, other: "Version") -> bool:
        return self.compare(other) < 0

    def __le__(self, other: "Version") -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: "Version") -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: "Version") -> bool:
        return self.compare(other) >= 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return False
        return self.compare(other) == 0

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.prerelease))


def _compare_identifier(left: str, right: str) -> int:
    # Numeric identifiers sort below alphanumeric ones.
    left_numeric = left.isdigit()
    right_numeric = right.isdigit()
    if left_numeric and right_numeric:
        left_value, right_value = int(left), int(right)
        if left_value == right_value:
            return 0
        return -1 if left_value < right_value else 1
    if left_numeric:
        return -1
    if right_numeric:
        return 1
    if left == right:
        return 0
    return -1 if left < right else 1


def _compare_prerelease(left: Tuple[str, ...], right: Tuple[str, ...]) -> int:
    if left == right:
        return 0
    # A release outranks any of its pre-releases.
    if not left:
        return 1
    if not right:
        return -1
    for left_id, right_id in zip(left, right):
        result = _compare_identifier(left_id, right_id)
        if result:
            return result
    return -1 if len(left) < len(right) else 1


def parse_version(version_str: str) -> Version:
    """
    Parse a version string into a Version object.

    Args:
        version_str: Version string like "v1.2.3", "v1.2", "v1.0.0-rc.1"

    Returns:
        Version object

    Raises:
        ValueError: If version string is invalid
    """
    match = _VERSION_PATTERN.match(version_str)
    if not match:
        raise ValueError(f"Invalid version string: '{version_str}'")

    major, minor, patch, prerelease, build = match.groups()

    prerelease_ids: Tuple[str, ...] = tuple(prerelease.split(".")) if prerelease else ()
    for identifier in prerelease_ids:
        if identifier.isdigit() and len(identifier) > 1 and identifier.startswith("0"):
            raise ValueError(
                f"Invalid version string: '{version_str}' "
                f"(numeric pre-release identifier '{identifier}' has a leading zero)"
            )

    return Version(
        major=int(major),
        minor=int(minor) if minor else 0,
        patch=int(patch) if patch else 0,
        prerelease=prerelease_ids,
        build=tuple(build.split(".")) if build else (),
    )


def try_parse_version(version_str: Optional[str]) -> Optional[Version]:
    """Parse a version string, returning None instead of raising."""
    if not version_str:
        return None
    try:
        return parse_version(version_str)
    except ValueError:
        return None


def is_valid_version(version_str: Optional[str]) -> bool:
    """Check whether a string is a valid semantic version."""
    return try_parse_version(version_str) is not None


def compare_versions(left: Optional[str], right: Optional[str]) -> int:
    """
    Compare two version strings by semantic-version precedence.

    Invalid or empty strings sort below every valid version; two invalid
    strings compare equal.

    Returns:
        -1, 0 or 1 as left sorts before, with, or after right
    """
    left_version = try_parse_version(left)
    right_version = try_parse_version(right)

    if left_version is None and right_version is None:
        return 0
    if left_version is None:
        return -1
    if right_version is None:
        return 1
    return left_version.compare(right_version)
