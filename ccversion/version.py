"""
Compiler version value.

A Version keeps the components exactly as they were written so that
"11.2" renders as "11.2", while comparisons treat missing minor/patch
components as zero ("11", "11.0" and "11.0.0" are all equal).
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from .core.exceptions import VersionParseError

_COMPONENT_RE = re.compile(r"[0-9]+")

# Components past patch (e.g. the MSVC build number) are not read.
_CONSULTED_COMPONENTS = 3


@dataclass(frozen=True, eq=False)
class Version:
    """
    Dotted compiler version with one to three components.

    Attributes:
        major: Major version
        minor: Minor version, None if it was not present
        patch: Patch version, None if it was not present

    Example:
        >>> Version.parse("11.2") == Version.parse("11.2.0")
        True
        >>> str(Version.parse("11.2"))
        '11.2'
        >>> Version.parse("19.16.27027.1") > Version.parse("19.16")
        True
    """

    major: int
    minor: Optional[int] = None
    patch: Optional[int] = None

    def __post_init__(self):
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if value is None and name != "major":
                continue
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(
                    f"Version {name} must be a non-negative integer, got {value!r}"
                )
        if self.patch is not None and self.minor is None:
            raise ValueError("Version patch requires a minor component")

    @classmethod
    def parse(cls, text: str) -> "Version":
        """
        Parse a dotted version string.

        Only the first three components are read; anything after the
        patch component is ignored. Whitespace is not stripped.

        Args:
            text: Version string such as "11", "11.2" or "11.2.0"

        Returns:
            Parsed Version

        Raises:
            VersionParseError: If a consulted component is not a
                non-negative base-10 integer (including empty input)
            TypeError: If text is not a string
        """
        if not isinstance(text, str):
            raise TypeError(f"Version text must be str, got {type(text).__name__}")

        parts = text.split(".")[:_CONSULTED_COMPONENTS]
        values = []
        for index, part in enumerate(parts):
            if not _COMPONENT_RE.fullmatch(part):
                raise VersionParseError(text, index, part)
            values.append(int(part))

        return cls(*values)

    def normalized(self) -> Tuple[int, int, int]:
        """Return (major, minor, patch) with missing components as 0."""
        return (
            self.major,
            self.minor if self.minor is not None else 0,
            self.patch if self.patch is not None else 0,
        )

    def compare(self, other: "Version") -> int:
        """
        Three-way comparison.

        Returns:
            -1 if self < other, 0 if equal, 1 if self > other
        """
        a, b = self.normalized(), other.normalized()
        return (a > b) - (a < b)

    def __str__(self) -> str:
        """Render only the components that were present."""
        parts = [self.major, self.minor, self.patch]
        return ".".join(str(p) for p in parts if p is not None)

    def __repr__(self) -> str:
        return f"Version('{self}')"

    def __hash__(self) -> int:
        return hash(self.normalized())

    def __eq__(self, other: object) -> bool:
        """Equality with missing components treated as 0."""
        if not isinstance(other, Version):
            return NotImplemented
        return self.normalized() == other.normalized()

    def __ne__(self, other: object) -> bool:
        """Inequality comparison."""
        if not isinstance(other, Version):
            return NotImplemented
        return self.normalized() != other.normalized()

    def __lt__(self, other: "Version") -> bool:
        """Less than comparison."""
        if not isinstance(other, Version):
            return NotImplemented
        return self.normalized() < other.normalized()

    def __le__(self, other: "Version") -> bool:
        """Less than or equal comparison."""
        if not isinstance(other, Version):
            return NotImplemented
        return self.normalized() <= other.normalized()

    def __gt__(self, other: "Version") -> bool:
        """Greater than comparison."""
        if not isinstance(other, Version):
            return NotImplemented
        return self.normalized() > other.normalized()

    def __ge__(self, other: "Version") -> bool:
        """Greater than or equal comparison."""
        if not isinstance(other, Version):
            return NotImplemented
        return self.normalized() >= other.normalized()
