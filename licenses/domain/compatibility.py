"""
License compatibility evaluation.

A license covers the plugin versions described by its compatibility range,
a disjunction of version constraints such as ``^1 || ^2``. Caret constraints
cover one major version window (``^1.0.0`` is ``>=1.0.0 <2.0.0``).

Supported constraint forms inside a disjunct (whitespace or comma separated,
all of them must hold): ``^1.2.3``, ``~1.2``, ``>=1.0``, ``>1``, ``<=2``,
``<2.0``, ``=1.2.3``, ``1.2.3`` and ``*``.
"""

import re
from dataclasses import dataclass
from functools import total_ordering
from typing import List, Optional, Tuple

from licenses.domain.package_naming import RANGE_OR

VERSION_PATTERN = re.compile(
    r"[vV]?(?P<major>[0-9]+)"
    r"(?:\.(?P<minor>[0-9]+))?"
    r"(?:\.(?P<patch>[0-9]+))?"
    r"(?:\.[0-9]+)?"
    r"(?:-(?P<prerelease>[0-9A-Za-z.-]+))?"
    r"(?:\+[0-9A-Za-z.-]+)?"
)

COMPARATOR_PATTERN = re.compile(r"(?P<operator>\^|~|>=|<=|>|<|==|=)?\s*(?P<version>[^\s,<>=^~]+)")

# Lowest possible pre-release identifier, used for exclusive upper bounds so
# that pre-releases of the next version are not covered.
LOWEST_PRERELEASE = "0"


def _prerelease_key(prerelease: str) -> Tuple:
    parts = []
    for identifier in prerelease.split("."):
        if identifier.isdigit():
            parts.append((0, int(identifier), ""))
        else:
            parts.append((1, 0, identifier))
    return tuple(parts)


@total_ordering
@dataclass(frozen=True)
class Version:
    """Semantic version value object."""

    major: int
    minor: int = 0
    patch: int = 0
    prerelease: str = ""

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["Version"]:
        """
        Parse a version string.

        Args:
            value: Version string such as ``1.2.3``, ``v2`` or ``2.0.0-beta.1``

        Returns:
            Version instance, or None if the string is not a version
        """
        parsed = cls.parse_with_precision(value)
        return parsed[0] if parsed else None

    @classmethod
    def parse_with_precision(cls, value: Optional[str]) -> Optional[Tuple["Version", int]]:
        """Parse a version and return it with the number of components given."""
        if not value or not isinstance(value, str):
            return None
        match = VERSION_PATTERN.fullmatch(value.strip())
        if not match:
            return None
        precision = 1 + (match.group("minor") is not None) + (match.group("patch") is not None)
        version = cls(
            major=int(match.group("major")),
            minor=int(match.group("minor") or 0),
            patch=int(match.group("patch") or 0),
            prerelease=match.group("prerelease") or "",
        )
        return version, precision

    def _sort_key(self) -> Tuple:
        release = (self.major, self.minor, self.patch)
        if not self.prerelease:
            return release + (1, ())
        return release + (0, _prerelease_key(self.prerelease))

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        version = f"{self.major}.{self.minor}.{self.patch}"
        return f"{version}-{self.prerelease}" if self.prerelease else version


@dataclass(frozen=True)
class Comparator:
    """A single ``<operator> <version>`` bound."""

    operator: str
    version: Version

    def matches(self, version: Version) -> bool:
        """Check whether a version satisfies this bound."""
        if self.operator == ">=":
            return version >= self.version
        if self.operator == ">":
            return version > self.version
        if self.operator == "<=":
            return version <= self.version
        if self.operator == "<":
            return version < self.version
        return version == self.version

    def is_exceeded_by(self, version: Version) -> bool:
        """Check whether a version lies above this bound."""
        if self.operator == "<":
            return version >= self.version
        if self.operator in ("<=", "=="):
            return version > self.version
        return False


def _caret_upper_bound(version: Version, precision: int) -> Version:
    if version.major > 0 or precision == 1:
        return Version(version.major + 1, 0, 0, LOWEST_PRERELEASE)
    if version.minor > 0 or precision == 2:
        return Version(0, version.minor + 1, 0, LOWEST_PRERELEASE)
    return Version(0, 0, version.patch + 1, LOWEST_PRERELEASE)


def _tilde_upper_bound(version: Version, precision: int) -> Version:
    if precision == 3:
        return Version(version.major, version.minor + 1, 0, LOWEST_PRERELEASE)
    return Version(version.major + 1, 0, 0, LOWEST_PRERELEASE)


@dataclass(frozen=True)
class VersionConstraint:
    """
    One disjunct of a compatibility range.

    A constraint is a conjunction of comparators; an empty conjunction
    (``*``) matches every version.
    """

    expression: str
    comparators: Tuple[Comparator, ...]

    @classmethod
    def parse(cls, expression: str) -> Optional["VersionConstraint"]:
        """
        Parse a single constraint expression.

        Args:
            expression: Constraint such as ``^1.0.0`` or ``>=1.2 <2``

        Returns:
            VersionConstraint, or None if the expression cannot be parsed
        """
        expression = expression.strip()
        if not expression:
            return None

        comparators: List[Comparator] = []
        position = 0
        for match in COMPARATOR_PATTERN.finditer(expression):
            if expression[position:match.start()].strip(" ,"):
                return None
            position = match.end()

            operator = match.group("operator") or "=="
            raw_version = match.group("version")
            if raw_version == "*" and operator == "==":
                continue

            parsed = Version.parse_with_precision(raw_version)
            if not parsed:
                return None
            version, precision = parsed

            if operator == "^":
                comparators.append(Comparator(">=", version))
                comparators.append(Comparator("<", _caret_upper_bound(version, precision)))
            elif operator == "~":
                comparators.append(Comparator(">=", version))
                comparators.append(Comparator("<", _tilde_upper_bound(version, precision)))
            elif operator == "=":
                comparators.append(Comparator("==", version))
            else:
                comparators.append(Comparator(operator, version))

        if expression[position:].strip(" ,"):
            return None
        return cls(expression=expression, comparators=tuple(comparators))

    def matches(self, version: Version) -> bool:
        """Check whether a version satisfies every comparator."""
        return all(comparator.matches(version) for comparator in self.comparators)

    def is_exceeded_by(self, version: Version) -> bool:
        """Check whether a version is newer than anything this constraint covers."""
        return any(comparator.is_exceeded_by(version) for comparator in self.comparators)


def parse_compatibility(compatibility: Optional[str]) -> List[Optional[VersionConstraint]]:
    """
    Split a compatibility range into its disjuncts.

    Unparseable disjuncts are kept as None so callers can tell them apart.
    """
    if not compatibility or not isinstance(compatibility, str):
        return []
    return [
        VersionConstraint.parse(part)
        for part in compatibility.split(RANGE_OR)
        if part.strip()
    ]


class CompatibilityEvaluator:
    """Domain service deciding whether a license covers an installed version."""

    @staticmethod
    def is_compatible(compatibility: Optional[str], installed_version: Optional[str]) -> bool:
        """
        Check whether the installed version satisfies the compatibility range.

        Args:
            compatibility: Compatibility range, e.g. ``^1 || ^2``
            installed_version: Installed plugin version, None if not installed

        Returns:
            True if at least one disjunct covers the installed version
        """
        version = Version.parse(installed_version)
        if version is None:
            return False

        return any(
            constraint is not None and constraint.matches(version)
            for constraint in parse_compatibility(compatibility)
        )

    @staticmethod
    def is_upgradeable(compatibility: Optional[str], installed_version: Optional[str]) -> bool:
        """
        Check whether the license is outdated relative to the installed version.

        A license is upgradeable when the installed version is not covered and
        is newer than everything each disjunct of the range covers.

        Args:
            compatibility: Compatibility range
            installed_version: Installed plugin version, None if not installed

        Returns:
            True if a newer license would cover the installed version
        """
        version = Version.parse(installed_version)
        if version is None:
            return False

        constraints = parse_compatibility(compatibility)
        if not constraints or any(constraint is None for constraint in constraints):
            return False

        if any(constraint.matches(version) for constraint in constraints):
            return False

        return all(constraint.is_exceeded_by(version) for constraint in constraints)
