# SPDX-License-Identifier: MIT
"""Semantic version parsing and the Version value type.

Supports MAJOR.MINOR.PATCH with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92, -rc.1
- Build metadata: +001, +exp.sha.5114f85, +20130313144700

Parsing is a fixed sequence of splits on the first ``+``, the first ``-``
and then ``.``. Each grammar violation is reported with its own exception
class from :mod:`strict_semver.errors`.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Optional

from .config import DEFAULT_CONFIG, ParserConfig
from .errors import (
    CoreComponentOverflow,
    ExtraCoreComponent,
    InvalidIdentifierCharacter,
    LeadingZero,
    MalformedBuildMetadata,
    MalformedPreRelease,
    MissingCoreComponent,
    NonNumericCore,
    ParseError,
    PreReleaseLeadingZero,
    PreReleaseOverflow,
)
from .identifiers import (
    IDENTIFIER_CHARACTERS,
    AlphanumericIdentifier,
    NumericIdentifier,
    PreReleaseIdentifier,
    is_ascii_digits,
)
from .precedence import compare

logger = logging.getLogger(__name__)

# Semantic versioning regex pattern (SemVer 2.0.0 compliant)
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9]\d*)"
    r"\.(?P<minor>0|[1-9]\d*)"
    r"\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$",
    re.ASCII,
)

_CORE_NAMES = ("major", "minor", "patch")


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a semantic version.

    ``==``, ``<`` and friends compare by precedence, so two versions that
    differ only in build metadata are equal (and hash alike) even though
    they are different data. Use :meth:`is_identical` to compare the full
    value including build metadata.

    Constructing a Version directly does not validate anything; the caller
    is trusted to pass non-negative integers and well-formed identifiers.
    Use :func:`parse_version` or :meth:`from_parts` for validated input.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        pre_release: Pre-release identifiers, empty for a release
        build_metadata: Build metadata identifiers, empty if there are none
    """

    major: int
    minor: int
    patch: int
    pre_release: tuple[PreReleaseIdentifier, ...] = ()
    build_metadata: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "pre_release", tuple(self.pre_release))
        object.__setattr__(self, "build_metadata", tuple(self.build_metadata))

    @classmethod
    def parse(cls, version_string: str, config: Optional[ParserConfig] = None) -> "Version":
        """Parse a version string. See :func:`parse_version`."""
        return parse_version(version_string, config)

    @classmethod
    def from_parts(
        cls,
        major: int,
        minor: int,
        patch: int,
        pre_release: Optional[str] = None,
        build_metadata: Optional[str] = None,
        config: Optional[ParserConfig] = None,
    ) -> "Version":
        """Build a Version from its parts, validating each one.

        Args:
            major: Major version number
            minor: Minor version number
            patch: Patch version number
            pre_release: Dotted pre-release text, e.g. "alpha.1"
            build_metadata: Dotted build metadata text, e.g. "exp.sha.5114f85"
            config: Parser limits, defaults to ``ParserConfig()``

        Raises:
            ParseError: If any part breaks the grammar

        Examples:
            >>> str(Version.from_parts(1, 0, 0, "rc.1", "build.5"))
            '1.0.0-rc.1+build.5'
        """
        config = config or DEFAULT_CONFIG

        core_text = f"{major}.{minor}.{patch}"
        text = core_text
        pre_start = build_start = None
        if pre_release is not None:
            pre_start = len(text) + 1
            text += f"-{pre_release}"
        if build_metadata is not None:
            build_start = len(text) + 1
            text += f"+{build_metadata}"

        try:
            core = _parse_core(core_text, text, config)

            identifiers: tuple[PreReleaseIdentifier, ...] = ()
            if pre_release is not None:
                segments = _split_section(
                    pre_release, pre_start, text, MalformedPreRelease, "pre-release"
                )
                identifiers = tuple(
                    _parse_pre_release_identifier(segment, position, text)
                    for segment, position in segments
                )

            build: tuple[str, ...] = ()
            if build_metadata is not None:
                segments = _split_section(
                    build_metadata, build_start, text, MalformedBuildMetadata, "build metadata"
                )
                build = _parse_build_metadata(segments, text)
        except ParseError as e:
            logger.debug("Rejected version parts %r: %s", text, e.kind)
            raise

        return cls(*core, pre_release=identifiers, build_metadata=build)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) == 0

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) >= 0

    def __hash__(self) -> int:
        # Must agree with __eq__, so build metadata is left out
        return hash((self.major, self.minor, self.patch, self.pre_release))

    def __str__(self) -> str:
        return self.to_canonical_string()

    def is_identical(self, other: "Version") -> bool:
        """Return True if both versions are equal including build metadata."""
        return self == other and self.build_metadata == other.build_metadata

    def to_canonical_string(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release:
            version += "-" + ".".join(str(identifier) for identifier in self.pre_release)
        if self.build_metadata:
            version += "+" + ".".join(self.build_metadata)
        return version

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.pre_release)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def prerelease(self) -> Optional[str]:
        """Return the dotted pre-release text, or None for a release."""
        if not self.pre_release:
            return None
        return ".".join(str(identifier) for identifier in self.pre_release)

    @property
    def build(self) -> Optional[str]:
        """Return the dotted build metadata text, or None if there is none."""
        if not self.build_metadata:
            return None
        return ".".join(self.build_metadata)


def _split_section(
    section: str,
    offset: int,
    version: str,
    error: type[ParseError],
    label: str,
) -> list[tuple[str, int]]:
    """Split a pre-release or build section on dots.

    Returns (segment, position) pairs where position indexes into ``version``.
    """
    if not section:
        raise error(version, f"Empty {label} in {version!r}", segment="", position=offset)

    segments = []
    position = offset
    for segment in section.split("."):
        if not segment:
            raise error(
                version,
                f"Empty {label} identifier at position {position} in {version!r}",
                segment="",
                position=position,
            )
        segments.append((segment, position))
        position += len(segment) + 1
    return segments


def _check_identifier_characters(segment: str, position: int, version: str, label: str) -> None:
    for index, char in enumerate(segment):
        if char not in IDENTIFIER_CHARACTERS:
            raise InvalidIdentifierCharacter(
                version,
                f"Invalid character {char!r} in {label} identifier {segment!r}",
                segment=segment,
                position=position + index,
            )


def _parse_core_component(
    name: str, field: str, position: int, version: str, config: ParserConfig
) -> int:
    if not is_ascii_digits(field):
        raise NonNumericCore(
            version,
            f"{name.capitalize()} version {field!r} is not a non-negative integer",
            segment=field,
            position=position,
        )
    if len(field) > 1 and field[0] == "0":
        raise LeadingZero(
            version,
            f"{name.capitalize()} version {field!r} has a leading zero",
            segment=field,
            position=position,
        )

    # int() refuses digit strings past the interpreter's conversion limit,
    # all of which are wider than MAX_CORE_BITS
    try:
        value = int(field)
    except ValueError:
        value = None
    if value is None or value > config.max_core_value:
        raise CoreComponentOverflow(
            version,
            f"{name.capitalize()} version of {len(field)} digits exceeds {config.core_bits} bits",
            segment=field,
            position=position,
        )
    return value


def _parse_core(core: str, version: str, config: ParserConfig) -> tuple[int, int, int]:
    fields = core.split(".")
    if len(fields) < 3:
        raise MissingCoreComponent(
            version,
            f"Expected MAJOR.MINOR.PATCH, found {len(fields)} component(s) in {core!r}",
            segment=core,
            position=0,
        )
    if len(fields) > 3:
        extra_position = sum(len(field) + 1 for field in fields[:3])
        raise ExtraCoreComponent(
            version,
            f"Expected MAJOR.MINOR.PATCH, found {len(fields)} components in {core!r}",
            segment=".".join(fields[3:]),
            position=extra_position,
        )

    values = []
    position = 0
    for name, field in zip(_CORE_NAMES, fields):
        values.append(_parse_core_component(name, field, position, version, config))
        position += len(field) + 1
    major, minor, patch = values
    return major, minor, patch


def _parse_pre_release_identifier(segment: str, position: int, version: str) -> PreReleaseIdentifier:
    _check_identifier_characters(segment, position, version, "pre-release")

    if not is_ascii_digits(segment):
        return AlphanumericIdentifier(segment)

    if len(segment) > 1 and segment[0] == "0":
        raise PreReleaseLeadingZero(
            version,
            f"Numeric pre-release identifier {segment!r} has a leading zero",
            segment=segment,
            position=position,
        )

    try:
        value = int(segment)
    except ValueError as e:
        raise PreReleaseOverflow(
            version,
            f"Numeric pre-release identifier of {len(segment)} digits is too long to convert",
            segment=segment,
            position=position,
        ) from e
    return NumericIdentifier(value)


def _parse_build_metadata(segments: Iterable[tuple[str, int]], version: str) -> tuple[str, ...]:
    build = []
    for segment, position in segments:
        _check_identifier_characters(segment, position, version, "build metadata")
        build.append(segment)
    return tuple(build)


def _parse(version_string: str, config: ParserConfig) -> Version:
    # Everything after the first "+" is build metadata, even another "+"
    head, plus, build_text = version_string.partition("+")
    build_segments: list[tuple[str, int]] = []
    if plus:
        build_segments = _split_section(
            build_text, len(head) + 1, version_string, MalformedBuildMetadata, "build metadata"
        )

    # The core never contains "-", so the first one starts the pre-release
    core, dash, pre_text = head.partition("-")
    pre_segments: list[tuple[str, int]] = []
    if dash:
        pre_segments = _split_section(
            pre_text, len(core) + 1, version_string, MalformedPreRelease, "pre-release"
        )

    major, minor, patch = _parse_core(core, version_string, config)

    pre_release = tuple(
        _parse_pre_release_identifier(segment, position, version_string)
        for segment, position in pre_segments
    )
    build_metadata = _parse_build_metadata(build_segments, version_string)

    return Version(major, minor, patch, pre_release, build_metadata)


def parse_version(version_string: str, config: Optional[ParserConfig] = None) -> Version:
    """Parse a semantic version string into a Version object.

    The input is taken literally: surrounding whitespace, a leading "v"
    or any other decoration makes it invalid.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])
        config: Parser limits, defaults to ``ParserConfig()``

    Returns:
        A Version object with parsed components

    Raises:
        ParseError: If the string does not follow semantic versioning. The
            concrete subclass names the rule that was broken.

    Examples:
        >>> parse_version("1.2.3").base_version
        '1.2.3'

        >>> parse_version("1.0.0-alpha.1").prerelease
        'alpha.1'

        >>> parse_version("2.0.0-rc.1+build.456").build_metadata
        ('build', '456')
    """
    if not isinstance(version_string, str):
        raise ParseError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    try:
        return _parse(version_string, config or DEFAULT_CONFIG)
    except ParseError as e:
        logger.debug("Rejected version %r: %s", version_string, e.kind)
        raise


def is_valid_semver(version_string: str, config: Optional[ParserConfig] = None) -> bool:
    """Check if a string is a valid semantic version.

    Args:
        version_string: The string to validate
        config: Parser limits, defaults to ``ParserConfig()``

    Returns:
        True if the string is a valid semantic version, False otherwise

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    if not isinstance(version_string, str):
        return False
    try:
        parse_version(version_string, config)
    except ParseError:
        return False
    return True
