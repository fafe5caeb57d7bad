# SPDX-License-Identifier: MIT
"""Exceptions raised while parsing semantic versions.

Every grammar violation has its own exception class so callers can tell
the failures apart without inspecting messages. All of them derive from
:class:`ParseError`, which in turn is a :class:`ValueError`.
"""

from __future__ import annotations

from typing import Optional


class ParseError(ValueError):
    """Raised when a string is not a valid semantic version.

    Attributes:
        version: The text that failed to parse
        segment: The offending part of the text, if one can be singled out
        position: Index into ``version`` where the offending part starts
        message: Human-readable description of the failure
    """

    def __init__(
        self,
        version: str,
        message: str = "",
        segment: Optional[str] = None,
        position: Optional[int] = None,
    ):
        self.version = version
        self.segment = segment
        self.position = position
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)

    @property
    def kind(self) -> str:
        """Name of the failure, e.g. ``"LeadingZero"``."""
        return type(self).__name__


class MissingCoreComponent(ParseError):
    """The core has fewer than three dot-separated fields."""


class ExtraCoreComponent(ParseError):
    """The core has more than three dot-separated fields."""


class NonNumericCore(ParseError):
    """A core field is empty or contains something other than ASCII digits."""


class LeadingZero(ParseError):
    """A core field has a leading zero."""


class CoreComponentOverflow(ParseError):
    """A core field does not fit in the configured integer width."""


class MalformedPreRelease(ParseError):
    """The pre-release section, or one of its identifiers, is empty."""


class PreReleaseLeadingZero(ParseError):
    """A numeric pre-release identifier has a leading zero."""


class PreReleaseOverflow(ParseError):
    """A numeric pre-release identifier is too long to convert to an integer."""


class MalformedBuildMetadata(ParseError):
    """The build metadata section, or one of its identifiers, is empty."""


class InvalidIdentifierCharacter(ParseError):
    """A pre-release or build identifier contains a character outside [0-9A-Za-z-]."""


class ConfigError(Exception):
    """Raised when parser configuration is invalid."""

    pass
