# SPDX-License-Identifier: MIT
"""Strict Semantic Versioning 2.0.0 parsing, comparison and rendering.

Example:
    >>> from strict_semver import Version, parse_version, compare_versions
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    'alpha.1'
    >>>
    >>> max(Version(1, 0, 0), parse_version("2.0.0-alpha")).to_canonical_string()
    '2.0.0-alpha'
    >>>
    >>> compare_versions("1.0.0-alpha+001", "1.0.0-alpha+exp.sha.5114f85")
    0
"""

__version__ = "0.1.0"

from .config import ParserConfig
from .errors import (
    ConfigError,
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
    AlphanumericIdentifier,
    NumericIdentifier,
    PreReleaseIdentifier,
)
from .semver import (
    Version,
    parse_version,
    is_valid_semver,
    SEMVER_PATTERN,
)
from .compare import (
    compare_versions,
    version_key,
)
# Imported after the .compare submodule so the function, not the module,
# is bound to the package attribute ``compare``.
from .precedence import compare

__all__ = [
    # Version value and parsing
    "Version",
    "NumericIdentifier",
    "AlphanumericIdentifier",
    "PreReleaseIdentifier",
    "parse_version",
    "is_valid_semver",
    "SEMVER_PATTERN",
    # Version comparison
    "compare",
    "compare_versions",
    "version_key",
    # Configuration
    "ParserConfig",
    # Errors
    "ParseError",
    "MissingCoreComponent",
    "ExtraCoreComponent",
    "NonNumericCore",
    "LeadingZero",
    "CoreComponentOverflow",
    "MalformedPreRelease",
    "PreReleaseLeadingZero",
    "PreReleaseOverflow",
    "MalformedBuildMetadata",
    "InvalidIdentifierCharacter",
    "ConfigError",
]
