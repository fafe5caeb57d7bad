# SPDX-License-Identifier: MIT
"""Version precedence as defined by SemVer 2.0.0, section 11.

Build metadata never takes part in any of these comparisons.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

from .identifiers import NumericIdentifier, PreReleaseIdentifier

if TYPE_CHECKING:
    from .semver import Version


def _sign(left: Any, right: Any) -> int:
    """Return -1, 0 or 1 as left is below, equal to or above right."""
    if left == right:
        return 0
    return -1 if left < right else 1


def compare_identifiers(left: PreReleaseIdentifier, right: PreReleaseIdentifier) -> int:
    """Compare two pre-release identifiers.

    Numeric identifiers compare by value, alphanumeric ones by ASCII order,
    and a numeric identifier always sorts below an alphanumeric one.
    """
    if isinstance(left, NumericIdentifier):
        if isinstance(right, NumericIdentifier):
            return _sign(left.value, right.value)
        return -1
    if isinstance(right, NumericIdentifier):
        return 1
    return _sign(left.text, right.text)


def compare_pre_release(
    left: Sequence[PreReleaseIdentifier], right: Sequence[PreReleaseIdentifier]
) -> int:
    """Compare two pre-release identifier sequences.

    An empty sequence means "no pre-release", which outranks any pre-release.
    Otherwise identifiers are compared pairwise and, if one sequence is a
    strict prefix of the other, the shorter one is lower.
    """
    if not left and not right:
        return 0
    if not left:
        return 1  # Release > pre-release
    if not right:
        return -1  # Pre-release < release

    for ours, theirs in zip(left, right):
        result = compare_identifiers(ours, theirs)
        if result:
            return result

    return _sign(len(left), len(right))


def compare(left: "Version", right: "Version") -> int:
    """Compare two versions by precedence.

    Returns:
        -1 if left < right
        0 if left and right have equal precedence
        1 if left > right
    """
    for attr in ("major", "minor", "patch"):
        result = _sign(getattr(left, attr), getattr(right, attr))
        if result:
            return result

    return compare_pre_release(left.pre_release, right.pre_release)


def precedence_key(version: "Version") -> tuple:
    """Return a sort key that orders versions exactly like :func:`compare`."""
    if not version.pre_release:
        pre_release_key: tuple = (1,)
    else:
        parts = []
        for identifier in version.pre_release:
            if isinstance(identifier, NumericIdentifier):
                parts.append((0, identifier.value))
            else:
                parts.append((1, identifier.text))
        pre_release_key = (0, tuple(parts))

    return (version.major, version.minor, version.patch, pre_release_key)
