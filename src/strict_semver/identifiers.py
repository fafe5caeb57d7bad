# SPDX-License-Identifier: MIT
"""Pre-release identifier variants.

A pre-release identifier is either numeric (``"0"``, ``"11"``) or
alphanumeric (``"alpha"``, ``"0A"``, ``"--"``). The two kinds order
differently, so they are kept as distinct types instead of being
re-classified from raw text at comparison time.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Union

# Alphabet shared by pre-release and build identifiers
IDENTIFIER_CHARACTERS = frozenset(string.ascii_letters + string.digits + "-")

_DIGITS = frozenset(string.digits)


def is_ascii_digits(text: str) -> bool:
    """Return True if ``text`` is non-empty and made only of 0-9."""
    return bool(text) and all(char in _DIGITS for char in text)


@dataclass(frozen=True, slots=True)
class NumericIdentifier:
    """A pre-release identifier made only of digits, held as its value."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class AlphanumericIdentifier:
    """A pre-release identifier containing at least one non-digit."""

    text: str

    def __str__(self) -> str:
        return self.text


PreReleaseIdentifier = Union[NumericIdentifier, AlphanumericIdentifier]
