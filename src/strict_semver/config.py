# SPDX-License-Identifier: MIT
"""Parser configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import ConfigError

CORE_BITS_ENV = "STRICT_SEMVER_CORE_BITS"

# 2 ** 14000 has 4215 digits, under the interpreter's default 4300-digit
# limit on int/str conversion
MAX_CORE_BITS = 14000


@dataclass(frozen=True)
class ParserConfig:
    """Limits applied while parsing version strings.

    Attributes:
        core_bits: Width of each of major, minor and patch. A core field
            of ``2 ** core_bits`` or more is rejected with
            ``CoreComponentOverflow``. At most ``MAX_CORE_BITS``.
    """

    core_bits: int = 128

    def __post_init__(self) -> None:
        if isinstance(self.core_bits, bool) or not isinstance(self.core_bits, int):
            raise ConfigError(f"core_bits must be an integer, got {self.core_bits!r}")
        if self.core_bits <= 0:
            raise ConfigError(f"core_bits must be positive, got {self.core_bits}")
        if self.core_bits > MAX_CORE_BITS:
            raise ConfigError(f"core_bits must be at most {MAX_CORE_BITS}, got {self.core_bits}")

    @property
    def max_core_value(self) -> int:
        """Largest value accepted for a core field."""
        return (1 << self.core_bits) - 1

    @classmethod
    def from_env(cls) -> "ParserConfig":
        """Create configuration from environment variables."""
        raw = os.getenv(CORE_BITS_ENV)
        if not raw:
            return cls()

        try:
            core_bits = int(raw)
        except ValueError as e:
            raise ConfigError(f"{CORE_BITS_ENV} must be an integer, got {raw!r}") from e

        return cls(core_bits=core_bits)


DEFAULT_CONFIG = ParserConfig()
