from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class BuilderConfig:
    strict_combinators: bool = False  # reject symbols other than ' ', '>', '+', '~'

    @classmethod
    def from_env(cls) -> BuilderConfig:
        """Create a config from SELECTORKIT_* environment variables."""
        raw = os.environ.get("SELECTORKIT_STRICT_COMBINATORS", "")
        return cls(strict_combinators=raw.strip().lower() in _TRUTHY)
