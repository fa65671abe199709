from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


@dataclass(frozen=True)
class BuilderConfig:
    consume_on_stringify: bool = False  # clear simple selectors after each read
    bracket_each_attribute: bool = False  # "[a][b]" instead of "[ab]"

    @classmethod
    def from_env(cls) -> BuilderConfig:
        """Create a config from CSSBUILDER_* environment variables.

        Unset variables fall back to the dataclass defaults.
        """
        return cls(
            consume_on_stringify=_env_flag("CSSBUILDER_CONSUME_ON_STRINGIFY"),
            bracket_each_attribute=_env_flag("CSSBUILDER_BRACKET_EACH_ATTRIBUTE"),
        )
