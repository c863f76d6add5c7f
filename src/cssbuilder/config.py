from __future__ import annotations

import logging
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class CssBuilderConfig:
    log_level: str = "WARNING"
    combinators: tuple[str, ...] = (" ", ">", "+", "~")  # offered by the CLI only

    def __post_init__(self) -> None:
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @classmethod
    def from_env(cls) -> CssBuilderConfig:
        """Build a config from ``CSSBUILDER_LOG_LEVEL``; raises ValueError on an unknown level."""
        return cls(log_level=os.environ.get("CSSBUILDER_LOG_LEVEL", cls.log_level).upper())
