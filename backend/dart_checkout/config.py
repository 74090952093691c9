from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    eager_table: bool = True
    max_routes: int = 6
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.max_routes <= 0:
            raise ValueError("max_routes must be > 0")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"unknown log level: {self.log_level}")

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            eager_table=os.getenv("CHECKOUT_EAGER_TABLE", "true").lower() in _TRUTHY,
            max_routes=int(os.getenv("CHECKOUT_MAX_ROUTES", "6")),
            log_level=os.getenv("CHECKOUT_LOG_LEVEL", "INFO"),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
