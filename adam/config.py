"""Runtime settings loaded from the environment."""

from __future__ import annotations

import dataclasses
import os
from functools import lru_cache


@dataclasses.dataclass(frozen=True)
class Settings:
    """Configuration for the command service and its entry points."""

    history_limit: int = 100
    default_priority: int = 1
    default_location_id: str = "default"
    mode: str = "live"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from the environment with development defaults."""

    history_limit = int(os.getenv("ADAM_HISTORY_LIMIT", "100"))
    default_priority = int(os.getenv("ADAM_DEFAULT_PRIORITY", "1"))
    if history_limit < 1:
        raise RuntimeError("ADAM_HISTORY_LIMIT must be at least 1.")
    if default_priority < 0:
        raise RuntimeError("ADAM_DEFAULT_PRIORITY must not be negative.")
    return Settings(
        history_limit=history_limit,
        default_priority=default_priority,
        default_location_id=os.getenv("ADAM_DEFAULT_LOCATION_ID", "default"),
        mode=os.getenv("ADAM_MODE", "live"),
    )


def reset_settings_cache() -> None:
    """Clear cached settings; useful in tests when env vars change."""

    get_settings.cache_clear()
