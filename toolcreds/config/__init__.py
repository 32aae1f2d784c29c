"""Configuration loading for toolcreds.

Usage:
    from toolcreds.config import get_settings

    if get_settings().credentials.garbage_collection_enabled:
        ...
"""

from functools import lru_cache

from toolcreds.config.loader import load_config
from toolcreds.config.settings import Settings, settings_from_files


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings; `get_settings.cache_clear()` forces a reload."""
    return settings_from_files(load_config())


def reload_settings() -> Settings:
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
