"""Configuration loading for Switchboard.

Usage:
    from switchboard.config import get_settings

    settings = get_settings()
    ttl = settings.recognition.cache.ttl_seconds
"""

from functools import lru_cache

from switchboard.config.loader import load_config
from switchboard.config.settings import Settings, set_toml_config


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the process-wide settings instance.

    The result is cached; call ``reload_settings()`` after changing
    configuration files or environment variables.
    """
    set_toml_config(load_config())
    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
