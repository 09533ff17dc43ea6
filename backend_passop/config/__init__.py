"""
Configuration management for Backend PassOP.

Loads settings from environment variables and an optional project-root .env.
Exposes a single source of truth for store and server configuration.
"""

from backend_passop.config.settings import Settings, get_settings  # noqa: F401

__all__ = ["Settings", "get_settings"]
