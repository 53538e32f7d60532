"""Configuration."""

from .settings import Settings, DEFAULT_BASE_URL

__all__ = ["Settings", "DEFAULT_BASE_URL"]
