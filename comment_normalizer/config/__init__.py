"""Configuration module for the comment normalizer."""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
