"""
Configuration package: environment-driven codec settings.
"""
from . import settings
from .settings import validate_config

__all__ = ["settings", "validate_config"]
