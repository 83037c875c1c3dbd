"""Configuration: settings and logging setup."""

from .logging import configure_logging
from .settings import InfragraphSettings

__all__ = ["InfragraphSettings", "configure_logging"]
