"""Core infrastructure utilities."""

from .config import SamplerSettings, get_settings
from .logging_config import configure_logging, get_logger

__all__ = [
    "SamplerSettings",
    "configure_logging",
    "get_logger",
    "get_settings",
]
