"""Core services for settings loading and logging."""

from .config import PlaceholderSettings, RenderSection, load_settings, named_colors
from .logging_setup import JsonFormatter, configure_logging, get_logger, reset_logging

__all__ = [
    "JsonFormatter",
    "PlaceholderSettings",
    "RenderSection",
    "configure_logging",
    "get_logger",
    "load_settings",
    "named_colors",
    "reset_logging",
]
