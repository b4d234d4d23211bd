"""Utility modules for the welcome bot."""

from welcomebot.utils.logging import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]
