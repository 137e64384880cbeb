"""Logging micro API for prism."""

from .lib import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
