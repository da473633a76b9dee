"""
Utility functions for the file service.

This module provides logging setup helpers.
"""

from .logging import setup_logging, get_logger

__all__ = ["setup_logging", "get_logger"]
