"""
Command line interface for the file service.
"""

from .cli import app

__all__ = ["app"]
