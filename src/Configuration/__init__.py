"""
Initializes the Configuration package.

This module provides centralized access to the file service constants,
the typed settings structure and the YAML loader.
"""

from .FileServiceConfig import FileServiceConfig, FileServiceSettings
from .ConfigLoader import ConfigLoader

__all__ = [
    "FileServiceConfig",
    "FileServiceSettings",
    "ConfigLoader",
]
