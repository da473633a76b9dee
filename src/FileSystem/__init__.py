"""
File service abstraction module.

This module provides a file service layer that forwards file operations to
a swappable storage adapter selected by configuration.
"""

from .base import AbstractFileService
from .errors import (
    AdapterConfigurationError,
    AdapterNotFoundError,
    FileServiceError,
    FileServiceNotInitialisedError,
    FileServiceSetupError,
)
from .local import LocalFileService
from .registry import create_file_service, register_file_service, resolve_file_service
from .service import FileService

__all__ = [
    "AbstractFileService",
    "LocalFileService",
    "FileService",
    "create_file_service",
    "register_file_service",
    "resolve_file_service",
    "FileServiceError",
    "FileServiceSetupError",
    "AdapterNotFoundError",
    "AdapterConfigurationError",
    "FileServiceNotInitialisedError",
]
