"""
File service constants and settings.

This module contains the defaults used to select and configure the file
service adapter, and the typed settings structure built from configuration.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping


class FileServiceConfig:
    """Constants for the file service facade and its adapters."""

    DEFAULT_ADAPTER: str = "local"
    """Adapter used when the configuration does not name one."""

    DIRECTORY_MODE: int = 0o775
    """Permission bits for directories created by the local adapter."""

    CLASS_NAME_KEY: str = "file_service_class_name"
    """Configuration key selecting the adapter (registered name or dotted class path)."""

    CONFIGURATION_KEY: str = "configuration"
    """Configuration key holding the adapter options in YAML files."""

    ERROR_EVENT: str = "error"
    """Event fired when the adapter cannot be initialized."""

    DEFAULT_LOG_FILE_NAME: str = "file_service.log"


@dataclass
class FileServiceSettings:
    """Adapter selection and the keyword options passed to its constructor."""

    adapter: str = FileServiceConfig.DEFAULT_ADAPTER
    options: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FileServiceSettings":
        """
        Build settings from a flat mapping.

        The adapter name is taken from the class name key when it is present
        and not empty; every other key becomes an adapter option. A nested
        configuration mapping, as written in YAML files, is merged into the
        options.

        Args:
            data: The configuration mapping

        Returns:
            The settings
        """
        options = dict(data)
        adapter = options.pop(FileServiceConfig.CLASS_NAME_KEY, None) or FileServiceConfig.DEFAULT_ADAPTER
        nested = options.pop(FileServiceConfig.CONFIGURATION_KEY, None)
        if isinstance(nested, Mapping):
            options.update(nested)
        elif nested is not None:
            raise ValueError(f"'{FileServiceConfig.CONFIGURATION_KEY}' must be a mapping, got {type(nested).__name__}")
        return cls(adapter=str(adapter), options=options)
