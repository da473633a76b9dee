"""
File service facade.

This module provides the FileService entry point, which owns one adapter
selected by configuration and forwards every file operation to it.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Union

from Configuration import FileServiceConfig, FileServiceSettings
from Events import EventDispatcher, dispatcher as default_dispatcher
from FileSystem.base import AbstractFileService, PathLike
from FileSystem.errors import FileServiceNotInitialisedError, FileServiceSetupError
from FileSystem.registry import create_file_service


class FileService:
    """
    Facade over a configurable file service adapter.

    The adapter is resolved by init(). When it cannot be created an error
    event is fired with the facade and a message, and init() returns False;
    file operations then raise FileServiceNotInitialisedError.
    """

    id = "fs"

    def __init__(
        self,
        file_service_class_name: str = FileServiceConfig.DEFAULT_ADAPTER,
        configuration: Optional[Mapping[str, Any]] = None,
        dispatcher: Optional[EventDispatcher] = None,
    ) -> None:
        """
        Create the facade without resolving the adapter.

        Args:
            file_service_class_name: Registered adapter name or dotted class path
            configuration: Keyword options for the adapter constructor
            dispatcher: Event dispatcher for error events (process-wide one by default)
        """
        self.logger = logging.getLogger(__name__)
        self.file_service_class_name = file_service_class_name
        self.configuration = dict(configuration or {})
        self.dispatcher = dispatcher or default_dispatcher
        self._file_service: Optional[AbstractFileService] = None

    @classmethod
    def from_settings(cls, settings: FileServiceSettings, dispatcher: Optional[EventDispatcher] = None) -> "FileService":
        return cls(settings.adapter, settings.options, dispatcher)

    def configure(self, entity_configuration: Mapping[str, Any]) -> None:
        """
        Replace the configuration from a flat mapping.

        A non-empty class name key selects the adapter; the remaining keys
        become adapter options.

        Args:
            entity_configuration: The configuration mapping
        """
        configuration = dict(entity_configuration)
        class_name = configuration.pop(FileServiceConfig.CLASS_NAME_KEY, None)
        if class_name:
            self.file_service_class_name = class_name
        self.configuration = configuration

    def init(self) -> bool:
        """
        Resolve and initialize the configured adapter.

        Returns:
            True if the adapter is ready, False if an error event was fired
        """
        if self.load_external_service(self.file_service_class_name):
            return True

        self.dispatcher.fire(
            FileServiceConfig.ERROR_EVENT,
            self,
            f"Cannot initialize file system adapter[{self.file_service_class_name}]",
        )
        return False

    def load_external_service(self, service_class_name: str) -> bool:
        """
        Create the adapter instance.

        Args:
            service_class_name: Registered adapter name or dotted class path

        Returns:
            True if the adapter has been created and initialized
        """
        self._file_service = None
        try:
            self._file_service = create_file_service(service_class_name, self.configuration)
        except FileServiceSetupError as e:
            self.logger.error(f"File service setup failed: {e}")
            return False

        self.logger.info(f"File service adapter initialized: {service_class_name}")
        return True

    @property
    def file_service(self) -> AbstractFileService:
        if self._file_service is None:
            raise FileServiceNotInitialisedError(
                f"File service adapter [{self.file_service_class_name}] is not initialized"
            )
        return self._file_service

    @property
    def is_initialized(self) -> bool:
        return self._file_service is not None

    def write(self, data: Union[bytes, str], filename: str = '', upload_dir: PathLike = '') -> Optional[str]:
        return self.file_service.write(data, filename, upload_dir)

    def exists(self, path: PathLike) -> bool:
        return self.file_service.exists(path)

    def read(self, path: PathLike) -> Optional[bytes]:
        return self.file_service.read(path)

    def delete(self, path: PathLike) -> bool:
        return self.file_service.delete(path)

    def extension(self, path: PathLike) -> Optional[str]:
        return self.file_service.extension(path)

    def is_dir(self, path: PathLike) -> bool:
        return self.file_service.is_dir(path)

    def dir(self, path: PathLike, restrict: Optional[Iterable[PathLike]] = None) -> List[str]:
        return self.file_service.dir(path, restrict)

    def mime(self, path: PathLike) -> Optional[str]:
        return self.file_service.mime(path)

    def relative_path(self, full_path: PathLike, file_name: str, base_path: Optional[PathLike] = None) -> str:
        return self.file_service.relative_path(full_path, file_name, base_path)

    def copy_path(self, src: PathLike, dst: PathLike) -> bool:
        return self.file_service.copy_path(src, dst)

    def mkdir(self, path: PathLike) -> bool:
        return self.file_service.mkdir(path)
