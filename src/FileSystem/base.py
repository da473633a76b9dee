"""
Base file service abstraction.

This module defines the abstract base class every file service adapter
implements, together with the path helpers shared by all adapters.
"""

import mimetypes
import posixpath
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List, Optional, Union

PathLike = Union[str, Path]


class AbstractFileService(ABC):
    """
    Abstract base class for file service adapters.

    Adapters implement the storage primitives (write, read, delete, listing,
    copy, directory creation). Path-only helpers such as extension and mime
    lookup are implemented here once for every adapter.
    """

    def initialize(self) -> None:
        """
        Hook called by the facade once the adapter has been constructed.

        The default implementation does nothing.
        """
        pass

    @abstractmethod
    def write(self, data: Union[bytes, str], filename: str = '', upload_dir: PathLike = '') -> Optional[str]:
        """
        Write data to a file inside a directory.

        Args:
            data: The content to write; strings are encoded as UTF-8
            filename: The name of the file to create or overwrite
            upload_dir: The directory the file is written to

        Returns:
            The directory path followed by a separator, or None if the write failed
        """
        pass

    @abstractmethod
    def exists(self, path: PathLike) -> bool:
        """
        Check if a file or directory exists.

        Args:
            path: The path to check

        Returns:
            True if the path exists, False otherwise
        """
        pass

    @abstractmethod
    def read(self, path: PathLike) -> Optional[bytes]:
        """
        Read the whole content of a file.

        Args:
            path: The path of the file to read

        Returns:
            The file content, or None if the file cannot be read
        """
        pass

    @abstractmethod
    def delete(self, path: PathLike) -> bool:
        """
        Delete a file.

        Args:
            path: The path of the file to delete

        Returns:
            True if the file was removed, False if it is absent or a directory
        """
        pass

    @abstractmethod
    def is_dir(self, path: PathLike) -> bool:
        """Check if path is a directory."""
        pass

    @abstractmethod
    def mkdir(self, path: PathLike) -> bool:
        """
        Create a directory and any missing parents.

        Args:
            path: The directory to create

        Returns:
            True if the directory was created, False if it already existed
            or could not be created
        """
        pass

    @abstractmethod
    def dir(self, path: PathLike, restrict: Optional[Iterable[PathLike]] = None) -> List[str]:
        """
        List every file below a directory, recursively.

        Args:
            path: The directory to list
            restrict: Resolved directory paths that are neither listed nor descended into

        Returns:
            A sorted list of absolute file paths
        """
        pass

    @abstractmethod
    def copy_path(self, src: PathLike, dst: PathLike) -> bool:
        """
        Copy a file to a file path, or a directory into a directory.

        Copying a directory onto a file path is not supported.

        Args:
            src: The source file or directory
            dst: The destination file path or existing directory

        Returns:
            True if everything was copied, False otherwise
        """
        pass

    def extension(self, path: PathLike) -> Optional[str]:
        """
        Get the extension of a file path.

        Args:
            path: The file path

        Returns:
            The extension without the leading dot, or None if there is none
        """
        name = posixpath.basename(str(path))
        stem, dot, extension = name.rpartition('.')
        if not dot or not extension:
            return None
        return extension

    def mime(self, path: PathLike) -> Optional[str]:
        """
        Guess the MIME type of a file from its name.

        Only the extension is looked at; the file content is never read, so
        the path does not need to exist.

        Args:
            path: The file path

        Returns:
            The MIME type, or None if it cannot be guessed
        """
        mime_type, _ = mimetypes.guess_type(str(path), strict=False)
        return mime_type

    def relative_path(self, full_path: PathLike, file_name: str, base_path: Optional[PathLike] = None) -> str:
        """
        Get the directory part of a path relative to a base path.

        Args:
            full_path: The full file or directory path
            file_name: The file name to remove from the end of full_path
            base_path: The base path to strip; defaults to the parent of full_path

        Returns:
            The relative directory ending with a separator, or an empty string
            when full_path sits directly in base_path
        """
        directory = str(full_path)
        if base_path is None:
            base_path = posixpath.dirname(directory.rstrip('/'))

        if file_name and directory.endswith(file_name):
            directory = directory[:-len(file_name)]

        prefix = str(base_path).rstrip('/') + '/'
        if directory.startswith(prefix):
            directory = directory[len(prefix):]

        if directory and not directory.endswith('/'):
            directory += '/'
        return directory
