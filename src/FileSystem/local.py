"""
Local file service implementation.

This module provides a file service adapter for the local file system.
"""

import logging
import os
import posixpath
from typing import Iterable, Iterator, List, Optional, Set, Tuple, Union

import fsspec

from Configuration import FileServiceConfig
from FileSystem.base import AbstractFileService, PathLike


class LocalFileService(AbstractFileService):
    """
    Implementation of AbstractFileService for the local file system.

    File content goes through the fsspec "file" filesystem; directory
    creation and listing use os directly so the directory mode and real
    path resolution stay under our control.
    """

    def __init__(self, dir_mode: int = FileServiceConfig.DIRECTORY_MODE) -> None:
        """
        Initialize the local file service.

        Args:
            dir_mode: Permission bits for directories created by mkdir
        """
        self.logger = logging.getLogger(__name__)
        self.dir_mode = dir_mode
        self.fs = fsspec.filesystem("file")

    def initialize(self) -> None:
        """Validate options once the facade has set them."""
        if not isinstance(self.dir_mode, int) or not 0 <= self.dir_mode <= 0o7777:
            raise ValueError(f"Invalid directory mode: {self.dir_mode!r}")
        self.logger.debug(f"Local file service ready (dir_mode={oct(self.dir_mode)})")

    def write(self, data: Union[bytes, str], filename: str = '', upload_dir: PathLike = '') -> Optional[str]:
        """
        Write data to upload_dir/filename.

        Args:
            data: The content to write; strings are encoded as UTF-8
            filename: The name of the file
            upload_dir: The directory, which must already exist

        Returns:
            upload_dir followed by a separator, or None if the write failed
        """
        upload_dir = str(upload_dir)
        path = f"{upload_dir}/{filename}"
        if isinstance(data, str):
            data = data.encode('utf-8')

        self.logger.debug(f"Writing {len(data)} bytes to: {path}")
        try:
            self.fs.pipe_file(path, data)
        except OSError as e:
            self.logger.warning(f"Cannot write file {path}: {e}")
            return None

        return f"{upload_dir}/"

    def exists(self, path: PathLike) -> bool:
        return self.fs.exists(str(path))

    def read(self, path: PathLike) -> Optional[bytes]:
        """
        Read a file.

        Args:
            path: The path of the file to read

        Returns:
            The file content, or None if it cannot be read
        """
        self.logger.debug(f"Reading file: {path}")
        try:
            return self.fs.cat_file(str(path))
        except OSError as e:
            self.logger.warning(f"Cannot read file {path}: {e}")
            return None

    def delete(self, path: PathLike) -> bool:
        """
        Delete a file.

        No existence check is done first; removing a missing path or a
        directory fails and returns False.

        Args:
            path: The file to delete

        Returns:
            True if the file was removed
        """
        self.logger.debug(f"Deleting file: {path}")
        try:
            self.fs.rm_file(str(path))
        except OSError as e:
            self.logger.warning(f"Cannot delete file {path}: {e}")
            return False
        return True

    def is_dir(self, path: PathLike) -> bool:
        return self.fs.isdir(str(path))

    def _local_path(self, path: PathLike) -> str:
        """Path as the fsspec local filesystem resolves it ("~" and "file://" handled)."""
        return self.fs._strip_protocol(str(path))

    def mkdir(self, path: PathLike) -> bool:
        """
        Create a directory with its missing parents.

        Args:
            path: The directory to create

        Returns:
            True if created, False if it already existed or creation failed
        """
        if self.exists(path):
            return False

        self.logger.debug(f"Creating directory: {path}")
        try:
            os.makedirs(self._local_path(path), mode=self.dir_mode)
        except OSError as e:
            self.logger.warning(f"Cannot create directory {path}: {e}")
            return False
        return True

    def _directory_entries(self, path: str) -> List[Tuple[str, str]]:
        """Walked and resolved paths of the direct entries of a directory."""
        with os.scandir(path) as entries:
            walked = [os.path.join(path, entry.name) for entry in entries]
        return [(p, os.path.realpath(p)) for p in walked]

    def _walk_files(self, path: str, restrict: Set[str], visited: Set[str], strict: bool) -> Iterator[Tuple[str, str]]:
        """
        Yield (walked path, resolved path) for every file below path.

        An unreadable directory raises when strict, otherwise it is logged
        and skipped while its siblings are still walked.
        """
        visited.add(os.path.realpath(path))
        try:
            entries = self._directory_entries(path)
        except OSError as e:
            if strict:
                raise
            self.logger.warning(f"Cannot list directory {path}: {e}")
            return

        for walked_path, full_path in entries:
            if os.path.isfile(full_path):
                yield walked_path, full_path
            elif os.path.isdir(full_path):
                # Exact match only: aliases of a restricted directory are still walked
                if full_path in restrict or full_path in visited:
                    continue
                yield from self._walk_files(walked_path, restrict, visited, strict)

    def dir(self, path: PathLike, restrict: Optional[Iterable[PathLike]] = None) -> List[str]:
        """
        List every file below a directory, recursively.

        Entries are resolved to real paths. A directory whose resolved path is
        in restrict is skipped together with its content. A sub-directory that
        cannot be read is logged and skipped; the rest is still listed.

        Args:
            path: The directory to list
            restrict: Resolved directory paths to exclude

        Returns:
            A sorted list of absolute file paths; empty if path is not a directory
        """
        path = self._local_path(path)
        if not self.is_dir(path):
            self.logger.debug(f"Not a directory, nothing to list: {path}")
            return []

        restricted = {str(p) for p in restrict} if restrict else set()
        self.logger.debug(f"Listing files under: {path} (restricted: {len(restricted)})")

        files = sorted(full_path for _, full_path in self._walk_files(path, restricted, set(), strict=False))

        self.logger.debug(f"Found {len(files)} files")
        return files

    def _copy_file(self, src: str, dst: str) -> bool:
        try:
            self.fs.cp_file(src, dst)
        except OSError as e:
            self.logger.warning(f"Cannot copy {src} to {dst}: {e}")
            return False
        return True

    def copy_path(self, src: PathLike, dst: PathLike) -> bool:
        """
        Copy a file to a file path, or the content of a directory into a directory.

        A directory is only copied into an existing directory; any other
        destination is refused before anything is written. Files keep their
        place relative to the source, symlinked ones included. An unreadable
        sub-directory or a failed file copy stops the copy and returns False,
        leaving the files copied so far in place.

        Args:
            src: The source file or directory
            dst: The destination file path, or an existing directory

        Returns:
            True if everything was copied, False otherwise
        """
        src = self._local_path(src).rstrip('/') or '/'
        dst = self._local_path(dst)
        if not self.exists(src):
            self.logger.debug(f"Copy source not found: {src}")
            return False

        if not self.is_dir(src):
            self.logger.debug(f"Copying file {src} to {dst}")
            return self._copy_file(src, dst)

        if not self.is_dir(dst):
            self.logger.warning(f"Cannot copy directory {src} to {dst}: destination is not a directory")
            return False

        self.logger.debug(f"Copying directory {src} into {dst}")
        try:
            files = sorted(self._walk_files(src, {os.path.realpath(dst)}, set(), strict=True))
        except OSError as e:
            self.logger.warning(f"Cannot copy directory {src}: {e}")
            return False

        for walked_path, full_path in files:
            file_name = posixpath.basename(walked_path)
            target_dir = posixpath.join(dst, self.relative_path(walked_path, file_name, src))
            self.mkdir(target_dir)
            if not self._copy_file(full_path, posixpath.join(target_dir, file_name)):
                return False

        return True
