"""
Local drive adapter mapping the virtual drive onto a host directory.
"""

import logging
import os
import shutil

from typing_extensions import override

from epsilon_shell.entities.virtual_path import DEFAULT_ROOT, VirtualPath, join
from epsilon_shell.exceptions import FileSystemError
from epsilon_shell.ports.files.virtual_file_system_port import VirtualFileSystemPort


class LocalDriveAdapter(VirtualFileSystemPort):
    """Virtual drive stored in a directory of the host file system."""

    def __init__(
        self,
        root: str,
        drive_prefix: str = DEFAULT_ROOT,
        logger: logging.Logger | None = None,
    ):
        """
        Initialize the adapter, creating the host directory if needed.

        Args:
            root: Host directory backing the drive
            drive_prefix: Virtual root of the drive, e.g. ``0:\\``
            logger: Logger instance to use for logging. If None, a default logger will be created.

        Raises:
            FileSystemError: If the host directory cannot be created
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._drive_prefix = drive_prefix
        try:
            os.makedirs(root, exist_ok=True)
        except OSError as e:
            raise FileSystemError(f"Cannot create drive root {root}: {e}")
        self._root = os.path.realpath(root)

    @property
    def root(self) -> str:
        return self._root

    def _to_host(self, path: str) -> str:
        """
        Translate a virtual path to a host path inside the drive root.

        Raises:
            FileSystemError: If the path is not on this drive or resolves outside of it
        """
        try:
            vpath = VirtualPath.parse(path, self._drive_prefix)
        except ValueError as e:
            raise FileSystemError(str(e))

        host = os.path.realpath(os.path.join(self._root, *vpath.parts))
        try:
            common = os.path.commonpath([self._root, host])
        except ValueError:
            common = ""
        if common != self._root:
            raise FileSystemError(f"Path is outside of the drive: {path}")
        return host

    def _validate_directory(self, path: str) -> str:
        """
        Validate that a virtual path names an existing directory.

        Returns:
            The matching host path

        Raises:
            FileSystemError: If directory does not exist or is not a directory
        """
        host = self._to_host(path)
        if not os.path.exists(host):
            raise FileSystemError(f"Directory does not exist: {path}")

        if not os.path.isdir(host):
            raise FileSystemError(f"Path is not a directory: {path}")
        return host

    def _list_entries(self, path: str, want_dirs: bool) -> list[str]:
        host = self._validate_directory(path)
        try:
            names = sorted(os.listdir(host))
        except OSError as e:
            raise FileSystemError(f"Failed to list {path}: {e}")
        return [
            join(path, name)
            for name in names
            if os.path.isdir(os.path.join(host, name)) == want_dirs
        ]

    @override
    def directory_exists(self, path: str) -> bool:
        try:
            return os.path.isdir(self._to_host(path))
        except FileSystemError:
            return False

    @override
    def create_directory(self, path: str) -> None:
        host = self._to_host(path)
        try:
            os.makedirs(host, exist_ok=True)
            self._logger.info(f"Created directory {path}")
        except OSError as e:
            raise FileSystemError(str(e))

    @override
    def delete_directory(self, path: str, recursive: bool = True) -> None:
        host = self._validate_directory(path)
        if host == self._root:
            raise FileSystemError("Cannot delete the drive root")
        try:
            if recursive:
                shutil.rmtree(host)
            else:
                os.rmdir(host)
            self._logger.info(f"Deleted directory {path}")
        except OSError as e:
            raise FileSystemError(str(e))

    @override
    def list_directories(self, path: str) -> list[str]:
        return self._list_entries(path, want_dirs=True)

    @override
    def list_files(self, path: str) -> list[str]:
        return self._list_entries(path, want_dirs=False)

    @override
    def file_exists(self, path: str) -> bool:
        try:
            return os.path.isfile(self._to_host(path))
        except FileSystemError:
            return False

    @override
    def read_text(self, path: str) -> str:
        host = self._to_host(path)
        try:
            with open(host, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileSystemError(str(e))

    @override
    def write_text(self, path: str, content: str) -> None:
        host = self._to_host(path)
        try:
            with open(host, "w", encoding="utf-8", newline="") as f:
                _ = f.write(content)
            self._logger.info(f"Wrote {len(content)} characters to {path}")
        except OSError as e:
            raise FileSystemError(str(e))

    @override
    def delete_file(self, path: str) -> None:
        host = self._to_host(path)
        try:
            os.remove(host)
            self._logger.info(f"Deleted file {path}")
        except OSError as e:
            raise FileSystemError(str(e))

    @override
    def free_space(self, path: str) -> int:
        host = self._validate_directory(path)
        try:
            return shutil.disk_usage(host).free
        except OSError as e:
            raise FileSystemError(str(e))

    @override
    def format(self) -> None:
        try:
            for name in os.listdir(self._root):
                entry = os.path.join(self._root, name)
                if os.path.isdir(entry) and not os.path.islink(entry):
                    shutil.rmtree(entry)
                else:
                    os.remove(entry)
            self._logger.warning(f"Formatted drive {self._drive_prefix} at {self._root}")
        except OSError as e:
            raise FileSystemError(str(e))
