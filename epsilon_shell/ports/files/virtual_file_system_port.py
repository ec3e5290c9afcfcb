"""
Virtual file system port interface defining the contract for drive operations.
"""

from abc import ABC, abstractmethod


class VirtualFileSystemPort(ABC):
    """
    Port interface for the virtual drive.

    Every path is an absolute virtual path rooted at the drive prefix
    (e.g. ``0:\\docs\\a.txt``). Listing operations return absolute virtual
    paths as well.
    """

    @abstractmethod
    def directory_exists(self, path: str) -> bool:
        """Return True if ``path`` names an existing directory."""
        pass

    @abstractmethod
    def create_directory(self, path: str) -> None:
        """
        Create a directory.

        Args:
            path: Virtual path of the directory to create

        Raises:
            FileSystemError: If creation fails
        """
        pass

    @abstractmethod
    def delete_directory(self, path: str, recursive: bool = True) -> None:
        """
        Delete a directory, with all of its contents when ``recursive`` is set.

        Raises:
            FileSystemError: If deletion fails
        """
        pass

    @abstractmethod
    def list_directories(self, path: str) -> list[str]:
        """
        List the directories directly under ``path``.

        Raises:
            FileSystemError: If listing fails
        """
        pass

    @abstractmethod
    def list_files(self, path: str) -> list[str]:
        """
        List the files directly under ``path``.

        Raises:
            FileSystemError: If listing fails
        """
        pass

    @abstractmethod
    def file_exists(self, path: str) -> bool:
        """Return True if ``path`` names an existing regular file."""
        pass

    @abstractmethod
    def read_text(self, path: str) -> str:
        """
        Read the whole text content of a file.

        Raises:
            FileSystemError: If reading fails
        """
        pass

    @abstractmethod
    def write_text(self, path: str, content: str) -> None:
        """
        Create or overwrite a text file.

        Raises:
            FileSystemError: If writing fails
        """
        pass

    @abstractmethod
    def delete_file(self, path: str) -> None:
        """
        Delete a file.

        Raises:
            FileSystemError: If deletion fails
        """
        pass

    @abstractmethod
    def free_space(self, path: str) -> int:
        """
        Free space in bytes available to ``path``.

        Raises:
            FileSystemError: If the query fails
        """
        pass

    @abstractmethod
    def format(self) -> None:
        """
        Erase everything on the drive, leaving an empty root.

        Raises:
            FileSystemError: If formatting fails
        """
        pass
