"""
Use case for changing the current working directory.
"""

import logging
from typing import Optional

from epsilon_shell.entities.session import Session
from epsilon_shell.exceptions import FileSystemError, NotFoundError, OperationFailedError
from epsilon_shell.ports.files.virtual_file_system_port import VirtualFileSystemPort

PARENT = ".."


class ChangeDirectoryUseCase:
    """
    Move the session to a child directory or to the parent directory.

    Unlike the commands that go through the path sandbox, ``..`` is accepted
    here; ascent stops at the drive root.
    """

    def __init__(
        self,
        file_system: VirtualFileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Virtual drive to check targets against
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, target: str) -> str:
        """
        Change the session's current working path.

        Args:
            session: Session to update
            target: ``..`` or the name of a directory under the current path

        Returns:
            The new current working path

        Raises:
            NotFoundError: If the target directory does not exist
            OperationFailedError: If the file system cannot be queried
        """
        current = session.current
        if target == PARENT:
            if session.is_at_root() or current.is_root:
                return session.cur_path
            candidate = str(current.parent())
        else:
            candidate = str(current.child(target))

        try:
            exists = self._file_system.directory_exists(candidate)
        except FileSystemError as e:
            self._logger.error(f"Error changing directory: {e}")
            raise OperationFailedError(f"Failed to change directory: {e}")

        if not exists:
            raise NotFoundError("Directory", target, session.cur_path)

        self._logger.info(f"Changing directory: {session.cur_path} -> {candidate}")
        session.cur_path = candidate
        return candidate
