"""
Dependency injection container for managing shell dependencies.
"""

import logging
from typing import Optional

from epsilon_shell.adapters.console.rich_console_adapter import RichConsoleAdapter
from epsilon_shell.adapters.desktop.qt_desktop_launcher import QtDesktopLauncher
from epsilon_shell.adapters.files.local_drive_adapter import LocalDriveAdapter
from epsilon_shell.config.settings import Settings
from epsilon_shell.entities.session import Session, SystemFlags
from epsilon_shell.ports.console.console_port import ConsolePort
from epsilon_shell.ports.desktop.desktop_launcher_port import DesktopLauncherPort
from epsilon_shell.ports.files.virtual_file_system_port import VirtualFileSystemPort
from epsilon_shell.use_cases.shell.dispatcher import CommandDispatcher
from epsilon_shell.use_cases.shell.fs_commands import FsCommandsHandler
from epsilon_shell.use_cases.shell.navigation import ChangeDirectoryUseCase
from epsilon_shell.use_cases.shell.system_commands import SystemCommandsHandler


class DependencyContainer:
    """
    Container for managing shell dependencies using dependency injection.
    """

    def __init__(self, config: Optional[Settings] = None):
        self._settings = config or Settings()
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    @property
    def settings(self) -> Settings:
        return self._settings

    def get_file_system(self) -> VirtualFileSystemPort:
        """
        Get virtual file system adapter instance.

        Returns:
            VirtualFileSystemPort implementation
        """
        if "file_system" not in self._instances:
            self._instances["file_system"] = LocalDriveAdapter(
                self._settings.drive_root,
                drive_prefix=self._settings.drive_prefix,
                logger=self._logger,
            )
        return self._instances["file_system"]

    def get_console(self) -> ConsolePort:
        """
        Get console adapter instance.

        Returns:
            ConsolePort implementation
        """
        if "console" not in self._instances:
            self._instances["console"] = RichConsoleAdapter()
        return self._instances["console"]

    def get_desktop_launcher(self) -> DesktopLauncherPort:
        """
        Get desktop launcher instance.

        Returns:
            DesktopLauncherPort implementation
        """
        if "desktop_launcher" not in self._instances:
            self._instances["desktop_launcher"] = QtDesktopLauncher(logger=self._logger)
        return self._instances["desktop_launcher"]

    def get_change_directory_use_case(self) -> ChangeDirectoryUseCase:
        if "change_directory_use_case" not in self._instances:
            self._instances["change_directory_use_case"] = ChangeDirectoryUseCase(
                self.get_file_system(), self._logger
            )
        return self._instances["change_directory_use_case"]

    def get_fs_commands(self) -> FsCommandsHandler:
        """
        Handler for the fs command family, backed by the virtual drive.
        """
        if "fs_commands" not in self._instances:
            self._instances["fs_commands"] = FsCommandsHandler(
                self.get_console(),
                self.get_file_system(),
                change_directory=self.get_change_directory_use_case(),
                logger=self._logger,
            )
        return self._instances["fs_commands"]

    def get_system_commands(self) -> SystemCommandsHandler:
        """
        Handler for clr, si, p, gui and set.
        """
        if "system_commands" not in self._instances:
            self._instances["system_commands"] = SystemCommandsHandler(
                self.get_console(),
                self.get_desktop_launcher(),
                version=self._settings.version,
                build_label=self._settings.build_label,
                logger=self._logger,
            )
        return self._instances["system_commands"]

    def get_dispatcher(self) -> CommandDispatcher:
        """
        Get the command dispatcher with injected handlers.

        Returns:
            Configured CommandDispatcher
        """
        if "dispatcher" not in self._instances:
            self._instances["dispatcher"] = CommandDispatcher(
                self.get_console(),
                self.get_system_commands(),
                self.get_fs_commands(),
                logger=self._logger,
            )
        return self._instances["dispatcher"]

    def new_session(self) -> Session:
        """Create a session at the drive root with flags from settings."""
        return Session(
            drive_root=self._settings.drive_prefix,
            flags=SystemFlags(
                top_bar_activated=self._settings.top_bar_activated,
                control_bar_activated=self._settings.control_bar_activated,
            ),
        )

    def override(self, name: str, instance: object) -> None:
        """Replace a dependency before it is first used (useful for testing)."""
        self._instances[name] = instance

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()

