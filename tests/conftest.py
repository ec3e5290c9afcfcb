"""
Pytest configuration and shared fixtures.
"""

import io
import os
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from epsilon_shell.adapters.console.rich_console_adapter import RichConsoleAdapter
from epsilon_shell.adapters.files.local_drive_adapter import LocalDriveAdapter
from epsilon_shell.entities.session import Session
from epsilon_shell.ports.desktop.desktop_launcher_port import DesktopLauncherPort
from epsilon_shell.use_cases.shell.dispatcher import CommandDispatcher
from epsilon_shell.use_cases.shell.fs_commands import FsCommandsHandler
from epsilon_shell.use_cases.shell.system_commands import SystemCommandsHandler


@pytest.fixture
def drive_root(tmp_path):
    """
    Host directory backing a freshly installed drive.

    Layout::

        readme.txt
        boot.cfg
        system\\
            kernel.log
    """
    root = tmp_path / "epsilon"
    (root / "system").mkdir(parents=True)
    (root / "readme.txt").write_text("Welcome to Epsilon.")
    (root / "boot.cfg").write_text("topb=true\nctrlb=true\n")
    (root / "system" / "kernel.log").write_text("Epsilon Kernel booted.\n")
    return str(root)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def drive(drive_root, mock_logger):
    """Virtual drive ``0:\\`` backed by ``drive_root``."""
    return LocalDriveAdapter(drive_root, logger=mock_logger)


@pytest.fixture
def console():
    """Rich console adapter writing plain text to an in-memory buffer, 80 columns wide."""
    return RichConsoleAdapter(
        Console(file=io.StringIO(), width=80, color_system=None, highlight=False)
    )


@pytest.fixture
def session():
    return Session()


@pytest.fixture
def mock_launcher():
    return MagicMock(spec=DesktopLauncherPort)


class ShellHarness:
    """Dispatcher wired to a real drive and an in-memory console."""

    def __init__(self, dispatcher, console, session, drive_root):
        self.dispatcher = dispatcher
        self.console = console
        self.session = session
        self.drive_root = drive_root

    def run(self, line: str) -> bool:
        return self.dispatcher.run(line, self.session)

    @property
    def output(self) -> str:
        return self.console.console.file.getvalue()

    def host_path(self, *parts: str) -> str:
        return os.path.join(self.drive_root, *parts)


@pytest.fixture
def shell(drive, drive_root, console, session, mock_launcher, mock_logger):
    """A complete shell over the temporary drive."""
    system = SystemCommandsHandler(
        console, mock_launcher, version="1.2.3", build_label="Test build", logger=mock_logger
    )
    fs = FsCommandsHandler(console, drive, logger=mock_logger)
    dispatcher = CommandDispatcher(console, system, fs, logger=mock_logger)
    return ShellHarness(dispatcher, console, session, drive_root)


SETTINGS_ENV_VARS = (
    "EPSILON_DRIVE_ROOT",
    "EPSILON_DRIVE_LETTER",
    "EPSILON_VERSION",
    "EPSILON_BUILD_LABEL",
    "EPSILON_TOP_BAR",
    "EPSILON_CONTROL_BAR",
    "EPSILON_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """
    Remove shell settings from the environment and point the drive at a temp directory.

    Returns:
        The monkeypatch fixture, for further environment tweaks
    """
    for key in SETTINGS_ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("EPSILON_DRIVE_ROOT", str(tmp_path / "drive"))
    return monkeypatch
