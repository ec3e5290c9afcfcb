"""
Handlers for the screen, banner, print, desktop and option commands.
"""

import logging
from typing import Optional

from epsilon_shell.exceptions import (
    ApplicationError,
    MissingArgumentsError,
    OperationFailedError,
)
from epsilon_shell.ports.console.console_port import ConsolePort
from epsilon_shell.ports.desktop.desktop_launcher_port import DesktopLauncherPort
from epsilon_shell.use_cases.shell.context import CommandContext

BANNER_COLOR = "cyan"
TEXT_COLOR = "grey70"
COPYRIGHT = "Copyright (C) BrainBox Interactive, 2024"
PROJECT_URL = "https://github.com/BrainBox-Interactive/Epsilon"

# set <key>=<value>: key -> SystemFlags attribute
OPTIONS = {
    "topb": "top_bar_activated",
    "ctrlb": "control_bar_activated",
}
OPTION_VALUES = {"true": True, "false": False}


class SystemCommandsHandler:
    """Commands that do not touch the file system: clr, si, p, gui and set."""

    def __init__(
        self,
        console: ConsolePort,
        desktop_launcher: DesktopLauncherPort,
        version: str,
        build_label: str,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._console = console
        self._desktop_launcher = desktop_launcher
        self._version = version
        self._build_label = build_label
        self._logger = logger or logging.getLogger(__name__)

    def clear(self, ctx: CommandContext) -> None:
        self._console.clear()

    def system_info(self, ctx: CommandContext) -> None:
        """Print the version banner, with a separator as wide as the console."""
        self._console.write_centered(f"Epsilon Kernel - {self._version}", BANNER_COLOR)
        self._console.write_centered(self._build_label, BANNER_COLOR)
        self._console.write_line("-" * self._console.width(), BANNER_COLOR)
        self._console.write_centered(COPYRIGHT, BANNER_COLOR)
        self._console.write_centered(PROJECT_URL, BANNER_COLOR)

    def print_text(self, ctx: CommandContext) -> None:
        """
        Print the line without its command token and the space after it.

        Raises:
            MissingArgumentsError: If nothing follows the command token
        """
        if len(ctx.tokens) < 2:
            raise MissingArgumentsError(f"{ctx.tokens[0]} <string>")
        text = ctx.line.replace(ctx.tokens[0] + " ", "", 1)
        self._console.write_line(text, TEXT_COLOR)

    def boot_desktop(self, ctx: CommandContext) -> None:
        """
        Boot the desktop with the session's bar options.

        Raises:
            OperationFailedError: If the desktop cannot be started
        """
        try:
            code = self._desktop_launcher.boot(ctx.session.flags)
            self._logger.info(f"Desktop exited with code {code}")
        except ApplicationError as e:
            raise OperationFailedError(str(e))

    def set_option(self, ctx: CommandContext) -> None:
        # Anything other than exactly "set <key>=<true|false>" with a known key
        # is ignored without output.
        if len(ctx.tokens) != 2:
            return
        key, *values = ctx.tokens[1].split("=")
        attribute = OPTIONS.get(key)
        if attribute is None or not values or values[0] not in OPTION_VALUES:
            self._logger.debug(f"Ignoring option {ctx.tokens[1]!r}")
            return
        setattr(ctx.session.flags, attribute, OPTION_VALUES[values[0]])
        self._logger.info(f"Set {attribute} to {values[0]}")
