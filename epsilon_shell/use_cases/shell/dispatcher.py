"""
Top-level command dispatcher.

Reads one line, tokenizes it and routes the first token through a
name-to-handler table. Every error stops at the command boundary: it is
written to the console and the session carries on.
"""

import logging
from typing import Optional

from epsilon_shell.entities.session import Session
from epsilon_shell.exceptions import CommandError, EmptyInputError, UnknownCommandError
from epsilon_shell.ports.console.console_port import ConsolePort
from epsilon_shell.use_cases.shell.context import CommandContext, CommandHandler
from epsilon_shell.use_cases.shell.fs_commands import FsCommandsHandler
from epsilon_shell.use_cases.shell.system_commands import SystemCommandsHandler
from epsilon_shell.use_cases.shell.tokenizer import is_blank, tokenize


class CommandDispatcher:
    def __init__(
        self,
        console: ConsolePort,
        system_commands: SystemCommandsHandler,
        fs_commands: FsCommandsHandler,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """
        Args:
            console: Output sink for error lines
            system_commands: Handler for clr, si, p, gui and set
            fs_commands: Handler for the fs family
            logger: Optional logger
        """
        self._console = console
        self._logger = logger or logging.getLogger(__name__)
        self._commands: dict[str, CommandHandler] = {
            "clr": system_commands.clear,
            "si": system_commands.system_info,
            "p": system_commands.print_text,
            "fs": fs_commands.dispatch,
            "gui": system_commands.boot_desktop,
            "set": system_commands.set_option,
        }

    def command_names(self) -> list[str]:
        return list(self._commands)

    def execute(self, line: str, session: Session) -> None:
        """
        Run one line, letting command errors propagate.

        Raises:
            EmptyInputError: If the line is empty or whitespace only
            UnknownCommandError: If the first token is not a command
            CommandError: For any failure inside the command
        """
        if is_blank(line):
            raise EmptyInputError()

        tokens = tokenize(line)
        handler = self._commands.get(tokens[0])
        if handler is None:
            raise UnknownCommandError(tokens[0])

        self._logger.debug(f"Dispatching {tokens[0]!r} in {session.cur_path}")
        handler(CommandContext(line=line, tokens=tokens, session=session))

    def run(self, line: str, session: Session) -> bool:
        """
        Run one line and report any error on the console.

        Returns:
            True if the command completed, False if an error was reported
        """
        try:
            self.execute(line, session)
            return True
        except CommandError as e:
            self._logger.warning(f"Command {line!r} failed: {e}")
            self._console.error(str(e))
        except Exception as e:
            self._logger.exception(f"Unexpected error running {line!r}")
            self._console.error(f"Command failed: {e}")
        return False
