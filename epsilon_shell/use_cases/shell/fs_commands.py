"""
Handler for the ``fs`` command family.

Sub-commands (second token):
- fsp: free space of the current directory, in MB
- fmt: format the drive
- ls: list directories then files of the current directory
- d mk <dir> / d rm <dir>: create / recursively delete a directory
- wr <file> <content>: write a file (``\\n`` becomes a newline)
- rd <file>: print a file
- rm <file>: delete a file
- cd <dir|..>: change directory
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Optional

from epsilon_shell.entities.virtual_path import is_within, relative_name
from epsilon_shell.exceptions import (
    FileSystemError,
    MissingArgumentsError,
    NotFoundError,
    OperationFailedError,
    UnknownCommandError,
)
from epsilon_shell.ports.console.console_port import ConsolePort
from epsilon_shell.ports.files.virtual_file_system_port import VirtualFileSystemPort
from epsilon_shell.use_cases.shell.arguments import get_command_arguments
from epsilon_shell.use_cases.shell.context import CommandContext, CommandHandler
from epsilon_shell.use_cases.shell.navigation import ChangeDirectoryUseCase
from epsilon_shell.use_cases.shell.path_sandbox import get_safe_path

BYTES_PER_MB = 1024 * 1024
TEXT_COLOR = "grey70"

FS_USAGE = "fs <command> <arguments>"
DIR_USAGE = "fs d <command> <arguments>"


class FsCommandsHandler:
    def __init__(
        self,
        console: ConsolePort,
        file_system: VirtualFileSystemPort,
        change_directory: Optional[ChangeDirectoryUseCase] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._console = console
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)
        self._change_directory = change_directory or ChangeDirectoryUseCase(
            file_system, self._logger
        )
        self._commands: dict[str, CommandHandler] = {
            "fsp": self._free_space,
            "fmt": self._format,
            "ls": self._list,
            "d": self._directory,
            "wr": self._write,
            "rd": self._read,
            "rm": self._remove,
            "cd": self._cd,
        }
        self._dir_commands: dict[str, CommandHandler] = {
            "mk": self._dir_make,
            "rm": self._dir_remove,
        }

    def dispatch(self, ctx: CommandContext) -> None:
        """
        Route ``fs <sub-command>`` to its handler.

        Raises:
            MissingArgumentsError: If there is no sub-command
            UnknownCommandError: If the sub-command is not known
        """
        name = ctx.token(1)
        if name is None:
            raise MissingArgumentsError(FS_USAGE)
        handler = self._commands.get(name)
        if handler is None:
            raise UnknownCommandError(f"fs {name}", FS_USAGE)
        handler(ctx)

    @contextmanager
    def _operation(self, action: str) -> Iterator[None]:
        """Turn file system failures into OperationFailedError for ``action``."""
        try:
            yield
        except FileSystemError as e:
            self._logger.error(f"Failed to {action}: {e}")
            raise OperationFailedError(f"Failed to {action}: {e}")

    def _free_space(self, ctx: CommandContext) -> None:
        with self._operation("query free space"):
            free = self._file_system.free_space(ctx.session.cur_path)
        self._console.info(f"Free space: {free // BYTES_PER_MB} MB")

    def _format(self, ctx: CommandContext) -> None:
        with self._operation("format drive"):
            self._file_system.format()
        ctx.session.reset()
        self._console.info("Drive formatted.")

    def _list(self, ctx: CommandContext) -> None:
        cur_path = ctx.session.cur_path
        with self._operation("list directory"):
            dirs = self._file_system.list_directories(cur_path)
            files = self._file_system.list_files(cur_path)

        if dirs:
            self._console.info(f"Directories ({len(dirs)}):")
            for entry in dirs:
                self._console.write_line("- " + relative_name(entry, cur_path))
            self._console.write_line()

        if files:
            self._console.info(f"Files ({len(files)}):")
            for entry in files:
                self._console.write_line("- " + relative_name(entry, cur_path))

    def _directory(self, ctx: CommandContext) -> None:
        name = ctx.token(2)
        if name is None:
            raise MissingArgumentsError(DIR_USAGE)
        handler = self._dir_commands.get(name)
        if handler is None:
            raise UnknownCommandError(f"fs d {name}", DIR_USAGE)
        handler(ctx)

    def _dir_make(self, ctx: CommandContext) -> None:
        segment = ctx.token(3)
        if segment is None:
            raise MissingArgumentsError("fs d mk <dir>")
        path = get_safe_path(ctx.session, segment)

        with self._operation("create directory"):
            if not self._file_system.directory_exists(path):
                self._file_system.create_directory(path)

    def _dir_remove(self, ctx: CommandContext) -> None:
        segment = ctx.token(3)
        if segment is None:
            raise MissingArgumentsError("fs d rm <dir>")
        path = get_safe_path(ctx.session, segment)
        # The session must stay inside an existing directory
        if is_within(ctx.session.cur_path, path):
            raise OperationFailedError(
                f"Failed to delete directory: {segment} contains the current directory"
            )

        with self._operation("delete directory"):
            exists = self._file_system.directory_exists(path)
            if exists:
                self._file_system.delete_directory(path, recursive=True)
        if not exists:
            raise NotFoundError("Directory", segment, ctx.session.cur_path)

    def _write(self, ctx: CommandContext) -> None:
        if len(ctx.tokens) < 4:
            raise MissingArgumentsError("fs wr <file> <content>")
        path = get_safe_path(ctx.session, ctx.tokens[2])
        content = get_command_arguments(ctx.line, ctx.tokens, 3).replace("\\n", "\n")

        with self._operation("write file"):
            self._file_system.write_text(path, content)

    def _read(self, ctx: CommandContext) -> None:
        segment = ctx.token(2)
        if segment is None:
            raise MissingArgumentsError("fs rd <file>")
        path = self._existing_file(ctx, segment, "read file")

        with self._operation("read file"):
            content = self._file_system.read_text(path)
        self._console.write_line(content, TEXT_COLOR)

    def _remove(self, ctx: CommandContext) -> None:
        segment = ctx.token(2)
        if segment is None:
            raise MissingArgumentsError("fs rm <file>")
        path = self._existing_file(ctx, segment, "delete file")

        with self._operation("delete file"):
            self._file_system.delete_file(path)

    def _existing_file(self, ctx: CommandContext, segment: str, action: str) -> str:
        path = get_safe_path(ctx.session, segment)
        with self._operation(action):
            exists = self._file_system.file_exists(path)
        if not exists:
            raise NotFoundError("File", segment, ctx.session.cur_path)
        return path

    def _cd(self, ctx: CommandContext) -> None:
        target = ctx.token(2)
        if target is None:
            raise MissingArgumentsError("fs cd <dir>")
        _ = self._change_directory.execute(ctx.session, target)
