"""
Tests for the CommandDispatcher.
"""

from unittest.mock import MagicMock

import pytest

from epsilon_shell.entities.session import Session, SystemFlags
from epsilon_shell.exceptions import (
    EmptyInputError,
    MissingArgumentsError,
    UnknownCommandError,
)
from epsilon_shell.ports.console.console_port import ConsolePort
from epsilon_shell.use_cases.shell.dispatcher import CommandDispatcher
from epsilon_shell.use_cases.shell.fs_commands import FsCommandsHandler
from epsilon_shell.use_cases.shell.system_commands import SystemCommandsHandler


@pytest.fixture
def system_commands():
    return MagicMock(spec=SystemCommandsHandler)


@pytest.fixture
def fs_commands():
    return MagicMock(spec=FsCommandsHandler)


@pytest.fixture
def mock_console():
    return MagicMock(spec=ConsolePort)


@pytest.fixture
def dispatcher(mock_console, system_commands, fs_commands, mock_logger):
    return CommandDispatcher(mock_console, system_commands, fs_commands, logger=mock_logger)


class TestExecute:
    """Test cases for CommandDispatcher.execute."""

    @pytest.mark.parametrize("line", ["", "   ", "\t"])
    def test_empty_input(self, dispatcher, system_commands, fs_commands, line):
        with pytest.raises(EmptyInputError, match="No command specified."):
            dispatcher.execute(line, Session())
        assert system_commands.method_calls == []
        assert fs_commands.method_calls == []

    @pytest.mark.parametrize(
        "name, method",
        [
            ("clr", "clear"),
            ("si", "system_info"),
            ("p", "print_text"),
            ("gui", "boot_desktop"),
            ("set", "set_option"),
        ],
    )
    def test_routes_system_commands(self, dispatcher, system_commands, name, method):
        session = Session()
        dispatcher.execute(f"{name} arg", session)

        handler = getattr(system_commands, method)
        handler.assert_called_once()
        ctx = handler.call_args.args[0]
        assert ctx.tokens == [name, "arg"]
        assert ctx.line == f"{name} arg"
        assert ctx.session is session

    def test_routes_fs(self, dispatcher, fs_commands):
        dispatcher.execute("  fs   ls ", Session())

        fs_commands.dispatch.assert_called_once()
        ctx = fs_commands.dispatch.call_args.args[0]
        assert ctx.tokens == ["fs", "ls"]
        assert ctx.line == "  fs   ls "

    def test_unknown_command(self, dispatcher):
        with pytest.raises(UnknownCommandError, match="Unknown command: reboot"):
            dispatcher.execute("reboot now", Session())

    def test_names_are_case_sensitive(self, dispatcher, system_commands):
        with pytest.raises(UnknownCommandError):
            dispatcher.execute("CLR", Session())
        system_commands.clear.assert_not_called()

    def test_command_names(self, dispatcher):
        assert dispatcher.command_names() == ["clr", "si", "p", "fs", "gui", "set"]


class TestRun:
    """Test cases for CommandDispatcher.run, the per-command error boundary."""

    def test_success(self, dispatcher, mock_console):
        assert dispatcher.run("clr", Session()) is True
        mock_console.error.assert_not_called()

    def test_empty_input_is_reported(self, dispatcher, mock_console):
        assert dispatcher.run("  ", Session()) is False
        mock_console.error.assert_called_once_with("No command specified.")

    def test_unknown_command_is_reported(self, dispatcher, mock_console):
        assert dispatcher.run("foo", Session()) is False
        mock_console.error.assert_called_once_with("Unknown command: foo")

    def test_command_error_is_reported(self, dispatcher, system_commands, mock_console):
        system_commands.print_text.side_effect = MissingArgumentsError("p <string>")

        assert dispatcher.run("p", Session()) is False
        mock_console.error.assert_called_once_with(
            'No arguments specified. Use "p <string>"'
        )

    def test_unexpected_error_does_not_escape(
        self, dispatcher, fs_commands, mock_console, mock_logger
    ):
        fs_commands.dispatch.side_effect = RuntimeError("boom")

        assert dispatcher.run("fs ls", Session()) is False
        mock_console.error.assert_called_once_with("Command failed: boom")
        mock_logger.exception.assert_called_once()


class TestShellSession:
    """Whole-line behaviour through a real drive and console."""

    def test_print_without_text(self, shell):
        assert shell.run("p") is False
        assert shell.output.strip() == '[ERROR] No arguments specified. Use "p <string>"'

    def test_print(self, shell):
        assert shell.run("p hello [bold]world[/bold]")
        assert "hello [bold]world[/bold]" in shell.output

    def test_banner(self, shell):
        assert shell.run("si")
        assert "Epsilon Kernel - 1.2.3" in shell.output
        assert "-" * 80 in shell.output

    def test_set_updates_session_flags(self, shell):
        assert shell.run("set topb=false")
        assert shell.run("set bogus=true")
        assert shell.run("set ctrlb=maybe")

        assert shell.session.flags == SystemFlags(
            top_bar_activated=False, control_bar_activated=True
        )
        assert shell.output == ""

    def test_gui_uses_launcher(self, shell, mock_launcher):
        mock_launcher.boot.return_value = 0
        assert shell.run("gui")
        mock_launcher.boot.assert_called_once_with(shell.session.flags)

    def test_errors_do_not_end_the_session(self, shell):
        assert shell.run("nope") is False
        assert shell.run("fs rd missing.txt") is False
        assert shell.run("fs d mk docs")
        assert shell.run("fs cd docs")
        assert shell.session.cur_path == "0:\\docs"

    def test_sessions_are_isolated(self, shell):
        other = Session()
        shell.run("fs cd system")
        shell.dispatcher.run("set topb=false", other)

        assert other.cur_path == "0:\\"
        assert shell.session.flags.top_bar_activated is True
        assert other.flags.top_bar_activated is False
