"""
Console adapter rendering shell output with rich.
"""

from typing import Optional

from rich.console import Console
from rich.text import Text
from typing_extensions import override

from epsilon_shell.ports.console.console_port import ConsolePort

INFO_PREFIX = "[INFO] "
ERROR_PREFIX = "[ERROR] "


class RichConsoleAdapter(ConsolePort):
    """Output sink backed by a ``rich.console.Console``."""

    def __init__(
        self,
        console: Optional[Console] = None,
    ) -> None:
        """
        Args:
            console: Console to render on. Defaults to a console on stdout with
                automatic highlighting disabled.
        """
        self._console = console or Console(highlight=False)

    @property
    def console(self) -> Console:
        return self._console

    @override
    def clear(self) -> None:
        self._console.clear()

    @override
    def width(self) -> int:
        return self._console.width

    @override
    def write_line(self, text: str = "", color: Optional[str] = None) -> None:
        # Text objects are never parsed for markup, so user content stays verbatim
        self._console.print(Text(text, style=color or ""), soft_wrap=True)

    @override
    def write_centered(self, text: str, color: Optional[str] = None) -> None:
        self._console.print(Text(text, style=color or "", justify="center"))

    @override
    def info(self, message: str) -> None:
        self._console.print(
            Text.assemble((INFO_PREFIX, "bold green"), (message, "white")),
            soft_wrap=True,
        )

    @override
    def error(self, message: str) -> None:
        self._console.print(
            Text.assemble((ERROR_PREFIX, "bold red"), (message, "red")),
            soft_wrap=True,
        )
