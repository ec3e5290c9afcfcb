from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from epsilon_shell.entities.session import Session


@dataclass
class CommandContext:
    """One command invocation: the raw line, its tokens and the session it runs in."""

    line: str
    tokens: list[str]
    session: Session

    def token(self, index: int) -> Optional[str]:
        """Token at ``index``, or None when the line is too short."""
        if index < len(self.tokens):
            return self.tokens[index]
        return None


CommandHandler = Callable[[CommandContext], None]
