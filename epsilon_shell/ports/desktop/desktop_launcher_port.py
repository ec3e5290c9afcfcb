from abc import ABC, abstractmethod

from epsilon_shell.entities.session import SystemFlags


class DesktopLauncherPort(ABC):
    @abstractmethod
    def boot(self, flags: SystemFlags) -> int:
        """
        Boot the graphical desktop and block until it is closed.

        Returns:
            Exit code of the desktop event loop
        """
        pass
