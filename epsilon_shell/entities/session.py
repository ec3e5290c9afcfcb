"""
Session domain entity.
"""

from dataclasses import dataclass, field

from epsilon_shell.entities.virtual_path import DEFAULT_ROOT, VirtualPath


@dataclass
class SystemFlags:
    """Desktop options toggled with the ``set`` command."""

    top_bar_activated: bool = True
    control_bar_activated: bool = True


@dataclass
class Session:
    """
    State of one shell session: the current working path and the system flags.

    The current working path always names an existing directory on the drive.
    """

    drive_root: str = DEFAULT_ROOT
    cur_path: str = ""
    flags: SystemFlags = field(default_factory=SystemFlags)

    def __post_init__(self) -> None:
        if not self.cur_path:
            self.cur_path = self.drive_root

    @property
    def current(self) -> VirtualPath:
        """Current working path as a VirtualPath."""
        return VirtualPath.parse(self.cur_path, self.drive_root)

    def is_at_root(self) -> bool:
        return self.cur_path == self.drive_root

    def reset(self) -> None:
        """Go back to the drive root."""
        self.cur_path = self.drive_root
