"""
Virtual path value type for drive-rooted paths such as ``0:\\docs\\notes``.
"""

from __future__ import annotations

import ntpath
from dataclasses import dataclass

SEPARATOR = "\\"
DEFAULT_ROOT = "0:\\"


def join(path: str, segment: str) -> str:
    """Join a segment onto a virtual path using the drive's path rules."""
    return ntpath.join(path, segment)


def is_within(path: str, directory: str) -> bool:
    """True if ``path`` is ``directory`` itself or lies below it."""
    target = ntpath.normpath(path)
    base = ntpath.normpath(directory)
    return target == base or target.startswith(base.rstrip(SEPARATOR) + SEPARATOR)


def relative_name(entry: str, directory: str) -> str:
    """Strip ``directory`` (plus its separator) from the front of ``entry``."""
    prefix = directory if directory.endswith(SEPARATOR) else directory + SEPARATOR
    if entry.startswith(prefix):
        return entry[len(prefix) :]
    return entry


@dataclass(frozen=True)
class VirtualPath:
    """
    A location on the virtual drive split into components.

    ``trailing`` records whether the string form ends with a separator; the
    drive root always renders as ``root`` itself.
    """

    root: str = DEFAULT_ROOT
    parts: tuple[str, ...] = ()
    trailing: bool = False

    @classmethod
    def parse(cls, path: str, root: str = DEFAULT_ROOT) -> VirtualPath:
        """
        Parse a drive-rooted path string.

        Args:
            path: Absolute virtual path, e.g. ``0:\\a\\b\\``
            root: Drive root the path must start with

        Raises:
            ValueError: If the path is not on the given drive
        """
        drive = root.rstrip(SEPARATOR)
        if path != drive and not path.startswith(root):
            raise ValueError(f"Path is not on drive {root}: {path}")

        rest = path[len(drive) :]
        parts = tuple(p for p in rest.split(SEPARATOR) if p)
        return cls(root=root, parts=parts, trailing=bool(parts) and path.endswith(SEPARATOR))

    @property
    def is_root(self) -> bool:
        return not self.parts

    def parent(self) -> VirtualPath:
        """Drop the last component; the result ends with a separator. Root stays root."""
        if self.is_root:
            return self
        return VirtualPath(self.root, self.parts[:-1], trailing=True)

    def child(self, name: str) -> VirtualPath:
        """
        Append ``name``; the result has no trailing separator.

        ``/`` counts as a separator, and empty or ``.`` components are dropped.
        """
        extra = tuple(
            p for p in name.replace("/", SEPARATOR).split(SEPARATOR) if p and p != "."
        )
        return VirtualPath(self.root, self.parts + extra, trailing=False)

    def __str__(self) -> str:
        if self.is_root:
            return self.root
        text = self.root + SEPARATOR.join(self.parts)
        return text + SEPARATOR if self.trailing else text
