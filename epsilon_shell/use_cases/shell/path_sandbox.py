"""
Resolution of user path segments against the current working path.
"""

import logging

from epsilon_shell.entities.session import Session
from epsilon_shell.entities.virtual_path import join
from epsilon_shell.exceptions import InvalidPathError

logger = logging.getLogger(__name__)

_FORBIDDEN_PARTS = ("..", ":")
_SEPARATORS = ("\\", "/")


def is_safe_segment(segment: str) -> bool:
    """
    True when ``segment`` names an entry directly under the current directory:
    not blank, no ``..``, no drive separator, no leading path separator.
    """
    if not segment or segment.isspace():
        return False
    if any(part in segment for part in _FORBIDDEN_PARTS):
        return False
    return not segment.startswith(_SEPARATORS)


def get_safe_path(session: Session, segment: str) -> str:
    """
    Join a relative segment onto the session's current working path.

    Raises:
        InvalidPathError: If the segment is blank, tries to climb with ``..``,
            names a drive or starts with a separator
    """
    if not is_safe_segment(segment):
        logger.warning(f"Rejected path segment {segment!r} in {session.cur_path}")
        raise InvalidPathError(segment)
    return join(session.cur_path, segment)
