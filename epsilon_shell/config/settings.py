"""
Configuration settings for the shell.
"""

import os

from dotenv import load_dotenv

from epsilon_shell.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings:
    """Shell settings loaded from environment variables."""

    def __init__(self):
        self.drive_root: str = os.path.abspath(
            os.path.expanduser(
                self._get_env("EPSILON_DRIVE_ROOT", "~/.epsilon/drive")
            )
        )
        self.drive_letter: str = self._get_drive_letter("EPSILON_DRIVE_LETTER", "0")
        self.version: str = self._get_env("EPSILON_VERSION", "0.1.0")
        self.build_label: str = self._get_env(
            "EPSILON_BUILD_LABEL", "May 2024 version // Experimental version"
        )
        self.top_bar_activated: bool = self._get_bool("EPSILON_TOP_BAR", True)
        self.control_bar_activated: bool = self._get_bool("EPSILON_CONTROL_BAR", True)
        self.log_level: str = self._get_log_level("EPSILON_LOG_LEVEL", "WARNING")

    @property
    def drive_prefix(self) -> str:
        """Root of the virtual drive, e.g. ``0:\\``."""
        return f"{self.drive_letter}:\\"

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get a boolean environment variable, raise error if it is not a boolean."""
        value = os.getenv(key)
        if value is None or not value.strip():
            return default
        value = value.strip().lower()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        raise ConfigurationError(
            f"Environment variable {key} must be a boolean, got {value!r}"
        )

    def _get_log_level(self, key: str, default: str) -> str:
        """Get a logging level name, raise error if logging does not know it."""
        value = self._get_env(key, default).strip().upper()
        if value not in _LOG_LEVELS:
            raise ConfigurationError(
                f"Environment variable {key} must be one of {', '.join(_LOG_LEVELS)}, got {value!r}"
            )
        return value

    def _get_drive_letter(self, key: str, default: str) -> str:
        """Get the drive letter, which must be a single character other than a separator."""
        value = self._get_env(key, default).strip()
        if len(value) != 1 or value in ("\\", "/", ":"):
            raise ConfigurationError(
                f"Environment variable {key} must be a single character, got {value!r}"
            )
        return value

