"""Configuration for focus guard."""

import getpass
import os
from pathlib import Path
from typing import Dict, Mapping, Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_HOME = "~/.focus_guard"
DEFAULT_LAUNCH_AGENTS_DIR = "~/Library/LaunchAgents"
DEFAULT_CHECK_INTERVAL = 1.0
DEFAULT_PAUSE_THRESHOLD = 1200
DEFAULT_PAUSE_SECONDS = 60.0


def _default_controller_path() -> Path:
    """The dispatcher module itself is the file that gets locked."""
    return Path(__file__).resolve().parent / "cli.py"


def default_label(user: Optional[str] = None) -> str:
    """
    Build the launchd label for the current user.

    Args:
        user: Login name (defaults to the current user)

    Returns:
        Label of the form com.<user>.focusguard
    """
    user = user or getpass.getuser()
    safe_user = "".join(ch for ch in user.lower() if ch.isalnum() or ch in "-_") or "user"
    return f"com.{safe_user}.focusguard"


class Config:
    """Configuration class for focus guard.

    Every component receives an instance explicitly; nothing reads the
    environment after construction.
    """

    def __init__(self, home: Optional[str] = None, environ: Optional[Mapping[str, str]] = None):
        """
        Initialize configuration from environment variables.

        Args:
            home: Overrides FOCUS_GUARD_HOME
            environ: Mapping to read instead of os.environ
        """
        env = os.environ if environ is None else environ

        self.home = Path(home or env.get("FOCUS_GUARD_HOME", DEFAULT_HOME)).expanduser()

        # Persisted state
        self.credential_file = self._path(env, "FOCUS_GUARD_CREDENTIAL_FILE", self.home / "credential")
        self.log_file = self._path(env, "FOCUS_GUARD_LOG_FILE", self.home / "focus_guard.log")
        self.targets_file = self._path(env, "FOCUS_GUARD_TARGETS_FILE", self.home / "targets.json")
        self.monitor_script = self._path(env, "FOCUS_GUARD_MONITOR_SCRIPT", self.home / "monitor.py")

        # launchd registration
        self.launch_agents_dir = self._path(
            env, "FOCUS_GUARD_LAUNCH_AGENTS_DIR", Path(DEFAULT_LAUNCH_AGENTS_DIR).expanduser()
        )
        self.label = env.get("FOCUS_GUARD_LABEL") or default_label()

        # File made read-only while the guard is active
        self.controller_path = self._path(env, "FOCUS_GUARD_CONTROLLER", _default_controller_path())

        # Monitor pacing
        self.check_interval = float(env.get("FOCUS_GUARD_CHECK_INTERVAL", DEFAULT_CHECK_INTERVAL))
        self.pause_threshold = int(env.get("FOCUS_GUARD_PAUSE_THRESHOLD", DEFAULT_PAUSE_THRESHOLD))
        self.pause_seconds = float(env.get("FOCUS_GUARD_PAUSE_SECONDS", DEFAULT_PAUSE_SECONDS))

        self._validate()

    @staticmethod
    def _path(env: Mapping[str, str], key: str, default: Path) -> Path:
        value = env.get(key)
        return Path(value).expanduser() if value else default

    @property
    def descriptor_path(self) -> Path:
        """Location of the LaunchAgent property list."""
        return self.launch_agents_dir / f"{self.label}.plist"

    def to_environ(self) -> Dict[str, str]:
        """
        Export the resolved settings as FOCUS_GUARD_* variables.

        launchd starts the monitor without the user's shell environment, so the
        generated monitor script carries this mapping and rebuilds an equal
        Config from it.

        Returns:
            Mapping accepted by Config(environ=...)
        """
        return {
            "FOCUS_GUARD_HOME": str(self.home),
            "FOCUS_GUARD_CREDENTIAL_FILE": str(self.credential_file),
            "FOCUS_GUARD_LOG_FILE": str(self.log_file),
            "FOCUS_GUARD_TARGETS_FILE": str(self.targets_file),
            "FOCUS_GUARD_MONITOR_SCRIPT": str(self.monitor_script),
            "FOCUS_GUARD_LAUNCH_AGENTS_DIR": str(self.launch_agents_dir),
            "FOCUS_GUARD_LABEL": self.label,
            "FOCUS_GUARD_CONTROLLER": str(self.controller_path),
            "FOCUS_GUARD_CHECK_INTERVAL": repr(self.check_interval),
            "FOCUS_GUARD_PAUSE_THRESHOLD": str(self.pause_threshold),
            "FOCUS_GUARD_PAUSE_SECONDS": repr(self.pause_seconds),
        }

    def _validate(self):
        """Validate configuration values."""
        if self.check_interval <= 0:
            raise ValueError(f"Check interval must be positive, got {self.check_interval}")

        if self.pause_threshold <= 0:
            raise ValueError(f"Pause threshold must be positive, got {self.pause_threshold}")

        if self.pause_seconds < 0:
            raise ValueError(f"Pause duration cannot be negative, got {self.pause_seconds}")

        if not self.label or "/" in self.label:
            raise ValueError(f"Invalid launchd label '{self.label}'")


__all__ = [
    "Config",
    "default_label",
    "DEFAULT_CHECK_INTERVAL",
    "DEFAULT_PAUSE_THRESHOLD",
    "DEFAULT_PAUSE_SECONDS",
]
