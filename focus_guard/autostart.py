"""LaunchAgent registration for the monitor process."""

import logging
import plistlib
import subprocess
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from .config import Config
from .exceptions import ServiceManagerError, WriteError

logger = logging.getLogger(__name__)


class AutostartRegistrar:
    """Installs the launchd descriptor and loads or unloads it with launchctl."""

    def __init__(self, config: Config,
                 runner: Optional[Callable[..., subprocess.CompletedProcess]] = None):
        """
        Initialize the registrar.

        Args:
            config: Focus guard configuration
            runner: Callable with the signature of subprocess.run (tests pass a fake)
        """
        self.config = config
        self._runner = runner or subprocess.run

    @property
    def descriptor_path(self) -> Path:
        return self.config.descriptor_path

    def is_installed(self) -> bool:
        return self.descriptor_path.exists()

    def build_descriptor(self) -> Dict[str, Any]:
        """Return the property list contents for the monitor agent."""
        return {
            "Label": self.config.label,
            "ProgramArguments": [str(self.config.monitor_script)],
            "RunAtLoad": True,
            "KeepAlive": True,
            "StandardOutPath": str(self.config.home / "monitor.out"),
            "StandardErrorPath": str(self.config.home / "monitor.err"),
        }

    def install(self) -> Path:
        """
        Write the descriptor, replacing any previous one at the same path.

        Returns:
            Path of the descriptor

        Raises:
            WriteError: The LaunchAgents directory or the file could not be written
        """
        path = self.descriptor_path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "wb") as f:
                plistlib.dump(self.build_descriptor(), f)
        except OSError as e:
            logger.error("Could not write launch agent %s: %s", path, e)
            raise WriteError(f"Could not write launch agent '{path}': {e}") from e

        logger.info("Installed launch agent %s", path)
        return path

    def activate(self) -> None:
        """Ask launchd to load the descriptor."""
        self._launchctl("load")

    def deactivate(self) -> None:
        """
        Ask launchd to unload the descriptor, which also stops the monitor.

        The descriptor file stays on disk.
        """
        self._launchctl("unload")

    def _launchctl(self, action: str) -> None:
        path = str(self.descriptor_path)
        try:
            result = self._runner(
                ["launchctl", action, path],
                capture_output=True,
                text=True,
                timeout=10,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.error("launchctl %s %s failed to run: %s", action, path, e)
            raise ServiceManagerError(f"launchctl {action} failed: {e}") from e

        stderr = (result.stderr or "").strip()
        # launchctl load/unload can exit 0 while reporting the failure on stderr
        if result.returncode != 0 or stderr:
            detail = stderr or f"exit status {result.returncode}"
            logger.error("launchctl %s %s rejected: %s", action, path, detail)
            raise ServiceManagerError(f"launchctl {action} rejected: {detail}")

        logger.info("launchctl %s %s", action, path)
