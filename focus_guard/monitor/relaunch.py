"""Relaunch strategies for monitored applications."""

from abc import ABC, abstractmethod
import logging
from typing import Optional

from ..utils import AppleScriptExecutor, escape_applescript_string

logger = logging.getLogger(__name__)


class Relauncher(ABC):
    """Abstract base class for the ways a missing application is started again."""

    #: Name used for the strategy in the targets file
    strategy_name = ""

    def __init__(self, executor: Optional[AppleScriptExecutor] = None):
        self._executor = executor or AppleScriptExecutor()

    @abstractmethod
    def build_script(self, app_name: str) -> str:
        """
        Build the AppleScript that launches the application.

        Args:
            app_name: Name of the application as shown to the user

        Returns:
            AppleScript source
        """
        pass

    def launch(self, app_name: str) -> bool:
        """
        Launch the application.

        Args:
            app_name: Name of the application

        Returns:
            True if osascript reported success, False otherwise
        """
        success, _, stderr = self._executor.execute(self.build_script(app_name))
        if not success:
            logger.debug("%s relaunch of '%s' failed: %s", self.strategy_name, app_name, stderr)
        return success


class SpotlightLaunch(Relauncher):
    """Open the application by searching for it in Spotlight."""

    strategy_name = "spotlight"

    def __init__(self, executor: Optional[AppleScriptExecutor] = None, delay: float = 0.5):
        super().__init__(executor)
        self.delay = delay

    def build_script(self, app_name: str) -> str:
        escaped = escape_applescript_string(app_name)
        return f'''
        tell application "System Events"
            keystroke space using command down
            delay {self.delay}
            keystroke "{escaped}"
            delay {self.delay}
            key code 36
        end tell
        '''

    def __repr__(self):
        return "SpotlightLaunch()"


class FixedBundleOpen(Relauncher):
    """Open a fixed .app bundle by running `open` in a new Terminal window."""

    strategy_name = "bundle"

    def __init__(self, bundle_path: str, executor: Optional[AppleScriptExecutor] = None):
        super().__init__(executor)
        if not bundle_path:
            raise ValueError("bundle_path is required")
        self.bundle_path = bundle_path

    def build_script(self, app_name: str) -> str:
        escaped = escape_applescript_string(self.bundle_path)
        return f'''
        tell application "Terminal"
            do script "open " & quoted form of "{escaped}"
        end tell
        '''

    def __repr__(self):
        return f"FixedBundleOpen({self.bundle_path!r})"
