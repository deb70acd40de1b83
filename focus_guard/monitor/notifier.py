"""User notifications through Notification Center."""

import logging
from typing import Optional

from ..utils import AppleScriptExecutor, escape_applescript_string

logger = logging.getLogger(__name__)


class Notifier:
    """Posts macOS notifications with `display notification`."""

    def __init__(self, executor: Optional[AppleScriptExecutor] = None, title: str = "Focus Guard"):
        self._executor = executor or AppleScriptExecutor()
        self.title = title

    def notify(self, message: str) -> bool:
        """
        Show a notification.

        Args:
            message: Notification body

        Returns:
            True if successful, False otherwise
        """
        script = (
            f'display notification "{escape_applescript_string(message)}" '
            f'with title "{escape_applescript_string(self.title)}"'
        )
        success, _, stderr = self._executor.execute(script)
        if not success:
            logger.error("Notification failed: %s", stderr)
        return success
