"""AppleScript execution utilities."""

import subprocess
from typing import Callable, Optional, Tuple


def escape_applescript_string(text: str) -> str:
    """
    Escape special characters for AppleScript string literals.

    Args:
        text: String to escape

    Returns:
        Escaped string safe for use in AppleScript
    """
    # Backslashes first
    text = text.replace("\\", "\\\\")
    text = text.replace('"', '\\"')
    text = text.replace("\n", "\\n")
    text = text.replace("\r", "\\r")
    text = text.replace("\t", "\\t")
    return text


class AppleScriptExecutor:
    """Centralized AppleScript execution with standardized error handling."""

    def __init__(self, runner: Optional[Callable[..., subprocess.CompletedProcess]] = None,
                 timeout: float = 30.0):
        """
        Initialize the AppleScript executor.

        Args:
            runner: Callable with the signature of subprocess.run (tests pass a fake)
            timeout: Seconds before osascript is abandoned
        """
        self._runner = runner or subprocess.run
        self.timeout = timeout

    def execute(self, script: str) -> Tuple[bool, Optional[str], Optional[str]]:
        """
        Execute an AppleScript command.

        Args:
            script: AppleScript code to execute

        Returns:
            Tuple of (success, stdout, stderr)
            - success: True if return code is 0, False otherwise
            - stdout: Standard output (None if empty)
            - stderr: Standard error (None if empty)
        """
        try:
            result = self._runner(
                ["osascript", "-e", script],
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )

            success = result.returncode == 0
            stdout = result.stdout.strip() if result.stdout and result.stdout.strip() else None
            stderr = result.stderr.strip() if result.stderr and result.stderr.strip() else None

            return success, stdout, stderr
        except (OSError, subprocess.TimeoutExpired) as e:
            return False, None, str(e)
