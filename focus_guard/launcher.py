"""Generates the executable script that launchd runs."""

import logging
import os
import pprint
import sys
from pathlib import Path
from typing import Optional

from .config import Config
from .exceptions import WriteError

logger = logging.getLogger(__name__)

# launchd does not pass the user's shell environment to agents, so the
# dispatcher's resolved settings are written into the script itself.
_TEMPLATE = '''#!{interpreter}
# Generated by focus-guard start. Regenerated on every start.
import sys

from focus_guard.monitor import main

ENVIRON = {environ}

sys.exit(main([], environ=ENVIRON))
'''


def render_monitor_script(config: Config, interpreter: Optional[str] = None) -> str:
    """Return the script text for *config*, pinned to the given interpreter."""
    return _TEMPLATE.format(
        interpreter=interpreter or sys.executable,
        environ=pprint.pformat(config.to_environ(), indent=4),
    )


def write_monitor_script(config: Config, interpreter: Optional[str] = None) -> Path:
    """
    Write the monitor script and mark it executable.

    Args:
        config: Focus guard configuration
        interpreter: Python used in the shebang (defaults to the running one)

    Returns:
        Path of the script

    Raises:
        WriteError: The script could not be written
    """
    path = config.monitor_script
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_monitor_script(config, interpreter), encoding="utf-8")
        os.chmod(path, 0o755)
    except OSError as e:
        logger.error("Could not write monitor script %s: %s", path, e)
        raise WriteError(f"Could not write monitor script '{path}': {e}") from e

    logger.info("Wrote monitor script %s", path)
    return path
