"""Command to stop the monitor."""

import logging

from ..lock import unlock_all
from .base import Command, CommandContext

logger = logging.getLogger(__name__)


class StopCommand(Command):
    """Verify the password, unload the launch agent, then unlock.

    The descriptor stays in the LaunchAgents directory; it is only unloaded.
    """

    name = "stop"

    def execute(self, context: CommandContext) -> bool:
        context.gate.verify()

        context.registrar.deactivate()

        unlock_all(context.lock_paths())

        logger.info("Focus guard stopped")
        print("✓ Focus guard stopped\n")
        return True
