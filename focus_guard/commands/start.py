"""Command to register and start the monitor."""

import logging

from ..launcher import write_monitor_script
from ..lock import lock_all
from .base import Command, CommandContext

logger = logging.getLogger(__name__)


class StartCommand(Command):
    """Verify the password, install and load the launch agent, then lock.

    If locking fails after the agent is loaded, the agent stays loaded and the
    command exits 1; run `stop` to unload it and unlock any locked file.
    """

    name = "start"

    def execute(self, context: CommandContext) -> bool:
        context.gate.verify()

        write_monitor_script(context.config)
        context.registrar.install()
        context.registrar.activate()

        # Last step: earlier failures leave the files writable
        lock_all(context.lock_paths())

        logger.info("Focus guard started")
        print("✓ Focus guard started\n")
        return True
