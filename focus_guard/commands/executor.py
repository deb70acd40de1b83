"""Command executor to route command-line arguments to command classes."""

import logging
from typing import List, Optional

from ..exceptions import FocusGuardError
from .base import Command, CommandContext
from .setup import SetupCommand
from .start import StartCommand
from .stop import StopCommand

logger = logging.getLogger(__name__)

USAGE = "Usage: focus-guard [start|stop]"


class CommandExecutor:
    """Executes the command selected on the command line."""

    def __init__(self, context: CommandContext):
        """Initialize the command executor with available commands."""
        self.context = context
        self.commands: List[Command] = [
            SetupCommand(),
            StartCommand(),
            StopCommand(),
        ]

    def execute(self, command_name: Optional[str]) -> int:
        """
        Execute a command and map the outcome to an exit status.

        Args:
            command_name: First command-line argument, or None

        Returns:
            0 on success, 1 on any failure or unknown command
        """
        for command in self.commands:
            if command.can_handle(command_name):
                return self._run(command, command_name)

        print(USAGE)
        return 1

    def _run(self, command: Command, command_name: Optional[str]) -> int:
        label = command_name or "setup"
        try:
            success = command.execute(self.context)
        except FocusGuardError as e:
            logger.error("%s failed: %s", label, e)
            print(f"✗ Error: {e}\n")
            return 1
        return 0 if success else 1
