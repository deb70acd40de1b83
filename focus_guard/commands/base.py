"""Base command class for focus guard commands."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ..autostart import AutostartRegistrar
from ..config import Config
from ..credentials import CredentialGate


@dataclass
class CommandContext:
    """Collaborators shared by every command of one invocation."""
    config: Config
    gate: CredentialGate
    registrar: AutostartRegistrar

    def lock_paths(self) -> List[Path]:
        """Files made read-only while the guard is active."""
        paths = [self.config.controller_path]
        if self.config.targets_file.exists():
            paths.append(self.config.targets_file)
        return paths


class Command(ABC):
    """Abstract base class for focus guard commands."""

    #: Command-line argument selecting the command (None = no argument)
    name: Optional[str] = None

    def can_handle(self, command_name: Optional[str]) -> bool:
        """
        Check if this command handles the given command-line argument.

        Args:
            command_name: First command-line argument, or None when absent

        Returns:
            True if this command handles it
        """
        return command_name == self.name

    @abstractmethod
    def execute(self, context: CommandContext) -> bool:
        """
        Execute the command.

        Steps run strictly in order and the first failure raises, so nothing
        after it (in particular the lock toggle) happens.

        Args:
            context: Collaborators for this invocation

        Returns:
            True if execution succeeded, False otherwise

        Raises:
            FocusGuardError: A step failed
        """
        pass
