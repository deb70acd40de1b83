"""Command layer for the focus guard dispatcher."""

from .base import Command, CommandContext
from .executor import CommandExecutor, USAGE
from .setup import SetupCommand
from .start import StartCommand
from .stop import StopCommand

__all__ = [
    "Command",
    "CommandContext",
    "CommandExecutor",
    "USAGE",
    "SetupCommand",
    "StartCommand",
    "StopCommand",
]
