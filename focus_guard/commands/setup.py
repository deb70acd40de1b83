"""Command to set the password on first run."""

from .base import Command, CommandContext


class SetupCommand(Command):
    """First-run password setup, selected when no argument is given."""

    name = None

    def execute(self, context: CommandContext) -> bool:
        if context.gate.is_configured():
            print("A password is already set.")
            print("Use 'focus-guard start' or 'focus-guard stop'.\n")
            return False

        context.gate.setup()
        print("✓ Password set. Run 'focus-guard start' to begin monitoring.\n")
        return True
