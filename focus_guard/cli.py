"""Command-line dispatcher: `focus-guard`, `focus-guard start`, `focus-guard stop`."""

import sys
from typing import Callable, List, Optional

from .autostart import AutostartRegistrar
from .commands import CommandContext, CommandExecutor, USAGE
from .config import Config
from .credentials import CredentialGate
from .logging_setup import setup_logging


def build_context(config: Config, prompt: Optional[Callable[[str], str]] = None,
                  runner=None) -> CommandContext:
    """
    Wire the collaborators for one invocation.

    Args:
        config: Focus guard configuration
        prompt: Password prompt (defaults to getpass)
        runner: subprocess.run replacement for launchctl calls
    """
    return CommandContext(
        config=config,
        gate=CredentialGate(config.credential_file, prompt=prompt),
        registrar=AutostartRegistrar(config, runner=runner),
    )


def main(argv: Optional[List[str]] = None, config: Optional[Config] = None,
         prompt: Optional[Callable[[str], str]] = None, runner=None) -> int:
    """Run the dispatcher and return the process exit status."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) > 1:
        print(USAGE)
        return 1

    try:
        config = config or Config()
        setup_logging(config.log_file)
    except (ValueError, OSError) as e:
        print(f"✗ Error: {e}")
        return 1

    executor = CommandExecutor(build_context(config, prompt=prompt, runner=runner))
    return executor.execute(args[0] if args else None)


if __name__ == "__main__":
    sys.exit(main())
