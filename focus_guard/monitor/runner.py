"""Entry point of the launchd-supervised monitor process."""

import argparse
import logging
import sys
from typing import List, Mapping, Optional

from ..config import Config
from ..exceptions import FocusGuardError
from ..logging_setup import setup_logging
from ..utils import AppleScriptExecutor
from .loop import MonitorLoop
from .notifier import Notifier
from .targets import load_targets

logger = logging.getLogger(__name__)


def build_loop(config: Config, executor: Optional[AppleScriptExecutor] = None) -> MonitorLoop:
    """
    Create a monitor loop from the configuration.

    Raises:
        ConfigError: If the targets file is invalid
    """
    executor = executor or AppleScriptExecutor()
    targets = load_targets(config.targets_file, executor=executor)
    return MonitorLoop(
        targets,
        notifier=Notifier(executor),
        check_interval=config.check_interval,
        pause_threshold=config.pause_threshold,
        pause_seconds=config.pause_seconds,
    )


def main(argv: Optional[List[str]] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    """
    Run the monitor loop. Returns only on a startup error.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])
        environ: Settings baked into the generated monitor script; None reads os.environ

    Returns:
        1 if the monitor could not start
    """
    parser = argparse.ArgumentParser(prog="focus-guard-monitor")
    parser.add_argument("--home", help="focus guard home directory")
    parser.add_argument("--iterations", type=int, default=None, help=argparse.SUPPRESS)
    args = parser.parse_args(argv)

    try:
        config = Config(home=args.home, environ=environ)
    except ValueError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    try:
        setup_logging(config.log_file)
    except OSError as e:
        print(f"Error: cannot open log file '{config.log_file}': {e}", file=sys.stderr)
        return 1

    try:
        loop = build_loop(config)
    except FocusGuardError as e:
        logger.error("Monitor could not start: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    loop.run(max_iterations=args.iterations)
    return 0
