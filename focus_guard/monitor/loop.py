"""The long-running liveness loop with its periodic pause."""

import enum
import logging
import time
from typing import Callable, List, Optional

from ..config import DEFAULT_CHECK_INTERVAL, DEFAULT_PAUSE_SECONDS, DEFAULT_PAUSE_THRESHOLD
from .notifier import Notifier
from .process_monitor import is_process_running
from .targets import Target

logger = logging.getLogger(__name__)

PAUSE_MESSAGE = "Focus check paused for {seconds:g} seconds."


class MonitorState(enum.Enum):
    ACTIVE = "active"
    PAUSED = "paused"


class MonitorLoop:
    """Relaunches missing targets once per interval and pauses every
    `pause_threshold` iterations.

    A target that keeps crashing is relaunched on every iteration; there is
    no cap and no backoff.
    """

    def __init__(
        self,
        targets: List[Target],
        notifier: Optional[Notifier] = None,
        check_interval: float = DEFAULT_CHECK_INTERVAL,
        pause_threshold: int = DEFAULT_PAUSE_THRESHOLD,
        pause_seconds: float = DEFAULT_PAUSE_SECONDS,
        is_running: Callable[[str], bool] = is_process_running,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.targets = list(targets)
        self.notifier = notifier or Notifier()
        self.check_interval = check_interval
        self.pause_threshold = pause_threshold
        self.pause_seconds = pause_seconds
        self._is_running = is_running
        self._sleep = sleep

        self.state = MonitorState.ACTIVE
        self.iteration = 0
        self.pause_count = 0

    def step(self) -> MonitorState:
        """Run one iteration and return the state it ends in."""
        self.iteration += 1

        for target in self.targets:
            self._check_target(target)

        if self.iteration >= self.pause_threshold:
            self._pause()

        self._sleep(self.check_interval)
        return self.state

    def run(self, max_iterations: Optional[int] = None) -> None:
        """
        Loop until the process is killed, or for `max_iterations` iterations.

        Args:
            max_iterations: Stop after this many iterations (None = forever)
        """
        logger.info(
            "Monitor started for %s",
            ", ".join(target.name for target in self.targets),
        )
        done = 0
        while max_iterations is None or done < max_iterations:
            self.step()
            done += 1

    def _check_target(self, target: Target) -> None:
        # A failure here must not keep the other targets from being checked
        try:
            if self._is_running(target.name):
                return
            logger.info("%s is not running, relaunching", target.name)
            if not target.relauncher.launch(target.name):
                logger.error("Failed to relaunch %s", target.name)
        except Exception as e:
            logger.error("Error while checking %s: %s", target.name, e)

    def _pause(self) -> None:
        self.state = MonitorState.PAUSED
        self.pause_count += 1
        logger.info(
            "Reached %d iterations, pausing for %g seconds",
            self.iteration, self.pause_seconds,
        )
        self.notifier.notify(PAUSE_MESSAGE.format(seconds=self.pause_seconds))
        self._sleep(self.pause_seconds)

        self.iteration = 0
        self.state = MonitorState.ACTIVE
        logger.info("Pause over, monitoring resumed")
