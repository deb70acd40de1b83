"""Monitor process: liveness checks, relaunching and the pause cycle."""

from .relaunch import Relauncher, SpotlightLaunch, FixedBundleOpen
from .targets import Target, load_targets, parse_targets, DEFAULT_TARGETS
from .process_monitor import is_process_running
from .notifier import Notifier
from .loop import MonitorLoop, MonitorState
from .runner import build_loop, main

__all__ = [
    'Relauncher',
    'SpotlightLaunch',
    'FixedBundleOpen',
    'Target',
    'load_targets',
    'parse_targets',
    'DEFAULT_TARGETS',
    'is_process_running',
    'Notifier',
    'MonitorLoop',
    'MonitorState',
    'build_loop',
    'main',
]
