"""Process liveness checks."""

from typing import Iterable, Optional
import psutil


def _process_names() -> Iterable[Optional[str]]:
    for proc in psutil.process_iter(['name']):
        try:
            yield proc.info['name']
        except (psutil.NoSuchProcess, psutil.AccessDenied):
            continue


def is_process_running(process_name: str) -> bool:
    """
    Check whether a process with exactly this name is running.

    Matching is case-insensitive but otherwise exact, so "Slack" does not
    match "Slack Helper".

    Args:
        process_name: Name of the process to look for

    Returns:
        True if at least one matching process exists
    """
    wanted = process_name.lower()
    for name in _process_names():
        if name and name.lower() == wanted:
            return True
    return False
