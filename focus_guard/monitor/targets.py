"""Monitored applications and how each one is relaunched."""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Union

from ..exceptions import ConfigError
from .relaunch import FixedBundleOpen, Relauncher, SpotlightLaunch
from ..utils import AppleScriptExecutor

VALID_STRATEGIES = ["spotlight", "bundle"]

# Used when no targets file exists
DEFAULT_TARGETS = {
    "SelfControl": {"strategy": "bundle", "bundle_path": "/Applications/SelfControl.app"},
    "Cold Turkey Blocker": {"strategy": "spotlight"},
}


@dataclass
class Target:
    """An application that must stay running."""
    name: str
    relauncher: Relauncher


def _validate_target(name: str, entry: Any) -> None:
    """
    Validate one targets file entry.

    Raises:
        ConfigError: If the entry is malformed
    """
    if not isinstance(name, str) or not name.strip():
        raise ConfigError("Target names must be non-empty strings")

    if not isinstance(entry, dict):
        raise ConfigError(f"Target '{name}' must be an object")

    strategy = entry.get("strategy")
    if strategy not in VALID_STRATEGIES:
        raise ConfigError(
            f"Target '{name}' has invalid strategy '{strategy}'. "
            f"Must be one of: {', '.join(VALID_STRATEGIES)}"
        )

    if strategy == "bundle":
        bundle_path = entry.get("bundle_path")
        if not isinstance(bundle_path, str) or not bundle_path:
            raise ConfigError(f"Target '{name}' uses strategy 'bundle' but has no bundle_path")


def build_relauncher(entry: dict, executor: Optional[AppleScriptExecutor] = None) -> Relauncher:
    """Create the relaunch strategy described by a validated entry."""
    if entry["strategy"] == "bundle":
        return FixedBundleOpen(entry["bundle_path"], executor=executor)
    return SpotlightLaunch(executor=executor)


def parse_targets(data: Any, executor: Optional[AppleScriptExecutor] = None) -> List[Target]:
    """
    Turn a decoded targets document into Target objects.

    Args:
        data: Mapping of target name to entry
        executor: Shared AppleScript executor for the relaunchers

    Returns:
        Targets in document order

    Raises:
        ConfigError: If the document is malformed or empty
    """
    if not isinstance(data, dict) or not data:
        raise ConfigError("Targets must be a non-empty JSON object")

    targets = []
    for name, entry in data.items():
        _validate_target(name, entry)
        targets.append(Target(name=name, relauncher=build_relauncher(entry, executor)))
    return targets


def load_targets(path: Union[str, Path], executor: Optional[AppleScriptExecutor] = None) -> List[Target]:
    """
    Load targets from a JSON file, falling back to the built-in defaults when
    the file does not exist.

    Args:
        path: Path to the targets file
        executor: Shared AppleScript executor for the relaunchers

    Returns:
        List of targets

    Raises:
        ConfigError: If the file exists but cannot be read or is invalid
    """
    if not os.path.exists(path):
        return parse_targets(DEFAULT_TARGETS, executor)

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in targets file '{path}': {e}") from e
    except OSError as e:
        raise ConfigError(f"Could not read targets file '{path}': {e}") from e

    return parse_targets(data, executor)
