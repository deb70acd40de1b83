"""Utility modules for focus guard."""

from .applescript import AppleScriptExecutor, escape_applescript_string

__all__ = ["AppleScriptExecutor", "escape_applescript_string"]
