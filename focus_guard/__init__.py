"""Focus guard: keeps focus applications running on macOS."""

__version__ = "0.1.0"
