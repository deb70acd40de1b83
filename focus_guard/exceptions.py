"""Custom exception classes for focus guard."""


class FocusGuardError(Exception):
    """Base exception for focus guard errors."""
    pass


class ConfigError(FocusGuardError):
    """Exception raised when the targets file or settings are invalid."""
    pass


class CredentialError(FocusGuardError):
    """Base exception for password gate errors."""
    pass


class MismatchError(CredentialError):
    """Exception raised when the two setup entries differ (or are empty)."""
    pass


class MissingCredentialError(CredentialError):
    """Exception raised when no usable credential record exists."""
    pass


class AuthenticationError(CredentialError):
    """Exception raised when the entered password does not match the record."""
    pass


class WriteError(FocusGuardError):
    """Exception raised when a file or directory cannot be created."""
    pass


class LockError(FocusGuardError, PermissionError):
    """Exception raised when the filesystem refuses a permission change."""
    pass


class ServiceManagerError(FocusGuardError):
    """Exception raised when launchctl rejects a load or unload request."""
    pass

