"""Password gate guarding the start and stop commands."""

import getpass
import hashlib
import hmac
import logging
import os
import re
from pathlib import Path
from typing import Callable, Optional, Union

from .exceptions import AuthenticationError, MismatchError, MissingCredentialError, WriteError

logger = logging.getLogger(__name__)

_DIGEST_RE = re.compile(r"^[0-9a-f]{64}$")


def hash_secret(secret: str) -> str:
    """Return the hex SHA-256 digest stored in the credential record."""
    return hashlib.sha256(secret.encode("utf-8")).hexdigest()


class CredentialGate:
    """Stores a single password hash and checks entered passwords against it."""

    def __init__(self, credential_file: Union[str, Path],
                 prompt: Optional[Callable[[str], str]] = None):
        """
        Initialize the gate.

        Args:
            credential_file: File holding the hex digest
            prompt: Non-echoing input function (defaults to getpass.getpass)
        """
        self.credential_file = Path(credential_file)
        self._prompt = prompt or getpass.getpass

    def is_configured(self) -> bool:
        """Check whether a credential record exists."""
        return self.credential_file.exists()

    def setup(self) -> None:
        """
        Ask for a new password twice and persist its hash.

        Raises:
            MismatchError: The two entries differ or the password is empty
            WriteError: The record could not be created (including when one already exists)
        """
        first = self._prompt("Set a password: ")
        second = self._prompt("Confirm password: ")

        if first != second:
            logger.error("Password setup failed: entries did not match")
            raise MismatchError("Passwords do not match")
        if not first:
            logger.error("Password setup failed: empty password")
            raise MismatchError("Password cannot be empty")

        self._write_record(hash_secret(first))
        logger.info("Password set up")

    def verify(self) -> None:
        """
        Ask for the password and compare it with the stored hash.

        Raises:
            MissingCredentialError: No usable record exists
            AuthenticationError: The password is wrong
        """
        stored = self._read_record()
        entered = self._prompt("Password: ")

        if not hmac.compare_digest(hash_secret(entered), stored):
            logger.error("Authentication failed")
            raise AuthenticationError("Incorrect password")

    def _read_record(self) -> str:
        try:
            content = self.credential_file.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.error("No password set (%s missing)", self.credential_file)
            raise MissingCredentialError("No password set. Run focus-guard with no arguments first.")
        except OSError as e:
            logger.error("Could not read credential record: %s", e)
            raise MissingCredentialError(f"Could not read credential record: {e}") from e

        digest = content.strip()
        if not _DIGEST_RE.match(digest):
            logger.error("Credential record %s is corrupt", self.credential_file)
            raise MissingCredentialError("Credential record is corrupt")
        return digest

    def _write_record(self, digest: str) -> None:
        try:
            self.credential_file.parent.mkdir(parents=True, exist_ok=True)
            # Exclusive create: an existing record is never rewritten
            fd = os.open(self.credential_file, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(digest + "\n")
        except FileExistsError as e:
            logger.error("Credential record %s already exists", self.credential_file)
            raise WriteError("A password is already set") from e
        except OSError as e:
            logger.error("Could not write credential record %s: %s", self.credential_file, e)
            raise WriteError(f"Could not write credential record: {e}") from e
