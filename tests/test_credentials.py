import hashlib
import logging
import stat

import pytest

from conftest import make_prompt
from focus_guard.credentials import CredentialGate, hash_secret
from focus_guard.exceptions import (
    AuthenticationError,
    MismatchError,
    MissingCredentialError,
    WriteError,
)
from focus_guard.logging_setup import setup_logging


@pytest.fixture
def record(tmp_path):
    return tmp_path / "home" / "credential"


def test_setup_then_verify_with_same_secret(record):
    CredentialGate(record, prompt=make_prompt("abc", "abc")).setup()

    assert record.exists()
    CredentialGate(record, prompt=make_prompt("abc")).verify()


@pytest.mark.parametrize("secret", ["xyz", "ABC", "abc ", ""])
def test_verify_with_other_secret_fails(record, secret):
    CredentialGate(record, prompt=make_prompt("abc", "abc")).setup()

    with pytest.raises(AuthenticationError):
        CredentialGate(record, prompt=make_prompt(secret)).verify()


def test_verify_before_setup_fails(record):
    gate = CredentialGate(record, prompt=make_prompt("abc"))
    assert not gate.is_configured()
    with pytest.raises(MissingCredentialError):
        gate.verify()


def test_mismatched_entries_write_nothing(record):
    with pytest.raises(MismatchError):
        CredentialGate(record, prompt=make_prompt("abc", "abd")).setup()
    assert not record.exists()


def test_empty_password_rejected(record):
    with pytest.raises(MismatchError):
        CredentialGate(record, prompt=make_prompt("", "")).setup()
    assert not record.exists()


def test_record_is_single_hex_digest_line(record):
    CredentialGate(record, prompt=make_prompt("abc", "abc")).setup()

    content = record.read_text()
    assert content == hashlib.sha256(b"abc").hexdigest() + "\n"
    assert content.strip() == hash_secret("abc")
    assert stat.S_IMODE(record.stat().st_mode) == 0o600


def test_existing_record_is_never_rewritten(record):
    CredentialGate(record, prompt=make_prompt("abc", "abc")).setup()
    before = record.read_text()

    with pytest.raises(WriteError):
        CredentialGate(record, prompt=make_prompt("new", "new")).setup()

    assert record.read_text() == before


def test_corrupt_record_counts_as_missing(record):
    record.parent.mkdir(parents=True)
    record.write_text("not a digest\n")

    with pytest.raises(MissingCredentialError):
        CredentialGate(record, prompt=make_prompt("abc")).verify()


def test_secret_and_hash_never_logged(tmp_path, record):
    log_file = tmp_path / "guard.log"
    setup_logging(log_file)

    CredentialGate(record, prompt=make_prompt("s3cret", "s3cret")).setup()
    with pytest.raises(AuthenticationError):
        CredentialGate(record, prompt=make_prompt("wrong")).verify()

    text = log_file.read_text()
    assert "Password set up" in text
    assert "Authentication failed" in text
    assert "s3cret" not in text
    assert "wrong" not in text
    assert hash_secret("s3cret") not in text
