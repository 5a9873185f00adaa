"""Validation helpers for plaintext credential inputs."""

from __future__ import annotations

from criminal_checker.domain.auth.password_errors import InvalidCredentialError

MIN_SALT_ITEMS_COUNT = 20


def require_password(*, password: str | None) -> str:
    """Reject missing or blank passwords and return the password unchanged.

    Whitespace is significant for hashing, so the value is never stripped.
    """

    if password is None or not password.strip():
        raise InvalidCredentialError()
    return password
