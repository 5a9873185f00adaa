"""Port for salted password hashing and verification."""

from __future__ import annotations

from typing import NamedTuple, Protocol

RANDOM_SALT_POSITION = -1


class HashResult(NamedTuple):
    """Salt position used for one digest together with the digest bytes."""

    position: int
    digest: bytes


class PasswordHasherPort(Protocol):
    """Password hashing/verification contract."""

    def hash_password(
        self,
        password: str,
        salt_position: int = RANDOM_SALT_POSITION,
    ) -> HashResult:
        """Hash plaintext password with the salt at `salt_position`."""

    def verify_password(
        self,
        *,
        password: str,
        password_hash: bytes,
        salt_position: int,
    ) -> bool:
        """Verify plaintext password against stored digest and salt position."""
