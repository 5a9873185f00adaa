"""Salted SHA-256 password hasher adapter backed by a salt file."""

from __future__ import annotations

import hashlib
import hmac
import logging
import os
import random
import secrets
from pathlib import Path, PurePath

from criminal_checker.application.ports.password_hasher_port import (
    RANDOM_SALT_POSITION,
    HashResult,
    PasswordHasherPort,
)
from criminal_checker.application.ports.salt_store_port import SaltStorePort
from criminal_checker.config.settings import Settings, load_settings
from criminal_checker.domain.auth.credentials import MIN_SALT_ITEMS_COUNT, require_password
from criminal_checker.domain.auth.password_errors import (
    InvalidArgumentError,
    InvalidConfigurationError,
    SaltPositionOutOfRangeError,
)
from criminal_checker.infrastructure.logging import configure_logging
from criminal_checker.infrastructure.security.salt_store import SaltFileStore

logger = logging.getLogger(__name__)


class SaltFilePasswordHasher(PasswordHasherPort):
    """Password hashing adapter mixing one salt-file line into a SHA-256 digest.

    The digest covers the UTF-8 password bytes followed by the UTF-8 bytes of
    the selected salt line. Callers must keep the returned salt position next
    to the digest; verification needs the same position.
    """

    def __init__(
        self,
        *,
        path_to_salt: str | Path,
        salt_items_count: int,
        random_source: random.Random | None = None,
        salt_store: SaltStorePort | None = None,
    ) -> None:
        _require_salt_path(path_to_salt)
        if salt_items_count <= MIN_SALT_ITEMS_COUNT:
            raise InvalidConfigurationError(
                field="salt_items_count",
                reason=f"must be greater than {MIN_SALT_ITEMS_COUNT}",
            )

        self._salt_store = salt_store if salt_store is not None else SaltFileStore(path_to_salt)
        self._salt_items_count = salt_items_count
        self._random = random_source if random_source is not None else secrets.SystemRandom()

    @property
    def salt_items_count(self) -> int:
        return self._salt_items_count

    def hash_password(
        self,
        password: str,
        salt_position: int = RANDOM_SALT_POSITION,
    ) -> HashResult:
        password_bytes = require_password(password=password).encode("utf-8")
        position = self._resolve_salt_position(salt_position)
        salt = self._salt_store.read_salt(position)
        return HashResult(position=position, digest=hashlib.sha256(password_bytes + salt).digest())

    def verify_password(
        self,
        *,
        password: str,
        password_hash: bytes,
        salt_position: int,
    ) -> bool:
        require_password(password=password)
        if not password_hash:
            raise InvalidArgumentError(argument="password_hash")

        _, digest = self.hash_password(password, salt_position)
        if len(digest) != len(password_hash):
            return False
        return hmac.compare_digest(digest, bytes(password_hash))

    def _resolve_salt_position(self, salt_position: int) -> int:
        """Map the random sentinel to a concrete position; pass others through."""

        if salt_position == RANDOM_SALT_POSITION:
            position = self._random.randrange(0, self._salt_items_count - 2)
            logger.debug("selected random salt position")
            return position
        if salt_position < 0:
            raise SaltPositionOutOfRangeError(position=salt_position)
        return salt_position


def _require_salt_path(path_to_salt: str | Path | None) -> None:
    """Reject missing, blank or empty salt-file locations."""

    # Path("") normalizes to "." and has no parts.
    if (
        path_to_salt is None
        or (isinstance(path_to_salt, PurePath) and not path_to_salt.parts)
        or not os.fspath(path_to_salt).strip()
    ):
        raise InvalidConfigurationError(field="path_to_salt", reason="cannot be blank")


def build_password_hasher(settings: Settings) -> SaltFilePasswordHasher:
    """Build salt-file password hasher from runtime settings."""

    return SaltFilePasswordHasher(
        path_to_salt=settings.salt_file_path,
        salt_items_count=settings.salt_items_count,
    )


def bootstrap_password_hasher(settings: Settings | None = None) -> SaltFilePasswordHasher:
    """Configure process logging and build the hasher for a host process."""

    resolved = settings if settings is not None else load_settings()
    configure_logging(level=resolved.log_level)
    hasher = build_password_hasher(resolved)
    logger.info("password hasher ready with %d salt entries", hasher.salt_items_count)
    return hasher
