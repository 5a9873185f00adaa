"""File-backed salt store with one salt entry per text line."""

from __future__ import annotations

import logging
from pathlib import Path

from criminal_checker.application.ports.salt_store_port import SaltStorePort
from criminal_checker.domain.auth.password_errors import (
    SaltPositionOutOfRangeError,
    SaltStoreNotFoundError,
)

logger = logging.getLogger(__name__)


class SaltFileStore(SaltStorePort):
    """Read salt entries from a newline-delimited UTF-8 text file.

    The file is read from disk on every call; nothing is cached, so a salt
    file that is replaced or removed between calls is picked up immediately.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def read_salts(self) -> list[bytes]:
        """Read the whole salt file and return each line as UTF-8 bytes."""

        if not self.exists():
            raise SaltStoreNotFoundError(path=self._path)

        # Universal newlines split on \r\n, \n and \r; utf-8-sig drops a BOM.
        # Undecodable bytes become U+FFFD instead of failing the read.
        with self._path.open("r", encoding="utf-8-sig", errors="replace", newline=None) as handle:
            lines = [_strip_line_end(line) for line in handle]

        logger.debug("read %d salt entries from %s", len(lines), self._path)
        return [line.encode("utf-8") for line in lines]

    def read_salt(self, position: int) -> bytes:
        """Return the salt at zero-based `position`."""

        salts = self.read_salts()
        if position < 0 or position >= len(salts):
            raise SaltPositionOutOfRangeError(position=position, available=len(salts))
        return salts[position]


def _strip_line_end(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line
