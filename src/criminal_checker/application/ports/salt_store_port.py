"""Port for reading salt entries by line position."""

from __future__ import annotations

from typing import Protocol


class SaltStorePort(Protocol):
    """Read-only access to an ordered collection of salt entries."""

    def exists(self) -> bool:
        """Return whether the backing resource is currently available."""

    def read_salts(self) -> list[bytes]:
        """Return every salt entry in store order."""

    def read_salt(self, position: int) -> bytes:
        """Return the salt entry at zero-based `position`."""
