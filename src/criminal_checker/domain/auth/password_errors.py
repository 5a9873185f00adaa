"""Error types raised by password hashing and the salt store."""

from __future__ import annotations

from pathlib import Path


class InvalidConfigurationError(ValueError):
    """Raised when the password hasher is constructed with unusable settings."""

    def __init__(self, *, field: str, reason: str) -> None:
        super().__init__(f"invalid {field}: {reason}")
        self.field = field


class InvalidCredentialError(ValueError):
    """Raised when a plaintext password is missing or blank."""

    def __init__(self) -> None:
        super().__init__("password cannot be blank")


class InvalidArgumentError(ValueError):
    """Raised when an operation argument is missing or empty."""

    def __init__(self, *, argument: str) -> None:
        super().__init__(f"{argument} cannot be empty")
        self.argument = argument


class SaltStoreNotFoundError(FileNotFoundError):
    """Raised when the salt file does not exist at read time."""

    def __init__(self, *, path: Path) -> None:
        super().__init__(f"salt store not found: {path}")
        self.path = path


class SaltPositionOutOfRangeError(LookupError):
    """Raised when a salt position does not address a line of the salt file."""

    def __init__(self, *, position: int, available: int | None = None) -> None:
        if available is None:
            message = f"salt position out of range: {position}"
        else:
            message = f"salt position {position} out of range for {available} salt entries"
        super().__init__(message)
        self.position = position
        self.available = available
