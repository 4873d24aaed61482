"""Custom exceptions for the padmatch library."""

from __future__ import annotations


class PadmatchError(Exception):
    """Base exception for all padmatch errors."""


class SourceError(PadmatchError):
    """Base exception for data source failures."""

    def __init__(self, message: str, source: str | None = None) -> None:
        self.source = source
        super().__init__(message)


class SourceConnectionError(SourceError):
    """Raised when connection to a data source fails."""

    def __init__(self, source: str, details: str | None = None) -> None:
        message = f"Connection failed for source '{source}'"
        if details:
            message += f": {details}"
        super().__init__(message, source)


class SourceAuthenticationError(SourceError):
    """Raised when a data source rejects the configured credentials."""

    def __init__(self, source: str, details: str | None = None) -> None:
        message = f"Authentication failed for source '{source}'"
        if details:
            message += f": {details}"
        super().__init__(message, source)


class InvalidRecordError(PadmatchError):
    """Raised when a backend record cannot be turned into a game or controller."""

    def __init__(self, kind: str, details: str) -> None:
        self.kind = kind
        super().__init__(f"Invalid {kind} record: {details}")


class ControllerNotFoundError(PadmatchError):
    """Raised when a controller id is not present in the directory."""

    def __init__(self, controller_id: str) -> None:
        self.controller_id = controller_id
        super().__init__(f"Controller not found: '{controller_id}'")


class InvalidConfigurationError(PadmatchError):
    """Raised when configuration is invalid."""

    def __init__(self, details: str) -> None:
        super().__init__(f"Invalid configuration: {details}")
