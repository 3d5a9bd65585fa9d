"""
Custom exceptions for nostr-drive.

Every failure raised by the domain types, the codec and the services is a
DriveError subclass carrying a details dict with the offending values, so
callers can act on them without parsing messages.
"""

from __future__ import annotations

from typing import Any


class DriveError(Exception):
    """Base exception for all nostr-drive errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidFormatError(DriveError):
    """Raised when a coordinate string cannot be split into its parts."""

    def __init__(self, value: str, reason: str):
        super().__init__(
            f"Invalid coordinate format: {reason}, got: {value!r}",
            {"value": value, "reason": reason},
        )
        self.value = value
        self.reason = reason


class InvalidValueError(DriveError):
    """Raised when a coordinate field is out of range or malformed."""

    def __init__(self, field: str, reason: str, value: Any = None):
        details: dict[str, Any] = {"field": field, "reason": reason}
        if value is not None:
            details["value"] = value
        super().__init__(f"Invalid {field}: {reason}", details)
        self.field = field
        self.reason = reason
        self.value = value


class ValidationError(DriveError):
    """Raised when a precondition on an aggregate or service call fails."""

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        details: dict[str, Any] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class InvalidKindError(ValidationError):
    """Raised when a member kind is not on the folder allow-list."""

    def __init__(self, kind: int, allowed_kinds: tuple[int, ...]):
        allowed = ", ".join(str(k) for k in allowed_kinds)
        super().__init__(
            f"Kind {kind} is not allowed. Allowed kinds are: {allowed}",
            field="kind",
            value=kind,
        )
        self.details["allowed_kinds"] = list(allowed_kinds)
        self.kind = kind
        self.allowed_kinds = allowed_kinds


class NotFoundError(DriveError):
    """Raised when a record or folder entry is not found."""

    def __init__(self, message: str, target: str | None = None):
        details = {}
        if target:
            details["target"] = target
        super().__init__(message, details)
        self.target = target


class DuplicateEntryError(DriveError):
    """Raised when adding a coordinate that is already a member."""

    def __init__(self, container: str, coordinate: str):
        super().__init__(
            f"{coordinate} is already a member of {container}",
            {"container": container, "coordinate": coordinate},
        )
        self.container = container
        self.coordinate = coordinate


class PublishError(DriveError):
    """Raised when the event store rejects a publish."""

    def __init__(self, coordinate: str, cause: Exception | None = None):
        details = {"coordinate": coordinate}
        if cause:
            details["cause"] = str(cause)
        super().__init__(f"Event store rejected publish of {coordinate}", details)
        self.coordinate = coordinate
        self.cause = cause
