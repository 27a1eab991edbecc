"""Logistics error taxonomy.

Every error is raised synchronously where it is detected and carries the
offending ``field`` and a ``reason``. None of them are retryable: they all
describe a caller or input problem, never a transient condition.
"""


class LogisticsError(Exception):
    """Base class for every error raised by the logistics package."""

    def __init__(self, message: str, field: str | None = None, reason: str | None = None) -> None:
        super().__init__(message)
        self.field = field
        self.reason = reason


class CredentialMissing(LogisticsError):
    """Merchant id, hash key or hash IV is empty."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing required credential: {field}", field=field, reason="missing")


class RequiredFieldMissing(LogisticsError):
    """A mandatory field, or every member of a required group, is absent."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing required field: {field}", field=field, reason="missing")


class FieldTooLong(LogisticsError):
    """A bounded-length field exceeds its declared maximum."""

    def __init__(self, field: str, max_length: int) -> None:
        super().__init__(
            f"Field {field} exceeds max length of {max_length}",
            field=field,
            reason=f"max length {max_length}",
        )
        self.max_length = max_length


class InvalidValue(LogisticsError):
    """A field failed a semantic check (negative amount, wrong sub-type, ...)."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"Invalid field {field}: {reason}", field=field, reason=reason)


class ChecksumMismatch(LogisticsError):
    def __init__(self) -> None:
        super().__init__("CheckMacValue verification failed", field="CheckMacValue", reason="mismatch")
