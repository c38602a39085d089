"""Exception hierarchy for fieldstate.

Failed input is never signalled with an exception; it lives in ``Invalid``.
These classes cover programmer errors only: callbacks that return the wrong
shape, malformed check-factory arguments, or payloads rejected by dev-time
validation.
"""

from __future__ import annotations


class FieldStateError(Exception):
    """Base exception for all fieldstate errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class InvariantViolationError(FieldStateError):
    """A callback or input broke a structural contract of the library.

    Raised when, for example, an ``and_then`` callback returns something other
    than a ``ValidationResult`` or a check function returns something other
    than ``Success``/``Failure``.
    """

    def __init__(
        self, message: str, *, operation: str | None = None, hint: str | None = None
    ) -> None:
        """Create an invariant violation error.

        Args:
            message: Human-readable description of the violated invariant.
            operation: Optional name of the operation that detected the issue.
            hint: Optional actionable hint for resolution.
        """
        self.operation = operation
        msg = message if operation is None else f"[{operation}] {message}"
        super().__init__(msg, hint=hint)


class CheckError(FieldStateError):
    """A check factory was called with unusable arguments."""
