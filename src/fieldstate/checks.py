"""Ready-made check functions for ``validate``.

Each factory returns a total ``Callable[[str], Result[T, str]]``: it never
raises for bad input, it returns ``Failure(message)`` instead. Factories do
raise ``CheckError`` when called with arguments that cannot work.

Example:
    ```python
    from fieldstate import checks, validate

    age_check = checks.chain(
        checks.required("Age is required"),
        checks.as_int("Must be a number"),
    )
    validate(age_check, "42")  # Valid(value=42)
    ```
"""

from __future__ import annotations

from functools import cache
import math
import re
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from fieldstate.errors import CheckError
from fieldstate.result import Failure, Success

if TYPE_CHECKING:
    from collections.abc import Callable, Collection

    from fieldstate.result import Result

__all__ = [
    "as_float",
    "as_int",
    "catching",
    "chain",
    "matches",
    "max_length",
    "min_length",
    "one_of",
    "parse_as",
    "required",
]

T = TypeVar("T")

_PYDANTIC_VALUE_ERROR_PREFIX = "Value error, "
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def required(message: str = "Required") -> Callable[[str], Result[str, str]]:
    """Reject blank input; succeed with the stripped text."""

    def check(raw: str) -> Result[str, str]:
        text = raw.strip()
        if not text:
            return Failure(message)
        return Success(text)

    return check


def _parse_int(raw: str) -> int:
    text = raw.strip()
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError(f"not a plain integer: {raw!r}")
    return int(text)


def _parse_float(raw: str) -> float:
    text = raw.strip()
    # float() also takes "1_000", non-ASCII digits, "nan" and "inf"
    if "_" in text or not text.isascii():
        raise ValueError(f"not a plain number: {raw!r}")
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {raw!r}")
    return value


def as_int(message: str = "Must be a whole number") -> Callable[[str], Result[int, str]]:
    """Parse optionally signed ASCII digits; no separators or exponents."""
    return catching(_parse_int, message)


def as_float(message: str = "Must be a number") -> Callable[[str], Result[float, str]]:
    """Parse a finite decimal number; ``nan``, ``inf`` and ``1_000`` fail."""
    return catching(_parse_float, message)


def _require_bound(n: int, name: str) -> None:
    if not isinstance(n, int) or n < 0:
        raise CheckError(
            f"{name} bound must be an int >= 0, got {n!r}",
            hint=f"Pass a non-negative length, e.g. {name}(3).",
        )


def min_length(n: int, message: str | None = None) -> Callable[[str], Result[str, str]]:
    """Require at least ``n`` characters."""
    _require_bound(n, "min_length")
    text = message if message is not None else f"Must be at least {n} characters"

    def check(raw: str) -> Result[str, str]:
        return Success(raw) if len(raw) >= n else Failure(text)

    return check


def max_length(n: int, message: str | None = None) -> Callable[[str], Result[str, str]]:
    """Allow at most ``n`` characters."""
    _require_bound(n, "max_length")
    text = message if message is not None else f"Must be at most {n} characters"

    def check(raw: str) -> Result[str, str]:
        return Success(raw) if len(raw) <= n else Failure(text)

    return check


def matches(
    pattern: str | re.Pattern[str], message: str
) -> Callable[[str], Result[str, str]]:
    """Require the whole input to match ``pattern``."""
    try:
        compiled = re.compile(pattern)
    except re.error as e:
        raise CheckError(
            f"invalid pattern {pattern!r}: {e}", hint="Check the regex syntax."
        ) from e

    def check(raw: str) -> Result[str, str]:
        return Success(raw) if compiled.fullmatch(raw) else Failure(message)

    return check


def one_of(
    choices: Collection[str], message: str | None = None
) -> Callable[[str], Result[str, str]]:
    """Accept only one of ``choices`` (exact, case-sensitive)."""
    allowed = frozenset(choices)
    if not allowed:
        raise CheckError("one_of needs at least one choice")
    text = (
        message
        if message is not None
        else "Must be one of: " + ", ".join(sorted(allowed))
    )

    def check(raw: str) -> Result[str, str]:
        return Success(raw) if raw in allowed else Failure(text)

    return check


def catching(
    fn: Callable[[str], T],
    message: str | None = None,
    exceptions: tuple[type[Exception], ...] = (ValueError,),
) -> Callable[[str], Result[T, str]]:
    """Turn a raising parser into a total check.

    Exceptions listed in ``exceptions`` become ``Failure``; the message is
    ``message`` when given, else ``str(exc)``. Other exceptions propagate.
    """

    def check(raw: str) -> Result[T, str]:
        try:
            return Success(fn(raw))
        except exceptions as e:
            return Failure(message if message is not None else str(e))

    return check


@cache
def _adapter(tp: Any) -> TypeAdapter[Any]:
    return TypeAdapter(tp)


def _first_error_message(exc: ValidationError) -> str:
    # Report the first error only; one message per field
    errors = exc.errors()
    msg = str(errors[0].get("msg", "")) if errors else str(exc)
    if msg.startswith(_PYDANTIC_VALUE_ERROR_PREFIX):
        msg = msg[len(_PYDANTIC_VALUE_ERROR_PREFIX) :]
    return msg


def parse_as(tp: Any, message: str | None = None) -> Callable[[str], Result[Any, str]]:
    """Validate raw input against any type pydantic understands.

    Uses lax (python-mode) validation, so ``parse_as(int)`` accepts ``"42"``
    and ``parse_as(datetime.date)`` accepts ``"2024-01-31"``. Constrained
    types such as ``Annotated[int, Field(ge=0)]`` work too.
    """
    try:
        adapter = _adapter(tp)
    except TypeError:
        # Unhashable annotations cannot be cached
        adapter = TypeAdapter(tp)

    def check(raw: str) -> Result[Any, str]:
        try:
            return Success(adapter.validate_python(raw))
        except ValidationError as e:
            return Failure(message if message is not None else _first_error_message(e))

    return check


def chain(
    first: Callable[[str], Result[Any, str]],
    *then: Callable[[Any], Result[Any, str]],
) -> Callable[[str], Result[Any, str]]:
    """Run checks in sequence, feeding each success value into the next.

    The first ``Failure`` short-circuits; later steps are not called.
    """

    def check(raw: str) -> Result[Any, str]:
        outcome = first(raw)
        for step in then:
            match outcome:
                case Success(value):
                    outcome = step(value)
                case _:
                    return outcome
        return outcome

    return check
