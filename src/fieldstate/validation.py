"""Validation state for a single piece of caller-supplied input.

A field's raw text, its parsed value and its error state travel together as
one immutable ``ValidationResult``, which is exactly one of:

- ``Initial``: no input has been supplied yet.
- ``Unvalidated``: raw input captured, no check has run.
- ``Valid``: the check succeeded and produced a typed value.
- ``Invalid``: the check failed; holds the message and the raw input that
  produced it, so a text control can redisplay what the user typed.

Every operation is a pure function that returns a new value or passes its
input through unchanged. Failed input is never raised; exceptions from this
module signal programmer errors only (see ``fieldstate.errors``).

Example:
    ```python
    from fieldstate import checks, collect, validate

    name = validate(checks.required(), "Ann")
    age = validate(checks.as_int("Must be a number"), "abc")
    person = collect(lambda n, a: (n, a), name, age)
    # Invalid(message="Must be a number", raw="abc")
    ```
"""

from __future__ import annotations

import dataclasses
import functools
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from fieldstate._dev_flags import dev_validate_enabled
from fieldstate._validation import _require_str
from fieldstate.errors import InvariantViolationError
from fieldstate.result import Failure, Success

if TYPE_CHECKING:
    from collections.abc import Callable

    from fieldstate.result import Maybe, Result

__all__ = [
    "Initial",
    "Invalid",
    "Unvalidated",
    "Valid",
    "ValidationResult",
    "and_map",
    "and_then",
    "collect",
    "from_maybe",
    "from_maybe_initial",
    "from_maybe_unvalidated",
    "from_result",
    "from_result_initial",
    "from_result_unvalidated",
    "initial",
    "is_invalid",
    "is_valid",
    "map",
    "map_message",
    "message",
    "to_maybe",
    "to_string",
    "unvalidated",
    "valid",
    "validate",
    "with_default",
]

log = logging.getLogger(__name__)

V = TypeVar("V")
W = TypeVar("W")
E = TypeVar("E")


@dataclasses.dataclass(frozen=True, slots=True)
class Initial:
    """No input has been supplied yet."""


@dataclasses.dataclass(frozen=True, slots=True)
class Unvalidated:
    """Input captured but not yet run through a check function."""

    raw: str

    def __post_init__(self) -> None:
        if dev_validate_enabled():
            _require_str(self.raw, "raw")


@dataclasses.dataclass(frozen=True, slots=True)
class Valid[V]:
    """The check succeeded; holds the parsed value."""

    value: V


@dataclasses.dataclass(frozen=True, slots=True)
class Invalid:
    """The check failed; holds the message and the last raw input."""

    message: str
    raw: str

    def __post_init__(self) -> None:
        if dev_validate_enabled():
            _require_str(self.message, "message")
            _require_str(self.raw, "raw")


ValidationResult = Initial | Unvalidated | Valid[V] | Invalid


def _is_state(obj: object) -> bool:
    return isinstance(obj, Initial | Unvalidated | Valid | Invalid)


def _unexpected(obj: object, operation: str) -> InvariantViolationError:
    log.debug("%s received a non-ValidationResult: %r", operation, obj)
    return InvariantViolationError(
        f"expected a ValidationResult, got {type(obj).__name__}",
        operation=operation,
        hint="Build values with initial(), unvalidated(), valid() or validate().",
    )


def _not_a_result(obj: object, operation: str) -> InvariantViolationError:
    log.debug("%s received a non-Result: %r", operation, obj)
    return InvariantViolationError(
        f"expected Success or Failure, got {type(obj).__name__}",
        operation=operation,
        hint="Return fieldstate.Success(value) or fieldstate.Failure(message).",
    )


# --- Constructors ---


def initial() -> Initial:
    """Return the state of a field nobody has typed into yet."""
    return Initial()


def unvalidated(raw: str) -> Unvalidated:
    """Record raw input without checking it."""
    return Unvalidated(raw)


def valid(value: V) -> Valid[V]:
    """Wrap an already-trusted value."""
    return Valid(value)


def validate(check: Callable[[str], Result[V, str]], raw: str) -> ValidationResult[V]:
    """Run ``check`` once over ``raw`` and record the outcome.

    ``Success(v)`` becomes ``Valid(v)``; ``Failure(m)`` becomes
    ``Invalid(m, raw)``. A failed check never raises. Exceptions raised by
    ``check`` itself propagate; wrap raising parsers with
    ``fieldstate.checks.catching``.

    Raises:
        InvariantViolationError: ``check`` returned neither ``Success`` nor
            ``Failure``.
    """
    outcome = check(raw)
    match outcome:
        case Success(value):
            return Valid(value)
        case Failure(error):
            log.debug("check rejected %r: %s", raw, error)
            return Invalid(error, raw)
        case _:
            raise _not_a_result(outcome, "validate")


# --- Combinators ---


def map(fn: Callable[[V], W], result: ValidationResult[V]) -> ValidationResult[W]:  # noqa: A001
    """Apply ``fn`` to a ``Valid`` payload; pass every other state through."""
    match result:
        case Valid(value):
            return Valid(fn(value))
        case Initial() | Unvalidated() | Invalid():
            return result
        case _:
            raise _unexpected(result, "map")


def map_message(
    fn: Callable[[str], str], result: ValidationResult[V]
) -> ValidationResult[V]:
    """Rewrite an ``Invalid`` message, keeping its raw input untouched."""
    match result:
        case Invalid(msg, raw):
            return Invalid(fn(msg), raw)
        case Initial() | Unvalidated() | Valid():
            return result
        case _:
            raise _unexpected(result, "map_message")


def and_then(
    fn: Callable[[V], ValidationResult[W]], result: ValidationResult[V]
) -> ValidationResult[W]:
    """Chain a further check onto a ``Valid`` value.

    Non-``Valid`` states short-circuit unchanged. A ``Valid`` value is handed
    to ``fn`` and its result returned verbatim, so a later check may turn a
    ``Valid`` into an ``Invalid``.
    """
    match result:
        case Valid(value):
            chained = fn(value)
            if not _is_state(chained):
                raise _unexpected(chained, "and_then")
            return chained
        case Initial() | Unvalidated() | Invalid():
            return result
        case _:
            raise _unexpected(result, "and_then")


def and_map(
    field: ValidationResult[V], accumulator: ValidationResult[Callable[[V], W]]
) -> ValidationResult[W]:
    """Apply a validated function to one more validated field.

    The accumulator is inspected first. If it is ``Initial``, ``Unvalidated``
    or ``Invalid`` it is returned unchanged and ``field`` is ignored, even
    when ``field`` has failed too. Only a ``Valid(fn)`` accumulator proceeds
    to ``map(fn, field)``.

    Folding left-to-right over several fields therefore surfaces the first
    non-``Valid`` state to reach the accumulator; messages are never merged.
    The argument order suits partial application over a list of fields, as
    done by ``collect``.

    Raises:
        InvariantViolationError: the accumulator is ``Valid`` but its payload
            is not callable.
    """
    match accumulator:
        case Valid(build):
            if not callable(build):
                log.debug("and_map accumulator holds %r", build)
                raise InvariantViolationError(
                    f"accumulator must hold a callable, got {type(build).__name__}",
                    operation="and_map",
                    hint="Start the chain with valid(curried_constructor) or use collect().",
                )
            return map(build, field)
        case Initial() | Unvalidated() | Invalid():
            return accumulator
        case _:
            raise _unexpected(accumulator, "and_map")


def _curry(fn: Callable[..., Any], arity: int, args: tuple[Any, ...] = ()) -> Any:
    if arity == 0:
        return fn(*args)
    return lambda arg: _curry(fn, arity - 1, (*args, arg))


def collect(
    build: Callable[..., W], *fields: ValidationResult[Any]
) -> ValidationResult[W]:
    """Assemble several validated fields into one value.

    Equivalent to ``valid(curried_build)`` followed by one ``and_map`` per
    field, in argument order. ``build`` is only called once every field is
    ``Valid``; otherwise the first non-``Valid`` field, in order, is returned.
    """
    if not fields:
        return Valid(build())
    return functools.reduce(
        lambda acc, field: and_map(field, acc),
        fields,
        valid(_curry(build, len(fields))),
    )


# --- Extraction & predicates ---


def with_default(default: V, result: ValidationResult[V]) -> V:
    """Return the ``Valid`` payload, or ``default`` for any other state."""
    match result:
        case Valid(value):
            return value
        case Initial() | Unvalidated() | Invalid():
            return default
        case _:
            raise _unexpected(result, "with_default")


def message(result: ValidationResult[Any]) -> str | None:
    """Return the failure message of an ``Invalid`` value, else ``None``."""
    match result:
        case Invalid(msg, _):
            return msg
        case Initial() | Unvalidated() | Valid():
            return None
        case _:
            raise _unexpected(result, "message")


def is_valid(result: ValidationResult[Any]) -> bool:
    """Return True only for ``Valid``; pending states count as not valid."""
    if not _is_state(result):
        raise _unexpected(result, "is_valid")
    return isinstance(result, Valid)


def is_invalid(result: ValidationResult[Any]) -> bool:
    """Return True only for ``Invalid``; pending states count as not invalid."""
    if not _is_state(result):
        raise _unexpected(result, "is_invalid")
    return isinstance(result, Invalid)


def to_string(render: Callable[[V], str], result: ValidationResult[V]) -> str:
    """Return the text a control bound to this field should display.

    ``Valid`` renders its value; ``Unvalidated`` and ``Invalid`` echo the raw
    input verbatim; ``Initial`` is the empty string.
    """
    match result:
        case Valid(value):
            return render(value)
        case Unvalidated(raw) | Invalid(_, raw):
            return raw
        case Initial():
            return ""
        case _:
            raise _unexpected(result, "to_string")


# --- Conversions ---


def from_maybe(msg: str, raw: str, maybe: Maybe[V]) -> ValidationResult[V]:
    """``None`` becomes ``Invalid(msg, raw)``; anything else is ``Valid``."""
    if maybe is None:
        return Invalid(msg, raw)
    return Valid(maybe)


def from_maybe_initial(maybe: Maybe[V]) -> ValidationResult[V]:
    """``None`` becomes ``Initial``: absence is not an error yet."""
    if maybe is None:
        return Initial()
    return Valid(maybe)


def from_maybe_unvalidated(raw: str, maybe: Maybe[V]) -> ValidationResult[V]:
    if maybe is None:
        return Unvalidated(raw)
    return Valid(maybe)


def from_result(
    err_fn: Callable[[E], str], raw: str, result: Result[V, E]
) -> ValidationResult[V]:
    """Convert a host ``Result``; a ``Failure(e)`` becomes ``Invalid(err_fn(e), raw)``."""
    match result:
        case Success(value):
            return Valid(value)
        case Failure(error):
            return Invalid(err_fn(error), raw)
        case _:
            raise _not_a_result(result, "from_result")


def from_result_initial(result: Result[V, Any]) -> ValidationResult[V]:
    """Convert a host ``Result``, dropping failure detail in favour of ``Initial``."""
    match result:
        case Success(value):
            return Valid(value)
        case Failure():
            return Initial()
        case _:
            raise _not_a_result(result, "from_result_initial")


def from_result_unvalidated(
    err_fn: Callable[[E], str], result: Result[V, E]
) -> ValidationResult[V]:
    """Convert a host ``Result``; a ``Failure(e)`` becomes ``Unvalidated(err_fn(e))``.

    Note that the ``Unvalidated`` payload here is the transformed error text,
    not user input. ``to_string`` will display it as if the user had typed it.
    """
    match result:
        case Success(value):
            return Valid(value)
        case Failure(error):
            return Unvalidated(err_fn(error))
        case _:
            raise _not_a_result(result, "from_result_unvalidated")


def to_maybe(result: ValidationResult[V]) -> Maybe[V]:
    """Return the ``Valid`` payload, else ``None``.

    A ``Valid(None)`` is indistinguishable from a non-``Valid`` state here.
    """
    return with_default(None, result)
