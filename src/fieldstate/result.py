"""Host-side success/failure and optional-value types.

Check functions handed to ``validate`` report through ``Result``: a
``Success`` carries the parsed value, a ``Failure`` carries the display text
for the field. The ``from_result*`` bridges accept the same pair from
existing parsing or transport code, where the failure may be any value
(an exception, an error code) and is turned into text by the caller.

Absence in the optional-value sense is plain ``None``; see ``Maybe``.
"""

from __future__ import annotations

import dataclasses
import typing

T = typing.TypeVar("T")
E = typing.TypeVar("E")


@dataclasses.dataclass(frozen=True, slots=True)
class Success[T]:
    """Parsed or produced value."""

    value: T


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[E]:
    """Why parsing failed; a message string when produced by a check."""

    error: E


Result = Success[T] | Failure[E]

#: ``None`` means absent, so a present ``None`` cannot be expressed.
Maybe = T | None
