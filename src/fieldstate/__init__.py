"""fieldstate: immutable validation state for interactive input fields.

Public API:
    - ValidationResult: Initial | Unvalidated | Valid | Invalid
    - initial(), unvalidated(), valid(), validate(): build states
    - map(), map_message(), and_then(), and_map(), collect(): combine states
    - to_string(), message(), is_valid(), is_invalid(): render states
    - from_maybe*(), from_result*(), to_maybe(): bridge host types
    - checks: ready-made check functions for validate()
"""

from __future__ import annotations

import logging

from fieldstate import checks
from fieldstate.errors import CheckError, FieldStateError, InvariantViolationError
from fieldstate.result import Failure, Maybe, Result, Success
from fieldstate.validation import (
    Initial,
    Invalid,
    Unvalidated,
    Valid,
    ValidationResult,
    and_map,
    and_then,
    collect,
    from_maybe,
    from_maybe_initial,
    from_maybe_unvalidated,
    from_result,
    from_result_initial,
    from_result_unvalidated,
    initial,
    is_invalid,
    is_valid,
    map,
    map_message,
    message,
    to_maybe,
    to_string,
    unvalidated,
    valid,
    validate,
    with_default,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("fieldstate")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("fieldstate").addHandler(logging.NullHandler())

__all__ = [  # noqa: RUF022
    # Types
    "ValidationResult",
    "Initial",
    "Unvalidated",
    "Valid",
    "Invalid",
    "Success",
    "Failure",
    "Result",
    "Maybe",
    # Constructors
    "initial",
    "unvalidated",
    "valid",
    "validate",
    # Combinators
    "map",
    "map_message",
    "and_then",
    "and_map",
    "collect",
    # Extraction & predicates
    "with_default",
    "message",
    "is_valid",
    "is_invalid",
    "to_string",
    # Conversions
    "from_maybe",
    "from_maybe_initial",
    "from_maybe_unvalidated",
    "from_result",
    "from_result_initial",
    "from_result_unvalidated",
    "to_maybe",
    # Errors
    "FieldStateError",
    "InvariantViolationError",
    "CheckError",
    # Modules
    "checks",
    "__version__",
]
