"""Internal validation helpers shared by the value types."""

from __future__ import annotations


def _require(
    *,
    condition: bool,
    message: str,
    exc: type[Exception] = ValueError,
    field_name: str | None = None,
) -> None:
    """Centralized validation with optional field context for clearer errors."""
    if not condition:
        if field_name:
            raise exc(f"{field_name}: {message}")
        raise exc(message)


def _require_str(value: object, field_name: str) -> None:
    _require(
        condition=isinstance(value, str),
        message=f"must be str, got {type(value).__name__}",
        field_name=field_name,
        exc=TypeError,
    )
