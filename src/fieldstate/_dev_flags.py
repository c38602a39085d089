"""Internal helpers for development-time feature flags.

Every flag is an environment variable named ``FIELDSTATE_<NAME>`` and is on
only when set to exactly ``"1"``. Flags are read at call time, so tests can
flip them with ``monkeypatch.setenv``; an explicit ``override`` wins.
"""

from __future__ import annotations

import os

__all__ = ["dev_validate_enabled"]

_ENV_PREFIX = "FIELDSTATE_"


def _flag(name: str, override: bool | None) -> bool:
    if override is not None:
        return bool(override)
    return os.environ.get(_ENV_PREFIX + name) == "1"


def dev_validate_enabled(*, override: bool | None = None) -> bool:
    """Return True when ``Unvalidated``/``Invalid`` payloads are type-checked.

    Controlled by ``FIELDSTATE_VALIDATE``. Off by default: fields are rebuilt
    on every keystroke and the check is only useful while developing a form.
    """
    return _flag("VALIDATE", override)
