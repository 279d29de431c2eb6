"""Environment switches read by orgsync."""

from __future__ import annotations

import os

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


class ConfigurationError(RuntimeError):
    """An orgsync environment variable holds a value it cannot use."""


def env_flag(name: str, *, default: bool = False) -> bool:
    """Read ``name`` as an on/off switch; unset or blank means ``default``."""

    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise ConfigurationError(f"{name} must be one of {sorted(_TRUE | _FALSE)}, got {raw!r}")
