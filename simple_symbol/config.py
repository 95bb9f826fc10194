from __future__ import annotations
import os
from enum import Enum

from simple_symbol.errors import ConfigError


class ThreadingMode(Enum):
    # One interner for the whole process, guarded by a reader/writer lock.
    SHARED = "shared"
    # One private interner per thread, no locking.
    CONFINED = "confined"


MODE_ENV_VAR = 'SIMPLE_SYMBOL_MODE'

# Defaults
_DEFAULT_MODE = ThreadingMode.SHARED


def value_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower()


def get_mode() -> ThreadingMode:
    raw = value_from_env(MODE_ENV_VAR, _DEFAULT_MODE.value)
    try:
        return ThreadingMode(raw)
    except ValueError:
        choices = ", ".join(m.value for m in ThreadingMode)
        raise ConfigError(f"{MODE_ENV_VAR}={raw!r} is not one of: {choices}") from None
