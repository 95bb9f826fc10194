"""Process-wide interner and the free functions that use it.

The interner is created on first use and kept until the process exits. Which
threading mode it runs in comes from SIMPLE_SYMBOL_MODE (see
simple_symbol.config), read once at creation:

- shared: one interner for all threads, behind a reader/writer lock.
- confined: each thread gets its own lock-free interner. Symbols from one
  thread cannot be resolved by the free `resolve` on another.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional

from simple_symbol.config import ThreadingMode, get_mode
from simple_symbol.types.interner import Interner
from simple_symbol.types.symbol import Symbol

logger = logging.getLogger(__name__)

# Module-level singleton
_mode: Optional[ThreadingMode] = None
_shared: Optional[Interner] = None
_local = threading.local()
_init_lock = threading.Lock()


def _current_mode() -> ThreadingMode:
    global _mode
    if _mode is None:
        with _init_lock:
            if _mode is None:
                _mode = get_mode()
    return _mode


def get_interner() -> Interner:
    """The interner the free functions use on the calling thread."""
    global _shared
    if _current_mode() is ThreadingMode.CONFINED:
        interner = getattr(_local, "interner", None)
        if interner is None:
            interner = _local.interner = Interner(thread_safe=False)
            logger.debug("created confined interner #%d for thread %s",
                         interner.serial, threading.current_thread().name)
        return interner

    if _shared is None:
        with _init_lock:
            if _shared is None:
                _shared = Interner(thread_safe=True)
                logger.debug("created shared interner #%d", _shared.serial)
    return _shared


def intern(content: str) -> Symbol:
    """Look up `content` in the process-wide interner, inserting it if missing."""
    return get_interner().intern(content)


store_or_intern = intern


def intern_static(content: str) -> Symbol:
    return get_interner().intern_static(content)


def intern_many(contents: Iterable[str]) -> List[Symbol]:
    return get_interner().intern_many(contents)


def resolve(symbol: Symbol) -> str:
    """Resolve `symbol` to its string."""
    return get_interner().resolve(symbol)


def _reset_for_tests() -> None:
    # Drops the current interners so the next call rereads the config.
    global _mode, _shared
    with _init_lock:
        _mode = None
        _shared = None
    _local.__dict__.clear()
