"""Reader/writer lock guarding a shared Interner.

Any number of readers may hold the lock together; a writer holds it alone.
Once a writer is waiting, new readers queue behind it so that a steady stream
of resolves cannot starve interning.

If an exception escapes while the write side is held, the lock is poisoned:
the table it guards may be half-updated, so every later acquisition raises
PoisonedInternerError instead of handing out possibly corrupt state.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from simple_symbol.errors import PoisonedInternerError

logger = logging.getLogger(__name__)


class RWLock:
    __slots__ = ("_cond", "_readers", "_writer", "_writers_waiting", "_poisoned_by")

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0
        self._poisoned_by: Optional[BaseException] = None

    @property
    def poisoned(self) -> bool:
        return self._poisoned_by is not None

    def _check_poison(self) -> None:
        # Caller holds self._cond.
        if self._poisoned_by is not None:
            raise PoisonedInternerError(
                "interner lock poisoned: a writer failed with "
                f"{type(self._poisoned_by).__name__}: {self._poisoned_by}"
            ) from self._poisoned_by

    @contextmanager
    def read(self) -> Iterator[None]:
        """Hold the lock shared for the duration of the block."""
        with self._cond:
            self._check_poison()
            while self._writer or self._writers_waiting:
                self._cond.wait()
                self._check_poison()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        """Hold the lock exclusively for the duration of the block.

        An exception leaving the block poisons the lock and is re-raised.
        """
        with self._cond:
            self._check_poison()
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
                    self._check_poison()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        except BaseException as exc:
            self._poison(exc)
            raise
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()

    def _poison(self, exc: BaseException) -> None:
        with self._cond:
            if self._poisoned_by is None:
                self._poisoned_by = exc
                logger.critical("interner lock poisoned by %r; further access will fail", exc)


class NullLock:
    """Stand-in for RWLock on an interner confined to a single thread.

    Does no locking at all, but still poisons on a failed write.
    """

    __slots__ = ("_poisoned_by",)

    def __init__(self) -> None:
        self._poisoned_by: Optional[BaseException] = None

    @property
    def poisoned(self) -> bool:
        return self._poisoned_by is not None

    _check_poison = RWLock._check_poison

    @contextmanager
    def read(self) -> Iterator[None]:
        self._check_poison()
        yield

    @contextmanager
    def write(self) -> Iterator[None]:
        self._check_poison()
        try:
            yield
        except BaseException as exc:
            if self._poisoned_by is None:
                self._poisoned_by = exc
                logger.critical("interner poisoned by %r; further access will fail", exc)
            raise
