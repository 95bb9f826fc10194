"""String interner.

Maps each distinct string to a small Symbol and stores the string once.
Nothing is ever removed: the store only grows for the lifetime of the
interner, which for the process-wide one is the lifetime of the process.
"""

from __future__ import annotations

import itertools
import sys
from typing import Iterable, Iterator, List, Optional, Union

from simple_symbol.errors import ForeignSymbolError, SymbolTypeError
from simple_symbol.types.rwlock import NullLock, RWLock
from simple_symbol.types.symbol import Symbol

_serials = itertools.count()


def _check_content(content) -> None:
    if not isinstance(content, str):
        raise SymbolTypeError(f"Cannot intern {type(content).__name__}, expected str")


class Interner:
    """Deduplicating string table.

    `index` maps content to slot and `store` maps slot to content; the two
    always agree and have the same length. Slots are handed out densely
    from 0 and never reused.

    With `thread_safe=True` (the default) interning takes the write side of a
    reader/writer lock and lookups take the read side. With
    `thread_safe=False` there is no locking and the interner must stay on one
    thread.
    """

    __slots__ = ("_index", "_store", "_lock", "serial")

    def __init__(self, thread_safe: bool = True):
        self._index: dict[str, int] = {}
        self._store: List[str] = []
        self._lock: Union[RWLock, NullLock] = RWLock() if thread_safe else NullLock()
        # Orders Symbols of different interners that share a slot number.
        self.serial: int = next(_serials)

    @property
    def thread_safe(self) -> bool:
        return isinstance(self._lock, RWLock)

    @property
    def poisoned(self) -> bool:
        return self._lock.poisoned

    # Caller holds the write lock.
    def _insert(self, content: str) -> Symbol:
        slot = self._index.get(content)
        if slot is None:
            slot = len(self._store)
            self._store.append(content)
            self._index[content] = slot
        return Symbol(slot, self)

    def intern(self, content: str) -> Symbol:
        """Return the Symbol for `content`, storing a copy if it is new."""
        _check_content(content)
        # Plain, interpreter-interned str: a subclass instance could carry
        # extra state the table must not hold on to.
        owned = sys.intern(str.__str__(content))
        with self._lock.write():
            return self._insert(owned)

    def intern_static(self, content: str) -> Symbol:
        """Like `intern`, but keeps the caller's own string object as the
        stored copy.

        Meant for module-level constants and literals that live as long as
        the interner anyway. Deduplication is identical to `intern`: if an
        equal string is already stored, that one wins and `content` is not
        kept.
        """
        if type(content) is not str:
            raise SymbolTypeError(
                f"intern_static needs an exact str, got {type(content).__name__}"
            )
        with self._lock.write():
            return self._insert(content)

    def intern_many(self, contents: Iterable[str]) -> List[Symbol]:
        """Intern every string in `contents` under one write lock."""
        owned = []
        for content in contents:
            _check_content(content)
            owned.append(sys.intern(str.__str__(content)))
        if not owned:
            return []
        with self._lock.write():
            return [self._insert(content) for content in owned]

    def resolve(self, symbol: Symbol) -> str:
        """Return the string `symbol` was interned from.

        Raises ForeignSymbolError if `symbol` was issued by another interner
        or names a slot this interner never handed out.
        """
        if not isinstance(symbol, Symbol):
            raise SymbolTypeError(f"Cannot resolve {type(symbol).__name__}, expected Symbol")
        if symbol.interner is not self:
            raise ForeignSymbolError(
                f"Symbol {symbol.slot} belongs to interner #{symbol.interner.serial}, "
                f"not #{self.serial}"
            )
        slot = symbol.slot
        with self._lock.read():
            if not 0 <= slot < len(self._store):
                raise ForeignSymbolError(
                    f"Symbol {slot} out of range for interner #{self.serial} "
                    f"({len(self._store)} entries)"
                )
            return self._store[slot]

    def get(self, content: str) -> Optional[Symbol]:
        """Symbol for `content` if it was interned already, else None."""
        _check_content(content)
        # Same exact-str key that intern stores under.
        content = str.__str__(content)
        with self._lock.read():
            slot = self._index.get(content)
        return None if slot is None else Symbol(slot, self)

    def strings(self) -> List[str]:
        """Snapshot of all interned strings, in slot order."""
        with self._lock.read():
            return list(self._store)

    def __contains__(self, content) -> bool:
        if not isinstance(content, str):
            return False
        content = str.__str__(content)
        with self._lock.read():
            return content in self._index

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._store)

    def __iter__(self) -> Iterator[Symbol]:
        with self._lock.read():
            count = len(self._store)
        return (Symbol(slot, self) for slot in range(count))

    def __repr__(self) -> str:
        mode = "shared" if self.thread_safe else "confined"
        return f"<Interner #{self.serial} {mode} entries={len(self._store)}>"
