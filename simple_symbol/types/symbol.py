from __future__ import annotations

from functools import total_ordering
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from simple_symbol.types.interner import Interner


@total_ordering
class Symbol:
    """Handle to a string stored in an Interner.

    A Symbol is just a slot number plus the interner that issued it. Equality,
    hashing and ordering never look at the string, so they cost the same no
    matter how long the string is. Rendering (str, repr, format) resolves the
    string through the owning interner.

    Symbols are only created by Interner; use `intern` or `Symbol.parse`.
    """

    __slots__ = ("_slot", "_table")

    def __init__(self, slot: int, table: Interner):
        object.__setattr__(self, "_slot", slot)
        object.__setattr__(self, "_table", table)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def slot(self) -> int:
        return self._slot

    @property
    def interner(self) -> Interner:
        return self._table

    @classmethod
    def parse(cls, text: str) -> Symbol:
        """Intern `text` in the process-wide interner."""
        from simple_symbol.registry import intern
        return intern(text)

    def __eq__(self, other):
        if not isinstance(other, Symbol):
            return NotImplemented
        return self._slot == other._slot and self._table is other._table

    def __lt__(self, other):
        if not isinstance(other, Symbol):
            return NotImplemented
        if self._slot != other._slot:
            return self._slot < other._slot
        return self._table.serial < other._table.serial

    def __hash__(self) -> int:
        return hash((self._slot, self._table.serial))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        # Slots are process-local; intern the string again on the other side.
        raise TypeError(f"cannot pickle {type(self).__name__}; pickle str(symbol) instead")

    def __str__(self) -> str:
        return self._table.resolve(self)

    def __repr__(self) -> str:
        return repr(self._table.resolve(self))

    def __format__(self, spec: str) -> str:
        return format(self._table.resolve(self), spec)
