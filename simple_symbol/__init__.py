# Interned strings for compilers, parsers and other short-lived programs.
#
# A Symbol is a cheap handle (slot number + owning interner) for a string
# stored once per interner. Symbols compare, hash and sort without touching
# the string. The free functions below share one process-wide interner.

import logging

from simple_symbol.errors import (
    ConfigError,
    ForeignSymbolError,
    PoisonedInternerError,
    SymbolError,
    SymbolTypeError,
)
from simple_symbol.types.symbol import Symbol
from simple_symbol.types.interner import Interner
from simple_symbol.registry import (
    get_interner,
    intern,
    intern_many,
    intern_static,
    resolve,
    store_or_intern,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Symbol",
    "Interner",
    "intern",
    "intern_static",
    "intern_many",
    "store_or_intern",
    "resolve",
    "get_interner",
    "SymbolError",
    "SymbolTypeError",
    "ForeignSymbolError",
    "PoisonedInternerError",
    "ConfigError",
]
