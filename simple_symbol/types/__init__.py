from simple_symbol.types.symbol import Symbol
from simple_symbol.types.interner import Interner

__all__ = ["Symbol", "Interner"]
