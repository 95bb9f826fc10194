
class SymbolError(Exception):
    """ Base class for all simple_symbol errors"""
    pass

class SymbolTypeError(SymbolError, TypeError):
    """ Raised when something other than a str is interned, or something other
    than a Symbol is resolved"""
    pass

class ForeignSymbolError(SymbolError, LookupError):
    """ Raised when a Symbol is resolved against an interner that did not issue it"""

class PoisonedInternerError(SymbolError, RuntimeError):
    """ Internal error: the interner's lock was released by a writer that failed
    part way through, so the table can no longer be trusted. Not recoverable."""

class ConfigError(SymbolError, ValueError):
    """ Raised when a configuration value cannot be understood"""
