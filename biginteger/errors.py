"""
Exception types raised by the big integer package.

Every failure derives from BigIntegerError so callers (the calculator
driver in particular) can catch the whole family in one place. Each type
also derives from the builtin exception a Python caller would reach for
first, so ``except ValueError`` and ``except ZeroDivisionError`` keep
working.
"""


class BigIntegerError(Exception):
    """Base class for all big integer failures."""


class ParseError(BigIntegerError, ValueError):
    """Raised when a string is not a valid signed decimal integer."""


class DivisionByZeroError(BigIntegerError, ZeroDivisionError):
    """Raised when the divisor of a division or modulo is zero."""


class InvalidArgumentError(BigIntegerError, ValueError):
    """Raised for arguments outside an operation's domain (e.g. sqrt of a negative)."""


class InvalidOperationError(BigIntegerError, ValueError):
    """Raised by the calculator for an unknown or malformed operator token."""
