"""
Arbitrary-precision signed integer arithmetic on decimal digit vectors.
"""

from .big_integer import (
    DEFAULT_SQRT_ITERATIONS,
    NEGATIVE_ONE,
    ONE,
    TWO,
    ZERO,
    BigInteger,
)
from .calculator import OPERATIONS, Calculator
from .errors import (
    BigIntegerError,
    DivisionByZeroError,
    InvalidArgumentError,
    InvalidOperationError,
    ParseError,
)

__all__ = [
    "BigInteger",
    "NEGATIVE_ONE",
    "ZERO",
    "ONE",
    "TWO",
    "DEFAULT_SQRT_ITERATIONS",
    "Calculator",
    "OPERATIONS",
    "BigIntegerError",
    "ParseError",
    "DivisionByZeroError",
    "InvalidArgumentError",
    "InvalidOperationError",
]
