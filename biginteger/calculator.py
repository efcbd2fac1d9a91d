"""
Operator dispatch for the big integer calculator.

Maps single-character operator tokens to BigInteger operations. Kept apart
from the driver so it can be used (and tested) without any terminal I/O.
"""

import logging
from typing import Callable, Dict

from .big_integer import BigInteger, DEFAULT_SQRT_ITERATIONS
from .errors import InvalidArgumentError, InvalidOperationError

logger = logging.getLogger(__name__)


OPERATIONS: Dict[str, Callable[[BigInteger, BigInteger], BigInteger]] = {
    '+': lambda a, b: a + b,
    '-': lambda a, b: a - b,
    '*': lambda a, b: a * b,
    '/': lambda a, b: a / b,
    '%': lambda a, b: a % b,
    '^': lambda a, b: a.pow(b),
}


class Calculator:
    """
    Parse operands and apply one binary operation.

    Usage:
        calc = Calculator()
        calc.evaluate("100", "7", "/")   # BigInteger('14')
        calc.sqrt(BigInteger("144"))     # BigInteger('12')
    """

    def __init__(self, sqrt_iterations: int = DEFAULT_SQRT_ITERATIONS):
        if sqrt_iterations <= 0:
            raise InvalidArgumentError(
                f"The number of iterations must be positive, got {sqrt_iterations}"
            )
        self.sqrt_iterations = sqrt_iterations

    def parse(self, text: str) -> BigInteger:
        """Parse one operand; raises ParseError on malformed input."""
        return BigInteger(text)

    def validate_operation(self, operation: str) -> str:
        """
        Check an operator token.

        Raises:
            InvalidOperationError: If the token is not exactly one of
                the supported operator characters
        """
        if len(operation) != 1 or operation not in OPERATIONS:
            raise InvalidOperationError(f"Invalid operation: '{operation}'")
        return operation

    def apply(self, operation: str, first: BigInteger, second: BigInteger) -> BigInteger:
        """
        Apply a validated operator to two operands.

        Errors from the operation itself (division by zero, ...) propagate
        unchanged.
        """
        op = self.validate_operation(operation)
        logger.debug(f"Applying '{op}' to {len(first.digits)}-digit and "
                     f"{len(second.digits)}-digit operands")
        return OPERATIONS[op](first, second)

    def evaluate(self, first_text: str, second_text: str, operation: str) -> BigInteger:
        """
        Parse both operands, then validate and apply the operator.

        Operands are parsed before the operator is checked, so a malformed
        number is reported ahead of a malformed operator.
        """
        first = self.parse(first_text)
        second = self.parse(second_text)
        return self.apply(operation, first, second)

    def sqrt(self, value: BigInteger) -> BigInteger:
        """Integer square root using the configured iteration count."""
        logger.debug(f"Square root of {len(value.digits)}-digit operand, "
                     f"{self.sqrt_iterations} iterations")
        return value.sqrt(self.sqrt_iterations)
