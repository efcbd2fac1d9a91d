"""
Arbitrary-precision signed integer arithmetic.

This module provides the BigInteger value type:
- Parsing from signed decimal strings
- Comparison (total order over signed magnitudes)
- Addition and subtraction with carry/borrow propagation
- Multiplication, truncating division and modulo
- Exponentiation and Newton's-method integer square root

Values are stored as a tuple of decimal digits (most significant first)
plus a sign flag. Instances are immutable: every operation returns a new
BigInteger.

Multiplication is repeated addition and division is repeated subtraction,
so their cost grows with the numeric value of the multiplier or quotient,
not with the number of digits. Keep operands small where speed matters.

Example:
    >>> a = BigInteger("123456789012345678901234567890")
    >>> str(a + ONE)
    '123456789012345678901234567891'
    >>> str(BigInteger("-17") / BigInteger("5"))
    '-3'
"""

from typing import Any, List, Optional, Sequence, Tuple

from .errors import DivisionByZeroError, InvalidArgumentError, ParseError


DEFAULT_SQRT_ITERATIONS = 15

_DIGIT_CHARS = "0123456789"


def _normalize(digits: Sequence[int], is_negative: bool) -> Tuple[Tuple[int, ...], bool]:
    """
    Strip leading zeros and force zero to be non-negative.

    Args:
        digits: Decimal digits, most significant first (may be empty)
        is_negative: Requested sign

    Returns:
        Tuple of (normalized digits, normalized sign)
    """
    start = 0
    while start < len(digits) - 1 and digits[start] == 0:
        start += 1

    normalized = tuple(digits[start:]) or (0,)
    if normalized == (0,):
        is_negative = False

    return normalized, is_negative


def _parse(text: str) -> Tuple[Tuple[int, ...], bool]:
    """
    Parse a signed decimal string into (digits, sign).

    Raises:
        ParseError: If the string is empty, is a bare sign, or contains a
            character other than an ASCII digit after the optional sign
    """
    if not text:
        raise ParseError("Cannot parse an empty string as an integer")

    is_negative = False
    body = text
    if text[0] in "+-":
        is_negative = text[0] == "-"
        body = text[1:]
        if not body:
            raise ParseError(f"Cannot parse a sign without digits as an integer: '{text}'")

    digits: List[int] = []
    for char in body:
        # str.isdigit() accepts non-ASCII digits, so check membership instead
        if char not in _DIGIT_CHARS:
            raise ParseError(f"Cannot parse a non-digit character as an integer: '{char}'")
        digits.append(ord(char) - ord("0"))

    return _normalize(digits, is_negative)


def _int_digits(value: int) -> Tuple[Tuple[int, ...], bool]:
    """
    Split a Python int into (digits, sign) without going through str().

    str(int) is capped by sys.set_int_max_str_digits (4300 digits by default).
    """
    magnitude = -value if value < 0 else value
    digits: List[int] = []
    while magnitude:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(digit)
    digits.reverse()
    return _normalize(digits, value < 0)


def _pad(digits: Sequence[int], width: int) -> List[int]:
    """Left-pad a digit sequence with zeros up to width."""
    return [0] * (width - len(digits)) + list(digits)


def _compare_magnitudes(first: Sequence[int], second: Sequence[int]) -> int:
    """
    Compare two magnitudes digit by digit.

    Returns:
        1 if first is larger, -1 if second is larger, 0 if equal
    """
    width = max(len(first), len(second))
    for dig1, dig2 in zip(_pad(first, width), _pad(second, width)):
        if dig1 > dig2:
            return 1
        if dig1 < dig2:
            return -1
    return 0


class BigInteger:
    """
    Immutable arbitrary-precision signed integer.

    Construct from a decimal string (an optional leading '+' or '-' followed
    by ASCII digits) or from any value whose str() is such a string.

    Usage:
        x = BigInteger("-42")
        y = BigInteger(10)              # same as BigInteger("10")
        print(x * y)                    # -420
        print(BigInteger("10").pow(3))  # 1000

    Compound assignment (``x += y``) rebinds x to a new instance; there is
    no in-place mutation.
    """

    __slots__ = ("_digits", "_is_negative")

    def __init__(self, value: Any):
        """
        Args:
            value: Decimal string, another BigInteger, or any value with a
                canonical decimal str() (e.g. a Python int)

        Raises:
            ParseError: If the textual form is not a valid decimal integer
        """
        if isinstance(value, BigInteger):
            digits, is_negative = value._digits, value._is_negative
        elif isinstance(value, int) and not isinstance(value, bool):
            digits, is_negative = _int_digits(value)
        else:
            text = value if isinstance(value, str) else str(value)
            digits, is_negative = _parse(text)

        object.__setattr__(self, "_digits", digits)
        object.__setattr__(self, "_is_negative", is_negative)

    @classmethod
    def from_value(cls, value: Any) -> "BigInteger":
        """Build a BigInteger from anything with a canonical textual form."""
        return cls(value)

    @classmethod
    def _from_digits(cls, digits: Sequence[int], is_negative: bool) -> "BigInteger":
        """Build an instance straight from digits, skipping string parsing."""
        instance = cls.__new__(cls)
        normalized, sign = _normalize(digits, is_negative)
        object.__setattr__(instance, "_digits", normalized)
        object.__setattr__(instance, "_is_negative", sign)
        return instance

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"BigInteger is immutable, cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"BigInteger is immutable, cannot delete '{name}'")

    @property
    def digits(self) -> Tuple[int, ...]:
        """Magnitude digits, most significant first."""
        return self._digits

    @property
    def is_negative(self) -> bool:
        return self._is_negative

    def _with_sign(self, is_negative: bool) -> "BigInteger":
        return BigInteger._from_digits(self._digits, is_negative)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._is_negative == other._is_negative and self._digits == other._digits

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __gt__(self, other: Any) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented

        # Zero is never negative, so this also orders zero correctly
        if self._is_negative != other._is_negative:
            return other._is_negative

        order = _compare_magnitudes(self._digits, other._digits)
        if self._is_negative:
            return order < 0
        return order > 0

    def __ge__(self, other: Any) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self > other or self == other

    def __lt__(self, other: Any) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return not self >= other

    def __le__(self, other: Any) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return not self > other

    def __hash__(self) -> int:
        # Must agree with int hashing since BigInteger(5) == 5
        return hash(int(self))

    # ------------------------------------------------------------------
    # Sign
    # ------------------------------------------------------------------

    def __neg__(self) -> "BigInteger":
        return self._with_sign(not self._is_negative)

    def __pos__(self) -> "BigInteger":
        return self

    def abs(self) -> "BigInteger":
        """Return the absolute value."""
        return self._with_sign(False)

    def __abs__(self) -> "BigInteger":
        return self.abs()

    # ------------------------------------------------------------------
    # Addition / subtraction
    # ------------------------------------------------------------------

    def __add__(self, other: Any) -> "BigInteger":
        """
        Add two signed integers digit by digit.

        Same signs add magnitudes with carry. Different signs subtract the
        smaller magnitude from the larger one with borrow, and the result
        takes the sign of the larger-magnitude operand.
        """
        other = _coerce(other)
        if other is None:
            return NotImplemented

        if self._is_negative == other._is_negative:
            first, second = self._digits, other._digits
            result_negative = self._is_negative
            multiplier = 1
        else:
            multiplier = -1
            if _compare_magnitudes(self._digits, other._digits) >= 0:
                first, second = self._digits, other._digits
                result_negative = self._is_negative
            else:
                first, second = other._digits, self._digits
                result_negative = other._is_negative

        width = max(len(first), len(second))
        first_padded = _pad(first, width)
        second_padded = _pad(second, width)

        # Built least significant first, reversed at the end
        result: List[int] = []
        carry = 0
        for index in range(width - 1, -1, -1):
            column = first_padded[index] + multiplier * (second_padded[index] + carry)
            if column > 9:
                column -= 10
                carry = 1
            elif column < 0:
                column += 10
                carry = 1
            else:
                carry = 0
            result.append(column)

        # A borrow never survives the last column since |first| >= |second|
        if carry:
            result.append(1)

        result.reverse()
        return BigInteger._from_digits(result, result_negative)

    def __radd__(self, other: Any) -> "BigInteger":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other + self

    def __sub__(self, other: Any) -> "BigInteger":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other: Any) -> "BigInteger":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def increment(self) -> "BigInteger":
        """Return self + 1."""
        return self + ONE

    def decrement(self) -> "BigInteger":
        """Return self - 1."""
        return self - ONE

    # ------------------------------------------------------------------
    # Multiplication / division / modulo
    # ------------------------------------------------------------------

    def __mul__(self, other: Any) -> "BigInteger":
        """
        Multiply by repeated addition.

        Adds |self| to an accumulator |other| times, so the cost is
        proportional to the value of the right-hand operand.
        """
        other = _coerce(other)
        if other is None:
            return NotImplemented

        times = other.abs()
        magnitude = self.abs()

        result = ZERO
        counter = ZERO
        while counter < times:
            result = result + magnitude
            counter = counter.increment()

        return result._with_sign(self._is_negative != other._is_negative)

    def __rmul__(self, other: Any) -> "BigInteger":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other * self

    def _check_divisor(self, divisor: "BigInteger") -> None:
        if divisor.is_zero():
            raise DivisionByZeroError("Cannot divide by zero")

    def __truediv__(self, other: Any) -> "BigInteger":
        """
        Integer division, truncating toward zero.

        Repeatedly subtracts |other| from |self| while counting, so the cost
        is proportional to the value of the quotient.

        Raises:
            DivisionByZeroError: If other is zero
        """
        other = _coerce(other)
        if other is None:
            return NotImplemented
        self._check_divisor(other)

        number, divisor = self.abs(), other.abs()
        result_negative = self._is_negative != other._is_negative

        if number < divisor:
            return ZERO
        if divisor == ONE:
            return self._with_sign(result_negative)
        if number == divisor:
            return NEGATIVE_ONE if result_negative else ONE

        remainder = number
        quotient = ZERO
        while remainder >= divisor:
            remainder = remainder - divisor
            quotient = quotient.increment()

        return quotient._with_sign(result_negative)

    __floordiv__ = __truediv__

    def __rtruediv__(self, other: Any) -> "BigInteger":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other / self

    __rfloordiv__ = __rtruediv__

    def __mod__(self, other: Any) -> "BigInteger":
        """
        Remainder of truncating division; takes the sign of the dividend.

        Raises:
            DivisionByZeroError: If other is zero
        """
        other = _coerce(other)
        if other is None:
            return NotImplemented
        self._check_divisor(other)

        number, divisor = self.abs(), other.abs()
        if number < divisor:
            return self

        remainder = number
        while remainder >= divisor:
            remainder = remainder - divisor

        return remainder._with_sign(self._is_negative)

    def __rmod__(self, other: Any) -> "BigInteger":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other % self

    # ------------------------------------------------------------------
    # Exponentiation / square root
    # ------------------------------------------------------------------

    def pow(self, exponent: Any) -> "BigInteger":
        """
        Raise to an integer power by repeated multiplication.

        Args:
            exponent: BigInteger or int exponent

        Returns:
            self ** exponent; ZERO for a negative exponent, since any proper
            fraction truncates to zero

        Example:
            >>> str(BigInteger("2").pow(10))
            '1024'
        """
        exponent = BigInteger(exponent)

        if exponent < ZERO:
            return ZERO
        if exponent == ZERO:
            return ONE
        if exponent == ONE:
            return self

        result = ONE
        counter = ZERO
        while counter < exponent:
            result = result * self
            counter = counter.increment()

        return result

    def __pow__(self, exponent: Any, modulo: Optional[Any] = None) -> "BigInteger":
        if modulo is not None:
            return NotImplemented
        if _coerce(exponent) is None:
            return NotImplemented
        return self.pow(exponent)

    def __rpow__(self, base: Any) -> "BigInteger":
        base = _coerce(base)
        if base is None:
            return NotImplemented
        return base.pow(self)

    def sqrt(self, iterations: int = DEFAULT_SQRT_ITERATIONS) -> "BigInteger":
        """
        Approximate integer square root using Newton's method.

        Runs exactly ``iterations`` steps of
        ``estimate = (estimate + self / estimate) / 2`` starting from self.
        There is no convergence check, so a small iteration count can leave
        the estimate above the true root, and near the root the estimate
        may alternate between floor(sqrt) and floor(sqrt) + 1.

        Args:
            iterations: Number of Newton steps (must be positive)

        Returns:
            The estimate after the last step

        Raises:
            InvalidArgumentError: If self is negative or iterations <= 0
        """
        if self._is_negative:
            raise InvalidArgumentError("Cannot take the square root of a negative number")
        if self.is_zero():
            return ZERO
        if iterations <= 0:
            raise InvalidArgumentError(
                f"The number of iterations must be positive, got {iterations}"
            )

        current = self
        for _ in range(iterations):
            current = (current + self / current) / TWO

        return current

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def is_zero(self) -> bool:
        """True iff the value is exactly zero."""
        return self._digits == (0,)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __str__(self) -> str:
        sign = "-" if self._is_negative else ""
        return sign + "".join(_DIGIT_CHARS[digit] for digit in self._digits)

    def __repr__(self) -> str:
        return f"BigInteger('{self}')"

    def __int__(self) -> int:
        # Accumulate directly; int(str) is capped by sys.set_int_max_str_digits
        value = 0
        for digit in self._digits:
            value = value * 10 + digit
        return -value if self._is_negative else value

    def __reduce__(self):
        return (BigInteger, (str(self),))


def _coerce(value: Any) -> Optional[BigInteger]:
    """Convert an operand to BigInteger, or None if the type isn't supported."""
    if isinstance(value, BigInteger):
        return value
    # bool is an int subclass, but BigInteger(True) is a ParseError
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInteger(value)
    return None


NEGATIVE_ONE = BigInteger("-1")
ZERO = BigInteger("0")
ONE = BigInteger("1")
TWO = BigInteger("2")
