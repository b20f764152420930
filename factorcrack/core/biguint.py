"""
Arbitrary-precision unsigned integers stored as decimal digits.

A BigUint is an immutable sequence of base-10 digits, most significant
first. The arithmetic below is plain schoolbook arithmetic on those digits
and never relies on native big integers, so it is bounded only by memory.
"""

from functools import total_ordering

from .errors import DivisionByZero, InvalidDigit, Underflow


# Digit-list helpers. They work on lists of ints with no leading zeros,
# where the empty list is zero.

def _trim(digits):
    start = 0
    while start < len(digits) and digits[start] == 0:
        start += 1
    return list(digits[start:])


def _compare(a, b):
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for x, y in zip(a, b):
        if x != y:
            return -1 if x < y else 1
    return 0


def _add(a, b):
    result = []
    carry = 0
    i, j = len(a) - 1, len(b) - 1
    while i >= 0 or j >= 0 or carry:
        total = carry
        if i >= 0:
            total += a[i]
            i -= 1
        if j >= 0:
            total += b[j]
            j -= 1
        carry, digit = divmod(total, 10)
        result.append(digit)
    result.reverse()
    return _trim(result)


def _subtract(a, b):
    # Caller guarantees a >= b.
    result = []
    borrow = 0
    offset = len(a) - len(b)
    for i in range(len(a) - 1, -1, -1):
        j = i - offset
        diff = a[i] - borrow - (b[j] if j >= 0 else 0)
        if diff < 0:
            diff += 10
            borrow = 1
        else:
            borrow = 0
        result.append(diff)
    result.reverse()
    return _trim(result)


def _multiply(a, b):
    if not a or not b:
        return []
    result = [0] * (len(a) + len(b))
    for i in range(len(a) - 1, -1, -1):
        carry = 0
        for j in range(len(b) - 1, -1, -1):
            total = result[i + j + 1] + a[i] * b[j] + carry
            carry, result[i + j + 1] = divmod(total, 10)
        result[i] += carry
    return _trim(result)


def _divmod(a, b):
    """Long division, one dividend digit at a time."""
    quotient = []
    remainder = []
    for digit in a:
        if remainder or digit:
            remainder.append(digit)
        count = 0
        while _compare(remainder, b) >= 0:
            remainder = _subtract(remainder, b)
            count += 1
        quotient.append(count)
    return _trim(quotient), remainder


@total_ordering
class BigUint:
    """
    Immutable unsigned integer of unbounded size.

    Build one with BigUint.parse() or BigUint.from_native(). Arithmetic
    operators accept another BigUint or a non-negative int and always
    return a new BigUint.
    """

    __slots__ = ("digits", "_magnitude")

    def __init__(self, digits):
        digits = tuple(digits)
        if not digits:
            raise ValueError("a BigUint needs at least one digit")
        for digit in digits:
            if not isinstance(digit, int) or not 0 <= digit <= 9:
                raise ValueError(f"not a decimal digit: {digit!r}")
        object.__setattr__(self, "digits", digits)
        object.__setattr__(self, "_magnitude", tuple(_trim(digits)))

    @classmethod
    def parse(cls, text):
        """
        Parse a decimal string.

        Leading zeros are kept in ``digits`` as given but never affect the
        value. Raises InvalidDigit for the first non-digit character.
        """
        if not text:
            raise InvalidDigit("")
        digits = []
        for char in text:
            if char not in "0123456789":
                raise InvalidDigit(char)
            digits.append(ord(char) - ord("0"))
        return cls(digits)

    @classmethod
    def from_native(cls, value):
        """Convert a non-negative Python int."""
        if value < 0:
            raise Underflow(f"cannot represent negative value {value}")
        digits = []
        while value > 0:
            value, digit = divmod(value, 10)
            digits.append(digit)
        digits.reverse()
        return cls(digits or [0])

    @classmethod
    def _wrap(cls, magnitude):
        return cls(magnitude or [0])

    @classmethod
    def _coerce(cls, other):
        if isinstance(other, BigUint):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return cls.from_native(other)
        return None

    def __setattr__(self, name, value):
        raise AttributeError("BigUint is immutable")

    def __reduce__(self):
        return (self.__class__, (self.digits,))

    def is_zero(self):
        return not self._magnitude

    def compare(self, other):
        """Return -1, 0 or 1 as self is less than, equal to or greater than other."""
        other = self._coerce(other)
        if other is None:
            raise TypeError("can only compare BigUint with BigUint or int")
        return _compare(self._magnitude, other._magnitude)

    def __eq__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._magnitude == other._magnitude

    def __lt__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return _compare(self._magnitude, other._magnitude) < 0

    def __hash__(self):
        # Equal to hash(int(self)) so that BigUint(n) == n keeps hashing consistent
        return hash(int(self))

    def __bool__(self):
        return not self.is_zero()

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._wrap(_add(self._magnitude, other._magnitude))

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if _compare(self._magnitude, other._magnitude) < 0:
            raise Underflow(f"{self} - {other} is negative")
        return self._wrap(_subtract(self._magnitude, other._magnitude))

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._wrap(_multiply(self._magnitude, other._magnitude))

    __rmul__ = __mul__

    def __divmod__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if other.is_zero():
            raise DivisionByZero(f"{self} divided by zero")
        quotient, remainder = _divmod(self._magnitude, other._magnitude)
        return self._wrap(quotient), self._wrap(remainder)

    def __floordiv__(self, other):
        result = self.__divmod__(other)
        if result is NotImplemented:
            return result
        return result[0]

    def __mod__(self, other):
        result = self.__divmod__(other)
        if result is NotImplemented:
            return result
        return result[1]

    def gcd(self, other):
        return gcd(self, other)

    def __int__(self):
        return int(str(self))

    def __str__(self):
        if not self._magnitude:
            return "0"
        return "".join(str(digit) for digit in self._magnitude)

    def __repr__(self):
        return f"BigUint('{self}')"


def gcd(a, b):
    """
    Greatest common divisor by Euclid's algorithm.

    Uses the remainder step rather than repeated subtraction; both reach
    the same value. gcd(x, 0) is x and gcd(0, 0) is 0.
    """
    a = BigUint._coerce(a)
    b = BigUint._coerce(b)
    if a is None or b is None:
        raise TypeError("gcd needs BigUint or int arguments")
    while not b.is_zero():
        a, b = b, a % b
    return a
