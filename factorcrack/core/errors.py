"""
Error taxonomy for the common factor cracker.

Every error derives from FactorCrackError and from the builtin it most
resembles, so callers can catch either.
"""


class FactorCrackError(Exception):
    """Base class for all factorcrack errors."""


class InvalidDigit(FactorCrackError, ValueError):
    """A decimal string contained something other than 0-9."""

    def __init__(self, char):
        self.char = char
        if char:
            message = f"non digit character encountered in input: {char}"
        else:
            message = "empty input is not a number"
        super().__init__(message)


class Underflow(FactorCrackError, ArithmeticError):
    """Unsigned subtraction with minuend < subtrahend."""


class DivisionByZero(FactorCrackError, ZeroDivisionError):
    """Divisor was zero."""


class NoInverse(FactorCrackError, ArithmeticError):
    """The modular inverse does not exist (gcd != 1)."""


class PaddingError(FactorCrackError, ValueError):
    """Decrypted block is not valid PKCS#1 v1.5 type 2 padding."""


class DecryptionError(FactorCrackError, ValueError):
    """Ciphertext cannot be decrypted with the given key."""


class ChallengeError(FactorCrackError, ValueError):
    """Challenge files are missing or inconsistent."""


class InconsistentFactor(FactorCrackError, AssertionError):
    """A proven common divisor left a remainder. Arithmetic bug, never caught."""
