"""
RSA number theory on BigUint: totient, modular inverse and CRT parameters.
"""

from collections import namedtuple

from ..core.biguint import BigUint
from ..core.errors import DivisionByZero, NoInverse

ONE = BigUint.from_native(1)

CrtParams = namedtuple("CrtParams", ["dp", "dq", "qinv"])


def totient(p, q):
    """Euler's phi of p*q, trusting that p and q are the prime factors."""
    return (p - ONE) * (q - ONE)


def _sub_mod(a, b, m):
    # (a - b) mod m for a, b already reduced mod m, without going negative
    if a >= b:
        return a - b
    return a + m - b


def modular_inverse(e, phi):
    """
    Find d with e*d = 1 (mod phi) by the extended Euclidean algorithm.

    Only the coefficient of e is tracked and it is kept reduced mod phi,
    so every intermediate value stays unsigned.
    """
    if phi.is_zero():
        raise DivisionByZero("modulus of the inverse is zero")
    old_r, r = phi, e % phi
    old_t, t = BigUint.from_native(0), ONE
    while not r.is_zero():
        quotient, remainder = divmod(old_r, r)
        old_r, r = r, remainder
        old_t, t = t, _sub_mod(old_t, (quotient * t) % phi, phi)
    if old_r != ONE:
        raise NoInverse(f"{e} has no inverse modulo {phi} (gcd is {old_r})")
    return old_t % phi


def crt_params(d, p, q):
    """dP, dQ and qInv for decryption via the Chinese Remainder Theorem."""
    return CrtParams(
        dp=d % (p - ONE),
        dq=d % (q - ONE),
        qinv=modular_inverse(q, p),
    )


def private_exponent(public_key, private_key):
    phi = totient(private_key.p, private_key.q)
    return modular_inverse(public_key.e, phi)
