"""
Core types: unbounded integers, keys, challenges and errors.
"""

from .biguint import BigUint, gcd
from .keys import Challenge, KeyPair, PrivateKey, PublicKey, Solution

__all__ = [
    'BigUint',
    'gcd',
    'Challenge',
    'KeyPair',
    'PrivateKey',
    'PublicKey',
    'Solution',
]
