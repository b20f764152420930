"""
Common Factor Attack cracker for batches of RSA public keys.
"""

from .core import BigUint, Challenge, KeyPair, PrivateKey, PublicKey, Solution
from .modules import CommonFactorSolver, attempt_crack, decrypt

__all__ = [
    'BigUint',
    'Challenge',
    'KeyPair',
    'PrivateKey',
    'PublicKey',
    'Solution',
    'CommonFactorSolver',
    'attempt_crack',
    'decrypt',
]
