"""
Attack modules: RSA key math, the common factor crack and PKCS#1 decryption.
"""

from .crack import CommonFactorSolver, attempt_crack
from .decrypt import decrypt, raw_decrypt, unpad
from .keymath import crt_params, modular_inverse, private_exponent, totient

__all__ = [
    'CommonFactorSolver',
    'attempt_crack',
    'decrypt',
    'raw_decrypt',
    'unpad',
    'crt_params',
    'modular_inverse',
    'private_exponent',
    'totient',
]
