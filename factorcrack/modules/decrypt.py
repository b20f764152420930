import gmpy2

from ..core.biguint import BigUint
from ..core.errors import DecryptionError, PaddingError
from ..utils.helpers import biguint_to_bytes, bytes_to_biguint

# PKCS#1 v1.5 type 2: 00 02 | >= 8 non-zero bytes | 00 | message
MIN_PADDING = 8


def raw_decrypt(key_pair, ciphertext):
    """
    The RSA decryption primitive c^d mod n, evaluated with the CRT.

    ciphertext is a BigUint and must be smaller than the modulus.
    """
    n = key_pair.modulus
    if ciphertext >= n:
        raise DecryptionError("ciphertext representative out of range")

    p, q = key_pair.private.p, key_pair.private.q
    dp, dq, qinv = key_pair.crt_params()
    c, p_, q_ = int(ciphertext), int(p), int(q)

    m1 = gmpy2.powmod(c, int(dp), p_)
    m2 = gmpy2.powmod(c, int(dq), q_)
    h = (int(qinv) * (m1 - m2)) % p_
    return BigUint.from_native(int(m2 + h * q_))


def unpad(block):
    """Strip PKCS#1 v1.5 type 2 padding and return the message bytes."""
    if len(block) < 2 + MIN_PADDING + 1:
        raise PaddingError("block too short for PKCS#1 v1.5")
    if block[0] != 0x00 or block[1] != 0x02:
        raise PaddingError(f"bad leading bytes {block[:2].hex()}")

    separator = block.find(b'\x00', 2)
    if separator == -1:
        raise PaddingError("no separator after padding string")
    if separator - 2 < MIN_PADDING:
        raise PaddingError(f"padding string only {separator - 2} bytes long")
    return block[separator + 1:]


def decrypt(key_pair, ciphertext):
    """Decrypt one ciphertext block and return the unpadded plaintext bytes."""
    size = key_pair.public.size_in_bytes
    c = bytes_to_biguint(ciphertext)
    m = raw_decrypt(key_pair, c)
    return unpad(biguint_to_bytes(m, size))
