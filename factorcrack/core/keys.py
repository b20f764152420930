"""
RSA key material and the challenge/solution records passed through the cracker.
"""

from dataclasses import dataclass

from .biguint import BigUint


@dataclass(frozen=True)
class PublicKey:
    n: BigUint
    e: BigUint

    @property
    def size_in_bytes(self):
        """Byte length of the modulus, which is also the ciphertext block size."""
        return (int(self.n).bit_length() + 7) // 8


@dataclass(frozen=True, eq=False)
class PrivateKey:
    """
    The two prime factors of a modulus.

    Which factor is p and which is q carries no meaning, so equality and
    hashing ignore the order.
    """
    p: BigUint
    q: BigUint

    def __eq__(self, other):
        if not isinstance(other, PrivateKey):
            return NotImplemented
        return ((self.p == other.p and self.q == other.q)
                or (self.p == other.q and self.q == other.p))

    def __hash__(self):
        return hash(frozenset((self.p, self.q)))


@dataclass(frozen=True)
class KeyPair:
    """A recovered private key together with the public key it belongs to."""
    private: PrivateKey
    public: PublicKey

    @property
    def modulus(self):
        return self.public.n

    def private_exponent(self):
        from ..modules.keymath import private_exponent
        return private_exponent(self.public, self.private)

    def crt_params(self):
        from ..modules.keymath import crt_params
        return crt_params(self.private_exponent(), self.private.p, self.private.q)


@dataclass(frozen=True)
class Challenge:
    number: int
    public_key: PublicKey
    encrypted_message: bytes


@dataclass(frozen=True)
class Solution:
    challenge: int
    private_key: PrivateKey
    decrypted_message: bytes

    @property
    def text(self):
        """Plaintext as UTF-8. A decode error is left to the caller."""
        return self.decrypted_message.decode("utf-8")
