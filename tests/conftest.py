import pytest
from Crypto.Cipher import PKCS1_v1_5
from Crypto.PublicKey import RSA
from Crypto.Util.number import getPrime

from factorcrack.core import BigUint, Challenge, PublicKey

E = 65537


def encrypt(n, e, message):
    """PKCS#1 v1.5 encrypt message with pycryptodome."""
    return PKCS1_v1_5.new(RSA.construct((n, e))).encrypt(message)


def make_challenge(number, p, q, message, e=E):
    n = p * q
    public_key = PublicKey(n=BigUint.from_native(n), e=BigUint.from_native(e))
    return Challenge(number=number, public_key=public_key, encrypted_message=encrypt(n, e, message))


@pytest.fixture(scope="session")
def primes():
    """Eight distinct 256-bit primes."""
    found = []
    while len(found) < 8:
        p = getPrime(256)
        if p not in found:
            found.append(p)
    return found


@pytest.fixture(scope="session")
def challenges(primes):
    """
    Four challenges; 1 and 3 share primes[0], the others share nothing.
    """
    shared, a, b, c, d, f, g = primes[:7]
    return [
        make_challenge(1, shared, a, b"first secret"),
        make_challenge(2, b, c, b"unbreakable"),
        make_challenge(3, shared, d, b"third secret"),
        make_challenge(4, f, g, b"also unbreakable"),
    ]
