import pytest

from factorcrack.core import BigUint, KeyPair, PrivateKey, PublicKey
from factorcrack.core.errors import DecryptionError, PaddingError
from factorcrack.modules.decrypt import decrypt, raw_decrypt, unpad

from .conftest import E, encrypt


def big(value):
    return BigUint.from_native(value)


def key_pair_for(p, q, e=E):
    return KeyPair(private=PrivateKey(big(p), big(q)), public=PublicKey(n=big(p * q), e=big(e)))


def test_raw_decrypt_textbook_key():
    key_pair = key_pair_for(61, 53, e=17)
    ciphertext = pow(65, 17, 3233)
    assert raw_decrypt(key_pair, big(ciphertext)) == big(65)


def test_raw_decrypt_rejects_out_of_range_ciphertext():
    key_pair = key_pair_for(61, 53, e=17)
    with pytest.raises(DecryptionError):
        raw_decrypt(key_pair, big(3233))


def test_pkcs1_round_trip(primes):
    p, q = primes[0], primes[1]
    key_pair = key_pair_for(p, q)
    assert decrypt(key_pair, encrypt(p * q, E, bytes([65]))) == b"A"
    assert decrypt(key_pair, encrypt(p * q, E, b"attack at dawn")) == b"attack at dawn"
    assert decrypt(key_pair, encrypt(p * q, E, b"")) == b""


def test_wrong_key_fails_padding(primes):
    p, q, r = primes[0], primes[1], primes[2]
    right = p * q
    wrong = key_pair_for(p, r)
    ciphertext = encrypt(right, E, b"not for you")
    if int.from_bytes(ciphertext, "big") >= p * r:
        pytest.skip("ciphertext does not fit the other modulus")
    with pytest.raises(PaddingError):
        decrypt(wrong, ciphertext)


def test_unpad_valid_block():
    block = b"\x00\x02" + b"\xff" * 8 + b"\x00" + b"hello"
    assert unpad(block) == b"hello"


def test_unpad_bad_leading_bytes():
    with pytest.raises(PaddingError):
        unpad(b"\x00\x01" + b"\xff" * 8 + b"\x00hello")
    with pytest.raises(PaddingError):
        unpad(b"\x01\x02" + b"\xff" * 8 + b"\x00hello")


def test_unpad_short_padding_string():
    with pytest.raises(PaddingError):
        unpad(b"\x00\x02" + b"\xff" * 7 + b"\x00" + b"message!!")


def test_unpad_missing_separator():
    with pytest.raises(PaddingError):
        unpad(b"\x00\x02" + b"\xff" * 20)


def test_unpad_block_too_short():
    with pytest.raises(PaddingError):
        unpad(b"\x00\x02\x00")
