"""
Challenge source: reads <number>.pem public keys and <number>.bin ciphertexts.
"""

import re
from pathlib import Path

from Crypto.PublicKey import RSA

from .biguint import BigUint
from .errors import ChallengeError
from .keys import Challenge, PublicKey


def read_public_key(path):
    """Load an RSA public key (PEM or DER) with pycryptodome."""
    try:
        key = RSA.import_key(Path(path).read_bytes())
    except (OSError, ValueError, IndexError, TypeError) as e:
        raise ChallengeError(f"cannot read public key {path}: {e}") from e
    return PublicKey(n=BigUint.from_native(key.n), e=BigUint.from_native(key.e))


def read_challenge(directory, number):
    directory = Path(directory)
    public_key = read_public_key(directory / f"{number}.pem")

    bin_path = directory / f"{number}.bin"
    try:
        ciphertext = bin_path.read_bytes()
    except OSError as e:
        raise ChallengeError(f"cannot read ciphertext {bin_path}: {e}") from e

    if len(ciphertext) != public_key.size_in_bytes:
        raise ChallengeError(
            f"ciphertext {bin_path} is {len(ciphertext)} bytes, "
            f"expected {public_key.size_in_bytes}"
        )
    return Challenge(number=number, public_key=public_key, encrypted_message=ciphertext)


def challenge_numbers(directory):
    """Numbers of all <number>.pem files in directory, ascending."""
    numbers = []
    for path in Path(directory).glob("*.pem"):
        if re.fullmatch(r'\d+', path.stem):
            numbers.append(int(path.stem))
    return sorted(numbers)


def read_challenges(directory, count=None):
    """
    Read challenges 1..count, or every numbered key in directory when
    count is None.
    """
    if not Path(directory).is_dir():
        raise ChallengeError(f"not a directory: {directory}")
    numbers = range(1, count + 1) if count is not None else challenge_numbers(directory)
    return [read_challenge(directory, number) for number in numbers]
