from functools import partial
from itertools import combinations
from multiprocessing import Pool

from ..core.biguint import gcd
from ..core.errors import DecryptionError, InconsistentFactor, NoInverse, PaddingError
from ..core.keys import KeyPair, PrivateKey, Solution
from ..utils.helpers import log
from .decrypt import decrypt


def _cofactor(modulus, factor):
    quotient, remainder = divmod(modulus, factor)
    if not remainder.is_zero():
        raise InconsistentFactor(f"{factor} does not divide {modulus} (remainder {remainder})")
    return quotient


def attempt_crack(public_key1, public_key2):
    """
    Attempt to crack two RSA public keys using a Common Factor Attack.

    If the moduli share a prime, GCD finds it and dividing each modulus by
    it gives the other prime of each key. Historical RNG bugs have made
    such shared primes appear in the wild.

    Returns a (KeyPair, KeyPair) tuple, or None when nothing is shared.
    """
    shared = gcd(public_key1.n, public_key2.n)

    # GCD of 1 means no shared prime. A GCD equal to a whole modulus means
    # the moduli are equal (or one divides the other) and leaves nothing to
    # split off.
    if shared == 1 or shared == public_key1.n or shared == public_key2.n:
        return None

    left = _cofactor(public_key1.n, shared)
    right = _cofactor(public_key2.n, shared)
    return (
        KeyPair(private=PrivateKey(shared, left), public=public_key1),
        KeyPair(private=PrivateKey(shared, right), public=public_key2),
    )


def _solve_pair(pair, verbose=False):
    challenge1, challenge2 = pair
    cracked = attempt_crack(challenge1.public_key, challenge2.public_key)
    if cracked is None:
        return []

    log(f"Challenges {challenge1.number} and {challenge2.number} share a prime",
        'SUCCESS', verbose)
    solutions = []
    for challenge, key_pair in zip(pair, cracked):
        try:
            message = decrypt(key_pair, challenge.encrypted_message)
        except (PaddingError, NoInverse, DecryptionError) as err:
            log(f"Decryption of challenge {challenge.number} failed: {err}", 'ERROR', verbose)
            return []
        solutions.append(Solution(challenge.number, key_pair.private, message))
    return solutions


class CommonFactorSolver:
    """
    Solver for batches of RSA challenges whose keys may share primes.
    """
    def __init__(self, verbose=False, workers=1):
        self.verbose = verbose
        self.workers = workers

    def attempt(self, challenge1, challenge2):
        """
        Crack and decrypt one pair of challenges.

        Returns (Solution, Solution) or None. Bad padding, a missing inverse
        or an out-of-range ciphertext only cost this pair.
        """
        solutions = _solve_pair((challenge1, challenge2), self.verbose)
        return tuple(solutions) if solutions else None

    def solve(self, challenges):
        """
        Try every unordered pair of challenges.

        Returns the solutions sorted by challenge number; pairs are visited
        in ascending (i, j) order and the sort is stable.
        """
        challenges = list(challenges)
        pairs = list(combinations(challenges, 2))
        log(f"Checking {len(pairs)} pairs from {len(challenges)} challenges...",
            verbose=self.verbose)

        if self.workers > 1 and len(pairs) > 1:
            log(f"Using {self.workers} workers", verbose=self.verbose)
            with Pool(self.workers) as pool:
                results = pool.map(partial(_solve_pair, verbose=self.verbose), pairs)
        else:
            results = [_solve_pair(pair, self.verbose) for pair in pairs]

        solutions = [solution for result in results for solution in result]
        solutions.sort(key=lambda solution: solution.challenge)
        return solutions
