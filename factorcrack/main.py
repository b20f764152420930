import argparse
import sys

from .core.errors import ChallengeError
from .core.loader import read_challenges
from .modules import CommonFactorSolver
from .utils.helpers import is_printable, log


def print_solutions(solutions):
    for solution in solutions:
        message = solution.decrypted_message.decode(errors='replace')
        if not is_printable(message):
            log(f"Challenge {solution.challenge} decrypted to non-printable data", 'WARNING')
        print(f"{solution.challenge}: {message}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Crack RSA keys that share a prime factor and decrypt their messages")
    parser.add_argument("directory", help="Directory holding <n>.pem keys and <n>.bin ciphertexts")
    parser.add_argument("--count", type=int, default=None,
                        help="Read challenges 1..COUNT (default: every numbered .pem file)")
    parser.add_argument("--workers", type=int, default=1, help="Worker processes for the pair scan")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print progress")

    args = parser.parse_args(argv)

    try:
        challenges = read_challenges(args.directory, args.count)
    except ChallengeError as e:
        log(f"Error loading challenges: {e}", 'ERROR')
        return 1

    log(f"Loaded {len(challenges)} challenges from {args.directory}", verbose=args.verbose)
    solver = CommonFactorSolver(verbose=args.verbose, workers=args.workers)
    solutions = solver.solve(challenges)

    if not solutions:
        log("No shared factors found.", 'ERROR')
        return 0

    print_solutions(solutions)
    return 0


if __name__ == "__main__":
    sys.exit(main())
