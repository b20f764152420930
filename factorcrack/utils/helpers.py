from Crypto.Util.number import long_to_bytes, bytes_to_long

from ..core.biguint import BigUint

_PREFIXES = {
    'INFO': '[*]',
    'SUCCESS': '[+]',
    'ERROR': '[-]',
    'WARNING': '[!]',
}


def log(message, level='INFO', verbose=False):
    """Print a status line. INFO only shows up in verbose mode."""
    if verbose or level != 'INFO':
        print(f"{_PREFIXES.get(level, f'[{level}]')} {message}")


def is_printable(text):
    """Checks if text contains mostly printable characters."""
    if not text:
        return False
    printable = sum(1 for c in text if 32 <= ord(c) <= 126)
    return printable / len(text) > 0.8


def bytes_to_biguint(data):
    """Big-endian bytes to BigUint."""
    return BigUint.from_native(bytes_to_long(data))


def biguint_to_bytes(value, blocksize=0):
    """BigUint to big-endian bytes, left-padded with zeros to a multiple of blocksize."""
    return long_to_bytes(int(value), blocksize)
