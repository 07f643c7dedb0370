from collections import Counter
from typing import List, Sequence

from satsort.core.errors import EncodingInvariantError

def padded_key(line: bytes, width: int) -> bytes:
    """Line zero-padded to width bytes, the order the encoding sorts by."""
    return line.ljust(width, b"\0")

def stripped(line: bytes) -> bytes:
    """What survives decoding: everything before the first NUL byte."""
    return line.split(b"\0", 1)[0]

def find_violations(original: Sequence[bytes], result: Sequence[bytes]) -> List[str]:
    """
    Checks that result is a sorted permutation of original.
    Returns a list of human readable failures, empty when the result is valid.
    """
    failures = []
    expected = Counter(stripped(line) for line in original)
    actual = Counter(result)
    if expected != actual:
        missing = expected - actual
        extra = actual - expected
        failures.append(f"not a permutation of the input (missing {sorted(missing)}, extra {sorted(extra)})")

    width = max((len(line) for line in result), default=0)
    for i in range(1, len(result)):
        if padded_key(result[i - 1], width) > padded_key(result[i], width):
            failures.append(f"lines {i - 1} and {i} out of order: {result[i - 1]!r} > {result[i]!r}")
    return failures

def verify_sorted(original: Sequence[bytes], result: Sequence[bytes]) -> None:
    """Raises EncodingInvariantError unless result is a sorted permutation of original."""
    failures = find_violations(original, result)
    if failures:
        raise EncodingInvariantError("decoded result is invalid: " + "; ".join(failures))
