from satsort.solution.decoder import model_lookup, decode_line, decode_lines
from satsort.solution.verifier import find_violations, verify_sorted
from satsort.solution.types import SortResult

__all__ = [
    "model_lookup", "decode_line", "decode_lines",
    "find_violations", "verify_sorted",
    "SortResult"
]
