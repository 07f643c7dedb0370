from satsort.encode.encoder import SortEncoder, line_width, line_bit
from satsort.encode.cardinality import (
    encode_at_most_one, encode_at_least_one, encode_exactly_one, encode_permutation
)
from satsort.encode.ordering import encode_lex_leq
from satsort.encode.report import EncodingReport

__all__ = [
    "SortEncoder", "line_width", "line_bit",
    "encode_at_most_one", "encode_at_least_one", "encode_exactly_one", "encode_permutation",
    "encode_lex_leq",
    "EncodingReport"
]
