from typing import Sequence

from satsort.cnf.sinks import ClauseSink

def encode_lex_leq(a: Sequence[int], b: Sequence[int], tie: Sequence[int], sink: ClauseSink) -> int:
    """
    Encodes a <= b for two big-endian bit vectors of equal width W.

    tie[k - 1] stands for "a and b agree on bits 0..k-1" (k = 1..W-1).
    Only agreement implies a tie; a tie that is true after the order was
    already decided just restricts that model, so the solver leaves it false.

      bit 0:         (-a0 | b0), (-a0 | t1), (b0 | t1)
      bit 0<k<W-1:   (-tk | -ak | bk), (-tk | -ak | tk+1), (-tk | bk | tk+1)
      bit W-1 > 0:   (-tk | -ak | bk)

    Returns the number of clauses added.
    """
    width = len(a)
    if len(b) != width:
        raise ValueError(f"Width mismatch: {width} vs {len(b)}")
    if len(tie) != max(width - 1, 0):
        raise ValueError(f"Expected {max(width - 1, 0)} tie variables, got {len(tie)}")
    if width == 0:
        return 0

    before = sink.num_clauses
    sink.add_clause([-a[0], b[0]])
    if width > 1:
        sink.add_clause([-a[0], tie[0]])
        sink.add_clause([b[0], tie[0]])

    for k in range(1, width):
        t = tie[k - 1]
        sink.add_clause([-t, -a[k], b[k]])
        if k < width - 1:
            t_next = tie[k]
            sink.add_clause([-t, -a[k], t_next])
            sink.add_clause([-t, b[k], t_next])

    return sink.num_clauses - before
