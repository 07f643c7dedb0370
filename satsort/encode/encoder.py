from typing import List, Sequence

from satsort.cnf.sinks import ClauseSink
from satsort.core.errors import EncodingInvariantError
from satsort.core.logging import get_logger
from satsort.encode.cardinality import COMMANDER, encode_permutation
from satsort.encode.ordering import encode_lex_leq
from satsort.encode.report import EncodingReport
from satsort.vars import VarAllocator, VarTable

logger = get_logger("satsort.encode")

def line_width(lines: Sequence[bytes]) -> int:
    """Bit width W every line is padded to, 0 for no lines."""
    return 8 * max((len(line) for line in lines), default=0)

def line_bit(line: bytes, j: int) -> bool:
    """Bit j of a line, MSB first within each byte, False past its end."""
    byte = j >> 3
    if byte >= len(line):
        return False
    return bool((line[byte] >> (7 - (j & 7))) & 1)


class SortEncoder:
    """
    Encodes "some permutation of these lines is sorted" as CNF.

    Variables are laid out as four tables, reserved in this order:
      input[i][k]   bit k of line i (fixed by unit clauses)
      map[i][j]     line i goes to sorted position j
      output[j][k]  bit k of the line at position j
      tie[i][k]     rows i-1 and i agree on bits 0..k-1 (1 <= i < N, 1 <= k < W)
    Commander variables of the at-most-one constraints follow.
    """
    def __init__(self, lines: Sequence[bytes], pool: VarAllocator = None):
        self.lines = [bytes(line) for line in lines]
        self.n = len(self.lines)
        self.width = line_width(self.lines)
        self.pool = pool if pool is not None else VarAllocator()

        n, w = self.n, self.width
        self.input: VarTable = self.pool.table("input", n, w)
        self.map: VarTable = self.pool.table("map", n, n)
        self.output: VarTable = self.pool.table("output", n, w)
        self.tie: VarTable = self.pool.table("tie", n - 1, w - 1, row_base=1, col_base=1)

    def encode_input(self, sink: ClauseSink) -> int:
        for i, line in enumerate(self.lines):
            for k in range(self.width):
                var = self.input[i, k]
                sink.add_clause([var if line_bit(line, k) else -var])
        return self.n * self.width

    def encode_channel(self, sink: ClauseSink) -> int:
        # map[i][j] -> (output[j][k] <-> input[i][k])
        for i in range(self.n):
            for j in range(self.n):
                m = self.map[i, j]
                for k in range(self.width):
                    x = self.input[i, k]
                    y = self.output[j, k]
                    sink.add_clause([-m, -x, y])
                    sink.add_clause([-m, x, -y])
        return 2 * self.n * self.n * self.width

    def encode_permutation(self, sink: ClauseSink) -> int:
        return encode_permutation([self.map.row(i) for i in range(self.n)], sink, self.pool)

    def encode_order(self, sink: ClauseSink) -> int:
        count = 0
        for i in range(1, self.n):
            count += encode_lex_leq(self.output.row(i - 1), self.output.row(i),
                                    self.tie.row(i), sink)
        return count

    def encode(self, sink: ClauseSink) -> EncodingReport:
        """
        Emits all four clause families into the sink, in fixed order.
        Does not finalize the sink.
        """
        report = EncodingReport(num_lines=self.n, width=self.width)
        logger.info(f"Encoding {self.n} lines padded to {self.width} bits")

        families = [
            ("input", self.encode_input),
            ("channel", self.encode_channel),
            ("permutation", self.encode_permutation),
            ("order", self.encode_order),
        ]
        for family, encode in families:
            before = sink.num_clauses
            encode(sink)
            report.clauses_by_family[family] = sink.num_clauses - before
            logger.debug(f"{family}: {report.clauses_by_family[family]} clauses")

        report.num_vars = self.pool.max_id
        report.num_clauses = sink.num_clauses
        report.num_commanders = self.pool.aux_count(COMMANDER)
        logger.info(report.summary())
        return report

    def positions(self, value) -> List[int]:
        """Original index of the line at each sorted position, read from a model."""
        result = []
        for j in range(self.n):
            chosen = [i for i in range(self.n) if value(self.map[i, j])]
            if len(chosen) != 1:
                raise EncodingInvariantError(f"position {j} holds {len(chosen)} lines")
            result.append(chosen[0])
        return result
