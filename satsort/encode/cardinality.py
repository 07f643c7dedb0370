from collections import deque
from itertools import combinations
from typing import List, Sequence

from satsort.cnf.sinks import ClauseSink
from satsort.vars import VarAllocator

COMMANDER = "commander"

def encode_at_most_pairwise(x: Sequence[int], sink: ClauseSink):
    """
    Encodes AtMost(1, x) using Pairwise encoding.
    """
    for l1, l2 in combinations(x, 2):
        sink.add_clause([-l1, -l2])

def encode_at_most_one(x: Sequence[int], sink: ClauseSink, pool: VarAllocator) -> int:
    """
    Encodes AtMost(1, x) with commander variables.

    Groups of up to three literals are handled pairwise. Larger groups
    consume two literals at a time: a fresh commander c gets the pairwise
    clauses of the window (x0, x1, -c), so c is implied by either literal,
    and c goes to the back of the queue in their place. Each step costs
    3 clauses and one variable, 3n - 6 clauses in total for n >= 4.

    Returns the number of clauses added.
    """
    queue = deque(x)
    before = sink.num_clauses
    while len(queue) > 3:
        a = queue.popleft()
        b = queue.popleft()
        c = pool.fresh(COMMANDER)
        encode_at_most_pairwise([a, b, -c], sink)
        queue.append(c)
    encode_at_most_pairwise(list(queue), sink)
    return sink.num_clauses - before

def encode_at_least_one(x: Sequence[int], sink: ClauseSink) -> int:
    if not x:
        return 0
    sink.add_clause(list(x))
    return 1

def encode_exactly_one(x: Sequence[int], sink: ClauseSink, pool: VarAllocator) -> int:
    """Exactly(1, x) as commander at-most-one followed by the at-least-one clause."""
    return encode_at_most_one(x, sink, pool) + encode_at_least_one(x, sink)

def encode_permutation(rows: List[List[int]], sink: ClauseSink, pool: VarAllocator) -> int:
    """
    Makes a square matrix of variables a permutation matrix:
    exactly one true per row, then exactly one true per column.
    """
    n = len(rows)
    count = 0
    for row in rows:
        count += encode_exactly_one(row, sink, pool)
    for j in range(n):
        count += encode_exactly_one([row[j] for row in rows], sink, pool)
    return count
