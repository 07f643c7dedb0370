import itertools
import pytest
from pysat.solvers import Solver

from satsort.cnf.sinks import DimacsSink
from satsort.encode.cardinality import (
    COMMANDER, encode_at_most_one, encode_exactly_one, encode_permutation
)
from satsort.vars import VarAllocator

def build_amo(n: int):
    pool = VarAllocator()
    x = pool.table("x", 1, n).row(0)
    sink = DimacsSink()
    added = encode_at_most_one(x, sink, pool)
    return pool, x, sink, added

@pytest.mark.parametrize("n, expected", [(0, 0), (1, 0), (2, 1), (3, 3)])
def test_small_groups_are_pairwise(n, expected):
    pool, x, sink, added = build_amo(n)
    assert added == expected
    assert sink.num_clauses == expected
    assert pool.aux_count(COMMANDER) == 0
    assert all(len(c) == 2 for c in sink.formula.clauses)

@pytest.mark.parametrize("n", [4, 5, 8, 17, 100, 1000])
def test_clause_count_is_linear(n):
    pool, x, sink, added = build_amo(n)
    assert added == 3 * n - 6
    assert pool.aux_count(COMMANDER) == n - 3
    assert pool.max_id == n + (n - 3)

def test_window_clauses_for_four():
    pool, x, sink, _ = build_amo(4)
    c = 5
    assert sink.formula.clauses[:3] == [[-1, -2], [-1, c], [-2, c]]
    # c is queued behind the remaining literals
    assert sink.formula.clauses[3:] == [[-3, -4], [-3, -c], [-4, -c]]

@pytest.mark.parametrize("n", range(1, 9))
def test_at_most_one_equivalence(n):
    """The encoding admits exactly the assignments with at most one true literal."""
    pool, x, sink, _ = build_amo(n)
    with Solver(name="minisat22", bootstrap_with=sink.formula.clauses) as solver:
        for values in itertools.product([False, True], repeat=n):
            assumptions = [v if val else -v for v, val in zip(x, values)]
            expected = sum(values) <= 1
            assert solver.solve(assumptions=assumptions) == expected, values

@pytest.mark.parametrize("n", [1, 2, 5])
def test_exactly_one_equivalence(n):
    pool = VarAllocator()
    x = pool.table("x", 1, n).row(0)
    sink = DimacsSink()
    encode_exactly_one(x, sink, pool)
    assert sink.formula.clauses[-1] == x
    with Solver(name="minisat22", bootstrap_with=sink.formula.clauses) as solver:
        for values in itertools.product([False, True], repeat=n):
            assumptions = [v if val else -v for v, val in zip(x, values)]
            assert solver.solve(assumptions=assumptions) == (sum(values) == 1)

@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_permutation_models_are_permutations(n):
    pool = VarAllocator()
    m = pool.table("map", n, n)
    rows = [m.row(i) for i in range(n)]
    sink = DimacsSink()
    encode_permutation(rows, sink, pool)

    found = set()
    with Solver(name="minisat22", bootstrap_with=sink.formula.clauses) as solver:
        while solver.solve():
            model = set(l for l in solver.get_model() if l > 0)
            perm = tuple(j for i in range(n) for j in range(n) if m[i, j] in model)
            assert len(perm) == n
            found.add(perm)
            solver.add_clause([-m[i, j] for i, j in enumerate(perm)])

    assert found == set(itertools.permutations(range(n)))
