import io
import pytest
from pysat.formula import CNF
from pysat.solvers import Solver

from satsort.cnf.sinks import DimacsSink
from satsort.cnf.cnf_stats import compute_cnf_stats
from satsort.core.errors import EncodingInvariantError
from satsort.sorter import write_dimacs

def dimacs_text(lines):
    fp = io.StringIO()
    report = write_dimacs(lines, fp)
    return fp.getvalue(), report

def test_header_counts_match_emitted_formula():
    text, report = dimacs_text([b"b", b"a"])
    rows = text.splitlines()
    assert rows[0].startswith("p cnf ")
    _, _, num_vars, num_clauses = rows[0].split()

    clauses = [list(map(int, row.split())) for row in rows[1:]]
    assert all(c[-1] == 0 and 0 not in c[:-1] for c in clauses)
    distinct = {abs(lit) for c in clauses for lit in c[:-1]}

    assert int(num_clauses) == len(clauses) == report.num_clauses
    assert int(num_vars) == len(distinct) == report.num_vars
    assert distinct == set(range(1, int(num_vars) + 1))

def test_artifact_is_reproducible():
    first, _ = dimacs_text([b"pear", b"fig", b"apple"])
    second, _ = dimacs_text([b"pear", b"fig", b"apple"])
    assert first == second

def test_artifact_parses_and_is_satisfiable():
    text, report = dimacs_text([b"banana", b"apple", b"cherry"])
    formula = CNF(from_string=text)
    assert formula.nv == report.num_vars
    assert len(formula.clauses) == report.num_clauses
    with Solver(name="minisat22", bootstrap_with=formula.clauses) as solver:
        assert solver.solve()

def test_empty_input_artifact():
    text, report = dimacs_text([])
    assert text.splitlines() == ["p cnf 0 0"]
    assert report.num_clauses == 0

def test_sink_literal_protocol():
    sink = DimacsSink()
    for lit in [1, -2, 0, 3, 0]:
        sink.add(lit)
    assert sink.formula.clauses == [[1, -2], [3]]
    assert sink.num_clauses == 2
    assert sink.max_var == 3

def test_sink_rejects_bad_clauses():
    sink = DimacsSink()
    with pytest.raises(ValueError):
        sink.add(0)
    with pytest.raises(ValueError):
        sink.add_clause([1, 0, 2])

def test_sink_rejects_unterminated_clause():
    sink = DimacsSink()
    sink.add(1)
    with pytest.raises(ValueError):
        sink.finalize(1)

def test_sink_rejects_undercounted_header():
    sink = DimacsSink()
    sink.add_clause([1, 5])
    with pytest.raises(EncodingInvariantError):
        sink.finalize(4)

def test_cnf_stats():
    sink = DimacsSink()
    sink.add_clause([1])
    sink.add_clause([-1, 2])
    sink.add_clause([-1, -2, 3])
    stats = compute_cnf_stats(sink.finalize(3))
    assert stats["n_vars"] == 3
    assert stats["n_clauses"] == 3
    assert stats["n_literals"] == 6
    assert stats["clause_len"] == {"min": 1, "mean": 2.0, "max": 3}
    assert stats["polarity_ratio"] == pytest.approx(3 / 6)
    assert stats["clause_size_histogram"] == {1: 1, 2: 1, 3: 1}

def test_cnf_stats_empty():
    stats = compute_cnf_stats(CNF())
    assert stats["n_clauses"] == 0
    assert stats["clause_size_histogram"] == {}
