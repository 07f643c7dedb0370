import numpy as np
from typing import Any, Dict

from pysat.formula import CNF

def compute_cnf_stats(formula: CNF) -> Dict[str, Any]:
    """
    Computes deterministic size statistics of a CNF formula.
    """
    n_vars = formula.nv
    n_clauses = len(formula.clauses)

    if n_clauses == 0:
        return {
            "n_vars": n_vars,
            "n_clauses": 0,
            "n_literals": 0,
            "clause_len": {"min": 0, "mean": 0.0, "max": 0},
            "polarity_ratio": 0.5,
            "clause_size_histogram": {}
        }

    clause_lens = np.array([len(c) for c in formula.clauses])
    total_lits = int(clause_lens.sum())
    pos_lits = sum(1 for clause in formula.clauses for lit in clause if lit > 0)

    sizes, counts = np.unique(clause_lens, return_counts=True)

    return {
        "n_vars": n_vars,
        "n_clauses": n_clauses,
        "n_literals": total_lits,
        "clause_len": {
            "min": int(clause_lens.min()),
            "mean": float(clause_lens.mean()),
            "max": int(clause_lens.max())
        },
        # Fraction of positive literals
        "polarity_ratio": pos_lits / total_lits,
        "clause_size_histogram": {int(s): int(c) for s, c in zip(sizes, counts)}
    }
