from satsort.cnf.sinks import ClauseSink, DimacsSink, SolverSink, solver_aliases
from satsort.cnf.cnf_stats import compute_cnf_stats

__all__ = [
    "ClauseSink", "DimacsSink", "SolverSink", "solver_aliases",
    "compute_cnf_stats"
]
