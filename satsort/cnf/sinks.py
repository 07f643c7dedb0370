import abc
from typing import Iterable, List, Optional, TextIO

from pysat.formula import CNF
from pysat.solvers import Solver, SolverNames

from satsort.core.errors import ConfigError, EncodingInvariantError
from satsort.core.logging import get_logger

logger = get_logger("satsort.cnf")

class ClauseSink(abc.ABC):
    """
    Destination of generated clauses.
    Literals are fed one at a time; a 0 literal closes the current clause.
    """
    def __init__(self):
        self._clause: List[int] = []
        self.num_clauses = 0
        self.max_var = 0

    def add(self, lit: int) -> None:
        if lit:
            self._clause.append(lit)
            if abs(lit) > self.max_var:
                self.max_var = abs(lit)
            return
        if not self._clause:
            raise ValueError(f"Empty clause at index {self.num_clauses}")
        clause, self._clause = self._clause, []
        self.num_clauses += 1
        self._emit(clause)

    def add_clause(self, clause: Iterable[int]) -> None:
        for lit in clause:
            if lit == 0:
                raise ValueError(f"Zero literal in clause {self.num_clauses}")
            self.add(lit)
        self.add(0)

    @abc.abstractmethod
    def _emit(self, clause: List[int]) -> None:
        pass

    @abc.abstractmethod
    def finalize(self, num_vars: int):
        """Called once after the last clause."""
        pass

    def _check_closed(self) -> None:
        if self._clause:
            raise ValueError(f"Unterminated clause {self._clause}")


class DimacsSink(ClauseSink):
    """
    Collects clauses into a PySAT CNF and writes them as DIMACS on finalize.
    The header is only known once generation is over, so nothing is written
    before finalize.
    """
    def __init__(self, fp: Optional[TextIO] = None):
        super().__init__()
        self.fp = fp
        self.formula = CNF()

    def _emit(self, clause: List[int]) -> None:
        self.formula.append(clause)

    def finalize(self, num_vars: int) -> CNF:
        self._check_closed()
        if num_vars < self.max_var:
            raise EncodingInvariantError(
                f"header declares {num_vars} variables but literal {self.max_var} was emitted")
        self.formula.nv = num_vars
        if self.fp is not None:
            self.formula.to_fp(self.fp)
            self.fp.flush()
        logger.debug(f"Wrote DIMACS with {num_vars} variables and {self.num_clauses} clauses")
        return self.formula


class SolverSink(ClauseSink):
    """
    Pushes clauses straight into a PySAT solver.
    finalize() runs the solve and returns the model; use as a context
    manager so the solver is released even on errors.
    """
    def __init__(self, solver_name: str = "cadical153"):
        super().__init__()
        if solver_name not in solver_aliases():
            raise ConfigError(f"Unknown solver '{solver_name}'")
        self.solver_name = solver_name
        self.solver = Solver(name=solver_name)

    def _emit(self, clause: List[int]) -> None:
        self.solver.add_clause(clause)

    def finalize(self, num_vars: int) -> List[int]:
        self._check_closed()
        logger.debug(f"Solving {self.num_clauses} clauses over {num_vars} variables with {self.solver_name}")
        if not self.solver.solve():
            raise EncodingInvariantError(
                f"solver '{self.solver_name}' reports the sorting formula unsatisfiable")
        model = self.solver.get_model()
        if model is None:
            raise EncodingInvariantError(f"solver '{self.solver_name}' returned no model")
        return model

    def close(self) -> None:
        if self.solver is not None:
            self.solver.delete()
            self.solver = None

    def __enter__(self) -> 'SolverSink':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def solver_aliases() -> List[str]:
    """All solver names accepted by pysat.solvers.Solver."""
    names = []
    for attr in vars(SolverNames).values():
        if isinstance(attr, (list, tuple)):
            names.extend(attr)
    return names
