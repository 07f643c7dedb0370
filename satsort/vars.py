from typing import Dict, List, Optional, Tuple

from satsort.config import MAX_VARIABLE
from satsort.core.errors import ResourceLimitError

class VarTable:
    """
    A rectangular block of consecutive variable IDs.
    Indices start at (row_base, col_base), so table[i, j] is valid for
    row_base <= i < row_base + rows and col_base <= j < col_base + cols.
    """
    def __init__(self, name: str, first: int, rows: int, cols: int,
                 row_base: int = 0, col_base: int = 0):
        self.name = name
        self.first = first
        self.rows = rows
        self.cols = cols
        self.row_base = row_base
        self.col_base = col_base

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, index: Tuple[int, int]) -> int:
        i, j = index
        r = i - self.row_base
        c = j - self.col_base
        if not (0 <= r < self.rows and 0 <= c < self.cols):
            raise IndexError(f"{self.name}[{i}][{j}] out of range")
        return self.first + r * self.cols + c

    def row(self, i: int) -> List[int]:
        return [self[i, j] for j in range(self.col_base, self.col_base + self.cols)]

    def column(self, j: int) -> List[int]:
        return [self[i, j] for i in range(self.row_base, self.row_base + self.rows)]

    def __contains__(self, var: int) -> bool:
        return self.first <= var < self.first + self.size

    def locate(self, var: int) -> Tuple[int, int]:
        """Inverse of indexing: the (i, j) position of a variable of this table."""
        if var not in self:
            raise KeyError(var)
        r, c = divmod(var - self.first, self.cols)
        return r + self.row_base, c + self.col_base

    def __repr__(self) -> str:
        return f"VarTable({self.name!r}, first={self.first}, rows={self.rows}, cols={self.cols})"


class VarAllocator:
    """
    Hands out SAT variables in strictly increasing order.
    Same call sequence gives the same numbering, which keeps DIMACS
    output reproducible.
    """
    def __init__(self, limit: int = MAX_VARIABLE):
        self._next_id: int = 1
        self._limit = limit
        self._tables: List[VarTable] = []
        self._aux_count: Dict[str, int] = {}

    @property
    def next_var_id(self) -> int:
        return self._next_id

    @property
    def max_id(self) -> int:
        return self._next_id - 1

    @property
    def tables(self) -> List[VarTable]:
        return list(self._tables)

    def _reserve(self, k: int) -> int:
        first = self._next_id
        if first + k - 1 > self._limit:
            raise ResourceLimitError(
                f"variable {first + k - 1} exceeds the maximum variable index {self._limit}")
        self._next_id += k
        return first

    def fresh(self, prefix: str = "aux") -> int:
        """
        Allocate a fresh auxiliary variable.
        """
        vid = self._reserve(1)
        self._aux_count[prefix] = self._aux_count.get(prefix, 0) + 1
        return vid

    def aux_count(self, prefix: str = "aux") -> int:
        return self._aux_count.get(prefix, 0)

    def table(self, name: str, rows: int, cols: int,
              row_base: int = 0, col_base: int = 0) -> VarTable:
        """
        Reserve a rows x cols block of variables as one table.
        Empty tables are allowed and reserve nothing.
        """
        rows = max(rows, 0)
        cols = max(cols, 0)
        first = self._reserve(rows * cols)
        table = VarTable(name, first, rows, cols, row_base, col_base)
        self._tables.append(table)
        return table

    def name_of(self, var: int) -> Optional[str]:
        """Human readable name of a table variable, None for auxiliaries."""
        for table in self._tables:
            if var in table:
                i, j = table.locate(var)
                return f"{table.name}[{i}][{j}]"
        return None
