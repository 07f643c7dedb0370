from dataclasses import dataclass, field
from typing import List, Optional

from satsort.encode.report import EncodingReport

@dataclass
class SortResult:
    """
    Outcome of a live sorting run.
    """
    lines: List[bytes]

    # Original index of the line at each sorted position
    positions: List[int] = field(default_factory=list)

    report: Optional[EncodingReport] = None

    # Perf
    time_taken: float = 0.0
