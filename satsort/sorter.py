import time
from typing import Optional, Sequence, TextIO

from satsort.cnf.sinks import DimacsSink, SolverSink
from satsort.config import SortConfig
from satsort.core.errors import ResourceLimitError
from satsort.core.logging import get_logger
from satsort.encode.encoder import SortEncoder
from satsort.encode.report import EncodingReport
from satsort.solution.decoder import decode_lines, model_lookup
from satsort.solution.types import SortResult
from satsort.solution.verifier import verify_sorted

logger = get_logger("satsort.sorter")

def check_limits(lines: Sequence[bytes], config: SortConfig) -> None:
    """Enforces the line count and line length ceilings."""
    if len(lines) > config.max_lines:
        raise ResourceLimitError(
            f"{len(lines)} lines exceed the limit of {config.max_lines} lines")
    for i, line in enumerate(lines):
        if len(line) > config.max_line_bytes:
            raise ResourceLimitError(
                f"line {i + 1} of {len(line)} bytes exceeds the limit of {config.max_line_bytes} bytes")

def sort_lines(lines: Sequence[bytes], config: Optional[SortConfig] = None) -> SortResult:
    """
    Sorts lines by solving their sorting formula with a live solver.
    """
    config = config or SortConfig()
    check_limits(lines, config)
    start_time = time.time()

    if not lines:
        return SortResult(lines=[], report=EncodingReport(num_lines=0, width=0))

    try:
        encoder = SortEncoder(lines)
        with SolverSink(config.solver_name) as sink:
            report = encoder.encode(sink)
            model = sink.finalize(report.num_vars)
    except MemoryError:
        raise ResourceLimitError(f"out of memory while encoding {len(lines)} lines")

    value = model_lookup(model)
    result = SortResult(
        lines=decode_lines(value, encoder.output),
        positions=encoder.positions(value),
        report=report,
        time_taken=time.time() - start_time
    )
    logger.info(f"Sorted {len(lines)} lines in {result.time_taken:.3f}s")

    if config.verify:
        verify_sorted(encoder.lines, result.lines)
    return result

def write_dimacs(lines: Sequence[bytes], fp: TextIO,
                 config: Optional[SortConfig] = None) -> EncodingReport:
    """
    Writes the sorting formula of lines as DIMACS to fp.
    """
    config = config or SortConfig()
    check_limits(lines, config)

    try:
        encoder = SortEncoder(lines)
        sink = DimacsSink(fp)
        report = encoder.encode(sink)
        sink.finalize(report.num_vars)
    except MemoryError:
        raise ResourceLimitError(f"out of memory while encoding {len(lines)} lines")
    return report

def encode_lines(lines: Sequence[bytes]):
    """Builds the sorting formula in memory; returns (encoder, formula, report)."""
    encoder = SortEncoder(lines)
    sink = DimacsSink()
    report = encoder.encode(sink)
    return encoder, sink.finalize(report.num_vars), report
