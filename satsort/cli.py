import argparse
import json
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from satsort.config import SortConfig
from satsort.core.errors import ConfigError, SatSortError
from satsort.core.logging import set_level
from satsort.ingest import load_lines
from satsort.sorter import encode_lines, sort_lines, write_dimacs

def build_config(args) -> SortConfig:
    config = SortConfig.from_env_or_file()
    updates = {}
    if args.solver:
        updates["solver_name"] = args.solver
    if args.max_lines is not None:
        updates["max_lines"] = args.max_lines
    if args.max_line_bytes is not None:
        updates["max_line_bytes"] = args.max_line_bytes
    if args.no_verify:
        updates["verify"] = False
    try:
        return SortConfig.model_validate({**config.model_dump(), **updates})
    except ValidationError as e:
        raise ConfigError(f"Invalid option: {e}")

def print_stats(lines: List[bytes]):
    from satsort.cnf.cnf_stats import compute_cnf_stats
    _, formula, report = encode_lines(lines)
    stats = compute_cnf_stats(formula)
    stats["clauses_by_family"] = report.clauses_by_family
    stats["num_commanders"] = report.num_commanders
    print(json.dumps(stats, indent=2), file=sys.stderr)

def handle_sort(args, config: SortConfig, lines: List[bytes]):
    result = sort_lines(lines, config)
    out = sys.stdout.buffer
    for line in result.lines:
        out.write(line + b"\n")
    out.flush()

def handle_dimacs(args, config: SortConfig, lines: List[bytes]):
    write_dimacs(lines, sys.stdout, config)

def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        prog="satsort",
        description="Sort lines by solving a SAT encoding of the sorted permutation.")
    parser.add_argument("input", nargs="?", help="Input file (default: standard input).")
    parser.add_argument("-d", "--dimacs", action="store_true", help="Print the DIMACS formula instead of sorting.")
    parser.add_argument("--solver", type=str, help="PySAT solver name (default: cadical153).")
    parser.add_argument("--max-lines", type=int, help="Maximum number of input lines.")
    parser.add_argument("--max-line-bytes", type=int, help="Maximum length of an input line in bytes.")
    parser.add_argument("--no-verify", action="store_true", help="Skip checking the decoded result.")
    parser.add_argument("--stats", action="store_true", help="Print formula statistics to stderr.")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log progress (repeat for debug output).")

    args = parser.parse_args(argv)
    if args.verbose:
        set_level(logging.DEBUG if args.verbose > 1 else logging.INFO)

    try:
        config = build_config(args)
        lines = load_lines(args.input,
                           max_lines=config.max_lines,
                           max_line_bytes=config.max_line_bytes)
        if args.stats:
            print_stats(lines)
        if args.dimacs:
            handle_dimacs(args, config, lines)
        else:
            handle_sort(args, config, lines)
    except SatSortError as e:
        print(f"satsort: error: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
