from __future__ import annotations
import argparse
import logging
import sys

from ..config import SimConfig
from ..runtime.simulator import SimContext
from ..trace.interpreter import replay
from ..trace.parser import TraceParseError
from ..utils.logging import get_logger
from ..utils.reporting import generate_report, summary_line

logger = get_logger("cachesim")

EXAMPLES = """\
Examples:
  $ cachesim    -S 16  -K 1 -B 16 -p LRU -t traces/yi2.trace
  $ cachesim -v -S 256 -K 2 -B 16 -p LRU -t traces/yi2.trace
"""


def _print_record(record, results):
    print(f"{record} {' '.join(r.value for r in results)}")


def cmd_run(args) -> int:
    """Validates the configuration, replays the trace and prints the counters."""
    try:
        config = SimConfig.from_args(args)
        config.validate()
    except (ValueError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    logging.getLogger("cachesim").setLevel(logging.INFO if config.verbose else logging.WARNING)
    logger.info("Configuration: S=%d K=%d B=%d policy=%s trace=%s",
                config.num_sets, config.lines_per_set, config.line_bytes,
                config.policy, config.trace_file)

    try:
        trace_fp = open(config.trace_file, "r", encoding="utf-8")
    except OSError as e:
        print(f"ERROR: {config.trace_file}: {e.strerror}", file=sys.stderr)
        return 1

    ctx = SimContext(config.geometry(), config.replacement_policy())
    with trace_fp:
        try:
            stats = replay(ctx, trace_fp, on_record=_print_record if config.verbose else None)
        except TraceParseError as e:
            print(f"ERROR: {config.trace_file}: {e}", file=sys.stderr)
            return 1
        except UnicodeDecodeError as e:
            print(f"ERROR: {config.trace_file}: not a text trace: {e}", file=sys.stderr)
            return 1

    if config.report_dir:
        generate_report(stats, config)

    print(summary_line(stats))
    return 0


def build_parser():
    p = argparse.ArgumentParser(
        prog="cachesim",
        description="Set-associative cache simulator for memory traces",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    # Defaults are None so values from a YAML config file are not overridden
    p.add_argument("-v", dest="verbose", action="store_const", const=True, default=None,
                   help="Optional verbose flag.")
    p.add_argument("-S", dest="num_sets", type=int, default=None, metavar="<num>",
                   help="Number of sets.           (must be > 0)")
    p.add_argument("-K", dest="lines_per_set", type=int, default=None, metavar="<num>",
                   help="Number of lines per set.  (must be > 0)")
    p.add_argument("-B", dest="line_bytes", type=int, default=None, metavar="<num>",
                   help="Number of bytes per line. (must be > 0)")
    p.add_argument("-p", dest="policy", type=str, default=None, metavar="<policy>",
                   help="Eviction policy. (one of 'FIFO', 'LRU')")
    p.add_argument("-t", dest="trace_file", type=str, default=None, metavar="<file>",
                   help="Trace file.")
    p.add_argument("-c", "--config", type=str, default=None,
                   help="Path to YAML config file to override defaults")
    p.add_argument("--report", dest="report_dir", type=str, default=None,
                   help="Directory to save report.json and report.html")
    p.set_defaults(func=cmd_run)
    return p


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
