from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from confprobe.io_utils.config_manager import DEFAULT_CONFIG_PATH, ENV_CONFIG_PATH
from confprobe.io_utils.logger import get_logger, reset_logger
from confprobe.probe.reporter import Reporter
from confprobe.probe.session import ProbeState, run

# codes de sortie en mode --strict
EXIT_CODES = {
    ProbeState.REPORTED: 0,
    ProbeState.READ_FAILED: 1,
    ProbeState.PARSE_FAILED: 2,
}

def _positive_float(raw: str) -> float:
    value = float(raw)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {raw}")
    return value

def _indent(raw: str) -> int:
    value = int(raw)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {raw}")
    return value

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="confprobe",
        description="Read one JSON config file, parse it and print the result.",
    )
    parser.add_argument(
        "path", nargs="?", default=None,
        help=f"Config file (default: ${ENV_CONFIG_PATH} or {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument("--timeout", type=_positive_float, default=None,
                        help="Give up reading after this many seconds")
    parser.add_argument("--indent", type=_indent, default=2,
                        help="Indentation of the printed JSON (default: 2)")
    parser.add_argument("--strict", action="store_true",
                        help="Exit 1 on read failure, 2 on parse failure (default: always 0)")
    parser.add_argument("--log-level", default=None,
                        choices=["DEBUG", "INFO", "WARN", "ERROR"],
                        help="Diagnostic log level (default: $CONFPROBE_LOG_LEVEL or WARN)")
    parser.add_argument("--log-file", default=None,
                        help="Append diagnostic logs to this file (default: $CONFPROBE_LOG_FILE)")
    parser.add_argument("--quiet", action="store_true",
                        help="Do not echo diagnostic logs to stderr")
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # logger reconfiguré à chaque appel
    reset_logger()
    get_logger(args.log_file, args.log_level, echo=not args.quiet)

    result = run(args.path, Reporter(indent=args.indent), timeout=args.timeout)
    if not args.strict:
        return 0
    return EXIT_CODES[result.state]

if __name__ == "__main__":
    sys.exit(main())
