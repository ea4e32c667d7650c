"""
Command line entry point.

    quadc --points points.json                  # mode B
    quadc --roots roots.json --points pts.json  # mode A

Единственная граница, где ошибки ExactSolveError превращаются в
сообщение на stderr и код возврата.
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from quadc.config import LOG_LEVELS, RunConfig, resolve_log_level
from quadc.core.errors import ExactSolveError
from quadc.evidence import load_document
from quadc.logging_config import setup_logging
from quadc.solver.engine import Mode, SolveReport, solve_evidence

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def _build_arg_parser() -> argparse.ArgumentParser:
    arg_parser = argparse.ArgumentParser(
        prog="quadc",
        description=(
            "Recovers the constant coefficient c of y = a*x^2 + b*x + c "
            "exactly, from two roots and a point or from three points."
        ),
    )
    arg_parser.add_argument(
        "--points",
        help="Path to the JSON document with sample points",
    )
    arg_parser.add_argument(
        "--roots",
        help="Path to the JSON document with roots (enables roots + point mode)",
    )
    arg_parser.add_argument(
        "--use-k",
        dest="use_k",
        action="store_true",
        help="Only use the first k records, as given by keys.k",
    )
    arg_parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: $QUADC_LOG_LEVEL or WARNING)",
    )
    arg_parser.add_argument(
        "--log-file",
        default=None,
        help="Also write log records to this file",
    )
    return arg_parser


def parse_config(argv: Optional[List[str]] = None) -> RunConfig:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    if not args.points:
        parser.error("Provide --points file (and optionally --roots file)")

    try:
        return RunConfig(
            points_path=args.points,
            roots_path=args.roots,
            use_k=args.use_k,
            log_level=resolve_log_level(args.log_level),
            log_file=args.log_file,
        )
    except ValueError as e:
        parser.error(str(e))


def run(config: RunConfig) -> SolveReport:
    points_document = load_document(config.points_path)
    roots_document = load_document(config.roots_path) if config.roots_path else None
    return solve_evidence(points_document, roots_document, use_k=config.use_k)


def render_report(report: SolveReport, config: RunConfig) -> List[str]:
    lines = []
    if report.mode == Mode.ROOTS_AND_POINT:
        r1, r2 = report.roots
        lines.append(f"Roots from {config.roots_path}: r1={r1.r}, r2={r2.r}")
        lines.append(f"Point from {config.points_path}: x={report.point.x}, y={report.point.y}")
    else:
        lines.append(f"Used points (keys): {', '.join(report.used_labels)}")
    lines.append(f"c = {report.c}")
    return lines


def main(
    argv: Optional[List[str]] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    config = parse_config(argv)
    setup_logging(config.log_level_value, config.log_file)

    try:
        report = run(config)
    except ExactSolveError as e:
        logger.debug("Solve failed: %s", e.kind)
        print(f"error: {e}", file=stderr)
        return EXIT_FAILURE

    for line in render_report(report, config):
        print(line, file=stdout)
    return EXIT_OK
