# ============================================================================
# src/medication_safety/cli.py
# ============================================================================
"""
Command line entry point.

    medication-safety check Warfarina Aspirina --candidate Ibuprofeno
    medication-safety normalize "ASA (Bayer)"
"""

import argparse
from typing import List, Optional

from .interactions.detector import InteractionDetector
from .utils.logging import get_logger, setup_logging
from .utils.name_normalizer import normalize_medication_name

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="medication-safety",
        description="Medication safety checks"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (defaults to LOG_LEVEL setting)"
    )

    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit logs as JSON lines"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Check medications for interactions")
    check.add_argument("medications", nargs="+", help="Current medication names")
    check.add_argument("--candidate", type=str, default=None, help="Medication being considered")

    normalize = subparsers.add_parser("normalize", help="Print the normalized medication key")
    normalize.add_argument("name", help="Medication name")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(level=args.log_level, format_json=args.json_logs or None)

    if args.command == "normalize":
        print(normalize_medication_name(args.name))
        return 0

    warnings = InteractionDetector().detect(args.medications, args.candidate)
    for warning in warnings:
        print(warning)

    logger.debug(f"{len(warnings)} interaction warnings printed")
    return 0
