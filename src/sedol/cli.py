"""Command-line commands for SEDOL cleaning, check digits and validation."""

import argparse
import logging
from typing import Optional

from . import config
from .errors import SedolError
from .metrics import ValidationMetrics
from .normalizers import calc_check_digit, clean, parse_sedol, validate

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose/debug logging",
    )


def clean_main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sedol clean",
        description="Strip separators, whitespace and invalid characters from SEDOLs",
    )
    parser.add_argument("values", nargs="+", metavar="VALUE", help="Raw SEDOL string")
    _add_common_arguments(parser)
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    for value in args.values:
        print(clean(value))
    return 0


def check_digit_main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sedol check-digit",
        description="Append the check digit to 6-character SEDOL bodies",
    )
    parser.add_argument("bodies", nargs="+", metavar="BODY", help="6-character SEDOL body, e.g. BD9MZZ")
    _add_common_arguments(parser)
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    status = 0
    for body in args.bodies:
        try:
            print(f"{body}{calc_check_digit(body)}")
        except SedolError as e:
            print(f"{body}: {e}")
            status = 1
    return status


def validate_main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sedol validate",
        description="Validate SEDOLs (length, characters and check digit)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s BD9MZZ7                      # Strict validation
  %(prog)s --clean " BD9-MZ-Z7?"        # Clean before validating
  %(prog)s --old-format 0D9MZZ6         # Reject mixed SEDOLs starting with a digit
  %(prog)s --stats B15KXQ8 B15KXQ7      # Log a metrics summary
        """,
    )
    parser.add_argument("values", nargs="+", metavar="VALUE", help="SEDOL to validate")
    parser.add_argument(
        "--clean",
        action="store_true",
        help="Clean each value before validating",
    )
    parser.add_argument(
        "--old-format",
        action="store_true",
        help="Require all digits when the first character is a digit",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Log validation metrics after processing",
    )
    _add_common_arguments(parser)
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    metrics = ValidationMetrics()

    status = 0
    for value in args.values:
        candidate = clean(value) if args.clean else value
        try:
            validate(candidate, enforce_old_format=args.old_format)
        except SedolError as e:
            print(f"{value}: {e}")
            metrics.record(value, e)
            status = 1
        else:
            print(f"{value}: valid")
            metrics.record(value)

    if args.stats:
        metrics.print_report()
    return status


def normalize_main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sedol normalize",
        description="Clean and validate raw SEDOLs, printing the canonical form",
    )
    parser.add_argument("values", nargs="+", metavar="VALUE", help="Raw SEDOL string")
    parser.add_argument(
        "--skip-checksum",
        action="store_true",
        help="Skip SEDOL checksum validation",
    )
    parser.add_argument(
        "--old-format",
        action="store_true",
        help="Require all digits when the first character is a digit",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Log validation metrics after processing",
    )
    _add_common_arguments(parser)
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    saved_flags = (config.SKIP_CHECKSUM_VALIDATION, config.ENFORCE_OLD_FORMAT)

    # Set global validation flags for this run only
    if args.skip_checksum:
        config.SKIP_CHECKSUM_VALIDATION = True
        logger.info("SEDOL checksum validation disabled")
    if args.old_format:
        config.ENFORCE_OLD_FORMAT = True

    metrics = ValidationMetrics()
    status = 0
    try:
        for value in args.values:
            try:
                sedol = parse_sedol(value)
            except SedolError as e:
                print(f"{value}: {e}")
                metrics.record(value, e)
                status = 1
            else:
                print(sedol)
                metrics.record(value)
    finally:
        config.SKIP_CHECKSUM_VALIDATION, config.ENFORCE_OLD_FORMAT = saved_flags

    if args.stats:
        metrics.print_report()
    return status
