"""
Sort a Package from the Command Line
====================================

Usage:
    sort-package <width> <height> <length> <mass>
    sort-package 100 100 100 20 --json
    python -m sort_cli 50 50 50 10

Exit codes:
    0   Success, or help requested
    1   Bad arguments, validation failure or bad configuration
"""

import argparse
import json
import logging
import sys

from sort_config import get_log_level
from sort_packages import classify, classify_with_details
from sort_validation import FIELDS, PackageValidationError

logger = logging.getLogger(__name__)

_DESCRIPTION = """\
Arguments:
  width   Package width in centimeters (cm)
  height  Package height in centimeters (cm)
  length  Package length in centimeters (cm)
  mass    Package mass in kilograms (kg)

Example:
  sort-package 100 100 100 20

Output:
  Returns one of: STANDARD, SPECIAL, or REJECTED
"""


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit code 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"Error: {message}\n")


def _build_parser():
    parser = _Parser(
        prog="sort-package",
        usage="%(prog)s <width> <height> <length> <mass> [--json]",
        description=_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "values",
        nargs="*",
        metavar="value",
        help="width, height, length (cm) and mass (kg)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full result breakdown as JSON",
    )
    return parser


def _parse_values(raw_values):
    """Convert the raw positional strings to floats.

    Returns:
        A list of four floats, or None after reporting the first
        argument that is not a number.
    """
    values = []
    for name, raw in zip(FIELDS, raw_values):
        try:
            values.append(float(raw))
        except ValueError:
            logger.warning("Unparseable %s argument: %r", name, raw)
            print(
                f'Error: Invalid {name} "{raw}" - must be a number',
                file=sys.stderr,
            )
            return None
    return values


def _is_number(token):
    try:
        float(token)
    except ValueError:
        return False
    return True


def _collect_values(parser, argv):
    """Parse argv, keeping numbers such as -1e5 or -inf as positionals.

    argparse only recognizes plain negative numbers, so other numeric
    tokens that start with "-" come back as unknown options.
    """
    args, extras = parser.parse_known_args(argv)
    unknown = [token for token in extras if not _is_number(token)]
    if unknown:
        parser.error(f"unrecognized arguments: {' '.join(unknown)}")
    if extras:
        tokens = sys.argv[1:] if argv is None else argv
        args.values = [
            token for token in tokens
            if token in args.values or token in extras
        ]
    return args


def main(argv=None):
    parser = _build_parser()
    args = _collect_values(parser, argv)

    if not args.values:
        parser.print_help()
        return 0

    try:
        level = get_log_level()
    except ValueError as exc:
        print(f"Configuration Error: {exc}", file=sys.stderr)
        return 1
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if len(args.values) != len(FIELDS):
        print(
            "Error: Expected 4 arguments (width, height, length, mass)",
            file=sys.stderr,
        )
        print(
            f"Received: {len(args.values)} argument(s)\n",
            file=sys.stderr,
        )
        parser.print_help(sys.stderr)
        return 1

    values = _parse_values(args.values)
    if values is None:
        return 1

    try:
        if args.json:
            print(json.dumps(classify_with_details(*values)))
        else:
            print(classify(*values).value)
    except PackageValidationError as exc:
        logger.info("Rejected input: %s (%s)", exc.field, exc.kind)
        print(f"Validation Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
