#!/usr/bin/env python3
"""
Argument parsing for the big integer calculator.
"""
import argparse


def parse_positive_int(value: str) -> int:
    """
    Parse a strictly positive integer from a command-line string.

    Examples:
        "15" -> 15
        "1" -> 1

    Args:
        value: String representation of number

    Returns:
        Integer value

    Raises:
        argparse.ArgumentTypeError: If value is not an integer or is <= 0
    """
    try:
        result = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid integer: {value}") from e

    if result <= 0:
        raise argparse.ArgumentTypeError(f"Value must be positive: {value}")
    return result


def create_calc_parser() -> argparse.ArgumentParser:
    """Create argument parser for bigint_calc.py."""
    parser = argparse.ArgumentParser(
        description='Arbitrary-precision integer calculator. '
                    'Operands and operator not given as options are prompted for.'
    )

    # Configuration
    parser.add_argument('--config', default='bigint.yaml', help='Config file path')

    # Operands stay strings; the calculator reports parse errors, not argparse
    parser.add_argument('-a', '--first', help='First operand (decimal integer)')
    parser.add_argument('-b', '--second', help='Second operand (decimal integer)')
    parser.add_argument('-o', '--operation',
                        help="Operation: one of '+', '-', '*', '/', '%%', '^'")

    parser.add_argument('--sqrt', action='store_true',
                        help='Compute the integer square root of the first operand instead')
    parser.add_argument('--sqrt-iterations', type=parse_positive_int,
                        help="Newton iterations for --sqrt (overrides config, default: 15)")

    # Output
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Print only the result (no banner or labels)')
    parser.add_argument('--no-banner', action='store_true', help='Do not print the startup banner')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')

    return parser
