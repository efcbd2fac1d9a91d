#!/usr/bin/env python3
"""
Big Integer Calculator - interactive arithmetic on arbitrarily large integers

Reads two numbers and an operator (+, -, *, /, %, ^) and prints the result.
Values can be given as options; anything missing is prompted for.

Usage:
    python3 bigint_calc.py
    python3 bigint_calc.py -a 123456789012345678901234567890 -b 1 -o +
    python3 bigint_calc.py --sqrt -a 1000000 --sqrt-iterations 30
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from biginteger.arg_parser import create_calc_parser
from biginteger.calculator import Calculator
from biginteger.errors import BigIntegerError
from biginteger.typed_config import AppConfig, LoggingConfig, TypedConfigLoader
from biginteger.user_output import UserOutput

logger = logging.getLogger(__name__)

BANNER = (
    "This application supports arithmetic operations on arbitrarily large integer numbers.",
    "Though, do keep in mind that working with huge numbers is much more computationally "
    "expensive than when you are bounded by 64 bits.",
    "Also, the implementation of multiplication and division (and anything that relies "
    "on it, e. g. sqrt) is currently very slow.",
)

PROMPT_FIRST = "Enter the first number: "
PROMPT_SECOND = "Enter the second number: "
PROMPT_OPERATION = "Enter the operation (+, -, *, /, %, ^): "


def setup_logging(logging_config: LoggingConfig, verbose: bool = False) -> None:
    """Set up logging configuration."""
    log_level = logging.DEBUG if verbose else getattr(logging, logging_config.level, logging.INFO)

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logging_config.enabled:
        logging_config.ensure_log_dir_exists()
        handlers.append(logging.FileHandler(Path(logging_config.file)))

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def report_failure(output: UserOutput, error: BigIntegerError) -> int:
    """
    Show a failed calculation as one stderr line and return the exit status.

    The console log handler also writes to stderr, so the failure is only
    logged at debug level.
    """
    output.error(f"An exception occurred: {error}", log=False)
    logger.debug(f"Calculation failed: {error!r}")
    return 1


def load_config(args) -> AppConfig:
    """Load config from file and apply command-line overrides."""
    config = TypedConfigLoader().load_or_default(args.config)

    if args.sqrt_iterations is not None:
        config.calculator.sqrt_iterations = args.sqrt_iterations
    if args.quiet:
        config.calculator.quiet = True
    if args.no_banner or args.quiet:
        config.calculator.show_banner = False

    return config


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the calculator.

    Returns:
        0 on success, 1 if the computation failed (bad number, bad operator,
        division by zero, ...)
    """
    parser = create_calc_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except ValueError as e:
        print(f"Error: Invalid configuration in {args.config}: {e}", file=sys.stderr)
        return 1

    setup_logging(config.logging, verbose=args.verbose)
    output = UserOutput(quiet=config.calculator.quiet)

    if config.calculator.show_banner:
        for line in BANNER:
            output.info(line)
        output.blank()

    first = args.first if args.first is not None else output.prompt(PROMPT_FIRST)

    calculator = Calculator(sqrt_iterations=config.calculator.sqrt_iterations)

    if args.sqrt:
        try:
            result = calculator.sqrt(calculator.parse(first))
        except BigIntegerError as e:
            return report_failure(output, e)
        output.result("Result", result)
        return 0

    second = args.second if args.second is not None else output.prompt(PROMPT_SECOND)
    operation = args.operation if args.operation is not None else output.prompt(PROMPT_OPERATION)

    try:
        result = calculator.evaluate(first, second, operation)
    except BigIntegerError as e:
        return report_failure(output, e)

    logger.debug(f"Computed {len(result.digits)}-digit result")
    output.result("Result", result)
    return 0


def run() -> None:
    """Console-script wrapper around main()."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nCancelled by user.")
        sys.exit(130)


if __name__ == '__main__':
    run()
