"""
User Output Abstraction

Provides a unified interface for user-facing output, separating
user messages from debug logging. This allows:
- Consistent output formatting across the driver
- Easy redirection/suppression of user output (tests pass StringIO)
- Clear separation between user messages and log messages
"""

import logging
import sys
from typing import Any, Optional, TextIO


class UserOutput:
    """
    Unified handler for user-facing output.

    User messages (banner, results, errors) go to stdout/stderr, while debug
    information goes to the logger.

    Usage:
        output = UserOutput()
        output.info("Computing...")
        output.result("Result", "1024")
        output.error("Cannot divide by zero")
    """

    def __init__(
        self,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        quiet: bool = False,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize output handler.

        Args:
            stdout: Output stream for normal messages (default: sys.stdout)
            stderr: Output stream for errors (default: sys.stderr)
            quiet: If True, suppress informational output; results are
                printed bare and errors are always shown
            logger: Optional logger for debug messages
        """
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.quiet = quiet
        self.logger = logger or logging.getLogger(__name__)

    def info(self, message: str, log: bool = False) -> None:
        """
        Print informational message to user.

        Args:
            message: Message to display
            log: If True, also log to info logger
        """
        if not self.quiet:
            print(message, file=self.stdout)
        if log:
            self.logger.info(message)

    def error(self, message: str, log: bool = True) -> None:
        """
        Print error message to user (always shown, even in quiet mode).

        Args:
            message: Error message to display
            log: If True, also log to error logger
        """
        print(f"Error: {message}", file=self.stderr)
        if log:
            self.logger.error(message)

    def result(self, label: str, value: Any) -> None:
        """
        Print a computed value. Always shown; quiet mode drops the label.

        Args:
            label: Label shown before the value (e.g. "Result")
            value: Value to print via str()
        """
        if self.quiet:
            print(value, file=self.stdout)
        else:
            print(f"{label}: {value}", file=self.stdout)

    def prompt(self, message: str) -> str:
        """
        Ask the user for one line of input.

        End of input yields an empty string, which the parser then rejects.
        """
        try:
            return input(message)
        except EOFError:
            return ""

    def blank(self) -> None:
        """Print a blank line."""
        if not self.quiet:
            print(file=self.stdout)
