"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by every
formatting error.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Argument errors (value has no rendering kind)
        2000-2999: Conversion errors (verb not defined for the value's kind)
        3000-3999: Scanner errors (cursor misuse; format strings never fail)
    """

    # Argument errors (1000-1999)
    UNSUPPORTED_KIND = 1001
    ARGUMENT_MISSING = 1002

    # Conversion errors (2000-2999)
    UNSUPPORTED_VERB = 2001

    # Scanner errors (3000-3999)
    UNEXPECTED_EOF = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        argument_index: Zero-based position of the offending argument
        directive: Directive token being rendered (e.g. "%x")
        expected_type: What the directive accepts
        received_type: Python type name of the argument received
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    argument_index: int | None = None
    directive: str | None = None
    expected_type: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[UNSUPPORTED_VERB]: Directive '%x' cannot render float values
              = argument: 0
              = directive: %x
              = expected: one of %E %F %G %e %f %g %s %v
              = received: float
              = help: Use one of %E %F %G %e %f %g %s %v for float values

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
