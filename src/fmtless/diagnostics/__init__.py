"""Diagnostic system for fmtless errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    FormatError,
    FormattedError,
    UnsupportedKindError,
    UnsupportedVerbForKindError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "FormatError",
    "FormattedError",
    "OutputFormat",
    "UnsupportedKindError",
    "UnsupportedVerbForKindError",
]
