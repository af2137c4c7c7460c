"""fmtless - minimal printf-style text formatting.

Substitutes %-directives in a format string with type-appropriate renderings
of positional arguments. Supports the common subset of directives only: no
width, precision, padding or indexed arguments.

Public API:
    sprintf - Format arguments according to a format string
    sprint - Arguments in default format, no separator
    sprintln - Arguments in default format, space-separated, newline-terminated
    errorf - FormattedError carrying a formatted message
    fprintf, fprint, fprintln - Write formatted text to an explicit sink
    Codepoint - Argument wrapper for a single Unicode scalar value (%U)
    Float32 - Argument wrapper for single-precision floats
    introspect_format - Describe a format string's directives

Exceptions:
    FormatError - Base exception class
    UnsupportedKindError - Argument missing or of no renderable kind
    UnsupportedVerbForKindError - Directive not defined for the argument's kind

Submodules:
    fmtless.syntax - Directive scanner and cursor
    fmtless.runtime - Classification, renderer, float and quoting helpers
    fmtless.diagnostics - Error types, codes and diagnostic formatting
"""

from .diagnostics import (
    FormatError,
    FormattedError,
    UnsupportedKindError,
    UnsupportedVerbForKindError,
)
from .enums import ValueKind
from .introspection import introspect_format
from .printing import (
    TextSink,
    errorf,
    fprint,
    fprintf,
    fprintln,
    sprint,
    sprintf,
    sprintln,
)
from .runtime import Codepoint, Float32, FormatValue

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("fmtless")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Codepoint",
    "Float32",
    "FormatError",
    "FormatValue",
    "FormattedError",
    "TextSink",
    "UnsupportedKindError",
    "UnsupportedVerbForKindError",
    "ValueKind",
    "__version__",
    "errorf",
    "fprint",
    "fprintf",
    "fprintln",
    "introspect_format",
    "sprint",
    "sprintf",
    "sprintln",
]
