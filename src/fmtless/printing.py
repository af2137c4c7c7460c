"""Public formatting entry points.

    sprintf   - format string + arguments -> text (the core entry point)
    sprint    - arguments in default format, concatenated with no separator
    sprintln  - arguments in default format, space-separated, newline-terminated
    errorf    - FormattedError carrying sprintf() output as its message
    fprintf, fprint, fprintln - the same, written to an explicit text sink

Everything here is a thin call-through to scan() and render(). There is no
implicit destination: print-style functions take the sink as an argument.

Python 3.13+. Zero external dependencies.
"""

import logging
from typing import Protocol

from fmtless.constants import (
    DEFAULT_VERB,
    JOIN_SEPARATOR,
    LINE_SEPARATOR,
    LINE_TERMINATOR,
)
from fmtless.diagnostics import FormattedError
from fmtless.runtime import classify, convert, render
from fmtless.syntax import Directive, scan

__all__ = [
    "TextSink",
    "errorf",
    "fprint",
    "fprintf",
    "fprintln",
    "sprint",
    "sprintf",
    "sprintln",
]

logger = logging.getLogger(__name__)

_DEFAULT_DIRECTIVE = Directive(verb=DEFAULT_VERB)


class TextSink(Protocol):
    """Append-only text destination (io.StringIO, sys.stdout, open files)."""

    def write(self, text: str, /) -> object:
        ...  # pragma: no cover  # Protocol stub - not executable


def sprintf(format_string: str, *args: object) -> str:
    """Format arguments according to a format string.

    Args:
        format_string: Text with %-directives (%s %v %q %d %b %o %x %X %U
            %f %F %g %G %e %E, optionally with a + or # modifier)
        *args: One value per directive, in order

    Returns:
        The formatted text

    Raises:
        UnsupportedKindError: If an argument is missing or cannot be formatted
        UnsupportedVerbForKindError: If a directive does not apply to its argument

    Example:
        >>> sprintf("There are %d ways to round pi to %f", 3, 3.1)
        'There are 3 ways to round pi to 3.1'
    """
    return render(scan(format_string), args)


def _join(args: tuple[object, ...], separator: str) -> str:
    return separator.join(
        convert(classify(value, index), _DEFAULT_DIRECTIVE, index)
        for index, value in enumerate(args)
    )


def sprint(*args: object) -> str:
    """Render each argument as with %s and concatenate with no separator.

    Example:
        >>> sprint("a", 1, 2.5)
        'a12.5'
    """
    return _join(args, JOIN_SEPARATOR)


def sprintln(*args: object) -> str:
    """Render each argument as with %s, space-separated, plus a newline.

    Example:
        >>> sprintln("a", 1, 2.5)
        'a 1 2.5\\n'
    """
    return _join(args, LINE_SEPARATOR) + LINE_TERMINATOR


def errorf(format_string: str, *args: object) -> FormattedError:
    """Return a FormattedError whose message is sprintf(format_string, *args).

    The error is returned, not raised.

    Example:
        >>> err = errorf("error %d", 1)
        >>> str(err)
        'error 1'
    """
    return FormattedError(sprintf(format_string, *args))


def _emit(sink: TextSink, text: str) -> int:
    sink.write(text)
    logger.debug("Wrote %d character(s) to %s", len(text), type(sink).__name__)
    return len(text)


def fprintf(sink: TextSink, format_string: str, *args: object) -> int:
    """Write sprintf(format_string, *args) to sink.

    Nothing is written if formatting fails.

    Returns:
        Number of characters written
    """
    return _emit(sink, sprintf(format_string, *args))


def fprint(sink: TextSink, *args: object) -> int:
    """Write sprint(*args) to sink and return the number of characters written."""
    return _emit(sink, sprint(*args))


def fprintln(sink: TextSink, *args: object) -> int:
    """Write sprintln(*args) to sink and return the number of characters written."""
    return _emit(sink, sprintln(*args))
