"""fmtless exception hierarchy with structured diagnostics.

All formatting exceptions store Diagnostic objects for rich error information.
The scanner never raises; these errors come from the renderer and abort the
whole sprintf call.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class FormatError(Exception):
    """Base exception for all fmtless formatting errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize FormatError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class UnsupportedKindError(FormatError):
    """Argument value belongs to none of the renderable kinds.

    Also raised when a directive has no argument at its position: the missing
    argument is read as None, which has no kind.

    Attributes:
        argument_index: Zero-based position of the offending argument
        received_type: Python type name of the argument
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        argument_index: int,
        received_type: str,
    ) -> None:
        """Initialize UnsupportedKindError.

        Args:
            message: Error message string OR Diagnostic object
            argument_index: Zero-based position of the offending argument
            received_type: Python type name of the argument
        """
        super().__init__(message)
        self.argument_index = argument_index
        self.received_type = received_type


class UnsupportedVerbForKindError(FormatError):
    """Recognized directive applied to a kind that does not support it.

    Example:
        sprintf("%x", 3.14)  # floats have no hexadecimal rendering

    Attributes:
        directive: Directive token as written (e.g. "%+x")
        verb: Verb character of the directive (e.g. "x")
        kind: Value kind of the argument (e.g. "float")
        argument_index: Zero-based position of the argument
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        directive: str,
        verb: str,
        kind: str,
        argument_index: int,
    ) -> None:
        """Initialize UnsupportedVerbForKindError.

        Args:
            message: Error message string OR Diagnostic object
            directive: Directive token as written
            verb: Verb character of the directive
            kind: Value kind of the argument
            argument_index: Zero-based position of the argument
        """
        super().__init__(message)
        self.directive = directive
        self.verb = verb
        self.kind = kind
        self.argument_index = argument_index


class FormattedError(Exception):
    """Plain failure value produced by errorf().

    Carries nothing but the formatted message. Not a FormatError: it reports
    the caller's own failure, not a formatting problem.

    Attributes:
        message: The formatted text
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self._message = message

    @property
    def message(self) -> str:
        """Formatted message text."""
        return self._message
