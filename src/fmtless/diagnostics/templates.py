"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Renderer and cursor code ask for a Diagnostic and wrap it in the matching
    exception type.
    """

    @staticmethod
    def unsupported_kind(argument_index: int, received_type: str) -> Diagnostic:
        """Argument value belongs to no renderable kind.

        Args:
            argument_index: Zero-based position of the argument
            received_type: Python type name of the argument

        Returns:
            Diagnostic for UNSUPPORTED_KIND
        """
        msg = f"Argument {argument_index} of type '{received_type}' cannot be formatted"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_KIND,
            message=msg,
            hint=(
                "Pass str, bytes, int, float, Codepoint, Float32, an exception, "
                "a type, or an object defining __str__"
            ),
            argument_index=argument_index,
            received_type=received_type,
        )

    @staticmethod
    def argument_missing(argument_index: int, directive: str) -> Diagnostic:
        """Directive has no argument at its position.

        Args:
            argument_index: Zero-based position the directive reads from
            directive: The directive token (e.g. "%d")

        Returns:
            Diagnostic for ARGUMENT_MISSING
        """
        msg = f"Missing argument {argument_index} for directive '{directive}'"
        return Diagnostic(
            code=DiagnosticCode.ARGUMENT_MISSING,
            message=msg,
            hint="Every directive consumes one argument; pass one value per directive",
            argument_index=argument_index,
            directive=directive,
            received_type="NoneType",
        )

    @staticmethod
    def unsupported_verb(
        directive: str,
        kind: str,
        argument_index: int,
        accepted: Iterable[str],
    ) -> Diagnostic:
        """Directive verb is not defined for the argument's kind.

        Args:
            directive: The directive token (e.g. "%x")
            kind: Value kind of the argument (e.g. "float")
            argument_index: Zero-based position of the argument
            accepted: Verbs the kind does accept

        Returns:
            Diagnostic for UNSUPPORTED_VERB
        """
        verbs = " ".join(f"%{verb}" for verb in sorted(accepted))
        msg = f"Directive '{directive}' cannot render {kind} values"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_VERB,
            message=msg,
            hint=f"Use one of {verbs} for {kind} values",
            argument_index=argument_index,
            directive=directive,
            expected_type=f"one of {verbs}",
            received_type=kind,
        )

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Cursor read past the end of the format string.

        Args:
            position: Position where EOF was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
        )
