"""Format string introspection.

Answers questions about a format string without any argument values:
which directives it holds, where, how many arguments it consumes, and which
value kinds each position can take. Useful for validating format strings
ahead of time (e.g. in tests over message catalogs).

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from fmtless.enums import ValueKind
from fmtless.runtime import accepted_verbs
from fmtless.syntax import Directive, scan

__all__ = [
    "DirectiveInfo",
    "FormatInfo",
    "introspect_format",
]


@dataclass(frozen=True, slots=True)
class DirectiveInfo:
    """Position and content of one directive in a format string."""

    directive: Directive
    """The directive token."""

    argument_index: int
    """Index of the argument this directive consumes."""

    offset: int
    """Character offset of the directive marker in the format string."""


@dataclass(frozen=True, slots=True)
class FormatInfo:
    """Complete introspection result for a format string.

    All fields are immutable.
    """

    format_string: str
    """The format string that was inspected."""

    directives: tuple[DirectiveInfo, ...]
    """Directives in source order."""

    has_trailing_literal: bool
    """Whether text follows the last directive."""

    @property
    def argument_count(self) -> int:
        """Number of arguments a sprintf() call needs."""
        return len(self.directives)

    @property
    def verbs(self) -> frozenset[str]:
        """Distinct verb characters used."""
        return frozenset(info.directive.verb for info in self.directives)

    def accepts(self, kind: ValueKind) -> bool:
        """Check whether a value of this kind can fill every directive.

        Example:
            >>> introspect_format("%d items, %x mask").accepts(ValueKind.INTEGER)
            True
            >>> introspect_format("%d items, %q name").accepts(ValueKind.INTEGER)
            False
        """
        return self.verbs <= accepted_verbs(kind)

    def kinds_for(self, argument_index: int) -> frozenset[ValueKind]:
        """Return the value kinds the argument at argument_index may have.

        Raises:
            IndexError: If argument_index is negative or no directive consumes it
        """
        if not 0 <= argument_index < len(self.directives):
            msg = f"No directive consumes argument {argument_index}"
            raise IndexError(msg)
        verb = self.directives[argument_index].directive.verb
        return frozenset(kind for kind in ValueKind if verb in accepted_verbs(kind))


def introspect_format(format_string: str) -> FormatInfo:
    """Scan a format string and describe its directives.

    Args:
        format_string: Format string to inspect

    Returns:
        FormatInfo with directives in order

    Example:
        >>> info = introspect_format("%s scored %d points")
        >>> info.argument_count
        2
        >>> [str(d.directive) for d in info.directives]
        ['%s', '%d']
        >>> info.has_trailing_literal
        True
    """
    directives: list[DirectiveInfo] = []
    offset = 0
    has_trailing_literal = False

    for index, segment in enumerate(scan(format_string)):
        offset += len(segment.literal)
        if segment.directive is None:
            has_trailing_literal = True
            continue
        directives.append(DirectiveInfo(segment.directive, index, offset))
        offset += len(segment.directive)

    return FormatInfo(
        format_string=format_string,
        directives=tuple(directives),
        has_trailing_literal=has_trailing_literal,
    )
