"""Immutable cursor over a format string.

Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Look-ahead is bounded: window() never reads past the source end

Positions count Python characters (code points), not UTF-8 bytes.
"""

from dataclasses import dataclass

from fmtless.diagnostics import ErrorTemplate

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("%d apples", 0)
        >>> cursor.current
        '%'
        >>> cursor.window(3)
        '%d '
        >>> cursor.advance(2).current
        ' '
        >>> cursor.pos  # Original unchanged (immutability)
        0
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Use in while loops: `while not cursor.is_eof:`
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def window(self, size: int) -> str:
        """Return up to size characters starting at the current position.

        Shorter than size near the end of input; empty at EOF.
        """
        return self.source[self.pos : self.pos + size]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped at EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_from(self, start_pos: int) -> str:
        """Extract source text from start_pos up to the current position.

        Used by the scanner to collect the literal run accumulated since the
        last directive.
        """
        return self.source[start_pos : self.pos]
