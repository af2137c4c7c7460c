"""Directive scanner - splits a format string into literal/directive segments.

Grammar:
    directive := "%" [modifier] verb
    modifier  := "+" | "#"
    verb      := "v" | "s" | "q" | "d" | "b" | "f" | "F" | "g" | "G"
               | "e" | "E" | "o" | "x" | "X" | "U"

Anything else, including a lone "%" or "%" followed by an unknown verb, is
literal text. The scanner is permissive: it never raises for a str input.
It knows nothing about argument values; the renderer pairs segments with
arguments by position.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from fmtless.constants import (
    DIRECTIVE_MARKER,
    DIRECTIVE_MODIFIERS,
    DIRECTIVE_VERBS,
    DIRECTIVE_WINDOW,
)

from .cursor import Cursor

__all__ = ["Directive", "Segment", "match_directive", "scan"]


@dataclass(frozen=True, slots=True)
class Directive:
    """One recognized directive token.

    Attributes:
        verb: Verb character selecting the rendering rule
        modifier: "+" or "#" if written, else "" (ignored by rendering)
        marker: Directive marker character

    Example:
        >>> d = Directive(verb="d", modifier="+")
        >>> str(d)
        '%+d'
        >>> len(d)
        3
    """

    verb: str
    modifier: str = ""
    marker: str = DIRECTIVE_MARKER

    @property
    def token(self) -> str:
        """Directive text exactly as written in the format string."""
        return f"{self.marker}{self.modifier}{self.verb}"

    def __str__(self) -> str:
        return self.token

    def __len__(self) -> int:
        return len(self.marker) + len(self.modifier) + len(self.verb)


@dataclass(frozen=True, slots=True)
class Segment:
    """Literal text followed by an optional directive.

    Attributes:
        literal: Text preceding the directive (may be empty)
        directive: The directive, or None for a trailing literal tail
    """

    literal: str
    directive: Directive | None = None


def match_directive(window: str) -> Directive | None:
    """Check whether window starts with a directive.

    Args:
        window: The marker position plus up to two following characters.
            Extra characters beyond the directive are ignored.

    Returns:
        The matched Directive, or None if window does not start with one

    Example:
        >>> match_directive("%df")
        Directive(verb='d', modifier='', marker='%')
        >>> match_directive("%+f").token
        '%+f'
        >>> match_directive("%n") is None
        True
    """
    if len(window) < 2 or window[0] != DIRECTIVE_MARKER:
        return None

    modifier = ""
    verb_pos = 1
    if window[1] in DIRECTIVE_MODIFIERS:
        modifier = window[1]
        verb_pos = 2
        if len(window) <= verb_pos:
            return None

    verb = window[verb_pos]
    if verb not in DIRECTIVE_VERBS:
        return None
    return Directive(verb=verb, modifier=modifier)


def scan(format_string: str) -> tuple[Segment, ...]:
    """Split a format string into segments in source order.

    Single forward pass. At each marker, a bounded look-ahead window decides
    whether a directive starts there; if so, the literal run since the last
    directive becomes the segment's prefix and the scan resumes after the
    token. Leftover text after the last directive becomes a final segment
    with no directive.

    Args:
        format_string: Format string to scan

    Returns:
        Segments in order; empty tuple for an empty format string

    Example:
        >>> [(s.literal, str(s.directive)) for s in scan("a %d b %q")]
        [('a ', '%d'), (' b ', '%q')]
        >>> scan("100%")
        (Segment(literal='100%', directive=None),)
    """
    segments: list[Segment] = []
    cursor = Cursor(format_string, 0)
    literal_start = 0

    while not cursor.is_eof:
        if cursor.current != DIRECTIVE_MARKER:
            cursor = cursor.advance()
            continue

        directive = match_directive(cursor.window(DIRECTIVE_WINDOW))
        if directive is None:
            # Unrecognized: the marker stays in the literal run.
            cursor = cursor.advance()
            continue

        segments.append(Segment(cursor.slice_from(literal_start), directive))
        cursor = cursor.advance(len(directive))
        literal_start = cursor.pos

    if literal_start < len(format_string):
        segments.append(Segment(format_string[literal_start:]))

    return tuple(segments)
