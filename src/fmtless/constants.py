"""Shared constants for fmtless.

Single source of truth for the directive grammar and the fixed rendering
policies. The grammar is closed: there is no runtime configuration, so
every knob the scanner and renderer consult lives here.

Constants are grouped by domain:
- Directive grammar: marker, modifiers, verbs, look-ahead window
- Verb groups: which verbs each value kind accepts
- Rendering policy: codepoint escapes, float exponent threshold, join rules

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Directive grammar
    "DIRECTIVE_MARKER",
    "DIRECTIVE_MODIFIERS",
    "DIRECTIVE_VERBS",
    "DIRECTIVE_WINDOW",
    # Verb groups
    "TEXT_VERBS",
    "QUOTE_VERB",
    "HEX_VERBS",
    "INTEGER_BASES",
    "FLOAT_VERBS",
    "DEFAULT_VERB",
    # Rendering policy
    "CODEPOINT_PREFIX",
    "CODEPOINT_MIN_DIGITS",
    "MAX_CODEPOINT",
    "FLOAT_G_EXPONENT_LIMIT",
    "JOIN_SEPARATOR",
    "LINE_SEPARATOR",
    "LINE_TERMINATOR",
]

# ============================================================================
# DIRECTIVE GRAMMAR
# ============================================================================
#
# directive := MARKER [MODIFIER] VERB
#
# Anything that does not match is literal text. There is no escape for a
# literal marker: "%%" is two percent signs unless the second one starts a
# directive of its own.

DIRECTIVE_MARKER: str = "%"

# Accepted syntactically, ignored by rendering.
DIRECTIVE_MODIFIERS: frozenset[str] = frozenset("+#")

DIRECTIVE_VERBS: frozenset[str] = frozenset("vsqdbfFgGeEoxXU")

# Marker plus at most two characters (modifier and verb).
DIRECTIVE_WINDOW: int = 3

# ============================================================================
# VERB GROUPS
# ============================================================================

# Verbatim rendering for text-like values.
TEXT_VERBS: frozenset[str] = frozenset("sv")

QUOTE_VERB: str = "q"

# Lowercase/uppercase hexadecimal for integers and byte sequences.
HEX_VERBS: frozenset[str] = frozenset("xX")

# Integer verb -> radix. "s" and "v" render integers in base 10 as well.
INTEGER_BASES: dict[str, int] = {
    "s": 10,
    "v": 10,
    "d": 10,
    "o": 8,
    "b": 2,
    "x": 16,
    "X": 16,
}

# Float verbs double as the conversion mode letter.
FLOAT_VERBS: frozenset[str] = frozenset("fFgGeE")

# Verb used by sprint/sprintln for each operand.
DEFAULT_VERB: str = "s"

# ============================================================================
# RENDERING POLICY
# ============================================================================

# Codepoints always render as U+XXXX regardless of the requested verb.
CODEPOINT_PREFIX: str = "U+"
CODEPOINT_MIN_DIGITS: int = 4
MAX_CODEPOINT: int = 0x10FFFF

# Shortest-form %g switches to exponent notation when the decimal exponent
# is below -4 or at least this value.
FLOAT_G_EXPONENT_LIMIT: int = 6

# sprint joins operands with no separator at all.
JOIN_SEPARATOR: str = ""

# sprintln separates operands with one space and terminates the line.
LINE_SEPARATOR: str = " "
LINE_TERMINATOR: str = "\n"
