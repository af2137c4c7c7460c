"""fmtless runtime package.

Provides argument classification, the value renderer, and the value types
callers use for codepoints and single-precision floats.
Depends on the syntax package for segments and directives.

Python 3.13+.
"""

from .classify import (
    BytesValue,
    ClassifiedValue,
    CodepointValue,
    FloatValue,
    IntegerValue,
    TextValue,
    classify,
    kind_of,
)
from .floats import format_float, shortest_digits, to_float32
from .quoting import quote, quote_bytes
from .renderer import accepted_verbs, convert, render
from .value_types import Codepoint, Displayable, Float32, FormatValue

__all__ = [
    "BytesValue",
    "ClassifiedValue",
    "Codepoint",
    "CodepointValue",
    "Displayable",
    "Float32",
    "FloatValue",
    "FormatValue",
    "IntegerValue",
    "TextValue",
    "accepted_verbs",
    "classify",
    "convert",
    "format_float",
    "kind_of",
    "quote",
    "quote_bytes",
    "render",
    "shortest_digits",
    "to_float32",
]
