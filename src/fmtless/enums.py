"""Enumerations for fmtless type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ValueKind(StrEnum):
    """Dynamic category of a formatting argument.

    Members are listed in probing priority: the first kind whose capability
    a value exposes is the one it is rendered as.

    StrEnum provides automatic string conversion: str(ValueKind.INTEGER) == "integer"
    """

    DISPLAY = "display"
    """Object whose class defines its own __str__"""

    TYPE_NAME = "type"
    """A class object, rendered by its qualified name"""

    FAILURE = "failure"
    """An exception instance, rendered by its message"""

    TEXT = "text"
    """A str"""

    BYTES = "bytes"
    """bytes, bytearray or memoryview"""

    CODEPOINT = "codepoint"
    """A Codepoint wrapper around one Unicode scalar value"""

    INTEGER = "integer"
    """An int of any size (bool excluded)"""

    FLOAT = "float"
    """A float (64-bit) or Float32 wrapper"""


__all__ = [
    "ValueKind",
]
