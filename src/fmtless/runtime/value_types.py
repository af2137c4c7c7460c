"""Core value types for the fmtless runtime.

Defines the argument types callers pass to the formatting functions:
    - Codepoint: A single Unicode scalar value (rendered as U+XXXX)
    - Float32: A float marked as single precision
    - Displayable: Protocol for objects with their own text rendering
    - FormatValue: Union of all accepted argument types

Python has no distinct character or float32 types, so these two kinds are
spelled with explicit wrappers. Neither wrapper defines __str__: doing so
would make them display-capable, which outranks their own kind.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from fmtless.constants import MAX_CODEPOINT

from .floats import to_float32

__all__ = [
    "Codepoint",
    "Displayable",
    "Float32",
    "FormatValue",
]

_SURROGATE_FIRST: int = 0xD800
_SURROGATE_LAST: int = 0xDFFF


@dataclass(frozen=True, slots=True)
class Codepoint:
    """A single Unicode scalar value.

    Always renders as "U+" followed by at least four uppercase hex digits,
    whatever verb consumes it.

    Attributes:
        value: Scalar value in 0..0x10FFFF, surrogates excluded

    Example:
        >>> Codepoint(0x61)
        Codepoint(value=97)
        >>> Codepoint.of("í").value
        237
    """

    value: int

    def __post_init__(self) -> None:
        """Validate the scalar value.

        Raises:
            TypeError: If value is not an int (bool rejected)
            ValueError: If value is outside the Unicode scalar range
        """
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            msg = f"Codepoint value must be int, got {type(self.value).__name__}"
            raise TypeError(msg)
        if not 0 <= self.value <= MAX_CODEPOINT:
            msg = f"Codepoint value out of range: {self.value:#x}"
            raise ValueError(msg)
        if _SURROGATE_FIRST <= self.value <= _SURROGATE_LAST:
            msg = f"Codepoint value is a surrogate: {self.value:#x}"
            raise ValueError(msg)

    @classmethod
    def of(cls, char: str) -> Codepoint:
        """Build a Codepoint from a one-character string.

        Raises:
            ValueError: If char is not exactly one character
        """
        if len(char) != 1:
            msg = f"Codepoint.of() expects one character, got {len(char)}"
            raise ValueError(msg)
        return cls(ord(char))

    @property
    def char(self) -> str:
        """The character this codepoint encodes."""
        return chr(self.value)


@dataclass(frozen=True, slots=True)
class Float32:
    """A float carried at single precision.

    The value is rounded to the nearest binary32 number on construction, so
    float verbs print the shortest digits that round-trip at 32 bits.

    Attributes:
        value: The binary32-exact value, stored as a Python float

    Example:
        >>> Float32(0.1).value == 0.1
        False
        >>> Float32(0.5).value
        0.5
    """

    value: float

    def __post_init__(self) -> None:
        """Round the stored value to binary32.

        Raises:
            TypeError: If value is not an int or float (bool rejected)
        """
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            msg = f"Float32 value must be int or float, got {type(self.value).__name__}"
            raise TypeError(msg)
        object.__setattr__(self, "value", to_float32(float(self.value)))


class Displayable(Protocol):
    """Object that renders itself as text through its own __str__.

    Only a __str__ defined outside the builtins counts as display
    capability; the ones on object, str, bytes, int, float and the builtin
    exceptions do not (see runtime.classify).
    """

    def __str__(self) -> str:
        ...  # pragma: no cover  # Protocol stub - not executable


# Type alias for values accepted by sprintf and friends.
# This is the CANONICAL definition - re-exported from the package root.
# Probing order (first match wins): Displayable, type, BaseException, str,
# bytes-like, Codepoint, int, float/Float32.
type FormatValue = (
    Displayable
    | type
    | BaseException
    | str
    | bytes
    | bytearray
    | memoryview
    | Codepoint
    | int
    | float
    | Float32
)
