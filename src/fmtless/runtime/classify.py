"""Argument classification - maps each value onto a closed set of variants.

Kind is decided once per argument by capability probing in a fixed order
(see ValueKind). The result is a tagged variant the renderer matches on
exhaustively, so conversion code never inspects Python types again.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from fmtless.diagnostics import ErrorTemplate, UnsupportedKindError
from fmtless.enums import ValueKind

from .value_types import Codepoint, Float32

__all__ = [
    "BytesValue",
    "ClassifiedValue",
    "CodepointValue",
    "FloatValue",
    "IntegerValue",
    "TextValue",
    "classify",
    "kind_of",
]


@dataclass(frozen=True, slots=True)
class TextValue:
    """Text-like argument: str, display, type-name or failure-message.

    Attributes:
        text: The text to render
        kind: Which capability produced the text
    """

    text: str
    kind: ValueKind = ValueKind.TEXT


@dataclass(frozen=True, slots=True)
class BytesValue:
    """Byte sequence argument."""

    data: bytes

    @property
    def kind(self) -> ValueKind:
        return ValueKind.BYTES


@dataclass(frozen=True, slots=True)
class CodepointValue:
    """Single Unicode scalar value argument."""

    codepoint: int

    @property
    def kind(self) -> ValueKind:
        return ValueKind.CODEPOINT


@dataclass(frozen=True, slots=True)
class IntegerValue:
    """Integer argument of any size."""

    value: int

    @property
    def kind(self) -> ValueKind:
        return ValueKind.INTEGER


@dataclass(frozen=True, slots=True)
class FloatValue:
    """Floating point argument.

    Attributes:
        value: The number
        bits: 64 for float, 32 for Float32
    """

    value: float
    bits: int = 64

    @property
    def kind(self) -> ValueKind:
        return ValueKind.FLOAT


type ClassifiedValue = TextValue | BytesValue | CodepointValue | IntegerValue | FloatValue


def _has_display(value: object) -> bool:
    """Check whether the nearest __str__ in the MRO comes from a non-builtin class.

    __str__ inherited from object, str, int, float, bytes or the builtin
    exceptions is not a display capability.
    """
    for klass in type(value).__mro__:
        if "__str__" in vars(klass):
            return klass.__module__ != "builtins"
    return False


def _type_name(klass: type) -> str:
    if klass.__module__ == "builtins":
        return klass.__qualname__
    return f"{klass.__module__}.{klass.__qualname__}"


def kind_of(value: object) -> ValueKind | None:
    """Return the kind a value renders as, or None if it has none.

    Runs the same probing as classify() but reports a missing kind as None
    instead of raising.

    Example:
        >>> kind_of(3)
        <ValueKind.INTEGER: 'integer'>
        >>> kind_of(ValueError("boom"))
        <ValueKind.FAILURE: 'failure'>
        >>> kind_of([1, 2]) is None
        True
    """
    try:
        return classify(value).kind
    except UnsupportedKindError:
        return None


def classify(value: object, argument_index: int = 0) -> ClassifiedValue:
    """Convert an argument into its tagged variant.

    Probes capabilities in ValueKind order; the first one found wins.

    Args:
        value: The argument as passed by the caller
        argument_index: Position of the argument, for error reporting

    Returns:
        The classified value

    Raises:
        UnsupportedKindError: If the value belongs to no kind
    """
    if _has_display(value):
        return TextValue(str(value), ValueKind.DISPLAY)

    match value:
        case type():
            return TextValue(_type_name(value), ValueKind.TYPE_NAME)
        case BaseException():
            return TextValue(str(value), ValueKind.FAILURE)
        case str():
            return TextValue(value)
        case bytes() | bytearray() | memoryview():
            return BytesValue(bytes(value))
        case Codepoint(value=codepoint):
            return CodepointValue(codepoint)
        case bool():
            pass  # bool is an int subtype with no rendering of its own
        case int():
            return IntegerValue(value)
        case Float32(value=number):
            return FloatValue(number, 32)
        case float():
            return FloatValue(value)

    received_type = type(value).__name__
    diagnostic = ErrorTemplate.unsupported_kind(argument_index, received_type)
    raise UnsupportedKindError(
        diagnostic,
        argument_index=argument_index,
        received_type=received_type,
    )
