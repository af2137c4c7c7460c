"""Value renderer - turns scanned segments plus arguments into text.

Pairs segment i with argument i, classifies the argument once, and converts
the (variant, verb) pair through an exhaustive match. Rendering is strict:
a value with no kind, or a verb its kind does not define, aborts the whole
call with a typed error. No partial output is ever returned.

Thread Safety:
    Pure functions over their arguments. The output buffer is local to each
    call; nothing is cached or shared.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Sequence

from fmtless.constants import (
    CODEPOINT_MIN_DIGITS,
    CODEPOINT_PREFIX,
    DIRECTIVE_VERBS,
    FLOAT_VERBS,
    HEX_VERBS,
    INTEGER_BASES,
    QUOTE_VERB,
    TEXT_VERBS,
)
from fmtless.diagnostics import (
    ErrorTemplate,
    UnsupportedKindError,
    UnsupportedVerbForKindError,
)
from fmtless.enums import ValueKind
from fmtless.syntax import Directive, Segment

from .classify import (
    BytesValue,
    ClassifiedValue,
    CodepointValue,
    FloatValue,
    IntegerValue,
    TextValue,
    classify,
)
from .floats import format_float
from .quoting import quote, quote_bytes

__all__ = ["accepted_verbs", "convert", "render"]

logger = logging.getLogger(__name__)

_TEXT_LIKE_VERBS: frozenset[str] = TEXT_VERBS | {QUOTE_VERB}

# Verbs each kind can render. Anything else is UnsupportedVerbForKindError.
_ACCEPTED_VERBS: dict[ValueKind, frozenset[str]] = {
    ValueKind.DISPLAY: _TEXT_LIKE_VERBS,
    ValueKind.TYPE_NAME: _TEXT_LIKE_VERBS,
    ValueKind.FAILURE: _TEXT_LIKE_VERBS,
    ValueKind.TEXT: _TEXT_LIKE_VERBS,
    ValueKind.BYTES: _TEXT_LIKE_VERBS | HEX_VERBS,
    ValueKind.CODEPOINT: DIRECTIVE_VERBS,
    ValueKind.INTEGER: frozenset(INTEGER_BASES),
    ValueKind.FLOAT: TEXT_VERBS | FLOAT_VERBS,
}

_RADIX_SPECS: dict[int, str] = {2: "b", 8: "o", 10: "d", 16: "x"}


def accepted_verbs(kind: ValueKind) -> frozenset[str]:
    """Return the verbs a value of the given kind can be rendered with.

    Example:
        >>> sorted(accepted_verbs(ValueKind.INTEGER))
        ['X', 'b', 'd', 'o', 's', 'v', 'x']
    """
    return _ACCEPTED_VERBS[kind]


def _format_codepoint(codepoint: int) -> str:
    return f"{CODEPOINT_PREFIX}{codepoint:0{CODEPOINT_MIN_DIGITS}X}"


def _format_integer(number: int, verb: str) -> str:
    digits = format(number, _RADIX_SPECS[INTEGER_BASES[verb]])
    return digits.upper() if verb == "X" else digits


def _format_hex_bytes(data: bytes, verb: str) -> str:
    digits = data.hex()
    return digits.upper() if verb == "X" else digits


def convert(value: ClassifiedValue, directive: Directive, argument_index: int = 0) -> str:
    """Render one classified value under one directive.

    The directive's modifier is ignored; only its verb selects the rule.

    Args:
        value: Classified argument
        directive: Directive consuming the argument
        argument_index: Position of the argument, for error reporting

    Returns:
        Rendered text fragment

    Raises:
        UnsupportedVerbForKindError: If the verb is not defined for the kind
    """
    verb = directive.verb

    match value:
        case CodepointValue(codepoint=codepoint):
            # Verb is irrelevant for codepoints.
            return _format_codepoint(codepoint)
        case TextValue(text=text):
            if verb in TEXT_VERBS:
                return text
            if verb == QUOTE_VERB:
                return quote(text)
        case BytesValue(data=data):
            if verb in TEXT_VERBS:
                return data.decode("utf-8", errors="replace")
            if verb == QUOTE_VERB:
                return quote_bytes(data)
            if verb in HEX_VERBS:
                return _format_hex_bytes(data, verb)
        case IntegerValue(value=number):
            if verb in INTEGER_BASES:
                return _format_integer(number, verb)
        case FloatValue(value=number, bits=bits):
            if verb in TEXT_VERBS:
                return format_float(number, "f", bits)
            if verb in FLOAT_VERBS:
                return format_float(number, verb, bits)

    kind = value.kind
    diagnostic = ErrorTemplate.unsupported_verb(
        directive.token, kind.value, argument_index, accepted_verbs(kind)
    )
    raise UnsupportedVerbForKindError(
        diagnostic,
        directive=directive.token,
        verb=verb,
        kind=kind.value,
        argument_index=argument_index,
    )


def render(segments: Sequence[Segment], args: Sequence[object]) -> str:
    """Concatenate segment literals with their rendered arguments.

    Segment i consumes args[i] if and only if it carries a directive.
    Surplus arguments are ignored. A directive past the end of args reads
    a missing argument, which has no kind and raises.

    Args:
        segments: Output of scan()
        args: Positional argument values

    Returns:
        The formatted text

    Raises:
        UnsupportedKindError: If an argument is missing or has no kind
        UnsupportedVerbForKindError: If a verb does not apply to its argument
    """
    parts: list[str] = []

    for index, segment in enumerate(segments):
        parts.append(segment.literal)
        if segment.directive is None:
            continue

        if index >= len(args):
            diagnostic = ErrorTemplate.argument_missing(index, segment.directive.token)
            raise UnsupportedKindError(
                diagnostic,
                argument_index=index,
                received_type="NoneType",
            )

        classified = classify(args[index], index)
        parts.append(convert(classified, segment.directive, index))

    directive_count = sum(1 for segment in segments if segment.directive is not None)
    if len(args) > directive_count:
        logger.debug(
            "Ignoring %d surplus argument(s): %d directive(s), %d argument(s)",
            len(args) - directive_count,
            directive_count,
            len(args),
        )

    return "".join(parts)
