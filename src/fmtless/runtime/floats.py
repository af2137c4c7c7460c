"""Shortest round-trip float formatting.

Every float verb renders the fewest significant decimal digits that parse
back to the same value at the value's own width: 64-bit for float, 32-bit
for Float32. The digits are then laid out in the requested mode:

    f, F    -ddd.ddd          (never an exponent)
    e, E    -d.ddde+dd        (at least two exponent digits)
    g, G    e-form if the decimal exponent is < -4 or >= 6, else f-form

Non-finite values render as NaN, +Inf and -Inf in every mode.

Python 3.13+. Zero external dependencies.
"""

import math
import struct
from decimal import ROUND_CEILING, ROUND_FLOOR, ROUND_HALF_EVEN, Decimal, localcontext

from fmtless.constants import FLOAT_G_EXPONENT_LIMIT, FLOAT_VERBS

__all__ = [
    "format_float",
    "shortest_digits",
    "to_float32",
]

# Longest decimal significand binary32 ever needs to round-trip.
_FLOAT32_MAX_DIGITS: int = 9

# Enough significant digits to hold any binary32 value or midpoint exactly.
_EXACT_DIGITS: int = 200

# g/G below this decimal exponent switch to e-form.
_G_MIN_EXPONENT: int = -4


def to_float32(value: float) -> float:
    """Round value to the nearest IEEE-754 binary32 number.

    Values beyond the binary32 range become signed infinity.
    """
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _digits_of(literal: str) -> tuple[str, int]:
    """Split a finite decimal literal into significant digits and decimal point.

    Returns (digits, dp) such that |value| == 0.<digits> * 10**dp, with no
    trailing zeros in digits. Zero is ("", 0).
    """
    _sign, digit_tuple, exponent = Decimal(literal).as_tuple()
    digits = "".join(map(str, digit_tuple)).rstrip("0")
    if not digits:
        return "", 0
    # Decimal exponent counts from the last digit, including stripped zeros.
    dp = len(digit_tuple) + int(exponent)
    return digits, dp


def _float32_from_bits(bits: int) -> float:
    return struct.unpack("<f", struct.pack("<I", bits))[0]


def _float32_interval(magnitude: float) -> tuple[Decimal, Decimal, bool]:
    """Return the rounding interval of a positive binary32 value.

    Returns (low, high, inclusive): every decimal strictly between the
    midpoints to the neighboring binary32 values rounds to magnitude, and
    the midpoints themselves do too when its significand is even.
    Must run under a context wide enough to keep midpoints exact.
    """
    bits = struct.unpack("<I", struct.pack("<f", magnitude))[0]
    exact = Decimal(magnitude)
    below = Decimal(_float32_from_bits(bits - 1))
    above_value = _float32_from_bits(bits + 1)
    if math.isinf(above_value):
        # Largest finite binary32: the gap above mirrors the gap below.
        above = exact + (exact - below)
    else:
        above = Decimal(above_value)
    return (exact + below) / 2, (exact + above) / 2, bits % 2 == 0


def _shortest_float32(magnitude: float) -> Decimal:
    exact = Decimal(magnitude)
    low, high, inclusive = _float32_interval(magnitude)

    def round_trips(candidate: Decimal) -> bool:
        if inclusive:
            return low <= candidate <= high
        return low < candidate < high

    for precision in range(1, _FLOAT32_MAX_DIGITS + 1):
        quantum = Decimal(1).scaleb(exact.adjusted() - precision + 1)
        nearest = exact.quantize(quantum, rounding=ROUND_HALF_EVEN)
        candidates = [
            exact.quantize(quantum, rounding=rounding)
            for rounding in (ROUND_HALF_EVEN, ROUND_FLOOR, ROUND_CEILING)
        ]
        valid = [candidate for candidate in candidates if round_trips(candidate)]
        if valid:
            # Closest wins; the nearest rounding breaks ties.
            return min(valid, key=lambda c: (abs(c - exact), c != nearest))

    return exact.quantize(
        Decimal(1).scaleb(exact.adjusted() - _FLOAT32_MAX_DIGITS + 1),
        rounding=ROUND_HALF_EVEN,
    )


def shortest_digits(value: float, bits: int = 64) -> tuple[str, int]:
    """Return the shortest round-trip digits of a finite float.

    Args:
        value: Finite float; for bits=32 it must already be binary32-exact
        bits: 64 for double precision, 32 for single precision

    Returns:
        (digits, dp) with |value| == 0.<digits> * 10**dp

    Example:
        >>> shortest_digits(3.1)
        ('31', 1)
        >>> shortest_digits(to_float32(0.1), bits=32)
        ('1', 0)
    """
    magnitude = abs(value)
    if bits == 64:
        # repr() already yields the shortest string that round-trips.
        return _digits_of(repr(magnitude))

    if magnitude == 0:
        return "", 0

    with localcontext() as context:
        context.prec = _EXACT_DIGITS
        return _digits_of(str(_shortest_float32(magnitude)))


def _fixed(digits: str, dp: int) -> str:
    if dp > 0:
        integer = digits[:dp].ljust(dp, "0")
        fraction = digits[dp:]
    else:
        integer = "0"
        fraction = "0" * -dp + digits
    if fraction:
        return f"{integer}.{fraction}"
    return integer


def _exponent(digits: str, dp: int, letter: str) -> str:
    if not digits:
        return f"0{letter}+00"
    mantissa = digits[0]
    if len(digits) > 1:
        mantissa = f"{mantissa}.{digits[1:]}"
    exp = dp - 1
    sign = "-" if exp < 0 else "+"
    return f"{mantissa}{letter}{sign}{abs(exp):02d}"


def format_float(value: float, mode: str, bits: int = 64) -> str:
    """Render a float in the given mode with shortest round-trip precision.

    Args:
        value: The float to render
        mode: One of f, F, e, E, g, G
        bits: Width governing the round-trip check (64 or 32)

    Returns:
        Rendered text

    Raises:
        ValueError: If mode is not a float mode

    Example:
        >>> format_float(3.1, "f")
        '3.1'
        >>> format_float(3.1, "e")
        '3.1e+00'
        >>> format_float(1e6, "g")
        '1e+06'
    """
    if mode not in FLOAT_VERBS:
        msg = f"Unknown float mode: {mode!r}"
        raise ValueError(msg)

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    sign = "-" if math.copysign(1.0, value) < 0 else ""
    digits, dp = shortest_digits(value, bits)

    match mode:
        case "f" | "F":
            body = _fixed(digits, dp)
        case "e" | "E":
            body = _exponent(digits, dp, mode)
        case _:
            exp = dp - 1
            if exp < _G_MIN_EXPONENT or exp >= FLOAT_G_EXPONENT_LIMIT:
                body = _exponent(digits, dp, "e" if mode == "g" else "E")
            else:
                body = _fixed(digits, dp)

    return sign + body
