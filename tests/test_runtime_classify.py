"""Tests for runtime/classify.py: capability-priority kind probing.

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum

import pytest

from fmtless.diagnostics import DiagnosticCode, UnsupportedKindError
from fmtless.enums import ValueKind
from fmtless.runtime.classify import (
    BytesValue,
    CodepointValue,
    FloatValue,
    IntegerValue,
    TextValue,
    classify,
    kind_of,
)
from fmtless.runtime.value_types import Codepoint, Float32


class Point:
    """Display-capable test value."""

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class LoudError(Exception):
    """Exception overriding __str__: display outranks failure-message."""

    def __str__(self) -> str:
        return "LOUD"


class DisplayInt(int):
    """int subclass with its own __str__: display outranks integer."""

    def __str__(self) -> str:
        return f"#{int(self)}"


class Color(Enum):
    RED = 1


class Plain:
    """No capability at all."""


class TestKindOf:
    """kind_of() probes capabilities in priority order."""

    @pytest.mark.parametrize(
        ("value", "kind"),
        [
            (Point(1, 2), ValueKind.DISPLAY),
            (LoudError(), ValueKind.DISPLAY),
            (DisplayInt(3), ValueKind.DISPLAY),
            (Color.RED, ValueKind.DISPLAY),
            (Decimal("1.5"), ValueKind.DISPLAY),
            (int, ValueKind.TYPE_NAME),
            (Point, ValueKind.TYPE_NAME),
            (ValueError("boom"), ValueKind.FAILURE),
            ("text", ValueKind.TEXT),
            (b"\x00", ValueKind.BYTES),
            (bytearray(b"ab"), ValueKind.BYTES),
            (memoryview(b"ab"), ValueKind.BYTES),
            (Codepoint(0x61), ValueKind.CODEPOINT),
            (-7, ValueKind.INTEGER),
            (2**100, ValueKind.INTEGER),
            (3.1, ValueKind.FLOAT),
            (Float32(3.1), ValueKind.FLOAT),
        ],
    )
    def test_kinds(self, value: object, kind: ValueKind) -> None:
        """Each value lands in the expected kind."""
        assert kind_of(value) is kind

    @pytest.mark.parametrize("value", [None, True, False, [1], {"a": 1}, (1,), Plain()])
    def test_no_kind(self, value: object) -> None:
        """Values without any capability have no kind."""
        assert kind_of(value) is None


class TestClassify:
    """classify() builds tagged variants."""

    def test_display(self) -> None:
        """Display values carry their own text."""
        assert classify(Point(1, 2)) == TextValue("(1, 2)", ValueKind.DISPLAY)

    def test_display_int_subclass(self) -> None:
        """An int subclass with __str__ renders through __str__."""
        assert classify(DisplayInt(3)) == TextValue("#3", ValueKind.DISPLAY)

    def test_builtin_type_name(self) -> None:
        """Builtin classes render by bare name."""
        assert classify(str) == TextValue("str", ValueKind.TYPE_NAME)

    def test_user_type_name(self) -> None:
        """Other classes render module-qualified."""
        assert classify(Point) == TextValue(f"{__name__}.Point", ValueKind.TYPE_NAME)

    def test_failure(self) -> None:
        """Exceptions render by message."""
        assert classify(ValueError("boom")) == TextValue("boom", ValueKind.FAILURE)

    def test_text(self) -> None:
        """str is plain text."""
        assert classify("x") == TextValue("x")

    def test_bytes_like(self) -> None:
        """bytes-like values are copied to bytes."""
        assert classify(bytearray(b"\x01\x02")) == BytesValue(b"\x01\x02")
        assert classify(memoryview(b"\xff")) == BytesValue(b"\xff")

    def test_codepoint(self) -> None:
        """Codepoint unwraps to its scalar value."""
        assert classify(Codepoint(0xED)) == CodepointValue(0xED)

    def test_integer(self) -> None:
        """int is an integer of any width."""
        assert classify(-(2**70)) == IntegerValue(-(2**70))

    def test_float_widths(self) -> None:
        """float is 64-bit, Float32 is 32-bit."""
        assert classify(2.5) == FloatValue(2.5, 64)
        assert classify(Float32(2.5)) == FloatValue(2.5, 32)

    def test_variant_kinds(self) -> None:
        """Every variant reports its kind."""
        assert BytesValue(b"").kind is ValueKind.BYTES
        assert CodepointValue(1).kind is ValueKind.CODEPOINT
        assert IntegerValue(1).kind is ValueKind.INTEGER
        assert FloatValue(1.0).kind is ValueKind.FLOAT

    @pytest.mark.parametrize(
        "value",
        [Point(0, 0), int, KeyError("k"), "s", b"b", Codepoint(1), 1, 1.0, Float32(1.0)],
    )
    def test_agrees_with_kind_of(self, value: object) -> None:
        """classify() and kind_of() probe in the same order."""
        assert classify(value).kind is kind_of(value)

    def test_unsupported_kind(self) -> None:
        """Values with no kind raise UnsupportedKindError."""
        with pytest.raises(UnsupportedKindError) as exc_info:
            classify([1, 2], argument_index=4)

        error = exc_info.value
        assert error.argument_index == 4
        assert error.received_type == "list"
        assert error.diagnostic is not None
        assert error.diagnostic.code == DiagnosticCode.UNSUPPORTED_KIND

    def test_bool_unsupported(self) -> None:
        """bool has no rendering of its own."""
        with pytest.raises(UnsupportedKindError, match="bool"):
            classify(True)
