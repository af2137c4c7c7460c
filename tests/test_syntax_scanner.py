"""Tests for the directive scanner: match_directive() and scan().

The scanner is permissive: malformed directives become literal text and
no str input ever raises.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given

from fmtless.syntax import Directive, Segment, match_directive, scan
from tests.strategies import arbitrary_format_text, format_strings, marker_free_text

# ============================================================================
# WINDOW MATCHING
# ============================================================================


class TestMatchDirective:
    """match_directive() checks one look-ahead window."""

    @pytest.mark.parametrize(
        ("window", "token"),
        [
            ("%d", "%d"),
            ("%df", "%d"),
            ("%f", "%f"),
            ("%+f", "%+f"),
            ("%#v", "%#v"),
            ("%U", "%U"),
            ("%X ", "%X"),
        ],
    )
    def test_matches(self, window: str, token: str) -> None:
        """Valid windows yield the directive at their start."""
        directive = match_directive(window)

        assert directive is not None
        assert directive.token == token

    @pytest.mark.parametrize(
        "window",
        ["%n", "ff", "%", "", "%+", "%#", "%+n", "%%d", "d%", "%++d", "%y"],
    )
    def test_rejects(self, window: str) -> None:
        """Windows that do not start with a directive yield None."""
        assert match_directive(window) is None

    def test_modifier_recorded(self) -> None:
        """The modifier is kept on the directive."""
        directive = match_directive("%+d")

        assert directive == Directive(verb="d", modifier="+")
        assert len(directive) == 3


# ============================================================================
# SCANNING
# ============================================================================


class TestScan:
    """scan() splits format strings into segments."""

    def test_split_specs(self) -> None:
        """Each directive closes a segment with its preceding literal."""
        assert scan("This %s that %d these %f those %g") == (
            Segment("This ", Directive("s")),
            Segment(" that ", Directive("d")),
            Segment(" these ", Directive("f")),
            Segment(" those ", Directive("g")),
        )

    def test_trailing_literal(self) -> None:
        """Text after the last directive becomes a directive-less segment."""
        assert scan("%q tail ") == (
            Segment("", Directive("q")),
            Segment(" tail ", None),
        )

    def test_empty_format(self) -> None:
        """An empty format yields no segments."""
        assert scan("") == ()

    def test_plain_text(self) -> None:
        """Text without directives is one literal segment."""
        assert scan("no directives here") == (Segment("no directives here"),)

    def test_adjacent_directives(self) -> None:
        """Back-to-back directives produce empty literals."""
        assert scan("%d%x") == (
            Segment("", Directive("d")),
            Segment("", Directive("x")),
        )

    def test_unknown_verb_is_literal(self) -> None:
        """A marker before a non-verb stays in the literal run."""
        assert scan("50%n off %d") == (Segment("50%n off ", Directive("d")),)

    def test_trailing_marker_is_literal(self) -> None:
        """A marker at the very end is literal text."""
        assert scan("100%") == (Segment("100%"),)

    def test_double_marker_before_verb(self) -> None:
        """The second marker of "%%d" starts the directive."""
        assert scan("%%d") == (Segment("%", Directive("d")),)

    def test_modifier_without_verb_is_literal(self) -> None:
        """"%+" followed by a non-verb is literal."""
        assert scan("%+z and %+") == (Segment("%+z and %+"),)

    def test_modified_directive(self) -> None:
        """Modified directives consume the whole token."""
        assert scan("a%+db") == (
            Segment("a", Directive("d", "+")),
            Segment("b"),
        )

    def test_non_ascii_literals(self) -> None:
        """Literals may hold any characters."""
        assert scan("é %s 쎭") == (Segment("é ", Directive("s")), Segment(" 쎭"))


# ============================================================================
# PROPERTIES
# ============================================================================


class TestScanProperties:
    """Property tests for scan()."""

    @given(text=marker_free_text)
    def test_marker_free_text_is_single_literal(self, text: str) -> None:
        """PROPERTY: text without markers is returned as one literal."""
        segments = scan(text)

        if text:
            assert segments == (Segment(text),)
        else:
            assert segments == ()

    @given(text=arbitrary_format_text())
    def test_segments_reassemble_source(self, text: str) -> None:
        """PROPERTY: literals + tokens concatenate back to the input."""
        segments = scan(text)
        event(f"segments={len(segments)}")
        rebuilt = "".join(
            segment.literal + (segment.directive.token if segment.directive else "")
            for segment in segments
        )

        assert rebuilt == text

    @given(text=arbitrary_format_text())
    def test_only_last_segment_lacks_directive(self, text: str) -> None:
        """PROPERTY: a directive-less segment can only be the last one."""
        segments = scan(text)

        for segment in segments[:-1]:
            assert segment.directive is not None

    @given(generated=format_strings())
    def test_generated_directives_recovered(
        self, generated: tuple[str, list[str], list[str]]
    ) -> None:
        """PROPERTY: scanning recovers exactly the directives that were joined in."""
        source, literals, tokens = generated
        segments = scan(source)
        event(f"directives={len(tokens)}")

        found = [s.directive.token for s in segments if s.directive is not None]
        assert found == tokens
        assert [s.literal for s in segments if s.directive is not None] == literals[:-1]
