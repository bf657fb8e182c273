"""Tests for fmtref.directive - parsing directive tokens."""

import pytest

from fmtref.core.errors import ErrorCategory, InvalidDirective, UnsupportedPadding
from fmtref.directive import (
    Alignment,
    ArgumentType,
    FormatDirective,
    PadChar,
    parse_directive,
)


class TestReferenceDirectives:
    """The six argument directives of the reference table."""

    @pytest.mark.parametrize(
        "token,argument_type,width,alignment,pad_char",
        [
            ("%s", ArgumentType.STRING, None, Alignment.RIGHT, PadChar.SPACE),
            ("%-10s", ArgumentType.STRING, 10, Alignment.LEFT, PadChar.SPACE),
            ("%10s", ArgumentType.STRING, 10, Alignment.RIGHT, PadChar.SPACE),
            ("%d", ArgumentType.INTEGER, None, Alignment.RIGHT, PadChar.SPACE),
            ("%5d", ArgumentType.INTEGER, 5, Alignment.RIGHT, PadChar.SPACE),
            ("%05d", ArgumentType.INTEGER, 5, Alignment.RIGHT, PadChar.ZERO),
        ],
    )
    def test_fields(self, token, argument_type, width, alignment, pad_char):
        d = parse_directive(token)
        assert d.token == token
        assert d.argument_type is argument_type
        assert d.width == width
        assert d.alignment is alignment
        assert d.pad_char is pad_char

    @pytest.mark.parametrize("token", ["%s", "%-10s", "%10s", "%d", "%5d", "%05d", "%-3d", "%010d"])
    def test_native_spec_round_trips_token(self, token):
        """The native spec of a canonical token is the token itself."""
        assert parse_directive(token).native_spec == token

    def test_parse_is_deterministic(self):
        assert parse_directive("%-10s") == parse_directive("%-10s")

    def test_directive_is_frozen(self):
        d = parse_directive("%5d")
        with pytest.raises(AttributeError):
            d.width = 6  # type: ignore[misc]

    def test_to_dict(self):
        assert parse_directive("%05d").to_dict() == {
            "token": "%05d",
            "argument_type": "integer",
            "width": 5,
            "alignment": "right",
            "pad_char": "zero",
        }

    def test_left_aligned_integer(self):
        d = parse_directive("%-4d")
        assert d.alignment is Alignment.LEFT
        assert d.pad_char is PadChar.SPACE

    def test_constructed_directive(self):
        d = FormatDirective("%7s", ArgumentType.STRING, width=7)
        assert d.native_spec == "%7s"
        assert d.conversion == "s"


class TestInvalidDirectives:
    """Tokens outside the supported vocabulary."""

    @pytest.mark.parametrize(
        "token",
        ["%x", "%f", "%S", "%c", "%10.5s", "%1$s", "%+d", "%,d", "%#d", "% d", "hello", "%", "%5", "s"],
    )
    def test_rejected(self, token):
        with pytest.raises(InvalidDirective) as exc_info:
            parse_directive(token)
        assert exc_info.value.token == token
        assert exc_info.value.context.token == token

    @pytest.mark.parametrize("token", ["%abs", "%1os", "%x5d"])
    def test_non_numeric_width(self, token):
        with pytest.raises(InvalidDirective, match="width must be a non-negative integer"):
            parse_directive(token)

    def test_left_flag_without_width(self):
        with pytest.raises(InvalidDirective, match="requires a width"):
            parse_directive("%-d")

    def test_zero_flag_without_width(self):
        with pytest.raises(InvalidDirective, match="requires a width"):
            parse_directive("%0d")

    def test_left_and_zero_flags(self):
        with pytest.raises(InvalidDirective, match="cannot be combined"):
            parse_directive("%-05d")

    def test_duplicate_flag(self):
        with pytest.raises(InvalidDirective, match="duplicate flag"):
            parse_directive("%--5d")

    @pytest.mark.parametrize("token", ["%n", "%%"])
    def test_template_level_tokens(self, token):
        with pytest.raises(InvalidDirective, match="takes no argument"):
            parse_directive(token)

    def test_syntax_category(self):
        with pytest.raises(InvalidDirective) as exc_info:
            parse_directive("%q")
        assert exc_info.value.category == ErrorCategory.SYNTAX


class TestZeroPaddingOnStrings:
    """Zero padding is only defined for integer directives."""

    @pytest.mark.parametrize("token", ["%05s", "%010s", "%0s"])
    def test_unsupported_padding(self, token):
        with pytest.raises(UnsupportedPadding) as exc_info:
            parse_directive(token)
        assert exc_info.value.category == ErrorCategory.PADDING

    def test_unsupported_padding_is_invalid_directive(self):
        with pytest.raises(InvalidDirective):
            parse_directive("%05s")
