"""Tests for fmtref.reference - reference table, descriptions and demonstrations."""

import pytest

from fmtref.core.errors import InvalidDirective, UnsupportedPadding
from fmtref.reference import (
    DEMONSTRATIONS,
    REFERENCE_TABLE,
    Demonstration,
    describe,
    reference_entry,
    run_demonstrations,
)


class TestReferenceTable:
    def test_tokens_in_order(self):
        assert [e.token for e in REFERENCE_TABLE] == ["%n", "%s", "%-10s", "%10s", "%d", "%5d", "%05d"]

    def test_line_separator_row(self):
        row = REFERENCE_TABLE[0]
        assert row.argument is None
        assert row.width is None
        assert "line terminator" in row.behavior

    @pytest.mark.parametrize(
        "token,argument,width,alignment,pad",
        [
            ("%s", "string", None, None, None),
            ("%-10s", "string", 10, "left", "space"),
            ("%10s", "string", 10, "right", "space"),
            ("%d", "integer", None, None, None),
            ("%5d", "integer", 5, "right", "space"),
            ("%05d", "integer", 5, "right", "zero"),
        ],
    )
    def test_rows(self, token, argument, width, alignment, pad):
        row = reference_entry(token)
        assert (row.argument, row.width, row.alignment, row.pad) == (argument, width, alignment, pad)

    def test_to_dict_keys(self):
        assert list(REFERENCE_TABLE[2].to_dict()) == ["token", "argument", "width", "alignment", "pad", "behavior"]


class TestDescribe:
    @pytest.mark.parametrize(
        "token,text",
        [
            ("%-10s", "Left-aligns a string in a field of width 10, padding with spaces on the right."),
            ("%10s", "Right-aligns a string in a field of width 10, padding with spaces on the left."),
            ("%5d", "Right-aligns an integer in a field of width 5, padding with spaces on the left."),
            ("%05d", "Right-aligns an integer in a field of width 5, padding with zeros on the left."),
            ("%s", "Renders a string unchanged."),
            ("%d", "Renders an integer as decimal digits, without padding."),
            ("%%", "Writes a literal percent sign; takes no argument."),
        ],
    )
    def test_describe(self, token, text):
        assert describe(token) == text

    def test_describe_invalid(self):
        with pytest.raises(InvalidDirective):
            describe("%y")

    def test_describe_zero_padded_string(self):
        with pytest.raises(UnsupportedPadding):
            describe("%05s")


class TestDemonstrations:
    def test_all_demonstrations_match(self, stream):
        outcomes = run_demonstrations(stream)
        assert len(outcomes) == len(DEMONSTRATIONS)
        assert all(o.matched for o in outcomes)
        assert all(o.error is None for o in outcomes)

    def test_printed_back_to_back(self, stream):
        run_demonstrations(stream, line_separator="\n")
        assert stream.getvalue() == "Hello\nWorld!\ncharan    hari      haricharan5    500005"

    def test_expected_follows_line_separator(self, stream):
        outcomes = run_demonstrations(stream, line_separator="\r\n")
        assert outcomes[0].actual == "Hello\r\nWorld!\r\n"
        assert outcomes[0].matched

    def test_mismatch_is_reported(self, stream):
        wrong = Demonstration("%5d", (5,), "5")
        [outcome] = run_demonstrations(stream, demonstrations=(wrong,))
        assert outcome.matched is False
        assert outcome.actual == "    5"

    def test_error_is_reported_not_raised(self, stream):
        broken = Demonstration("%05s", ("x",), "0000x")
        [outcome] = run_demonstrations(stream, demonstrations=(broken,))
        assert outcome.matched is False
        assert outcome.actual is None
        assert isinstance(outcome.error, UnsupportedPadding)
