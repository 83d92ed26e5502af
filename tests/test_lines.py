"""Tests for line classification and the directive grammar."""

import pytest

from eso_addon_manifest.parsing.lines import (
    DirectiveMatch,
    LineType,
    classify_line,
    match_directive,
)


class TestClassifyLine:
    """Test line categorization."""

    @pytest.mark.parametrize(
        "line",
        ["## Title: MyAddon", "## Credits: someone", "## ", "## no separator"],
    )
    def test_directive_lines(self, line: str) -> None:
        """Test that lines starting with '## ' are directives."""
        assert classify_line(line) is LineType.DIRECTIVE

    @pytest.mark.parametrize(
        "line",
        ["# a comment", "##Title: NoSpace", "#", "; semicolon comment", ";"],
    )
    def test_comment_lines(self, line: str) -> None:
        """Test that other '#' and ';' lines are comments."""
        assert classify_line(line) is LineType.COMMENT

    @pytest.mark.parametrize("line", ["", "   ", "\t", " \t "])
    def test_blank_lines(self, line: str) -> None:
        """Test that whitespace-only lines are blank."""
        assert classify_line(line) is LineType.BLANK

    @pytest.mark.parametrize(
        "line", ["MyAddon.lua", "Bindings.xml", "  ## Title: Indented", "lang/$(language).lua"]
    )
    def test_data_lines(self, line: str) -> None:
        """Test that anything else is data."""
        assert classify_line(line) is LineType.DATA


class TestMatchDirective:
    """Test splitting directive lines into name and value."""

    def test_simple_directive(self) -> None:
        """Test a plain name/value directive."""
        assert match_directive("## Title: MyAddon") == DirectiveMatch("Title", "MyAddon")

    def test_value_keeps_colons_and_spaces(self) -> None:
        """Test that the value is everything after the first separator."""
        match = match_directive("## Description: Note: this has: colons  ")
        assert match == DirectiveMatch("Description", "Note: this has: colons  ")

    def test_name_ends_at_first_separator(self) -> None:
        """Test that the shortest name is taken."""
        match = match_directive("## A: B: C")
        assert match is not None
        assert match.name == "A"
        assert match.value == "B: C"

    def test_empty_value(self) -> None:
        """Test that an empty value is still a valid directive."""
        assert match_directive("## Version: ") == DirectiveMatch("Version", "")

    def test_missing_separator(self) -> None:
        """Test that a directive without ': ' does not match."""
        assert match_directive("## Title:MyAddon") is None
        assert match_directive("## Title:") is None
        assert match_directive("## Title") is None

    def test_empty_name(self) -> None:
        """Test that a directive with an empty name still matches."""
        assert match_directive("## : value") == DirectiveMatch(name="", value="value")
        assert match_directive("## : ") == DirectiveMatch(name="", value="")

    def test_non_directive_line(self) -> None:
        """Test that lines without the prefix never match."""
        assert match_directive("# Title: MyAddon") is None
