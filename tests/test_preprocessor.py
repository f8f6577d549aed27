"""
Tests for line preprocessing (literal, comment and tab neutralization).
"""

import pytest

from indentguard.analysis import AnalyzerState, LinePreprocessor


@pytest.fixture
def preprocessor():
    return LinePreprocessor(tab_width=4)


class TestStripLine:
    """Tests for LinePreprocessor.strip_line."""

    def test_plain_code_unchanged(self, preprocessor):
        """Test that code without literals or comments passes through."""
        assert preprocessor.strip_line("    int x = 1;", False) == ("    int x = 1;", False)

    def test_string_contents_blanked(self, preprocessor):
        """Test that braces inside a string literal are replaced by spaces."""
        stripped, _ = preprocessor.strip_line('a = "x{y}";', False)
        assert stripped == 'a = "    ";'

    def test_char_literal_blanked(self, preprocessor):
        """Test that a brace char literal keeps its quotes but loses its content."""
        stripped, _ = preprocessor.strip_line("char c = '}';", False)
        assert stripped == "char c = ' ';"

    def test_escaped_quote_stays_inside_string(self, preprocessor):
        """Test that an escaped quote does not end the literal."""
        stripped, _ = preprocessor.strip_line('c = "a\\"b{";', False)
        assert stripped == 'c = "     ";'

    def test_unterminated_string_runs_to_end(self, preprocessor):
        """Test that an unterminated string blanks the rest of the line."""
        stripped, _ = preprocessor.strip_line('x = "abc {', False)
        assert stripped == 'x = "'

    def test_line_comment_truncated(self, preprocessor):
        """Test that a trailing line comment is removed."""
        assert preprocessor.strip_line("x(); // {", False) == ("x();", False)

    def test_comment_marker_inside_string_ignored(self, preprocessor):
        """Test that // inside a string is not a comment."""
        stripped, _ = preprocessor.strip_line('url = "http://x"; {', False)
        assert stripped.endswith("; {")

    def test_inline_block_comment_keeps_width(self, preprocessor):
        """Test that a closed block comment becomes spaces of equal width."""
        stripped, in_comment = preprocessor.strip_line("a /* b */ c", False)
        assert stripped == "a" + " " * 9 + "c"
        assert not in_comment

    def test_block_comment_opens(self, preprocessor):
        """Test that an unclosed block comment sets the carried state."""
        assert preprocessor.strip_line("x; /* open {", False) == ("x;", True)

    def test_line_inside_block_comment_is_blank(self, preprocessor):
        """Test that a line fully inside a block comment becomes empty."""
        assert preprocessor.strip_line("   still { inside", True) == ("", True)

    def test_block_comment_closes_mid_line(self, preprocessor):
        """Test that code after the closing marker survives with a blank prefix."""
        stripped, in_comment = preprocessor.strip_line("end */ y", True)
        assert stripped == " " * 7 + "y"
        assert not in_comment

    def test_slash_star_slash_does_not_close(self, preprocessor):
        """Test that /*/ opens a comment without closing it."""
        assert preprocessor.strip_line("/*/", False) == ("", True)

    def test_tabs_expanded(self, preprocessor):
        """Test that every tab expands to tab_width spaces."""
        stripped, _ = preprocessor.strip_line("\tx\ty", False)
        assert stripped == "    x    y"

    def test_tab_inside_string_keeps_width(self, preprocessor):
        """Test that a tab inside a literal is blanked at its expanded width."""
        stripped, _ = preprocessor.strip_line('a = "\t";', False)
        assert stripped == 'a = "    ";'

    def test_custom_tab_width(self):
        """Test a non-default tab width."""
        stripped, _ = LinePreprocessor(tab_width=2).strip_line("\t\tx", False)
        assert stripped == "    x"


class TestProcessLine:
    """Tests for process_line and preprocess."""

    def test_line_ending_removed(self, preprocessor):
        """Test that trailing CR/LF are not part of the raw text."""
        line = preprocessor.process_line("  x;\r\n", 3, AnalyzerState())
        assert line.raw_text == "  x;"
        assert line.index == 3
        assert line.indent_width == 2

    def test_state_carried_across_lines(self, preprocessor):
        """Test that block comment state flows from one line to the next."""
        state = AnalyzerState()
        lines = preprocessor.preprocess(["a; /*", "{ junk }", "*/ b;"], state)

        assert [line.stripped_text for line in lines] == ["a;", "", "   b;"]
        assert not state.is_in_block_comment

    def test_unterminated_block_comment(self, preprocessor):
        """Test that an unterminated block comment leaves the state open."""
        state = AnalyzerState()
        lines = preprocessor.preprocess(["x; /* never closed", "  {", "  }"], state)

        assert state.is_in_block_comment
        assert all(line.is_blank for line in lines[1:])

    def test_invalid_tab_width(self):
        """Test that a non-positive tab width is rejected."""
        with pytest.raises(ValueError):
            LinePreprocessor(tab_width=0)
