# =============================================================================
# test_lexer.py - Scanner Unit Tests
# =============================================================================
# Tests for the cppc scanner.
#
# Test coverage includes:
#   - Keywords, identifiers, numbers, delimiters
#   - Raw string literals (no escapes, newlines allowed)
#   - `#` and `//` comments
#   - Zero-based row/column tracking and the single EOF token
#   - Error conditions: unterminated string, unknown character
# =============================================================================

import pytest

from cppc.errors import SourceLocation
from cppc.compiler.lexer import Lexer, Token, TokenKind, scan
from cppc.compiler.errors import (
    LexerError,
    UnterminatedStringError,
    UnknownCharacterError,
)


# =============================================================================
# Helper Function
# =============================================================================

def tokenize(source: str) -> list[Token]:
    """Scan and drop the trailing EOF token."""
    tokens = scan(source, "<test>")
    assert tokens[-1].kind == TokenKind.EOF
    return tokens[:-1]


def kinds(source: str) -> list[TokenKind]:
    return [t.kind for t in tokenize(source)]


# =============================================================================
# Basic Token Recognition Tests
# =============================================================================

class TestBasicTokens:
    """Test basic token recognition."""

    def test_empty_source(self):
        """Empty source should produce only EOF."""
        tokens = scan("")
        assert len(tokens) == 1
        assert tokens[0].kind == TokenKind.EOF
        assert tokens[0].text == ""
        assert tokens[0].location == SourceLocation(0, 0)

    def test_whitespace_only(self):
        """Whitespace produces no tokens; EOF sits at the final cursor."""
        tokens = scan("   \n\t  \n  ")
        assert len(tokens) == 1
        assert tokens[0].location.row == 2
        assert tokens[0].location.column == 2

    def test_keywords(self):
        """All five keywords have their own kinds."""
        assert kinds("printf int return if else") == [
            TokenKind.PRINTF,
            TokenKind.INT,
            TokenKind.RETURN,
            TokenKind.IF,
            TokenKind.ELSE,
        ]

    def test_identifiers(self):
        tokens = tokenize("main foo1 Bar")
        assert [t.kind for t in tokens] == [TokenKind.IDENTIFIER] * 3
        assert [t.text for t in tokens] == ["main", "foo1", "Bar"]

    def test_keyword_prefix_is_identifier(self):
        """Identifiers are scanned greedily before the keyword lookup."""
        tokens = tokenize("printfx returned")
        assert [t.kind for t in tokens] == [TokenKind.IDENTIFIER, TokenKind.IDENTIFIER]

    def test_keywords_are_case_sensitive(self):
        assert kinds("INT Printf") == [TokenKind.IDENTIFIER, TokenKind.IDENTIFIER]

    def test_delimiters(self):
        assert kinds("(){},;") == [
            TokenKind.LEFT_PAREN,
            TokenKind.RIGHT_PAREN,
            TokenKind.LEFT_BRACE,
            TokenKind.RIGHT_BRACE,
            TokenKind.COMMA,
            TokenKind.SEMICOLON,
        ]

    def test_delimiter_text(self):
        assert [t.text for t in tokenize("( ;")] == ["(", ";"]


# =============================================================================
# Number Tests
# =============================================================================

class TestNumbers:
    """Only unsigned decimal integers are recognised."""

    def test_decimal(self):
        tokens = tokenize("42")
        assert tokens[0].kind == TokenKind.NUMBER
        assert tokens[0].text == "42"

    def test_leading_zeros_kept_in_text(self):
        assert tokenize("007")[0].text == "007"

    def test_number_then_identifier(self):
        """Digits stop at the first non-digit."""
        tokens = tokenize("12ab")
        assert [(t.kind, t.text) for t in tokens] == [
            (TokenKind.NUMBER, "12"),
            (TokenKind.IDENTIFIER, "ab"),
        ]

    def test_minus_sign_is_not_a_number(self):
        with pytest.raises(UnknownCharacterError):
            scan("-1")


# =============================================================================
# String Literal Tests
# =============================================================================

class TestStrings:
    """Strings are raw: no escape processing."""

    def test_simple_string(self):
        tokens = tokenize('"hello world"')
        assert tokens[0].kind == TokenKind.STRING
        assert tokens[0].text == "hello world"

    def test_empty_string(self):
        assert tokenize('""')[0].text == ""

    def test_backslash_is_kept(self):
        """A backslash sequence stays two characters."""
        assert tokenize(r'"a\nb"')[0].text == "a\\nb"

    def test_string_spans_lines(self):
        tokens = tokenize('"a\nb" x')
        assert tokens[0].text == "a\nb"
        assert tokens[1].location == SourceLocation(1, 3, "<test>")

    def test_comment_markers_inside_string(self):
        assert tokenize('"# not // a comment"')[0].text == "# not // a comment"

    def test_string_location_is_opening_quote(self):
        tokens = tokenize('printf("hi")')
        assert tokens[2].location == SourceLocation(0, 7, "<test>")


# =============================================================================
# Comment Tests
# =============================================================================

class TestComments:
    """Line comments introduced by # or //."""

    def test_hash_comment(self):
        tokens = tokenize("# comment\n42")
        assert len(tokens) == 1
        assert tokens[0].text == "42"
        assert tokens[0].location == SourceLocation(1, 0, "<test>")

    def test_slash_comment(self):
        tokens = tokenize("// comment\n42")
        assert len(tokens) == 1
        assert tokens[0].location.row == 1

    def test_trailing_comment_without_newline(self):
        tokens = scan("42 // the end")
        assert [t.kind for t in tokens] == [TokenKind.NUMBER, TokenKind.EOF]

    def test_include_line_is_a_comment(self):
        """`#include` lines are skipped like any other # comment."""
        assert kinds("#include <stdio.h>\nint") == [TokenKind.INT]

    def test_single_slash_is_unknown(self):
        with pytest.raises(UnknownCharacterError) as exc_info:
            scan("1 / 2")
        assert exc_info.value.char == "/"


# =============================================================================
# Location Tests
# =============================================================================

class TestLocations:
    """Rows and columns are zero-based."""

    def test_token_locations(self):
        source = "int main() {\n  return 2;\n}"
        tokens = scan(source)
        positions = [(t.text, t.location.row, t.location.column) for t in tokens]
        assert positions == [
            ("int", 0, 0),
            ("main", 0, 4),
            ("(", 0, 8),
            (")", 0, 9),
            ("{", 0, 11),
            ("return", 1, 2),
            ("2", 1, 9),
            (";", 1, 10),
            ("}", 2, 0),
            ("", 2, 1),
        ]

    def test_filename_attached(self):
        tokens = scan("int", "hello.cpp")
        assert tokens[0].location.filename == "hello.cpp"

    def test_location_display_is_one_based(self):
        assert SourceLocation(0, 4).display() == "(row: 1, col: 5)"
        assert str(SourceLocation(2, 0, "a.cpp")) == "a.cpp:3:1"

    def test_token_display(self):
        token = Token(TokenKind.INT, "int", SourceLocation(0, 0))
        assert token.display() == "Token { type: INT, value: 'int', location: (row: 1, col: 1) }"

    @pytest.mark.parametrize("source", [
        "",
        "int main() {}",
        "# only a comment",
        'int main() { printf("a"); return 0; }\n\n',
    ])
    def test_exactly_one_eof(self, source):
        tokens = scan(source)
        eofs = [t for t in tokens if t.kind == TokenKind.EOF]
        assert len(eofs) == 1
        assert tokens[-1].kind == TokenKind.EOF


# =============================================================================
# Error Tests
# =============================================================================

class TestErrors:
    """Lexical errors carry row, column and source line."""

    def test_unterminated_string(self):
        with pytest.raises(UnterminatedStringError) as exc_info:
            scan('printf("hi')
        error = exc_info.value
        assert error.location == SourceLocation(0, 6)
        assert error.source_line == 'printf("hi'
        assert "You forgot to close the string!" in str(error)

    def test_unterminated_string_reports_opening_line(self):
        source = 'int\n  printf("abc\nmore'
        with pytest.raises(UnterminatedStringError) as exc_info:
            scan(source)
        error = exc_info.value
        assert error.location.row == 1
        assert error.location.column == 9
        assert error.source_line == '  printf("abc'

    def test_unknown_character(self):
        with pytest.raises(UnknownCharacterError) as exc_info:
            scan("int @", "t.cpp")
        error = exc_info.value
        assert error.char == "@"
        assert error.location == SourceLocation(0, 4, "t.cpp")
        assert str(error) == "t.cpp:1:5: error: Unknown token '@'\n    int @\n        ^"

    def test_unknown_character_on_later_line(self):
        with pytest.raises(UnknownCharacterError) as exc_info:
            scan("int\nmain $")
        assert exc_info.value.location == SourceLocation(1, 5)
        assert exc_info.value.source_line == "main $"

    def test_underscore_is_unknown(self):
        with pytest.raises(UnknownCharacterError):
            scan("my_name")

    def test_non_ascii_letter_is_unknown(self):
        with pytest.raises(UnknownCharacterError):
            scan("café")

    def test_errors_are_lexer_errors(self):
        with pytest.raises(LexerError):
            scan('"open')

    def test_lexer_is_reusable(self):
        lexer = Lexer("int main")
        assert lexer.tokenize() == lexer.tokenize()
