"""
Scanner (Lexer)
===============

This module converts source text into the ordered list of tokens the
parser consumes. The scanner makes a single forward pass over the input
and never re-reads earlier positions except to slice the current lexeme.

Token Categories
----------------
- Keywords: printf, int, return, if, else
- Identifiers: an ASCII letter followed by ASCII letters or digits
- Numbers: unsigned decimal integers only (no sign, point or exponent)
- Strings: "double quoted", raw, no escape processing
- Delimiters: ( ) { } , ;

Comments
--------
- `# comment` and `// comment`, both running to the end of the line

Locations
---------
Every token carries a zero-based SourceLocation of its first character.
The row increments and the column resets each time the cursor passes a
newline, including newlines inside strings and comments.

Example Usage
-------------
>>> from cppc.compiler.lexer import scan
>>> for token in scan('int main() { return 2; }'):
...     print(token.display())
Token { type: INT, value: 'int', location: (row: 1, col: 1) }
Token { type: IDENTIFIER, value: 'main', location: (row: 1, col: 5) }
...
Token { type: EOF, value: '', location: (row: 1, col: 25) }
"""

from dataclasses import dataclass
from enum import Enum, auto
import logging
import string

from cppc.errors import SourceLocation
from cppc.compiler.errors import UnterminatedStringError, UnknownCharacterError

logger = logging.getLogger(__name__)


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """Closed set of token kinds produced by the scanner."""

    # === Delimiters ===
    LEFT_PAREN = auto()     # (
    RIGHT_PAREN = auto()    # )
    LEFT_BRACE = auto()     # {
    RIGHT_BRACE = auto()    # }
    SEMICOLON = auto()      # ;
    COMMA = auto()          # ,

    # === Identifiers and Literals ===
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # === Keywords ===
    PRINTF = auto()
    RETURN = auto()
    IF = auto()             # reserved, no grammar rule yet
    ELSE = auto()           # reserved, no grammar rule yet
    INT = auto()

    # === Structural ===
    EOF = auto()


# Single-character delimiters
DELIMITERS: dict[str, TokenKind] = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
}

KEYWORDS: dict[str, TokenKind] = {
    "printf": TokenKind.PRINTF,
    "int": TokenKind.INT,
    "return": TokenKind.RETURN,
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single lexical unit.

    Attributes:
        kind: The TokenKind classification
        text: The exact lexeme; for strings the content between the quotes,
              for EOF the empty string
        location: Where the token starts
    """
    kind: TokenKind
    text: str
    location: SourceLocation

    def display(self) -> str:
        """Human readable form used in diagnostics and the --tokens dump."""
        return (
            f"Token {{ type: {self.kind.name}, value: '{self.text}', "
            f"location: {self.location.display()} }}"
        )

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}, {self.location.row}:{self.location.column})"


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes cppc source text.

    Usage:
        lexer = Lexer(source_text, filename)
        tokens = lexer.tokenize()

    Attributes:
        source: The source text being tokenized
        filename: Name of the source file (for error reporting)
    """

    IDENT_START = string.ascii_letters
    IDENT_CHARS = string.ascii_letters + string.digits

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename

        # Cursor and line tracking
        self._pos = 0
        self._row = 0
        self._line_start_pos = 0

        # Start of the lexeme being scanned
        self._start = 0

        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """
        Scan the whole source.

        Returns:
            Token list terminated by exactly one EOF token

        Raises:
            LexerError: On an unterminated string or unknown character
        """
        self._pos = 0
        self._row = 0
        self._line_start_pos = 0
        self._tokens = []

        while not self._at_end():
            self._start = self._pos
            self._scan_token()

        self._tokens.append(Token(TokenKind.EOF, "", self._location()))
        logger.debug("%s: scanned %d tokens", self.filename, len(self._tokens))
        return self._tokens

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.source)

    def _peek(self, offset: int = 0) -> str:
        """Character at cursor + offset, or empty string past the end."""
        pos = self._pos + offset
        if pos >= len(self.source):
            return ""
        return self.source[pos]

    def _advance(self) -> str:
        """Consume one character, updating row and line start on newline."""
        if self._at_end():
            return ""

        char = self.source[self._pos]
        self._pos += 1

        if char == "\n":
            self._row += 1
            self._line_start_pos = self._pos

        return char

    def _column(self) -> int:
        return self._pos - self._line_start_pos

    def _location(self) -> SourceLocation:
        return SourceLocation(self._row, self._column(), self.filename)

    def _line_at(self, line_start: int) -> str:
        """Source text of the line starting at line_start."""
        line_end = self.source.find("\n", line_start)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[line_start:line_end]

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self) -> None:
        char = self._peek()
        location = self._location()

        if char.isspace():
            self._advance()
            return

        if char == "#" or (char == "/" and self._peek(1) == "/"):
            self._skip_line()
            return

        if char == '"':
            self._scan_string(location)
        elif char in DELIMITERS:
            self._advance()
            self._tokens.append(Token(DELIMITERS[char], char, location))
        elif char in self.IDENT_START:
            self._scan_identifier(location)
        elif char in string.digits:
            self._scan_number(location)
        else:
            raise UnknownCharacterError(
                char,
                location,
                self._line_at(self._line_start_pos),
            )

    def _skip_line(self) -> None:
        """Skip a comment through its terminating newline."""
        while not self._at_end() and self._peek() != "\n":
            self._advance()
        self._advance()

    def _scan_identifier(self, location: SourceLocation) -> None:
        while not self._at_end() and self._peek() in self.IDENT_CHARS:
            self._advance()

        name = self.source[self._start:self._pos]
        kind = KEYWORDS.get(name, TokenKind.IDENTIFIER)
        self._tokens.append(Token(kind, name, location))

    def _scan_number(self, location: SourceLocation) -> None:
        while not self._at_end() and self._peek() in string.digits:
            self._advance()

        self._tokens.append(
            Token(TokenKind.NUMBER, self.source[self._start:self._pos], location)
        )

    def _scan_string(self, location: SourceLocation) -> None:
        """
        Scan a double-quoted string literal.

        Characters are taken raw up to the closing quote, newlines included.
        """
        quote_line_start = self._line_start_pos
        self._advance()  # consume opening "
        content_start = self._pos

        while not self._at_end() and self._peek() != '"':
            self._advance()

        if self._at_end():
            raise UnterminatedStringError(location, self._line_at(quote_line_start))

        value = self.source[content_start:self._pos]
        self._advance()  # consume closing "
        self._tokens.append(Token(TokenKind.STRING, value, location))


def scan(source: str, filename: str = "<input>") -> list[Token]:
    """
    Convenience function to tokenize source text.

    Args:
        source: Source text
        filename: Source filename for error messages

    Returns:
        Token list terminated by exactly one EOF token
    """
    return Lexer(source, filename).tokenize()
