"""
Structural Parser
=================

This module turns the scanner's token list into the ordered list of
statements of the single `main` function.

The grammar is fixed-shape rather than a general declaration grammar:

Grammar
-------
program     ::= 'int' 'main' '(' ')' '{' statement* '}' EOF
statement   ::= print_stmt | return_stmt
print_stmt  ::= 'printf' '(' STRING ')' ';'
return_stmt ::= 'return' NUMBER ';'

Parsing Strategy
----------------
The tokens are held in a deque and consumed from both ends:

1. The five skeleton tokens `int main ( ) {` are checked and removed
   from the front.
2. EOF and the closing `}` are checked and removed from the back.
3. Whatever remains is the body, consumed from the front one statement at
   a time until the deque is empty.

Every check raises on failure with a fixed message for the construct it
expected; nothing is recovered and no partial result is returned.

Example Usage
-------------
>>> from cppc.compiler.lexer import scan
>>> from cppc.compiler.parser import parse
>>> parse(scan('int main() { printf("hi"); return 2; }'))
[PrintStatement(literal='hi'), ReturnStatement(code=2)]
"""

from collections import deque
from typing import Optional, Sequence
import logging

from cppc.compiler.lexer import Token, TokenKind
from cppc.compiler.ast import Statement, PrintStatement, ReturnStatement
from cppc.compiler.errors import (
    MissingTokenError,
    InvalidFunctionNameError,
    UnexpectedTokenError,
)

logger = logging.getLogger(__name__)


class Errors:
    """Fixed message for every construct the parser can expect."""
    EXPECT_INT = "Expected type annotation for main function"
    FUNCTION_NAME = "Expected function name"
    LEFT_PAREN = "Expected '('"
    RIGHT_PAREN = "Expected ')'"
    LEFT_BRACE = "Expected '{'"
    RIGHT_BRACE = "Expected '}'"
    SEMICOLON = "Expected ';'"
    STRING = "Expected string literal"
    RETURN_CODE = "Expected return code"
    NO_MORE_TOKENS = "No more tokens to parse!"
    EOF = "Expected EOF token at the end"


class Parser:
    """
    Parser for the fixed `int main() { ... }` program shape.

    Attributes:
        tokens: Deque of tokens not consumed yet
        source_lines: Original source lines for error context
    """

    def __init__(
        self,
        tokens: Sequence[Token],
        source_lines: Optional[list[str]] = None,
    ):
        """
        Initialize the parser.

        Args:
            tokens: Token list from the scanner; it is copied, not modified
            source_lines: Original source lines for error context
        """
        self.tokens: deque[Token] = deque(tokens)
        self.source_lines = source_lines or []

    def parse(self) -> list[Statement]:
        """
        Validate the skeleton and parse the body.

        Returns:
            Statements in source order (possibly empty)

        Raises:
            ParseError: On the first structural violation
        """
        self._parse_skeleton()

        statements = []
        while self.tokens:
            statements.append(self._parse_statement())

        logger.debug("parsed %d statements", len(statements))
        return statements

    # =========================================================================
    # Skeleton
    # =========================================================================

    def _parse_skeleton(self) -> None:
        # Front: int main ( ) {
        self._expect(TokenKind.INT, Errors.EXPECT_INT)

        name = self._expect(TokenKind.IDENTIFIER, Errors.FUNCTION_NAME)
        if name.text != "main":
            raise InvalidFunctionNameError(
                name.text,
                name.location,
                self._get_source_line(name),
            )

        self._expect(TokenKind.LEFT_PAREN, Errors.LEFT_PAREN)
        self._expect(TokenKind.RIGHT_PAREN, Errors.RIGHT_PAREN)
        self._expect(TokenKind.LEFT_BRACE, Errors.LEFT_BRACE)

        # Back: } EOF
        self._expect_back(TokenKind.EOF, Errors.EOF)
        self._expect_back(TokenKind.RIGHT_BRACE, Errors.RIGHT_BRACE)

    # =========================================================================
    # Statements
    # =========================================================================

    def _parse_statement(self) -> Statement:
        token = self.tokens[0]

        if token.kind == TokenKind.PRINTF:
            return self._parse_print()
        if token.kind == TokenKind.RETURN:
            return self._parse_return()

        raise UnexpectedTokenError(
            token.text,
            token.location,
            self._get_source_line(token),
        )

    def _parse_print(self) -> PrintStatement:
        # Keyword already matched by _parse_statement
        start = self.tokens.popleft()
        self._expect(TokenKind.LEFT_PAREN, Errors.LEFT_PAREN)
        literal = self._expect(TokenKind.STRING, Errors.STRING).text
        self._expect(TokenKind.RIGHT_PAREN, Errors.RIGHT_PAREN)
        self._expect(TokenKind.SEMICOLON, Errors.SEMICOLON)
        return PrintStatement(literal, start.location)

    def _parse_return(self) -> ReturnStatement:
        # Keyword already matched by _parse_statement
        start = self.tokens.popleft()
        code = self._expect(TokenKind.NUMBER, Errors.RETURN_CODE).text
        self._expect(TokenKind.SEMICOLON, Errors.SEMICOLON)
        return ReturnStatement(int(code), start.location)

    # =========================================================================
    # Token Access Methods
    # =========================================================================

    def _expect(self, kind: TokenKind, message: str) -> Token:
        """
        Remove and return the front token if it has the expected kind.

        Raises:
            MissingTokenError: If the deque is empty or the kind differs
        """
        if not self.tokens:
            raise MissingTokenError(message, hint=Errors.NO_MORE_TOKENS)

        token = self.tokens[0]
        if token.kind != kind:
            raise MissingTokenError(
                message,
                token.location,
                self._get_source_line(token),
            )
        return self.tokens.popleft()

    def _expect_back(self, kind: TokenKind, message: str) -> Token:
        """Same as _expect, for the back of the deque."""
        if not self.tokens:
            raise MissingTokenError(message, hint=Errors.NO_MORE_TOKENS)

        token = self.tokens[-1]
        if token.kind != kind:
            raise MissingTokenError(
                message,
                token.location,
                self._get_source_line(token),
            )
        return self.tokens.pop()

    def _get_source_line(self, token: Token) -> Optional[str]:
        """Source line of a token for error reporting."""
        if 0 <= token.location.row < len(self.source_lines):
            return self.source_lines[token.location.row]
        return None


def parse(
    tokens: Sequence[Token],
    source_lines: Optional[list[str]] = None,
) -> list[Statement]:
    """
    Convenience function to parse a token list.

    Args:
        tokens: Token list from the scanner
        source_lines: Original source lines for error context

    Returns:
        Statements in source order
    """
    return Parser(tokens, source_lines).parse()
