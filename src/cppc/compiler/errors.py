"""
Compiler Error Hierarchy
========================

This module defines the exceptions raised by the cppc pipeline. All of
them inherit from CompilerError, which itself inherits from CppcError.

Exception Hierarchy
-------------------
CompilerError (base for all pipeline errors)
├── LexerError - scanner errors
│   ├── UnterminatedStringError - missing closing quote
│   └── UnknownCharacterError - character no rule accepts
├── ParseError - structural errors
│   ├── MissingTokenError - expected construct not found
│   ├── InvalidFunctionNameError - function is not called main
│   └── UnexpectedTokenError - token cannot start a statement
├── CodeGenError - backend cannot handle a statement
└── UnknownTargetError - no backend with that name

Every error is fatal. The scanner and parser raise on the first problem
they find and never return a partial result.

Error Message Format
--------------------
    filename:row:column: error: description
        source_line_text
        ^
    hint: suggestion for fixing

Example:
    main.cpp:1:9: error: You forgot to close the string!
        printf("hi);
               ^
    hint: add closing '"' to complete the string
"""

from typing import Optional

from cppc.errors import CppcError, SourceLocation


# =============================================================================
# Base Compiler Exception
# =============================================================================

class CompilerError(CppcError):
    """
    Base exception for all compiler errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred
        hint: A suggestion for fixing the error
        source_line: The actual source text at the error location
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            main.cpp:3:5: error: Unexpected 'puts'
                puts("hi");
                ^
        """
        parts = []

        # Location prefix: filename:row:column: error: message
        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            padding = " " * (4 + self.location.column)
            parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Lexical Errors
# =============================================================================

class LexerError(CompilerError):
    """
    Lexical error in the source text.

    Lexical errors always carry a row, a column and the offending source
    line so they can be rendered with a caret.
    """
    pass


class UnterminatedStringError(LexerError):
    """
    String literal not closed before the end of input.

    Example:
        printf("hello);    // Missing closing quote
    """

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "You forgot to close the string!",
            location=location,
            hint="add closing '\"' to complete the string",
            source_line=source_line,
        )


class UnknownCharacterError(LexerError):
    """Character that matches no scanning rule."""

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"Unknown token '{char}'",
            location=location,
            source_line=source_line,
        )


# =============================================================================
# Structural Errors (Parser)
# =============================================================================

class ParseError(CompilerError):
    """
    Structural error in the token sequence.

    Raised when the tokens do not form the fixed `int main() { ... }`
    skeleton or a body statement is malformed.
    """
    pass


class MissingTokenError(ParseError):
    """
    An expected construct was not found.

    The message is the fixed text for the expected construct. When the
    token sequence ran out before the check, there is no location and the
    hint says so.
    """

    def __init__(
        self,
        expected: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        hint: Optional[str] = None,
    ):
        self.expected = expected
        super().__init__(
            expected,
            location=location,
            hint=hint,
            source_line=source_line,
        )


class InvalidFunctionNameError(ParseError):
    """The single function is not named `main`."""

    def __init__(
        self,
        name: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.name = name
        super().__init__(
            f'Invalid function name: "{name}". Expected "main"',
            location=location,
            source_line=source_line,
        )


class UnexpectedTokenError(ParseError):
    """A body token that cannot start a statement."""

    def __init__(
        self,
        found: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.found = found
        super().__init__(
            f"Unexpected '{found}'",
            location=location,
            hint="statements must start with 'printf' or 'return'",
            source_line=source_line,
        )


# =============================================================================
# Code Generation and Target Errors
# =============================================================================

class CodeGenError(CompilerError):
    """
    A backend was handed a statement it cannot translate.

    Parser output never triggers this; it guards hand-built statement
    sequences.
    """
    pass


class UnknownTargetError(CompilerError):
    """No backend is registered under the requested target name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f'Unknown target "{name}"',
            hint="Maybe try: --target list",
        )
