"""
cppc Error Hierarchy
====================

This module defines the root of the exception hierarchy for cppc and the
source location type shared by every stage of the pipeline.

All exceptions inherit from CppcError, allowing callers to catch every
cppc-related error with a single except clause if desired. The concrete
compiler errors live in :mod:`cppc.compiler.errors`.

Exception Hierarchy
-------------------
CppcError (base)
└── CompilerError (cppc.compiler.errors)
    ├── LexerError
    ├── ParseError
    ├── CodeGenError
    └── UnknownTargetError

Design Philosophy
-----------------
Each exception captures source location information when applicable, so
the message can point the user straight at the offending text.

Error messages follow this format:
    filename:row:column: error: description
        source_line
        ^
    hint: suggestion

Example:
    >>> try:
    ...     compile_source('int mian() { }')
    ... except CppcError as e:
    ...     print(e)
    <input>:1:5: error: Invalid function name: "mian". Expected "main"
"""

from dataclasses import dataclass


class CppcError(Exception):
    """
    Base exception for all cppc errors.

    Catch this to handle any error raised by the scanner, parser,
    code generators or target selection.
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A position in source text.

    Rows and columns are zero-based internally and rendered one-based for
    humans. The frozen design ensures a location cannot change once it
    has been attached to a token.

    Attributes:
        row: Line index (0-indexed)
        column: Offset from the start of the line (0-indexed)
        filename: Name of the source file (or "<input>" for string input)
    """
    row: int
    column: int
    filename: str = "<input>"

    @property
    def line(self) -> int:
        """One-based line number."""
        return self.row + 1

    def display(self) -> str:
        """Format as '(row: R, col: C)', one-based."""
        return f"(row: {self.row + 1}, col: {self.column + 1})"

    def __str__(self) -> str:
        """Format as 'filename:row:column' (one-based) for error messages."""
        return f"{self.filename}:{self.row + 1}:{self.column + 1}"
