"""
Statement Model
===============

This module defines the statements the parser produces and both backends
consume. The model is deliberately flat: a program is an ordered list of
statements inside the mandatory `main`, with no nesting, scoping or
symbol table.

Statement Kinds
---------------
Statement (base)
├── PrintStatement - write a constant string to standard output
└── ReturnStatement - terminate the process with an exit code

StatementKind also reserves IF and ELSE. The scanner recognises the `if`
and `else` keywords, but there is no statement class and no parsing rule
for them, so no code path can construct one.

Design Notes
------------
- All statements are frozen dataclasses (immutable value objects)
- Each statement remembers where it started, for diagnostics only; the
  location does not take part in equality
- Backends walk the program with a StatementVisitor
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar, Optional

from cppc.errors import SourceLocation
from cppc.compiler.errors import CodeGenError


class StatementKind(Enum):
    """Tags of the statement variant type."""
    PRINT = auto()
    RETURN = auto()
    IF = auto()     # reserved
    ELSE = auto()   # reserved


# =============================================================================
# Statement Nodes
# =============================================================================

class Statement:
    """
    Base class for all statements.

    Subclasses set `kind` and are frozen dataclasses.
    """
    kind: ClassVar[StatementKind]


@dataclass(frozen=True)
class PrintStatement(Statement):
    """
    printf("literal");

    Attributes:
        literal: Text written verbatim, exactly as it appeared between the
                 quotes in the source
    """
    kind: ClassVar[StatementKind] = StatementKind.PRINT

    literal: str
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class ReturnStatement(Statement):
    """
    return <digits>;

    Attributes:
        code: Process exit code; non-negative, magnitude not checked
    """
    kind: ClassVar[StatementKind] = StatementKind.RETURN

    code: int
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)


# =============================================================================
# Visitor
# =============================================================================

class StatementVisitor:
    """
    Base class for walking a program.

    `visit` dispatches to `visit_<ClassName>`. Statements without a
    matching method raise CodeGenError.
    """

    def visit(self, statement: Statement):
        method_name = f"visit_{statement.__class__.__name__}"
        visitor = getattr(self, method_name, None)
        if visitor is None:
            return self.generic_visit(statement)
        return visitor(statement)

    def generic_visit(self, statement: Statement):
        raise CodeGenError(
            f"unsupported statement {statement.__class__.__name__}",
            location=getattr(statement, "location", None),
        )

    def visit_PrintStatement(self, statement: PrintStatement): return self.generic_visit(statement)
    def visit_ReturnStatement(self, statement: ReturnStatement): return self.generic_visit(statement)


# =============================================================================
# Statement Pretty Printer
# =============================================================================

class StatementPrinter(StatementVisitor):
    """
    Pretty printer for debugging.

    Usage:
        printer = StatementPrinter()
        print(printer.print(statements))
    """

    def __init__(self):
        self.output: list[str] = []

    def print(self, statements: list[Statement]) -> str:
        """Render the program and return it as a string."""
        self.output = ["Program"]
        for statement in statements:
            self.visit(statement)
        return "\n".join(self.output)

    def visit_PrintStatement(self, statement: PrintStatement):
        self.output.append(f'  Print "{statement.literal}"')

    def visit_ReturnStatement(self, statement: ReturnStatement):
        self.output.append(f"  Return {statement.code}")
