"""
Rust Code Generator
===================

This module emits Rust source from the statement list. The whole program
becomes one `fn main()`:

| Statement               | Rust                         |
|-------------------------|------------------------------|
| printf("hi");           | print!("hi");                |
| return 2;               | std::process::exit(2);       |

Literals are inserted verbatim between the quotes. The scanner does no
escape processing, so a backslash in the source is an ordinary character
and must print as one. A literal containing a backslash, `{` or `}` is
passed as a raw string argument instead, which Rust neither unescapes nor
reads as a format string: `print!("{}", r"a\\n{b}")`. A literal never
contains `"`, so the raw string is always well formed.

Example output:
    fn main() {
        print!("hi");
        std::process::exit(2);
    }

Usage
-----
>>> from cppc.compiler.codegen import emit_source
>>> from cppc.compiler.ast import PrintStatement, ReturnStatement
>>> print(emit_source([PrintStatement("hi"), ReturnStatement(2)]))
"""

import logging

from cppc.compiler.ast import (
    Statement,
    StatementVisitor,
    PrintStatement,
    ReturnStatement,
)

logger = logging.getLogger(__name__)

# Characters that need the raw string form
RAW_CHARS = "\\{}"


class RustGenerator(StatementVisitor):
    """
    Generates Rust source from a statement list.

    Attributes:
        indent: Indentation placed before each body line
    """

    def __init__(self, indent: str = "\t"):
        self.indent = indent
        self._output: list[str] = []

    def generate(self, statements: list[Statement]) -> str:
        """
        Generate the Rust program.

        Args:
            statements: Parsed statements in source order

        Returns:
            Rust source text ending with a newline
        """
        self._output = ["fn main() {"]

        for statement in statements:
            self.visit(statement)

        self._output.append("}\n")
        logger.debug("generated rust for %d statements", len(statements))
        return "\n".join(self._output)

    def _emit(self, line: str) -> None:
        self._output.append(f"{self.indent}{line}")

    def visit_PrintStatement(self, statement: PrintStatement):
        literal = statement.literal
        if any(char in literal for char in RAW_CHARS):
            self._emit(f'print!("{{}}", r"{literal}");')
        else:
            self._emit(f'print!("{literal}");')

    def visit_ReturnStatement(self, statement: ReturnStatement):
        self._emit(f"std::process::exit({statement.code});")


def emit_source(statements: list[Statement]) -> str:
    """Generate Rust source for a statement list."""
    return RustGenerator().generate(statements)
