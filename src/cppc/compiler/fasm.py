"""
FASM x86-64 Linux Code Generator
================================

This module emits a flat assembler (FASM) source file that builds a
static ELF64 executable for Linux. There is no runtime library: each
statement is implemented directly with a system call.

Code Generation Strategy
------------------------
Two passes over the same statement list:

1. Instructions. A print at index i writes `str{i}` to stdout with
   sys_write; a return calls sys_exit with its code.
2. Data. Every print at index i gets a byte array labelled `str{i}`.

Labels are numbered by position in the whole statement list, so a return
statement uses up an index without producing a label. The string bytes
are written as a numeric `db` list so FASM's own quoting rules never
apply to user text.

Register Usage (Linux syscall ABI)
----------------------------------
| Register | sys_write (1)  | sys_exit (60) |
|----------|----------------|---------------|
| rax      | 1              | 60            |
| rdi      | 1 (stdout)     | exit code     |
| rsi      | buffer address |               |
| rdx      | byte count     |               |

String Encoding
---------------
Literals are encoded as UTF-8. The `db` list holds those bytes and the
write length is their count, so non-ASCII text is written intact. FASM
rejects an empty `db`, so an empty literal gets a bare `str{i}:` label that
reserves no bytes.

Example output:
    format ELF64 executable 3
    entry start

    segment readable executable
    start:
        mov rax, 1
        mov rdi, 1
        mov rsi, str0
        mov rdx, 2
        syscall
        mov rax, 60
        mov rdi, 2
        syscall

    segment readable writeable
    str0 db 104,105

Programs without a return statement have no exit call and run off the
end of the code segment, exactly as the source program falls off `main`.
"""

import logging

from cppc.compiler.ast import (
    Statement,
    StatementVisitor,
    PrintStatement,
    ReturnStatement,
)

logger = logging.getLogger(__name__)

SYS_WRITE = 1
SYS_EXIT = 60
STDOUT = 1

ENCODING = "utf-8"


def encode_literal(literal: str) -> bytes:
    """Bytes a print statement writes for its literal."""
    return literal.encode(ENCODING)


def string_label(index: int) -> str:
    """Data label of the print statement at `index`."""
    return f"str{index}"


class FasmGenerator(StatementVisitor):
    """
    Generates FASM assembly from a statement list.

    Attributes:
        emit_comments: Put the source statement as a comment above each
                       instruction block
    """

    INDENT = "    "

    def __init__(self, emit_comments: bool = False):
        self.emit_comments = emit_comments
        self._output: list[str] = []
        self._index = 0

    def generate(self, statements: list[Statement]) -> str:
        """
        Generate the assembly file.

        Args:
            statements: Parsed statements in source order

        Returns:
            FASM source text ending with a newline
        """
        self._output = []

        self._emit_header()

        # Pass 1: instructions
        self._output.append("segment readable executable")
        self._output.append("start:")
        for index, statement in enumerate(statements):
            self._index = index
            self.visit(statement)

        # Pass 2: string data
        self._output.append("")
        self._output.append("segment readable writeable")
        for index, statement in enumerate(statements):
            if isinstance(statement, PrintStatement):
                self._emit_string(index, statement)

        logger.debug("generated fasm for %d statements", len(statements))
        return "\n".join(self._output) + "\n"

    # =========================================================================
    # Assembly Output Methods
    # =========================================================================

    def _emit(self, instruction: str) -> None:
        self._output.append(f"{self.INDENT}{instruction}")

    def _emit_comment(self, text: str) -> None:
        if self.emit_comments:
            # A comment ends at the line break
            self._emit("; " + text.replace("\r", "\\r").replace("\n", "\\n"))

    def _emit_header(self) -> None:
        self._output.append("format ELF64 executable 3")
        self._output.append("entry start")
        self._output.append("")

    def _emit_string(self, index: int, statement: PrintStatement) -> None:
        data = encode_literal(statement.literal)
        if not data:
            self._output.append(f"{string_label(index)}:")
            return
        values = ",".join(str(byte) for byte in data)
        self._output.append(f"{string_label(index)} db {values}")

    # =========================================================================
    # Statements
    # =========================================================================

    def visit_PrintStatement(self, statement: PrintStatement):
        self._emit_comment(f'printf("{statement.literal}")')
        self._emit(f"mov rax, {SYS_WRITE}")
        self._emit(f"mov rdi, {STDOUT}")
        self._emit(f"mov rsi, {string_label(self._index)}")
        self._emit(f"mov rdx, {len(encode_literal(statement.literal))}")
        self._emit("syscall")

    def visit_ReturnStatement(self, statement: ReturnStatement):
        self._emit_comment(f"return {statement.code}")
        self._emit(f"mov rax, {SYS_EXIT}")
        self._emit(f"mov rdi, {statement.code}")
        self._emit("syscall")


def emit_assembly(statements: list[Statement], emit_comments: bool = False) -> str:
    """Generate FASM assembly for a statement list."""
    return FasmGenerator(emit_comments).generate(statements)
