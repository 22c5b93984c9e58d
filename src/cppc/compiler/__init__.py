"""
cppc Compiler
=============

This package implements the cppc translator for a tiny C-like program
shape: one `int main() { ... }` whose body holds only `printf("...");`
and `return N;` statements.

Pipeline
--------
    Source → Scanner → Parser → Statements → Rust | FASM generator → Text

Each stage is a plain function over the previous stage's output:

- `scan(text) -> tokens`
- `parse(tokens) -> statements`
- `emit_source(statements) -> Rust source`
- `emit_assembly(statements) -> FASM assembly`

Usage
-----
>>> from cppc.compiler import scan, parse, emit_assembly
>>> statements = parse(scan('int main() { printf("hi"); return 2; }'))
>>> print(emit_assembly(statements))

Language
--------
Supported:
- `printf("literal");` - raw literal, no escape processing, no arguments
- `return <digits>;` - exit the process with that code
- `#` and `//` line comments

Not supported: expressions, variables, other functions, loops, and
if/else (the keywords are reserved).
"""

from cppc.compiler.lexer import Lexer, Token, TokenKind, scan
from cppc.compiler.parser import Parser, parse
from cppc.compiler.ast import (
    Statement,
    StatementKind,
    PrintStatement,
    ReturnStatement,
    StatementVisitor,
    StatementPrinter,
)
from cppc.compiler.codegen import RustGenerator, emit_source
from cppc.compiler.fasm import FasmGenerator, emit_assembly
from cppc.compiler.compiler import (
    Compiler,
    CompilerOptions,
    CompilerResult,
    Target,
    compile_source,
    compile_file,
    default_output_path,
)
from cppc.compiler.errors import (
    CompilerError,
    LexerError,
    UnterminatedStringError,
    UnknownCharacterError,
    ParseError,
    MissingTokenError,
    InvalidFunctionNameError,
    UnexpectedTokenError,
    CodeGenError,
    UnknownTargetError,
)

__all__ = [
    # Scanner
    "Lexer",
    "Token",
    "TokenKind",
    "scan",
    # Parser
    "Parser",
    "parse",
    # Statements
    "Statement",
    "StatementKind",
    "PrintStatement",
    "ReturnStatement",
    "StatementVisitor",
    "StatementPrinter",
    # Backends
    "RustGenerator",
    "emit_source",
    "FasmGenerator",
    "emit_assembly",
    # Pipeline
    "Compiler",
    "CompilerOptions",
    "CompilerResult",
    "Target",
    "compile_source",
    "compile_file",
    "default_output_path",
    # Errors
    "CompilerError",
    "LexerError",
    "UnterminatedStringError",
    "UnknownCharacterError",
    "ParseError",
    "MissingTokenError",
    "InvalidFunctionNameError",
    "UnexpectedTokenError",
    "CodeGenError",
    "UnknownTargetError",
]
