"""
cppc - Translate a minimal C `main` to Rust or FASM Assembly
============================================================

cppc reads a program shaped exactly like a minimal C `main`:

    int main() {
        printf("Hello, world!\n");
        return 0;
    }

and emits either a Rust source file or a FASM file that builds a static
x86-64 Linux executable using raw system calls.

Main Components
---------------
- **compiler**: scanner, parser, statement model and both backends
- **cli**: the `cppc` command

Quick Start
-----------
    >>> from cppc import compile_source
    >>> rust = compile_source('int main() { printf("hi"); return 2; }')
    >>> asm = compile_source('int main() { return 0; }', "x86_64-fasm-linux-gnu")

Or use the command-line tool:
    $ cppc hello.cpp                                # writes hello.rs
    $ cppc hello.cpp --target x86_64-fasm-linux-gnu # writes hello.asm
    $ fasm hello.asm && ./hello
"""

__version__ = "1.0.0"

from cppc.errors import CppcError, SourceLocation
from cppc.compiler import (
    scan,
    parse,
    emit_source,
    emit_assembly,
    compile_source,
    compile_file,
    Compiler,
    CompilerOptions,
    Target,
    CompilerError,
    LexerError,
    ParseError,
)

__all__ = [
    "__version__",
    "CppcError",
    "SourceLocation",
    "scan",
    "parse",
    "emit_source",
    "emit_assembly",
    "compile_source",
    "compile_file",
    "Compiler",
    "CompilerOptions",
    "Target",
    "CompilerError",
    "LexerError",
    "ParseError",
]
