"""
cppc Compiler Main Module
=========================

This module provides the main compiler interface. It runs the complete
pipeline for one source file:

    Source → Scan → Parse → Generate → Rust source | FASM assembly

Usage
-----
Command line:
    $ cppc hello.cpp --target x86_64-fasm-linux-gnu

Programmatic:
    >>> from cppc.compiler import compile_source
    >>> print(compile_source('int main() { printf("hi"); return 2; }'))
    fn main() {
        print!("hi");
        std::process::exit(2);
    }

Targets
-------
| Name                  | Output                  | Suffix |
|-----------------------|-------------------------|--------|
| rust                  | Rust source (default)   | .rs    |
| x86_64-fasm-linux-gnu | FASM ELF64 assembly     | .asm   |

Error Handling
--------------
Every stage raises on its first error (CompilerError subclasses); the
compiler does not catch them, so a failed run never produces output.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Union
import logging

from cppc.compiler.lexer import Lexer, Token
from cppc.compiler.parser import Parser
from cppc.compiler.ast import Statement
from cppc.compiler.codegen import RustGenerator
from cppc.compiler.fasm import FasmGenerator
from cppc.compiler.errors import UnknownTargetError

logger = logging.getLogger(__name__)

SOURCE_SUFFIX = ".cpp"


class Target(Enum):
    """Code generation backends, by their command-line name."""
    RUST = "rust"
    FASM_LINUX = "x86_64-fasm-linux-gnu"

    @property
    def suffix(self) -> str:
        """File suffix of the generated output."""
        return ".rs" if self is Target.RUST else ".asm"

    @classmethod
    def from_name(cls, name: Union[str, "Target"]) -> "Target":
        """
        Look up a target by name.

        Raises:
            UnknownTargetError: If no target has that name
        """
        if isinstance(name, Target):
            return name
        try:
            return cls(name)
        except ValueError:
            raise UnknownTargetError(name) from None

    @classmethod
    def names(cls) -> list[str]:
        return [target.value for target in cls]


DEFAULT_TARGET = Target.RUST


@dataclass
class CompilerOptions:
    """
    Compiler configuration options.

    Attributes:
        target: Backend to generate code for
        emit_comments: Annotate generated assembly with the source statements
    """
    target: Target = DEFAULT_TARGET
    emit_comments: bool = False

    def __post_init__(self):
        self.target = Target.from_name(self.target)


@dataclass
class CompilerResult:
    """
    Result of compiling one source.

    Attributes:
        filename: Source filename
        target: Backend used
        tokens: Scanner output
        statements: Parser output
        output: Generated text
        success: True once generation finished
    """
    filename: str
    target: Target
    tokens: list[Token] = field(default_factory=list)
    statements: list[Statement] = field(default_factory=list)
    output: str = ""
    success: bool = False

    @property
    def token_count(self) -> int:
        return len(self.tokens)


def default_output_path(source_path: Union[str, Path], target: Target) -> Path:
    """
    Output path for a source file: `.cpp` is replaced by the target suffix,
    any other name gets the suffix appended.
    """
    path = Path(source_path)
    if path.suffix.lower() == SOURCE_SUFFIX:
        return path.with_suffix(target.suffix)
    return path.with_name(path.name + target.suffix)


class Compiler:
    """
    Runs the scan → parse → generate pipeline.

    Example:
        compiler = Compiler(CompilerOptions(target=Target.FASM_LINUX))
        result = compiler.compile_file("hello.cpp")
        print(result.output)

    Attributes:
        options: Compiler configuration options
    """

    def __init__(self, options: Optional[CompilerOptions] = None):
        self.options = options or CompilerOptions()

    def compile_source(self, source: str, filename: str = "<input>") -> CompilerResult:
        """
        Compile source text.

        Args:
            source: Program text
            filename: Source filename for error messages

        Returns:
            CompilerResult with the generated text

        Raises:
            CompilerError: On the first lexical or structural error
        """
        result = CompilerResult(filename=filename, target=self.options.target)

        # Stage 1: scanning
        result.tokens = Lexer(source, filename).tokenize()

        # Stage 2: parsing
        result.statements = Parser(result.tokens, source.split("\n")).parse()

        # Stage 3: code generation
        result.output = self._generate(result.statements)
        result.success = True

        logger.debug(
            "%s: %d tokens, %d statements, %d bytes of %s",
            filename,
            result.token_count,
            len(result.statements),
            len(result.output),
            self.options.target.value,
        )
        return result

    def compile_file(
        self,
        filepath: Union[str, Path],
        output_path: Union[str, Path, None] = None,
    ) -> CompilerResult:
        """
        Compile a source file and write the generated text.

        Args:
            filepath: Path to the source file
            output_path: Where to write; defaults to default_output_path()

        Returns:
            CompilerResult with the generated text

        Raises:
            CompilerError: If compilation fails
            FileNotFoundError: If the source file is missing
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Source file not found: {filepath}")

        source = path.read_text(encoding="utf-8")
        result = self.compile_source(source, str(path))

        if output_path is None:
            output_path = default_output_path(path, self.options.target)
        Path(output_path).write_text(result.output, encoding="utf-8")
        logger.debug("wrote %s", output_path)

        return result

    def _generate(self, statements: list[Statement]) -> str:
        if self.options.target is Target.FASM_LINUX:
            return FasmGenerator(self.options.emit_comments).generate(statements)
        return RustGenerator().generate(statements)


# =============================================================================
# Convenience Functions
# =============================================================================

def compile_source(
    source: str,
    target: Union[str, Target] = DEFAULT_TARGET,
    filename: str = "<input>",
) -> str:
    """
    Compile source text for a target and return the generated text.

    Raises:
        CompilerError: If compilation fails
    """
    compiler = Compiler(CompilerOptions(target=Target.from_name(target)))
    return compiler.compile_source(source, filename).output


def compile_file(
    filepath: Union[str, Path],
    target: Union[str, Target] = DEFAULT_TARGET,
    output_path: Union[str, Path, None] = None,
) -> str:
    """
    Compile a source file, write the output file and return its text.

    Example:
        >>> compile_file("hello.cpp", "x86_64-fasm-linux-gnu")  # writes hello.asm
    """
    compiler = Compiler(CompilerOptions(target=Target.from_name(target)))
    return compiler.compile_file(filepath, output_path).output
