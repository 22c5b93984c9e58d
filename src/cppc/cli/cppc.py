"""
cppc - Command-Line Interface
=============================

Compiles a minimal C `main` program to Rust source or FASM assembly.

Usage Examples
--------------
Default target (Rust), writes hello.rs:
    $ cppc hello.cpp

Assembly for x86-64 Linux, writes hello.asm:
    $ cppc hello.cpp --target x86_64-fasm-linux-gnu

List the targets:
    $ cppc --target list

Debug dumps:
    $ cppc --tokens hello.cpp
    $ cppc --ast hello.cpp
"""

from pathlib import Path
from typing import Optional
import logging

import click

from cppc import __version__
from cppc.compiler import (
    Compiler,
    CompilerOptions,
    Target,
    StatementPrinter,
    scan,
    parse,
)
from cppc.compiler.compiler import DEFAULT_TARGET, default_output_path
from cppc.cli.errors import handle_cli_exception

DEFAULT_INPUT = "main.cpp"


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def list_targets() -> None:
    click.echo("Valid targets:")
    for name in Target.names():
        click.echo(name)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    default=DEFAULT_INPUT,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "-t", "--target",
    default=DEFAULT_TARGET.value,
    show_default=True,
    help="Target platform, or 'list' to show the valid targets.",
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: input name with .rs or .asm)",
)
@click.option(
    "--tokens",
    is_flag=True,
    help="Print the token stream and exit (for debugging)",
)
@click.option(
    "--ast",
    is_flag=True,
    help="Print the parsed statements and exit (for debugging)",
)
@click.option(
    "-c", "--comments",
    is_flag=True,
    help="Annotate generated assembly with the source statements",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="cppc")
def main(
    input_file: Path,
    target: str,
    output: Optional[Path],
    tokens: bool,
    ast: bool,
    comments: bool,
    verbose: bool,
) -> None:
    """
    Compile a minimal C program to Rust or FASM assembly.

    INPUT_FILE is the source file to compile (default: main.cpp). It must
    contain exactly one `int main() { ... }` whose body holds only
    printf("...") and return N statements.

    \b
    Examples:
        cppc hello.cpp                                 # Outputs hello.rs
        cppc hello.cpp -t x86_64-fasm-linux-gnu        # Outputs hello.asm
        cppc hello.cpp -o out.rs                       # Specify output file
        cppc --target list                             # Show targets
    """
    setup_logging(verbose)

    if target == "list":
        list_targets()
        return

    try:
        options = CompilerOptions(
            target=Target.from_name(target),
            emit_comments=comments,
        )
        compiler = Compiler(options)

        if verbose:
            click.echo(f"Compiling {input_file}...")
            click.echo(f"Target: {options.target.value}")

        if tokens or ast:
            if not input_file.exists():
                raise FileNotFoundError(f"Source file not found: {input_file}")
            source = input_file.read_text(encoding="utf-8")
            token_list = scan(source, str(input_file))
            if tokens:
                for token in token_list:
                    click.echo(token.display())
            if ast:
                statements = parse(token_list, source.split("\n"))
                click.echo(StatementPrinter().print(statements))
            return

        if output is None:
            output = default_output_path(input_file, options.target)

        result = compiler.compile_file(input_file, output)

        if verbose:
            click.echo(f"Tokenized: {result.token_count} tokens")
            click.echo(f"Parsed: {len(result.statements)} statements")
            click.echo(f"Wrote {len(result.output)} bytes to {output}")

        click.echo(f"Compiled {input_file} -> {output}")

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
