"""
FASM Code Generator Test Suite
==============================

Tests for the x86-64 Linux assembly backend: the ELF header, the
sys_write / sys_exit blocks, positional string labels and the numeric
data section.
"""

import re

import pytest

from cppc.compiler.ast import PrintStatement, ReturnStatement
from cppc.compiler.fasm import (
    FasmGenerator,
    emit_assembly,
    encode_literal,
    string_label,
)
from cppc.compiler.lexer import scan
from cppc.compiler.parser import parse


def data_bytes(output: str, label: str) -> bytes:
    """Decode the `db` list of a data label."""
    match = re.search(rf"^{label} db ([0-9,]+)$", output, re.MULTILINE)
    assert match, f"label {label} not found"
    return bytes(int(value) for value in match.group(1).split(","))


# =============================================================================
# Layout
# =============================================================================

class TestLayout:
    """Header and segments."""

    def test_example_program(self):
        output = emit_assembly([PrintStatement("hi"), ReturnStatement(2)])
        assert output == "\n".join([
            "format ELF64 executable 3",
            "entry start",
            "",
            "segment readable executable",
            "start:",
            "    mov rax, 1",
            "    mov rdi, 1",
            "    mov rsi, str0",
            "    mov rdx, 2",
            "    syscall",
            "    mov rax, 60",
            "    mov rdi, 2",
            "    syscall",
            "",
            "segment readable writeable",
            "str0 db 104,105",
        ]) + "\n"

    def test_empty_program(self):
        """An empty body still has a complete header and both segments."""
        output = emit_assembly([])
        assert output == (
            "format ELF64 executable 3\n"
            "entry start\n"
            "\n"
            "segment readable executable\n"
            "start:\n"
            "\n"
            "segment readable writeable\n"
        )
        assert "syscall" not in output

    def test_no_exit_without_return(self):
        output = emit_assembly([PrintStatement("a")])
        assert "mov rax, 60" not in output

    def test_data_after_code(self):
        output = emit_assembly([PrintStatement("a")])
        assert output.index("segment readable writeable") > output.index("syscall")


# =============================================================================
# Statements
# =============================================================================

class TestStatements:

    def test_write_block(self):
        lines = emit_assembly([PrintStatement("hello")]).split("\n")
        start = lines.index("start:")
        assert lines[start + 1:start + 6] == [
            "    mov rax, 1",
            "    mov rdi, 1",
            "    mov rsi, str0",
            "    mov rdx, 5",
            "    syscall",
        ]

    def test_exit_block(self):
        lines = emit_assembly([ReturnStatement(42)]).split("\n")
        start = lines.index("start:")
        assert lines[start + 1:start + 4] == [
            "    mov rax, 60",
            "    mov rdi, 42",
            "    syscall",
        ]

    def test_labels_are_positional(self):
        """Return statements use up an index without a label."""
        statements = [
            ReturnStatement(0),
            PrintStatement("a"),
            ReturnStatement(1),
            PrintStatement("b"),
        ]
        output = emit_assembly(statements)
        assert "mov rsi, str1" in output
        assert "mov rsi, str3" in output
        assert "str0 db" not in output
        assert "str2 db" not in output
        assert data_bytes(output, "str1") == b"a"
        assert data_bytes(output, "str3") == b"b"

    def test_statement_order(self):
        output = emit_assembly([ReturnStatement(7), PrintStatement("z")])
        assert output.index("mov rdi, 7") < output.index("mov rsi, str1")

    def test_string_label(self):
        assert string_label(12) == "str12"


# =============================================================================
# String Data
# =============================================================================

class TestStringData:

    @pytest.mark.parametrize("literal", ["hi", "Hello, world!", "a\\nb", "# {x} //"])
    def test_data_matches_literal(self, literal):
        output = emit_assembly([PrintStatement(literal)])
        data = data_bytes(output, "str0")
        assert data == literal.encode("ascii")
        assert len(data) == len(literal)
        assert f"mov rdx, {len(literal)}" in output

    def test_character_codes_in_order(self):
        output = emit_assembly([PrintStatement("AZ")])
        assert "str0 db 65,90" in output

    def test_real_newline(self):
        output = emit_assembly([PrintStatement("a\nb")])
        assert "str0 db 97,10,98" in output

    def test_non_ascii_uses_utf8(self):
        """Data and length are both the UTF-8 encoding."""
        output = emit_assembly([PrintStatement("é")])
        assert data_bytes(output, "str0") == "é".encode("utf-8")
        assert "mov rdx, 2" in output

    def test_encode_literal(self):
        assert encode_literal("€") == b"\xe2\x82\xac"

    def test_empty_literal(self):
        """An empty literal has a label but no data bytes."""
        output = emit_assembly([PrintStatement("")])
        assert output.endswith("segment readable writeable\nstr0:\n")
        assert "str0 db" not in output
        assert "mov rsi, str0" in output
        assert "mov rdx, 0" in output

    def test_empty_literal_between_others(self):
        statements = parse(scan('int main(){ printf("a"); printf(""); printf("b"); }'))
        lines = emit_assembly(statements).split("\n")
        assert lines[-4:] == ["str0 db 97", "str1:", "str2 db 98", ""]


# =============================================================================
# Options and Determinism
# =============================================================================

class TestOptions:

    def test_comments(self):
        output = FasmGenerator(emit_comments=True).generate(
            [PrintStatement("hi"), ReturnStatement(2)]
        )
        assert '    ; printf("hi")' in output
        assert "    ; return 2" in output

    def test_comment_escapes_newline(self):
        output = emit_assembly([PrintStatement("a\nb")], emit_comments=True)
        assert '    ; printf("a\\nb")' in output.split("\n")

    def test_no_comments_by_default(self):
        assert ";" not in emit_assembly([PrintStatement("hi"), ReturnStatement(2)])

    def test_idempotent(self):
        statements = parse(scan('int main(){ printf("hi"); return 2; }'))
        assert emit_assembly(statements) == emit_assembly(statements)

    def test_generator_reusable(self):
        generator = FasmGenerator()
        statements = [PrintStatement("a"), ReturnStatement(0)]
        assert generator.generate(statements) == generator.generate(statements)
