"""Assembly generation tests."""

import io

import pytest

from nasm_compiler import NasmCompiler, generate, quote_literal, write_assembly
from veerji_ast import PrintStatement, Program, Statement

HELLO_ASM = """section .data
msg0 db "Hello, World!", 0xA
len0 equ $ - msg0

section .text
global _start
_start:
    mov rax, 1
    mov rdi, 1
    mov rsi, msg0
    mov rdx, len0
    syscall

    mov rax, 60
    xor rdi, rdi
    syscall
"""


def _program(*texts):
    program = Program()
    for text in texts:
        program.append(PrintStatement(text))
    return program


def test_hello_world_output():
    assert NasmCompiler(_program("Hello, World!")).compile() == HELLO_ASM


def test_empty_program_only_exits():
    asm = NasmCompiler(Program()).compile()
    assert asm.splitlines() == [
        "section .data",
        "",
        "section .text",
        "global _start",
        "_start:",
        "    mov rax, 60",
        "    xor rdi, rdi",
        "    syscall",
    ]


def test_labels_follow_statement_order(two_statement_program):
    lines = NasmCompiler(two_statement_program).compile().splitlines()
    assert lines[1] == 'msg0 db "first", 0xA'
    assert lines[2] == "len0 equ $ - msg0"
    assert lines[3] == 'msg1 db "ਦੂਜਾ", 0xA'
    assert lines[4] == "len1 equ $ - msg1"

    rsi = [l.strip() for l in lines if l.strip().startswith("mov rsi")]
    rdx = [l.strip() for l in lines if l.strip().startswith("mov rdx")]
    assert rsi == ["mov rsi, msg0", "mov rsi, msg1"]
    assert rdx == ["mov rdx, len0", "mov rdx, len1"]


def test_exit_block_comes_last(two_statement_program):
    lines = NasmCompiler(two_statement_program).compile().splitlines()
    assert [l.strip() for l in lines[-3:]] == ["mov rax, 60", "xor rdi, rdi", "syscall"]


def test_output_is_deterministic(two_statement_program):
    first = NasmCompiler(two_statement_program).compile()
    again = NasmCompiler(_program("first", "ਦੂਜਾ")).compile()
    assert first == again


def test_unknown_statement_kind_is_rejected():
    class Halt(Statement):
        pass

    program = Program()
    program.append(Halt())
    with pytest.raises(TypeError):
        NasmCompiler(program).compile()


@pytest.mark.parametrize("text, expected", [
    ("plain", '"plain"'),
    ('say "hi"', '"say ", 34, "hi", 34'),
    ('"', "34"),
    ("", '""'),
])
def test_quote_literal(text, expected):
    assert quote_literal(text) == expected


def test_generate_to_stream():
    sink = io.StringIO()
    generate(_program("Hello, World!"), sink)
    assert sink.getvalue() == HELLO_ASM


def test_generate_to_path_overwrites(tmp_path):
    out = tmp_path / "out.s"
    out.write_text("stale contents\n" * 10)
    generate(_program("Hello, World!"), out)
    assert out.read_text(encoding="utf-8") == HELLO_ASM


def test_generate_writes_utf8(tmp_path):
    out = tmp_path / "out.s"
    generate(_program("ਸਤ ਸ੍ਰੀ ਅਕਾਲ"), str(out))
    assert 'msg0 db "ਸਤ ਸ੍ਰੀ ਅਕਾਲ", 0xA' in out.read_text(encoding="utf-8")


def test_generate_to_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        generate(_program("x"), tmp_path / "missing" / "out.s")


def test_write_assembly_to_stream():
    sink = io.StringIO()
    write_assembly(HELLO_ASM, sink)
    assert sink.getvalue() == HELLO_ASM
