"""
Pipeline entry points: source line -> tokens -> Program -> assembly.

Every stage raises on failure; callers decide how to report and exit.
"""
import logging
from dataclasses import dataclass
from typing import List

import config
from lexer import Token, tokenize
from parser import parse
from veerji_ast import Program, PrintStatement
from nasm_compiler import NasmCompiler, write_assembly

logger = logging.getLogger(__name__)

@dataclass
class CompileResult:
    tokens: List[Token]
    program: Program
    assembly: str

def read_first_line(path):
    # invalid UTF-8 decodes to U+FFFD
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.readline()

def compile_line(line):
    tokens = tokenize(line)
    program = parse(tokens)
    assembly = NasmCompiler(program).compile()
    return CompileResult(tokens, program, assembly)

def compile_file(source, output=None):
    """Compile the first line of `source` and write the assembly to `output`."""
    output = output or config.DEFAULT_OUTPUT
    line = read_first_line(source)
    logger.debug("read %d character(s) from %s", len(line), source)

    result = compile_line(line)
    write_assembly(result.assembly, output)
    return result

def format_tokens(tokens):
    lines = ["=== TOKENS ==="]
    for i, token in enumerate(tokens):
        lines.append(f"Token {i}: Type={token.type.name}, Value={token.value}")
    return "\n".join(lines)

def format_program(program):
    lines = ["=== PARSED ==="]
    for i, stmt in enumerate(program):
        if isinstance(stmt, PrintStatement):
            lines.append(f'Statement {i}: PRINT "{stmt.value}"')
        else:
            lines.append(f"Statement {i}: {type(stmt).__name__}")
    return "\n".join(lines)
