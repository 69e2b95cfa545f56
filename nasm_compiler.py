import logging

from veerji_ast import PrintStatement

logger = logging.getLogger(__name__)

SYS_WRITE = 1
SYS_EXIT = 60
STDOUT = 1

class NasmCompiler:
    """
    Translates a Veerji Program into NASM x86-64 assembly for Linux.

    The output has two sections: every literal goes to .data as msg{i}/len{i}
    and the .text section writes them in order before the exit syscall.
    """
    def __init__(self, program):
        self.program = program
        self.lines = []

    def compile(self):
        self.lines = []
        self._emit_data_section()
        self._emit("")
        self._emit_text_section()
        logger.debug("generated %d line(s) of assembly", len(self.lines))
        return "\n".join(self.lines) + "\n"

    def _emit(self, line, indent=False):
        self.lines.append(f"    {line}" if indent else line)

    def _emit_data_section(self):
        self._emit("section .data")
        for i, stmt in enumerate(self.program):
            if isinstance(stmt, PrintStatement):
                self._emit(f"msg{i} db {quote_literal(stmt.value)}, 0xA")
                self._emit(f"len{i} equ $ - msg{i}")
            else:
                raise TypeError(f"Unknown statement type: {type(stmt).__name__}")

    def _emit_text_section(self):
        self._emit("section .text")
        self._emit("global _start")
        self._emit("_start:")
        for i, stmt in enumerate(self.program):
            if isinstance(stmt, PrintStatement):
                self._emit_print(i)
        self._emit_exit()

    def _emit_print(self, index):
        self._emit(f"mov rax, {SYS_WRITE}", indent=True)
        self._emit(f"mov rdi, {STDOUT}", indent=True)
        self._emit(f"mov rsi, msg{index}", indent=True)
        self._emit(f"mov rdx, len{index}", indent=True)
        self._emit("syscall", indent=True)
        self._emit("")

    def _emit_exit(self):
        self._emit(f"mov rax, {SYS_EXIT}", indent=True)
        self._emit("xor rdi, rdi", indent=True)
        self._emit("syscall", indent=True)

def quote_literal(text):
    """
    Quote a literal for a `db` directive.

    NASM strings have no escape for the delimiter itself, so embedded double
    quotes are emitted as the byte 34 between quoted runs.
    """
    if '"' not in text:
        return f'"{text}"'
    parts = []
    for i, chunk in enumerate(text.split('"')):
        if i:
            parts.append("34")
        if chunk:
            parts.append(f'"{chunk}"')
    return ", ".join(parts)

def generate(program, sink):
    """
    Write the assembly for `program` to `sink`.

    `sink` is a path (created or overwritten) or an open text stream.
    OSError from opening or writing propagates to the caller; a failed write
    may leave a truncated file behind.
    """
    assembly = NasmCompiler(program).compile()
    write_assembly(assembly, sink)
    return assembly

def write_assembly(assembly, sink):
    if hasattr(sink, "write"):
        sink.write(assembly)
        return

    with open(sink, "w", encoding="utf-8") as f:
        f.write(assembly)
    logger.info("assembly written to %s", sink)
