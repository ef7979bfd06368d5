# assembler.py
# Two-pass Hack assembler engine.
#
# - Pass 1 binds labels to ROM addresses
# - Pass 2 translates A- and C-instructions, allocating variables from RAM[16]
# - Output representation is chosen by the writer passed to Assembler

from typing import Iterable, List, Optional, TextIO, Union

from .code import encode_address, encode_compute
from .errors import AsmError, LabelError
from .parser import (SourceLine, is_a_instruction, is_label, is_numeric,
                     is_valid_label, parse_a_symbol, parse_c_instruction,
                     parse_label, read_lines, read_stream, strip_comment_and_ws)
from .symbols import SymbolTable
from .writer import DEFAULT_FORMAT, Format, InstructionWriter, get_writer


# -----------------------------
# Pass 1: Build symbol table with labels
# -----------------------------
def pass1_build_symbols(lines: List[SourceLine],
                        symbols: Optional[SymbolTable] = None) -> SymbolTable:
    if symbols is None:
        symbols = SymbolTable()
    rom_addr = 0
    for s in lines:
        text = strip_comment_and_ws(s.raw)
        if not text:
            continue
        if is_label(text):
            label = parse_label(text)
            if not is_valid_label(label):
                raise LabelError("Invalid label syntax", s.line_no, s.raw)
            try:
                symbols.add_label(label, rom_addr)
            except AsmError as e:
                e.locate(s.line_no, s.raw)
                raise
        else:
            # Only actual instructions consume ROM addresses
            rom_addr += 1
    return symbols


# -----------------------------
# Pass 2: Translate to machine code
# -----------------------------
def translate_line(text: str, symbols: SymbolTable) -> int:
    """Encode one comment-free, non-label instruction."""
    if is_a_instruction(text):
        token = parse_a_symbol(text)
        if not token:
            raise AsmError("Missing value in A-instruction")
        if is_numeric(token):
            return encode_address(int(token))
        return encode_address(symbols.resolve(token))

    dest, comp, jump = parse_c_instruction(text)
    return encode_compute(dest, comp, jump)


def pass2_translate(lines: List[SourceLine], symbols: SymbolTable) -> List[int]:
    out: List[int] = []
    for s in lines:
        text = strip_comment_and_ws(s.raw)
        if not text or is_label(text):
            continue
        try:
            out.append(translate_line(text, symbols))
        except AsmError as e:
            e.locate(s.line_no, s.raw)
            raise
    return out


# -----------------------------
# Driver
# -----------------------------
def assemble_lines(lines: List[SourceLine]) -> List[int]:
    symbols = pass1_build_symbols(lines)
    return pass2_translate(lines, symbols)


def assemble(asm_text: str) -> List[int]:
    return assemble_lines(read_lines(asm_text))


class Assembler:
    """
    Assembles source into an output stream using one writer.
    Holds no symbol state: every call starts from a fresh SymbolTable.
    """

    def __init__(self, fmt: Union[Format, str] = DEFAULT_FORMAT) -> None:
        self.writer: InstructionWriter = get_writer(fmt)

    @property
    def format(self) -> Format:
        return self.writer.format

    def assemble_stream(self, src: Union[TextIO, Iterable[str]], out) -> int:
        """Translate everything first, then write; returns instruction count."""
        words = assemble_lines(read_stream(src))
        return self.writer.write_all(out, words)

    def assemble_file(self, in_path: str, out_path: str) -> int:
        with open(in_path, "r", encoding="utf-8") as f:
            lines = read_stream(f)
        words = assemble_lines(lines)
        with self.writer.open(out_path) as f:
            return self.writer.write_all(f, words)
