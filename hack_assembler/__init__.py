"""Two-pass assembler for the Hack computer (nand2tetris chapter 6)."""

from .assembler import (Assembler, assemble, pass1_build_symbols,
                        pass2_translate)
from .disassembler import decode_word, disassemble
from .errors import (AddressRangeError, AsmError, ConfigError, LabelError,
                     MnemonicError)
from .symbols import PREDEFINED, SymbolTable
from .writer import BinaryWriter, Format, TextWriter, get_writer, read_words

__version__ = "0.1.0"

__all__ = [
    "Assembler", "assemble", "pass1_build_symbols", "pass2_translate",
    "decode_word", "disassemble",
    "AsmError", "MnemonicError", "LabelError", "AddressRangeError", "ConfigError",
    "PREDEFINED", "SymbolTable",
    "Format", "TextWriter", "BinaryWriter", "get_writer", "read_words",
]
