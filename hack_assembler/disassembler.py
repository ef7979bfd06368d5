# disassembler.py
# Words back to Hack assembly, for checking assembled output.

from typing import Iterable, List, Optional, Tuple

from .code import (C_MARKER, COMP_BY_BITS, DEST_BY_BITS, JUMP_BY_BITS,
                   split_compute)
from .errors import AsmError, MnemonicError


def decode_compute(word: int) -> Tuple[Optional[str], str, Optional[str]]:
    """Returns (dest, comp, jump) for a C-instruction word."""
    if (word & C_MARKER) != C_MARKER:
        raise AsmError(f"Not a C-instruction: {word:016b}")
    comp_bits, dest_bits, jump_bits = split_compute(word)
    if comp_bits not in COMP_BY_BITS:
        raise MnemonicError("comp", f"{comp_bits:07b}")
    # dest and jump tables cover every 3-bit pattern
    return DEST_BY_BITS[dest_bits], COMP_BY_BITS[comp_bits], JUMP_BY_BITS[jump_bits]


def decode_word(word: int) -> str:
    if (word >> 15) == 0:
        return f"@{word}"
    dest, comp, jump = decode_compute(word)
    text = comp
    if dest is not None:
        text = f"{dest}={text}"
    if jump is not None:
        text = f"{text};{jump}"
    return text


def disassemble(words: Iterable[int]) -> List[str]:
    return [decode_word(w) for w in words]
