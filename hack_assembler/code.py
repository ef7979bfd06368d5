# code.py
# Hack instruction code tables and bitfield composition.
#
# C-instruction layout:  1 1 1 a c1 c2 c3 c4 c5 c6 d1 d2 d3 j1 j2 j3
#   bits 15..13  marker (111)
#   bits 12..6   comp (a-bit + c1..c6)
#   bits  5..3   dest
#   bits  2..0   jump

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from .errors import AddressRangeError, MnemonicError

C_MARKER = 0b111 << 13
COMP_SHIFT = 6
DEST_SHIFT = 3
JUMP_SHIFT = 0

COMP_MASK = 0b1111111
DEST_MASK = 0b111
JUMP_MASK = 0b111

MAX_ADDRESS = 0x7FFF  # largest value an A-instruction can carry

# -----------------------------
# Code tables
# -----------------------------
DEST_TABLE: Mapping[Optional[str], int] = MappingProxyType({
    None:   0b000,
    "M":    0b001,
    "D":    0b010,
    "MD":   0b011,
    "A":    0b100,
    "AM":   0b101,
    "AD":   0b110,
    "AMD":  0b111,
})

JUMP_TABLE: Mapping[Optional[str], int] = MappingProxyType({
    None:   0b000,
    "JGT":  0b001,
    "JEQ":  0b010,
    "JGE":  0b011,
    "JLT":  0b100,
    "JNE":  0b101,
    "JLE":  0b110,
    "JMP":  0b111,
})

COMP_TABLE: Mapping[str, int] = MappingProxyType({
    # a=0
    "0":   0b0101010,
    "1":   0b0111111,
    "-1":  0b0111010,
    "D":   0b0001100,
    "A":   0b0110000,
    "!D":  0b0001101,
    "!A":  0b0110001,
    "-D":  0b0001111,
    "-A":  0b0110011,
    "D+1": 0b0011111,
    "A+1": 0b0110111,
    "D-1": 0b0001110,
    "A-1": 0b0110010,
    "D+A": 0b0000010,
    "D-A": 0b0010011,
    "A-D": 0b0000111,
    "D&A": 0b0000000,
    "D|A": 0b0010101,
    # a=1 (replace A with M)
    "M":   0b1110000,
    "!M":  0b1110001,
    "-M":  0b1110011,
    "M+1": 0b1110111,
    "M-1": 0b1110010,
    "D+M": 0b1000010,
    "D-M": 0b1010011,
    "M-D": 0b1000111,
    "D&M": 0b1000000,
    "D|M": 0b1010101,
})


def _invert(table: Mapping) -> Dict[int, Optional[str]]:
    return {bits: mnemonic for mnemonic, bits in table.items()}


DEST_BY_BITS = MappingProxyType(_invert(DEST_TABLE))
COMP_BY_BITS = MappingProxyType(_invert(COMP_TABLE))
JUMP_BY_BITS = MappingProxyType(_invert(JUMP_TABLE))


# -----------------------------
# Lookups
# -----------------------------
def _lookup(table: Mapping, field: str, mnemonic: Optional[str]) -> int:
    # 0 is a valid code, so membership is checked explicitly
    if mnemonic not in table:
        raise MnemonicError(field, mnemonic)
    return table[mnemonic]


def lookup_dest(mnemonic: Optional[str]) -> int:
    return _lookup(DEST_TABLE, "dest", mnemonic)


def lookup_comp(mnemonic: str) -> int:
    return _lookup(COMP_TABLE, "comp", mnemonic)


def lookup_jump(mnemonic: Optional[str]) -> int:
    return _lookup(JUMP_TABLE, "jump", mnemonic)


# -----------------------------
# Encoding
# -----------------------------
def encode_address(n: int) -> int:
    if n < 0 or n > MAX_ADDRESS:
        raise AddressRangeError(
            f"Constant out of range for 15-bit A-instruction: {n}")
    return n


def encode_compute(dest: Optional[str], comp: str, jump: Optional[str]) -> int:
    """
    Compose a C-instruction word from its three mnemonics.
    Fields are looked up in order comp, dest, jump.
    """
    comp_bits = lookup_comp(comp)
    dest_bits = lookup_dest(dest)
    jump_bits = lookup_jump(jump)
    return (C_MARKER
            | comp_bits << COMP_SHIFT
            | dest_bits << DEST_SHIFT
            | jump_bits << JUMP_SHIFT)


def split_compute(word: int) -> Tuple[int, int, int]:
    """(comp_bits, dest_bits, jump_bits) of a C-instruction word."""
    return ((word >> COMP_SHIFT) & COMP_MASK,
            (word >> DEST_SHIFT) & DEST_MASK,
            (word >> JUMP_SHIFT) & JUMP_MASK)
