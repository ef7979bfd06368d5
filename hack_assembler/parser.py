# parser.py
# Source line model and the small helpers shared by both passes.

import io
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

COMMENT = "//"


@dataclass(frozen=True)
class SourceLine:
    raw: str
    line_no: int  # 1-based in the original file


def read_lines(asm_text: str) -> List[SourceLine]:
    # Same newline rules as a file opened in text mode
    return read_stream(io.StringIO(asm_text, newline=None))


def read_stream(stream: Iterable[str]) -> List[SourceLine]:
    """Buffer a text stream so both passes can walk it."""
    # Preserve original line numbers for good diagnostics
    return [SourceLine(raw=l.rstrip("\r\n"), line_no=i + 1)
            for i, l in enumerate(stream)]


def strip_comment_and_ws(line: str) -> str:
    # Remove inline comments and surrounding whitespace
    if COMMENT in line:
        line = line.split(COMMENT, 1)[0]
    return line.strip()


def is_label(line: str) -> bool:
    # "()" counts as a label; pass 1 rejects the empty name
    return line.startswith("(") and line.endswith(")")


def parse_label(line: str) -> str:
    # (LOOP) -> LOOP
    return line[1:-1].strip()


def is_valid_label(name: str) -> bool:
    if not name or name[0].isdigit():
        return False
    return not any(c.isspace() or c in "()" for c in name)


def is_a_instruction(line: str) -> bool:
    return line.startswith("@")


def parse_a_symbol(line: str) -> str:
    # @value or @symbol -> 'value' or 'symbol'
    return line[1:].strip()


def is_numeric(token: str) -> bool:
    return token.isascii() and token.isdigit()


def parse_c_instruction(line: str) -> Tuple[Optional[str], str, Optional[str]]:
    """
    Returns (dest, comp, jump)
    line could be: dest=comp;jump | comp;jump | dest=comp | comp
    """
    dest, compjump = None, line
    if "=" in line:
        dest, compjump = line.split("=", 1)
        dest = dest.strip() or None
    comp, jump = compjump, None
    if ";" in compjump:
        comp, jump = compjump.split(";", 1)
        jump = jump.strip() or None
    comp = comp.strip()
    return dest, comp, jump
