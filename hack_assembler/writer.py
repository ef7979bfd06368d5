# writer.py
# Output representations for assembled words.
#   text   -> one line of 16 '0'/'1' characters per word, MSB first
#   binary -> two bytes per word, big-endian, no delimiters

import struct
from enum import Enum
from typing import BinaryIO, List, TextIO, Union

from .errors import AsmError, ConfigError

WORD_BITS = 16
WORD_MAX = 0xFFFF


class Format(Enum):
    TEXT = "text"
    BINARY = "binary"


DEFAULT_FORMAT = Format.BINARY


def _check_word(word: int) -> None:
    if word < 0 or word > WORD_MAX:
        raise AsmError(f"Word out of 16-bit range: {word}")


class InstructionWriter:
    format: Format
    mode: str  # mode to open the output file with

    def open(self, path: str):
        if "b" in self.mode:
            return open(path, self.mode)
        return open(path, self.mode, encoding="ascii", newline="\n")

    def write(self, stream, word: int) -> None:
        raise NotImplementedError

    def write_all(self, stream, words: List[int]) -> int:
        for word in words:
            self.write(stream, word)
        return len(words)


class TextWriter(InstructionWriter):
    format = Format.TEXT
    mode = "w"

    @staticmethod
    def render(word: int) -> str:
        _check_word(word)
        return f"{word:016b}"

    def write(self, stream: TextIO, word: int) -> None:
        stream.write(self.render(word) + "\n")


class BinaryWriter(InstructionWriter):
    format = Format.BINARY
    mode = "wb"

    @staticmethod
    def pack(word: int) -> bytes:
        _check_word(word)
        return struct.pack(">H", word)

    def write(self, stream: BinaryIO, word: int) -> None:
        stream.write(self.pack(word))


_WRITERS = {
    Format.TEXT: TextWriter,
    Format.BINARY: BinaryWriter,
}


def parse_format(fmt: Union[Format, str]) -> Format:
    if isinstance(fmt, Format):
        return fmt
    try:
        return Format(fmt)
    except ValueError:
        raise ConfigError(f"Invalid output format: {fmt!r}") from None


def get_writer(fmt: Union[Format, str]) -> InstructionWriter:
    return _WRITERS[parse_format(fmt)]()


def read_words(data: Union[str, bytes], fmt: Union[Format, str]) -> List[int]:
    """Parse writer output back into words."""
    fmt = parse_format(fmt)
    if fmt is Format.BINARY:
        if isinstance(data, str):
            raise AsmError("Binary input must be bytes")
        if len(data) % 2:
            raise AsmError(f"Truncated binary input: {len(data)} bytes")
        return [w for (w,) in struct.iter_unpack(">H", data)]

    if isinstance(data, bytes):
        data = data.decode("ascii")
    words: List[int] = []
    for i, line in enumerate(data.splitlines()):
        if len(line) != WORD_BITS or set(line) - {"0", "1"}:
            raise AsmError("Not a 16-bit binary string", i + 1, line)
        words.append(int(line, 2))
    return words
