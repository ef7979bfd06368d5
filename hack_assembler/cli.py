# cli.py
# Usage:
#   hack-asm input.asm                 -> writes input.hack next to input (binary)
#   hack-asm input.asm -f text         -> 16-character '0'/'1' lines
#   hack-asm input.asm -o out.hack     -> writes to explicit output path
#
# Exit codes: 0 ok, 1 usage / unreadable input, 2 assembly error, 3 write error

import argparse
import os
import sys
from typing import List, Optional

from .assembler import Assembler
from .errors import AsmError
from .writer import DEFAULT_FORMAT, Format

OUTPUT_EXT = ".hack"

EXIT_USAGE = 1
EXIT_ASM = 2
EXIT_IO = 3


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        # argparse uses 2, which is taken by assembly errors
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def default_output_path(in_path: str) -> str:
    stem, ext = os.path.splitext(in_path)
    if ext.lower() != ".asm":
        stem = in_path
    return stem + OUTPUT_EXT


def build_parser() -> argparse.ArgumentParser:
    parser = ArgumentParser(
        prog="hack-asm",
        description="Assemble a Hack assembly (.asm) file into Hack machine language")
    parser.add_argument("input", help="input .asm file")
    parser.add_argument("-o", "--output",
                        help=f"output file (default: <input>{OUTPUT_EXT})")
    parser.add_argument("-f", "--format",
                        choices=[f.value for f in Format],
                        default=DEFAULT_FORMAT.value,
                        help=f"output format (default: {DEFAULT_FORMAT.value})")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    in_path = args.input
    if not os.path.isfile(in_path):
        print(f"Input not found: {in_path}", file=sys.stderr)
        sys.exit(EXIT_USAGE)

    out_path = args.output or default_output_path(in_path)
    assembler = Assembler(args.format)

    try:
        os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
        count = assembler.assemble_file(in_path, out_path)
    except UnicodeDecodeError as e:
        print(f"Input is not valid UTF-8: {in_path}: {e}", file=sys.stderr)
        sys.exit(EXIT_USAGE)
    except AsmError as e:
        print(f"Assembly error: {e}", file=sys.stderr)
        sys.exit(EXIT_ASM)
    except OSError as e:
        print(f"I/O error: {e}", file=sys.stderr)
        sys.exit(EXIT_IO)

    print(f"OK: wrote {out_path} ({count} instructions)")


if __name__ == "__main__":
    main()
