# errors.py
# Exceptions raised by the assembler. The engine raises, the CLI decides
# what to print and which exit code to use.

from typing import Optional


class AsmError(Exception):
    def __init__(self, message: str, line_no: Optional[int] = None,
                 source: Optional[str] = None) -> None:
        self.message = message
        self.line_no = line_no
        self.source = source
        super().__init__(str(self))

    def locate(self, line_no: int, source: str) -> "AsmError":
        """Attach the offending source line."""
        self.line_no = line_no
        self.source = source
        self.args = (str(self),)
        return self

    def __str__(self) -> str:
        text = self.message
        if self.line_no is not None:
            text = f"[line {self.line_no}] {text}"
        if self.source is not None:
            text = f"{text} in: {self.source}"
        return text


class MnemonicError(AsmError):
    """Unknown dest / comp / jump mnemonic."""

    def __init__(self, field: str, mnemonic: Optional[str],
                 line_no: Optional[int] = None,
                 source: Optional[str] = None) -> None:
        self.field = field
        self.mnemonic = mnemonic
        super().__init__(f"Invalid {field} field: '{mnemonic}'", line_no, source)


class LabelError(AsmError):
    pass


class AddressRangeError(AsmError):
    pass


class ConfigError(AsmError):
    pass
