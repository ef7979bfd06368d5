# symbols.py
# Symbol table for one assembly run: predefined symbols, labels (pass 1)
# and variables (pass 2, allocated from RAM[16] upwards).

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

from .code import MAX_ADDRESS
from .errors import AddressRangeError, LabelError

PREDEFINED: Mapping[str, int] = MappingProxyType({
    "SP": 0, "LCL": 1, "ARG": 2, "THIS": 3, "THAT": 4,
    "SCREEN": 16384, "KBD": 24576,
    **{f"R{i}": i for i in range(16)}
})

VARIABLE_BASE = 16


class SymbolTable:
    """
    Name -> address mapping, append-only. Create a new one for every run;
    nothing here is shared between instances.
    """

    def __init__(self) -> None:
        self._symbols: Dict[str, int] = dict(PREDEFINED)
        self.labels: Dict[str, int] = {}
        self.variables: Dict[str, int] = {}
        self.next_variable: int = VARIABLE_BASE

    def __contains__(self, name: str) -> bool:
        return name in self._symbols

    def __getitem__(self, name: str) -> int:
        return self._symbols[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)

    def get(self, name: str, default: Optional[int] = None) -> Optional[int]:
        return self._symbols.get(name, default)

    def is_predefined(self, name: str) -> bool:
        return name in PREDEFINED

    def add_label(self, name: str, address: int) -> None:
        if self.is_predefined(name):
            raise LabelError(f"Label shadows predefined symbol: {name}")
        if name in self._symbols:
            raise LabelError(f"Label redefined: {name}")
        self._symbols[name] = address
        self.labels[name] = address

    def resolve(self, name: str) -> int:
        """Address of `name`, allocating a new variable if it is unbound."""
        address = self._symbols.get(name)
        if address is not None:
            return address
        if self.next_variable > MAX_ADDRESS:
            raise AddressRangeError(f"Out of variable addresses for: {name}")
        address = self.next_variable
        self._symbols[name] = address
        self.variables[name] = address
        self.next_variable += 1
        return address
