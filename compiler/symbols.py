"""
EgoScript Symbol Table

Immutable mapping from opcode name to its kind and value. The default table
is built once, on first use, and shared read-only by every compile.
"""

from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

from .tokens import TokenKind
from .opcodes import FUNCTION_NAMES, CONSTANTS, VARIABLES, OPERATORS


@dataclass(frozen=True)
class Symbol:
    """A single symbol table entry."""

    name: str
    kind: TokenKind
    value: int
    index: int


class SymbolTable:
    """
    Case-sensitive, read-only opcode lookup.

    When a name appears twice the first entry wins, so aliases must be
    listed after the entry they shadow.
    """

    def __init__(self, entries: Iterable[Tuple[str, TokenKind, int]]):
        symbols: Dict[str, Symbol] = {}
        ordered = []
        for index, (name, kind, value) in enumerate(entries):
            symbol = Symbol(name, kind, int(value), index)
            ordered.append(symbol)
            symbols.setdefault(name, symbol)
        self._symbols: Mapping[str, Symbol] = MappingProxyType(symbols)
        self._ordered: Tuple[Symbol, ...] = tuple(ordered)

    def lookup(self, name: str) -> Optional[Symbol]:
        """Get the entry for an exact name, or None."""
        return self._symbols.get(name)

    def name_of(self, kind: TokenKind, value: int) -> Optional[str]:
        """Reverse lookup used by the disassembler; first match wins."""
        for symbol in self._ordered:
            if symbol.kind is kind and symbol.value == value:
                return symbol.name
        return None

    def __getitem__(self, name: str) -> Symbol:
        return self._symbols[name]

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Tuple[TokenKind, int]]) -> 'SymbolTable':
        """Build a table from ``{name: (kind, value)}``."""
        return cls((name, kind, value) for name, (kind, value) in mapping.items())


def _default_entries() -> Iterator[Tuple[str, TokenKind, int]]:
    for value, name in enumerate(FUNCTION_NAMES):
        yield name, TokenKind.FUNCTION, value
    for name, value in CONSTANTS:
        yield name, TokenKind.CONSTANT, value
    for name, value in VARIABLES:
        yield name, TokenKind.VARIABLE, value
    for name, value in OPERATORS:
        yield name, TokenKind.OPERATOR, int(value)


@lru_cache(maxsize=None)
def default_symbol_table() -> SymbolTable:
    """Get the shared symbol table built from the static opcode list."""
    return SymbolTable(_default_entries())
