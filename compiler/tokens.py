"""
EgoScript Token Definitions

Defines the token kinds and the Token value type produced by the tokenizer.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


# Longest word the tokenizer keeps; longer words are truncated.
MAX_WORD_LENGTH = 64

# Value of the '=' token.
ASSIGN_VALUE = -1


class TokenKind(Enum):
    """Classification of a token."""

    UNKNOWN = auto()
    CONSTANT = auto()
    VARIABLE = auto()
    FUNCTION = auto()
    OPERATOR = auto()


@dataclass(frozen=True)
class Token:
    """A single classified word of a script line."""

    kind: TokenKind
    value: int
    word: str
    line: int
    symbol_index: Optional[int] = None

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.word!r}, {self.value}, line={self.line})"

    @classmethod
    def end_of_line(cls, line: int) -> 'Token':
        """Token returned once a line has no words left."""
        return cls(TokenKind.UNKNOWN, 0, "", line)

    def is_end_of_line(self) -> bool:
        return self.kind is TokenKind.UNKNOWN and self.word == ""

    def is_operand(self) -> bool:
        """Check if this token may appear as an operand of an assignment."""
        return self.kind in (TokenKind.CONSTANT, TokenKind.VARIABLE)

    def is_assign(self) -> bool:
        """Check if this token is the '=' operator."""
        return self.kind is TokenKind.OPERATOR and self.value == ASSIGN_VALUE
