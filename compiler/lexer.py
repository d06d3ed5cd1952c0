"""
EgoScript Lexer

Splits script source into logical lines and lines into classified tokens.

Scripts are line oriented: the line loader hands out one cleaned-up line
at a time, the operator spacer makes sure operators stand as separate
words, and the tokenizer classifies the words of a line one by one.
"""

from typing import Optional, Tuple

from .tokens import Token, TokenKind, MAX_WORD_LENGTH, ASSIGN_VALUE
from .errors import Diagnostics, LexError, TokenError
from .symbols import SymbolTable, default_symbol_table
from .bytecode import VALUE_BITS
from .collaborators import MessageTable, ASSET_NOT_FOUND


MAX_STRING_LENGTH = 512

OPERATOR_CHARS = "+-/*%><&="


def is_newline(c: str) -> bool:
    return c == '\n' or c == '\r'


def is_control(c: str) -> bool:
    return ord(c) < 0x20 or ord(c) == 0x7F


def pack_idsz(chars: str) -> int:
    """Pack a four character IDSZ code into 20 bits, five bits per character."""
    value = 0
    for c in chars:
        value = (value << 5) | ((ord(c) - ord('A')) & 0x1F)
    return value


def space_operators(line: str) -> str:
    """
    Surround operator characters outside string literals with spaces.

    A space is only added where the neighbouring character is not already
    whitespace, so applying this twice gives the same result as once.
    """
    out = []
    inside_string = False
    length = len(line)

    for i, c in enumerate(line):
        if c == '"':
            inside_string = not inside_string

        if inside_string or c not in OPERATOR_CHARS:
            out.append(c)
            continue

        if out and not out[-1].isspace():
            out.append(' ')
        out.append(c)
        if i + 1 < length and not line[i + 1].isspace():
            out.append(' ')

    return ''.join(out)


class LineLoader:
    """Reads logical lines out of a source buffer."""

    def __init__(self, source: str, diagnostics: Diagnostics):
        """
        Initialize the line loader.

        Args:
            source: Complete script source
            diagnostics: Sink for tab warnings
        """
        self.source = source
        self.diagnostics = diagnostics

    def is_at_end(self, cursor: int) -> bool:
        return cursor >= len(self.source)

    def skip_newline(self, cursor: int) -> int:
        """
        Skip one line break at ``cursor``.

        CR and LF each end a line; a CR LF or LF CR pair counts as a single
        break, two equal characters are two breaks.
        """
        source = self.source
        if cursor < len(source) and is_newline(source[cursor]):
            first = source[cursor]
            cursor += 1
            if cursor < len(source) and is_newline(source[cursor]) and source[cursor] != first:
                cursor += 1
        return cursor

    def next_line(self, cursor: int, line_number: int = 0) -> Tuple[str, int]:
        """
        Load the line starting at ``cursor``.

        Returns:
            The cleaned line (empty if it holds nothing but whitespace and
            comments) and the cursor at the start of the next line.
        """
        source = self.source
        chars = []
        tabs_found = False

        # Keep indentation
        while not self.is_at_end(cursor):
            after = self.skip_newline(cursor)
            if after != cursor:
                return "", after

            c = source[cursor]
            if c == '\t':
                tabs_found = True
                c = ' '
            if not c.isspace():
                break

            chars.append(' ')
            cursor += 1

        # Content up to a line break or a comment
        inside_string = False
        while not self.is_at_end(cursor):
            c = source[cursor]
            if is_newline(c):
                break
            if not inside_string and c == '/' and source[cursor + 1:cursor + 2] == '/':
                break

            if c == '"':
                inside_string = not inside_string

            if inside_string:
                if c == '\t':
                    c = '~'
                elif c.isspace() or is_control(c):
                    c = '_'
            elif c == '\t':
                tabs_found = True
                c = ' '
            elif c.isspace() or is_control(c):
                c = ' '

            chars.append(c)
            cursor += 1

        line = ''.join(chars).rstrip()
        if not line.strip():
            line = ""

        if line and tabs_found:
            self.diagnostics.warning(
                LexError, "tab character used for spacing, use two spaces per level", line_number)

        # Skip the rest of the physical line
        while not self.is_at_end(cursor):
            after = self.skip_newline(cursor)
            if after != cursor:
                cursor = after
                break
            cursor += 1

        return line, cursor


class Tokenizer:
    """Turns the words of a line into classified tokens."""

    def __init__(self, diagnostics: Diagnostics,
                 symbols: Optional[SymbolTable] = None,
                 assets=None,
                 messages=None):
        """
        Initialize the tokenizer.

        Args:
            diagnostics: Sink for lexical and lookup errors
            symbols: Opcode table, the shared default table if omitted
            assets: Object with ``resolve(name) -> Optional[int]``
            messages: Object with ``register(text) -> int``
        """
        self.diagnostics = diagnostics
        self.symbols = symbols if symbols is not None else default_symbol_table()
        self.assets = assets
        self.messages = messages if messages is not None else MessageTable()

    def next_token(self, line: str, cursor: int, line_number: int = 0) -> Tuple[Token, int]:
        """
        Read the token starting at or after ``cursor``.

        Returns:
            The token (an end-of-line token once the line is used up) and
            the cursor just past it.
        """
        length = len(line)
        while cursor < length and line[cursor].isspace():
            cursor += 1

        if cursor >= length:
            return Token.end_of_line(line_number), length

        if line[cursor] == '"':
            return self.string(line, cursor, line_number)

        start = cursor
        while cursor < length and not line[cursor].isspace():
            cursor += 1
        word = line[start:cursor]

        if len(word) > MAX_WORD_LENGTH:
            self.diagnostics.error(LexError, f"word too long `{word[:MAX_WORD_LENGTH]}...`", line_number)
            word = word[:MAX_WORD_LENGTH]

        return self.classify(word, line_number), cursor

    def string(self, line: str, cursor: int, line_number: int) -> Tuple[Token, int]:
        """Scan a double-quoted string literal."""
        close = line.find('"', cursor + 1)
        if close < 0:
            self.diagnostics.error(LexError, "unterminated string literal", line_number)
            text = line[cursor + 1:]
            end = len(line)
        else:
            text = line[cursor + 1:close]
            end = close + 1

        if len(text) > MAX_STRING_LENGTH:
            self.diagnostics.error(LexError, "string literal too long", line_number)
            text = text[:MAX_STRING_LENGTH]

        return self.classify_string(text, line_number), end

    def classify(self, word: str, line_number: int) -> Token:
        """Classify a plain word."""
        # Numeric constant
        if word.isascii() and word.isdigit():
            value = int(word)
            if value > VALUE_BITS:
                self.diagnostics.error(LexError, f"constant {word} out of range", line_number)
                value &= VALUE_BITS
            return Token(TokenKind.CONSTANT, value, word, line_number)

        # IDSZ constant
        if len(word) == 6 and word[0] == '[' and word[5] == ']':
            code = word[1:5]
            if not (code.isascii() and code.isalnum()):
                self.diagnostics.error(LexError, f"invalid IDSZ `{word}`", line_number)
            return Token(TokenKind.CONSTANT, pack_idsz(code), word, line_number)

        if word == '=':
            return Token(TokenKind.OPERATOR, ASSIGN_VALUE, word, line_number)

        symbol = self.symbols.lookup(word)
        if symbol is not None:
            return Token(symbol.kind, symbol.value, word, line_number, symbol.index)

        self.diagnostics.error(TokenError, f"unknown opcode `{word}`", line_number)
        return Token(TokenKind.UNKNOWN, 0, word, line_number)

    def classify_string(self, text: str, line_number: int) -> Token:
        """Classify the contents of a string literal."""
        word = f'"{text}"'

        # Asset reference
        if text.startswith('#'):
            name = text[1:]
            slot = self.assets.resolve(name) if self.assets is not None else None
            if slot is None:
                self.diagnostics.error(TokenError, f"failed to load object `{name}`", line_number)
                slot = ASSET_NOT_FOUND
            return Token(TokenKind.CONSTANT, slot, word, line_number)

        if not text:
            self.diagnostics.warning(LexError, "empty string literal", line_number)

        return Token(TokenKind.CONSTANT, self.messages.register(text), word, line_number)
