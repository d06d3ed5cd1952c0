"""
EgoScript Code Generator

Parses a script line by line and emits instruction words.

Every non-empty line is one statement, its indentation giving the block
nesting:

    IfSpawned                  function: opcode word + jump placeholder
      tmpargument = 5 + rand   assignment: variable word + operand count
      SetState                 + one word per operand
    End                        end of script at indentation 0

Errors are recorded in the diagnostics and the generator moves on to the
next line, so a single compile reports every problem it can find.
"""

import logging
from typing import Optional

from .tokens import Token, TokenKind
from .lexer import LineLoader, Tokenizer, space_operators
from .bytecode import (
    ScriptInfo, FUNCTION_BIT, VALUE_BITS, COUNT_BITS, MAX_INDENT, MAX_INSTRUCTIONS,
    MAX_SOURCE_SIZE, set_data_bits,
)
from .opcodes import FUNCTION_END
from .errors import Diagnostics, GrammarError, IndentationError, CapacityError, LexError
from .symbols import SymbolTable

logger = logging.getLogger(__name__)

# Data bits of the first operand of an assignment.
NEUTRAL_OPERATOR = 0


class CodeGenerator:
    """Generates the instruction list of a single script."""

    def __init__(self, name: str = "<script>",
                 symbols: Optional[SymbolTable] = None,
                 assets=None,
                 messages=None,
                 max_instructions: int = MAX_INSTRUCTIONS,
                 max_source_size: int = MAX_SOURCE_SIZE):
        self.name = name
        self.max_source_size = max_source_size
        self.diagnostics = Diagnostics(name)
        self.script = ScriptInfo(name=name, max_instructions=max_instructions)
        self.tokenizer = Tokenizer(self.diagnostics, symbols, assets, messages)
        self.line = 0
        self.line_text = ""
        self.capacity_reported = False

    def generate(self, source: str) -> ScriptInfo:
        """Parse the whole source and emit its instructions."""
        source = self.check_source(source)
        loader = LineLoader(source, self.diagnostics)

        cursor = 0
        self.line = 0
        while not loader.is_at_end(cursor):
            self.line += 1
            self.line_text, cursor = loader.next_line(cursor, self.line)
            if not self.line_text:
                continue

            if not self.statement(self.line_text):
                break

        # The interpreter always needs a final End to land on
        self.emit(FUNCTION_BIT | FUNCTION_END)
        self.emit(0)

        logger.debug("compiled %s: %d words, %d diagnostics",
                     self.name, len(self.script), len(self.diagnostics))
        return self.script

    def check_source(self, source: str) -> str:
        """Apply the source size limit and stop at the first NUL character."""
        if len(source) > self.max_source_size:
            self.diagnostics.error(
                CapacityError,
                f"script is {len(source)} characters, limit is {self.max_source_size}", 0)
            source = source[:self.max_source_size]

        nul = source.find('\0')
        if nul >= 0:
            line = source.count('\n', 0, nul) + 1
            self.diagnostics.error(LexError, "NUL character in script source", line)
            source = source[:nul]

        return source

    # =========================================================================
    # Statements
    # =========================================================================

    def statement(self, line: str) -> bool:
        """
        Compile one line.

        Returns:
            False once the terminating End has been read
        """
        indent = self.indentation(line)
        line = space_operators(line)
        token, cursor = self.tokenizer.next_token(line, 0, self.line)

        if token.kind is TokenKind.FUNCTION:
            if token.value == FUNCTION_END and indent == 0:
                return False
            self.function(token, indent)
        elif token.kind is TokenKind.VARIABLE:
            self.assignment(token, indent, line, cursor)
        elif token.kind is TokenKind.CONSTANT:
            self.diagnostics.error(GrammarError, f"invalid constant `{token.word}` at start of line", self.line)
        elif token.kind is TokenKind.OPERATOR:
            self.diagnostics.error(GrammarError, f"invalid operator `{token.word}` at start of line", self.line)
        # Unknown opcodes were already reported by the tokenizer

        return True

    def indentation(self, line: str) -> int:
        """Get the indentation level of a line, two spaces per level."""
        spaces = len(line) - len(line.lstrip())
        if spaces % 2:
            self.diagnostics.error(IndentationError, "invalid indentation - must be even", self.line)

        level = spaces // 2
        if level > MAX_INDENT:
            self.diagnostics.error(
                IndentationError, f"too many indentation levels ({level}), clamped to {MAX_INDENT}", self.line)
            level = MAX_INDENT
        return level

    def function(self, token: Token, indent: int) -> None:
        """Emit a function call and the word its jump target goes into."""
        self.emit_token(token, set_data_bits(indent))
        self.emit(0)

    def assignment(self, target: Token, indent: int, line: str, cursor: int) -> None:
        """
        Emit ``variable = operand (operator operand)*``.

        Each operand word carries the code of the operator before it, the
        first carries the neutral code. Operands past the 8-bit count limit
        are reported and dropped.
        """
        self.emit_token(target, set_data_bits(indent))
        count_address = self.emit(0)

        token, cursor = self.tokenizer.next_token(line, cursor, self.line)
        if token.is_assign():
            token, cursor = self.tokenizer.next_token(line, cursor, self.line)
        else:
            self.diagnostics.error(GrammarError, f"expected `=` after `{target.word}`", self.line)

        operands = 0
        overflowed = False
        operator = NEUTRAL_OPERATOR
        expect_operand = True

        # Leading operator, e.g. `tmpx = - 5`
        if token.kind is TokenKind.OPERATOR and not token.is_assign():
            operator = token.value
            token, cursor = self.tokenizer.next_token(line, cursor, self.line)

        while not token.is_end_of_line():
            if expect_operand:
                if token.is_operand():
                    if operands == COUNT_BITS:
                        if not overflowed:
                            overflowed = True
                            self.diagnostics.error(
                                GrammarError, f"too many operands, limit is {COUNT_BITS}", self.line)
                    elif self.emit_token(token, set_data_bits(operator)) is not None:
                        operands += 1
                else:
                    self.invalid_operand(token)
                expect_operand = False
            else:
                if token.kind is TokenKind.OPERATOR and not token.is_assign():
                    operator = token.value
                    expect_operand = True
                else:
                    self.diagnostics.error(GrammarError, f"expected operator, found `{token.word}`", self.line)

            token, cursor = self.tokenizer.next_token(line, cursor, self.line)

        if expect_operand:
            self.diagnostics.error(GrammarError, "missing operand at end of line", self.line)

        if count_address is not None:
            self.script.patch(count_address, operands)

    def invalid_operand(self, token: Token) -> None:
        # Unknown words already have a diagnostic
        if token.kind is not TokenKind.UNKNOWN:
            self.diagnostics.error(GrammarError, f"invalid operand `{token.word}`", self.line)

    # =========================================================================
    # Emission
    # =========================================================================

    def emit_token(self, token: Token, highbits: int) -> Optional[int]:
        """Emit a token's value; functions and constants carry the function bit."""
        word = highbits | (token.value & VALUE_BITS)
        if token.kind in (TokenKind.FUNCTION, TokenKind.CONSTANT):
            word |= FUNCTION_BIT
        return self.emit(word)

    def emit(self, word: int) -> Optional[int]:
        """Append a word, reporting the first overflow of the buffer."""
        address = self.script.emit(word)
        if address is None and not self.capacity_reported:
            self.capacity_reported = True
            self.diagnostics.error(
                CapacityError,
                f"script is larger than {self.script.max_instructions} instruction words",
                self.line)
        return address

