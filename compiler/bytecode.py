"""
EgoScript Instruction Format

Defines the packed instruction word layout and the compiled script
container handed to the interpreter.

Word layout (32 bits):

    bit  31      FUNCTION_BIT  set for functions and constants
    bits 27-30   DATA_BITS     indentation of a statement word, or the
                               operator code of an operand word
    bits 0-26    VALUE_BITS    opcode, operand payload, count or address
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, TYPE_CHECKING
import struct

from .opcodes import ScriptOperator, FUNCTION_END

if TYPE_CHECKING:
    from .symbols import SymbolTable


FUNCTION_BIT = 0x80000000
DATA_BITS = 0x78000000
VALUE_BITS = 0x07FFFFFF
DATA_SHIFT = 27
MAX_INDENT = 15

# Operand counts are read back through an 8-bit clip.
COUNT_BITS = 0xFF

# Default limits
MAX_SOURCE_SIZE = 1024 * 1024
MAX_INSTRUCTIONS = 4096

END_VALUE = FUNCTION_BIT | FUNCTION_END

OPERATOR_SYMBOLS = {
    ScriptOperator.ADD: "+",
    ScriptOperator.SUB: "-",
    ScriptOperator.AND: "&",
    ScriptOperator.SHR: ">",
    ScriptOperator.SHL: "<",
    ScriptOperator.MUL: "*",
    ScriptOperator.DIV: "/",
    ScriptOperator.MOD: "%",
}


def set_data_bits(value: int) -> int:
    """Move a value into the data field, clipped to four bits."""
    return (value & 0x0F) << DATA_SHIFT


def get_data_bits(word: int) -> int:
    return (word >> DATA_SHIFT) & 0x0F


def is_function_word(word: int) -> bool:
    return bool(word & FUNCTION_BIT)


@dataclass(frozen=True)
class Instruction:
    """Decoded view of a single instruction word."""

    value: int
    data: int = 0
    function: bool = False

    def encode(self) -> int:
        word = set_data_bits(self.data) | (self.value & VALUE_BITS)
        if self.function:
            word |= FUNCTION_BIT
        return word

    @classmethod
    def decode(cls, word: int) -> 'Instruction':
        return cls(word & VALUE_BITS, get_data_bits(word), is_function_word(word))


@dataclass
class ScriptInfo:
    """
    Container for one compiled script.

    Instructions are appended by the code generator, patched in place by
    the jump resolver and then frozen.
    """

    # Magic number for file format
    MAGIC = b'EGS\x00'
    VERSION = 1

    name: str = "<script>"
    instructions: List[int] = field(default_factory=list)
    max_instructions: int = MAX_INSTRUCTIONS
    frozen: bool = False

    def emit(self, word: int) -> Optional[int]:
        """Append a word, returning its address or None if the buffer is full."""
        self._check_mutable()
        if self.is_full():
            return None
        address = len(self.instructions)
        self.instructions.append(word & 0xFFFFFFFF)
        return address

    def patch(self, address: int, word: int) -> None:
        """Overwrite a previously emitted word."""
        self._check_mutable()
        if not 0 <= address < len(self.instructions):
            raise IndexError(f"Cannot patch address {address}, length is {len(self.instructions)}")
        self.instructions[address] = word & 0xFFFFFFFF

    def is_full(self) -> bool:
        return len(self.instructions) >= self.max_instructions

    def freeze(self) -> 'ScriptInfo':
        """Make the instruction list read-only."""
        self.frozen = True
        return self

    def _check_mutable(self) -> None:
        if self.frozen:
            raise ValueError(f"Script {self.name!r} is frozen")

    def __len__(self) -> int:
        return len(self.instructions)

    def __getitem__(self, address: int) -> int:
        return self.instructions[address]

    def __iter__(self) -> Iterator[int]:
        return iter(self.instructions)

    def serialize(self) -> bytes:
        """Serialize the script to binary format."""
        output = bytearray()

        # Header
        output.extend(self.MAGIC)
        output.extend(struct.pack('<H', self.VERSION))
        output.extend(struct.pack('<H', 0))  # Flags

        name_encoded = self.name.encode('utf-8')
        output.extend(struct.pack('<H', len(name_encoded)))
        output.extend(name_encoded)

        output.extend(struct.pack('<I', len(self.instructions)))
        output.extend(struct.pack(f'<{len(self.instructions)}I', *self.instructions))

        return bytes(output)

    @classmethod
    def deserialize(cls, data: bytes) -> 'ScriptInfo':
        """Deserialize a script from binary format; the result is frozen."""
        offset = 0

        magic = data[offset:offset+4]
        if magic != cls.MAGIC:
            raise ValueError("Invalid script magic number")
        offset += 4

        version = struct.unpack_from('<H', data, offset)[0]
        if version != cls.VERSION:
            raise ValueError(f"Unsupported script version: {version}")
        offset += 4  # version + flags

        name_len = struct.unpack_from('<H', data, offset)[0]
        offset += 2
        name = data[offset:offset+name_len].decode('utf-8')
        offset += name_len

        count = struct.unpack_from('<I', data, offset)[0]
        offset += 4
        words = list(struct.unpack_from(f'<{count}I', data, offset))

        return cls(name=name, instructions=words,
                   max_instructions=max(count, MAX_INSTRUCTIONS)).freeze()

    def disassemble(self, symbols: Optional['SymbolTable'] = None) -> str:
        """Disassemble the instruction stream to human-readable format."""
        from .symbols import default_symbol_table
        from .tokens import TokenKind

        if symbols is None:
            symbols = default_symbol_table()

        lines = [f"=== {self.name} ({len(self.instructions)} words) ==="]
        words = self.instructions
        end = len(words)
        index = 0
        while index < end:
            word = words[index]
            indent = get_data_bits(word)
            pad = "  " * indent
            value = word & VALUE_BITS

            if is_function_word(word):
                name = symbols.name_of(TokenKind.FUNCTION, value) or f"<function {value}>"
                target = f"{words[index + 1] & VALUE_BITS:04d}" if index + 1 < end else "????"
                lines.append(f"  {index:04d}: {pad}{name} -> {target}")
                index += 2
                continue

            name = symbols.name_of(TokenKind.VARIABLE, value) or f"<variable {value}>"
            count = words[index + 1] & COUNT_BITS if index + 1 < end else 0
            parts = []
            for position, operand in enumerate(words[index + 2:index + 2 + count]):
                if position > 0:
                    operator = get_data_bits(operand)
                    parts.append(OPERATOR_SYMBOLS.get(operator, f"<op {operator}>"))
                if is_function_word(operand):
                    parts.append(str(operand & VALUE_BITS))
                else:
                    operand_value = operand & VALUE_BITS
                    parts.append(symbols.name_of(TokenKind.VARIABLE, operand_value)
                                 or f"<variable {operand_value}>")
            lines.append(f"  {index:04d}: {pad}{name} = {' '.join(parts)}")
            index += 2 + count

        return "\n".join(lines)
