"""
EgoScript Compiler Package

A Python compiler for EgoScript, the indentation based language that drives
character AI. Compiles script source to packed 32-bit instruction words for
the interpreter.
"""

from typing import Tuple

from .tokens import Token, TokenKind
from .lexer import LineLoader, Tokenizer, space_operators, pack_idsz
from .symbols import Symbol, SymbolTable, default_symbol_table
from .bytecode import ScriptInfo, Instruction
from .codegen import CodeGenerator
from .jumps import resolve_jumps
from .collaborators import MessageTable, AssetTable, ASSET_NOT_FOUND
from .errors import (
    ScriptError, LexError, TokenError, GrammarError, IndentationError,
    CapacityError, CompileError, Diagnostic, Diagnostics, Level,
)

__version__ = "0.1.0"
__all__ = [
    "Token",
    "TokenKind",
    "LineLoader",
    "Tokenizer",
    "space_operators",
    "pack_idsz",
    "Symbol",
    "SymbolTable",
    "default_symbol_table",
    "ScriptInfo",
    "Instruction",
    "CodeGenerator",
    "resolve_jumps",
    "MessageTable",
    "AssetTable",
    "ASSET_NOT_FOUND",
    "ScriptError",
    "LexError",
    "TokenError",
    "GrammarError",
    "IndentationError",
    "CapacityError",
    "CompileError",
    "Diagnostic",
    "Diagnostics",
    "Level",
    "compile_source",
    "compile_file",
    "read_source",
]


def compile_source(source: str, name: str = "<script>", **options) -> Tuple[ScriptInfo, Diagnostics]:
    """
    Compile EgoScript source code to instruction words.

    Args:
        source: EgoScript source code string
        name: Script name used in diagnostics
        **options: Forwarded to CodeGenerator (symbols, assets, messages,
            max_instructions, max_source_size)

    Returns:
        The frozen, jump-resolved script and the diagnostics of the compile.
        Callers must not use a script whose diagnostics report an error.
    """
    codegen = CodeGenerator(name, **options)
    script = codegen.generate(source)

    resolve_jumps(script)

    return script.freeze(), codegen.diagnostics


def compile_file(filepath: str, **options) -> Tuple[ScriptInfo, Diagnostics]:
    """
    Compile an EgoScript source file.

    Args:
        filepath: Path to the script text file

    Returns:
        Same as compile_source, with the path as script name
    """
    return compile_source(read_source(filepath), filepath, **options)


def read_source(filepath: str) -> str:
    """Read script text, replacing undecodable bytes."""
    # newline='' keeps lone CRs for the line loader
    with open(filepath, 'r', encoding='utf-8', errors='replace', newline='') as f:
        return f.read()
