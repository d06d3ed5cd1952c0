"""
EgoScript Context

The main interface for compiling EgoScript from a host application.
"""

from typing import Optional
from dataclasses import dataclass
from pathlib import Path
import numpy as np

from compiler import (
    compile_source, read_source, ScriptInfo, Diagnostics, SymbolTable, MessageTable,
)
from compiler.bytecode import MAX_INSTRUCTIONS, MAX_SOURCE_SIZE

from .types import words_to_array


@dataclass
class Script:
    """
    A compiled EgoScript script.

    Contains the resolved instruction words, the diagnostics of the compile
    and the string literals it registered. A script compiled in place of
    another one records why in ``fallback_reason``, and keeps the failed
    compile in ``fallback_from`` when there was one.
    """

    source: str
    info: ScriptInfo
    diagnostics: Diagnostics
    messages: Optional[MessageTable] = None
    filename: Optional[str] = None
    fallback_from: Optional['Script'] = None
    fallback_reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        """True if the compile reported no errors."""
        return not self.diagnostics.had_error

    @property
    def words(self) -> np.ndarray:
        """Instruction words as a uint32 array."""
        return words_to_array(self.info.instructions)

    def check(self) -> 'Script':
        """Raise CompileError if the compile reported errors."""
        self.diagnostics.raise_for_errors()
        return self

    def disassemble(self, symbols: Optional[SymbolTable] = None) -> str:
        """Get disassembly of the instruction words."""
        return self.info.disassemble(symbols)

    def save(self, path: str) -> None:
        """Save compiled instructions to file."""
        data = self.info.serialize()
        with open(path, 'wb') as f:
            f.write(data)

    @classmethod
    def load(cls, path: str) -> 'Script':
        """Load compiled instructions from file."""
        with open(path, 'rb') as f:
            data = f.read()
        info = ScriptInfo.deserialize(data)
        return cls(source="", info=info, diagnostics=Diagnostics(info.name), filename=path)


class Context:
    """
    EgoScript compilation context.

    Holds the symbol table, the asset resolver and the buffer limits shared
    by every script compiled through it.

    Example:
        ctx = Context()
        script = ctx.compile('IfSpawned\\n  tmpargument = 5\\nEnd\\n')
        words = script.words
    """

    def __init__(self,
                 symbols: Optional[SymbolTable] = None,
                 assets=None,
                 max_source_size: int = MAX_SOURCE_SIZE,
                 max_instructions: int = MAX_INSTRUCTIONS,
                 debug: bool = False):
        """
        Create a new EgoScript context.

        Args:
            symbols: Opcode table, the built-in table if omitted
            assets: Resolver for ``"#name"`` references, see AssetTable
            max_source_size: Largest accepted source, in characters
            max_instructions: Size of the instruction buffer, in words
            debug: Print compile summaries and diagnostics
        """
        self.symbols = symbols
        self.assets = assets
        self.max_source_size = max_source_size
        self.max_instructions = max_instructions
        self.debug = debug

    def compile(self, source: str, name: str = "<script>",
                messages: Optional[MessageTable] = None) -> Script:
        """
        Compile EgoScript source code.

        Args:
            source: EgoScript source code string
            name: Script name for diagnostics
            messages: Registrar for string literals, a fresh MessageTable
                if omitted

        Returns:
            Compiled Script object; check ``ok`` before using it
        """
        if messages is None:
            messages = MessageTable()

        info, diagnostics = compile_source(
            source, name,
            symbols=self.symbols,
            assets=self.assets,
            messages=messages,
            max_instructions=self.max_instructions,
            max_source_size=self.max_source_size,
        )

        if self.debug:
            print(f"Compiled {name}: {len(info)} words, "
                  f"{len(diagnostics.errors)} error(s), {len(diagnostics.warnings)} warning(s)")
            for diagnostic in diagnostics:
                print(f"  {diagnostic}")

        return Script(source=source, info=info, diagnostics=diagnostics,
                      messages=messages, filename=name)

    def compile_file(self, path: str) -> Script:
        """
        Compile EgoScript source file.

        Args:
            path: Path to the script text file

        Returns:
            Compiled Script object
        """
        return self.compile(read_source(path), name=str(path))

    def load_script(self, path: str, fallback: Optional[str] = None) -> Script:
        """
        Compile a script file, falling back to a default script.

        The fallback is compiled instead when ``path`` cannot be read or
        compiles with errors.

        Args:
            path: Path to the script text file
            fallback: Path to the default script

        Returns:
            The compiled script, or the compiled fallback with
            ``fallback_from`` and ``fallback_reason`` set
        """
        script = None
        try:
            script = self.compile_file(path)
        except OSError as e:
            if fallback is None:
                raise
            reason = f"cannot read {path}: {e.strerror}"
        else:
            if script.ok or fallback is None:
                return script
            reason = f"{path} compiled with {len(script.diagnostics.errors)} error(s)"

        if self.debug:
            print(f"Unable to load script {path}, loading default script {fallback} instead")
        substitute = self.compile_file(fallback)
        substitute.fallback_from = script
        substitute.fallback_reason = reason
        return substitute


def compile_script(source: str, name: str = "<script>", **kwargs) -> Script:
    """
    Convenience function to compile a script with a default context.

    Args:
        source: EgoScript source code
        name: Script name for diagnostics
        **kwargs: Context options

    Returns:
        Compiled Script object
    """
    return Context(**kwargs).compile(source, name)


def default_script_path() -> Path:
    """Location of the bundled default script used as a fallback."""
    return Path(__file__).parent / "data" / "default_script.txt"
