"""
EgoScript Python API

Provides the host-side interface for compiling EgoScript and handing the
result to the interpreter.
"""

from .context import Context, Script, compile_script, default_script_path
from .types import words_to_array, array_to_words, decode_array

__all__ = [
    'Context',
    'Script',
    'compile_script',
    'default_script_path',
    'words_to_array',
    'array_to_words',
    'decode_array',
]
