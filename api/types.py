"""
EgoScript Instruction Buffers

numpy views of compiled instruction words, in the shape the interpreter
uploads them.
"""

from typing import Iterable, List, Optional
import numpy as np

from compiler.bytecode import FUNCTION_BIT, VALUE_BITS, DATA_SHIFT


def instruction_dtype() -> np.dtype:
    """Get the numpy dtype for a decoded instruction word."""
    return np.dtype([
        ('function', np.bool_),
        ('data', np.uint8),
        ('value', np.uint32),
    ])


def words_to_array(words: Iterable[int], size: Optional[int] = None) -> np.ndarray:
    """
    Pack instruction words into a uint32 array.

    Args:
        words: Instruction words
        size: Pad with zero words up to this length

    Returns:
        Contiguous uint32 array
    """
    arr = np.fromiter((w & 0xFFFFFFFF for w in words), dtype=np.uint32)
    if size is not None:
        if len(arr) > size:
            raise ValueError(f"{len(arr)} words do not fit in a buffer of {size}")
        arr = np.pad(arr, (0, size - len(arr)))
    return arr


def array_to_words(arr: np.ndarray) -> List[int]:
    """Convert a uint32 array back to a list of Python ints."""
    return [int(w) for w in np.asarray(arr, dtype=np.uint32)]


def decode_array(arr: np.ndarray) -> np.ndarray:
    """Split every word of a uint32 array into its fields."""
    arr = np.asarray(arr, dtype=np.uint32)
    decoded = np.zeros(len(arr), dtype=instruction_dtype())
    decoded['function'] = (arr & np.uint32(FUNCTION_BIT)) != 0
    decoded['data'] = (arr >> np.uint32(DATA_SHIFT)) & np.uint32(0x0F)
    decoded['value'] = arr & np.uint32(VALUE_BITS)
    return decoded
