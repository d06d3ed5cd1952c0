"""
EgoScript Jump Resolver

Fills in the fail-jump word that follows every function instruction.

A function at indentation D guards the block indented below it. If the
function fails, the interpreter continues at the first later statement
indented at D or less, so that is the address patched into the word after
the function. Functions with nothing after them jump one past the end.
"""

from .bytecode import ScriptInfo, get_data_bits, is_function_word, COUNT_BITS


def instruction_size(script: ScriptInfo, index: int) -> int:
    """
    Number of words taken by the statement starting at ``index``.

    Functions take two words. Assignments take two words plus one per
    operand, with the count read back through an 8-bit clip.
    """
    if is_function_word(script[index]):
        return 2
    if index + 1 >= len(script):
        return 2
    return 2 + (script[index + 1] & COUNT_BITS)


def jump_target(script: ScriptInfo, index: int) -> int:
    """Find where the function at ``index`` jumps to when it fails."""
    end = len(script)
    target_indent = get_data_bits(script[index])

    index += 2
    while index < end:
        if get_data_bits(script[index]) <= target_indent:
            return index
        index += instruction_size(script, index)

    return end


def resolve_jumps(script: ScriptInfo) -> ScriptInfo:
    """
    Patch every function's placeholder word with its jump target.

    Single forward pass over the finished instruction list. Statements cut
    off by a full buffer are left alone.
    """
    index = 0
    end = len(script)

    while index < end:
        if is_function_word(script[index]) and index + 1 < end:
            script.patch(index + 1, jump_target(script, index))
        index += instruction_size(script, index)

    return script
