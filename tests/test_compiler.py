"""
EgoScript Compiler Tests

Tests for the EgoScript compiler: line loader, operator spacer, tokenizer,
code generator and jump resolver.
"""

import logging
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from compiler import (
    compile_source, LineLoader, Tokenizer, space_operators, pack_idsz,
    SymbolTable, default_symbol_table, ScriptInfo, Instruction, resolve_jumps,
    MessageTable, AssetTable, ASSET_NOT_FOUND, Diagnostics, CompileError,
    compile_file, read_source,
)
from compiler.tokens import TokenKind, MAX_WORD_LENGTH
from compiler.bytecode import (
    FUNCTION_BIT, END_VALUE, VALUE_BITS, COUNT_BITS, set_data_bits, get_data_bits,
)
from compiler.opcodes import FUNCTION_END, ScriptOperator
from compiler.errors import (
    LexError, TokenError, GrammarError, IndentationError, CapacityError, Level,
)


def opcode(name: str) -> int:
    return default_symbol_table()[name].value


def function_word(name: str, indent: int = 0) -> int:
    return FUNCTION_BIT | set_data_bits(indent) | opcode(name)


def compile_words(source: str, **options):
    script, diagnostics = compile_source(source, "test.txt", **options)
    return list(script.instructions), diagnostics


# =============================================================================
# Line Loader Tests
# =============================================================================

class TestLineLoader:
    """Logical line splitting tests."""

    def load(self, source: str):
        diagnostics = Diagnostics("test.txt")
        loader = LineLoader(source, diagnostics)
        lines = []
        cursor = 0
        line_number = 0
        while not loader.is_at_end(cursor):
            line_number += 1
            line, cursor = loader.next_line(cursor, line_number)
            lines.append(line)
        return lines, diagnostics

    def test_blank_line_is_empty(self):
        lines, _ = self.load("\nIfSpawned\n")
        assert lines == ["", "IfSpawned"]

    def test_crlf_is_one_break(self):
        lines, _ = self.load("IfSpawned\r\nEnd")
        assert lines == ["IfSpawned", "End"]

    def test_lfcr_is_one_break(self):
        lines, _ = self.load("IfSpawned\n\rEnd")
        assert lines == ["IfSpawned", "End"]

    def test_lone_cr_is_a_break(self):
        lines, _ = self.load("IfSpawned\rEnd")
        assert lines == ["IfSpawned", "End"]

    def test_repeated_breaks_are_separate_lines(self):
        lines, _ = self.load("IfSpawned\n\nEnd")
        assert lines == ["IfSpawned", "", "End"]

    def test_cursor_advances_past_break(self):
        loader = LineLoader("IfSpawned\r\nEnd", Diagnostics())
        line, cursor = loader.next_line(0)
        assert line == "IfSpawned"
        assert cursor == 11

    def test_indentation_kept(self):
        lines, _ = self.load("    DoNothing")
        assert lines == ["    DoNothing"]

    def test_comment_stripped(self):
        lines, _ = self.load("  tmpx = 5 // set x\nEnd")
        assert lines == ["  tmpx = 5", "End"]

    def test_comment_only_line_is_empty(self):
        lines, _ = self.load("// just a comment\nEnd")
        assert lines == ["", "End"]

    def test_comment_marker_inside_string_kept(self):
        lines, _ = self.load('tmpargument = "a//b"')
        assert lines == ['tmpargument = "a//b"']

    def test_whitespace_inside_string_replaced(self):
        lines, _ = self.load('tmpargument = "a b\tc"')
        assert lines == ['tmpargument = "a_b~c"']

    def test_trailing_whitespace_stripped(self):
        lines, _ = self.load("IfSpawned   \nEnd")
        assert lines == ["IfSpawned", "End"]

    def test_whitespace_only_line_is_empty(self):
        lines, _ = self.load("      \nEnd")
        assert lines == ["", "End"]

    def test_tab_becomes_space_with_warning(self):
        lines, diagnostics = self.load("\tDoNothing")
        assert lines == [" DoNothing"]
        assert len(diagnostics.warnings) == 1
        assert not diagnostics.had_error

    def test_no_warning_without_tabs(self):
        _, diagnostics = self.load("  DoNothing\nEnd\n")
        assert len(diagnostics) == 0


# =============================================================================
# Operator Spacer Tests
# =============================================================================

class TestOperatorSpacer:
    """Operator spacing tests."""

    def test_spaces_inserted(self):
        assert space_operators("tmpx=5+rand") == "tmpx = 5 + rand"

    def test_already_spaced_unchanged(self):
        assert space_operators("tmpx = 5 + rand") == "tmpx = 5 + rand"

    def test_indentation_preserved(self):
        assert space_operators("  tmpx=1") == "  tmpx = 1"

    def test_operator_at_line_end(self):
        assert space_operators("tmpx=") == "tmpx ="

    def test_string_contents_untouched(self):
        assert space_operators('tmpx="a+b=c%d"') == 'tmpx = "a+b=c%d"'

    @pytest.mark.parametrize("line", [
        "tmpx=5+rand",
        "  tmpy = selfy-64*2",
        'tmpargument="x+y"&3',
        "tmpx==>5",
        "a+-b",
        "",
        "IfSpawned",
        '"unterminated+string',
    ])
    def test_idempotent(self, line):
        once = space_operators(line)
        assert space_operators(once) == once


# =============================================================================
# Tokenizer Tests
# =============================================================================

class TestTokenizer:
    """Token classification tests."""

    def setup_method(self):
        self.diagnostics = Diagnostics("test.txt")
        self.messages = MessageTable()
        self.assets = AssetTable({"objects/sword.obj": 12})
        self.tokenizer = Tokenizer(self.diagnostics, assets=self.assets, messages=self.messages)

    def token(self, word: str):
        token, _ = self.tokenizer.next_token(word, 0, 1)
        return token

    @pytest.mark.parametrize("word,value", [
        ("0", 0),
        ("5", 5),
        ("123", 123),
        ("65535", 65535),
    ])
    def test_numeric_constant(self, word, value):
        token = self.token(word)
        assert token.kind is TokenKind.CONSTANT
        assert token.value == value
        assert token.symbol_index is None

    def test_idsz_packing(self):
        assert pack_idsz("ABCD") == (0 << 15) | (1 << 10) | (2 << 5) | 3
        assert pack_idsz("NONE") == 440740

    def test_idsz_constant(self):
        token = self.token("[NONE]")
        assert token.kind is TokenKind.CONSTANT
        assert token.value == pack_idsz("NONE")
        assert not self.diagnostics.had_error

    def test_invalid_idsz_reported(self):
        token = self.token("[A-B!]")
        assert token.kind is TokenKind.CONSTANT
        assert self.diagnostics.of_type(LexError)

    def test_assign(self):
        token = self.token("=")
        assert token.kind is TokenKind.OPERATOR
        assert token.value == -1
        assert token.is_assign()

    @pytest.mark.parametrize("word,value", [
        ("+", ScriptOperator.ADD),
        ("-", ScriptOperator.SUB),
        ("&", ScriptOperator.AND),
        (">", ScriptOperator.SHR),
        ("<", ScriptOperator.SHL),
        ("*", ScriptOperator.MUL),
        ("/", ScriptOperator.DIV),
        ("%", ScriptOperator.MOD),
    ])
    def test_operators(self, word, value):
        token = self.token(word)
        assert token.kind is TokenKind.OPERATOR
        assert token.value == value

    def test_function(self):
        token = self.token("IfSpawned")
        assert token.kind is TokenKind.FUNCTION
        assert token.value == 0
        assert token.symbol_index == default_symbol_table()["IfSpawned"].index

    def test_variable(self):
        token = self.token("tmpargument")
        assert token.kind is TokenKind.VARIABLE
        assert token.value == 4

    def test_named_constant(self):
        token = self.token("STATECOMBAT")
        assert token.kind is TokenKind.CONSTANT
        assert token.value == 7

    def test_lookup_is_case_sensitive(self):
        token = self.token("ifspawned")
        assert token.kind is TokenKind.UNKNOWN
        assert self.diagnostics.had_error
        assert self.diagnostics.of_type(TokenError)

    def test_message_strings(self):
        first = self.token('"Hello_there"')
        second = self.token('"Goodbye"')
        again = self.token('"Hello_there"')
        assert first.kind is TokenKind.CONSTANT
        assert (first.value, second.value, again.value) == (0, 1, 0)
        assert self.messages.messages == ["Hello_there", "Goodbye"]

    def test_empty_string_warns(self):
        token = self.token('""')
        assert token.kind is TokenKind.CONSTANT
        assert len(self.diagnostics.warnings) == 1
        assert not self.diagnostics.had_error

    def test_asset_reference(self):
        token = self.token('"#sword.obj"')
        assert token.kind is TokenKind.CONSTANT
        assert token.value == 12
        assert len(self.messages) == 0

    def test_missing_asset_reference(self):
        token = self.token('"#shield.obj"')
        assert token.kind is TokenKind.CONSTANT
        assert token.value == ASSET_NOT_FOUND
        assert self.diagnostics.had_error

    def test_asset_loader_called_for_unknown_names(self):
        assets = AssetTable(loader=lambda name: 40 if name == "bow.obj" else None)
        tokenizer = Tokenizer(Diagnostics(), assets=assets)
        token, _ = tokenizer.next_token('"#bow.obj"', 0)
        assert token.value == 40

    def test_asset_added_by_host(self):
        assets = AssetTable()
        assets.add("objects/bow.obj", 40)
        tokenizer = Tokenizer(Diagnostics(), assets=assets)
        token, _ = tokenizer.next_token('"#bow.obj"', 0)
        assert token.value == 40

    @pytest.mark.parametrize("slot", [-1, 1024])
    def test_asset_slot_out_of_range(self, slot):
        with pytest.raises(ValueError):
            AssetTable().add("objects/bow.obj", slot)

    def test_unterminated_string(self):
        line = '"never closed'
        token, cursor = self.tokenizer.next_token(line, 0, 1)
        assert token.kind is TokenKind.CONSTANT
        assert cursor == len(line)
        assert self.diagnostics.of_type(LexError)
        assert self.messages.messages == ["never closed"]

    def test_word_too_long(self):
        token = self.token("x" * 100)
        assert len(token.word) == MAX_WORD_LENGTH
        assert self.diagnostics.of_type(LexError)

    def test_end_of_line(self):
        token, cursor = self.tokenizer.next_token("   ", 0, 1)
        assert token.is_end_of_line()
        assert cursor == 3

    def test_token_sequence(self):
        line = "tmpx = 5 + rand"
        cursor = 0
        kinds = []
        while True:
            token, cursor = self.tokenizer.next_token(line, cursor, 1)
            if token.is_end_of_line():
                break
            kinds.append(token.kind)
        assert kinds == [TokenKind.VARIABLE, TokenKind.OPERATOR, TokenKind.CONSTANT,
                         TokenKind.OPERATOR, TokenKind.VARIABLE]

    def test_tokens_carry_line_number(self):
        token, _ = self.tokenizer.next_token("DoNothing", 0, 42)
        assert token.line == 42


# =============================================================================
# Symbol Table Tests
# =============================================================================

class TestSymbolTable:
    """Symbol table tests."""

    def test_default_table_is_shared(self):
        assert default_symbol_table() is default_symbol_table()

    def test_end_function(self):
        symbol = default_symbol_table()["End"]
        assert symbol.kind is TokenKind.FUNCTION
        assert symbol.value == FUNCTION_END == 53

    def test_aliases(self):
        table = default_symbol_table()
        assert table["tmpdist"].value == table["tmpdistance"].value == 2

    def test_table_is_read_only(self):
        table = default_symbol_table()
        with pytest.raises(TypeError):
            table._symbols["IfSpawned"] = None

    def test_reverse_lookup(self):
        table = default_symbol_table()
        assert table.name_of(TokenKind.VARIABLE, 4) == "tmpargument"
        assert table.name_of(TokenKind.FUNCTION, FUNCTION_END) == "End"

    def test_custom_table(self):
        table = SymbolTable.from_mapping({"Go": (TokenKind.FUNCTION, 3)})
        assert "Go" in table
        assert "End" not in table
        assert len(table) == 1


# =============================================================================
# Code Generator Tests
# =============================================================================

class TestCodeGenerator:
    """Statement compilation tests."""

    def test_minimal_script(self):
        words, diagnostics = compile_words("End")
        assert words == [END_VALUE, 2]
        assert not diagnostics.had_error

    def test_empty_script(self):
        words, diagnostics = compile_words("")
        assert words == [END_VALUE, 2]
        assert len(diagnostics) == 0

    def test_readme_example(self):
        symbols = SymbolTable.from_mapping({
            "IfSpawned": (TokenKind.FUNCTION, 0),
            "SetState": (TokenKind.VARIABLE, 54),
            "End": (TokenKind.FUNCTION, FUNCTION_END),
        })
        words, diagnostics = compile_words("IfSpawned\n  SetState = 5\nEnd\n", symbols=symbols)
        assert not diagnostics.had_error
        assert words == [
            FUNCTION_BIT | 0, 5,
            set_data_bits(1) | 54, 1, FUNCTION_BIT | 5,
            END_VALUE, 7,
        ]

    def test_assignment_then_call(self):
        source = "IfSpawned\n  tmpargument = STATEWANDER\n  SetState\nEnd\n"
        words, diagnostics = compile_words(source)
        assert not diagnostics.had_error
        assert words == [
            function_word("IfSpawned"), 7,
            set_data_bits(1) | opcode("tmpargument"), 1, FUNCTION_BIT | 1,
            function_word("SetState", 1), 7,
            END_VALUE, 9,
        ]

    def test_operator_codes_on_operands(self):
        words, diagnostics = compile_words("tmpx = 1 + selfx - 3 * 2\nEnd")
        assert not diagnostics.had_error
        assert words[:6] == [
            opcode("tmpx"), 4,
            FUNCTION_BIT | 1,
            set_data_bits(ScriptOperator.ADD) | opcode("selfx"),
            FUNCTION_BIT | set_data_bits(ScriptOperator.SUB) | 3,
            FUNCTION_BIT | set_data_bits(ScriptOperator.MUL) | 2,
        ]

    def test_unspaced_expression(self):
        spaced, _ = compile_words("tmpx = selfx + 64\nEnd")
        packed, _ = compile_words("tmpx=selfx+64\nEnd")
        assert spaced == packed

    def test_leading_operator(self):
        words, diagnostics = compile_words("tmpx = - 5\nEnd")
        assert not diagnostics.had_error
        assert words[:3] == [opcode("tmpx"), 1, FUNCTION_BIT | set_data_bits(ScriptOperator.SUB) | 5]

    def test_string_operand_registers_message(self):
        messages = MessageTable()
        words, diagnostics = compile_words('tmpargument = "Hello there"\nEnd', messages=messages)
        assert not diagnostics.had_error
        assert words[2] == FUNCTION_BIT | 0
        assert messages.messages == ["Hello_there"]

    def test_idsz_operand(self):
        words, _ = compile_words("tmpargument = [BOOK]\nEnd")
        assert words[2] == FUNCTION_BIT | pack_idsz("BOOK")

    def test_nested_end_is_a_statement(self):
        words, diagnostics = compile_words("IfSpawned\n  End\nEnd")
        assert not diagnostics.had_error
        assert len(words) == 6
        assert words[2] == function_word("End", 1)

    def test_lines_after_end_ignored(self):
        words, diagnostics = compile_words("End\nNotAnOpcode")
        assert words == [END_VALUE, 2]
        assert len(diagnostics) == 0

    def test_result_is_frozen(self):
        script, _ = compile_source("End")
        with pytest.raises(ValueError):
            script.patch(0, 0)
        with pytest.raises(ValueError):
            script.emit(0)


class TestCompileErrors:
    """Error recovery tests; every compile must still finish."""

    def test_odd_indentation(self):
        words, diagnostics = compile_words("IfSpawned\n   DoNothing\nEnd")
        assert diagnostics.had_error
        assert diagnostics.of_type(IndentationError)
        assert get_data_bits(words[2]) == 1

    def test_too_deep_indentation_clamped(self):
        source = "IfSpawned\n" + " " * 32 + "DoNothing\nEnd"
        words, diagnostics = compile_words(source)
        assert diagnostics.had_error
        assert len(diagnostics.of_type(IndentationError)) == 1
        assert words[2] == function_word("DoNothing", 15)
        assert words[1] == 4

    def test_tab_indentation_warns(self):
        words, diagnostics = compile_words("IfSpawned\n\t\tDoNothing\nEnd")
        assert not diagnostics.had_error
        assert len(diagnostics.warnings) == 1
        assert words[2] == function_word("DoNothing", 1)

    def test_missing_assign(self):
        words, diagnostics = compile_words("tmpx 5\nEnd")
        assert diagnostics.of_type(GrammarError)
        assert words[:3] == [opcode("tmpx"), 1, FUNCTION_BIT | 5]

    def test_missing_operand(self):
        words, diagnostics = compile_words("tmpx = 5 +\nEnd")
        assert diagnostics.of_type(GrammarError)
        assert words[1] == 1

    def test_empty_assignment(self):
        words, diagnostics = compile_words("tmpx =\nEnd")
        assert diagnostics.of_type(GrammarError)
        assert words[:2] == [opcode("tmpx"), 0]

    def test_invalid_operand_skipped(self):
        words, diagnostics = compile_words("tmpx = 5 + IfSpawned + 3\nEnd")
        assert len(diagnostics.of_type(GrammarError)) == 1
        assert words[:4] == [
            opcode("tmpx"), 2,
            FUNCTION_BIT | 5,
            FUNCTION_BIT | set_data_bits(ScriptOperator.ADD) | 3,
        ]

    def test_missing_operator(self):
        words, diagnostics = compile_words("tmpx = 5 6\nEnd")
        assert len(diagnostics.of_type(GrammarError)) == 1
        assert words[1] == 1

    def test_constant_at_line_start(self):
        words, diagnostics = compile_words("5\nEnd")
        assert diagnostics.of_type(GrammarError)
        assert words == [END_VALUE, 2]

    def test_operator_at_line_start(self):
        words, diagnostics = compile_words("+ 5\nEnd")
        assert diagnostics.of_type(GrammarError)
        assert words == [END_VALUE, 2]

    def test_unknown_opcode_skips_line(self):
        words, diagnostics = compile_words("IfSpawned\n  Dance\n  DoNothing\nEnd")
        assert diagnostics.had_error
        assert len(diagnostics.of_type(TokenError)) == 1
        assert words[2] == function_word("DoNothing", 1)

    def test_diagnostic_line_numbers(self):
        _, diagnostics = compile_words("IfSpawned\n\n  Dance\nEnd")
        assert diagnostics.errors[0].line == 3
        assert diagnostics.errors[0].script_name == "test.txt"
        assert diagnostics.errors[0].level is Level.ERROR

    def test_all_errors_reported(self):
        _, diagnostics = compile_words("Dance\n   DoNothing\ntmpx 5\nEnd")
        assert diagnostics.of_type(TokenError)
        assert diagnostics.of_type(IndentationError)
        assert diagnostics.of_type(GrammarError)

    def test_instruction_limit(self):
        words, diagnostics = compile_words("DoNothing\n" * 10 + "End", max_instructions=6)
        assert len(words) == 6
        assert diagnostics.had_error
        assert len(diagnostics.of_type(CapacityError)) == 1

    def test_instruction_limit_inside_assignment(self):
        words, diagnostics = compile_words("tmpx = 1 + 2 + 3\nEnd", max_instructions=3)
        assert words == [opcode("tmpx"), 1, FUNCTION_BIT | 1]
        assert diagnostics.of_type(CapacityError)

    def test_operand_limit(self):
        expression = " + ".join(["1"] * 256)
        source = ("IfSpawned\n"
                  f"  tmpx = {expression}\n"
                  "  DoNothing\n"
                  "IfAttacked\n"
                  "  DoNothing\n"
                  "End\n")
        words, diagnostics = compile_words(source)

        assert diagnostics.had_error
        assert len(diagnostics.of_type(GrammarError)) == 1
        assert words[3] == COUNT_BITS
        assert words[259] == function_word("DoNothing", 1)
        assert words[1] == 261
        assert words[261] == function_word("IfAttacked")

    def test_operand_limit_exact(self):
        expression = " + ".join(["1"] * 255)
        words, diagnostics = compile_words(f"tmpx = {expression}\nEnd")
        assert not diagnostics.had_error
        assert words[1] == 255
        assert words[257] == END_VALUE

    def test_source_size_limit(self):
        words, diagnostics = compile_words("IfSpawned\nDoNothing\nEnd", max_source_size=10)
        assert diagnostics.of_type(CapacityError)
        assert words == [function_word("IfSpawned"), 2, END_VALUE, 4]

    def test_nul_ends_source(self):
        words, diagnostics = compile_words("DoNothing\n\0Dance\nEnd")
        assert diagnostics.of_type(LexError)
        assert words == [function_word("DoNothing"), 2, END_VALUE, 4]

    def test_raise_for_errors(self):
        _, diagnostics = compile_words("Dance\nEnd")
        with pytest.raises(CompileError):
            diagnostics.raise_for_errors()

    def test_raise_for_errors_ignores_warnings(self):
        _, diagnostics = compile_words('tmpargument = ""\nEnd')
        assert diagnostics.warnings
        diagnostics.raise_for_errors()

    def test_diagnostics_logged_at_debug(self, caplog):
        caplog.set_level(logging.DEBUG, logger="compiler")
        compile_words("Dance\nEnd")
        messages = [r.getMessage() for r in caplog.records if r.levelno == logging.DEBUG]
        assert "test.txt:1: error: unknown opcode `Dance`" in messages
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


class TestSourceFiles:
    """Script file reading tests."""

    def test_read_source_keeps_carriage_returns(self, tmp_path):
        path = tmp_path / "mac.txt"
        path.write_bytes(b"IfSpawned\r  DoNothing\rEnd\r")
        assert read_source(str(path)) == "IfSpawned\r  DoNothing\rEnd\r"

    def test_read_source_replaces_bad_bytes(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_bytes(b"tmpargument = \"\xff\"\nEnd\n")
        assert "\ufffd" in read_source(str(path))

    def test_compile_file(self, tmp_path):
        path = tmp_path / "guard.txt"
        path.write_bytes(b"IfSpawned\r\n  DoNothing\r\nEnd\r\n")
        script, diagnostics = compile_file(str(path))
        assert not diagnostics.had_error
        assert script.name == str(path)
        assert len(script) == 6


# =============================================================================
# Jump Resolver Tests
# =============================================================================

class TestJumpResolver:
    """Fail-jump address tests."""

    @pytest.mark.parametrize("nested", [0, 1, 3, 6])
    def test_jump_skips_nested_block(self, nested):
        body = "".join("  tmpx = 1" + " + 2" * k + "\n" for k in range(nested))
        source = "IfSpawned\n" + body + "  DoNothing\nIfAttacked\n  DoNothing\nEnd"
        words, diagnostics = compile_words(source)
        assert not diagnostics.had_error

        target = 2 + sum(3 + k for k in range(nested)) + 2
        assert words[1] == target
        assert words[target] == function_word("IfAttacked")

    def test_nested_blocks(self):
        source = (
            "IfSpawned\n"
            "  IfAttacked\n"
            "    DoNothing\n"
            "  IfBumped\n"
            "    DoNothing\n"
            "End\n"
        )
        words, _ = compile_words(source)
        jumps = {address: words[address + 1] for address in (0, 2, 4, 6, 8, 10)}
        assert jumps == {0: 10, 2: 6, 4: 6, 6: 10, 8: 10, 10: 12}

    def test_last_function_falls_through_to_end(self):
        script = ScriptInfo(instructions=[function_word("IfSpawned"), 0,
                                          function_word("DoNothing", 1), 0])
        resolve_jumps(script)
        assert script.instructions == [function_word("IfSpawned"), 4,
                                       function_word("DoNothing", 1), 4]

    def test_operand_count_clipped_to_eight_bits(self):
        script = ScriptInfo(instructions=[
            function_word("IfSpawned"), 0,
            set_data_bits(1) | opcode("tmpx"), 0x101, FUNCTION_BIT | 7,
            END_VALUE, 0,
        ])
        resolve_jumps(script)
        assert script[1] == 5
        assert script[6] == 7

    def test_truncated_assignment(self):
        script = ScriptInfo(instructions=[
            function_word("IfSpawned"), 0,
            set_data_bits(1) | opcode("tmpx"), 3, FUNCTION_BIT | 1,
        ])
        resolve_jumps(script)
        assert script[1] == 5

    def test_function_without_placeholder(self):
        script = ScriptInfo(instructions=[function_word("DoNothing")])
        resolve_jumps(script)
        assert script.instructions == [function_word("DoNothing")]


# =============================================================================
# Instruction Format Tests
# =============================================================================

class TestInstructionFormat:
    """Instruction word and container tests."""

    def test_encode(self):
        word = Instruction(value=53, data=15, function=True).encode()
        assert word == 0x80000000 | (15 << 27) | 53

    def test_decode(self):
        instruction = Instruction.decode(FUNCTION_BIT | set_data_bits(3) | 1234)
        assert instruction == Instruction(value=1234, data=3, function=True)

    def test_data_bits_clipped(self):
        assert get_data_bits(set_data_bits(0x1F)) == 0x0F
        assert set_data_bits(0x1F) & ~0x78000000 == 0

    def test_value_masked(self):
        assert Instruction(value=VALUE_BITS + 2).encode() == 1

    def test_serialize(self):
        script, _ = compile_source("IfSpawned\n  tmpx = 5\nEnd", "guard.txt")
        data = script.serialize()
        assert data[:4] == ScriptInfo.MAGIC

        loaded = ScriptInfo.deserialize(data)
        assert loaded.name == "guard.txt"
        assert loaded.instructions == script.instructions
        assert loaded.frozen

    def test_deserialize_rejects_bad_magic(self):
        with pytest.raises(ValueError):
            ScriptInfo.deserialize(b"XXXX\x01\x00\x00\x00")

    def test_emit_stops_at_limit(self):
        script = ScriptInfo(max_instructions=2)
        assert script.emit(1) == 0
        assert script.emit(2) == 1
        assert script.emit(3) is None
        assert script.instructions == [1, 2]

    def test_disassemble(self):
        script, _ = compile_source("IfSpawned\n  tmpx = selfx + 5\n  SetState\nEnd")
        text = script.disassemble()
        assert "IfSpawned -> 0008" in text
        assert "tmpx = selfx + 5" in text
        assert "SetState -> 0008" in text
        assert "End -> 0010" in text
