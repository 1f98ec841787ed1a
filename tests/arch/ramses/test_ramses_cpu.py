# tests/arch/ramses/test_ramses_cpu.py
"""
Ramsesの命令実装とプログラム実行の単体テスト。
"""
import pytest

from niahu.arch.ramses import RamsesMachine
from niahu.arch.ramses.state import Register
from niahu.arch.ramses.addressing import AddressingMode
from niahu.arch.ramses.instructions import decode_opcode
from niahu.arch.ramses.instructions.maps import (
    INSTRUCTION_TABLE, NOP, STR, LDR, ADD, OR, AND, NOT, SUB, JMP, JN, JZ, JC,
    JSR, NEG, SHR, HLT,
)

A, B, X = Register.A, Register.B, Register.X
DIR, IND, IMM, IDX = (AddressingMode.DIRECT, AddressingMode.INDIRECT,
                      AddressingMode.IMMEDIATE, AddressingMode.INDEXED)


def op(code, register=A, mode=DIR):
    return code | (register << 2) | mode


def load_program(machine, program, data=None):
    for offset, byte in enumerate(program):
        machine.write_raw(offset, byte)
    for address, value in (data or {}).items():
        machine.write_raw(address, value)


@pytest.fixture
def machine() -> RamsesMachine:
    return RamsesMachine()


# @intent:test_suite レジスタ選択・アドレッシングモードのデコードを検証します。
class TestRamsesDecode:
    def test_decode_register_and_mode(self):
        operation = decode_opcode(op(LDR, B, IDX))
        assert operation.mnemonic == "LDR"
        assert operation.has_operand
        assert operation.register == Register.B
        assert operation.mode == AddressingMode.INDEXED

    def test_register_only_instruction_has_no_mode(self):
        operation = decode_opcode(op(NEG, X))
        assert operation.register == Register.X
        assert operation.mode is None
        assert not operation.has_operand

    # @intent:test_case_no_register レジスタ選択値3の命令は未定義として扱われます。
    @pytest.mark.parametrize("opcode", [0x1C, 0x2D, 0x3E, 0x6C, 0x7F, 0xDC, 0xEC])
    def test_register_selector_three_is_unknown(self, opcode):
        assert decode_opcode(opcode).mnemonic == "UNKNOWN"
        assert INSTRUCTION_TABLE.describe(opcode) is None

    def test_selector_bits_ignored_without_register(self):
        assert decode_opcode(0x8C).mnemonic == "JMP"
        assert decode_opcode(0x0F).mnemonic == "NOP"
        assert decode_opcode(0xFC).mnemonic == "HLT"

    def test_describe_appends_register_name(self):
        assert INSTRUCTION_TABLE.describe(op(LDR, B, IMM)) == "LDR B"
        assert INSTRUCTION_TABLE.describe(op(NOT, X)) == "NOT X"
        assert INSTRUCTION_TABLE.describe(op(JSR, mode=IND)) == "JSR"

    def test_unknown_opcode_consumes_no_operand(self, machine):
        load_program(machine, [0x2C, HLT])
        machine.execute()
        assert machine.cycle_count == 2
        assert machine.access_count == 2


class TestRamsesRegisters:
    # @intent:test_case_flag_on_read レジスタの読み出しでもN/Zが更新されます。
    def test_store_updates_flags_from_register(self, machine):
        state = machine.get_state()
        state.b = 0x80
        load_program(machine, [op(STR, B), 0x90, HLT])
        machine.execute()
        assert machine.peek(0x90) == 0x80
        assert state.negative and not state.zero

    def test_load_updates_flags(self, machine):
        load_program(machine, [op(LDR, X, IMM), 0x00, HLT])
        machine.get_state().x = 5
        machine.execute()
        state = machine.get_state()
        assert state.x == 0
        assert state.zero and not state.negative

    def test_add_sets_carry_on_wrap(self, machine):
        load_program(machine, [op(LDR, A, IMM), 0xF0, op(ADD, A, IMM), 0x20, HLT])
        machine.execute()
        state = machine.get_state()
        assert state.a == 0x10
        assert state.carry

    # @intent:test_case_sub_carry SUBのCは「借りが発生しなかった」ことを表します。
    @pytest.mark.parametrize("a, b, result, carry", [
        (5, 3, 2, True),
        (3, 5, 0xFE, False),
        (7, 7, 0, True),
    ])
    def test_sub_carry_is_not_borrow(self, machine, a, b, result, carry):
        load_program(machine, [op(LDR, B, IMM), a, op(SUB, B, IMM), b, HLT])
        machine.execute()
        state = machine.get_state()
        assert state.b == result
        assert state.carry is carry
        assert state.zero is (result == 0)
        assert state.negative is (result >= 0x80)

    # @intent:test_case_neg NEGのCはレジスタが0だった場合に立ちます（SUBとは異なる規則）。
    @pytest.mark.parametrize("value, result, carry", [(0, 0, True), (1, 0xFF, False), (0x80, 0x80, False)])
    def test_neg(self, machine, value, result, carry):
        machine.get_state().a = value
        load_program(machine, [op(NEG, A), HLT])
        machine.execute()
        assert machine.get_state().a == result
        assert machine.get_state().carry is carry

    def test_shr(self, machine):
        machine.get_state().x = 0x03
        load_program(machine, [op(SHR, X), HLT])
        machine.execute()
        assert machine.get_state().x == 0x01
        assert machine.get_state().carry

    def test_logic_leaves_carry(self, machine):
        state = machine.get_state()
        state.carry = True
        state.a = 0x0F
        load_program(machine, [op(OR, A, IMM), 0xF0, op(AND, A, IMM), 0x3C, op(NOT, A), HLT])
        machine.execute()
        assert state.a == 0xC3
        assert state.carry
        assert state.negative

    def test_register_and_flag_maps(self, machine):
        state = machine.get_state()
        state.a, state.b, state.x = 1, 2, 3
        assert machine.get_register_map() == {"ra": 1, "rb": 2, "rx": 3, "pc": 0}
        assert machine.get_flag_state() == {"n": False, "z": False, "c": False}


class TestRamsesControl:
    @pytest.mark.parametrize("opcode, flag", [(JN, "negative"), (JZ, "zero"), (JC, "carry")])
    @pytest.mark.parametrize("value", [True, False])
    def test_conditional_branch(self, machine, opcode, flag, value):
        setattr(machine.get_state(), flag, value)
        load_program(machine, [opcode, 0x40])
        machine.cycle()
        assert machine.get_state().pc == (0x40 if value else 0x02)

    # @intent:test_case_target_always_resolved 分岐しない場合も間接モードの分岐先は読み出されます。
    def test_indirect_target_resolved_when_not_taken(self, machine):
        load_program(machine, [op(JZ, mode=IND), 0x80])
        machine.cycle()
        assert machine.get_state().pc == 0x02
        assert machine.access_count == 3

    @pytest.mark.parametrize("mode, expected", [(DIR, 0x10), (IND, 0x33), (IMM, 0x10), (IDX, 0x15)])
    def test_jump_target_modes(self, machine, mode, expected):
        machine.get_state().x = 0x05
        load_program(machine, [op(JMP, mode=mode), 0x10], {0x10: 0x33})
        machine.cycle()
        assert machine.get_state().pc == expected

    def test_indexed_jump_does_not_touch_flags(self, machine):
        state = machine.get_state()
        state.negative, state.zero, state.x = True, False, 0
        load_program(machine, [op(JMP, mode=IDX), 0x10])
        machine.cycle()
        assert state.negative and not state.zero

    # @intent:test_case_jsr JSRは戻り番地を飛び先に書き込み、その次のバイトから実行を続けます。
    def test_jsr_stores_return_address(self, machine):
        load_program(machine, [JSR, 0x40])
        machine.cycle()
        assert machine.peek(0x40) == 0x02
        assert machine.get_state().pc == 0x41
        assert machine.access_count == 3

    def test_subroutine_returns_through_indirect_jump(self, machine):
        load_program(machine, [JSR, 0x40, HLT])
        for offset, byte in enumerate([0x00, op(LDR, A, IMM), 0x07, op(JMP, mode=IND), 0x40]):
            machine.write_raw(0x40 + offset, byte)
        machine.execute()
        assert machine.get_state().a == 0x07
        assert machine.get_state().pc == 0x03


class TestRamsesPrograms:
    # @intent:test_case_string_size ポインタが指す0終端文字列の長さを、インデックスモードで数えます。
    def test_string_length(self, machine):
        load_program(
            machine,
            [
                NOP,
                op(LDR, A, IMM), 0,
                op(LDR, X, DIR), 0x80,
                op(LDR, B, IDX), 0,
                op(JZ), 0x0F,
                op(ADD, X, IMM), 1,
                op(ADD, A, IMM), 1,
                op(JMP), 0x05,
                op(STR, A, DIR), 0x81,
                HLT,
            ],
            {0x80: 0xA0, 0xA0: 100, 0xA1: 99, 0xA2: 98, 0xA3: 97, 0xA4: 0},
        )
        machine.execute()
        assert machine.peek(0x81) == 4

    def test_multiplication_by_repeated_addition(self, machine):
        load_program(
            machine,
            [
                LDR, 0x85, STR, 0x82, LDR, 0x81, STR, 0x83,
                JZ, 0x18, ADD, 0x84, STR, 0x83, LDR, 0x80,
                ADD, 0x82, STR, 0x82, LDR, 0x83, JMP, 0x08,
                HLT,
            ],
            {0x80: 5, 0x81: 11, 0x84: 255, 0x85: 0},
        )
        machine.execute()
        assert machine.peek(0x82) == 55
        assert machine.cycle_count == 94
        assert machine.access_count == 257
