# tests/display/test_code_view.py
"""
メモリ表示（データ・コード）とレジスタ表示の単体テスト。
"""
import pytest

from niahu.arch.neander import NeanderMachine
from niahu.arch.ramses import RamsesMachine
from niahu.display.code_view import format_code
from niahu.display.data_view import format_data, normalize_bounds
from niahu.display.register_view import format_registers, format_stats


@pytest.fixture
def neander() -> NeanderMachine:
    machine = NeanderMachine()
    for address, byte in enumerate([0x20, 0x81, 0x60, 0x30, 0x83, 0xF0]):
        machine.write_raw(address, byte)
    machine.write_raw(0x81, 0x03)
    return machine


# @intent:test_suite 表示系はpeekだけを使い、統計を変化させずに整形することを検証します。
class TestDataView:
    def test_hex_lines(self, neander):
        assert format_data(neander, 0x80, 0x82) == ["80 = 00", "81 = 03", "82 = 00"]

    def test_decimal_lines(self, neander):
        assert format_data(neander, 129, 129, hex_mode=False) == ["129 = 003"]

    def test_bounds_in_either_order(self, neander):
        assert format_data(neander, 0x82, 0x80) == format_data(neander, 0x80, 0x82)
        assert normalize_bounds(9, 3) == (3, 9)

    def test_full_range(self, neander):
        lines = format_data(neander, 0x00, 0xFF)
        assert len(lines) == 256
        assert lines[-1] == "FF = 00"


class TestCodeView:
    # @intent:test_case_operand_skip オペランドバイトにはニーモニックを付けません。
    def test_operand_bytes_have_no_mnemonic(self, neander):
        assert format_code(neander, 0x00, 0x06) == [
            "00 = 20  LDA",
            "01 = 81",
            "02 = 60  NOT",
            "03 = 30  ADD",
            "04 = 83",
            "05 = F0  HLT",
            "06 = 00  NOP",
        ]

    def test_decimal(self, neander):
        assert format_code(neander, 0, 1, hex_mode=False) == ["000 = 032  LDA", "001 = 129"]

    # @intent:test_case_misaligned 命令の途中から始まる範囲は補正せず、そのまま整形します。
    def test_misaligned_start(self, neander):
        assert format_code(neander, 0x01, 0x02) == ["01 = 81  JMP", "02 = 60"]

    def test_unknown_opcode_has_no_mnemonic(self):
        machine = NeanderMachine()
        machine.write_raw(0x00, 0x70)
        machine.write_raw(0x01, 0x20)
        assert format_code(machine, 0, 1) == ["00 = 70", "01 = 20  LDA"]

    def test_ramses_register_names(self):
        machine = RamsesMachine()
        machine.write_raw(0x00, 0x26)  # LDR B, #
        machine.write_raw(0x01, 0x10)
        machine.write_raw(0x02, 0x68)  # NOT X
        machine.write_raw(0x03, 0x2C)  # selector 3
        assert format_code(machine, 0, 3) == [
            "00 = 26  LDR B", "01 = 10", "02 = 68  NOT X", "03 = 2C",
        ]

    def test_display_does_not_count_accesses(self, neander):
        neander.read(0x00)
        format_code(neander, 0x00, 0xFF)
        format_data(neander, 0x00, 0xFF)
        format_registers(neander)
        assert neander.access_count == 1

    def test_disassemble_delegates(self, neander):
        assert neander.disassemble(0x00, 0x01) == ["00 = 20  LDA", "01 = 81"]


class TestRegisterView:
    def test_neander_registers(self, neander):
        neander.execute()
        assert format_registers(neander) == ["ac = FC", "pc = 06", "n  = 01", "z  = 00"]

    def test_ramses_registers_decimal(self):
        machine = RamsesMachine()
        machine.get_state().b = 200
        machine.get_state().carry = True
        assert format_registers(machine, hex_mode=False) == [
            "ra = 000", "rb = 200", "rx = 000", "pc = 000",
            "n  = 000", "z  = 000", "c  = 001",
        ]

    def test_stats(self, neander):
        neander.execute()
        assert format_stats(neander) == ["cycles = 4", "accesses = 8"]
