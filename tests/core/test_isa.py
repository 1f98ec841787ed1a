# tests/core/test_isa.py
"""
niahu.core.isaモジュールの単体テスト。
"""
from niahu.core.isa import InstrInfo, InstructionTable, OpcodePattern

# @intent:test_suite パターンの優先順位と未定義オペコードの扱いを検証します。

TABLE = InstructionTable([
    OpcodePattern(0xFC, 0x94, InstrInfo("JP", operand=True)),
    OpcodePattern(0xF0, 0x90, InstrInfo("JN", operand=True)),
    OpcodePattern(0xFF, 0xE0, InstrInfo("SHR")),
])


def test_first_declared_pattern_wins():
    assert TABLE.describe(0x94) == "JP"
    assert TABLE.describe(0x97) == "JP"
    assert TABLE.describe(0x90) == "JN"
    assert TABLE.describe(0x98) == "JN"


def test_exact_match_pattern():
    assert TABLE.lookup(0xE0) == InstrInfo("SHR")
    assert TABLE.lookup(0xE1) is None


def test_decode_unknown_opcode():
    op = TABLE.decode(0x42)
    assert op.mnemonic == "UNKNOWN"
    assert not op.has_operand
    assert op.opcode_hex == "42"


def test_decode_carries_operand_shape():
    op = TABLE.decode(0x95)
    assert op.mnemonic == "JP"
    assert op.has_operand
