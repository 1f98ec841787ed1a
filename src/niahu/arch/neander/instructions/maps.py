# niahu/arch/neander/instructions/maps.py
"""
オペコードと命令実装のマッピング定義。
"""
from niahu.core.isa import InstrInfo, InstructionTable, OpcodePattern
from . import load
from . import alu
from . import control

NOP = 0x00
STA = 0x10
LDA = 0x20
ADD = 0x30
OR = 0x40
AND = 0x50
NOT = 0x60
JMP = 0x80
JN = 0x90
JZ = 0xA0
HLT = 0xF0

# @intent:map 上位ニブルから命令形状への対応表。下位ニブルは無視されます。
INSTRUCTION_TABLE = InstructionTable([
    OpcodePattern(0xF0, NOP, InstrInfo("NOP")),
    OpcodePattern(0xF0, STA, InstrInfo("STA", operand=True)),
    OpcodePattern(0xF0, LDA, InstrInfo("LDA", operand=True)),
    OpcodePattern(0xF0, ADD, InstrInfo("ADD", operand=True)),
    OpcodePattern(0xF0, OR, InstrInfo("OR", operand=True)),
    OpcodePattern(0xF0, AND, InstrInfo("AND", operand=True)),
    OpcodePattern(0xF0, NOT, InstrInfo("NOT")),
    OpcodePattern(0xF0, JMP, InstrInfo("JMP", operand=True)),
    OpcodePattern(0xF0, JN, InstrInfo("JN", operand=True)),
    OpcodePattern(0xF0, JZ, InstrInfo("JZ", operand=True)),
    OpcodePattern(0xF0, HLT, InstrInfo("HLT")),
])

# @intent:map ニーモニックから実行関数へのマッピングテーブル。
EXECUTE_MAP = {
    # Load/Store
    "LDA": load.execute_lda,
    "STA": load.execute_sta,

    # ALU
    "ADD": alu.execute_add,
    "OR": alu.execute_or,
    "AND": alu.execute_and,
    "NOT": alu.execute_not,

    # Control
    "NOP": control.execute_nop,
    "JMP": control.execute_jmp,
    "JN": control.execute_jn,
    "JZ": control.execute_jz,
    "HLT": control.execute_hlt,
}
