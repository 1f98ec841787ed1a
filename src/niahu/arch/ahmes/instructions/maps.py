# niahu/arch/ahmes/instructions/maps.py
"""
オペコードと命令実装のマッピング定義。

Ahmesのオペコードは3種類の粒度で照合されます:
上位ニブル（0xF0）、分岐系（0xFC）、シフト系（完全一致）。宣言順が優先順位です。
"""
from niahu.core.isa import InstrInfo, InstructionTable, OpcodePattern
from niahu.arch.neander.instructions import load as neander_load
from niahu.arch.neander.instructions import alu as neander_alu
from niahu.arch.neander.instructions import control as neander_control
from . import alu
from . import control

NOP = 0x00
STA = 0x10
LDA = 0x20
ADD = 0x30
OR = 0x40
AND = 0x50
NOT = 0x60
SUB = 0x70
JMP = 0x80
JN = 0x90
JP = 0x94
JV = 0x98
JNV = 0x9C
JZ = 0xA0
JNZ = 0xA4
JC = 0xB0
JNC = 0xB4
JB = 0xB8
JNB = 0xBC
SHR = 0xE0
SHL = 0xE1
ROR = 0xE2
ROL = 0xE3
HLT = 0xF0

INSTRUCTION_TABLE = InstructionTable([
    OpcodePattern(0xF0, NOP, InstrInfo("NOP")),
    OpcodePattern(0xF0, STA, InstrInfo("STA", operand=True)),
    OpcodePattern(0xF0, LDA, InstrInfo("LDA", operand=True)),
    OpcodePattern(0xF0, ADD, InstrInfo("ADD", operand=True)),
    OpcodePattern(0xF0, OR, InstrInfo("OR", operand=True)),
    OpcodePattern(0xF0, AND, InstrInfo("AND", operand=True)),
    OpcodePattern(0xF0, NOT, InstrInfo("NOT")),
    OpcodePattern(0xF0, SUB, InstrInfo("SUB", operand=True)),
    # Branches
    OpcodePattern(0xFC, JMP, InstrInfo("JMP", operand=True)),
    OpcodePattern(0xFC, JN, InstrInfo("JN", operand=True)),
    OpcodePattern(0xFC, JP, InstrInfo("JP", operand=True)),
    OpcodePattern(0xFC, JV, InstrInfo("JV", operand=True)),
    OpcodePattern(0xFC, JNV, InstrInfo("JNV", operand=True)),
    OpcodePattern(0xFC, JZ, InstrInfo("JZ", operand=True)),
    OpcodePattern(0xFC, JNZ, InstrInfo("JNZ", operand=True)),
    OpcodePattern(0xFC, JC, InstrInfo("JC", operand=True)),
    OpcodePattern(0xFC, JNC, InstrInfo("JNC", operand=True)),
    OpcodePattern(0xFC, JB, InstrInfo("JB", operand=True)),
    OpcodePattern(0xFC, JNB, InstrInfo("JNB", operand=True)),
    # Shifts
    OpcodePattern(0xFF, SHR, InstrInfo("SHR")),
    OpcodePattern(0xFF, SHL, InstrInfo("SHL")),
    OpcodePattern(0xFF, ROR, InstrInfo("ROR")),
    OpcodePattern(0xFF, ROL, InstrInfo("ROL")),
    OpcodePattern(0xF0, HLT, InstrInfo("HLT")),
])

EXECUTE_MAP = {
    # Load/Store
    "LDA": neander_load.execute_lda,
    "STA": neander_load.execute_sta,

    # ALU
    "ADD": alu.execute_add,
    "SUB": alu.execute_sub,
    "OR": neander_alu.execute_or,
    "AND": neander_alu.execute_and,
    "NOT": neander_alu.execute_not,
    "SHR": alu.execute_shr,
    "SHL": alu.execute_shl,
    "ROR": alu.execute_ror,
    "ROL": alu.execute_rol,

    # Control
    "NOP": neander_control.execute_nop,
    "JMP": neander_control.execute_jmp,
    "JN": neander_control.execute_jn,
    "JP": control.execute_jp,
    "JV": control.execute_jv,
    "JNV": control.execute_jnv,
    "JZ": neander_control.execute_jz,
    "JNZ": control.execute_jnz,
    "JC": control.execute_jc,
    "JNC": control.execute_jnc,
    "JB": control.execute_jb,
    "JNB": control.execute_jnb,
    "HLT": neander_control.execute_hlt,
}
