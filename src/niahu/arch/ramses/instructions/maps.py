# niahu/arch/ramses/instructions/maps.py
"""
オペコードと命令実装のマッピング定義。

上位ニブルが命令、ビット3..2がレジスタ、ビット1..0がアドレッシングモードです。
"""
from typing import Optional

from niahu.core.isa import InstrInfo, InstructionTable, OpcodePattern
from niahu.core.snapshot import Operation
from niahu.arch.ramses.state import Register
from niahu.arch.ramses.addressing import AddressingMode
from . import load
from . import alu
from . import control

NOP = 0x00
STR = 0x10
LDR = 0x20
ADD = 0x30
OR = 0x40
AND = 0x50
NOT = 0x60
SUB = 0x70
JMP = 0x80
JN = 0x90
JZ = 0xA0
JC = 0xB0
JSR = 0xC0
NEG = 0xD0
SHR = 0xE0
HLT = 0xF0

# レジスタ選択値3（どのレジスタも指さない）
NO_REGISTER = 0x0C


# @intent:responsibility レジスタ選択を持つ命令のうち、選択値3のオペコードを未定義として扱う命令テーブル。
class RamsesInstructionTable(InstructionTable):
    def _match(self, opcode: int) -> Optional[InstrInfo]:
        info = super()._match(opcode)
        if info is not None and info.register and (opcode & NO_REGISTER) == NO_REGISTER:
            return None
        return info

    # @intent:responsibility 逆アセンブル表示用に、ニーモニックとレジスタ名（例: "LDR B"）を返します。
    def describe(self, opcode: int) -> Optional[str]:
        info = self.lookup(opcode)
        if info is None:
            return None
        if info.register:
            return f"{info.mnemonic} {Register((opcode >> 2) & 0x03).name}"
        return info.mnemonic

    def decode(self, opcode: int) -> Operation:
        info = self.lookup(opcode)
        if info is None:
            return Operation(opcode=opcode, mnemonic="UNKNOWN")
        return Operation(
            opcode=opcode,
            mnemonic=info.mnemonic,
            has_operand=info.operand,
            register=Register((opcode >> 2) & 0x03) if info.register else None,
            mode=AddressingMode.from_opcode(opcode) if info.operand else None,
        )


INSTRUCTION_TABLE = RamsesInstructionTable([
    OpcodePattern(0xF0, NOP, InstrInfo("NOP")),
    OpcodePattern(0xF0, STR, InstrInfo("STR", operand=True, register=True)),
    OpcodePattern(0xF0, LDR, InstrInfo("LDR", operand=True, register=True)),
    OpcodePattern(0xF0, ADD, InstrInfo("ADD", operand=True, register=True)),
    OpcodePattern(0xF0, OR, InstrInfo("OR", operand=True, register=True)),
    OpcodePattern(0xF0, AND, InstrInfo("AND", operand=True, register=True)),
    OpcodePattern(0xF0, NOT, InstrInfo("NOT", register=True)),
    OpcodePattern(0xF0, SUB, InstrInfo("SUB", operand=True, register=True)),
    OpcodePattern(0xF0, JMP, InstrInfo("JMP", operand=True)),
    OpcodePattern(0xF0, JN, InstrInfo("JN", operand=True)),
    OpcodePattern(0xF0, JZ, InstrInfo("JZ", operand=True)),
    OpcodePattern(0xF0, JC, InstrInfo("JC", operand=True)),
    OpcodePattern(0xF0, JSR, InstrInfo("JSR", operand=True)),
    OpcodePattern(0xF0, NEG, InstrInfo("NEG", register=True)),
    OpcodePattern(0xF0, SHR, InstrInfo("SHR", register=True)),
    OpcodePattern(0xF0, HLT, InstrInfo("HLT")),
])

EXECUTE_MAP = {
    # Load/Store
    "LDR": load.execute_ldr,
    "STR": load.execute_str,

    # ALU
    "ADD": alu.execute_add,
    "SUB": alu.execute_sub,
    "OR": alu.execute_or,
    "AND": alu.execute_and,
    "NOT": alu.execute_not,
    "NEG": alu.execute_neg,
    "SHR": alu.execute_shr,

    # Control
    "NOP": control.execute_nop,
    "JMP": control.execute_jmp,
    "JN": control.execute_jn,
    "JZ": control.execute_jz,
    "JC": control.execute_jc,
    "JSR": control.execute_jsr,
    "HLT": control.execute_hlt,
}
