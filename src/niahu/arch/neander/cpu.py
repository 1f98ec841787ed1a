# niahu/arch/neander/cpu.py
"""
Neanderマシンエミュレーションの中心モジュール。
"""
from typing import Dict

from niahu.core.cpu import AbstractMachine
from niahu.core.isa import InstructionTable
from niahu.core.snapshot import Operation
from niahu.arch.neander.state import NeanderState
from niahu.arch.neander.instructions import decode_opcode, execute_instruction
from niahu.arch.neander.instructions.maps import INSTRUCTION_TABLE


# @intent:responsibility Neanderの具体的なエミュレーションロジック（デコード、実行）を提供します。
class NeanderMachine(AbstractMachine):
    """
    アキュムレータ1本とN/Zフラグだけを持つ、最も単純な教育用マシン。
    """
    ARCHITECTURE = "neander"
    MEMORY_MAGIC = bytes([0x03, 0x4E, 0x44, 0x52])
    STATE_MAGIC = bytes([0x04, 0x4E, 0x44, 0x52])

    def _create_initial_state(self) -> NeanderState:
        return NeanderState()

    @property
    def instruction_table(self) -> InstructionTable:
        return INSTRUCTION_TABLE

    def _decode(self, opcode: int) -> Operation:
        return decode_opcode(opcode)

    def _execute(self, operation: Operation) -> None:
        execute_instruction(operation, self._state, self._bus)

    def get_register_map(self) -> Dict[str, int]:
        s = self._state
        return {"ac": s.ac, "pc": s.pc}

    def get_flag_state(self) -> Dict[str, bool]:
        s = self._state
        return {"n": s.negative, "z": s.zero}
