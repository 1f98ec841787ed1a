# niahu/arch/ramses/cpu.py
"""
Ramsesマシンエミュレーションの中心モジュール。
"""
from typing import Dict

from niahu.core.cpu import AbstractMachine
from niahu.core.isa import InstructionTable
from niahu.core.snapshot import Operation
from niahu.arch.ramses.state import RamsesState
from niahu.arch.ramses.instructions import decode_opcode, execute_instruction
from niahu.arch.ramses.instructions.maps import INSTRUCTION_TABLE


# @intent:responsibility Ramses（3本のレジスタと4種のアドレッシングモードを持つマシン）のエミュレーションを提供します。
class RamsesMachine(AbstractMachine):
    ARCHITECTURE = "ramses"
    MEMORY_MAGIC = bytes([0x03, 0x52, 0x4D, 0x53])
    STATE_MAGIC = bytes([0x04, 0x52, 0x4D, 0x53])

    def _create_initial_state(self) -> RamsesState:
        return RamsesState()

    @property
    def instruction_table(self) -> InstructionTable:
        return INSTRUCTION_TABLE

    def _decode(self, opcode: int) -> Operation:
        return decode_opcode(opcode)

    def _execute(self, operation: Operation) -> None:
        execute_instruction(operation, self._state, self._bus)

    def get_register_map(self) -> Dict[str, int]:
        s = self._state
        return {"ra": s.a, "rb": s.b, "rx": s.x, "pc": s.pc}

    def get_flag_state(self) -> Dict[str, bool]:
        s = self._state
        return {"n": s.negative, "z": s.zero, "c": s.carry}
