# niahu/arch/ahmes/cpu.py
"""
Ahmesマシンエミュレーションの中心モジュール。
"""
from typing import Dict

from niahu.core.cpu import AbstractMachine
from niahu.core.isa import InstructionTable
from niahu.core.snapshot import Operation
from niahu.arch.ahmes.state import AhmesState
from niahu.arch.ahmes.instructions import decode_opcode, execute_instruction
from niahu.arch.ahmes.instructions.maps import INSTRUCTION_TABLE


# @intent:responsibility Ahmes（Neanderに減算・シフト・条件分岐を加えたマシン）のエミュレーションを提供します。
class AhmesMachine(AbstractMachine):
    ARCHITECTURE = "ahmes"
    MEMORY_MAGIC = bytes([0x03, 0x41, 0x48, 0x4D])
    STATE_MAGIC = bytes([0x04, 0x41, 0x48, 0x4D])

    def _create_initial_state(self) -> AhmesState:
        return AhmesState()

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
        return {"n": s.negative, "z": s.zero, "v": s.overflow, "c": s.carry, "b": s.borrow}
