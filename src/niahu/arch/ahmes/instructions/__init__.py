# niahu/arch/ahmes/instructions/__init__.py
"""
Ahmes命令セット実装パッケージ。
"""
from niahu.transport.bus import MemoryBus
from niahu.core.snapshot import Operation
from niahu.arch.ahmes.state import AhmesState
from .maps import INSTRUCTION_TABLE, EXECUTE_MAP


def decode_opcode(opcode: int) -> Operation:
    return INSTRUCTION_TABLE.decode(opcode)


# @intent:responsibility デコードされたAhmes命令を実行します。未定義命令は何もしません。
def execute_instruction(operation: Operation, state: AhmesState, bus: MemoryBus) -> None:
    executor = EXECUTE_MAP.get(operation.mnemonic)
    if executor:
        executor(state, bus, operation)
