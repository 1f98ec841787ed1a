# niahu/arch/neander/instructions/__init__.py
"""
Neander命令セット実装パッケージ。
"""
from niahu.transport.bus import MemoryBus
from niahu.core.snapshot import Operation
from niahu.arch.neander.state import NeanderState
from .maps import INSTRUCTION_TABLE, EXECUTE_MAP


# @intent:responsibility Neanderのオペコードをデコードします。
def decode_opcode(opcode: int) -> Operation:
    return INSTRUCTION_TABLE.decode(opcode)


# @intent:responsibility デコードされたNeander命令を実行します。未定義命令は何もしません。
def execute_instruction(operation: Operation, state: NeanderState, bus: MemoryBus) -> None:
    executor = EXECUTE_MAP.get(operation.mnemonic)
    if executor:
        executor(state, bus, operation)
