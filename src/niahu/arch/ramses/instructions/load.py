# niahu/arch/ramses/instructions/load.py
"""
ロード/ストア命令の実装。
"""
from niahu.core.snapshot import Operation
from niahu.transport.bus import MemoryBus
from niahu.arch.ramses.state import RamsesState
from .common import register_of, fetch_value, fetch_address


# @intent:responsibility LDR r, am: 実効値をレジスタに格納します。
def execute_ldr(state: RamsesState, bus: MemoryBus, op: Operation) -> None:
    value = fetch_value(state, bus, op)
    state.write_register(register_of(op), value)


# @intent:responsibility STR r, am: レジスタの値を実効アドレスに書き込みます。読み出しによりN/Zも更新されます。
def execute_str(state: RamsesState, bus: MemoryBus, op: Operation) -> None:
    addr = fetch_address(state, bus, op)
    bus.write(addr, state.read_register(register_of(op)))
